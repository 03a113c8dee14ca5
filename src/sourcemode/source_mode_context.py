"""Rendering context holding the source mode flag for one editor instance."""

from PySide6.QtCore import QObject, Signal


class SourceModeContext(QObject):
    """
    Holds whether source syntax is shown for one editor instance.

    The context is created by the host and passed to everything that needs to
    read the flag, so several editors can run side by side with different
    modes.

    Attributes:
        mode_changed (Signal): Emitted with the new flag whenever it changes
    """

    mode_changed = Signal(bool)

    def __init__(self, source_mode: bool = False, parent: QObject | None = None) -> None:
        """
        Initialize the context.

        Args:
            source_mode: Initial value of the flag
            parent: Optional parent QObject
        """
        super().__init__(parent)
        self._source_mode = source_mode

    def is_source_mode(self) -> bool:
        """
        Check whether source syntax is shown.

        Returns:
            The current flag
        """
        return self._source_mode

    def set_source_mode(self, enabled: bool) -> None:
        """
        Set whether source syntax is shown.

        Args:
            enabled: The new flag
        """
        if enabled == self._source_mode:
            return

        self._source_mode = enabled
        self.mode_changed.emit(enabled)
