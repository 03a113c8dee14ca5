"""
Editor host adapter tying the document state to the source mode overlay and
heading node views.

After every state transition, and after every change of the mode flag, the
editor recomputes the overlay and reconciles its live heading views: each
view is asked to patch itself with its heading's new node, and views that
cannot be patched are destroyed and created afresh.
"""

import logging
from typing import Any, Iterable, List, Tuple

from PySide6.QtCore import QObject, Qt, Signal

from richdoc import (
    RichDocChange, RichDocChangeError, RichDocDocumentNode, RichDocEditorState, RichDocHeadingNode,
    RichDocPositionError, RichDocTextSelection
)

from sourcemode.heading_key_handler import HeadingDeletionKeyHandler
from sourcemode.heading_node_view import HeadingNodeView, NodeViewRecreate, create_node_view_factory
from sourcemode.source_mode_context import SourceModeContext
from sourcemode.source_mode_emitter import compute_overlay
from sourcemode.source_mode_exceptions import SourceModeError
from sourcemode.source_mode_settings import SourceModeSettings
from sourcemode.source_mode_types import SourceModeOverlay


class SourceModeEditor(QObject):
    """
    One editor instance: document state, overlay and heading views.

    Attributes:
        state_changed (Signal): Emitted after the editor state changes
        overlay_changed (Signal): Emitted after the overlay and views are refreshed
    """

    state_changed = Signal()
    overlay_changed = Signal()

    def __init__(
        self,
        doc: RichDocDocumentNode,
        context: SourceModeContext | None = None,
        settings: SourceModeSettings | None = None,
        parent: QObject | None = None
    ) -> None:
        """
        Initialize the editor.

        Args:
            doc: The initial document
            context: Rendering context; a new one is created from the settings if omitted
            settings: Source mode settings; defaults are used if omitted
            parent: Optional parent QObject
        """
        super().__init__(parent)
        self._logger = logging.getLogger("SourceModeEditor")
        self._settings = settings or SourceModeSettings.create_default()
        self._context = context or SourceModeContext(self._settings.source_mode)
        self._state = RichDocEditorState(doc)
        self._overlay = SourceModeOverlay.EMPTY
        self._heading_views: List[HeadingNodeView] = []
        self._key_handler = HeadingDeletionKeyHandler()
        self._disposed = False

        factory = create_node_view_factory(RichDocHeadingNode.kind, self._context)
        if factory is None:
            raise SourceModeError(
                "No node view factory for headings",
                {'kind': RichDocHeadingNode.kind}
            )

        self._heading_view_factory = factory

        self._context.mode_changed.connect(self._on_mode_changed)
        self._refresh()

    @property
    def state(self) -> RichDocEditorState:
        """The current editor state."""
        return self._state

    @property
    def doc(self) -> RichDocDocumentNode:
        """The current document snapshot."""
        return self._state.doc

    @property
    def context(self) -> SourceModeContext:
        """The rendering context."""
        return self._context

    @property
    def settings(self) -> SourceModeSettings:
        """The source mode settings."""
        return self._settings

    @property
    def overlay(self) -> SourceModeOverlay:
        """The overlay for the current document and mode."""
        return self._overlay

    @property
    def heading_views(self) -> Tuple[HeadingNodeView, ...]:
        """Live heading views, in document order."""
        return tuple(self._heading_views)

    @property
    def is_disposed(self) -> bool:
        """True once the editor has been disposed."""
        return self._disposed

    def dispatch(self, change: RichDocChange) -> bool:
        """
        Apply a change to the document.

        Args:
            change: The change to apply

        Returns:
            True if the change was applied, False if it was aborted
        """
        return self.dispatch_changes([change])

    def dispatch_changes(self, changes: Iterable[RichDocChange]) -> bool:
        """
        Apply a sequence of changes as one state transition.

        Either all changes apply or none do.

        Args:
            changes: The changes, each relative to the document left by the previous one

        Returns:
            True if the changes were applied, False if they were aborted
        """
        if self._disposed:
            self._logger.warning("Change dispatched to a disposed editor, ignoring")
            return False

        state = self._state
        try:
            for change in changes:
                state = state.apply(change)

        except (RichDocPositionError, RichDocChangeError) as e:
            self._logger.warning("Change aborted: %s", e)
            return False

        if state is self._state:
            return True

        self._state = state
        self.state_changed.emit()
        self._refresh()
        return True

    def set_selection(self, selection: RichDocTextSelection) -> None:
        """
        Set the selection.

        Args:
            selection: The new selection; it is clamped to the document
        """
        if self._disposed:
            self._logger.warning("Selection set on a disposed editor, ignoring")
            return

        self._state = self._state.with_selection(selection)
        self.state_changed.emit()

    def handle_key(self, key: Qt.Key) -> bool:
        """
        Offer a key press to the editor's key handlers.

        Args:
            key: The key that was pressed

        Returns:
            True if the key press was handled and default handling must not run
        """
        if self._disposed:
            return False

        return self._key_handler.handle_key(key, self._state, self.dispatch)

    def handle_key_event(self, event: Any) -> bool:
        """
        Offer a key event, such as a QKeyEvent, to the editor's key handlers.

        Args:
            event: The key event

        Returns:
            True if the key press was handled and default handling must not run
        """
        return self.handle_key(event.key())

    def dispose(self) -> None:
        """Destroy all views and stop following the rendering context."""
        if self._disposed:
            return

        self._context.mode_changed.disconnect(self._on_mode_changed)
        for view in self._heading_views:
            view.destroy()

        self._heading_views = []
        self._overlay = SourceModeOverlay.EMPTY
        self._disposed = True

    def _on_mode_changed(self, enabled: bool) -> None:
        self._logger.debug("Source mode %s", "enabled" if enabled else "disabled")
        self._refresh()

    def _refresh(self) -> None:
        source_mode = self._context.is_source_mode()

        # A heading whose prefix is folded into its text needs no prefix decoration
        self._overlay = compute_overlay(
            self._state.doc,
            source_mode,
            fold_heading_prefix=self._settings.fold_heading_prefix
        )
        self._reconcile_heading_views()
        self.overlay_changed.emit()

    def _reconcile_heading_views(self) -> None:
        headings = [node for node, _pos in self._state.doc.descendants() if isinstance(node, RichDocHeadingNode)]

        views: List[HeadingNodeView] = []
        for index, heading in enumerate(headings):
            if index >= len(self._heading_views):
                views.append(self._heading_view_factory(heading))
                continue

            view = self._heading_views[index]
            result = view.update(heading)
            if isinstance(result, NodeViewRecreate):
                self._logger.debug("Recreating heading view %d: %s", index, result.reason)
                view.destroy()
                view = self._heading_view_factory(heading)

            views.append(view)

        for view in self._heading_views[len(headings):]:
            view.destroy()

        self._heading_views = views
