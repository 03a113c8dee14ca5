"""Deleting a whole heading when all of its content is selected."""

import logging
from typing import Any, Callable

from PySide6.QtCore import Qt

from richdoc import (
    RichDocChange, RichDocDeleteChange, RichDocEditorState, RichDocHeadingNode, RichDocPositionError
)


class HeadingDeletionKeyHandler:
    """
    Turns a deletion key press over a fully selected heading into the removal
    of the whole heading block.
    """

    DELETION_KEYS = (Qt.Key.Key_Backspace, Qt.Key.Key_Delete)

    def __init__(self) -> None:
        """Initialize the key handler."""
        self._logger = logging.getLogger("HeadingDeletionKeyHandler")

    def handle_key(
        self,
        key: Qt.Key,
        state: RichDocEditorState,
        dispatch: Callable[[RichDocChange], Any]
    ) -> bool:
        """
        Handle a key press.

        Args:
            key: The key that was pressed
            state: The current editor state
            dispatch: Callable that applies a change to the document

        Returns:
            True if the key press was handled and no other handler should run
        """
        if key not in self.DELETION_KEYS:
            return False

        selection = state.selection
        if selection.empty:
            return False

        try:
            from_resolved = state.doc.resolve(selection.from_pos)
            to_resolved = state.doc.resolve(selection.to_pos)

        except RichDocPositionError as e:
            self._logger.warning("Selection does not fit the document, ignoring key: %s", e)
            return False

        heading = from_resolved.parent
        if not isinstance(heading, RichDocHeadingNode):
            return False

        # Both ends must be inside the same heading
        if to_resolved.depth != from_resolved.depth or to_resolved.start() != from_resolved.start():
            return False

        if from_resolved.parent_offset != 0 or to_resolved.parent_offset != heading.content_size:
            return False

        dispatch(RichDocDeleteChange(from_resolved.before(), to_resolved.after()))
        return True

    def handle_key_event(
        self,
        event: Any,
        state: RichDocEditorState,
        dispatch: Callable[[RichDocChange], Any]
    ) -> bool:
        """
        Handle a key event such as a QKeyEvent.

        Args:
            event: The key event; only its key() is used
            state: The current editor state
            dispatch: Callable that applies a change to the document

        Returns:
            True if the key press was handled and no other handler should run
        """
        return self.handle_key(event.key(), state, dispatch)
