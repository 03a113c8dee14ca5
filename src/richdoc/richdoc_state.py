"""Immutable editor state snapshots."""

from dataclasses import dataclass, field

from richdoc.richdoc_change import RichDocChange
from richdoc.richdoc_node import RichDocDocumentNode
from richdoc.richdoc_selection import RichDocTextSelection


@dataclass(frozen=True)
class RichDocEditorState:
    """
    A document snapshot together with its selection and version stamp.

    Positions are only meaningful against the document of the same state.
    """

    doc: RichDocDocumentNode
    selection: RichDocTextSelection = field(default_factory=lambda: RichDocTextSelection.cursor(0))
    version: int = 0

    def apply(self, change: RichDocChange) -> "RichDocEditorState":
        """
        Apply a change, producing the next state.

        Args:
            change: The change to apply

        Returns:
            The new state, with its version incremented and the selection mapped

        Raises:
            RichDocPositionError: If the change targets positions outside the document
            RichDocChangeError: If the change is not valid for the document's structure
        """
        new_doc = change.apply(self.doc)
        selection = self.selection.map_through(change).clamp(new_doc)
        return RichDocEditorState(new_doc, selection, self.version + 1)

    def with_selection(self, selection: RichDocTextSelection) -> "RichDocEditorState":
        """
        Replace the selection, keeping the document and version.

        Args:
            selection: The new selection

        Returns:
            The new state
        """
        return RichDocEditorState(self.doc, selection.clamp(self.doc), self.version)
