"""Text selections over a document."""

from dataclasses import dataclass

from richdoc.richdoc_change import RichDocChange
from richdoc.richdoc_node import RichDocDocumentNode


@dataclass(frozen=True)
class RichDocTextSelection:
    """
    A text selection between an anchor (where it started) and a head (where
    the cursor is). A collapsed selection is a plain cursor.
    """

    anchor: int
    head: int

    @classmethod
    def cursor(cls, pos: int) -> "RichDocTextSelection":
        """
        Create a collapsed selection.

        Args:
            pos: Cursor position

        Returns:
            The selection
        """
        return cls(pos, pos)

    @property
    def from_pos(self) -> int:
        """The lower end of the selection."""
        return min(self.anchor, self.head)

    @property
    def to_pos(self) -> int:
        """The upper end of the selection."""
        return max(self.anchor, self.head)

    @property
    def empty(self) -> bool:
        """True if the selection is collapsed."""
        return self.anchor == self.head

    def map_through(self, change: RichDocChange) -> "RichDocTextSelection":
        """
        Map the selection through a change.

        Args:
            change: The change applied to the document

        Returns:
            The selection in the changed document
        """
        return RichDocTextSelection(change.map(self.anchor), change.map(self.head))

    def clamp(self, doc: RichDocDocumentNode) -> "RichDocTextSelection":
        """
        Constrain the selection to the bounds of a document.

        Args:
            doc: The document the selection must fit in

        Returns:
            The clamped selection
        """
        size = doc.content_size
        return RichDocTextSelection(max(0, min(self.anchor, size)), max(0, min(self.head, size)))
