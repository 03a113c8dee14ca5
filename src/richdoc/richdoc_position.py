"""Resolved document positions."""

from typing import TYPE_CHECKING, List, Tuple

from richdoc.richdoc_exceptions import RichDocPositionError

if TYPE_CHECKING:
    from richdoc.richdoc_node import RichDocNode


class RichDocResolvedPosition:
    """
    A position resolved against a specific document.

    Depth 0 is the document itself; each deeper level is the ancestor block
    that directly contains the position at that depth. The deepest one is the
    position's parent.
    """

    def __init__(self, pos: int, path: List[Tuple["RichDocNode", int]]) -> None:
        """
        Initialize a resolved position.

        Args:
            pos: The absolute position
            path: (ancestor, content start) pairs from the document downwards
        """
        self.pos = pos
        self._path = path

    @classmethod
    def resolve(cls, doc: "RichDocNode", pos: int) -> "RichDocResolvedPosition":
        """
        Resolve a position against a document.

        Args:
            doc: The document node
            pos: The absolute position

        Returns:
            The resolved position

        Raises:
            RichDocPositionError: If the position lies outside the document
        """
        if pos < 0 or pos > doc.content_size:
            raise RichDocPositionError(
                f"Position {pos} out of range",
                {'position': pos, 'document_size': doc.content_size}
            )

        path: List[Tuple[RichDocNode, int]] = [(doc, 0)]
        node = doc
        start = 0
        while True:
            descended = False
            for child, child_pos in node.iter_children(start):
                if child_pos >= pos:
                    break

                # Only a position strictly inside a non-leaf block belongs to that block
                if pos < child_pos + child.node_size and not child.is_leaf and not child.is_text:
                    node = child
                    start = child_pos + 1
                    path.append((node, start))
                    descended = True
                    break

            if not descended:
                break

        return cls(pos, path)

    @property
    def depth(self) -> int:
        """Depth of the parent node (0 for positions directly in the document)."""
        return len(self._path) - 1

    @property
    def parent(self) -> "RichDocNode":
        """The innermost node containing this position."""
        return self._path[-1][0]

    @property
    def parent_offset(self) -> int:
        """Offset of this position within its parent's content."""
        return self.pos - self._path[-1][1]

    def _depth(self, depth: int | None) -> int:
        if depth is None:
            return self.depth

        if depth < 0 or depth > self.depth:
            raise RichDocPositionError(
                f"Depth {depth} out of range",
                {'position': self.pos, 'depth': depth, 'max_depth': self.depth}
            )

        return depth

    def node(self, depth: int | None = None) -> "RichDocNode":
        """
        Get the ancestor node at the given depth.

        Args:
            depth: The depth, defaulting to the parent's depth

        Returns:
            The ancestor node
        """
        return self._path[self._depth(depth)][0]

    def start(self, depth: int | None = None) -> int:
        """
        Get the position at which the ancestor's content starts.

        Args:
            depth: The depth, defaulting to the parent's depth

        Returns:
            The content start position
        """
        return self._path[self._depth(depth)][1]

    def end(self, depth: int | None = None) -> int:
        """
        Get the position at which the ancestor's content ends.

        Args:
            depth: The depth, defaulting to the parent's depth

        Returns:
            The content end position
        """
        depth = self._depth(depth)
        node, start = self._path[depth]
        return start + node.content_size

    def before(self, depth: int | None = None) -> int:
        """
        Get the position directly before the ancestor node.

        Args:
            depth: The depth, defaulting to the parent's depth

        Returns:
            The position before the ancestor

        Raises:
            RichDocPositionError: If asked for the document itself
        """
        depth = self._depth(depth)
        if depth == 0:
            raise RichDocPositionError("There is no position before the document", {'position': self.pos})

        return self._path[depth][1] - 1

    def after(self, depth: int | None = None) -> int:
        """
        Get the position directly after the ancestor node.

        Args:
            depth: The depth, defaulting to the parent's depth

        Returns:
            The position after the ancestor

        Raises:
            RichDocPositionError: If asked for the document itself
        """
        depth = self._depth(depth)
        if depth == 0:
            raise RichDocPositionError("There is no position after the document", {'position': self.pos})

        return self.end(depth) + 1

    def __repr__(self) -> str:
        return f"<RichDocResolvedPosition pos={self.pos} depth={self.depth} offset={self.parent_offset}>"
