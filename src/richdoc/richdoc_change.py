"""Document changes: the only way a document snapshot is turned into a new one."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Tuple, cast

from richdoc.richdoc_exceptions import RichDocChangeError, RichDocPositionError
from richdoc.richdoc_mark import RichDocMark
from richdoc.richdoc_node import RichDocDocumentNode, RichDocNode, RichDocTextNode


class RichDocChange(ABC):
    """
    Abstract base class for document changes.

    Applying a change never modifies the document it is given. All validation
    happens before the new tree is built, so a change either produces a whole
    new document or raises without side effects.
    """

    add_to_history: bool

    @abstractmethod
    def apply(self, doc: RichDocDocumentNode) -> RichDocDocumentNode:
        """
        Apply the change to a document.

        Args:
            doc: The document to change

        Returns:
            The changed document

        Raises:
            RichDocPositionError: If the change targets positions outside the document
            RichDocChangeError: If the change is not valid for the document's structure
        """

    @abstractmethod
    def map(self, pos: int) -> int:
        """
        Map a position in the old document to the corresponding new position.

        Args:
            pos: Position in the document before the change

        Returns:
            Position in the document after the change
        """


def _check_range(doc: RichDocDocumentNode, from_pos: int, to_pos: int) -> None:
    if from_pos < 0 or to_pos > doc.content_size or from_pos > to_pos:
        raise RichDocPositionError(
            f"Range {from_pos}-{to_pos} is not valid for this document",
            {'from': from_pos, 'to': to_pos, 'document_size': doc.content_size}
        )


@dataclass(frozen=True)
class RichDocDeleteChange(RichDocChange):
    """
    Delete a range of the document.

    Nodes lying entirely inside the range are removed and text partially
    inside it is trimmed. Blocks that are only partly covered keep their
    edges, so deleting never joins two blocks together.
    """

    from_pos: int
    to_pos: int
    add_to_history: bool = True

    def apply(self, doc: RichDocDocumentNode) -> RichDocDocumentNode:
        _check_range(doc, self.from_pos, self.to_pos)
        if self.from_pos == self.to_pos:
            return doc

        return cast(RichDocDocumentNode, doc.copy(self._delete_content(doc, 0)))

    def _delete_content(self, node: RichDocNode, content_start: int) -> List[RichDocNode]:
        children: List[RichDocNode] = []
        for child, child_pos in node.iter_children(content_start):
            child_end = child_pos + child.node_size
            if child_end <= self.from_pos or child_pos >= self.to_pos:
                children.append(child)
                continue

            if self.from_pos <= child_pos and child_end <= self.to_pos:
                continue

            if isinstance(child, RichDocTextNode):
                text = child.text
                keep = text[:max(0, self.from_pos - child_pos)] + text[max(0, self.to_pos - child_pos):]
                children.append(child.with_text(keep))
                continue

            children.append(child.copy(self._delete_content(child, child_pos + 1)))

        return children

    def map(self, pos: int) -> int:
        if pos <= self.from_pos:
            return pos

        if pos >= self.to_pos:
            return pos - (self.to_pos - self.from_pos)

        return self.from_pos


@dataclass(frozen=True)
class RichDocInsertTextChange(RichDocChange):
    """Insert a run of text at a position inside a textblock."""

    pos: int
    text: str
    marks: Tuple[RichDocMark, ...] = field(default_factory=tuple)
    add_to_history: bool = True

    def apply(self, doc: RichDocDocumentNode) -> RichDocDocumentNode:
        resolved = doc.resolve(self.pos)
        if not resolved.parent.is_textblock:
            raise RichDocChangeError(
                f"Cannot insert text at {self.pos}: parent is not a textblock",
                {'position': self.pos, 'parent_kind': resolved.parent.kind}
            )

        if not self.text:
            return doc

        return cast(RichDocDocumentNode, doc.copy(self._insert_content(doc, 0)))

    def _insert_content(self, node: RichDocNode, content_start: int) -> List[RichDocNode]:
        new_text = RichDocTextNode(self.text, self.marks)
        if node.inline_content:
            children: List[RichDocNode] = []
            inserted = False
            for child, child_pos in node.iter_children(content_start):
                child_end = child_pos + child.node_size
                if inserted or child_end <= self.pos:
                    children.append(child)
                    continue

                if isinstance(child, RichDocTextNode) and child_pos < self.pos:
                    offset = self.pos - child_pos
                    children.append(child.with_text(child.text[:offset]))
                    children.append(new_text)
                    children.append(child.with_text(child.text[offset:]))
                    inserted = True
                    continue

                children.append(new_text)
                children.append(child)
                inserted = True

            if not inserted:
                children.append(new_text)

            return children

        children = []
        for child, child_pos in node.iter_children(content_start):
            if child_pos < self.pos < child_pos + child.node_size and not child.is_leaf and not child.is_text:
                children.append(child.copy(self._insert_content(child, child_pos + 1)))
                continue

            children.append(child)

        return children

    def map(self, pos: int) -> int:
        if pos < self.pos:
            return pos

        return pos + len(self.text)
