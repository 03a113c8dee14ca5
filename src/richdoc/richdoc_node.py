"""
Immutable node tree for rich documents.

A document is a tree of block nodes whose leaves are inline nodes. Inline text
nodes carry a set of formatting marks. Every node occupies a contiguous range
of integer positions: text nodes occupy one position per character, leaf nodes
occupy a single position, and every other node occupies its content plus one
position for its opening edge and one for its closing edge. The document
node's own content starts at position 0.
"""

import copy
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Tuple

from richdoc.richdoc_mark import RichDocMark, same_mark_set
from richdoc.richdoc_position import RichDocResolvedPosition


class RichDocNode:
    """Base class for all rich document nodes."""

    kind = "node"

    # Nodes whose content is made of inline nodes (text and inline leaves)
    inline_content = False
    is_inline = False
    is_leaf = False
    is_text = False

    def __init__(
        self,
        children: Iterable["RichDocNode"] | None = None,
        attrs: Mapping[str, Any] | None = None
    ) -> None:
        """
        Initialize a node.

        Args:
            children: Child nodes, in document order
            attrs: Kind-specific attributes
        """
        self._attrs: Dict[str, Any] = dict(attrs or {})
        self._children: Tuple[RichDocNode, ...] = self._normalize(tuple(children or ()))
        self._content_size = sum(child.node_size for child in self._children)

    def _normalize(self, children: Tuple["RichDocNode", ...]) -> Tuple["RichDocNode", ...]:
        """
        Drop empty text nodes and join adjacent text nodes with equal marks.

        Args:
            children: Children as supplied

        Returns:
            The normalized children
        """
        if not any(child.is_text for child in children):
            return children

        result: List[RichDocNode] = []
        for child in children:
            if isinstance(child, RichDocTextNode):
                if not child.text:
                    continue

                previous = result[-1] if result else None
                if isinstance(previous, RichDocTextNode) and same_mark_set(previous.marks, child.marks):
                    result[-1] = previous.with_text(previous.text + child.text)
                    continue

            result.append(child)

        return tuple(result)

    @property
    def attrs(self) -> Dict[str, Any]:
        """A copy of the node's attributes."""
        return dict(self._attrs)

    @property
    def children(self) -> Tuple["RichDocNode", ...]:
        """The node's children."""
        return self._children

    @property
    def child_count(self) -> int:
        """Number of children."""
        return len(self._children)

    @property
    def content_size(self) -> int:
        """Number of positions occupied by the node's content."""
        return self._content_size

    @property
    def node_size(self) -> int:
        """Number of positions occupied by the node, including its edges."""
        if self.is_leaf:
            return 1

        return self._content_size + 2

    @property
    def is_textblock(self) -> bool:
        """True if this is a block whose content is inline."""
        return self.inline_content and not self.is_inline

    @property
    def text_content(self) -> str:
        """Concatenated text of all descendant text nodes."""
        return "".join(child.text_content for child in self._children)

    def child(self, index: int) -> "RichDocNode":
        """
        Get a child by index.

        Args:
            index: Child index

        Returns:
            The child node
        """
        return self._children[index]

    def content_start(self, pos: int) -> int:
        """
        Get the position at which this node's content starts.

        Args:
            pos: The position directly before this node

        Returns:
            The position of the first content slot
        """
        return pos + 1

    def iter_children(self, content_start: int) -> Iterator[Tuple["RichDocNode", int]]:
        """
        Iterate over the children along with their positions.

        Args:
            content_start: Position at which this node's content starts

        Yields:
            (child, position directly before the child) pairs
        """
        pos = content_start
        for child in self._children:
            yield child, pos
            pos += child.node_size

    def descendants(self, pos: int = 0) -> Iterator[Tuple["RichDocNode", int]]:
        """
        Iterate over all descendants in document order.

        Args:
            pos: The position directly before this node

        Yields:
            (node, position directly before the node) pairs
        """
        for child, child_pos in self.iter_children(self.content_start(pos)):
            yield child, child_pos
            yield from child.descendants(child_pos)

    def copy(self, children: Iterable["RichDocNode"]) -> "RichDocNode":
        """
        Create a node of the same kind and attributes with new children.

        Args:
            children: The new children

        Returns:
            A new node; this node is left untouched
        """
        clone = copy.copy(self)
        clone._children = clone._normalize(tuple(children))
        clone._content_size = sum(child.node_size for child in clone._children)
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RichDocNode):
            return NotImplemented

        return (
            self.kind == other.kind and
            self._attrs == other._attrs and
            self._children == other._children
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        attrs = f" {self._attrs}" if self._attrs else ""
        return f"<{self.__class__.__name__}{attrs} children={len(self._children)}>"


class RichDocVisitor:
    """
    Base visitor class for rich document traversal.

    Visiting a node dispatches to a `visit_<ClassName>` method when the visitor
    defines one, and to `generic_visit` otherwise. Every visit receives the
    position directly before the node.
    """

    def visit(self, node: RichDocNode, pos: int) -> Any:
        """
        Visit a node and dispatch to the appropriate visit method.

        Args:
            node: The node to visit
            pos: The position directly before the node

        Returns:
            The result of visiting the node
        """
        method_name = f'visit_{node.__class__.__name__}'
        visitor = getattr(self, method_name, self.generic_visit)
        return visitor(node, pos)

    def generic_visit(self, node: RichDocNode, pos: int) -> List[Any]:
        """
        Default visit method for nodes without specific handlers.

        Args:
            node: The node to visit
            pos: The position directly before the node

        Returns:
            A list of results from visiting each child
        """
        results = []
        for child, child_pos in node.iter_children(node.content_start(pos)):
            results.append(self.visit(child, child_pos))

        return results


class RichDocDocumentNode(RichDocNode):
    """Root node representing an entire document."""

    kind = "doc"

    @property
    def node_size(self) -> int:
        """The document has no edges of its own, so its size is its content size."""
        return self._content_size

    def content_start(self, pos: int) -> int:
        return 0

    def resolve(self, pos: int) -> RichDocResolvedPosition:
        """
        Resolve a position into its ancestry within this document.

        Args:
            pos: The position to resolve

        Returns:
            The resolved position

        Raises:
            RichDocPositionError: If the position lies outside the document
        """
        return RichDocResolvedPosition.resolve(self, pos)


class RichDocParagraphNode(RichDocNode):
    """Node representing a paragraph."""

    kind = "paragraph"
    inline_content = True


class RichDocHeadingNode(RichDocNode):
    """Node representing a heading (levels 1 through 6)."""

    kind = "heading"
    inline_content = True

    def __init__(self, level: int = 1, children: Iterable[RichDocNode] | None = None) -> None:
        """
        Initialize a heading node.

        Args:
            level: The heading level, clamped to 1-6
            children: Inline content of the heading
        """
        super().__init__(children, {"level": max(1, min(6, int(level)))})

    @property
    def level(self) -> int:
        """The heading level."""
        return int(self._attrs["level"])


class RichDocBlockquoteNode(RichDocNode):
    """Node representing a blockquote."""

    kind = "blockquote"


class RichDocBulletListNode(RichDocNode):
    """Node representing an unordered list."""

    kind = "bullet_list"


class RichDocOrderedListNode(RichDocNode):
    """Node representing an ordered list."""

    kind = "ordered_list"

    def __init__(self, start: int = 1, children: Iterable[RichDocNode] | None = None) -> None:
        """
        Initialize an ordered list node.

        Args:
            start: The number of the first item
            children: The list items
        """
        super().__init__(children, {"start": int(start)})

    @property
    def start(self) -> int:
        """The number of the first item."""
        return int(self._attrs["start"])


class RichDocListItemNode(RichDocNode):
    """Node representing a list item."""

    kind = "list_item"


class RichDocCodeBlockNode(RichDocNode):
    """Node representing a fenced code block."""

    kind = "code_block"
    inline_content = True

    def __init__(self, language: str = "", children: Iterable[RichDocNode] | None = None) -> None:
        """
        Initialize a code block node.

        Args:
            language: Language identifier shown on the opening fence
            children: The code, as text nodes
        """
        super().__init__(children, {"language": language or ""})

    @property
    def language(self) -> str:
        """The language identifier."""
        return str(self._attrs["language"])


class RichDocHorizontalRuleNode(RichDocNode):
    """Node representing a horizontal rule."""

    kind = "horizontal_rule"
    is_leaf = True


class RichDocHardBreakNode(RichDocNode):
    """Node representing a line break inside a textblock."""

    kind = "hard_break"
    is_leaf = True
    is_inline = True


class RichDocBlockNode(RichDocNode):
    """Node of a kind this library has no dedicated class for."""

    def __init__(
        self,
        kind: str,
        children: Iterable[RichDocNode] | None = None,
        attrs: Mapping[str, Any] | None = None
    ) -> None:
        """
        Initialize a generic node.

        Args:
            kind: The node kind
            children: Child nodes
            attrs: Kind-specific attributes
        """
        children = tuple(children or ())
        self.kind = kind  # type: ignore[misc]
        self.inline_content = bool(children) and all(child.is_inline for child in children)  # type: ignore[misc]
        super().__init__(children, attrs)


class RichDocTextNode(RichDocNode):
    """Node representing a run of text sharing one set of marks."""

    kind = "text"
    is_inline = True
    is_text = True

    def __init__(self, text: str, marks: Iterable[RichDocMark] | None = None) -> None:
        """
        Initialize a text node.

        Args:
            text: The text content
            marks: Formatting marks applied to the whole run
        """
        super().__init__()
        self._text = text

        # Marks form a set: drop duplicates but keep the order they were attached in
        unique: List[RichDocMark] = []
        for mark in marks or ():
            if mark not in unique:
                unique.append(mark)

        self._marks: Tuple[RichDocMark, ...] = tuple(unique)

    @property
    def text(self) -> str:
        """The text content."""
        return self._text

    @property
    def marks(self) -> Tuple[RichDocMark, ...]:
        """The marks applied to this run."""
        return self._marks

    @property
    def node_size(self) -> int:
        return len(self._text)

    @property
    def text_content(self) -> str:
        return self._text

    def has_mark(self, kind: str) -> bool:
        """
        Check whether the run carries a mark of the given kind.

        Args:
            kind: Canonical mark kind

        Returns:
            True if a mark of that kind is present
        """
        return any(mark.kind == kind for mark in self._marks)

    def with_text(self, text: str) -> "RichDocTextNode":
        """
        Create a text node with the same marks and different text.

        Args:
            text: The new text

        Returns:
            A new text node
        """
        return RichDocTextNode(text, self._marks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RichDocTextNode):
            return NotImplemented

        return self._text == other._text and same_mark_set(self._marks, other._marks)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        marks = f" marks={[mark.kind for mark in self._marks]}" if self._marks else ""
        return f"<RichDocTextNode {self._text!r}{marks}>"
