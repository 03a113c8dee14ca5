"""
Plain-text rendering of a document with its overlay.

Each textblock becomes one line, with the overlay's markers inserted at
their positions in overlay order. Block-level markers such as code fences
get lines of their own, and a tagged horizontal rule renders as its syntax.
"""

from typing import Dict, List, Set

from richdoc import (
    RichDocDocumentNode, RichDocHardBreakNode, RichDocHorizontalRuleNode, RichDocNode, RichDocTextNode,
    RichDocVisitor
)

from sourcemode.source_mode_types import SourceModeOverlay, SourceModePointDecoration, SourceModeRangeDecoration


class SourceModeTextRenderer(RichDocVisitor):
    """Visitor rendering a document and its overlay as lines of text."""

    def __init__(self, overlay: SourceModeOverlay) -> None:
        """
        Initialize the renderer.

        Args:
            overlay: The overlay to render over the document
        """
        self._points: Dict[int, List[SourceModePointDecoration]] = {}
        for point in overlay.points:
            self._points.setdefault(point.position, []).append(point)

        self._ranges: Dict[int, SourceModeRangeDecoration] = {item.start: item for item in overlay.ranges}
        self._emitted: Set[int] = set()
        self._lines: List[str] = []
        self._pending = ""

    def render(self, doc: RichDocDocumentNode) -> str:
        """
        Render a document.

        Args:
            doc: The document the overlay was computed for

        Returns:
            The rendered text, one line per textblock
        """
        self._emitted = set()
        self._lines = []
        self._pending = ""
        self.visit(doc, 0)
        if self._pending:
            self._lines.append(self._pending)
            self._pending = ""

        return "\n".join(self._lines)

    def _take(self, pos: int) -> str:
        """
        Collect the inline markers at a position, rendering block markers as lines.

        Args:
            pos: Document position

        Returns:
            The concatenated text of the inline markers at the position
        """
        if pos in self._emitted:
            return ""

        self._emitted.add(pos)
        text = ""
        for point in self._points.get(pos, []):
            if point.block:
                self._lines.append(self._pending + text + point.text)
                self._pending = ""
                text = ""
                continue

            text += point.text

        return text

    def generic_visit(self, node: RichDocNode, pos: int) -> List:
        start = node.content_start(pos)
        if node.is_textblock:
            self._render_textblock(node, start)
            return []

        for child, child_pos in node.iter_children(start):
            self._pending += self._take(child_pos)
            self.visit(child, child_pos)

        self._pending += self._take(start + node.content_size)
        return []

    def _render_textblock(self, node: RichDocNode, start: int) -> None:
        line = self._pending + self._take(start)
        self._pending = ""
        for child, child_pos in node.iter_children(start):
            line += self._take(child_pos)
            if isinstance(child, RichDocTextNode):
                line += child.text

            elif isinstance(child, RichDocHardBreakNode):
                line += "\n"

        line += self._take(start + node.content_size)
        self._lines.append(line)

    def visit_RichDocHorizontalRuleNode(self, node: RichDocHorizontalRuleNode, pos: int) -> List:  # pylint: disable=invalid-name
        """Render a tagged horizontal rule as its syntax."""
        tag = self._ranges.get(pos)
        if tag is not None:
            self._lines.append(self._pending + tag.syntax)
            self._pending = ""

        return []


def render_overlay_text(doc: RichDocDocumentNode, overlay: SourceModeOverlay) -> str:
    """
    Render a document's text with an overlay's markers inserted.

    Args:
        doc: The document
        overlay: The overlay computed for the document

    Returns:
        The rendered text, one line per textblock
    """
    return SourceModeTextRenderer(overlay).render(doc)
