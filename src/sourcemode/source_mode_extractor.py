"""
Extraction of syntax markers and mark boundaries from a document.

The extractor walks a document once and finds the block-level syntax markers
(heading hashes, list bullets, blockquote carets, code fences, horizontal
rule tags) and the start and end edge of every mark on every text run.

Adjacent text runs that share a mark each contribute their own pair of
boundaries: the runs are not merged into one span.
"""

from typing import List

from richdoc import (
    RichDocBlockquoteNode, RichDocBulletListNode, RichDocCodeBlockNode, RichDocDocumentNode,
    RichDocHeadingNode, RichDocHorizontalRuleNode, RichDocListItemNode, RichDocOrderedListNode,
    RichDocTextNode, RichDocVisitor
)

from sourcemode.source_mode_syntax import (
    BLOCKQUOTE_PREFIX, BULLET_PREFIX, CODE_FENCE, CODE_FENCE_CLASS, HORIZONTAL_RULE_CLASS,
    HORIZONTAL_RULE_SYNTAX, block_marker_class, code_fence_open, heading_prefix, mark_priority,
    ordered_list_prefix
)
from sourcemode.source_mode_types import (
    BlockMarker, BlockRangeTag, BoundaryEdge, DecorationSide, MarkBoundary, SourceModeExtraction
)


class SourceModeExtractor(RichDocVisitor):
    """Visitor that collects block markers and mark boundaries."""

    def __init__(self, heading_markers: bool = True, fold_heading_prefix: bool = False) -> None:
        """
        Initialize the extractor.

        Args:
            heading_markers: Whether to emit heading prefixes at all
            fold_heading_prefix: Whether headings may carry their prefix in their
                own text. A heading whose text already starts with its prefix
                gets no prefix marker; every other heading still gets one.
        """
        self._heading_markers = heading_markers
        self._fold_heading_prefix = fold_heading_prefix
        self._extraction = SourceModeExtraction()

    def extract(self, doc: RichDocDocumentNode) -> SourceModeExtraction:
        """
        Extract markers and boundaries from a document.

        Args:
            doc: The document snapshot

        Returns:
            The extracted markers, tags and boundaries
        """
        self._extraction = SourceModeExtraction()
        self.visit(doc, 0)
        return self._extraction

    def visit_RichDocHeadingNode(self, node: RichDocHeadingNode, pos: int) -> List:  # pylint: disable=invalid-name
        """Add the heading prefix at the start of the heading's content."""
        prefix = heading_prefix(node.level)
        folded = self._fold_heading_prefix and node.text_content.startswith(prefix)
        if self._heading_markers and not folded:
            self._extraction.block_markers.append(BlockMarker(pos + 1, prefix, block_marker_class("heading")))

        return self.generic_visit(node, pos)

    def visit_RichDocBlockquoteNode(self, node: RichDocBlockquoteNode, pos: int) -> List:  # pylint: disable=invalid-name
        """Add the blockquote caret at the start of the blockquote's content."""
        self._extraction.block_markers.append(
            BlockMarker(pos + 1, BLOCKQUOTE_PREFIX, block_marker_class("blockquote"))
        )
        return self.generic_visit(node, pos)

    def visit_RichDocBulletListNode(self, node: RichDocBulletListNode, pos: int) -> List:  # pylint: disable=invalid-name
        """Add a bullet at the start of each list item's content."""
        for child, child_pos in node.iter_children(pos + 1):
            if isinstance(child, RichDocListItemNode):
                self._extraction.block_markers.append(
                    BlockMarker(child_pos + 1, BULLET_PREFIX, block_marker_class("list"))
                )

        return self.generic_visit(node, pos)

    def visit_RichDocOrderedListNode(self, node: RichDocOrderedListNode, pos: int) -> List:  # pylint: disable=invalid-name
        """Add a running number at the start of each list item's content."""
        number = node.start
        for child, child_pos in node.iter_children(pos + 1):
            if isinstance(child, RichDocListItemNode):
                self._extraction.block_markers.append(
                    BlockMarker(child_pos + 1, ordered_list_prefix(number), block_marker_class("list"))
                )
                number += 1

        return self.generic_visit(node, pos)

    def visit_RichDocCodeBlockNode(self, node: RichDocCodeBlockNode, pos: int) -> List:  # pylint: disable=invalid-name
        """Add an opening fence before the code block and a closing fence after it."""
        self._extraction.block_markers.append(
            BlockMarker(pos, code_fence_open(node.language), CODE_FENCE_CLASS, DecorationSide.BEFORE, True)
        )
        self._extraction.block_markers.append(
            BlockMarker(pos + node.node_size, CODE_FENCE, CODE_FENCE_CLASS, DecorationSide.AFTER, True)
        )
        return self.generic_visit(node, pos)

    def visit_RichDocHorizontalRuleNode(self, node: RichDocHorizontalRuleNode, pos: int) -> List:  # pylint: disable=invalid-name
        """Tag the horizontal rule's range."""
        self._extraction.range_tags.append(
            BlockRangeTag(pos, pos + node.node_size, HORIZONTAL_RULE_CLASS, HORIZONTAL_RULE_SYNTAX)
        )
        return []

    def visit_RichDocTextNode(self, node: RichDocTextNode, pos: int) -> List:  # pylint: disable=invalid-name
        """Add a start and end boundary for every mark on the run."""
        end = pos + node.node_size
        for mark in node.marks:
            priority = mark_priority(mark.kind)
            href = str(mark.attr("href") or "") if mark.kind == "link" else None
            self._extraction.boundaries.append(MarkBoundary(pos, BoundaryEdge.START, mark.kind, priority, href))
            self._extraction.boundaries.append(MarkBoundary(end, BoundaryEdge.END, mark.kind, priority, href))

        return []


def extract_markers(
    doc: RichDocDocumentNode,
    heading_markers: bool = True,
    fold_heading_prefix: bool = False
) -> SourceModeExtraction:
    """
    Extract markers and boundaries from a document.

    Args:
        doc: The document snapshot
        heading_markers: Whether to emit heading prefixes
        fold_heading_prefix: Whether headings already starting with their prefix skip the marker

    Returns:
        The extracted markers, tags and boundaries
    """
    return SourceModeExtractor(heading_markers, fold_heading_prefix).extract(doc)
