"""Turning extracted markers into the decoration overlay for a document."""

from typing import List, Tuple

from richdoc import RichDocDocumentNode

from sourcemode.source_mode_extractor import SourceModeExtractor
from sourcemode.source_mode_resolver import SourceModeResolver
from sourcemode.source_mode_types import (
    BoundaryEdge, DecorationSide, ResolvedMarker, SourceModeExtraction, SourceModeOverlay,
    SourceModePointDecoration, SourceModeRangeDecoration
)


# Rendering rank of each kind of marker sharing a position
_RANK_MARK_END = 0
_RANK_BLOCK_TRAILING = 1
_RANK_BLOCK_LEADING = 2
_RANK_MARK_START = 3


class SourceModeEmitter:
    """Builds the overlay from block markers and resolved mark boundaries."""

    def emit(self, extraction: SourceModeExtraction, markers: List[ResolvedMarker]) -> SourceModeOverlay:
        """
        Build the overlay.

        Args:
            extraction: Block markers and range tags from the extractor
            markers: Inline markers in emission order from the resolver

        Returns:
            The overlay, with point decorations in rendering order
        """
        ranked: List[Tuple[int, int, SourceModePointDecoration]] = []

        for block_marker in extraction.block_markers:
            rank = _RANK_BLOCK_LEADING if block_marker.side == DecorationSide.BEFORE else _RANK_BLOCK_TRAILING
            ranked.append((block_marker.position, rank, SourceModePointDecoration(
                block_marker.position,
                block_marker.text,
                block_marker.css_class,
                block_marker.side,
                block_marker.block
            )))

        for marker in markers:
            if marker.edge == BoundaryEdge.START:
                rank = _RANK_MARK_START
                side = DecorationSide.BEFORE

            else:
                rank = _RANK_MARK_END
                side = DecorationSide.AFTER

            ranked.append((marker.position, rank, SourceModePointDecoration(
                marker.position,
                marker.text,
                marker.css_class,
                side
            )))

        # Stable sort: markers of the same rank keep the resolver's and extractor's order
        ranked.sort(key=lambda item: (item[0], item[1]))

        ranges = tuple(
            SourceModeRangeDecoration(tag.start, tag.end, tag.css_class, tag.syntax)
            for tag in extraction.range_tags
        )

        return SourceModeOverlay(tuple(item[2] for item in ranked), ranges)


def compute_overlay(
    doc: RichDocDocumentNode,
    source_mode: bool,
    heading_markers: bool = True,
    fold_heading_prefix: bool = False
) -> SourceModeOverlay:
    """
    Compute the syntax overlay for a document snapshot.

    This is a pure function of its arguments: calling it again on the same
    snapshot gives an equal overlay.

    Args:
        doc: The document snapshot
        source_mode: Whether source syntax is shown; if not, the overlay is empty
        heading_markers: Whether to emit heading prefixes as decorations
        fold_heading_prefix: Whether a heading whose text already starts with its
            prefix is left without a prefix decoration

    Returns:
        The overlay
    """
    if not source_mode:
        return SourceModeOverlay.EMPTY

    extraction = SourceModeExtractor(heading_markers, fold_heading_prefix).extract(doc)
    markers = SourceModeResolver().resolve(extraction.boundaries)
    return SourceModeEmitter().emit(extraction, markers)
