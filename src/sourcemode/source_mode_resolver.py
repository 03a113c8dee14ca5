"""
Ordering of mark boundaries into correctly nested syntax markers.

Boundaries are first grouped by position, then each position is resolved on
its own. At a position, the marks that end there are closed before any mark
that starts there is opened. Closing syntax runs from the innermost mark to
the outermost one, opening syntax from the outermost to the innermost, so
the markers always read as balanced brackets.
"""

import logging
from typing import Dict, Iterable, List, Tuple

from sourcemode.source_mode_syntax import mark_class, mark_syntax
from sourcemode.source_mode_types import BoundaryEdge, MarkBoundary, ResolvedMarker


class SourceModeResolver:
    """Linearizes mark boundaries into a deterministic emission order."""

    def __init__(self) -> None:
        """Initialize the resolver."""
        self._logger = logging.getLogger("SourceModeResolver")

    def group_by_position(self, boundaries: Iterable[MarkBoundary]) -> Dict[int, List[MarkBoundary]]:
        """
        Group boundaries by their exact position.

        Args:
            boundaries: Boundaries in extraction order

        Returns:
            Mapping from position to the boundaries there, in extraction order
        """
        groups: Dict[int, List[MarkBoundary]] = {}
        for boundary in boundaries:
            groups.setdefault(boundary.position, []).append(boundary)

        return groups

    def order_position(self, boundaries: List[MarkBoundary]) -> Tuple[List[MarkBoundary], List[MarkBoundary]]:
        """
        Order the boundaries found at a single position.

        Args:
            boundaries: All boundaries at one position

        Returns:
            A tuple of (ends, starts): ends run from the innermost mark to the
            outermost, starts from the outermost to the innermost. Starts of
            equal priority keep their extraction order and the matching ends
            run in reverse extraction order, so they still mirror each other.
        """
        indexed = list(enumerate(boundaries))
        ends = [
            b for _i, b in sorted(
                (item for item in indexed if item[1].edge == BoundaryEdge.END),
                key=lambda item: (item[1].priority, item[0]),
                reverse=True
            )
        ]
        starts = [
            b for _i, b in sorted(
                (item for item in indexed if item[1].edge == BoundaryEdge.START),
                key=lambda item: (item[1].priority, item[0])
            )
        ]

        return ends, starts

    def resolve(self, boundaries: Iterable[MarkBoundary]) -> List[ResolvedMarker]:
        """
        Resolve boundaries into syntax markers in emission order.

        Args:
            boundaries: Boundaries in extraction order

        Returns:
            Markers sorted by position, each position's ends before its starts.
            Boundaries whose mark kind has no syntax produce no marker.
        """
        groups = self.group_by_position(boundaries)
        markers: List[ResolvedMarker] = []

        for position in sorted(groups):
            ends, starts = self.order_position(groups[position])
            for boundary in ends + starts:
                is_start = boundary.edge == BoundaryEdge.START
                syntax = mark_syntax(boundary.mark_kind, is_start, boundary.href)
                if not syntax:
                    self._logger.debug(
                        "No syntax for '%s' mark at position %d, skipping marker",
                        boundary.mark_kind,
                        position
                    )
                    continue

                markers.append(ResolvedMarker(
                    position,
                    boundary.edge,
                    boundary.mark_kind,
                    syntax,
                    mark_class(boundary.mark_kind)
                ))

        return markers
