"""Shared dataclasses for source mode decoration."""

from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto
from typing import ClassVar, List, Tuple


class DecorationSide(IntEnum):
    """Which neighbouring content a point decoration stays attached to."""

    BEFORE = -1  # Stays immediately before the content that follows it
    AFTER = 1  # Stays immediately after the content that precedes it


class BoundaryEdge(Enum):
    """Edge of a mark span."""

    START = auto()
    END = auto()


@dataclass(frozen=True)
class MarkBoundary:
    """The start or end edge of one mark on one text run."""

    position: int
    edge: BoundaryEdge
    mark_kind: str
    priority: int  # 0 is outermost
    href: str | None = None  # Link destination, for link marks only


@dataclass(frozen=True)
class BlockMarker:
    """Syntax marker for a block-level node."""

    position: int
    text: str
    css_class: str
    side: DecorationSide = DecorationSide.BEFORE
    block: bool = False  # Rendered as a row of its own rather than inline


@dataclass(frozen=True)
class BlockRangeTag:
    """Cosmetic tag applied over a whole node's range."""

    start: int
    end: int
    css_class: str
    syntax: str


@dataclass
class SourceModeExtraction:
    """Everything the extractor finds in one traversal of a document."""

    block_markers: List[BlockMarker] = field(default_factory=list)
    range_tags: List[BlockRangeTag] = field(default_factory=list)
    boundaries: List[MarkBoundary] = field(default_factory=list)


@dataclass(frozen=True)
class ResolvedMarker:
    """A mark boundary with its literal syntax, in emission order."""

    position: int
    edge: BoundaryEdge
    mark_kind: str
    text: str
    css_class: str


@dataclass(frozen=True)
class SourceModePointDecoration:
    """A syntax marker inserted at a position without changing the document."""

    position: int
    text: str
    css_class: str
    side: DecorationSide
    block: bool = False


@dataclass(frozen=True)
class SourceModeRangeDecoration:
    """A cosmetic attribute applied over an existing node range."""

    start: int
    end: int
    css_class: str
    syntax: str


@dataclass(frozen=True)
class SourceModeOverlay:
    """
    The full set of decorations for one document snapshot.

    Point decorations are held in rendering order: when several share a
    position they render in the order they appear here.
    """

    points: Tuple[SourceModePointDecoration, ...] = ()
    ranges: Tuple[SourceModeRangeDecoration, ...] = ()

    EMPTY: ClassVar["SourceModeOverlay"]

    def is_empty(self) -> bool:
        """
        Check whether the overlay holds no decorations.

        Returns:
            True if there are no decorations
        """
        return not self.points and not self.ranges

    def points_at(self, position: int) -> List[SourceModePointDecoration]:
        """
        Get the point decorations at a position, in rendering order.

        Args:
            position: Document position

        Returns:
            The decorations at that position
        """
        return [point for point in self.points if point.position == position]

    def marker_text_at(self, position: int) -> str:
        """
        Get the concatenated marker text rendered at a position.

        Args:
            position: Document position

        Returns:
            The marker text, empty if there are no markers there
        """
        return "".join(point.text for point in self.points_at(position))

    def __len__(self) -> int:
        return len(self.points) + len(self.ranges)


SourceModeOverlay.EMPTY = SourceModeOverlay()
