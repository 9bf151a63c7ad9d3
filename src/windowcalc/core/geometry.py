"""Geometry value types

Screen-space rectangles and gap helpers shared by every calculation.

Coordinates are Y-up: the origin is the bottom-left corner of the
desktop, so ``max_y`` of a frame is its visual top edge.
"""

from dataclasses import asdict, dataclass
from enum import Flag, auto


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle (Y-up).

    Attributes:
        x, y: bottom-left origin
        width, height: size, never negative for rects built by the engine
    """

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def zero(cls) -> "Rect":
        return cls(0.0, 0.0, 0.0, 0.0)

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def intersection(self, other: "Rect") -> "Rect":
        """Overlapping area of two rects, or an empty rect if disjoint."""
        left = max(self.min_x, other.min_x)
        right = min(self.max_x, other.max_x)
        bottom = max(self.min_y, other.min_y)
        top = min(self.max_y, other.max_y)
        if right <= left or top <= bottom:
            return Rect.zero()
        return Rect(left, bottom, right - left, top - bottom)

    def intersects(self, other: "Rect") -> bool:
        return not self.intersection(other).is_empty

    def inset(self, dx: float, dy: float) -> "Rect":
        """Shrink by ``dx`` on the left and right and ``dy`` on top and bottom."""
        return Rect(self.x + dx, self.y + dy, self.width - 2 * dx, self.height - 2 * dy)

    def to_dict(self) -> dict:
        """转换为可序列化的字典"""
        return asdict(self)


@dataclass(frozen=True)
class EdgeGaps:
    """Per-edge gap overrides for the visible frame."""

    top: float = 0.0
    bottom: float = 0.0
    left: float = 0.0
    right: float = 0.0

    @classmethod
    def zero(cls) -> "EdgeGaps":
        return cls()

    @classmethod
    def uniform(cls, gap: float) -> "EdgeGaps":
        return cls(top=gap, bottom=gap, left=gap, right=gap)

    @property
    def is_zero(self) -> bool:
        return not (self.top or self.bottom or self.left or self.right)


class Edge(Flag):
    """Rectangle edges, combinable."""

    NONE = 0
    TOP = auto()
    BOTTOM = auto()
    LEFT = auto()
    RIGHT = auto()
    HORIZONTAL = LEFT | RIGHT
    VERTICAL = TOP | BOTTOM
    ALL = TOP | BOTTOM | LEFT | RIGHT


class Dimension(Flag):
    """Which axis an operation applies to."""

    NONE = 0
    HORIZONTAL = auto()
    VERTICAL = auto()
    BOTH = HORIZONTAL | VERTICAL


def apply_gaps(
    rect: Rect,
    gap_size: float,
    dimension: Dimension = Dimension.BOTH,
    shared_edges: Edge = Edge.NONE,
) -> Rect:
    """Inset a rect by the window gap.

    Every requested dimension is inset by the full gap on both sides. Edges
    shared with a neighbouring window then get half a gap back, so two
    adjacent windows end up exactly one gap apart.

    Args:
        rect: rectangle to shrink
        gap_size: gap in points
        dimension: axes to apply the gap on
        shared_edges: edges that touch another window rather than the screen

    Returns:
        The adjusted rectangle
    """
    if gap_size <= 0:
        return rect

    half_gap = gap_size / 2
    horizontal = Dimension.HORIZONTAL in dimension
    vertical = Dimension.VERTICAL in dimension

    x, y = rect.x, rect.y
    width, height = rect.width, rect.height

    if horizontal:
        x += gap_size
        width -= 2 * gap_size
        if Edge.LEFT in shared_edges:
            x -= half_gap
            width += half_gap
        if Edge.RIGHT in shared_edges:
            width += half_gap

    if vertical:
        y += gap_size
        height -= 2 * gap_size
        if Edge.BOTTOM in shared_edges:
            y -= half_gap
            height += half_gap
        if Edge.TOP in shared_edges:
            height += half_gap

    return Rect(x, y, width, height)


def apply_screen_edge_gaps(frame: Rect, gaps: EdgeGaps) -> Rect:
    """Shrink a visible frame by per-edge gaps (Y-up: top gap lowers max_y)."""
    if gaps.is_zero:
        return frame
    return Rect(
        frame.x + gaps.left,
        frame.y + gaps.bottom,
        frame.width - gaps.left - gaps.right,
        frame.height - gaps.top - gaps.bottom,
    )
