"""Core module - geometry, action catalog and cycle sizes"""

from .actions import ActionIdentifier, SubActionIdentifier
from .cycle import CYCLE_ORDER, DEFAULT_CYCLE_SIZES, CycleSize, sorted_for_cycle
from .geometry import (
    Dimension,
    Edge,
    EdgeGaps,
    Rect,
    apply_gaps,
    apply_screen_edge_gaps,
)

__all__ = [
    # Geometry
    "Rect",
    "EdgeGaps",
    "Edge",
    "Dimension",
    "apply_gaps",
    "apply_screen_edge_gaps",
    # Actions
    "ActionIdentifier",
    "SubActionIdentifier",
    # Cycle
    "CycleSize",
    "CYCLE_ORDER",
    "DEFAULT_CYCLE_SIZES",
    "sorted_for_cycle",
]
