"""Calculation registry

Maps every supported ActionIdentifier to its Calculation and is the single
entry point used by callers:

    result = calculate(params)

Screen edge gaps are applied to the visible frame before the calculation
runs, window gaps to the resulting rect afterwards.
"""

from dataclasses import replace

from ..core.actions import ActionIdentifier, SubActionIdentifier
from ..core.geometry import Dimension, Edge, Rect, apply_gaps, apply_screen_edge_gaps
from ..telemetry import get_logger, metrics
from .base import Calculation
from .grid import CyclingGridCalculation, grid_calculation
from .placements import (
    CENTER_HALF,
    CENTER_THREE_FOURTHS,
    CENTER_TWO_THIRDS,
    FIRST_FOURTH,
    FIRST_THREE_FOURTHS,
    LAST_FOURTH,
    LAST_THREE_FOURTHS,
    SECOND_FOURTH,
    THIRD_FOURTH,
    AlmostMaximizeCalculation,
    CenterCalculation,
    CenterHalfCalculation,
    LeftRightHalfCalculation,
    MaximizeCalculation,
    MaximizeHeightCalculation,
    QuarterCalculation,
    SegmentCalculation,
    ThirdCalculation,
    ThirdSpan,
    TopBottomHalfCalculation,
)
from .types import CalculationParams, RectResult

logger = get_logger(__name__)


class UnsupportedActionError(ValueError):
    """The action has no registered calculation."""

    def __init__(self, action: ActionIdentifier):
        self.action = action
        super().__init__(f"No calculation registered for action {action.value!r}")


A = ActionIdentifier
S = SubActionIdentifier

# Grid actions whose sub action name differs from the action name
_SIXTHS: dict[ActionIdentifier, SubActionIdentifier] = {
    A.TOP_LEFT_SIXTH: S.TOP_LEFT_SIXTH_LANDSCAPE,
    A.TOP_CENTER_SIXTH: S.TOP_CENTER_SIXTH_LANDSCAPE,
    A.TOP_RIGHT_SIXTH: S.TOP_RIGHT_SIXTH_LANDSCAPE,
    A.BOTTOM_LEFT_SIXTH: S.BOTTOM_LEFT_SIXTH_LANDSCAPE,
    A.BOTTOM_CENTER_SIXTH: S.BOTTOM_CENTER_SIXTH_LANDSCAPE,
    A.BOTTOM_RIGHT_SIXTH: S.BOTTOM_RIGHT_SIXTH_LANDSCAPE,
}

_GRID_ACTIONS: tuple[ActionIdentifier, ...] = (
    A.TOP_LEFT_NINTH,
    A.TOP_CENTER_NINTH,
    A.TOP_RIGHT_NINTH,
    A.MIDDLE_LEFT_NINTH,
    A.MIDDLE_CENTER_NINTH,
    A.MIDDLE_RIGHT_NINTH,
    A.BOTTOM_LEFT_NINTH,
    A.BOTTOM_CENTER_NINTH,
    A.BOTTOM_RIGHT_NINTH,
    A.TOP_LEFT_THIRD,
    A.TOP_RIGHT_THIRD,
    A.BOTTOM_LEFT_THIRD,
    A.BOTTOM_RIGHT_THIRD,
    A.TOP_LEFT_EIGHTH,
    A.TOP_CENTER_LEFT_EIGHTH,
    A.TOP_CENTER_RIGHT_EIGHTH,
    A.TOP_RIGHT_EIGHTH,
    A.BOTTOM_LEFT_EIGHTH,
    A.BOTTOM_CENTER_LEFT_EIGHTH,
    A.BOTTOM_CENTER_RIGHT_EIGHTH,
    A.BOTTOM_RIGHT_EIGHTH,
)

# Sixths in the right column step backwards on repeat
_BACKWARD_SIXTHS = frozenset({A.TOP_RIGHT_SIXTH, A.BOTTOM_RIGHT_SIXTH})

# Axes the window gap applies to, when not both
_GAP_DIMENSIONS: dict[ActionIdentifier, Dimension] = {
    A.CENTER: Dimension.NONE,
    A.ALMOST_MAXIMIZE: Dimension.NONE,
    A.MAXIMIZE_HEIGHT: Dimension.VERTICAL,
}


def _build_registry() -> dict[ActionIdentifier, Calculation]:
    left_right = LeftRightHalfCalculation()
    top_bottom = TopBottomHalfCalculation()

    registry: dict[ActionIdentifier, Calculation] = {
        # === Halves ===
        A.LEFT_HALF: left_right,
        A.RIGHT_HALF: left_right,
        A.TOP_HALF: top_bottom,
        A.BOTTOM_HALF: top_bottom,
        # === Corners ===
        A.TOP_LEFT: QuarterCalculation(right=False, top=True),
        A.TOP_RIGHT: QuarterCalculation(right=True, top=True),
        A.BOTTOM_LEFT: QuarterCalculation(right=False, top=False),
        A.BOTTOM_RIGHT: QuarterCalculation(right=True, top=False),
        # === Thirds ===
        A.FIRST_THIRD: ThirdCalculation(
            1, (ThirdSpan.START, ThirdSpan.CENTER, ThirdSpan.END)
        ),
        A.CENTER_THIRD: ThirdCalculation(1, (ThirdSpan.CENTER,)),
        A.LAST_THIRD: ThirdCalculation(
            1, (ThirdSpan.END, ThirdSpan.CENTER, ThirdSpan.START)
        ),
        A.FIRST_TWO_THIRDS: ThirdCalculation(2, (ThirdSpan.START, ThirdSpan.END)),
        A.LAST_TWO_THIRDS: ThirdCalculation(2, (ThirdSpan.END, ThirdSpan.START)),
        A.CENTER_TWO_THIRDS: SegmentCalculation((CENTER_TWO_THIRDS,)),
        # === Fourths ===
        A.FIRST_FOURTH: SegmentCalculation(
            (FIRST_FOURTH, SECOND_FOURTH, THIRD_FOURTH, LAST_FOURTH)
        ),
        A.SECOND_FOURTH: SegmentCalculation((SECOND_FOURTH, LAST_THREE_FOURTHS, CENTER_HALF)),
        A.THIRD_FOURTH: SegmentCalculation((THIRD_FOURTH, FIRST_THREE_FOURTHS, CENTER_HALF)),
        A.LAST_FOURTH: SegmentCalculation(
            (LAST_FOURTH, THIRD_FOURTH, SECOND_FOURTH, FIRST_FOURTH)
        ),
        A.FIRST_THREE_FOURTHS: SegmentCalculation((FIRST_THREE_FOURTHS, LAST_THREE_FOURTHS)),
        A.CENTER_THREE_FOURTHS: SegmentCalculation((CENTER_THREE_FOURTHS,)),
        A.LAST_THREE_FOURTHS: SegmentCalculation((LAST_THREE_FOURTHS, FIRST_THREE_FOURTHS)),
        A.CENTER_HALF: CenterHalfCalculation(),
        # === Maximize & Center ===
        A.MAXIMIZE: MaximizeCalculation(),
        A.ALMOST_MAXIMIZE: AlmostMaximizeCalculation(),
        A.MAXIMIZE_HEIGHT: MaximizeHeightCalculation(),
        A.CENTER: CenterCalculation(),
    }

    # === Grid cells ===
    for action in _GRID_ACTIONS:
        registry[action] = CyclingGridCalculation(
            grid_calculation(SubActionIdentifier(action.value))
        )
    for action, sub_action in _SIXTHS.items():
        step = -1 if action in _BACKWARD_SIXTHS else 1
        registry[action] = CyclingGridCalculation(grid_calculation(sub_action), step)

    return registry


CALCULATIONS: dict[ActionIdentifier, Calculation] = _build_registry()


def get_calculation(action: ActionIdentifier) -> Calculation | None:
    """Calculation registered for ``action``, or None."""
    return CALCULATIONS.get(action)


def supported_actions() -> list[ActionIdentifier]:
    """Registered actions in catalog order."""
    return [action for action in ActionIdentifier if action in CALCULATIONS]


def shared_edges(rect: Rect, frame: Rect) -> Edge:
    """Edges of ``rect`` that lie inside ``frame`` rather than on its border."""
    edges = Edge.NONE
    if rect.min_x > frame.min_x:
        edges |= Edge.LEFT
    if rect.max_x < frame.max_x:
        edges |= Edge.RIGHT
    if rect.min_y > frame.min_y:
        edges |= Edge.BOTTOM
    if rect.max_y < frame.max_y:
        edges |= Edge.TOP
    return edges


def calculate(params: CalculationParams) -> RectResult:
    """Run the calculation registered for ``params.action``.

    Args:
        params: complete input for one placement

    Returns:
        The placement result, with gaps applied

    Raises:
        UnsupportedActionError: no calculation is registered for the action
    """
    calculation = get_calculation(params.action)
    if calculation is None:
        metrics.inc("calc.unsupported", {"action": params.action.value})
        logger.warning(f"[Calc] unsupported action: {params.action.value}")
        raise UnsupportedActionError(params.action)

    settings = params.settings
    frame = apply_screen_edge_gaps(params.visible_frame, settings.screen_edge_gaps)
    if frame != params.visible_frame:
        params = params.with_visible_frame(frame)

    result = calculation.calculate_rect(params)

    dimension = _GAP_DIMENSIONS.get(params.action, Dimension.BOTH)
    if settings.gap_size > 0 and dimension is not Dimension.NONE:
        edges = shared_edges(result.rect, frame)
        result = replace(
            result,
            rect=apply_gaps(result.rect, settings.gap_size, dimension, shared_edges=edges),
        )

    metrics.inc("calc.count", {"action": params.action.value})
    logger.debug(
        f"[Calc] {params.action.value} frame={frame} -> {result.rect} "
        f"sub_action={result.sub_action.value if result.sub_action else None}"
    )
    return result
