"""Non-grid placements

Halves, thirds, fourths, quarters, centered bands, the maximize variants
and center. Each class gets its behaviour by delegating to the dispatch
strategies in ``base``.
"""

import math
from dataclasses import dataclass
from enum import Enum

from ..core.actions import ActionIdentifier, SubActionIdentifier
from ..core.geometry import Rect
from .base import (
    Calculation,
    CycleDispatch,
    OrientationAware,
    OrientationDispatch,
    RepeatedExecutionInThirds,
)
from .types import CalculationParams, RectResult

_cycle = CycleDispatch()
_orientation = OrientationDispatch()


class MaximizeCalculation(Calculation):
    """Fill the whole visible frame."""

    def calculate_rect(self, params: CalculationParams) -> RectResult:
        return RectResult(params.visible_frame, sub_action=SubActionIdentifier.MAXIMIZE)


class LeftRightHalfCalculation(RepeatedExecutionInThirds, Calculation):
    """Left or right half, cycling widths on repeated presses.

    The side is taken from ``params.action``: RIGHT_HALF is right-aligned,
    anything else is left-aligned.
    """

    def calculate_rect(self, params: CalculationParams) -> RectResult:
        return _cycle.dispatch(self, params)

    def calculate_first_rect(self, params: CalculationParams) -> RectResult:
        return self.calculate_fractional_rect(params, 0.5)

    def calculate_fractional_rect(
        self, params: CalculationParams, fraction: float
    ) -> RectResult:
        frame = params.visible_frame
        width = float(math.floor(frame.width * fraction))
        x = frame.min_x
        if params.action is ActionIdentifier.RIGHT_HALF:
            x = frame.max_x - width
        return RectResult(
            Rect(x, frame.y, width, frame.height),
            resulting_action=params.action,
        )


class TopBottomHalfCalculation(RepeatedExecutionInThirds, Calculation):
    """Top or bottom half, cycling heights on repeated presses."""

    def calculate_rect(self, params: CalculationParams) -> RectResult:
        return _cycle.dispatch(self, params)

    def calculate_first_rect(self, params: CalculationParams) -> RectResult:
        return self.calculate_fractional_rect(params, 0.5)

    def calculate_fractional_rect(
        self, params: CalculationParams, fraction: float
    ) -> RectResult:
        frame = params.visible_frame
        height = float(math.floor(frame.height * fraction))
        y = frame.min_y
        if params.action is ActionIdentifier.TOP_HALF:
            y = frame.max_y - height
        return RectResult(
            Rect(frame.x, y, frame.width, height),
            resulting_action=params.action,
        )


@dataclass(frozen=True)
class QuarterCalculation(RepeatedExecutionInThirds, Calculation):
    """A screen corner: half height, width cycling like the halves."""

    right: bool
    top: bool

    def calculate_rect(self, params: CalculationParams) -> RectResult:
        return _cycle.dispatch(self, params)

    def calculate_first_rect(self, params: CalculationParams) -> RectResult:
        return self.calculate_fractional_rect(params, 0.5)

    def calculate_fractional_rect(
        self, params: CalculationParams, fraction: float
    ) -> RectResult:
        frame = params.visible_frame
        width = float(math.floor(frame.width * fraction))
        height = float(math.floor(frame.height / 2.0))
        x = frame.max_x - width if self.right else frame.min_x
        y = frame.max_y - height if self.top else frame.min_y
        return RectResult(Rect(x, y, width, height), resulting_action=params.action)


class ThirdSpan(Enum):
    """Where a third sits along the split axis (visual order)."""

    START = "start"
    CENTER = "center"
    END = "end"


# (thirds, span) -> (landscape sub action, portrait sub action)
_THIRD_SUB_ACTIONS: dict[tuple[int, ThirdSpan], tuple[SubActionIdentifier, SubActionIdentifier]] = {
    (1, ThirdSpan.START): (SubActionIdentifier.LEFT_THIRD, SubActionIdentifier.TOP_THIRD),
    (1, ThirdSpan.CENTER): (
        SubActionIdentifier.CENTER_VERTICAL_THIRD,
        SubActionIdentifier.CENTER_HORIZONTAL_THIRD,
    ),
    (1, ThirdSpan.END): (SubActionIdentifier.RIGHT_THIRD, SubActionIdentifier.BOTTOM_THIRD),
    (2, ThirdSpan.START): (
        SubActionIdentifier.LEFT_TWO_THIRDS,
        SubActionIdentifier.TOP_TWO_THIRDS,
    ),
    (2, ThirdSpan.END): (
        SubActionIdentifier.RIGHT_TWO_THIRDS,
        SubActionIdentifier.BOTTOM_TWO_THIRDS,
    ),
}


@dataclass(frozen=True)
class ThirdCalculation(Calculation, OrientationAware):
    """One or two thirds of the screen.

    Landscape splits the width (left to right), portrait splits the height
    (top to bottom). Repeating the same action steps through ``order``
    using the sub action of the previous result, e.g. FIRST_THIRD goes
    left → center → right.

    Attributes:
        thirds: 1 or 2
        order: spans visited on repeated presses, first entry on a new action
    """

    thirds: int
    order: tuple[ThirdSpan, ...]

    def calculate_rect(self, params: CalculationParams) -> RectResult:
        return _orientation.dispatch(self, params)

    def landscape_rect(self, frame: Rect, params: CalculationParams) -> RectResult:
        span = self.next_span(params)
        width = float(math.floor(frame.width * self.thirds / 3.0))
        if span is ThirdSpan.START:
            x = frame.min_x
        elif span is ThirdSpan.CENTER:
            x = frame.min_x + math.floor(frame.width / 3.0)
        else:
            x = frame.max_x - width
        sub_action = _THIRD_SUB_ACTIONS[(self.thirds, span)][0]
        return RectResult(Rect(x, frame.y, width, frame.height), sub_action=sub_action)

    def portrait_rect(self, frame: Rect, params: CalculationParams) -> RectResult:
        span = self.next_span(params)
        height = float(math.floor(frame.height * self.thirds / 3.0))
        if span is ThirdSpan.START:
            y = frame.max_y - height
        elif span is ThirdSpan.CENTER:
            y = frame.min_y + math.floor(frame.height / 3.0)
        else:
            y = frame.min_y
        sub_action = _THIRD_SUB_ACTIONS[(self.thirds, span)][1]
        return RectResult(Rect(frame.x, y, frame.width, height), sub_action=sub_action)

    def next_span(self, params: CalculationParams) -> ThirdSpan:
        """Span to use for this press."""
        first = self.order[0]
        if not params.is_repeated_action or not params.settings.cycling_enabled:
            return first
        last_sub_action = params.last_action.sub_action
        if last_sub_action is None:
            return first

        for (thirds, span), sub_actions in _THIRD_SUB_ACTIONS.items():
            if thirds == self.thirds and last_sub_action in sub_actions and span in self.order:
                index = self.order.index(span)
                return self.order[(index + 1) % len(self.order)]
        return first


class CenterCalculation(Calculation):
    """Keep the window size and center it, shrinking to fit the frame.

    A window larger than the frame in both dimensions is maximized instead.
    """

    def calculate_rect(self, params: CalculationParams) -> RectResult:
        frame = params.visible_frame
        window = params.window.rect
        too_wide = window.width > frame.width
        too_tall = window.height > frame.height

        if too_wide and too_tall:
            return RectResult(frame, resulting_action=ActionIdentifier.MAXIMIZE)

        if too_tall:
            y, height = frame.min_y, frame.height
        else:
            y, height = frame.min_y + _round_half_up((frame.height - window.height) / 2), window.height

        if too_wide:
            x, width = frame.min_x, frame.width
        else:
            x, width = frame.min_x + _round_half_up((frame.width - window.width) / 2), window.width

        return RectResult(Rect(x, y, width, height))


def _round_half_up(value: float) -> float:
    return float(math.floor(value + 0.5))


# === Fourths & centered bands ===


def _centered_offset(length: float, size: float) -> float:
    return float(math.floor((length - size) / 2))


@dataclass(frozen=True)
class Segment:
    """A band of ``size`` out of ``parts`` equal parts along the split axis.

    ``offset`` counts parts from the left in landscape and from the top in
    portrait. A band touching the far edge is aligned to it; ``None``
    centers the band.
    """

    parts: int
    size: int
    offset: int | None
    landscape: SubActionIdentifier
    portrait: SubActionIdentifier

    def length(self, total: float) -> float:
        """Band length along an axis of ``total``, floored."""
        return float(math.floor(total * self.size / self.parts))

    def landscape_rect(self, frame: Rect) -> RectResult:
        width = self.length(frame.width)
        if self.offset is None:
            x = frame.min_x + _centered_offset(frame.width, width)
        elif self.offset + self.size == self.parts:
            x = frame.max_x - width
        else:
            x = frame.min_x + math.floor(frame.width / self.parts) * self.offset
        return RectResult(Rect(x, frame.y, width, frame.height), sub_action=self.landscape)

    def portrait_rect(self, frame: Rect) -> RectResult:
        height = self.length(frame.height)
        if self.offset is None:
            y = frame.min_y + _centered_offset(frame.height, height)
        elif self.offset + self.size == self.parts:
            y = frame.min_y
        else:
            y = frame.max_y - math.floor(frame.height / self.parts) * self.offset - height
        return RectResult(Rect(frame.x, y, frame.width, height), sub_action=self.portrait)


S = SubActionIdentifier

FIRST_FOURTH = Segment(4, 1, 0, S.LEFT_FOURTH, S.TOP_FOURTH)
SECOND_FOURTH = Segment(4, 1, 1, S.CENTER_LEFT_FOURTH, S.CENTER_TOP_FOURTH)
THIRD_FOURTH = Segment(4, 1, 2, S.CENTER_RIGHT_FOURTH, S.CENTER_BOTTOM_FOURTH)
LAST_FOURTH = Segment(4, 1, 3, S.RIGHT_FOURTH, S.BOTTOM_FOURTH)
FIRST_THREE_FOURTHS = Segment(4, 3, 0, S.LEFT_THREE_FOURTHS, S.TOP_THREE_FOURTHS)
LAST_THREE_FOURTHS = Segment(4, 3, 1, S.RIGHT_THREE_FOURTHS, S.BOTTOM_THREE_FOURTHS)
CENTER_THREE_FOURTHS = Segment(
    4, 3, None, S.CENTER_VERTICAL_THREE_FOURTHS, S.CENTER_HORIZONTAL_THREE_FOURTHS
)
CENTER_TWO_THIRDS = Segment(3, 2, None, S.CENTER_VERTICAL_THIRD, S.CENTER_HORIZONTAL_THIRD)
CENTER_HALF = Segment(2, 1, None, S.CENTER_VERTICAL_HALF, S.CENTER_HORIZONTAL_HALF)


@dataclass(frozen=True)
class SegmentCalculation(Calculation, OrientationAware):
    """Bands from a fixed table, stepping through ``order`` on repeat.

    The step is keyed on the previous result's sub action, so a repeated
    SECOND_FOURTH goes second fourth → last three fourths → center half.
    """

    order: tuple[Segment, ...]

    def calculate_rect(self, params: CalculationParams) -> RectResult:
        return _orientation.dispatch(self, params)

    def landscape_rect(self, frame: Rect, params: CalculationParams) -> RectResult:
        return self.next_segment(params).landscape_rect(frame)

    def portrait_rect(self, frame: Rect, params: CalculationParams) -> RectResult:
        return self.next_segment(params).portrait_rect(frame)

    def next_segment(self, params: CalculationParams) -> Segment:
        first = self.order[0]
        if not params.is_repeated_action or not params.settings.cycling_enabled:
            return first
        last_sub_action = params.last_action.sub_action
        for index, segment in enumerate(self.order):
            if last_sub_action in (segment.landscape, segment.portrait):
                return self.order[(index + 1) % len(self.order)]
        return first


class CenterHalfCalculation(RepeatedExecutionInThirds, Calculation):
    """Centered band, cycling its width (height in portrait) like the halves."""

    def calculate_rect(self, params: CalculationParams) -> RectResult:
        return _cycle.dispatch(self, params)

    def calculate_first_rect(self, params: CalculationParams) -> RectResult:
        return self.calculate_fractional_rect(params, 0.5)

    def calculate_fractional_rect(
        self, params: CalculationParams, fraction: float
    ) -> RectResult:
        frame = params.visible_frame
        if params.is_landscape:
            width = float(math.floor(frame.width * fraction))
            x = frame.min_x + _centered_offset(frame.width, width)
            rect = Rect(x, frame.y, width, frame.height)
            sub_action = CENTER_HALF.landscape
        else:
            height = float(math.floor(frame.height * fraction))
            y = frame.min_y + _centered_offset(frame.height, height)
            rect = Rect(frame.x, y, frame.width, height)
            sub_action = CENTER_HALF.portrait
        return RectResult(rect, resulting_action=params.action, sub_action=sub_action)


# === Maximize variants ===


def _valid_scale(value: float) -> float:
    # out of range falls back to the default scale
    return value if 0 < value <= 1 else AlmostMaximizeCalculation.default_scale


class AlmostMaximizeCalculation(Calculation):
    """Centered rect covering ``almost_maximize_width/height`` of the frame."""

    default_scale = 0.9

    def calculate_rect(self, params: CalculationParams) -> RectResult:
        frame = params.visible_frame
        settings = params.settings
        width = _round_half_up(frame.width * _valid_scale(settings.almost_maximize_width))
        height = _round_half_up(frame.height * _valid_scale(settings.almost_maximize_height))
        x = frame.min_x + _round_half_up((frame.width - width) / 2)
        y = frame.min_y + _round_half_up((frame.height - height) / 2)
        return RectResult(Rect(x, y, width, height))


class MaximizeHeightCalculation(Calculation):
    """Stretch the window to the full frame height, keeping x and width."""

    def calculate_rect(self, params: CalculationParams) -> RectResult:
        frame = params.visible_frame
        window = params.window.rect
        return RectResult(Rect(window.x, frame.min_y, window.width, frame.height))
