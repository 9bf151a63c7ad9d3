"""半屏、三分屏、四角、最大化、居中测试"""

import pytest

from windowcalc.calculation import (
    AlmostMaximizeCalculation,
    CalculationParams,
    CalculationSettings,
    CenterCalculation,
    CenterHalfCalculation,
    LastActionInfo,
    LeftRightHalfCalculation,
    MaximizeCalculation,
    MaximizeHeightCalculation,
    QuarterCalculation,
    SegmentCalculation,
    ThirdCalculation,
    ThirdSpan,
    TopBottomHalfCalculation,
    WindowInfo,
)
from windowcalc.calculation.placements import (
    CENTER_HALF,
    CENTER_THREE_FOURTHS,
    CENTER_TWO_THIRDS,
    FIRST_FOURTH,
    FIRST_THREE_FOURTHS,
    LAST_FOURTH,
    LAST_THREE_FOURTHS,
    SECOND_FOURTH,
    THIRD_FOURTH,
)
from windowcalc.core import ActionIdentifier, Rect, SubActionIdentifier

FRAME = Rect(0, 0, 1200, 800)
PORTRAIT = Rect(0, 0, 800, 1200)


def make_params(
    action: ActionIdentifier,
    frame: Rect = FRAME,
    last: LastActionInfo | None = None,
    window: Rect = Rect(100, 100, 400, 300),
    cycling_enabled: bool = True,
    **settings,
) -> CalculationParams:
    return CalculationParams(
        window=WindowInfo(id=42, rect=window),
        visible_frame=frame,
        action=action,
        last_action=last,
        settings=CalculationSettings(cycling_enabled=cycling_enabled, **settings),
    )


def repeated(action: ActionIdentifier, count: int = 1, sub_action=None) -> LastActionInfo:
    return LastActionInfo(action=action, rect=Rect.zero(), sub_action=sub_action, count=count)


class TestMaximize:
    def test_fills_frame(self):
        result = MaximizeCalculation().calculate_rect(make_params(ActionIdentifier.MAXIMIZE))
        assert result.rect == FRAME
        assert result.sub_action == SubActionIdentifier.MAXIMIZE


class TestHalves:
    """半屏与宽度循环测试"""

    def test_left_half(self):
        result = LeftRightHalfCalculation().calculate_rect(make_params(ActionIdentifier.LEFT_HALF))
        assert result.rect == Rect(0, 0, 600, 800)
        assert result.resulting_action == ActionIdentifier.LEFT_HALF

    def test_right_half_is_right_aligned(self):
        result = LeftRightHalfCalculation().calculate_rect(make_params(ActionIdentifier.RIGHT_HALF))
        assert result.rect == Rect(600, 0, 600, 800)

    def test_repeat_cycles_width(self):
        """第二次按下：count=1 -> index 2 -> 1/3"""
        params = make_params(
            ActionIdentifier.RIGHT_HALF, last=repeated(ActionIdentifier.RIGHT_HALF, count=1)
        )
        result = LeftRightHalfCalculation().calculate_rect(params)
        assert result.rect == Rect(800, 0, 400, 800)

    def test_repeat_with_cycling_disabled(self):
        params = make_params(
            ActionIdentifier.LEFT_HALF,
            last=repeated(ActionIdentifier.LEFT_HALF, count=1),
            cycling_enabled=False,
        )
        assert LeftRightHalfCalculation().calculate_rect(params).rect == Rect(0, 0, 600, 800)

    def test_top_half_is_top_aligned(self):
        result = TopBottomHalfCalculation().calculate_rect(make_params(ActionIdentifier.TOP_HALF))
        assert result.rect == Rect(0, 400, 1200, 400)

    def test_bottom_half_two_thirds(self):
        """count=3 -> index 1 -> 2/3"""
        params = make_params(
            ActionIdentifier.BOTTOM_HALF, last=repeated(ActionIdentifier.BOTTOM_HALF, count=3)
        )
        result = TopBottomHalfCalculation().calculate_rect(params)
        assert result.rect == Rect(0, 0, 1200, 533)


class TestQuarters:
    """四角测试"""

    @pytest.mark.parametrize(
        "right,top,expected",
        [
            (False, True, Rect(0, 400, 600, 400)),
            (True, True, Rect(600, 400, 600, 400)),
            (False, False, Rect(0, 0, 600, 400)),
            (True, False, Rect(600, 0, 600, 400)),
        ],
    )
    def test_first_press(self, right, top, expected):
        calc = QuarterCalculation(right=right, top=top)
        assert calc.calculate_rect(make_params(ActionIdentifier.TOP_LEFT)).rect == expected

    def test_repeat_cycles_width_only(self):
        calc = QuarterCalculation(right=True, top=False)
        params = make_params(
            ActionIdentifier.BOTTOM_RIGHT, last=repeated(ActionIdentifier.BOTTOM_RIGHT, count=1)
        )
        assert calc.calculate_rect(params).rect == Rect(800, 0, 400, 400)


FIRST_THIRD = ThirdCalculation(1, (ThirdSpan.START, ThirdSpan.CENTER, ThirdSpan.END))
LAST_TWO_THIRDS = ThirdCalculation(2, (ThirdSpan.END, ThirdSpan.START))


class TestThirds:
    """三分屏测试"""

    def test_first_third_landscape(self):
        result = FIRST_THIRD.calculate_rect(make_params(ActionIdentifier.FIRST_THIRD))
        assert result.rect == Rect(0, 0, 400, 800)
        assert result.sub_action == SubActionIdentifier.LEFT_THIRD

    def test_first_third_portrait_is_top(self):
        result = FIRST_THIRD.calculate_rect(make_params(ActionIdentifier.FIRST_THIRD, PORTRAIT))
        assert result.rect == Rect(0, 800, 800, 400)
        assert result.sub_action == SubActionIdentifier.TOP_THIRD

    def test_center_third(self):
        calc = ThirdCalculation(1, (ThirdSpan.CENTER,))
        result = calc.calculate_rect(make_params(ActionIdentifier.CENTER_THIRD))
        assert result.rect == Rect(400, 0, 400, 800)
        assert result.sub_action == SubActionIdentifier.CENTER_VERTICAL_THIRD

    def test_repeat_steps_through_positions(self):
        """FIRST_THIRD 重复：left -> center -> right -> left"""
        last = repeated(ActionIdentifier.FIRST_THIRD, sub_action=SubActionIdentifier.LEFT_THIRD)
        result = FIRST_THIRD.calculate_rect(make_params(ActionIdentifier.FIRST_THIRD, last=last))
        assert result.sub_action == SubActionIdentifier.CENTER_VERTICAL_THIRD

        last = repeated(ActionIdentifier.FIRST_THIRD, sub_action=result.sub_action)
        result = FIRST_THIRD.calculate_rect(make_params(ActionIdentifier.FIRST_THIRD, last=last))
        assert result.sub_action == SubActionIdentifier.RIGHT_THIRD
        assert result.rect == Rect(800, 0, 400, 800)

        last = repeated(ActionIdentifier.FIRST_THIRD, sub_action=result.sub_action)
        result = FIRST_THIRD.calculate_rect(make_params(ActionIdentifier.FIRST_THIRD, last=last))
        assert result.sub_action == SubActionIdentifier.LEFT_THIRD

    def test_no_position_cycling_when_disabled(self):
        last = repeated(ActionIdentifier.FIRST_THIRD, sub_action=SubActionIdentifier.LEFT_THIRD)
        params = make_params(ActionIdentifier.FIRST_THIRD, last=last, cycling_enabled=False)
        assert FIRST_THIRD.calculate_rect(params).sub_action == SubActionIdentifier.LEFT_THIRD

    def test_last_two_thirds(self):
        result = LAST_TWO_THIRDS.calculate_rect(make_params(ActionIdentifier.LAST_TWO_THIRDS))
        assert result.rect == Rect(400, 0, 800, 800)
        assert result.sub_action == SubActionIdentifier.RIGHT_TWO_THIRDS

    def test_last_two_thirds_portrait_is_bottom(self):
        result = LAST_TWO_THIRDS.calculate_rect(
            make_params(ActionIdentifier.LAST_TWO_THIRDS, PORTRAIT)
        )
        assert result.rect == Rect(0, 0, 800, 800)
        assert result.sub_action == SubActionIdentifier.BOTTOM_TWO_THIRDS

    def test_last_two_thirds_toggles(self):
        last = repeated(
            ActionIdentifier.LAST_TWO_THIRDS, sub_action=SubActionIdentifier.RIGHT_TWO_THIRDS
        )
        result = LAST_TWO_THIRDS.calculate_rect(
            make_params(ActionIdentifier.LAST_TWO_THIRDS, last=last)
        )
        assert result.rect == Rect(0, 0, 800, 800)
        assert result.sub_action == SubActionIdentifier.LEFT_TWO_THIRDS


class TestCenter:
    """居中测试"""

    def test_keeps_size(self):
        result = CenterCalculation().calculate_rect(make_params(ActionIdentifier.CENTER))
        assert result.rect == Rect(400, 250, 400, 300)

    def test_rounds_half_up(self):
        result = CenterCalculation().calculate_rect(
            make_params(ActionIdentifier.CENTER, window=Rect(0, 0, 401, 301))
        )
        assert result.rect == Rect(400, 250, 401, 301)

    def test_too_tall_is_clamped(self):
        result = CenterCalculation().calculate_rect(
            make_params(ActionIdentifier.CENTER, window=Rect(0, 0, 400, 1000))
        )
        assert result.rect == Rect(400, 0, 400, 800)

    def test_too_large_maximizes(self):
        """宽高都超出时改为最大化"""
        result = CenterCalculation().calculate_rect(
            make_params(ActionIdentifier.CENTER, window=Rect(0, 0, 2000, 1000))
        )
        assert result.rect == FRAME
        assert result.resulting_action == ActionIdentifier.MAXIMIZE


S = SubActionIdentifier
A = ActionIdentifier


class TestFourths:
    """四分屏与四分之三测试"""

    @pytest.mark.parametrize(
        "segment,landscape,portrait",
        [
            (FIRST_FOURTH, Rect(0, 0, 300, 800), Rect(0, 900, 800, 300)),
            (SECOND_FOURTH, Rect(300, 0, 300, 800), Rect(0, 600, 800, 300)),
            (THIRD_FOURTH, Rect(600, 0, 300, 800), Rect(0, 300, 800, 300)),
            (LAST_FOURTH, Rect(900, 0, 300, 800), Rect(0, 0, 800, 300)),
            (FIRST_THREE_FOURTHS, Rect(0, 0, 900, 800), Rect(0, 300, 800, 900)),
            (LAST_THREE_FOURTHS, Rect(300, 0, 900, 800), Rect(0, 0, 800, 900)),
            (CENTER_THREE_FOURTHS, Rect(150, 0, 900, 800), Rect(0, 150, 800, 900)),
        ],
    )
    def test_geometry(self, segment, landscape, portrait):
        calc = SegmentCalculation((segment,))
        assert calc.calculate_rect(make_params(A.FIRST_FOURTH)).rect == landscape
        assert calc.calculate_rect(make_params(A.FIRST_FOURTH, PORTRAIT)).rect == portrait

    def test_sub_actions_follow_orientation(self):
        calc = SegmentCalculation((SECOND_FOURTH,))
        assert calc.calculate_rect(make_params(A.SECOND_FOURTH)).sub_action == S.CENTER_LEFT_FOURTH
        assert (
            calc.calculate_rect(make_params(A.SECOND_FOURTH, PORTRAIT)).sub_action
            == S.CENTER_TOP_FOURTH
        )

    def test_last_fourth_is_right_aligned_on_uneven_width(self):
        calc = SegmentCalculation((LAST_FOURTH,))
        result = calc.calculate_rect(make_params(A.LAST_FOURTH, Rect(0, 0, 1001, 800)))
        assert result.rect == Rect(751, 0, 250, 800)

    def test_first_fourth_walks_across(self):
        """FIRST_FOURTH 重复：从左到右依次移动，最后回到第一格"""
        calc = SegmentCalculation((FIRST_FOURTH, SECOND_FOURTH, THIRD_FOURTH, LAST_FOURTH))
        sub_action = S.LEFT_FOURTH
        seen = []
        for _ in range(4):
            last = repeated(A.FIRST_FOURTH, sub_action=sub_action)
            sub_action = calc.calculate_rect(make_params(A.FIRST_FOURTH, last=last)).sub_action
            seen.append(sub_action)
        assert seen == [S.CENTER_LEFT_FOURTH, S.CENTER_RIGHT_FOURTH, S.RIGHT_FOURTH, S.LEFT_FOURTH]

    def test_second_fourth_grows(self):
        """SECOND_FOURTH 重复：-> 右侧四分之三 -> 居中一半"""
        calc = SegmentCalculation((SECOND_FOURTH, LAST_THREE_FOURTHS, CENTER_HALF))

        last = repeated(A.SECOND_FOURTH, sub_action=S.CENTER_LEFT_FOURTH)
        result = calc.calculate_rect(make_params(A.SECOND_FOURTH, last=last))
        assert result.rect == Rect(300, 0, 900, 800)
        assert result.sub_action == S.RIGHT_THREE_FOURTHS

        last = repeated(A.SECOND_FOURTH, sub_action=result.sub_action)
        result = calc.calculate_rect(make_params(A.SECOND_FOURTH, last=last))
        assert result.rect == Rect(300, 0, 600, 800)
        assert result.sub_action == S.CENTER_VERTICAL_HALF

    def test_second_fourth_grows_in_portrait(self):
        calc = SegmentCalculation((SECOND_FOURTH, LAST_THREE_FOURTHS, CENTER_HALF))
        last = repeated(A.SECOND_FOURTH, sub_action=S.CENTER_TOP_FOURTH)
        result = calc.calculate_rect(make_params(A.SECOND_FOURTH, PORTRAIT, last=last))
        assert result.rect == Rect(0, 0, 800, 900)
        assert result.sub_action == S.BOTTOM_THREE_FOURTHS

    def test_three_fourths_toggle(self):
        calc = SegmentCalculation((FIRST_THREE_FOURTHS, LAST_THREE_FOURTHS))
        last = repeated(A.FIRST_THREE_FOURTHS, sub_action=S.LEFT_THREE_FOURTHS)
        result = calc.calculate_rect(make_params(A.FIRST_THREE_FOURTHS, last=last))
        assert result.sub_action == S.RIGHT_THREE_FOURTHS

    def test_no_stepping_when_cycling_disabled(self):
        calc = SegmentCalculation((FIRST_FOURTH, SECOND_FOURTH))
        last = repeated(A.FIRST_FOURTH, sub_action=S.LEFT_FOURTH)
        params = make_params(A.FIRST_FOURTH, last=last, cycling_enabled=False)
        assert calc.calculate_rect(params).sub_action == S.LEFT_FOURTH

    def test_different_action_starts_over(self):
        calc = SegmentCalculation((FIRST_FOURTH, SECOND_FOURTH))
        last = repeated(A.LAST_FOURTH, sub_action=S.LEFT_FOURTH)
        assert calc.calculate_rect(make_params(A.FIRST_FOURTH, last=last)).sub_action == (
            S.LEFT_FOURTH
        )


class TestCenteredBands:
    """居中条带测试"""

    def test_center_two_thirds(self):
        calc = SegmentCalculation((CENTER_TWO_THIRDS,))
        result = calc.calculate_rect(make_params(A.CENTER_TWO_THIRDS))
        assert result.rect == Rect(200, 0, 800, 800)
        assert result.sub_action == S.CENTER_VERTICAL_THIRD

    def test_center_two_thirds_portrait(self):
        calc = SegmentCalculation((CENTER_TWO_THIRDS,))
        result = calc.calculate_rect(make_params(A.CENTER_TWO_THIRDS, PORTRAIT))
        assert result.rect == Rect(0, 200, 800, 800)
        assert result.sub_action == S.CENTER_HORIZONTAL_THIRD

    def test_center_half(self):
        result = CenterHalfCalculation().calculate_rect(make_params(A.CENTER_HALF))
        assert result.rect == Rect(300, 0, 600, 800)
        assert result.sub_action == S.CENTER_VERTICAL_HALF
        assert result.resulting_action == A.CENTER_HALF

    def test_center_half_portrait(self):
        result = CenterHalfCalculation().calculate_rect(make_params(A.CENTER_HALF, PORTRAIT))
        assert result.rect == Rect(0, 300, 800, 600)
        assert result.sub_action == S.CENTER_HORIZONTAL_HALF

    def test_center_half_cycles_width(self):
        """第二次按下：count=1 -> index 2 -> 1/3"""
        params = make_params(A.CENTER_HALF, last=repeated(A.CENTER_HALF, count=1))
        result = CenterHalfCalculation().calculate_rect(params)
        assert result.rect == Rect(400, 0, 400, 800)


class TestMaximizeVariants:
    """almostMaximize / maximizeHeight 测试"""

    def test_almost_maximize_default_scale(self):
        result = AlmostMaximizeCalculation().calculate_rect(make_params(A.ALMOST_MAXIMIZE))
        assert result.rect == Rect(60, 40, 1080, 720)

    def test_almost_maximize_custom_scale(self):
        params = make_params(
            A.ALMOST_MAXIMIZE, almost_maximize_width=0.5, almost_maximize_height=1.0
        )
        assert AlmostMaximizeCalculation().calculate_rect(params).rect == Rect(300, 0, 600, 800)

    @pytest.mark.parametrize("scale", [0.0, -0.5, 1.5])
    def test_almost_maximize_invalid_scale_uses_default(self, scale):
        params = make_params(
            A.ALMOST_MAXIMIZE, almost_maximize_width=scale, almost_maximize_height=scale
        )
        assert AlmostMaximizeCalculation().calculate_rect(params).rect == Rect(60, 40, 1080, 720)

    def test_maximize_height_keeps_horizontal_position(self):
        result = MaximizeHeightCalculation().calculate_rect(make_params(A.MAXIMIZE_HEIGHT))
        assert result.rect == Rect(100, 0, 400, 800)
