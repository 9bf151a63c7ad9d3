"""Grid 计算

把屏幕划分为网格，计算指定单元格的矩形。

网格类型（横屏 / 竖屏，列 × 行）：
| GridType      | 横屏 | 竖屏 | 单元格宽     | 单元格高     |
|---------------|------|------|--------------|--------------|
| NINTHS        | 3×3  | 3×3  | 1/3          | 1/3          |
| EIGHTHS       | 4×2  | 2×4  | 1/4 | 1/2    | 1/2 | 1/4    |
| CORNER_THIRDS | 2×2  | 2×2  | 2/3 | 1/2    | 1/2 | 2/3    |
| SIXTHS        | 3×2  | 2×3  | 1/3 | 1/2    | 1/2 | 1/3    |

CORNER_THIRDS 的单元格是 2/3 大小，列宽之和超过屏幕：第二列（第二行）
单元格按公式定位后超出 frame 的部分为 2 * cell - frame 尺寸，这是预期行为。

行号 0 是视觉上的最上一行；坐标 Y 轴向上，因此
y = frame.max_y - cell_height * (row + 1)。

所有具名单元格都来自 GRID_PLACEMENTS 表，不逐个手写。
重复执行时的单元格移动由 CyclingGridCalculation 包装完成。
"""

import math
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from ..core.actions import SubActionIdentifier
from ..core.geometry import Rect
from .base import Calculation, OrientationAware, OrientationDispatch
from .types import CalculationParams, RectResult


class GridType(Enum):
    """网格类型"""

    NINTHS = "ninths"
    EIGHTHS = "eighths"
    CORNER_THIRDS = "cornerThirds"
    SIXTHS = "sixths"

    # === 网格尺寸 ===

    def columns(self, is_landscape: bool) -> int:
        return _DIMENSIONS[self][0 if is_landscape else 2]

    def rows(self, is_landscape: bool) -> int:
        return _DIMENSIONS[self][1 if is_landscape else 3]

    def cell_width_fraction(self, is_landscape: bool) -> float:
        """单元格宽度占屏幕宽度的比例"""
        return _FRACTIONS[self][0 if is_landscape else 2]

    def cell_height_fraction(self, is_landscape: bool) -> float:
        """单元格高度占屏幕高度的比例"""
        return _FRACTIONS[self][1 if is_landscape else 3]

    # === 单元格绝对尺寸（向下取整，避免亚像素矩形）===

    def cell_width(self, screen_width: float, is_landscape: bool) -> float:
        if self is GridType.CORNER_THIRDS:
            return float(math.floor(screen_width * self.cell_width_fraction(is_landscape)))
        return float(math.floor(screen_width / self.columns(is_landscape)))

    def cell_height(self, screen_height: float, is_landscape: bool) -> float:
        if self is GridType.CORNER_THIRDS:
            return float(math.floor(screen_height * self.cell_height_fraction(is_landscape)))
        return float(math.floor(screen_height / self.rows(is_landscape)))


# (横屏列, 横屏行, 竖屏列, 竖屏行)
_DIMENSIONS: dict[GridType, tuple[int, int, int, int]] = {
    GridType.NINTHS: (3, 3, 3, 3),
    GridType.EIGHTHS: (4, 2, 2, 4),
    GridType.CORNER_THIRDS: (2, 2, 2, 2),
    GridType.SIXTHS: (3, 2, 2, 3),
}

# (横屏宽, 横屏高, 竖屏宽, 竖屏高)
_FRACTIONS: dict[GridType, tuple[float, float, float, float]] = {
    GridType.NINTHS: (1.0 / 3.0, 1.0 / 3.0, 1.0 / 3.0, 1.0 / 3.0),
    GridType.EIGHTHS: (0.25, 0.5, 0.5, 0.25),
    GridType.CORNER_THIRDS: (2.0 / 3.0, 0.5, 0.5, 2.0 / 3.0),
    GridType.SIXTHS: (1.0 / 3.0, 0.5, 0.5, 1.0 / 3.0),
}


@dataclass(frozen=True)
class GridPosition:
    """网格中的位置（列从左数，行从上数，均从 0 开始）"""

    column: int
    row: int


@dataclass(frozen=True)
class GridCalculation(Calculation, OrientationAware):
    """网格单元格计算

    横屏和竖屏可以使用不同的单元格位置（如 EIGHTHS 在竖屏时重新映射）。

    Attributes:
        grid_type: 网格类型
        landscape: 横屏位置
        portrait: 竖屏位置
        sub_action: 结果的 sub_action
        portrait_sub_action: 竖屏时的 sub_action（默认同 sub_action）
    """

    grid_type: GridType
    landscape: GridPosition
    portrait: GridPosition
    sub_action: SubActionIdentifier
    portrait_sub_action: SubActionIdentifier | None = None

    @classmethod
    def fixed(
        cls,
        grid_type: GridType,
        column: int,
        row: int,
        sub_action: SubActionIdentifier,
    ) -> "GridCalculation":
        """横竖屏位置相同的单元格"""
        position = GridPosition(column, row)
        return cls(grid_type, position, position, sub_action)

    def calculate_rect(self, params: CalculationParams) -> RectResult:
        return _orientation.dispatch(self, params)

    def landscape_rect(self, frame: Rect, params: CalculationParams) -> RectResult:
        return self.calculate_grid_rect(frame, self.landscape, is_landscape=True)

    def portrait_rect(self, frame: Rect, params: CalculationParams) -> RectResult:
        return self.calculate_grid_rect(frame, self.portrait, is_landscape=False)

    def calculate_grid_rect(
        self,
        frame: Rect,
        position: GridPosition,
        is_landscape: bool,
    ) -> RectResult:
        """计算指定单元格的矩形

        网格单元本身不参与循环，因此只返回 rect 与 sub_action。
        """
        cell_width = self.grid_type.cell_width(frame.width, is_landscape)
        cell_height = self.grid_type.cell_height(frame.height, is_landscape)

        x = frame.min_x + cell_width * position.column
        # Y 轴向上：第 0 行在最上方
        y = frame.max_y - cell_height * (position.row + 1)

        sub_action = self.sub_action
        if not is_landscape and self.portrait_sub_action is not None:
            sub_action = self.portrait_sub_action

        return RectResult(Rect(x, y, cell_width, cell_height), sub_action=sub_action)


_orientation = OrientationDispatch()


@dataclass(frozen=True)
class GridPlacement:
    """GRID_PLACEMENTS 表中的一行"""

    grid_type: GridType
    landscape: tuple[int, int]
    portrait: tuple[int, int]
    portrait_sub_action: SubActionIdentifier | None = None


S = SubActionIdentifier

# sub_action -> 网格描述（横屏 (列, 行), 竖屏 (列, 行)）
GRID_PLACEMENTS: dict[SubActionIdentifier, GridPlacement] = {
    # === Ninths (3×3) ===
    S.TOP_LEFT_NINTH: GridPlacement(GridType.NINTHS, (0, 0), (0, 0)),
    S.TOP_CENTER_NINTH: GridPlacement(GridType.NINTHS, (1, 0), (1, 0)),
    S.TOP_RIGHT_NINTH: GridPlacement(GridType.NINTHS, (2, 0), (2, 0)),
    S.MIDDLE_LEFT_NINTH: GridPlacement(GridType.NINTHS, (0, 1), (0, 1)),
    S.MIDDLE_CENTER_NINTH: GridPlacement(GridType.NINTHS, (1, 1), (1, 1)),
    S.MIDDLE_RIGHT_NINTH: GridPlacement(GridType.NINTHS, (2, 1), (2, 1)),
    S.BOTTOM_LEFT_NINTH: GridPlacement(GridType.NINTHS, (0, 2), (0, 2)),
    S.BOTTOM_CENTER_NINTH: GridPlacement(GridType.NINTHS, (1, 2), (1, 2)),
    S.BOTTOM_RIGHT_NINTH: GridPlacement(GridType.NINTHS, (2, 2), (2, 2)),
    # === Eighths (4×2 横屏, 2×4 竖屏) ===
    S.TOP_LEFT_EIGHTH: GridPlacement(GridType.EIGHTHS, (0, 0), (0, 0)),
    S.TOP_CENTER_LEFT_EIGHTH: GridPlacement(GridType.EIGHTHS, (1, 0), (0, 1)),
    S.TOP_CENTER_RIGHT_EIGHTH: GridPlacement(GridType.EIGHTHS, (2, 0), (0, 2)),
    S.TOP_RIGHT_EIGHTH: GridPlacement(GridType.EIGHTHS, (3, 0), (0, 3)),
    S.BOTTOM_LEFT_EIGHTH: GridPlacement(GridType.EIGHTHS, (0, 1), (1, 0)),
    S.BOTTOM_CENTER_LEFT_EIGHTH: GridPlacement(GridType.EIGHTHS, (1, 1), (1, 1)),
    S.BOTTOM_CENTER_RIGHT_EIGHTH: GridPlacement(GridType.EIGHTHS, (2, 1), (1, 2)),
    S.BOTTOM_RIGHT_EIGHTH: GridPlacement(GridType.EIGHTHS, (3, 1), (1, 3)),
    # === Corner Thirds (2×2, 2/3 大小) ===
    S.TOP_LEFT_THIRD: GridPlacement(GridType.CORNER_THIRDS, (0, 0), (0, 0)),
    S.TOP_RIGHT_THIRD: GridPlacement(GridType.CORNER_THIRDS, (1, 0), (1, 0)),
    S.BOTTOM_LEFT_THIRD: GridPlacement(GridType.CORNER_THIRDS, (0, 1), (0, 1)),
    S.BOTTOM_RIGHT_THIRD: GridPlacement(GridType.CORNER_THIRDS, (1, 1), (1, 1)),
    # === Sixths (3×2 横屏, 2×3 竖屏) ===
    S.TOP_LEFT_SIXTH_LANDSCAPE: GridPlacement(
        GridType.SIXTHS, (0, 0), (0, 0), S.TOP_LEFT_SIXTH_PORTRAIT
    ),
    S.TOP_CENTER_SIXTH_LANDSCAPE: GridPlacement(
        GridType.SIXTHS, (1, 0), (0, 1), S.LEFT_CENTER_SIXTH_PORTRAIT
    ),
    S.TOP_RIGHT_SIXTH_LANDSCAPE: GridPlacement(
        GridType.SIXTHS, (2, 0), (1, 0), S.TOP_RIGHT_SIXTH_PORTRAIT
    ),
    S.BOTTOM_LEFT_SIXTH_LANDSCAPE: GridPlacement(
        GridType.SIXTHS, (0, 1), (0, 2), S.BOTTOM_LEFT_SIXTH_PORTRAIT
    ),
    S.BOTTOM_CENTER_SIXTH_LANDSCAPE: GridPlacement(
        GridType.SIXTHS, (1, 1), (1, 1), S.RIGHT_CENTER_SIXTH_PORTRAIT
    ),
    S.BOTTOM_RIGHT_SIXTH_LANDSCAPE: GridPlacement(
        GridType.SIXTHS, (2, 1), (1, 2), S.BOTTOM_RIGHT_SIXTH_PORTRAIT
    ),
}


def _build_calculations() -> dict[SubActionIdentifier, GridCalculation]:
    return {
        sub_action: GridCalculation(
            grid_type=placement.grid_type,
            landscape=GridPosition(*placement.landscape),
            portrait=GridPosition(*placement.portrait),
            sub_action=sub_action,
            portrait_sub_action=placement.portrait_sub_action,
        )
        for sub_action, placement in GRID_PLACEMENTS.items()
    }


GRID_CALCULATIONS: dict[SubActionIdentifier, GridCalculation] = _build_calculations()


def _index_cells() -> tuple[
    dict[tuple[GridType, bool, GridPosition], GridCalculation],
    dict[SubActionIdentifier, GridCalculation],
]:
    cells = {}
    owners = {}
    for calc in GRID_CALCULATIONS.values():
        cells[(calc.grid_type, True, calc.landscape)] = calc
        cells[(calc.grid_type, False, calc.portrait)] = calc
        owners[calc.sub_action] = calc
        if calc.portrait_sub_action is not None:
            owners[calc.portrait_sub_action] = calc
    return cells, owners


# (网格类型, 是否横屏, 位置) -> 单元格；横竖屏 sub_action -> 单元格
_CELLS, _OWNERS = _index_cells()


def grid_calculation(sub_action: SubActionIdentifier) -> GridCalculation:
    """按 sub_action 取具名单元格计算

    Raises:
        KeyError: sub_action 不是网格单元格
    """
    return GRID_CALCULATIONS[sub_action]


def iter_cells(grid_type: GridType, is_landscape: bool) -> Iterator[GridPosition]:
    """按行遍历网格所有位置"""
    for row in range(grid_type.rows(is_landscape)):
        for column in range(grid_type.columns(is_landscape)):
            yield GridPosition(column, row)


def tiling_fractions(grid_type: GridType, is_landscape: bool) -> tuple[float, float]:
    """(所有列宽比例之和, 所有行高比例之和)

    平铺网格两者都为 1.0；CORNER_THIRDS 单元格超尺寸，和大于 1。
    """
    width = grid_type.columns(is_landscape) * grid_type.cell_width_fraction(is_landscape)
    height = grid_type.rows(is_landscape) * grid_type.cell_height_fraction(is_landscape)
    return width, height


# === 重复执行时的单元格移动 ===


def next_grid_cell(
    sub_action: SubActionIdentifier | None,
    grid_type: GridType,
    is_landscape: bool,
    step: int = 1,
) -> GridCalculation | None:
    """sub_action 所在单元格按阅读顺序移动 step 格后的单元格

    阅读顺序为当前方向下逐行、从左到右，首尾相接。

    Returns:
        目标单元格；sub_action 不属于该网格类型时返回 None
    """
    owner = _OWNERS.get(sub_action)
    if owner is None or owner.grid_type is not grid_type:
        return None

    ring = list(iter_cells(grid_type, is_landscape))
    position = owner.landscape if is_landscape else owner.portrait
    index = ring.index(position)
    return _CELLS[(grid_type, is_landscape, ring[(index + step) % len(ring)])]


@dataclass(frozen=True)
class CyclingGridCalculation(Calculation):
    """重复执行同一 action 时移动到相邻单元格

    单元格本身不感知循环；首次执行、关闭循环或上一次 sub_action
    不在同一网格时直接使用 cell。

    Attributes:
        cell: 首次执行的单元格
        step: 每次重复移动的格数（负数为反向）
    """

    cell: GridCalculation
    step: int = 1

    def calculate_rect(self, params: CalculationParams) -> RectResult:
        if params.is_repeated_action and params.settings.cycling_enabled:
            target = next_grid_cell(
                params.last_action.sub_action,
                self.cell.grid_type,
                params.is_landscape,
                self.step,
            )
            if target is not None:
                return target.calculate_rect(params)
        return self.cell.calculate_rect(params)
