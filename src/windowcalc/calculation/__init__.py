"""Calculation 模块

窗口位置计算引擎：
- types: 输入输出数据类型（CalculationParams, RectResult 等）
- base: Calculation 接口与分派策略（横竖屏、尺寸循环）
- grid: 网格单元格计算（ninths, eighths, corner thirds, sixths）
- placements: 半屏、三分屏、四分屏、四角、居中条带、最大化、居中
- registry: action -> calculation 注册表与 calculate 入口
"""

from .types import (
    WindowInfo,
    LastActionInfo,
    CalculationSettings,
    CalculationParams,
    RectResult,
)
from .base import (
    Calculation,
    OrientationAware,
    RepeatedExecution,
    RepeatedExecutionInThirds,
    OrientationDispatch,
    CycleDispatch,
    CycleState,
)
from .grid import (
    GridType,
    GridPosition,
    GridCalculation,
    CyclingGridCalculation,
    GRID_PLACEMENTS,
    GRID_CALCULATIONS,
    grid_calculation,
    next_grid_cell,
    iter_cells,
    tiling_fractions,
)
from .placements import (
    MaximizeCalculation,
    LeftRightHalfCalculation,
    TopBottomHalfCalculation,
    QuarterCalculation,
    ThirdCalculation,
    ThirdSpan,
    Segment,
    SegmentCalculation,
    CenterHalfCalculation,
    AlmostMaximizeCalculation,
    MaximizeHeightCalculation,
    CenterCalculation,
)
from .registry import (
    CALCULATIONS,
    UnsupportedActionError,
    calculate,
    get_calculation,
    supported_actions,
)

__all__ = [
    # Types
    "WindowInfo",
    "LastActionInfo",
    "CalculationSettings",
    "CalculationParams",
    "RectResult",
    # Interfaces & dispatch
    "Calculation",
    "OrientationAware",
    "RepeatedExecution",
    "RepeatedExecutionInThirds",
    "OrientationDispatch",
    "CycleDispatch",
    "CycleState",
    # Grid
    "GridType",
    "GridPosition",
    "GridCalculation",
    "CyclingGridCalculation",
    "GRID_PLACEMENTS",
    "GRID_CALCULATIONS",
    "grid_calculation",
    "next_grid_cell",
    "iter_cells",
    "tiling_fractions",
    # Placements
    "MaximizeCalculation",
    "LeftRightHalfCalculation",
    "TopBottomHalfCalculation",
    "QuarterCalculation",
    "ThirdCalculation",
    "ThirdSpan",
    "Segment",
    "SegmentCalculation",
    "CenterHalfCalculation",
    "AlmostMaximizeCalculation",
    "MaximizeHeightCalculation",
    "CenterCalculation",
    # Registry
    "CALCULATIONS",
    "UnsupportedActionError",
    "calculate",
    "get_calculation",
    "supported_actions",
]
