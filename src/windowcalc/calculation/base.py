"""Calculation 接口与分派策略

职责：
- Calculation: 所有计算的统一接口（calculate_rect）
- OrientationAware / RepeatedExecution: 可选能力接口
- OrientationDispatch: 按横竖屏分派
- CycleDispatch: 按重复次数分派（循环状态机）

计算实例通过组合策略对象获得能力，而不是继承默认实现：
    class LeftHalf(Calculation, RepeatedExecution):
        cycle = CycleDispatch()

        def calculate_rect(self, params):
            return self.cycle.dispatch(self, params)

循环状态完全来自 params.last_action，引擎在调用之间不保留任何状态。
"""

from abc import ABC, abstractmethod
from enum import Enum

from ..core.geometry import Rect
from ..telemetry import get_logger
from .types import CalculationParams, RectResult

logger = get_logger(__name__)


class Calculation(ABC):
    """窗口位置计算接口"""

    @abstractmethod
    def calculate_rect(self, params: CalculationParams) -> RectResult:
        """计算目标矩形

        对任意合法 params 必须返回结果；不支持的 action 应由调用方在调用前拒绝。
        """

    def calculate_first_rect(self, params: CalculationParams) -> RectResult:
        """首次执行的矩形，默认与 calculate_rect 相同"""
        return self.calculate_rect(params)


class OrientationAware(ABC):
    """横竖屏能力

    横屏通常按宽度划分（左/中/右），竖屏按高度划分（上/中/下）。
    """

    @abstractmethod
    def landscape_rect(self, frame: Rect, params: CalculationParams) -> RectResult:
        """横屏矩形"""

    @abstractmethod
    def portrait_rect(self, frame: Rect, params: CalculationParams) -> RectResult:
        """竖屏矩形"""


class RepeatedExecution(ABC):
    """重复执行能力（尺寸循环）"""

    @abstractmethod
    def calculate_first_rect(self, params: CalculationParams) -> RectResult:
        """首次执行的矩形"""

    @abstractmethod
    def calculate_fractional_rect(
        self, params: CalculationParams, fraction: float
    ) -> RectResult:
        """占屏幕 fraction 比例时的矩形"""


# 三分之一循环只是语义标记，行为与 RepeatedExecution 完全相同
RepeatedExecutionInThirds = RepeatedExecution


class OrientationDispatch:
    """按 params.is_landscape 分派，不做其他判断"""

    def dispatch(self, target: OrientationAware, params: CalculationParams) -> RectResult:
        frame = params.visible_frame
        if params.is_landscape:
            return target.landscape_rect(frame, params)
        return target.portrait_rect(frame, params)


class CycleState(Enum):
    """循环状态机状态"""

    FIRST_EXECUTION = "first_execution"
    CYCLING_DISABLED = "cycling_disabled"
    CYCLING = "cycling"


class CycleDispatch:
    """按重复次数分派

    状态流转：
    - FIRST_EXECUTION（无 last_action 或 action 不同）→ calculate_first_rect
    - CYCLING_DISABLED（设置关闭循环）→ calculate_first_rect
    - CYCLING → repeated_rect
    """

    def state_for(self, params: CalculationParams) -> CycleState:
        if not params.is_repeated_action:
            return CycleState.FIRST_EXECUTION
        if not params.settings.cycling_enabled:
            return CycleState.CYCLING_DISABLED
        return CycleState.CYCLING

    def dispatch(self, target: RepeatedExecution, params: CalculationParams) -> RectResult:
        state = self.state_for(params)
        if state is CycleState.CYCLING:
            return self.repeated_rect(target, params)
        return target.calculate_first_rect(params)

    def repeated_rect(self, target: RepeatedExecution, params: CalculationParams) -> RectResult:
        """重复执行时的矩形

        repeat_count = last_action.count + 1，index = repeat_count % n。
        传入 count=1（第二次按下）时落在 index 2 % n。
        """
        sizes = params.settings.sorted_cycle_sizes
        if not sizes:
            # 开启循环但没有尺寸：退化为首次执行
            return target.calculate_first_rect(params)

        last_count = params.last_action.count if params.last_action else 0
        repeat_count = last_count + 1
        index = repeat_count % len(sizes)
        size = sizes[index]

        logger.debug(
            f"[Cycle] {params.action.value} repeat={repeat_count} -> {size.title} ({index}/{len(sizes)})"
        )
        return target.calculate_fractional_rect(params, size.fraction)
