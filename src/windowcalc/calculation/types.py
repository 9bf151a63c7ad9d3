"""Calculation 模块数据类型定义

包含：
- WindowInfo: 窗口快照
- LastActionInfo: 上一次 action 记录（用于循环判断）
- CalculationSettings: 影响计算的设置
- CalculationParams: 一次计算的完整输入
- RectResult: 计算结果

所有类型均为不可变值对象，引擎从不保留它们。
"""

from dataclasses import dataclass, field, replace
from typing import Hashable

from .. import config
from ..core.actions import ActionIdentifier, SubActionIdentifier
from ..core.cycle import DEFAULT_CYCLE_SIZES, CycleSize, sorted_for_cycle
from ..core.geometry import EdgeGaps, Rect


@dataclass(frozen=True)
class WindowInfo:
    """窗口快照

    Attributes:
        id: 窗口标识（由宿主应用提供，引擎不解析）
        rect: 当前窗口矩形（屏幕坐标）
    """

    id: Hashable
    rect: Rect


@dataclass(frozen=True)
class LastActionInfo:
    """上一次执行的 action

    由调用方根据上一次 RectResult 构造，引擎只读。
    count 从 1 开始；"重复 0 次" 用 last_action=None 表示，
    循环计算时按 count=0 处理（repeat_count=1）。

    Attributes:
        action: 上一次的 action
        rect: 上一次计算得到的矩形
        sub_action: 更细粒度的子 action
        count: 连续重复次数（>= 1）
    """

    action: ActionIdentifier
    rect: Rect
    sub_action: SubActionIdentifier | None = None
    count: int = 1

    def __post_init__(self):
        if self.count < 1:
            raise ValueError(f"LastActionInfo.count must be >= 1, got {self.count}")


@dataclass(frozen=True)
class CalculationSettings:
    """影响计算行为的设置

    Attributes:
        cycling_enabled: 重复执行时是否循环尺寸
        cycle_sizes: 参与循环的尺寸集合（顺序由 CycleSize 决定）
        gap_size: 窗口间距
        screen_edge_gaps: 屏幕边缘间距
        almost_maximize_width: almostMaximize 宽度比例
        almost_maximize_height: almostMaximize 高度比例
    """

    cycling_enabled: bool = True
    cycle_sizes: frozenset[CycleSize] = DEFAULT_CYCLE_SIZES
    gap_size: float = 0.0
    screen_edge_gaps: EdgeGaps = field(default_factory=EdgeGaps.zero)
    almost_maximize_width: float = 0.9
    almost_maximize_height: float = 0.9

    def __post_init__(self):
        # 允许传入 set/list，统一为 frozenset
        object.__setattr__(self, "cycle_sizes", frozenset(self.cycle_sizes))

    @property
    def sorted_cycle_sizes(self) -> list[CycleSize]:
        """按循环顺序排列的尺寸"""
        return sorted_for_cycle(self.cycle_sizes)

    @classmethod
    def default(cls) -> "CalculationSettings":
        return cls()

    @classmethod
    def from_config(cls) -> "CalculationSettings":
        """从 config 模块构造设置"""
        return cls(
            cycling_enabled=config.CYCLING_ENABLED,
            cycle_sizes=CycleSize.from_bits(config.CYCLE_SIZES_BITS),
            gap_size=config.GAP_SIZE,
            screen_edge_gaps=EdgeGaps(
                top=config.SCREEN_EDGE_GAP_TOP,
                bottom=config.SCREEN_EDGE_GAP_BOTTOM,
                left=config.SCREEN_EDGE_GAP_LEFT,
                right=config.SCREEN_EDGE_GAP_RIGHT,
            ),
            almost_maximize_width=config.ALMOST_MAXIMIZE_WIDTH,
            almost_maximize_height=config.ALMOST_MAXIMIZE_HEIGHT,
        )


@dataclass(frozen=True)
class CalculationParams:
    """一次计算的完整输入

    Attributes:
        window: 被移动的窗口
        visible_frame: 屏幕可用区域（不含菜单栏、Dock）
        action: 请求的 action
        last_action: 上一次 action（用于循环判断）
        settings: 计算设置
    """

    window: WindowInfo
    visible_frame: Rect
    action: ActionIdentifier
    last_action: LastActionInfo | None = None
    settings: CalculationSettings = field(default_factory=CalculationSettings.default)

    @property
    def is_repeated_action(self) -> bool:
        """是否为同一 action 的重复执行"""
        if self.last_action is None:
            return False
        return self.last_action.action == self.action

    @property
    def is_landscape(self) -> bool:
        """屏幕是否为横屏（宽高相等视为横屏）"""
        return self.visible_frame.width >= self.visible_frame.height

    def with_action(self, action: ActionIdentifier) -> "CalculationParams":
        return replace(self, action=action)

    def with_visible_frame(self, frame: Rect) -> "CalculationParams":
        return replace(self, visible_frame=frame)


@dataclass(frozen=True)
class RectResult:
    """计算结果

    Attributes:
        rect: 目标矩形（Y 轴向上）
        resulting_action: 实际执行的 action（可能与请求不同）
        sub_action: 更细粒度的子 action
        next_action: 下一次按下同一快捷键时建议执行的 action
    """

    rect: Rect
    resulting_action: ActionIdentifier | None = None
    sub_action: SubActionIdentifier | None = None
    next_action: ActionIdentifier | None = None

    def to_last_action(
        self,
        action: ActionIdentifier,
        previous: LastActionInfo | None = None,
    ) -> LastActionInfo:
        """把结果折叠为下一次调用的 LastActionInfo

        Args:
            action: 本次请求的 action（resulting_action 优先）
            previous: 本次调用时传入的 last_action

        Returns:
            新的 LastActionInfo，同一 action 时 count 递增
        """
        performed = self.resulting_action or action
        count = 1
        if previous is not None and previous.action == performed:
            count = previous.count + 1
        return LastActionInfo(
            action=performed,
            rect=self.rect,
            sub_action=self.sub_action,
            count=count,
        )
