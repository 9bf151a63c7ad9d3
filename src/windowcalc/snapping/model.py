"""SnapAreaModel - 拖拽区域配置解析与旧版迁移

职责：
1. 为 (屏幕方向, 区域) 解析生效的 SnapAreaConfig（覆盖表优先，否则默认表）
2. 写入/删除覆盖条目并立即持久化
3. 一次性迁移旧版设置（sixths 开关、忽略区域 bitmask）

覆盖表持久化格式（每个方向一个 key）：
    {"1": {"action": "topLeft"}, "7": {"compound": -4}, "2": {}}
空对象表示该区域被显式禁用。
"""

import threading
from collections.abc import Callable
from typing import Any

from .. import config
from ..core.actions import ActionIdentifier
from ..persistence import SettingsStore, SnapAreaConfigModel
from ..telemetry import get_logger, metrics
from .defaults import default_table
from .types import (
    DIRECTIONAL_OPTIONS,
    CompoundSnapArea,
    Directional,
    DisplayOrientation,
    SnapAreaConfig,
    SnapAreaOption,
)

logger = get_logger(__name__)

_TABLE_KEYS = {
    DisplayOrientation.LANDSCAPE: config.KEY_LANDSCAPE_SNAP_AREAS,
    DisplayOrientation.PORTRAIT: config.KEY_PORTRAIT_SNAP_AREAS,
}


def encode_table(table: dict[Directional, SnapAreaConfig]) -> dict[str, dict[str, Any]]:
    """覆盖表 -> 可 JSON 序列化的 dict"""
    return {str(int(zone)): entry.to_dict() for zone, entry in sorted(table.items())}


def decode_table(raw: Any) -> dict[Directional, SnapAreaConfig]:
    """持久化数据 -> 覆盖表

    Raises:
        ValueError: 结构错误、未知区域、未知 action/compound、或同时设置两者
    """
    if not isinstance(raw, dict):
        raise ValueError(f"snap area table must be an object, got {type(raw).__name__}")

    table: dict[Directional, SnapAreaConfig] = {}
    for key, value in raw.items():
        zone = Directional(int(key))
        if zone is Directional.C:
            raise ValueError("center zone cannot be configured")
        entry = SnapAreaConfigModel.model_validate(value)
        table[zone] = SnapAreaConfig.from_dict(entry.model_dump(exclude_none=True))
    return table


class SnapAreaModel:
    """拖拽区域配置

    显式上下文对象，不使用全局单例；所有写操作串行化在同一把锁上。

    Args:
        store: 设置存储
        portrait_display_connected: 返回当前是否连接竖屏显示器
    """

    def __init__(
        self,
        store: SettingsStore,
        portrait_display_connected: Callable[[], bool] | None = None,
    ):
        self.store = store
        self._portrait_display_connected = portrait_display_connected or (lambda: False)
        self._lock = threading.RLock()

    # === 查询 ===

    def resolve(
        self, orientation: DisplayOrientation, zone: Directional
    ) -> SnapAreaConfig | None:
        """区域的生效配置

        覆盖表中存在条目时原样返回（包括 unconfigured），否则返回默认配置。
        中心区域始终返回 None。
        """
        if zone is Directional.C:
            return None
        overrides = self.overrides(orientation)
        if zone in overrides:
            return overrides[zone]
        return default_table(orientation).get(zone)

    def table(self, orientation: DisplayOrientation) -> dict[Directional, SnapAreaConfig]:
        """方向的完整生效表（8 个区域）"""
        overrides = self.overrides(orientation)
        defaults = default_table(orientation)
        return {
            zone: overrides.get(zone, defaults[zone])
            for zone in Directional.snap_cases()
        }

    def overrides(self, orientation: DisplayOrientation) -> dict[Directional, SnapAreaConfig]:
        """已持久化的覆盖表

        数据损坏时记录日志并视为不存在。
        """
        key = _TABLE_KEYS[orientation]
        raw = self.store.get(key)
        if raw is None:
            return {}
        try:
            return decode_table(raw)
        except (TypeError, ValueError) as e:
            logger.warning(f"[SnapArea] Ignoring malformed {key}: {e}")
            metrics.inc("snap.load_error", {"orientation": orientation.value})
            return {}

    def is_top_configured(self) -> bool:
        """顶部区域是否有动作

        横屏顶部已配置，或连接了竖屏显示器且竖屏顶部已配置。
        """
        landscape_top = self.resolve(DisplayOrientation.LANDSCAPE, Directional.T)
        if landscape_top is not None and landscape_top.is_configured:
            return True

        if self._portrait_display_connected():
            portrait_top = self.resolve(DisplayOrientation.PORTRAIT, Directional.T)
            if portrait_top is not None and portrait_top.is_configured:
                return True

        return False

    # === 修改 ===

    def set_config(
        self,
        orientation: DisplayOrientation,
        zone: Directional,
        snap_config: SnapAreaConfig | None,
    ) -> None:
        """写入或删除一个覆盖条目

        Args:
            orientation: 屏幕方向
            zone: 区域
            snap_config: 新配置；None 表示删除覆盖，恢复默认
        """
        if zone is Directional.C:
            logger.warning("[SnapArea] Center zone cannot be configured, ignoring")
            return

        with self._lock:
            overrides = self.overrides(orientation)
            if snap_config is None:
                overrides.pop(zone, None)
            else:
                overrides[zone] = snap_config
            self.store.set(_TABLE_KEYS[orientation], encode_table(overrides))
            metrics.gauge("snap.overrides", len(overrides), {"orientation": orientation.value})

        metrics.inc("snap.set", {"orientation": orientation.value})
        logger.debug(
            f"[SnapArea] {orientation.value}.{zone.name} = "
            f"{snap_config if snap_config is not None else 'default'}"
        )

    def reset(self) -> None:
        """删除所有覆盖，恢复默认表"""
        with self._lock:
            for key in _TABLE_KEYS.values():
                self.store.delete(key)
        logger.info("[SnapArea] Restored default snap areas")

    # === 旧版迁移 ===

    def migrate(self) -> bool:
        """执行旧版设置迁移（只执行一次）

        Returns:
            本次是否执行了迁移
        """
        with self._lock:
            if self.store.get(config.KEY_SNAP_AREAS_MIGRATED, False):
                logger.debug("[SnapArea] Migration already done")
                return False

            toggle = self.migrate_sixths_toggle()
            ignored = self.migrate_ignored_zones()
            self.store.set(config.KEY_SNAP_AREAS_MIGRATED, True)

        metrics.inc("snap.migrate")
        logger.info(f"[SnapArea] Migrated legacy settings (sixths={toggle}, ignored={ignored})")
        return True

    def migrate_sixths_toggle(self) -> bool:
        """旧版 sixths 开关 -> 横屏顶部/底部 compound

        旧值可能以 1/0 存储，按真值判断。

        Returns:
            是否做了修改
        """
        with self._lock:
            if not self.store.get(config.KEY_SIXTHS_SNAP_AREA):
                return False

            self.set_config(
                DisplayOrientation.LANDSCAPE,
                Directional.T,
                SnapAreaConfig.compound_area(CompoundSnapArea.TOP_SIXTHS),
            )
            self.set_config(
                DisplayOrientation.LANDSCAPE,
                Directional.B,
                SnapAreaConfig.compound_area(CompoundSnapArea.BOTTOM_SIXTHS),
            )
            return True

    def migrate_ignored_zones(self) -> bool:
        """旧版忽略区域 bitmask -> 禁用区域

        被忽略的区域在横屏和竖屏都写入 unconfigured 覆盖；
        左侧两个 short 位同时存在时横屏左侧改为 LEFT_HALF，右侧同理。

        Returns:
            是否做了修改
        """
        with self._lock:
            raw = self.store.get(config.KEY_IGNORED_SNAP_AREAS, 0)
            try:
                bits = int(raw or 0)
            except (TypeError, ValueError):
                logger.warning(f"[SnapArea] Ignoring malformed ignoredSnapAreas: {raw!r}")
                metrics.inc("snap.load_error", {"key": config.KEY_IGNORED_SNAP_AREAS})
                return False
            if bits <= 0:
                return False

            ignored = SnapAreaOption(bits & SnapAreaOption.ALL)

            for zone in Directional.snap_cases():
                if DIRECTIONAL_OPTIONS[zone] in ignored:
                    for orientation in DisplayOrientation:
                        self.set_config(orientation, zone, SnapAreaConfig.unconfigured())

            left_short = SnapAreaOption.TOP_LEFT_SHORT | SnapAreaOption.BOTTOM_LEFT_SHORT
            if left_short in ignored:
                self.set_config(
                    DisplayOrientation.LANDSCAPE,
                    Directional.L,
                    SnapAreaConfig.single(ActionIdentifier.LEFT_HALF),
                )

            right_short = SnapAreaOption.TOP_RIGHT_SHORT | SnapAreaOption.BOTTOM_RIGHT_SHORT
            if right_short in ignored:
                self.set_config(
                    DisplayOrientation.LANDSCAPE,
                    Directional.R,
                    SnapAreaConfig.single(ActionIdentifier.RIGHT_HALF),
                )
            return True
