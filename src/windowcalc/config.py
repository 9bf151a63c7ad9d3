"""windowcalc 配置

配置分为以下几类：
- 循环配置：重复快捷键时的尺寸循环
- 尺寸配置：almostMaximize 比例
- 间距配置：窗口间距与屏幕边缘间距
- 持久化配置：设置文件路径、版本
- 设置 key：持久化 key-value 存储中的键名
- 日志/指标配置
"""

import os
from pathlib import Path

# === 循环配置 ===
CYCLING_ENABLED = True  # 重复执行同一 action 时是否循环尺寸
CYCLE_SIZES_BITS = 0b00111  # 默认循环尺寸（twoThirds | oneHalf | oneThird）

# === 尺寸配置 ===
ALMOST_MAXIMIZE_WIDTH = 0.9  # almostMaximize 宽度比例，取值 (0, 1]
ALMOST_MAXIMIZE_HEIGHT = 0.9  # almostMaximize 高度比例，取值 (0, 1]

# === 间距配置 ===
GAP_SIZE = 0.0  # 窗口之间的间距（像素）
SCREEN_EDGE_GAP_TOP = 0.0
SCREEN_EDGE_GAP_BOTTOM = 0.0
SCREEN_EDGE_GAP_LEFT = 0.0
SCREEN_EDGE_GAP_RIGHT = 0.0

# === 持久化配置 ===
SETTINGS_DIR = Path(
    os.environ.get("WINDOWCALC_SETTINGS_DIR", Path.home() / ".windowcalc")
)
SETTINGS_FILE = Path(
    os.environ.get("WINDOWCALC_SETTINGS_FILE", SETTINGS_DIR / "settings.json")
)
PERSIST_VERSION = 1  # 设置文件格式版本

# === 设置 key ===
KEY_LANDSCAPE_SNAP_AREAS = "landscapeSnapAreas"  # 横屏 snap 区域覆盖表
KEY_PORTRAIT_SNAP_AREAS = "portraitSnapAreas"  # 竖屏 snap 区域覆盖表
KEY_SIXTHS_SNAP_AREA = "sixthsSnapArea"  # 旧版：sixths 开关
KEY_IGNORED_SNAP_AREAS = "ignoredSnapAreas"  # 旧版：忽略区域 bitmask
KEY_SNAP_AREAS_MIGRATED = "snapAreasMigrated"  # 迁移已执行标记

# === 日志配置 ===
LOG_LEVEL = os.environ.get("WINDOWCALC_LOG_LEVEL", "INFO")  # 日志级别
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# === 指标配置 ===
METRICS_ENABLED = True  # 是否启用指标收集
