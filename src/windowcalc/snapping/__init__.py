"""Snapping 模块

拖拽区域（snap area）配置：
- types: Directional, CompoundSnapArea, SnapAreaConfig, SnapAreaOption
- defaults: 横屏/竖屏默认表
- model: SnapAreaModel（解析、覆盖、旧版迁移）
"""

from .types import (
    Directional,
    DisplayOrientation,
    CompoundSnapArea,
    SnapAreaKind,
    SnapAreaConfig,
    SnapAreaOption,
    DIRECTIONAL_OPTIONS,
)
from .defaults import DEFAULT_LANDSCAPE, DEFAULT_PORTRAIT, default_table
from .model import SnapAreaModel, decode_table, encode_table

__all__ = [
    # Types
    "Directional",
    "DisplayOrientation",
    "CompoundSnapArea",
    "SnapAreaKind",
    "SnapAreaConfig",
    "SnapAreaOption",
    "DIRECTIONAL_OPTIONS",
    # Defaults
    "DEFAULT_LANDSCAPE",
    "DEFAULT_PORTRAIT",
    "default_table",
    # Model
    "SnapAreaModel",
    "decode_table",
    "encode_table",
]
