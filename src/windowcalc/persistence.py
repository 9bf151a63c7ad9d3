"""持久化模块

提供设置存储（key-value）：
- SettingsStore: 存储接口
- MemorySettingsStore: 内存实现（测试、嵌入使用）
- JsonSettingsStore: JSON 文件实现
  - 原子写入（temp + rename）
  - checksum 校验（sha256）
  - version 版本控制
  - 损坏文件跳过告警，视为空存储
- SnapAreaConfigModel: 持久化 snap area 条目的结构校验
"""

import hashlib
import json
import os
import tempfile
import threading
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict

from .config import PERSIST_VERSION, SETTINGS_FILE
from .telemetry import get_logger, metrics

logger = get_logger(__name__)


class SnapAreaConfigModel(BaseModel):
    """持久化的单个 snap area 条目

    只校验结构；action 名称与 compound id 的合法性由 snapping 模块检查。
    """

    model_config = ConfigDict(extra="forbid")

    action: str | None = None
    compound: int | None = None


class SettingsStore(ABC):
    """设置存储接口

    值必须是可 JSON 序列化的对象。
    """

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """读取值，不存在时返回 default"""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """写入值"""

    @abstractmethod
    def delete(self, key: str) -> None:
        """删除值（不存在时忽略）"""

    @abstractmethod
    def __contains__(self, key: str) -> bool: ...


class MemorySettingsStore(SettingsStore):
    """内存存储"""

    def __init__(self, values: dict[str, Any] | None = None):
        self._values: dict[str, Any] = dict(values or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value

    def delete(self, key: str) -> None:
        self._values.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._values


def _calculate_checksum(data: bytes) -> str:
    """计算 SHA256 checksum"""
    return hashlib.sha256(data).hexdigest()


def _serialize(data: dict) -> bytes:
    return json.dumps(data, ensure_ascii=False, indent=2).encode("utf-8")


class JsonSettingsStore(SettingsStore):
    """JSON 文件存储

    首次访问时加载文件，每次写入立即落盘。

    文件格式：
        {"version": 1, "saved_at": ..., "values": {...}, "checksum": "..."}

    Args:
        path: 文件路径，默认 config.SETTINGS_FILE
        version: 期望的版本号
    """

    def __init__(self, path: Path | None = None, version: int = PERSIST_VERSION):
        self.path = Path(path or SETTINGS_FILE)
        self.version = version
        self._values: dict[str, Any] | None = None
        self._lock = threading.Lock()

    # === SettingsStore ===

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._ensure_loaded().get(key, default)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._ensure_loaded()[key] = value
            self._save()

    def delete(self, key: str) -> None:
        with self._lock:
            values = self._ensure_loaded()
            if key in values:
                del values[key]
                self._save()

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._ensure_loaded()

    # === 文件读写 ===

    def reload(self) -> None:
        """丢弃内存副本，下次访问时重新读取文件"""
        with self._lock:
            self._values = None

    def _ensure_loaded(self) -> dict[str, Any]:
        if self._values is None:
            self._values = self._load()
        return self._values

    def _load(self) -> dict[str, Any]:
        """加载文件

        校验 version 和 checksum，失败时返回空 dict。
        """
        if not self.path.exists():
            logger.debug(f"[Persist] File not found: {self.path}")
            return {}

        try:
            with open(self.path, "rb") as f:
                content = f.read()

            data = json.loads(content.decode("utf-8"))
            if not isinstance(data, dict):
                logger.warning(f"[Persist] Unexpected root type: {type(data).__name__}")
                metrics.inc("persist.error", {"op": "load", "reason": "shape"})
                return {}

            # 检查版本
            file_version = data.get("version", 1)
            if file_version != self.version:
                logger.warning(
                    f"[Persist] Version mismatch: file={file_version}, expected={self.version}"
                )
                metrics.inc("persist.error", {"op": "load", "reason": "version"})
                return {}

            # 检查 checksum
            stored_checksum = data.pop("checksum", None)
            if stored_checksum:
                calculated = _calculate_checksum(_serialize(data))
                if calculated != stored_checksum:
                    logger.warning("[Persist] Checksum mismatch")
                    metrics.inc("persist.error", {"op": "load", "reason": "checksum"})
                    return {}

            values = data.get("values", {})
            if not isinstance(values, dict):
                logger.warning("[Persist] 'values' is not an object")
                metrics.inc("persist.error", {"op": "load", "reason": "shape"})
                return {}

            logger.info(f"[Persist] Loaded {len(values)} keys from {self.path}")
            return values

        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"[Persist] Invalid JSON: {e}")
            metrics.inc("persist.error", {"op": "load", "reason": "json"})
            return {}

        except OSError as e:
            logger.error(f"[Persist] Load failed: {e}")
            metrics.inc("persist.error", {"op": "load", "reason": "io"})
            return {}

    def _save(self) -> bool:
        """原子写入当前值

        Returns:
            是否成功
        """
        try:
            data = {
                "version": self.version,
                "saved_at": time.time(),
                "values": self._values or {},
            }
            data["checksum"] = _calculate_checksum(_serialize(data))
            json_bytes = _serialize(data)

            self.path.parent.mkdir(parents=True, exist_ok=True)

            # 原子写入：先写临时文件，再 rename
            fd, temp_path = tempfile.mkstemp(
                prefix="windowcalc_settings_",
                suffix=".tmp",
                dir=self.path.parent,
            )
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(json_bytes)
                os.replace(temp_path, self.path)
            except OSError:
                if os.path.exists(temp_path):
                    os.unlink(temp_path)
                raise

            logger.debug(f"[Persist] Saved {len(data['values'])} keys to {self.path}")
            return True

        except (OSError, TypeError, ValueError) as e:
            logger.error(f"[Persist] Save failed: {e}")
            metrics.inc("persist.error", {"op": "save"})
            return False
