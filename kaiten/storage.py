"""本地键值文件：令牌、主题、引导标记等标量偏好（JSON，进程重启后仍保留）。"""
import json
import sys
from pathlib import Path
from typing import Any, Optional

from kaiten.config import PREFS_FILE, ensure_dirs


class KeyValueFile:
    """单个 JSON 对象文件，按名称存取标量值；写入即落盘。"""

    def __init__(self, path: Optional[Path] = None):
        self.path = path or PREFS_FILE
        if path is None:
            ensure_dirs()
        self._data = self._load()

    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            print(f"[kaiten-prefs] 偏好文件无法读取，使用默认值: {e}", file=sys.stderr, flush=True)
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self._data, f, indent=2, ensure_ascii=False)

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def get_str(self, key: str, default: str = "") -> str:
        value = self._data.get(key, default)
        return value if isinstance(value, str) else default

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self._data.get(key, default)
        return value if isinstance(value, bool) else default

    def set(self, key: str, value: Any) -> None:
        """写入并立即保存。"""
        self._data[key] = value
        self._save()
