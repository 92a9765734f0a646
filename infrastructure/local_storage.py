"""File-backed key-value store for client-local state.

Mirrors the browser ``localStorage`` contract: string values addressed by
key, one file per key under ``root``.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import List, Optional

VALUE_SUFFIX = ".json"


class LocalStorage:
    def __init__(self, root: Path):
        self.root = Path(root).expanduser()

    def _resolve_path(self, key: str) -> Path:
        # SEC: keys must stay inside root
        if not key or ".." in key or "/" in key or "\\" in key:
            raise ValueError(f"Invalid storage key: {key!r}")
        resolved = (self.root / f"{key}{VALUE_SUFFIX}").resolve()
        if not resolved.is_relative_to(self.root.resolve()):
            raise ValueError(f"Path traversal detected: {resolved} is outside {self.root}")
        return resolved

    def get_item(self, key: str) -> Optional[str]:
        path = self._resolve_path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        target = self._resolve_path(key)
        target.parent.mkdir(parents=True, exist_ok=True)
        tmp_path: Path | None = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                delete=False,
                dir=str(target.parent),
                prefix=f".{key}.",
                suffix=".tmp",
            ) as tmp:
                tmp.write(value)
                tmp.flush()
                os.fsync(tmp.fileno())
                tmp_path = Path(tmp.name)
            os.replace(str(tmp_path), str(target))
        finally:
            if tmp_path and tmp_path.exists():
                try:
                    tmp_path.unlink()
                except OSError:
                    pass

    def remove_item(self, key: str) -> bool:
        path = self._resolve_path(key)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        return True

    def keys(self) -> List[str]:
        if not self.root.exists():
            return []
        return sorted(p.name[: -len(VALUE_SUFFIX)] for p in self.root.glob(f"*{VALUE_SUFFIX}") if not p.name.startswith("."))
