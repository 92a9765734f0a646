from __future__ import annotations

import os
import yaml
from pathlib import Path
from typing import Dict, Any

DEFAULT_STORE_DIR = Path.home() / ".tasklist"
ON_CORRUPT_CHOICES = ("fail", "reset")


def user_config_path() -> Path:
    override = os.environ.get("TASKLIST_CONFIG")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".tasklist_config.yaml"


def _load_config() -> Dict[str, Any]:
    path = user_config_path()
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def _save_config(data: Dict[str, Any]) -> None:
    path = user_config_path()
    if not data:
        if path.exists():
            path.unlink()
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")


def get_user_lang() -> str:
    return str(_load_config().get("lang", "") or "").strip()


def set_user_lang(value: str) -> None:
    data = _load_config()
    value = (value or "").strip()
    if value:
        data["lang"] = value
    else:
        data.pop("lang", None)
    _save_config(data)


def get_user_theme() -> str:
    return str(_load_config().get("theme", "") or "").strip()


def get_store_dir() -> Path:
    env_dir = os.environ.get("TASKLIST_STORE_DIR")
    if env_dir:
        return Path(env_dir).expanduser()
    configured = str(_load_config().get("store_dir", "") or "").strip()
    if configured:
        return Path(configured).expanduser()
    return DEFAULT_STORE_DIR


def get_on_corrupt() -> str:
    value = str(_load_config().get("on_corrupt", "fail") or "fail").strip().lower()
    return value if value in ON_CORRUPT_CHOICES else "fail"


def get_log_level() -> str:
    env_level = os.environ.get("TASKLIST_LOG_LEVEL")
    if env_level:
        return env_level.strip().upper()
    return str(_load_config().get("log_level", "WARNING") or "WARNING").strip().upper()
