from __future__ import annotations

import os
import yaml
from pathlib import Path
from typing import Dict, Any

DEFAULT_LOG_LEVEL = "WARNING"


def user_config_path() -> Path:
    env_path = os.environ.get("PAYBACK_CONFIG")
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / ".payback_config.yaml"


def _load_config() -> Dict[str, Any]:
    path = user_config_path()
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
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


def get_data_dir() -> str:
    return str(_load_config().get("data_dir", "") or "").strip()


def set_data_dir(value: str) -> None:
    data = _load_config()
    value = (value or "").strip()
    if value:
        data["data_dir"] = value
    else:
        data.pop("data_dir", None)
    _save_config(data)


def get_log_level() -> str:
    env_level = os.environ.get("PAYBACK_LOG_LEVEL")
    if env_level:
        return env_level.strip().upper()
    value = str(_load_config().get("log_level", "") or "").strip().upper()
    return value or DEFAULT_LOG_LEVEL


def set_log_level(value: str) -> None:
    data = _load_config()
    value = (value or "").strip().upper()
    if value:
        data["log_level"] = value
    else:
        data.pop("log_level", None)
    _save_config(data)
