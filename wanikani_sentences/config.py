"""YAML configuration with hardcoded defaults."""

from __future__ import annotations

from copy import deepcopy
import logging
from pathlib import Path
from typing import Any

import yaml


LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "api": {
        "base_url": "https://api.wanikani.com/v2",
        "revision": "20170710",
        "subject_types": "",
    },
    "fetch": {
        "timeout_sec": 30,
    },
    "export": {
        "output_dir": "./exports",
        "delay_sec": 0.3,
        "per_level": True,
    },
    "credentials": {
        "token_file": "~/.config/wanikani_sentences/token.json",
    },
    "paths": {
        "logs_dir": "logs",
    },
}


def cfg_get(cfg: dict[str, Any], path: str, default: Any) -> Any:
    cur: Any = cfg
    for key in path.split("."):
        if not isinstance(cur, dict) or key not in cur:
            return default
        cur = cur[key]
    return cur


def _deep_update(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    out = deepcopy(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_update(out[k], v)
        else:
            out[k] = v
    return out


def load_config(config_path: str | Path) -> dict[str, Any]:
    """Load YAML config and merge with defaults.

    If config file is missing or unreadable, returns hardcoded defaults.
    """

    cfg_path = Path(config_path)
    if not cfg_path.exists():
        LOGGER.warning("Config not found: %s. Using defaults.", cfg_path)
        return deepcopy(DEFAULT_CONFIG)

    try:
        loaded = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        LOGGER.warning("Failed to parse config (%s). Using defaults.", exc)
        return deepcopy(DEFAULT_CONFIG)

    if not isinstance(loaded, dict):
        LOGGER.warning("Config format invalid. Using defaults.")
        return deepcopy(DEFAULT_CONFIG)
    return _deep_update(DEFAULT_CONFIG, loaded)
