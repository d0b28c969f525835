# tracksax/utils/config.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml

from ..errors import ConfigError, TrackIOError


def load_yaml(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise TrackIOError(f"Config not found: {p}")
    with p.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Config {p} is not valid YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping/dict, got {type(data)}")
    return data


def get_section(cfg: Dict[str, Any], *keys: str) -> Dict[str, Any]:
    out: Dict[str, Any] = cfg
    for k in keys:
        v = out.get(k, {})
        if v is None:
            v = {}
        if not isinstance(v, dict):
            raise ConfigError(f"Config section {'.'.join(keys)} must be a dict")
        out = v
    return out
