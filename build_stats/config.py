"""Configuration loader for build statistics reporting."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .utils.validation import ensure_file

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_FILE = PACKAGE_ROOT / "config" / "build_stats.yml"

DEFAULT_ENDPOINT = "https://vortex.data.microsoft.com/collect/v1"
EVENT_NAME = "monacoworkbench/packagemetrics"

DEFAULT_CONFIG: Dict[str, Any] = {
    "telemetry_endpoint": DEFAULT_ENDPOINT,
    "event_name": EVENT_NAME,
    "request_timeout": 10.0,
    "color": "auto",
    "log_level": "INFO",
}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    result = dict(base)
    for key, value in override.items():
        if (
            key in result
            and isinstance(result[key], dict)
            and isinstance(value, dict)
        ):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: str | None = None) -> Dict[str, Any]:
    """Load settings from a YAML file or fall back to defaults."""
    cfg = dict(DEFAULT_CONFIG)
    config_path = path or os.getenv("BUILD_STATS_CONFIG_FILE")
    candidates = [Path(p) for p in [config_path, DEFAULT_CONFIG_FILE] if p]
    for file in candidates:
        if not file.exists():
            continue
        data = yaml.safe_load(file.read_text(encoding="utf-8")) or {}
        if isinstance(data, dict):
            cfg = _deep_merge(cfg, data)
        # first existing file wins
        break
    return cfg


def load_product_config(path: Path) -> Optional[Dict[str, Any]]:
    """Read the product description handed to the reporter.

    JSON is the usual format; ``.yml``/``.yaml`` files are parsed with PyYAML.
    An empty document yields ``None``, which the reporter treats as telemetry
    being disabled.
    """
    raw = ensure_file(path).read_text(encoding="utf-8")
    if not raw.strip():
        return None
    if path.suffix.lower() in {".yml", ".yaml"}:
        data = yaml.safe_load(raw)
    else:
        data = json.loads(raw)
    if data is None:
        return None
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping, got {type(data).__name__}")
    return data


__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_ENDPOINT",
    "EVENT_NAME",
    "load_config",
    "load_product_config",
]
