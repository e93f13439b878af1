# whenin/config.py
"""
Load YAML config and env overrides.

Config precedence (low → high):
  1) Defaults in code
  2) YAML file: ~/.whenin.yml or ~/.whenin.yaml
  3) Environment variables: WHENIN_TZ, WHENIN_CLOCK, WHENIN_PREFER

Example ~/.whenin.yml:
  timezone: Europe/Stockholm     # default: system local zone
  clock: 24h                     # or "12h"
  prefer_dates_from: future      # range starts: current_period | future | past
  languages: [en]
  default_input: in 3 days time
  examples:
    - Tomorrow at noon
    - Aug 29 1pm PDT to Sep 1 1pm PDT
"""
from __future__ import annotations
import os
from pathlib import Path
from typing import Any, Dict, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml

from .errors import ConfigError

EXAMPLES = [
    "in 3 days time",
    "Next Friday at 5pm",
    "in 2 weeks",
    "Tomorrow at noon",
    "Monday, Aug 25 at midnight PT",
    "Aug 29 1pm PDT to Sep 1 1pm PDT",
]

DEFAULTS: Dict[str, Any] = {
    "timezone": None,
    "clock": "12h",
    "prefer_dates_from": "current_period",
    "languages": ["en"],
    "default_input": "in 3 days time",
    "examples": EXAMPLES,
}

def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid config {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"invalid config {path}: expected a mapping")
    return data

def load() -> Dict[str, Any]:
    cfg = DEFAULTS.copy()
    home = Path.home()
    for fname in (".whenin.yml", ".whenin.yaml"):
        data = _read_yaml(home / fname)
        if data:
            cfg.update({k: v for k, v in data.items() if k in DEFAULTS})
            break

    # env overrides
    if os.getenv("WHENIN_TZ"):
        cfg["timezone"] = os.getenv("WHENIN_TZ").strip()
    if os.getenv("WHENIN_CLOCK"):
        cfg["clock"] = os.getenv("WHENIN_CLOCK").strip().lower()
    if os.getenv("WHENIN_PREFER"):
        cfg["prefer_dates_from"] = os.getenv("WHENIN_PREFER").strip().lower()

    return cfg

def resolve_zone(name: Optional[str]) -> Optional[ZoneInfo]:
    """IANA name -> ZoneInfo; empty means the system local zone (None)."""
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigError(f"unknown time zone: {name}") from e
