from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def load_json(path: Path, default: Any) -> Any:
    if not path.exists():
        return default
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Could not read %s, using defaults: %s", path, e)
        return default


def save_json(path: Path, data: Any) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
    except OSError as e:
        # Disk errors must not take the UI down.
        logger.warning("Could not write %s: %s", path, e)


def load_config(path: Path, defaults: dict) -> dict:
    """Read the config file and fill in any missing keys from ``defaults``.

    Unknown keys found in the file are kept so they survive a later save.
    """
    data = load_json(path, {})
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected a JSON object", path)
        data = {}

    merged = copy.deepcopy(defaults)
    for key, value in data.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key].update(value)
        else:
            merged[key] = value
    return merged
