"""
settings.py.

Does: Load and validate ``compare_settings.json`` (selection minimum, default
reference names, export basename, search cutoff) on top of built-in defaults.
Returns: CompareSettings dict.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, TypedDict

from .load_config import ConfigParseError, ConfigTypeError, load_config

__all__ = ["CompareSettings", "DEFAULT_SETTINGS", "SETTINGS_FILE", "load_settings"]

log = logging.getLogger(__name__)

SETTINGS_FILE = "compare_settings"


class CompareSettings(TypedDict):
    min_selection_px: int
    default_ref_a_name: str
    default_ref_b_name: str
    export_basename: str
    search_min_score: float


DEFAULT_SETTINGS: CompareSettings = {
    "min_selection_px": 2,
    "default_ref_a_name": "Reference A",
    "default_ref_b_name": "Reference B",
    "export_basename": "chroma_compare",
    "search_min_score": 80.0,
}


def _validate_settings(raw: dict[str, Any]) -> dict[str, Any]:
    unknown = set(raw) - set(DEFAULT_SETTINGS)
    if unknown:
        raise ValueError(f"unknown keys: {sorted(unknown)}")

    merged: dict[str, Any] = {**DEFAULT_SETTINGS, **raw}
    if not isinstance(merged["min_selection_px"], int) or merged["min_selection_px"] < 1:
        raise ValueError("min_selection_px must be a positive integer")
    for key in ("default_ref_a_name", "default_ref_b_name", "export_basename"):
        if not isinstance(merged[key], str) or not merged[key].strip():
            raise ValueError(f"{key} must be a non-empty string")
    score = merged["search_min_score"]
    if not isinstance(score, (int, float)) or not 0 <= score <= 100:
        raise ValueError("search_min_score must be a number in [0, 100]")
    merged["search_min_score"] = float(score)
    return merged


def load_settings(base_dir: Path | None = None) -> CompareSettings:
    """Does: Read compare_settings.json from the data dir, validated and merged over defaults."""
    raw = load_config(SETTINGS_FILE, base_dir=base_dir)
    if not isinstance(raw, dict):
        raise ConfigTypeError(f"{SETTINGS_FILE}.json: expected an object, got {type(raw).__name__}")
    try:
        settings = _validate_settings(raw)
    except ValueError as e:
        raise ConfigParseError(f"{SETTINGS_FILE}.json: {e}") from e
    log.debug("Loaded settings: %s", settings)
    return settings  # type: ignore[return-value]
