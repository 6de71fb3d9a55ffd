# src/chroma_compare/general/utils/load_config.py

"""Read JSON config documents from the package ``data/`` directory.

The directory is taken from DATA_DIR / CHROMA_COMPARE_DATA_DIR when set,
otherwise the first ``data/`` found walking up from this file. Parsed
documents are cached per (path, mtime); callers must treat them as read-only.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from types import TracebackType
from typing import Any

__all__ = [
    "load_config",
    "clear_config_cache",
    "resolve_data_dir",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file is missing or outside the data dir."""


class ConfigParseError(ValueError):
    """Raise when a config file is not valid JSON or fails validation."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON has the wrong top-level type."""


log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
_CONFIG_CACHE: dict[tuple[Path, float], Any] = {}

_ENV_VARS = ("DATA_DIR", "CHROMA_COMPARE_DATA_DIR")


def clear_config_cache() -> None:
    """Drop every cached document (hot reload, tests)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
    log.debug("Config cache cleared.")


def resolve_data_dir(start: Path | None = None) -> Path:
    """Env override first, then the nearest ``data/`` above ``start``."""
    for var in _ENV_VARS:
        v = os.environ.get(var)
        if v:
            return Path(v).expanduser().resolve()
    start = (start or Path(__file__)).resolve()
    tried = [p / "data" for p in start.parents]
    for cand in tried:
        if cand.is_dir():
            return cand
    raise DataDirNotFound("No 'data' directory found. Tried:\n  " + "\n  ".join(map(str, tried)))


def load_config(name: str | os.PathLike[str], *, base_dir: Path | None = None) -> Any:
    """Parse ``<data>/<name>.json``; repeated calls reuse the cached document until it changes."""
    data_dir = (base_dir or resolve_data_dir()).resolve()
    file_name = os.fspath(name)
    if not file_name.endswith(".json"):
        file_name += ".json"
    path = (data_dir / file_name).resolve()
    if data_dir not in path.parents:
        raise ConfigFileNotFound(f"Refusing to read outside data dir: {path} (base={data_dir})")

    try:
        key = (path, path.stat().st_mtime)
    except OSError as e:
        raise ConfigFileNotFound(f"Config file not found: {path}") from e

    with _CACHE_LOCK:
        if key in _CONFIG_CACHE:
            log.debug("Config cache HIT: %s", path.name)
            return _CONFIG_CACHE[key]

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    with _CACHE_LOCK:
        _CONFIG_CACHE[key] = data
    log.debug("Config cache MISS → STORED: %s", path.name)
    return data


class temp_data_dir:
    """Point DATA_DIR at ``path`` for the block, restoring it (and the cache) afterwards."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = os.fspath(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get("DATA_DIR")
        os.environ["DATA_DIR"] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop("DATA_DIR", None)
        else:
            os.environ["DATA_DIR"] = self._old
        clear_config_cache()
