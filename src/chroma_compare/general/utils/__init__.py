# chroma_compare/general/utils/__init__.py
"""

Does: Provide config loading, settings and lightweight debug logging utilities.
Returns: Public API via load_config/clear_config_cache/load_settings and debug/reload_topics.
Used by: Workflows, repositories, CLI, tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
    resolve_data_dir,
    temp_data_dir,
)
from .log import (
    debug,
    enabled,
    reload_topics,
)
from .settings import (
    DEFAULT_SETTINGS,
    CompareSettings,
    load_settings,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "resolve_data_dir",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Settings
    "CompareSettings",
    "DEFAULT_SETTINGS",
    "load_settings",
    # Logging helpers
    "debug",
    "enabled",
    "reload_topics",
]
