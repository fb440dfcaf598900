"""Configuration helpers exposed at :mod:`astrochart.config`."""

from __future__ import annotations

from .settings import (
    DocumentCfg,
    NativeCfg,
    Settings,
    SourceCfg,
    config_path,
    default_settings,
    get_config_home,
    load_settings,
    save_settings,
)

__all__ = [
    "Settings",
    "DocumentCfg",
    "SourceCfg",
    "NativeCfg",
    "config_path",
    "get_config_home",
    "default_settings",
    "load_settings",
    "save_settings",
]
