"""Configuration models and helpers for astrochart settings."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from ..vdom.nodes import SVG_NS

CURRENT_SETTINGS_SCHEMA_VERSION = 1
CONFIG_FILENAME = "config.yaml"

# -------------------- Settings Schema --------------------


class DocumentCfg(BaseModel):
    """Headless document construction."""

    namespace: str = SVG_NS
    body_kind: str = "body"
    strict_ids: bool = False

    @field_validator("namespace", "body_kind")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value


class SourceCfg(BaseModel):
    """Component source serializer options."""

    indent_width: int = 2
    dropped_attributes: List[str] = Field(default_factory=lambda: ["transform", "style"])
    component_names: Dict[str, str] = Field(default_factory=dict)
    attribute_names: Dict[str, str] = Field(default_factory=dict)

    @field_validator("indent_width", mode="before")
    @classmethod
    def _cap_indent(cls, value: int) -> int:
        return max(0, min(8, int(value)))


class NativeCfg(BaseModel):
    """Native component renderer options."""

    default_stroke_width: float = 1.0
    numeric_props: List[str] = Field(default_factory=lambda: ["strokeWidth"])
    warn_unknown: bool = True

    @field_validator("default_stroke_width", mode="before")
    @classmethod
    def _positive_stroke(cls, value: float) -> float:
        numeric = float(value)
        return numeric if numeric > 0 else 1.0


class Settings(BaseModel):
    """Top-level settings model persisted on disk."""

    schema_version: int = Field(
        default=CURRENT_SETTINGS_SCHEMA_VERSION,
        ge=1,
        description="Version marker for persisted configuration payloads.",
    )
    document: DocumentCfg = Field(default_factory=DocumentCfg)
    source: SourceCfg = Field(default_factory=SourceCfg)
    native: NativeCfg = Field(default_factory=NativeCfg)


# -------------------- Persistence --------------------


def get_config_home() -> Path:
    """Return the directory where settings should be stored."""

    return Path(os.environ.get("ASTROCHART_HOME", str(Path.home() / ".astrochart")))


def config_path() -> Path:
    """Return the full path to the configuration file, creating directories as needed."""

    home = get_config_home()
    home.mkdir(parents=True, exist_ok=True)
    return home / CONFIG_FILENAME


def default_settings() -> Settings:
    """Instantiate a Settings object populated with defaults."""

    return Settings()


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    """Persist the given settings to disk as YAML."""

    target_path = Path(path) if path else config_path()
    target_path.parent.mkdir(parents=True, exist_ok=True)
    data = settings.model_dump()
    with target_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(data, handle, sort_keys=False, allow_unicode=True)
    return target_path


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from disk, creating defaults if missing."""

    source_path = Path(path) if path else config_path()
    if not source_path.exists():
        settings = default_settings()
        save_settings(settings, source_path)
        return settings
    with source_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, dict):
        raw = {}
    return Settings(**raw)


__all__ = [
    "CONFIG_FILENAME",
    "CURRENT_SETTINGS_SCHEMA_VERSION",
    "DocumentCfg",
    "NativeCfg",
    "Settings",
    "SourceCfg",
    "config_path",
    "default_settings",
    "get_config_home",
    "load_settings",
    "save_settings",
]
