from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from astrochart.config import (
    Settings,
    config_path,
    default_settings,
    get_config_home,
    load_settings,
    save_settings,
)
from astrochart.vdom import SVG_NS


def test_defaults() -> None:
    settings = default_settings()
    assert settings.document.namespace == SVG_NS
    assert settings.document.body_kind == "body"
    assert settings.document.strict_ids is False
    assert settings.source.indent_width == 2
    assert settings.source.dropped_attributes == ["transform", "style"]
    assert settings.native.numeric_props == ["strokeWidth"]


def test_config_home_respects_env(_isolated_config_home: Path) -> None:
    assert get_config_home() == _isolated_config_home
    path = config_path()
    assert path.parent == _isolated_config_home
    assert path.parent.is_dir()


def test_load_creates_defaults_when_missing(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "config.yaml"
    settings = load_settings(target)

    assert settings == default_settings()
    assert target.exists()
    assert yaml.safe_load(target.read_text(encoding="utf-8"))["document"]["namespace"] == SVG_NS


def test_save_and_reload_round_trip(tmp_path: Path) -> None:
    settings = Settings.model_validate(
        {"document": {"strict_ids": True}, "source": {"component_names": {"g": "Group"}}}
    )
    path = save_settings(settings, tmp_path / "config.yaml")
    assert load_settings(path) == settings


def test_load_tolerates_empty_file(tmp_path: Path) -> None:
    target = tmp_path / "config.yaml"
    target.write_text("", encoding="utf-8")
    assert load_settings(target) == default_settings()


def test_validators_clamp_and_reject() -> None:
    settings = Settings.model_validate(
        {"source": {"indent_width": 40}, "native": {"default_stroke_width": -2}}
    )
    assert settings.source.indent_width == 8
    assert settings.native.default_stroke_width == 1.0

    with pytest.raises(ValidationError):
        Settings.model_validate({"document": {"namespace": "  "}})
    with pytest.raises(ValidationError):
        Settings.model_validate({"schema_version": 0})
