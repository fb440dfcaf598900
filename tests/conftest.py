from __future__ import annotations

from pathlib import Path

import pytest

from astrochart import create_document
from astrochart.vdom import DocumentFacade


@pytest.fixture(autouse=True)
def _isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "astrochart-home"
    monkeypatch.setenv("ASTROCHART_HOME", str(home))
    return home


@pytest.fixture()
def document() -> DocumentFacade:
    return create_document()
