import io
import json
import logging
from pathlib import Path

import pytest

from astrochart import cli
from astrochart.boot.logging import configure_logging, level_from_env


def _payload() -> dict:
    return {
        "type": "g",
        "attributes": {"id": "planets", "transform": "rotate(10)"},
        "children": [
            {
                "type": "text",
                "attributes": {"font-size": "12"},
                "children": [{"type": "text", "content": "Sun"}],
            },
            {"type": "circle", "attributes": {"r": "5", "stroke-width": "2"}, "children": []},
        ],
    }


@pytest.fixture()
def payload_file(tmp_path: Path) -> Path:
    path = tmp_path / "tree.json"
    path.write_text(json.dumps(_payload()), encoding="utf-8")
    return path


def test_render_source_to_stdout(payload_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["render", str(payload_file)]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [
        '<G id="planets">',
        '  <Text fontSize="12">',
        '    {"Sun"}',
        "  </Text>",
        '  <Circle r="5" strokeWidth="2" />',
        "</G>",
    ]


def test_render_native_json(payload_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["render", str(payload_file), "--format", "native"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["component"] == "G"
    assert data["props"]["transform"] == "rotate(10)"
    assert data["children"][1] == {
        "component": "Circle",
        "props": {"key": 1, "r": "5", "strokeWidth": 2.0},
        "children": [],
    }


def test_render_json_round_trips(payload_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["render", str(payload_file), "--format", "json"]) == 0
    assert json.loads(capsys.readouterr().out) == _payload()


def test_render_svg_to_file(payload_file: Path, tmp_path: Path) -> None:
    out = tmp_path / "out" / "chart.svg"
    assert cli.main(["render", str(payload_file), "--format", "svg", "--out", str(out)]) == 0
    text = out.read_text(encoding="utf-8")
    assert text.startswith('<g xmlns="http://www.w3.org/2000/svg" id="planets"')
    assert text.rstrip().endswith("</g>")


def test_render_from_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps({"type": "rect", "attributes": {"x": "1"}})))
    assert cli.main(["render", "-"]) == 0
    assert capsys.readouterr().out.strip() == '<Rect x="1" />'


def test_render_with_settings(payload_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    settings = tmp_path / "settings.yaml"
    settings.write_text("source:\n  indent_width: 0\n  dropped_attributes: []\n", encoding="utf-8")
    assert cli.main(["render", str(payload_file), "--settings", str(settings)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == '<G id="planets" transform="rotate(10)">'
    assert lines[1] == '<Text fontSize="12">'


def test_render_errors_exit_2(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["render", str(tmp_path / "missing.json")]) == 2
    assert "File not found" in capsys.readouterr().err

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    assert cli.main(["render", str(broken)]) == 2

    text_root = tmp_path / "text.json"
    text_root.write_text(json.dumps({"type": "text", "content": "Sun"}), encoding="utf-8")
    assert cli.main(["render", str(text_root)]) == 2
    assert "Invalid input" in capsys.readouterr().err


def test_deeply_nested_payload_exits_2(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    depth = 50_000
    nested = tmp_path / "nested.json"
    nested.write_text('{"type": "g", "children": [' * depth + '{"type": "g"}' + "]}" * depth, encoding="utf-8")

    assert cli.main(["render", str(nested)]) == 2
    assert "nested too deeply" in capsys.readouterr().err


def test_configure_logging_levels(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ASTROCHART_LOG_LEVEL", "debug")
    assert configure_logging() == logging.DEBUG

    monkeypatch.delenv("ASTROCHART_LOG_LEVEL")
    monkeypatch.setenv("LOG_LEVEL", "30")
    assert configure_logging() == logging.WARNING

    monkeypatch.setenv("LOG_LEVEL", "chatty")
    assert configure_logging() == logging.INFO
    assert configure_logging(level="error") == logging.ERROR


def test_level_from_env_prefers_project_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ASTROCHART_LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert level_from_env() is None

    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("ASTROCHART_LOG_LEVEL", "")
    assert level_from_env() == ""
    assert configure_logging() == logging.INFO
