"""``render`` subcommand: serialise a JSON node payload."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from ..config import Settings, default_settings, load_settings
from ..document import native_options, source_options
from ..serializers import render_native, serialize, to_markup
from ..vdom import ElementNode, tree_from_payload, tree_to_payload

LOG = logging.getLogger(__name__)

FORMATS = ("source", "native", "json", "svg")


def _read_payload(path: str) -> object:
    if path == "-":
        text = sys.stdin.read()
    else:
        text = Path(path).read_text(encoding="utf-8")
    return json.loads(text)


def render_payload(payload: object, fmt: str, settings: Optional[Settings] = None) -> str:
    """Return ``payload`` rendered in ``fmt``."""

    node = tree_from_payload(payload)  # type: ignore[arg-type]
    if not isinstance(node, ElementNode):
        raise ValueError("Root payload must describe an element, not a text node")

    if fmt == "source":
        return serialize(node, options=source_options(settings))
    if fmt == "native":
        component = render_native(node, options=native_options(settings))
        data = component.to_payload() if component is not None else None
        return json.dumps(data, ensure_ascii=False, indent=2)
    if fmt == "json":
        return json.dumps(tree_to_payload(node), ensure_ascii=False, indent=2)
    if fmt == "svg":
        namespace = (settings or default_settings()).document.namespace
        return to_markup(node, namespace=namespace)
    raise ValueError(f"Unsupported format '{fmt}'")


def run(args: argparse.Namespace) -> int:
    try:
        settings = load_settings(Path(args.settings)) if args.settings else default_settings()
        payload = _read_payload(args.input)
        output = render_payload(payload, args.format, settings)
    except FileNotFoundError as exc:
        print(f"File not found: {exc.filename}", file=sys.stderr)
        return 2
    except ValueError as exc:
        # json.JSONDecodeError and pydantic.ValidationError are ValueErrors.
        print(f"Invalid input: {exc}", file=sys.stderr)
        return 2
    except RecursionError:
        print("Invalid input: payload is nested too deeply", file=sys.stderr)
        return 2

    if args.out:
        target = Path(args.out)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(output + "\n", encoding="utf-8")
        LOG.info("Wrote %s output to %s", args.format, target)
    else:
        print(output)
    return 0


def add_subparser(sub: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register the ``render`` subcommand."""

    parser = sub.add_parser(
        "render",
        help="Serialise a JSON node tree",
        description=(
            "Read a node tree payload (as produced by tree_to_payload) and "
            "render it as component source, native components, JSON or SVG. "
            "Use '-' to read from stdin."
        ),
    )
    parser.add_argument("input", help="Input JSON file (use '-' for stdin)")
    parser.add_argument(
        "--format",
        choices=FORMATS,
        default="source",
        help="Output format (default: source)",
    )
    parser.add_argument("--settings", help="YAML settings file to load")
    parser.add_argument("--out", help="Write output here instead of stdout")
    parser.set_defaults(func=run)
