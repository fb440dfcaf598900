"""astrochart command line interface."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from ..boot.logging import configure_logging
from . import render


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="astrochart", description="astrochart CLI")
    sub = parser.add_subparsers(dest="command", required=True)

    render.add_subparser(sub)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    return args.func(args)


__all__ = ["build_parser", "main"]
