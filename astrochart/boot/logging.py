"""Root logger setup shared by the astrochart CLI and embedding scripts."""

from __future__ import annotations

import logging
import os
from typing import Any, Optional, Union

__all__ = ["configure_logging", "level_from_env"]

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"
_ENV_VARS = ("ASTROCHART_LOG_LEVEL", "LOG_LEVEL")

LevelSpec = Union[str, int, None]


def _parse_level(spec: LevelSpec) -> int:
    """Map ``"debug"``, ``"10"`` or ``10`` to a level number; INFO otherwise."""

    if isinstance(spec, int):
        return spec
    text = (spec or "").strip()
    if text.isdigit():
        return int(text)
    named = logging.getLevelName(text.upper()) if text else None
    return named if isinstance(named, int) else logging.INFO


def level_from_env() -> Optional[str]:
    """First set value among ``ASTROCHART_LOG_LEVEL`` and ``LOG_LEVEL``."""

    return next((os.environ[name] for name in _ENV_VARS if name in os.environ), None)


def configure_logging(*, level: LevelSpec = None, **kwargs: Any) -> int:
    """Install a root handler for chart rendering and return its level.

    An explicit ``level`` beats the environment.  Extra keyword arguments
    go straight to :func:`logging.basicConfig`; the handler is replaced
    unless ``force=False`` is passed.
    """

    effective = _parse_level(level if level is not None else level_from_env())
    kwargs.setdefault("format", _DEFAULT_FORMAT)
    kwargs.setdefault("datefmt", _DEFAULT_DATEFMT)
    kwargs.setdefault("force", True)
    logging.basicConfig(level=effective, **kwargs)
    return effective
