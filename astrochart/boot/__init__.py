"""Process bootstrap helpers."""

from .logging import configure_logging, level_from_env

__all__ = ["configure_logging", "level_from_env"]
