"""Entry points for building headless chart documents."""
from __future__ import annotations

from typing import Optional

from .config.settings import Settings, default_settings
from .serializers.component_source import SourceOptions
from .serializers.native import NativeOptions
from .vdom.facade import DocumentFacade
from .vdom.registry import ElementRegistry, StrictElementRegistry


def create_document(settings: Optional[Settings] = None) -> DocumentFacade:
    """Return a fresh document with its own registry.

    ``settings.document.strict_ids`` selects the registry that rejects
    rebinding an id; the default keeps last-write-wins.
    """

    cfg = (settings or default_settings()).document
    registry_cls = StrictElementRegistry if cfg.strict_ids else ElementRegistry
    return DocumentFacade(registry_cls(cfg.namespace), body_kind=cfg.body_kind)


def source_options(settings: Optional[Settings] = None) -> SourceOptions:
    return SourceOptions.from_config((settings or default_settings()).source)


def native_options(settings: Optional[Settings] = None) -> NativeOptions:
    return NativeOptions.from_config((settings or default_settings()).native)


__all__ = ["create_document", "native_options", "source_options"]
