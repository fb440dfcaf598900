"""astrochart: headless SVG document model for astrological charts.

Drawing code builds a tree through :class:`~astrochart.vdom.DocumentFacade`;
:func:`extract_tree` hands the raw node tree to one of the serializers.
"""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version as _get_version

LOG = logging.getLogger(__name__)

try:
    __version__ = _get_version("astrochart")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0"

from .document import create_document
from .serializers import NativeComponent, render_native, serialize, to_markup
from .vdom import (
    SVG_NS,
    DocumentFacade,
    ElementFacade,
    ElementNode,
    TextFacade,
    TextNode,
    extract_tree,
    tree_from_payload,
    tree_to_payload,
)


def get_version() -> str:
    """Return the resolved astrochart package version."""

    return __version__


__all__ = [
    "__version__",
    "get_version",
    "SVG_NS",
    "create_document",
    "DocumentFacade",
    "ElementFacade",
    "TextFacade",
    "ElementNode",
    "TextNode",
    "extract_tree",
    "tree_to_payload",
    "tree_from_payload",
    "serialize",
    "render_native",
    "NativeComponent",
    "to_markup",
]
