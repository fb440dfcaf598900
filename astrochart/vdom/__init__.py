"""Headless SVG document model: nodes, registry, facades and extraction."""

from .extract import adopt_tree, extract_tree, tree_from_payload, tree_to_payload
from .facade import (
    DocumentFacade,
    DocumentLike,
    ElementFacade,
    ElementLike,
    TextFacade,
)
from .nodes import SVG_NS, ElementNode, Node, TextNode, is_element, iter_elements
from .registry import DuplicateIdError, ElementRegistry, StrictElementRegistry

__all__ = [
    "SVG_NS",
    "ElementNode",
    "TextNode",
    "Node",
    "is_element",
    "iter_elements",
    "ElementRegistry",
    "StrictElementRegistry",
    "DuplicateIdError",
    "ElementFacade",
    "TextFacade",
    "DocumentFacade",
    "ElementLike",
    "DocumentLike",
    "extract_tree",
    "tree_to_payload",
    "tree_from_payload",
    "adopt_tree",
]
