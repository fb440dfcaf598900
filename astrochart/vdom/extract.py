"""Unwrap facades into raw node trees and convert trees to plain data."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, Union

from .facade import DocumentFacade, ElementFacade, TextFacade
from .nodes import ElementNode, Node, TextNode, iter_elements

LOG = logging.getLogger(__name__)

TEXT_TYPE = "text"


def extract_tree(facade: Union[ElementFacade, TextFacade, ElementNode, TextNode]) -> Node:
    """Return the node wrapped by ``facade``.

    No copy is made: the result is the live tree the facade was built
    from, so later mutations through any facade remain visible.
    """

    if isinstance(facade, (ElementFacade, TextFacade)):
        return facade.node
    if isinstance(facade, (ElementNode, TextNode)):
        return facade
    raise TypeError(f"Cannot extract a tree from {type(facade).__name__}")


def tree_to_payload(node: Node) -> Dict[str, Any]:
    """Describe ``node`` and its subtree as JSON-compatible data.

    Elements map to ``{"type", "attributes", "children"}`` plus ``id`` and
    ``namespaceURI`` when set.  Text nodes map to ``{"type": "text",
    "content"}``; the ``content`` key, not the type, tells them apart from
    ``<text>`` elements.
    """

    if isinstance(node, TextNode):
        return {"type": TEXT_TYPE, "content": node.content}
    payload: Dict[str, Any] = {
        "type": node.kind,
        "attributes": dict(node.attributes),
        "children": [tree_to_payload(child) for child in node.children],
    }
    if node.id is not None:
        payload["id"] = node.id
    if node.namespace is not None:
        payload["namespaceURI"] = node.namespace
    return payload


def tree_from_payload(payload: Mapping[str, Any]) -> Node:
    """Rebuild a node tree from :func:`tree_to_payload` output."""

    if not isinstance(payload, Mapping):
        raise ValueError(f"Node payload must be a mapping, got {type(payload).__name__}")
    if "content" in payload and "children" not in payload:
        return TextNode(content=str(payload["content"]))
    kind = payload.get("type")
    if not kind:
        raise ValueError("Node payload is missing 'type'")
    attributes = payload.get("attributes") or {}
    if not isinstance(attributes, Mapping):
        raise ValueError(f"Attributes of <{kind}> must be a mapping")
    children = payload.get("children") or []
    node_id = payload.get("id")
    namespace = payload.get("namespaceURI")
    return ElementNode(
        kind=str(kind),
        attributes={str(key): str(value) for key, value in attributes.items()},
        children=[tree_from_payload(child) for child in children],
        id=str(node_id) if node_id is not None else None,
        namespace=str(namespace) if namespace is not None else None,
    )


def adopt_tree(document: DocumentFacade, node: ElementNode) -> ElementFacade:
    """Register the ids of an externally built tree with ``document``.

    Ids are bound in pre-order, so when two elements share an id the
    later one in traversal order ends up registered.
    """

    registry = document.registry
    adopted = 0
    for element in iter_elements(node):
        element_id = element.id or element.attributes.get("id")
        if element_id:
            registry.register(element, element_id)
            adopted += 1
    LOG.debug("Adopted <%s> tree with %d registered ids", node.kind, adopted)
    return ElementFacade(node, registry)


__all__ = ["TEXT_TYPE", "adopt_tree", "extract_tree", "tree_from_payload", "tree_to_payload"]
