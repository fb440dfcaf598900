"""Per-document element registry: namespace constant plus id lookup."""
from __future__ import annotations

import logging
from typing import MutableMapping, Optional

from .nodes import SVG_NS, ElementNode, TextNode

LOG = logging.getLogger(__name__)


class DuplicateIdError(ValueError):
    """Raised by :class:`StrictElementRegistry` when an id is reused."""

    def __init__(self, element_id: str) -> None:
        super().__init__(f"Element id '{element_id}' already registered")
        self.element_id = element_id


class ElementRegistry:
    """Allocate nodes and keep the ``id -> element`` table for one document.

    The registry only performs lookup.  It never owns tree placement, so
    clearing it leaves every tree built from it intact.  Registering an
    id a second time silently rebinds it (last write wins); the previous
    element stays in its tree but is no longer reachable by id.
    """

    def __init__(self, namespace: str = SVG_NS) -> None:
        self._namespace = namespace
        self._elements: MutableMapping[str, ElementNode] = {}
        self._root: Optional[ElementNode] = None

    @property
    def namespace(self) -> str:
        return self._namespace

    def create_element(self, namespace: Optional[str], kind: str) -> ElementNode:
        return ElementNode(kind=kind, namespace=namespace)

    def create_text_node(self, content: str) -> TextNode:
        return TextNode(content=content)

    def register(self, element: ElementNode, element_id: str) -> None:
        self._bind(element_id, element)
        element.id = element_id

    def _bind(self, element_id: str, element: ElementNode) -> None:
        previous = self._elements.get(element_id)
        if previous is not None and previous is not element:
            LOG.debug("Element id %r rebound; previous <%s> orphaned", element_id, previous.kind)
        self._elements[element_id] = element

    def lookup(self, element_id: str) -> Optional[ElementNode]:
        return self._elements.get(element_id)

    def set_root(self, element: Optional[ElementNode]) -> None:
        self._root = element

    @property
    def root(self) -> Optional[ElementNode]:
        return self._root

    def clear(self) -> None:
        self._elements.clear()
        self._root = None

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, element_id: object) -> bool:
        return element_id in self._elements


class StrictElementRegistry(ElementRegistry):
    """Registry variant that rejects rebinding an id to another element.

    Re-registering the same element under its existing id is allowed.
    """

    def _bind(self, element_id: str, element: ElementNode) -> None:
        previous = self._elements.get(element_id)
        if previous is not None and previous is not element:
            raise DuplicateIdError(element_id)
        self._elements[element_id] = element


__all__ = ["DuplicateIdError", "ElementRegistry", "StrictElementRegistry"]
