"""Document-style facades over the headless node model.

Drawing code written against a browser document (``createElementNS``,
``setAttribute``, ``appendChild`` ...) runs unchanged against these
objects.  Each facade wraps exactly one node and, for elements and
documents, the registry shared by the whole document.  Facades are
disposable: wrapping the same node twice yields two views of the same
data.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Protocol, Union, runtime_checkable

from .nodes import ElementNode, TextNode, contains, iter_elements
from .registry import ElementRegistry

LOG = logging.getLogger(__name__)


@runtime_checkable
class ElementLike(Protocol):
    """Element operations available to drawing code."""

    @property
    def namespace(self) -> str: ...

    @property
    def id(self) -> str: ...

    def set_attribute(self, name: str, value: object) -> None: ...

    def get_attribute(self, name: str) -> Optional[str]: ...

    def append_child(self, child: "ChildFacade") -> "ChildFacade": ...

    def remove_child(self, child: "ChildFacade") -> None: ...

    def query_selector_all(self, selector: str) -> List["ElementFacade"]: ...


@runtime_checkable
class DocumentLike(Protocol):
    """Document operations available to drawing code."""

    @property
    def body(self) -> "ElementFacade": ...

    def create_element_ns(self, namespace: Optional[str], kind: str) -> "ElementFacade": ...

    def create_element(self, kind: str) -> "ElementFacade": ...

    def create_text_node(self, content: str) -> "TextFacade": ...

    def get_element_by_id(self, element_id: str) -> Optional["ElementFacade"]: ...


def _stringify(value: object) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        return repr(value)
    return str(value)


class TextFacade:
    """Read-only view of a text node."""

    __slots__ = ("_node",)

    def __init__(self, node: TextNode) -> None:
        self._node = node

    @property
    def node(self) -> TextNode:
        return self._node

    @property
    def content(self) -> str:
        return self._node.content

    def __repr__(self) -> str:
        return f"TextFacade({self._node.content!r})"


class ElementFacade:
    """Element view mutating an :class:`ElementNode` in place."""

    __slots__ = ("_node", "_registry")

    def __init__(self, node: ElementNode, registry: ElementRegistry) -> None:
        self._node = node
        self._registry = registry

    @property
    def node(self) -> ElementNode:
        return self._node

    @property
    def tag_name(self) -> str:
        return self._node.kind

    @property
    def namespace(self) -> str:
        return self._node.namespace or self._registry.namespace

    @property
    def id(self) -> str:
        # The node field wins over the attribute; they only agree when the
        # id was assigned through ``set_attribute``.
        return self._node.id or self._node.attributes.get("id") or ""

    @property
    def children(self) -> List[ChildFacade]:
        return [self._wrap(child) for child in self._node.children]

    # Attributes ---------------------------------------------------------
    def set_attribute(self, name: str, value: object) -> None:
        text = _stringify(value)
        if name == "id":
            self._registry.register(self._node, text)
        self._node.attributes[name] = text

    def get_attribute(self, name: str) -> Optional[str]:
        return self._node.attributes.get(name)

    def has_attribute(self, name: str) -> bool:
        return name in self._node.attributes

    def remove_attribute(self, name: str) -> None:
        self._node.attributes.pop(name, None)

    # Children -----------------------------------------------------------
    def append_child(self, child: ChildFacade) -> ChildFacade:
        node = _unwrap(child)
        if isinstance(node, ElementNode) and contains(node, self._node):
            raise ValueError(
                f"Cannot append <{node.kind}> into its own subtree"
            )
        self._node.children.append(node)
        return child

    def remove_child(self, child: ChildFacade) -> None:
        node = _unwrap(child)
        try:
            self._node.children.remove(node)
        except ValueError:
            return

    # Queries ------------------------------------------------------------
    def query_selector_all(self, selector: str) -> List["ElementFacade"]:
        if selector.startswith("#"):
            match = self._find_by_id(selector[1:])
            return [match] if match is not None else []
        return [
            ElementFacade(node, self._registry)
            for node in iter_elements(self._node)
            if node.kind == selector
        ]

    def query_selector(self, selector: str) -> Optional["ElementFacade"]:
        matches = self.query_selector_all(selector)
        return matches[0] if matches else None

    def _find_by_id(self, element_id: str) -> Optional["ElementFacade"]:
        if not element_id:
            return None
        registered = self._registry.lookup(element_id)
        for node in iter_elements(self._node):
            if registered is not None:
                if node is registered:
                    return ElementFacade(node, self._registry)
            elif (node.id or node.attributes.get("id")) == element_id:
                return ElementFacade(node, self._registry)
        return None

    def _wrap(self, node: Union[ElementNode, TextNode]) -> ChildFacade:
        if isinstance(node, TextNode):
            return TextFacade(node)
        return ElementFacade(node, self._registry)

    # DOM spelling -------------------------------------------------------
    setAttribute = set_attribute
    getAttribute = get_attribute
    hasAttribute = has_attribute
    removeAttribute = remove_attribute
    appendChild = append_child
    removeChild = remove_child
    querySelectorAll = query_selector_all
    querySelector = query_selector

    @property
    def namespaceURI(self) -> str:
        return self.namespace

    @property
    def tagName(self) -> str:
        return self.tag_name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ElementFacade):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return id(self._node)

    def __repr__(self) -> str:
        return f"ElementFacade(<{self._node.kind}> id={self.id!r})"


ChildFacade = Union[ElementFacade, TextFacade]


def _unwrap(child: object) -> Union[ElementNode, TextNode]:
    if isinstance(child, (ElementFacade, TextFacade)):
        return child.node
    if isinstance(child, (ElementNode, TextNode)):
        return child
    raise TypeError(f"Expected an element or text facade, got {type(child).__name__}")


class DocumentFacade:
    """Document view owning one registry and a lazily created body."""

    def __init__(self, registry: Optional[ElementRegistry] = None, *, body_kind: str = "body") -> None:
        self._registry = registry if registry is not None else ElementRegistry()
        self._body_kind = body_kind
        self._body: Optional[ElementFacade] = None

    @property
    def registry(self) -> ElementRegistry:
        return self._registry

    @property
    def body(self) -> ElementFacade:
        if self._body is None:
            node = self._registry.create_element(self._registry.namespace, self._body_kind)
            self._body = ElementFacade(node, self._registry)
            LOG.debug("Created document body <%s>", self._body_kind)
        return self._body

    @property
    def document_element(self) -> Optional[ElementFacade]:
        root = self._registry.root
        return ElementFacade(root, self._registry) if root is not None else None

    def set_root(self, element: Optional[ElementFacade]) -> None:
        self._registry.set_root(element.node if element is not None else None)

    def create_element_ns(self, namespace: Optional[str], kind: str) -> ElementFacade:
        node = self._registry.create_element(namespace, kind)
        return ElementFacade(node, self._registry)

    def create_element(self, kind: str) -> ElementFacade:
        return self.create_element_ns(self._registry.namespace, kind)

    def create_text_node(self, content: str) -> TextFacade:
        return TextFacade(self._registry.create_text_node(content))

    def get_element_by_id(self, element_id: str) -> Optional[ElementFacade]:
        node = self._registry.lookup(element_id)
        return ElementFacade(node, self._registry) if node is not None else None

    def clear(self) -> None:
        self._registry.clear()

    createElementNS = create_element_ns
    createElement = create_element
    createTextNode = create_text_node
    getElementById = get_element_by_id

    @property
    def documentElement(self) -> Optional[ElementFacade]:
        return self.document_element


__all__ = [
    "ChildFacade",
    "DocumentFacade",
    "DocumentLike",
    "ElementFacade",
    "ElementLike",
    "TextFacade",
]
