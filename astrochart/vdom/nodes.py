"""Plain data records backing the headless SVG document.

Element and text nodes carry no behaviour of their own.  Facades mutate
them in place and serializers walk them; the tree is fully described by
these values so it can be extracted, stored or serialised without any
facade still alive.
"""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

SVG_NS = "http://www.w3.org/2000/svg"


@dataclass
class TextNode:
    """Literal character data.  Never has attributes or children."""

    content: str


@dataclass
class ElementNode:
    """A single markup element.

    ``attributes`` keeps insertion order so serialised output is
    deterministic.  ``children`` order is paint order.  ``id`` is a
    denormalised copy of ``attributes["id"]`` maintained by the registry.
    """

    kind: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List["Node"] = field(default_factory=list)
    id: Optional[str] = None
    namespace: Optional[str] = None


Node = Union[ElementNode, TextNode]


def is_element(node: object) -> bool:
    return isinstance(node, ElementNode)


def iter_elements(root: ElementNode) -> Iterator[ElementNode]:
    """Yield ``root`` and every descendant element in pre-order.

    Text nodes are skipped; they cannot be matched by kind or id and
    never have children to descend into.
    """

    stack: List[ElementNode] = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in reversed(node.children) if is_element(child))


def contains(root: ElementNode, target: Node) -> bool:
    """Return ``True`` when ``target`` is ``root`` or one of its descendants.

    Identity, not equality: two structurally equal nodes are still
    distinct positions in the tree.
    """

    return any(node is target for node in iter_elements(root))


__all__ = [
    "SVG_NS",
    "ElementNode",
    "TextNode",
    "Node",
    "is_element",
    "iter_elements",
    "contains",
]
