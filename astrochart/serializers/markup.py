"""Standalone SVG markup for node trees.

Useful for exporting a headless chart as a file or inspecting it in a
browser.  Attribute order follows insertion order so identical drawing
sequences yield identical bytes.
"""
from __future__ import annotations

from typing import List, Optional

from ..vdom.nodes import SVG_NS, ElementNode, TextNode


def _escape(value: str) -> str:
    return (
        value.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


def _quote(value: str) -> str:
    return f'"{_escape(value)}"'


def _element_to_string(node: ElementNode, indent: int, pretty: bool, extra: str) -> str:
    pad = "  " * indent if pretty else ""
    child_pad = "  " * (indent + 1) if pretty else ""
    attrs = extra + "".join(f" {name}={_quote(value)}" for name, value in node.attributes.items())
    if not node.children:
        return f"{pad}<{node.kind}{attrs}/>"

    parts: List[str] = [f"{pad}<{node.kind}{attrs}>"]
    for child in node.children:
        if isinstance(child, TextNode):
            text = child.content.strip() if pretty else child.content
            parts.append(f"{child_pad}{_escape(text)}")
        else:
            parts.append(_element_to_string(child, indent + 1, pretty, ""))
    parts.append(f"{pad}</{node.kind}>")
    return ("\n" if pretty else "").join(parts)


def to_markup(
    node: ElementNode,
    *,
    pretty: bool = True,
    indent: int = 0,
    namespace: Optional[str] = SVG_NS,
) -> str:
    """Serialise ``node`` as SVG markup.

    ``xmlns`` is declared on ``node`` unless it already carries one or
    ``namespace`` is ``None``; the node's own namespace takes precedence
    over the argument.
    """

    extra = ""
    declared = node.namespace or namespace
    if declared and "xmlns" not in node.attributes:
        extra = f" xmlns={_quote(declared)}"
    return _element_to_string(node, indent, pretty, extra)


def to_bytes(node: ElementNode, *, pretty: bool = True) -> bytes:
    return to_markup(node, pretty=pretty).encode("utf-8")


__all__ = ["to_bytes", "to_markup"]
