"""Render a node tree as component source text (JSX for native SVG targets)."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import AbstractSet, List, Mapping, Optional, Set

from ..vdom.nodes import ElementNode, TextNode
from .names import DROPPED_ATTRIBUTES, component_name, prop_name

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceOptions:
    """Formatting knobs for :func:`serialize`."""

    indent_width: int = 2
    dropped_attributes: AbstractSet[str] = DROPPED_ATTRIBUTES
    component_names: Mapping[str, str] = field(default_factory=dict)
    attribute_names: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_config(cls, cfg: object) -> "SourceOptions":
        """Build options from a :class:`~astrochart.config.SourceCfg`."""

        return cls(
            indent_width=int(getattr(cfg, "indent_width", 2)),
            dropped_attributes=frozenset(getattr(cfg, "dropped_attributes", DROPPED_ATTRIBUTES)),
            component_names=dict(getattr(cfg, "component_names", {})),
            attribute_names=dict(getattr(cfg, "attribute_names", {})),
        )


DEFAULT_OPTIONS = SourceOptions()


def serialize(node: ElementNode, indent: int = 0, *, options: Optional[SourceOptions] = None) -> str:
    """Return component source for ``node`` and its subtree.

    Elements without children render self-closing.  Text children become
    string-literal expression lines.  ``transform`` and ``style`` are left
    out by default; only the nesting, not the exact whitespace, is part
    of the output contract.
    """

    opts = options or DEFAULT_OPTIONS
    unit = " " * opts.indent_width
    pad = unit * indent
    name = component_name(node.kind, opts.component_names)
    props = _render_props(node, opts)

    if not node.children:
        return f"{pad}<{name}{props} />"

    lines: List[str] = [f"{pad}<{name}{props}>"]
    for child in node.children:
        if isinstance(child, TextNode):
            lines.append(f"{pad}{unit}{{{_literal(child.content)}}}")
        else:
            lines.append(serialize(child, indent + 1, options=opts))
    lines.append(f"{pad}</{name}>")
    return "\n".join(lines)


def _render_props(node: ElementNode, opts: SourceOptions) -> str:
    parts: List[str] = []
    seen: Set[str] = set()
    for key, value in node.attributes.items():
        if key in opts.dropped_attributes:
            continue
        name = prop_name(key, opts.attribute_names)
        # "stroke-width" and "strokeWidth" both become strokeWidth; first one wins.
        if name in seen:
            LOG.debug("Skipping attribute %s on <%s>: duplicate prop %s", key, node.kind, name)
            continue
        seen.add(name)
        if '"' in value:
            parts.append(f"{name}={{{_literal(value)}}}")
        else:
            parts.append(f'{name}="{value}"')
    return " " + " ".join(parts) if parts else ""


def _literal(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


__all__ = ["DEFAULT_OPTIONS", "SourceOptions", "serialize"]
