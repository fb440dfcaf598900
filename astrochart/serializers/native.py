"""Translate node trees into native SVG component records.

The records mirror what a native SVG toolkit would mount: a component
name, a props mapping and children.  Attribute names are converted from
kebab-case to camelCase verbatim (``transform`` is kept, unlike the
source serializer) and stroke widths are parsed as numbers.  Unknown
element kinds are reported once through logging and skipped, so a
partially unknown tree still renders.
"""
from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field
from typing import Any, AbstractSet, Dict, List, Optional, Union

from ..vdom.nodes import ElementNode, TextNode, is_element
from .names import camel_case

LOG = logging.getLogger(__name__)

_LEADING_NUMBER = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")

LEAF_COMPONENTS = {
    "path": "Path",
    "circle": "Circle",
    "line": "Line",
    "rect": "Rect",
}


@dataclass(frozen=True)
class NativeOptions:
    default_stroke_width: float = 1.0
    numeric_props: AbstractSet[str] = frozenset({"strokeWidth"})
    warn_unknown: bool = True

    @classmethod
    def from_config(cls, cfg: object) -> "NativeOptions":
        return cls(
            default_stroke_width=float(getattr(cfg, "default_stroke_width", 1.0)),
            numeric_props=frozenset(getattr(cfg, "numeric_props", ("strokeWidth",))),
            warn_unknown=bool(getattr(cfg, "warn_unknown", True)),
        )


DEFAULT_OPTIONS = NativeOptions()


@dataclass
class NativeComponent:
    """One mounted component."""

    component: str
    props: Dict[str, Any] = field(default_factory=dict)
    children: List[Union["NativeComponent", str]] = field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "component": self.component,
            "props": dict(self.props),
            "children": [
                child.to_payload() if isinstance(child, NativeComponent) else child
                for child in self.children
            ],
        }


def _parse_float(value: object) -> Optional[float]:
    """Parse the leading number of ``value`` the way ``parseFloat`` does.

    Trailing units are ignored (``"2px"`` gives ``2.0``).  Returns ``None``
    when there is no leading number or the result is not finite.
    """

    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _LEADING_NUMBER.match(str(value))
        if match is None:
            return None
        number = float(match.group(0))
    return number if math.isfinite(number) else None


def native_props(node: ElementNode, key: int, options: NativeOptions = DEFAULT_OPTIONS) -> Dict[str, Any]:
    props: Dict[str, Any] = {"key": key}
    for attr, value in node.attributes.items():
        name = camel_case(attr)
        if name in options.numeric_props:
            number = _parse_float(value)
            # A zero or unparsable width falls back to the default, matching
            # ``parseFloat(value) || 1`` on the native side.
            props[name] = number if number else options.default_stroke_width
        else:
            props[name] = value
    return props


def _render_children(node: ElementNode, options: NativeOptions) -> List[Union[NativeComponent, str]]:
    rendered: List[Union[NativeComponent, str]] = []
    for index, child in enumerate(node.children):
        if not is_element(child):
            continue
        component = render_native(child, index, options=options)
        if component is not None:
            rendered.append(component)
    return rendered


def render_native(
    node: ElementNode,
    key: int = 0,
    *,
    options: Optional[NativeOptions] = None,
) -> Optional[NativeComponent]:
    """Return the native component for ``node`` or ``None`` when skipped."""

    opts = options or DEFAULT_OPTIONS
    props = native_props(node, key, opts)
    kind = node.kind

    if kind == "svg":
        for dimension in ("width", "height"):
            if dimension in props:
                number = _parse_float(props[dimension])
                if number is not None:
                    props[dimension] = number
        return NativeComponent("Svg", props, _render_children(node, opts))

    if kind == "g":
        return NativeComponent("G", props, _render_children(node, opts))

    if kind in LEAF_COMPONENTS:
        return NativeComponent(LEAF_COMPONENTS[kind], props)

    if kind == "text":
        content = next(
            (child.content for child in node.children if isinstance(child, TextNode)),
            "",
        )
        return NativeComponent("Text", props, [content])

    if opts.warn_unknown:
        LOG.warning("Unknown SVG element type: %s", kind)
    return None


__all__ = [
    "DEFAULT_OPTIONS",
    "LEAF_COMPONENTS",
    "NativeComponent",
    "NativeOptions",
    "native_props",
    "render_native",
]
