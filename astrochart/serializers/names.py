"""Tag and attribute name translation tables for component targets."""
from __future__ import annotations

import re
from typing import Mapping, Optional

COMPONENT_NAMES: Mapping[str, str] = {
    "svg": "Svg",
    "g": "G",
    "path": "Path",
    "line": "Line",
    "circle": "Circle",
    "rect": "Rect",
    "text": "Text",
}

# Known kebab-case SVG presentation attributes and their prop names.
ATTRIBUTE_NAMES: Mapping[str, str] = {
    "stroke-width": "strokeWidth",
    "stroke-opacity": "strokeOpacity",
    "stroke-linecap": "strokeLinecap",
    "stroke-linejoin": "strokeLinejoin",
    "stroke-dasharray": "strokeDasharray",
    "stroke-dashoffset": "strokeDashoffset",
    "stroke-miterlimit": "strokeMiterlimit",
    "fill-opacity": "fillOpacity",
    "fill-rule": "fillRule",
    "clip-path": "clipPath",
    "clip-rule": "clipRule",
    "font-size": "fontSize",
    "font-family": "fontFamily",
    "font-weight": "fontWeight",
    "font-style": "fontStyle",
    "text-anchor": "textAnchor",
    "dominant-baseline": "dominantBaseline",
    "alignment-baseline": "alignmentBaseline",
    "letter-spacing": "letterSpacing",
    "stop-color": "stopColor",
    "stop-opacity": "stopOpacity",
}

DROPPED_ATTRIBUTES = frozenset({"transform", "style"})

_KEBAB_SEGMENT = re.compile(r"-([a-z])")


def component_name(kind: str, overrides: Optional[Mapping[str, str]] = None) -> str:
    """Return the target component for ``kind``; never fails.

    Unknown kinds fall back to the kind with its first character
    upper-cased.
    """

    if overrides and kind in overrides:
        return overrides[kind]
    known = COMPONENT_NAMES.get(kind)
    if known is not None:
        return known
    return kind[:1].upper() + kind[1:]


def camel_case(name: str) -> str:
    return _KEBAB_SEGMENT.sub(lambda match: match.group(1).upper(), name)


def prop_name(attribute: str, overrides: Optional[Mapping[str, str]] = None) -> str:
    if overrides and attribute in overrides:
        return overrides[attribute]
    known = ATTRIBUTE_NAMES.get(attribute)
    if known is not None:
        return known
    return camel_case(attribute)


__all__ = [
    "ATTRIBUTE_NAMES",
    "COMPONENT_NAMES",
    "DROPPED_ATTRIBUTES",
    "camel_case",
    "component_name",
    "prop_name",
]
