"""Serializers turning headless node trees into output artefacts."""

from .component_source import SourceOptions, serialize
from .markup import to_bytes, to_markup
from .names import (
    ATTRIBUTE_NAMES,
    COMPONENT_NAMES,
    DROPPED_ATTRIBUTES,
    camel_case,
    component_name,
    prop_name,
)
from .native import NativeComponent, NativeOptions, render_native

__all__ = [
    "serialize",
    "SourceOptions",
    "render_native",
    "NativeComponent",
    "NativeOptions",
    "to_markup",
    "to_bytes",
    "COMPONENT_NAMES",
    "ATTRIBUTE_NAMES",
    "DROPPED_ATTRIBUTES",
    "component_name",
    "camel_case",
    "prop_name",
]
