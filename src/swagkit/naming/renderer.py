#!/usr/bin/env python3
# src/swagkit/naming/renderer.py
"""
Canonical renderer - flattens a qualified type tree into a definition name.
"""

from ..constants import (
    GENERIC_ARG_SEPARATOR,
    NAME_SUBSTITUTIONS,
    RENDER_ARRAY,
    RENDER_MAP,
    RENDER_MAP_TO,
    RENDER_POINTER,
)
from .types import MapType, NamedType, ParsedType, PointerType, SliceType


def render(node: ParsedType) -> str:
    """Render a tree without the top-level character substitutions."""
    match node:
        case NamedType(name=name, package=package, generic_args=args):
            text = f"{package}.{name}" if package else name
            if args:
                text += "[" + GENERIC_ARG_SEPARATOR.join(render(arg) for arg in args) + "]"
            return text
        case SliceType(element=element, length=None):
            return RENDER_ARRAY + render(element)
        case SliceType(element=element, length=length):
            return f"{RENDER_ARRAY}{length}_{render(element)}"
        case MapType(key=key, value=value):
            return RENDER_MAP + render(key) + RENDER_MAP_TO + render(value)
        case PointerType(element=element):
            return RENDER_POINTER + render(element)
        case _:
            raise TypeError(f"Unknown type node: {node!r}")


def canonicalize(text: str) -> str:
    """Make a rendered name safe for use as a definitions key."""
    text = text.strip()
    for old, new in NAME_SUBSTITUTIONS:
        text = text.replace(old, new)
    return text


def render_canonical(node: ParsedType) -> str:
    return canonicalize(render(node))


__all__ = ["render", "canonicalize", "render_canonical"]
