#!/usr/bin/env python3
# src/swagkit/naming/__init__.py
"""
Type naming - canonical, charset-safe definition names for types.

Pipeline: describe/parse -> qualify (NamingPolicy) -> render.
"""

from .engine import TypeNamer, make_name
from .introspect import describe
from .parser import parse_descriptor, parse_type
from .policy import DEFAULT_POLICY, NamingPolicy
from .qualifier import qualify
from .renderer import canonicalize, render, render_canonical
from .types import (
    MapType,
    NamedType,
    ParsedType,
    PointerType,
    SliceType,
    as_dict,
    is_builtin,
    is_builtin_name,
)

__all__ = [
    "TypeNamer",
    "make_name",
    "describe",
    "parse_descriptor",
    "parse_type",
    "NamingPolicy",
    "DEFAULT_POLICY",
    "qualify",
    "render",
    "canonicalize",
    "render_canonical",
    "NamedType",
    "PointerType",
    "SliceType",
    "MapType",
    "ParsedType",
    "is_builtin",
    "is_builtin_name",
    "as_dict",
]
