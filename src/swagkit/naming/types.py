#!/usr/bin/env python3
# src/swagkit/naming/types.py
"""
Parsed type tree - the closed set of node kinds a type descriptor becomes.

A tree is built fresh for every name-generation call, rewritten by the
qualifier and consumed once by the renderer.
"""

from dataclasses import dataclass, field
from typing import Any, Union

from ..constants import BUILTIN_TYPE_NAMES


@dataclass(frozen=True)
class NamedType:
    """A type referenced by name, optionally instantiated with generic arguments."""

    name: str
    package: str = ""
    generic_args: tuple["ParsedType", ...] = ()
    origin: Any = field(default=None, compare=False, repr=False)

    @property
    def qualified_name(self) -> str:
        return f"{self.package}.{self.name}" if self.package else self.name


@dataclass(frozen=True)
class PointerType:
    element: "ParsedType"


@dataclass(frozen=True)
class SliceType:
    """Dynamic sequence when ``length`` is None, fixed-size array otherwise."""

    element: "ParsedType"
    length: int | None = None


@dataclass(frozen=True)
class MapType:
    key: "ParsedType"
    value: "ParsedType"


ParsedType = Union[NamedType, PointerType, SliceType, MapType]


def is_builtin_name(name: str) -> bool:
    """Check if a short name is one of the primitive kind names."""
    return name in BUILTIN_TYPE_NAMES


def is_builtin(node: ParsedType) -> bool:
    """Check if a node is a builtin named type (never package-qualified)."""
    if not isinstance(node, NamedType) or node.generic_args:
        return False
    if not node.package:
        return is_builtin_name(node.name)
    # unsafe.Pointer is the one kind name spelled with a dot
    return node.package == "unsafe" and is_builtin_name(node.qualified_name)


def as_dict(node: ParsedType) -> dict[str, Any]:
    """Plain-data view of a tree, used for debugging output."""
    match node:
        case NamedType(name=name, package=package, generic_args=args):
            data: dict[str, Any] = {"kind": "named", "package": package, "name": name}
            if args:
                data["generic_args"] = [as_dict(arg) for arg in args]
            return data
        case PointerType(element=element):
            return {"kind": "pointer", "element": as_dict(element)}
        case SliceType(element=element, length=length):
            return {"kind": "slice", "length": length, "element": as_dict(element)}
        case MapType(key=key, value=value):
            return {"kind": "map", "key": as_dict(key), "value": as_dict(value)}
        case _:
            raise TypeError(f"Unknown type node: {node!r}")


__all__ = [
    "NamedType",
    "PointerType",
    "SliceType",
    "MapType",
    "ParsedType",
    "is_builtin",
    "is_builtin_name",
    "as_dict",
]
