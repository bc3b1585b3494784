#!/usr/bin/env python3
# src/swagkit/naming/qualifier.py
"""
Package qualifier - rewrites the package of every named node per a NamingPolicy.

Generic arguments are qualified relative to the type that declares them. A
named node reached only through pointer, slice or map positions is named on
its own, so it is its own home package unless the caller pins one.
"""

from dataclasses import replace

from .policy import NamingPolicy
from .types import MapType, NamedType, ParsedType, PointerType, SliceType, is_builtin


def qualify(node: ParsedType, policy: NamingPolicy, home_package: str | None = None) -> ParsedType:
    """Return a copy of the tree with every named node's package rewritten.

    Args:
        node: Root of the parsed type tree.
        policy: Qualification flag and strip prefixes to apply.
        home_package: Package the names are relative to. None means each
            top-level named node uses its own package.

    Returns:
        The rewritten tree; the input tree is left untouched.
    """
    match node:
        case NamedType():
            return _qualify_named(node, policy, home_package)
        case PointerType(element=element):
            return PointerType(element=qualify(element, policy, home_package))
        case SliceType(element=element, length=length):
            return SliceType(element=qualify(element, policy, home_package), length=length)
        case MapType(key=key, value=value):
            return MapType(key=qualify(key, policy, home_package), value=qualify(value, policy, home_package))
        case _:
            raise TypeError(f"Unknown type node: {node!r}")


def _qualify_named(node: NamedType, policy: NamingPolicy, home_package: str | None) -> NamedType:
    if is_builtin(node):
        return node

    home = node.package if home_package is None else home_package
    package = node.package
    if policy.qualify_with_package and not package:
        package = home
    elif not policy.qualify_with_package and package == home:
        package = ""
    package = policy.strip(package)

    args = tuple(qualify(arg, policy, home) for arg in node.generic_args)
    return replace(node, package=package, generic_args=args)


__all__ = ["qualify"]
