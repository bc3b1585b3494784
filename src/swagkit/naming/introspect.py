#!/usr/bin/env python3
# src/swagkit/naming/introspect.py
"""
Introspection - Python annotations to parsed type trees

Walks an annotation directly into the same tree the descriptor parser
builds, so callers holding real types never go through string parsing.
"""

import collections.abc
import inspect
import typing
from types import UnionType
from typing import Any, Union

from pydantic import BaseModel

from ..errors import UnsupportedTypeError
from .parser import parse_descriptor
from .types import MapType, NamedType, ParsedType, PointerType, SliceType

# Python scalars and the reflection kind they are named as
_BUILTIN_KINDS = {
    str: "string",
    bool: "bool",
    int: "int64",
    float: "float64",
    complex: "complex128",
}

_SEQUENCE_ORIGINS = (
    list,
    set,
    frozenset,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
    collections.abc.Collection,
    collections.abc.Iterable,
)

_MAPPING_ORIGINS = (dict, collections.abc.Mapping, collections.abc.MutableMapping)

_TREE_TYPES = (NamedType, PointerType, SliceType, MapType)


def _pydantic_generic(annotation: Any) -> tuple[type, tuple[Any, ...]] | None:
    """Return (origin, args) for a parametrized pydantic generic model."""
    if not (inspect.isclass(annotation) and issubclass(annotation, BaseModel)):
        return None
    metadata = getattr(annotation, "__pydantic_generic_metadata__", None) or {}
    origin = metadata.get("origin")
    if origin is None:
        return None
    return origin, tuple(metadata.get("args", ()))


def _named(cls: type, args: tuple[Any, ...], origin: Any) -> NamedType:
    return NamedType(
        name=cls.__name__,
        package=cls.__module__,
        generic_args=tuple(describe(arg) for arg in args),
        origin=origin,
    )


def describe(annotation: Any) -> ParsedType:
    """Describe a Python annotation as a parsed type tree.

    Args:
        annotation: A class, a parametrized generic, a descriptor string or
            an already parsed tree.

    Returns:
        The unqualified tree.

    Raises:
        UnsupportedTypeError: For annotations with no named, pointer, slice
            or map equivalent (Any, bare containers, mixed unions).
        ParseError: When a descriptor string is malformed.
    """
    if isinstance(annotation, str):
        return parse_descriptor(annotation)
    if isinstance(annotation, _TREE_TYPES):
        return annotation

    if annotation is Any:
        raise UnsupportedTypeError(annotation, "Any has no schema name")
    if annotation in _BUILTIN_KINDS:
        return NamedType(name=_BUILTIN_KINDS[annotation], origin=annotation)
    if annotation in (bytes, bytearray):
        return SliceType(element=NamedType(name="uint8"))

    generic_model = _pydantic_generic(annotation)
    if generic_model is not None:
        model, args = generic_model
        return _named(model, args, origin=annotation)

    origin = typing.get_origin(annotation)
    args = typing.get_args(annotation)

    if origin is Union or origin is UnionType:
        non_none = [arg for arg in args if arg is not type(None)]
        if len(non_none) == 1 and len(args) == 2:
            return PointerType(element=describe(non_none[0]))
        raise UnsupportedTypeError(annotation, "only optional unions can be described")

    if origin is typing.Annotated:
        return describe(args[0])

    if origin in _SEQUENCE_ORIGINS:
        if not args:
            raise UnsupportedTypeError(annotation, "sequence needs an item type")
        return SliceType(element=describe(args[0]))

    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return SliceType(element=describe(args[0]))
        if args and all(arg == args[0] for arg in args):
            return SliceType(element=describe(args[0]), length=len(args))
        raise UnsupportedTypeError(annotation, "only homogeneous tuples can be described")

    if origin in _MAPPING_ORIGINS:
        if len(args) != 2:
            raise UnsupportedTypeError(annotation, "mapping needs key and value types")
        return MapType(key=describe(args[0]), value=describe(args[1]))

    if origin is not None and inspect.isclass(origin) and origin.__module__ != "builtins":
        return _named(origin, args, origin=annotation)

    if inspect.isclass(annotation) and annotation.__module__ != "builtins":
        return _named(annotation, (), origin=annotation)

    raise UnsupportedTypeError(annotation)


__all__ = ["describe"]
