#!/usr/bin/env python3
# src/swagkit/naming/parser.py
"""
Descriptor parser - type descriptor strings to parsed type trees

Recursive descent over the descriptor grammar:

    Type        := MapType | SliceType | PointerType | NamedType
    MapType     := "map[" Type "]" Type
    SliceType   := "[" Digits? "]" Type
    PointerType := "*" Type
    NamedType   := PathSegment ("." PathSegment)* ("/" PathSegment)* Name GenericArgs?
    GenericArgs := "[" Type ("," " "? Type)* "]"

A dotted or slashed path becomes the package; the last segment is the name.
"""

import logging

from ..constants import MAP_OPEN, MAX_TYPE_DEPTH, PACKAGE_SEPARATORS, POINTER_MARK
from ..errors import ParseError
from .types import MapType, NamedType, ParsedType, PointerType, SliceType

logger = logging.getLogger(__name__)

# Characters that end the current type without being consumed by it
_TYPE_TERMINATORS = frozenset("[],")


class _DescriptorParser:
    """Single left-to-right scan over one descriptor."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.depth = 0

    @property
    def remainder(self) -> str:
        return self.text[self.pos :]

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def fail(self, reason: str) -> ParseError:
        return ParseError(reason, self.remainder, self.pos)

    def expect(self, char: str, reason: str) -> None:
        if self.peek() != char:
            raise self.fail(reason)
        self.pos += 1

    def parse_type(self) -> ParsedType:
        if self.depth >= MAX_TYPE_DEPTH:
            raise self.fail(f"type nesting deeper than {MAX_TYPE_DEPTH} levels")
        self.depth += 1
        try:
            return self._parse_type()
        finally:
            self.depth -= 1

    def _parse_type(self) -> ParsedType:
        if self.text.startswith(MAP_OPEN, self.pos):
            self.pos += len(MAP_OPEN)
            key = self.parse_type()
            self.expect("]", "unterminated map key")
            return MapType(key=key, value=self.parse_type())

        if self.peek() == "[":
            self.pos += 1
            length = self.parse_length()
            self.expect("]", "unterminated array brackets")
            return SliceType(element=self.parse_type(), length=length)

        if self.peek() == POINTER_MARK:
            self.pos += 1
            return PointerType(element=self.parse_type())

        return self.parse_named()

    def parse_length(self) -> int | None:
        start = self.pos
        while self.peek().isascii() and self.peek().isdigit():
            self.pos += 1
        if self.pos == start:
            return None
        if self.text[start] == "0" and self.pos - start > 1:
            # Lengths are written without leading zeros
            self.pos = start
            raise self.fail("array length has a leading zero")
        return int(self.text[start : self.pos])

    def parse_named(self) -> NamedType:
        package = ""
        name = ""
        while self.pos < len(self.text):
            char = self.text[self.pos]
            if char in _TYPE_TERMINATORS or char.isspace():
                break
            if char in PACKAGE_SEPARATORS:
                package += name + char
                name = ""
            else:
                name += char
            self.pos += 1

        if not name:
            raise self.fail("expected a type name")

        generic_args: list[ParsedType] = []
        if self.peek() == "[":
            self.pos += 1
            generic_args.append(self.parse_type())
            while self.peek() == ",":
                self.pos += 1
                if self.peek() == " ":
                    self.pos += 1
                generic_args.append(self.parse_type())
            self.expect("]", "unterminated generic argument list")

        return NamedType(name=name, package=package.rstrip(PACKAGE_SEPARATORS), generic_args=tuple(generic_args))


def parse_type(text: str) -> tuple[ParsedType, str]:
    """Parse one type from the front of a descriptor.

    Returns:
        The parsed tree and the unconsumed remainder (empty when the whole
        descriptor was a single type).

    Raises:
        ParseError: When the descriptor grammar is violated.
    """
    parser = _DescriptorParser(text.strip())
    tree = parser.parse_type()
    return tree, parser.remainder


def parse_descriptor(text: str) -> ParsedType:
    """Parse a complete descriptor; trailing input is a ParseError."""
    parser = _DescriptorParser(text.strip())
    tree = parser.parse_type()
    if parser.remainder:
        raise parser.fail("unexpected trailing input")
    logger.debug(f"Parsed descriptor {text!r} -> {tree!r}")
    return tree


__all__ = ["parse_type", "parse_descriptor"]
