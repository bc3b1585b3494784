"""
Structured error types for swagkit.

Every error carries an optional fix suggestion, mirroring how the document
builder reports misuse back to the caller.
"""

from typing import Any


class SwagError(Exception):
    """Base swagkit error with an optional fix suggestion."""

    def __init__(self, message: str, suggestion: str | None = None, docs_url: str | None = None):
        self.suggestion = suggestion
        self.docs_url = docs_url
        super().__init__(message)

    def to_message(self) -> str:
        """Format the error with suggestion."""
        parts = [str(self)]
        if self.suggestion:
            parts.append(f"Suggestion: {self.suggestion}")
        if self.docs_url:
            parts.append(f"Docs: {self.docs_url}")
        return " | ".join(parts)


class ParseError(SwagError):
    """A type descriptor violated the descriptor grammar.

    ``remainder`` is the unconsumed input at the point of failure and
    ``position`` its offset into the original descriptor.
    """

    def __init__(self, reason: str, remainder: str, position: int = 0):
        self.reason = reason
        self.remainder = remainder
        self.position = position
        super().__init__(
            f"Invalid type descriptor: {reason} at offset {position} (remaining: {remainder!r})",
            suggestion="Check that every 'map[', '[' and generic argument list is closed with ']'",
        )


class UnsupportedTypeError(SwagError):
    """An annotation cannot be described as a named, pointer, slice or map type."""

    def __init__(self, annotation: Any, reason: str = "unsupported annotation"):
        self.annotation = annotation
        super().__init__(
            f"Cannot describe type {annotation!r}: {reason}",
            suggestion="Use a concrete class, list[T], dict[K, V], tuple[T, ...] or T | None",
        )


class DefinitionConflictError(SwagError):
    """Two distinct types rendered to the same definition name."""

    def __init__(self, name: str, existing: Any, incoming: Any):
        self.name = name
        self.existing = existing
        self.incoming = incoming
        super().__init__(
            f"Definition '{name}' is already registered for {existing!r}, cannot register {incoming!r}",
            suggestion="Enable package qualification or adjust the strip prefixes",
        )


class ParameterConflictError(SwagError):
    """Form and body parameters were mixed on one endpoint."""

    def __init__(self, existing: str, incoming: str):
        self.existing = existing
        self.incoming = incoming
        super().__init__(f"Cannot mix {existing} and {incoming} parameters")


class EmptyParameterNameError(SwagError):
    """A parameter list entry has no name."""

    def __init__(self, index: int, parameter: Any):
        self.index = index
        self.parameter = parameter
        super().__init__(f"Parameter {index}: {parameter!r} has an empty name")


__all__ = [
    "SwagError",
    "ParseError",
    "UnsupportedTypeError",
    "DefinitionConflictError",
    "ParameterConflictError",
    "EmptyParameterNameError",
]
