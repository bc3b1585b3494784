#!/usr/bin/env python3
# src/swagkit/definitions.py
"""
Definitions - the schema registry keyed by canonical type names.

SchemaResolver turns a type into the schema used at a parameter or
response: builtins inline, containers as array/object schemas, and named
types as ``#/definitions/...`` references registered on the way.
"""

import inspect
import logging
import re
import typing
from typing import Any

from pydantic import BaseModel

from .constants import BUILTIN_SCHEMAS, DEFINITIONS_REF_PREFIX
from .errors import DefinitionConflictError
from .naming import MapType, NamedType, ParsedType, PointerType, SliceType, TypeNamer, canonicalize, is_builtin

logger = logging.getLogger(__name__)

# Characters pydantic replaces when it derives a $defs key from a class name
_DEF_NAME_CHARS = re.compile(r"[^a-zA-Z0-9.\-_]")


class DefinitionRegistry:
    """Canonical name -> schema body, in registration order."""

    def __init__(self) -> None:
        self._bodies: dict[str, dict[str, Any]] = {}
        self._origins: dict[str, Any] = {}

    def define(self, name: str, body: dict[str, Any], origin: Any = None) -> bool:
        """Register a definition.

        Args:
            name: Canonical definition name.
            body: Schema body stored under the name.
            origin: The type the body describes, used to detect collisions.

        Returns:
            True when the name was new, False when it was already registered
            for the same type.

        Raises:
            DefinitionConflictError: When a different type already owns the name.
        """
        if name in self._bodies:
            existing = self._origins.get(name)
            if existing is not None and origin is not None:
                conflict = existing != origin
            else:
                conflict = self._bodies[name] != body
            if conflict:
                raise DefinitionConflictError(name, existing if existing is not None else self._bodies[name], origin)
            return False

        self._bodies[name] = body
        if origin is not None:
            self._origins[name] = origin
        logger.debug(f"Registered definition: {name}")
        return True

    def get(self, name: str) -> dict[str, Any]:
        return self._bodies[name]

    def origin_of(self, name: str) -> Any:
        return self._origins.get(name)

    def names(self) -> list[str]:
        return list(self._bodies)

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return dict(self._bodies)

    def __contains__(self, name: object) -> bool:
        return name in self._bodies

    def __len__(self) -> int:
        return len(self._bodies)


class SchemaResolver:
    """Resolve types into schemas against one registry and one naming session."""

    def __init__(self, namer: TypeNamer, registry: DefinitionRegistry) -> None:
        self.namer = namer
        self.registry = registry

    def schema_for(self, prototype: Any, definition: dict[str, Any] | None = None) -> dict[str, Any]:
        """Schema for a type or descriptor string.

        ``definition`` replaces the generated body of the outermost named type.
        """
        return self._schema_for_node(self.namer.tree_for(prototype), definition)

    def _schema_for_node(self, node: ParsedType, definition: dict[str, Any] | None) -> dict[str, Any]:
        match node:
            case NamedType() if is_builtin(node):
                return dict(BUILTIN_SCHEMAS.get(node.name, {}))
            case NamedType():
                name = self.namer.render_node(node)
                body = definition if definition is not None else self._body_for(node.origin)
                self.registry.define(name, body, origin=node.origin)
                return {"$ref": self.namer.make_ref(name)}
            case PointerType(element=element):
                return self._schema_for_node(element, definition)
            case SliceType(element=element, length=length):
                schema: dict[str, Any] = {"type": "array", "items": self._schema_for_node(element, definition)}
                if length is not None:
                    schema["minItems"] = length
                    schema["maxItems"] = length
                return schema
            case MapType(value=value):
                return {"type": "object", "additionalProperties": self._schema_for_node(value, definition)}
            case _:
                raise TypeError(f"Unknown type node: {node!r}")

    def _body_for(self, origin: Any) -> dict[str, Any]:
        if not (inspect.isclass(origin) and issubclass(origin, BaseModel)):
            return {"type": "object"}

        body = origin.model_json_schema(ref_template=DEFINITIONS_REF_PREFIX + "{model}")
        nested = body.pop("$defs", {})
        if not nested:
            return body

        # Nested models are registered under their canonical names, not pydantic's
        models = _reachable_models(origin)
        names: dict[str, tuple[str, Any]] = {}
        for key, schema in nested.items():
            model = _match_model(key, schema, models)
            names[key] = (self.namer.name_for(model) if model is not None else canonicalize(key), model)
        refs = {DEFINITIONS_REF_PREFIX + key: self.namer.make_ref(name) for key, (name, _) in names.items()}

        body = _rewrite_refs(body, refs)
        for key, schema in nested.items():
            name, model = names[key]
            schema = _rewrite_refs(schema, refs)
            if model is origin:
                # Self-referencing models keep their own body under $defs
                body = schema
                continue
            self.registry.define(name, schema, origin=model)
        return body


def _reachable_models(model: type[BaseModel]) -> list[type[BaseModel]]:
    """``model`` and every model class reachable through its field annotations."""
    found: list[type[BaseModel]] = []
    pending: list[Any] = [model]
    while pending:
        annotation = pending.pop()
        if inspect.isclass(annotation) and issubclass(annotation, BaseModel):
            if annotation in found:
                continue
            found.append(annotation)
            pending.extend(field.annotation for field in annotation.model_fields.values())
        pending.extend(typing.get_args(annotation))
    return found


def _match_model(key: str, schema: dict[str, Any], models: list[type[BaseModel]]) -> type[BaseModel] | None:
    """Find the class pydantic stored under the ``$defs`` key ``key``."""
    for model in models:
        candidates = (model.__name__, f"{model.__module__}.{model.__qualname__}")
        if key in {_DEF_NAME_CHARS.sub("_", candidate) for candidate in candidates}:
            return model
    titled = [model for model in models if model.__name__ == schema.get("title")]
    return titled[0] if len(titled) == 1 else None


def _rewrite_refs(value: Any, refs: dict[str, str]) -> Any:
    if isinstance(value, dict):
        return {
            key: refs.get(item, item) if key == "$ref" and isinstance(item, str) else _rewrite_refs(item, refs)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [_rewrite_refs(item, refs) for item in value]
    return value


__all__ = ["DefinitionRegistry", "SchemaResolver"]
