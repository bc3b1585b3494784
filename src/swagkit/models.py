#!/usr/bin/env python3
# src/swagkit/models.py
"""
models.py - Swagger 2.0 document data models

Plain dataclasses for every object in the document, each with a
``to_dict()`` producing the JSON shape (empty fields omitted).
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import orjson

from .constants import HTTP_METHODS, PRIVATE_PREFIX, SWAGGER_VERSION
from .definitions import DefinitionRegistry, SchemaResolver
from .naming import TypeNamer

logger = logging.getLogger(__name__)


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is None or an empty string/list/dict."""
    return {key: value for key, value in data.items() if value is not None and value != "" and value != [] and value != {}}


def _as_dict(value: Any) -> Any:
    return value.to_dict() if hasattr(value, "to_dict") else value


# ============================================================================
# Info
# ============================================================================


@dataclass
class Contact:
    email: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _compact({"email": self.email})


@dataclass
class License:
    name: str = ""
    url: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _compact({"name": self.name, "url": self.url})


@dataclass
class Info:
    title: str = ""
    description: str = ""
    version: str = ""
    terms_of_service: str = ""
    contact: Contact | None = None
    license: License | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "description": self.description,
                "version": self.version,
                "termsOfService": self.terms_of_service,
                "title": self.title,
                "contact": self.contact.to_dict() if self.contact else None,
                "license": self.license.to_dict() if self.license else None,
            }
        )


@dataclass
class Docs:
    """External documentation link of a tag."""

    description: str = ""
    url: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _compact({"description": self.description, "url": self.url})


@dataclass
class Tag:
    name: str
    description: str = ""
    docs: Docs = field(default_factory=Docs)

    def to_dict(self) -> dict[str, Any]:
        return _compact({"name": self.name, "description": self.description, "externalDocs": self.docs.to_dict()})


# ============================================================================
# Parameters and Responses
# ============================================================================


@dataclass
class Header:
    type: str = ""
    format: str = ""
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _compact({"type": self.type, "format": self.format, "description": self.description})


@dataclass
class Parameter:
    """Endpoint parameter; body parameters carry an unresolved ``prototype``."""

    name: str = ""
    in_: str = ""
    type: str = ""
    format: str = ""
    description: str = ""
    required: bool = False
    schema: dict[str, Any] | None = None
    prototype: Any = None  # type to resolve into a definition reference
    definition: dict[str, Any] | None = None  # caller supplied definition body

    def to_dict(self) -> dict[str, Any]:
        data = _compact(
            {
                "in": self.in_,
                "name": self.name,
                "description": self.description,
                "schema": self.schema,
                "type": self.type,
                "format": self.format,
            }
        )
        data["required"] = self.required
        return data


@dataclass
class Response:
    description: str = ""
    schema: dict[str, Any] | None = None
    headers: dict[str, Header] = field(default_factory=dict)
    prototype: Any = None
    definition: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        data = _compact(
            {
                "schema": self.schema,
                "headers": {name: header.to_dict() for name, header in self.headers.items()},
            }
        )
        # description is mandatory on a Swagger response
        return {"description": self.description, **data}


# ============================================================================
# Security
# ============================================================================


@dataclass
class SecurityScheme:
    type: str
    description: str = ""
    name: str = ""
    in_: str = ""
    flow: str = ""
    authorization_url: str = ""
    token_url: str = ""
    scopes: dict[str, str] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)  # x-* vendor fields

    def to_dict(self) -> dict[str, Any]:
        data = _compact(
            {
                "type": self.type,
                "description": self.description,
                "name": self.name,
                "in": self.in_,
                "flow": self.flow,
                "authorizationUrl": self.authorization_url,
                "tokenUrl": self.token_url,
                "scopes": self.scopes,
            }
        )
        data.update(self.extensions)
        return data


@dataclass
class SecurityRequirement:
    """Scheme name to scopes requirements; disabled renders as an empty list."""

    requirements: list[dict[str, list[str]]] = field(default_factory=list)
    disable_security: bool = False

    def to_dict(self) -> list[dict[str, list[str]]]:
        if self.disable_security:
            return []
        return [dict(requirement) for requirement in self.requirements]


# ============================================================================
# Endpoint
# ============================================================================


@dataclass
class Endpoint:
    method: str
    path: str
    summary: str = ""
    description: str = ""
    operation_id: str = ""
    produces: list[str] = field(default_factory=list)
    consumes: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    parameters: list[Parameter] = field(default_factory=list)
    responses: dict[str, Response] = field(default_factory=dict)
    security: SecurityRequirement | None = None
    handler: Callable[..., Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        data = _compact(
            {
                "tags": self.tags,
                "summary": self.summary,
                "description": self.description,
                "operationId": self.operation_id,
                "produces": self.produces,
                "consumes": self.consumes,
                "parameters": [parameter.to_dict() for parameter in self.parameters],
                "responses": {code: response.to_dict() for code, response in self.responses.items()},
            }
        )
        if self.security is not None:
            data["security"] = self.security.to_dict()
        return data


# ============================================================================
# API document
# ============================================================================


@dataclass
class API:
    """Swagger document plus the naming session used to build its definitions."""

    info: Info = field(default_factory=Info)
    host: str = ""
    base_path: str = ""
    schemes: list[str] = field(default_factory=list)
    tags: list[Tag] = field(default_factory=list)
    endpoints: list[Endpoint] = field(default_factory=list)
    security_definitions: dict[str, Any] = field(default_factory=dict)
    security: SecurityRequirement | None = None
    definitions: DefinitionRegistry = field(default_factory=DefinitionRegistry)
    namer: TypeNamer = field(default_factory=TypeNamer)

    @property
    def resolver(self) -> SchemaResolver:
        return SchemaResolver(self.namer, self.definitions)

    def add_endpoints(self, *endpoints: Endpoint) -> None:
        """Add endpoints and register the definitions they reference."""
        self.endpoints.extend(endpoints)
        self.resolve()

    def resolve(self) -> None:
        """Turn every pending body/response prototype into a definition reference."""
        resolver = self.resolver
        for endpoint in self.endpoints:
            for parameter in endpoint.parameters:
                if parameter.prototype is not None and parameter.schema is None:
                    parameter.schema = resolver.schema_for(parameter.prototype, parameter.definition)
            for response in endpoint.responses.values():
                if response.prototype is not None and response.schema is None:
                    response.schema = resolver.schema_for(response.prototype, response.definition)

    def walk(self, callback: Callable[[str, Endpoint], None]) -> None:
        for endpoint in self.endpoints:
            callback(endpoint.path, endpoint)

    def remove_private(self) -> None:
        """Drop parameters and definition properties whose names start with '_'."""
        for endpoint in self.endpoints:
            endpoint.parameters = [p for p in endpoint.parameters if not p.name.startswith(PRIVATE_PREFIX)]
        for name in self.definitions.names():
            body = self.definitions.get(name)
            properties = body.get("properties")
            if not properties:
                continue
            body["properties"] = {key: value for key, value in properties.items() if not key.startswith(PRIVATE_PREFIX)}
            if "required" in body:
                body["required"] = [key for key in body["required"] if not key.startswith(PRIVATE_PREFIX)]

    def paths(self) -> dict[str, dict[str, Any]]:
        paths: dict[str, dict[str, Any]] = {}
        for endpoint in self.endpoints:
            method = endpoint.method.lower()
            if method not in HTTP_METHODS:
                logger.warning(f"Skipping endpoint {endpoint.path} with unknown method {endpoint.method}")
                continue
            operations = paths.setdefault(endpoint.path, {})
            if method in operations:
                logger.warning(f"Endpoint {endpoint.method} {endpoint.path} defined twice, keeping the last")
            operations[method] = endpoint.to_dict()
        return paths

    def to_dict(self) -> dict[str, Any]:
        data = _compact(
            {
                "swagger": SWAGGER_VERSION,
                "info": self.info.to_dict(),
                "host": self.host,
                "basePath": self.base_path,
                "schemes": self.schemes,
                "paths": self.paths(),
                "definitions": self.definitions.to_dict(),
                "tags": [tag.to_dict() for tag in self.tags],
                "securityDefinitions": {name: _as_dict(scheme) for name, scheme in self.security_definitions.items()},
            }
        )
        data.setdefault("info", {})
        data.setdefault("paths", {})
        if self.security is not None:
            data["security"] = self.security.to_dict()
        return data

    def to_json(self) -> bytes:
        result: bytes = orjson.dumps(self.to_dict())
        return result


__all__ = [
    "Contact",
    "License",
    "Info",
    "Docs",
    "Tag",
    "Header",
    "Parameter",
    "Response",
    "SecurityScheme",
    "SecurityRequirement",
    "Endpoint",
    "API",
]
