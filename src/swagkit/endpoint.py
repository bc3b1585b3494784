#!/usr/bin/env python3
# src/swagkit/endpoint.py
"""
Endpoint builder - functional options that assemble a Swagger operation.

    get_pet = new_endpoint(
        "get",
        "/pets/{id}",
        "Find pet by ID",
        path("id", "integer", "int64", "ID of pet to return"),
        response(200, Pet, "successful operation"),
        tags("pets"),
    )

Body and response types stay unresolved on the endpoint until it is added
to an API, which names them under its own naming policy.
"""

import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import replace
from typing import Any

from .constants import CONTENT_TYPE_JSON, IN_BODY, IN_FORM_DATA, IN_HEADER, IN_PATH, IN_QUERY
from .errors import EmptyParameterNameError, ParameterConflictError
from .models import Endpoint, Header, Parameter, Response, SecurityRequirement


class EndpointBuilder:
    """Holds the endpoint under construction and the body/form parameter mode."""

    def __init__(self, endpoint: Endpoint) -> None:
        self.endpoint = endpoint
        self.param_kind: str | None = None

    def ensure_param_type(self, in_: str) -> None:
        """Form data and body parameters cannot be mixed on one endpoint."""
        if in_ == IN_FORM_DATA:
            if self.param_kind == IN_BODY:
                raise ParameterConflictError(IN_BODY, IN_FORM_DATA)
            self.param_kind = IN_FORM_DATA
        elif in_ == IN_BODY:
            if self.param_kind == IN_FORM_DATA:
                raise ParameterConflictError(IN_FORM_DATA, IN_BODY)
            self.param_kind = IN_BODY

    def add_parameter(self, parameter: Parameter) -> None:
        self.ensure_param_type(parameter.in_)
        self.endpoint.parameters.append(parameter)


Option = Callable[[EndpointBuilder], None]
ResponseOption = Callable[[Response], None]


class _FileMarker:
    def __repr__(self) -> str:
        return "RESPONSE_FILE"


# Pass as the response prototype to declare a file download
RESPONSE_FILE = _FileMarker()


def camel(path: str) -> str:
    """'/pets/{petId}/toys' -> 'PetsPetIdToys'"""
    return "".join(segment[:1].upper() + segment[1:] for segment in re.split(r"[^A-Za-z0-9]+", path) if segment)


# ============================================================================
# Descriptive options
# ============================================================================


def handler(fn: Callable[..., Any]) -> Option:
    """Associate the web handler serving this endpoint (see http.build_routes)."""

    def apply(builder: EndpointBuilder) -> None:
        builder.endpoint.handler = fn

    return apply


def description(value: str) -> Option:
    def apply(builder: EndpointBuilder) -> None:
        builder.endpoint.description = value

    return apply


def operation_id(value: str) -> Option:
    def apply(builder: EndpointBuilder) -> None:
        builder.endpoint.operation_id = value

    return apply


def produces(*values: str) -> Option:
    def apply(builder: EndpointBuilder) -> None:
        builder.endpoint.produces = list(values)

    return apply


def consumes(*values: str) -> Option:
    def apply(builder: EndpointBuilder) -> None:
        builder.endpoint.consumes = list(values)

    return apply


def tags(*values: str) -> Option:
    def apply(builder: EndpointBuilder) -> None:
        builder.endpoint.tags.extend(values)

    return apply


def security(scheme: str, *scopes: str) -> Option:
    """Require a security scheme (with optional scopes) for this endpoint."""

    def apply(builder: EndpointBuilder) -> None:
        if builder.endpoint.security is None:
            builder.endpoint.security = SecurityRequirement()
        builder.endpoint.security.requirements.append({scheme: list(scopes)})

    return apply


def no_security() -> Option:
    """Explicitly mark the endpoint as requiring no security."""

    def apply(builder: EndpointBuilder) -> None:
        builder.endpoint.security = SecurityRequirement(disable_security=True)

    return apply


# ============================================================================
# Parameters
# ============================================================================


def _parameter(parameter: Parameter) -> Option:
    def apply(builder: EndpointBuilder) -> None:
        builder.add_parameter(parameter)

    return apply


def path(name: str, typ: str, format: str = "", description: str = "") -> Option:
    """Path parameter; always required."""
    return _parameter(
        Parameter(name=name, in_=IN_PATH, type=typ, format=format, description=description, required=True)
    )


def path_map(params: Mapping[str, Parameter]) -> Option:
    def apply(builder: EndpointBuilder) -> None:
        for name, parameter in params.items():
            builder.endpoint.parameters.append(replace(parameter, name=name, in_=IN_PATH, required=True))

    return apply


def request_header(name: str, typ: str, format: str = "", description: str = "", required: bool = False) -> Option:
    return _parameter(
        Parameter(name=name, in_=IN_HEADER, type=typ, format=format, description=description, required=required)
    )


def query(name: str, typ: str, format: str = "", description: str = "", required: bool = False) -> Option:
    return _parameter(
        Parameter(name=name, in_=IN_QUERY, type=typ, format=format, description=description, required=required)
    )


def query_list(params: Sequence[Parameter]) -> Option:
    """Query parameters from a list; every entry must carry its own name."""

    def apply(builder: EndpointBuilder) -> None:
        for index, parameter in enumerate(params):
            if not parameter.name:
                raise EmptyParameterNameError(index, parameter)
            builder.endpoint.parameters.append(replace(parameter, in_=IN_QUERY))

    return apply


def query_map(params: Mapping[str, Parameter]) -> Option:
    def apply(builder: EndpointBuilder) -> None:
        for name, parameter in params.items():
            builder.endpoint.parameters.append(replace(parameter, name=name, in_=IN_QUERY))

    return apply


def form_data(name: str, typ: str, format: str = "", description: str = "", required: bool = False) -> Option:
    return _parameter(
        Parameter(name=name, in_=IN_FORM_DATA, type=typ, format=format, description=description, required=required)
    )


def form_data_map(params: Mapping[str, Parameter]) -> Option:
    def apply(builder: EndpointBuilder) -> None:
        builder.ensure_param_type(IN_FORM_DATA)
        for name, parameter in params.items():
            builder.endpoint.parameters.append(replace(parameter, name=name, in_=IN_FORM_DATA))

    return apply


def body(
    prototype: Any,
    description: str = "",
    required: bool = True,
    definition: dict[str, Any] | None = None,
) -> Option:
    """Body parameter typed by ``prototype`` (a type or a descriptor string).

    ``definition`` overrides the schema body registered for the type.
    """
    return _parameter(
        Parameter(
            name="body",
            in_=IN_BODY,
            description=description,
            required=required,
            prototype=prototype,
            definition=definition,
        )
    )


# ============================================================================
# Responses
# ============================================================================


def header(name: str, typ: str, format: str = "", description: str = "") -> ResponseOption:
    def apply(response: Response) -> None:
        response.headers[name] = Header(type=typ, format=format, description=description)

    return apply


def header_map(headers: Mapping[str, Header]) -> ResponseOption:
    def apply(response: Response) -> None:
        response.headers.update(headers)

    return apply


def response(
    code: int,
    prototype: Any = None,
    description: str = "",
    *options: ResponseOption,
    definition: dict[str, Any] | None = None,
) -> Option:
    """Response for a status code; may be used once per code.

    A ``None`` or ``str`` prototype declares no schema, RESPONSE_FILE a file.
    """

    def apply(builder: EndpointBuilder) -> None:
        resp = Response(description=description)
        if prototype is RESPONSE_FILE:
            resp.schema = {"type": "file"}
        elif prototype is not None and prototype is not str:
            resp.prototype = prototype
            resp.definition = definition

        for option in options:
            option(resp)

        builder.endpoint.responses[str(code)] = resp

    return apply


def response_file(code: int, description: str = "", *options: ResponseOption) -> Option:
    return response(code, RESPONSE_FILE, description, *options)


# ============================================================================
# Constructor
# ============================================================================


def new_endpoint(method: str, path: str, summary: str, *options: Option) -> Endpoint:
    """Build an endpoint; operationId defaults to method + camel-cased path."""
    method = method.upper()
    builder = EndpointBuilder(
        Endpoint(
            method=method,
            path=path,
            summary=summary,
            operation_id=method.lower() + camel(path),
            produces=[CONTENT_TYPE_JSON],
            consumes=[CONTENT_TYPE_JSON],
        )
    )
    for option in options:
        option(builder)
    return builder.endpoint


__all__ = [
    "EndpointBuilder",
    "Option",
    "ResponseOption",
    "RESPONSE_FILE",
    "camel",
    "handler",
    "description",
    "operation_id",
    "produces",
    "consumes",
    "tags",
    "security",
    "no_security",
    "path",
    "path_map",
    "request_header",
    "query",
    "query_list",
    "query_map",
    "form_data",
    "form_data_map",
    "body",
    "header",
    "header_map",
    "response",
    "response_file",
    "new_endpoint",
]
