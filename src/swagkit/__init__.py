#!/usr/bin/env python3
"""
swagkit - Swagger 2.0 documents with canonical definition names

    from swagkit import NamingPolicy, new_api, new_endpoint
    from swagkit import api as swag, endpoint

    get_pet = new_endpoint("get", "/pets/{id}", "Find pet by ID",
        endpoint.path("id", "integer", "int64", "ID of pet"),
        endpoint.response(200, Pet, "successful operation"),
    )
    doc = new_api(swag.title("Petstore"), swag.endpoints(get_pet))
    doc.to_json()

Definitions are keyed by canonical type names such as ``arr_Pet``,
``map_string_to_Pet`` or ``myapp_models_Page[myapp_models_Pet]``.
"""

from .api import new_api
from .definitions import DefinitionRegistry, SchemaResolver
from .endpoint import RESPONSE_FILE, new_endpoint
from .errors import (
    DefinitionConflictError,
    EmptyParameterNameError,
    ParameterConflictError,
    ParseError,
    SwagError,
    UnsupportedTypeError,
)
from .models import API, Endpoint, Header, Parameter, Response, SecurityRequirement, SecurityScheme, Tag
from .naming import NamingPolicy, TypeNamer, make_name, parse_descriptor

__version__ = "0.1.0"
__all__ = [
    "new_api",
    "new_endpoint",
    "RESPONSE_FILE",
    "DefinitionRegistry",
    "SchemaResolver",
    "API",
    "Endpoint",
    "Header",
    "Parameter",
    "Response",
    "SecurityRequirement",
    "SecurityScheme",
    "Tag",
    "NamingPolicy",
    "TypeNamer",
    "make_name",
    "parse_descriptor",
    "SwagError",
    "ParseError",
    "UnsupportedTypeError",
    "DefinitionConflictError",
    "ParameterConflictError",
    "EmptyParameterNameError",
]
