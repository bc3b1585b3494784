#!/usr/bin/env python3
"""
Top-level constants shared across the swagkit package.
"""

# ---------------------------------------------------------------------------
# Swagger document
# ---------------------------------------------------------------------------
SWAGGER_VERSION = "2.0"
DEFINITIONS_REF_PREFIX = "#/definitions/"
CONTENT_TYPE_JSON = "application/json"
DEFAULT_DOCUMENT_PATH = "/swagger.json"

# Parameter locations
IN_PATH = "path"
IN_QUERY = "query"
IN_HEADER = "header"
IN_FORM_DATA = "formData"
IN_BODY = "body"

PRIVATE_PREFIX = "_"

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


# ---------------------------------------------------------------------------
# Type descriptors
# ---------------------------------------------------------------------------
# Kind names of the reflection facility; never package-qualified.
BUILTIN_TYPE_NAMES = frozenset(
    {
        "invalid",
        "bool",
        "int",
        "int8",
        "int16",
        "int32",
        "int64",
        "uint",
        "uint8",
        "uint16",
        "uint32",
        "uint64",
        "uintptr",
        "float32",
        "float64",
        "complex64",
        "complex128",
        "string",
        "unsafe.Pointer",
    }
)

MAP_OPEN = "map["
POINTER_MARK = "*"
PACKAGE_SEPARATORS = "./"
# Deepest map/slice/pointer/generic nesting a descriptor may have
MAX_TYPE_DEPTH = 128

RENDER_ARRAY = "arr_"
RENDER_MAP = "map_"
RENDER_MAP_TO = "_to_"
RENDER_POINTER = "ptr_"
GENERIC_ARG_SEPARATOR = ", "

# Applied in order to the rendered top-level name
NAME_SUBSTITUTIONS = ((".", "_"), ("-", "_"), ("/", "__"))

# Inline schemas for builtin kinds
BUILTIN_SCHEMAS = {
    "bool": {"type": "boolean"},
    "int": {"type": "integer", "format": "int64"},
    "int8": {"type": "integer", "format": "int32"},
    "int16": {"type": "integer", "format": "int32"},
    "int32": {"type": "integer", "format": "int32"},
    "int64": {"type": "integer", "format": "int64"},
    "uint": {"type": "integer", "format": "int64"},
    "uint8": {"type": "integer", "format": "int32"},
    "uint16": {"type": "integer", "format": "int32"},
    "uint32": {"type": "integer", "format": "int64"},
    "uint64": {"type": "integer", "format": "int64"},
    "uintptr": {"type": "integer", "format": "int64"},
    "float32": {"type": "number", "format": "float"},
    "float64": {"type": "number", "format": "double"},
    "complex64": {"type": "string"},
    "complex128": {"type": "string"},
    "string": {"type": "string"},
}


# ---------------------------------------------------------------------------
# Configuration environment variables
# ---------------------------------------------------------------------------
ENV_QUALIFY_NAMES = "SWAGKIT_QUALIFY_NAMES"
ENV_STRIP_PREFIXES = "SWAGKIT_STRIP_PREFIXES"
ENV_LOG_LEVEL = "SWAGKIT_LOG_LEVEL"

TRUTHY_VALUES = ("1", "true", "yes", "on")
LOG_LEVELS = ["debug", "info", "warning", "error", "critical"]
