#!/usr/bin/env python3
# src/swagkit/api.py
"""
API builder - functional options that assemble the Swagger document.

    api = new_api(
        title("Petstore"),
        version("1.0.0"),
        naming(NamingPolicy(qualify_with_package=True)),
        endpoints(get_pet, add_pet),
    )

All endpoints are resolved after every option has been applied, so the
naming policy holds for the whole document regardless of option order.
"""

from collections.abc import Callable, Mapping
from typing import Any

from .models import API, Contact, Endpoint, License, SecurityRequirement, SecurityScheme, Tag
from .naming import NamingPolicy, TypeNamer

Option = Callable[[API], None]
TagOption = Callable[[Tag], None]


def title(value: str) -> Option:
    def apply(api: API) -> None:
        api.info.title = value

    return apply


def description(value: str) -> Option:
    def apply(api: API) -> None:
        api.info.description = value

    return apply


def version(value: str) -> Option:
    def apply(api: API) -> None:
        api.info.version = value

    return apply


def terms_of_service(value: str) -> Option:
    def apply(api: API) -> None:
        api.info.terms_of_service = value

    return apply


def contact_email(value: str) -> Option:
    def apply(api: API) -> None:
        api.info.contact = Contact(email=value)

    return apply


def license(name: str, url: str = "") -> Option:
    def apply(api: API) -> None:
        api.info.license = License(name=name, url=url)

    return apply


def base_path(value: str) -> Option:
    def apply(api: API) -> None:
        api.base_path = value

    return apply


def schemes(*values: str) -> Option:
    def apply(api: API) -> None:
        api.schemes = list(values)

    return apply


def host(value: str) -> Option:
    def apply(api: API) -> None:
        api.host = value

    return apply


def tag_description(value: str) -> TagOption:
    """External docs description of a tag."""

    def apply(tag: Tag) -> None:
        tag.docs.description = value

    return apply


def tag_url(value: str) -> TagOption:
    def apply(tag: Tag) -> None:
        tag.docs.url = value

    return apply


def tag(name: str, description: str = "", *options: TagOption) -> Option:
    def apply(api: API) -> None:
        item = Tag(name=name, description=description)
        for option in options:
            option(item)
        api.tags.append(item)

    return apply


def security_scheme(name: str, scheme: SecurityScheme) -> Option:
    """Register a scheme built by the factories in swagkit.security."""
    if not isinstance(scheme, SecurityScheme):
        raise TypeError(f"security_scheme expects a SecurityScheme, got {type(scheme).__name__}")

    def apply(api: API) -> None:
        api.security_definitions[name] = scheme

    return apply


def security_definition(name: str, definition: Mapping[str, Any]) -> Option:
    """Register a raw securityDefinitions entry, emitted as given."""
    if not isinstance(definition, Mapping):
        raise TypeError(f"security_definition expects a mapping, got {type(definition).__name__}")

    def apply(api: API) -> None:
        api.security_definitions[name] = dict(definition)

    return apply


def security(scheme: str, *scopes: str) -> Option:
    """Document-wide security requirement."""

    def apply(api: API) -> None:
        if api.security is None:
            api.security = SecurityRequirement()
        api.security.requirements.append({scheme: list(scopes)})

    return apply


def naming(policy: NamingPolicy) -> Option:
    """Name every definition of this document under ``policy``."""

    def apply(api: API) -> None:
        api.namer = TypeNamer(policy)

    return apply


def endpoints(*items: Endpoint) -> Option:
    def apply(api: API) -> None:
        api.endpoints.extend(items)

    return apply


def new_api(*options: Option) -> API:
    api = API()
    for option in options:
        option(api)
    api.resolve()
    return api


__all__ = [
    "Option",
    "TagOption",
    "title",
    "description",
    "version",
    "terms_of_service",
    "contact_email",
    "license",
    "base_path",
    "schemes",
    "host",
    "tag",
    "tag_description",
    "tag_url",
    "security_scheme",
    "security_definition",
    "security",
    "naming",
    "endpoints",
    "new_api",
]
