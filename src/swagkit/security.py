#!/usr/bin/env python3
# src/swagkit/security.py
"""
Security scheme factories for the securityDefinitions section.
"""

from .constants import IN_HEADER
from .models import SecurityScheme


def basic_security() -> SecurityScheme:
    return SecurityScheme(type="basic")


def api_key_security(name: str, in_: str = IN_HEADER) -> SecurityScheme:
    """API key passed in a header or query parameter called ``name``."""
    return SecurityScheme(type="apiKey", name=name, in_=in_)


def oauth2_security(
    flow: str,
    authorization_url: str = "",
    token_url: str = "",
    scopes: dict[str, str] | None = None,
) -> SecurityScheme:
    return SecurityScheme(
        type="oauth2",
        flow=flow,
        authorization_url=authorization_url,
        token_url=token_url,
        scopes=dict(scopes or {}),
    )


def google_endpoints_security(issuer: str, jwks_uri: str, audiences: str) -> SecurityScheme:
    """OAuth2 implicit scheme with the x-google-* fields Cloud Endpoints reads."""
    return SecurityScheme(
        type="oauth2",
        flow="implicit",
        extensions={
            "authorizationUrl": "",
            "x-google-issuer": issuer,
            "x-google-jwks_uri": jwks_uri,
            "x-google-audiences": audiences,
        },
    )


__all__ = ["basic_security", "api_key_security", "oauth2_security", "google_endpoints_security"]
