#!/usr/bin/env python3
# src/swagkit/http.py
"""
Starlette integration - serve the document and bind endpoint handlers.
"""

import logging

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Route

from .constants import CONTENT_TYPE_JSON, DEFAULT_DOCUMENT_PATH
from .models import API, Endpoint

logger = logging.getLogger(__name__)


def swagger_route(api: API, path: str = DEFAULT_DOCUMENT_PATH) -> Route:
    """GET route returning the document as JSON."""

    async def handle_request(_request: Request) -> Response:
        return Response(api.to_json(), media_type=CONTENT_TYPE_JSON)

    return Route(path, handle_request, methods=["GET"])


def _join(base: str, path: str) -> str:
    base = base.rstrip("/")
    return f"{base}{path}" if base else path


def build_routes(api: API, document_path: str = DEFAULT_DOCUMENT_PATH) -> list[Route]:
    """Document route plus one route per endpoint that has a handler."""
    routes = [swagger_route(api, document_path)]

    def collect(path: str, endpoint: Endpoint) -> None:
        if endpoint.handler is None:
            return
        route_path = _join(api.base_path, path)
        routes.append(Route(route_path, endpoint.handler, methods=[endpoint.method], name=endpoint.operation_id))
        logger.debug(f"Bound {endpoint.method} {route_path}")

    api.walk(collect)
    return routes


def create_app(api: API, document_path: str = DEFAULT_DOCUMENT_PATH, debug: bool = False) -> Starlette:
    return Starlette(debug=debug, routes=build_routes(api, document_path))


__all__ = ["swagger_route", "build_routes", "create_app"]
