#!/usr/bin/env python3
# src/swagkit/cli/__init__.py
"""
CLI entry point for swagkit.

Computes canonical definition names from type descriptors and serves a
Swagger document over HTTP.
"""

import argparse
import importlib
import logging
import os
import sys
from typing import Any

import orjson

from ..constants import DEFAULT_DOCUMENT_PATH, ENV_LOG_LEVEL, LOG_LEVELS
from ..errors import SwagError
from ..models import API
from ..naming import NamingPolicy, TypeNamer, as_dict


def setup_logging(level: str = "warning", stderr: bool = True) -> None:
    """Set up logging configuration."""
    stream = sys.stderr if stderr else sys.stdout
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=stream,
    )


def build_policy(args: argparse.Namespace) -> NamingPolicy:
    """Environment defaults overridden by command-line flags."""
    policy = NamingPolicy.from_env()
    if args.qualify:
        policy = policy.qualified(True)
    if args.strip:
        policy = policy.with_prefixes(*args.strip)
    return policy


def load_api(target: str) -> API:
    """Import ``module:attribute`` and return the API it names (calling factories)."""
    module_name, _, attribute = target.partition(":")
    module = importlib.import_module(module_name)
    value: Any = getattr(module, attribute or "api")
    if callable(value) and not isinstance(value, API):
        value = value()
    if not isinstance(value, API):
        raise SystemExit(f"Error: {target} is not a swagkit API")
    return value


def _add_policy_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("descriptor", help="Type descriptor, e.g. 'map[string][]github.com/acme/models.User'")
    parser.add_argument("--qualify", action="store_true", help="Qualify names with their package")
    parser.add_argument("--strip", action="append", default=[], metavar="PREFIX", help="Package prefix to strip")
    parser.add_argument("--home", default=None, help="Home package the names are relative to")


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="swagkit",
        description="Canonical Swagger definition names and document serving",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Canonical name of a descriptor
  swagkit name 'map[string]encoding/json.RawMessage'

  # Qualified with the package, stripping a host prefix
  swagkit name 'github.com/acme/models.Page[github.com/acme/models.User]' --qualify --strip github.com/

  # Show the parsed tree
  swagkit tree '[]*acme/models.User'

  # Serve the document built by myapp.docs:api
  swagkit serve myapp.docs:api --port 8080

Environment Variables:
  SWAGKIT_QUALIFY_NAMES   Qualify names with their package (1/true/yes/on)
  SWAGKIT_STRIP_PREFIXES  Comma-separated package prefixes to strip
  SWAGKIT_LOG_LEVEL       Logging level (debug|info|warning|error|critical)
        """,
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get(ENV_LOG_LEVEL, "warning").lower(),
        choices=LOG_LEVELS,
        help="Logging level (default: warning)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    name_parser = subparsers.add_parser("name", help="Print the canonical definition name of a descriptor")
    _add_policy_arguments(name_parser)

    tree_parser = subparsers.add_parser("tree", help="Print the qualified parse tree of a descriptor as JSON")
    _add_policy_arguments(tree_parser)

    serve_parser = subparsers.add_parser("serve", help="Serve a Swagger document over HTTP")
    serve_parser.add_argument("target", help="module:attribute of an API object or factory")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to bind to (default: 8000)")
    serve_parser.add_argument("--path", default=DEFAULT_DOCUMENT_PATH, help="Document path")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = create_parser().parse_args(argv)
    setup_logging(args.log_level)

    if args.command == "serve":
        import uvicorn

        from ..http import create_app

        api = load_api(args.target)
        logging.info(f"Serving {args.target} on http://{args.host}:{args.port}{args.path}")
        uvicorn.run(create_app(api, args.path), host=args.host, port=args.port, log_level=args.log_level)
        return 0

    namer = TypeNamer(build_policy(args))
    try:
        if args.command == "name":
            print(namer.name_for_descriptor(args.descriptor, args.home))
        else:
            tree = namer.tree_for(args.descriptor, args.home)
            print(orjson.dumps(as_dict(tree), option=orjson.OPT_INDENT_2).decode())
    except SwagError as e:
        print(f"Error: {e.to_message()}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
