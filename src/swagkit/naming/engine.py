#!/usr/bin/env python3
# src/swagkit/naming/engine.py
"""
TypeNamer - canonical definition names for types under one naming policy.

    namer = TypeNamer(NamingPolicy(qualify_with_package=True, strip_prefixes=("github.com/",)))
    namer.name_for(list[Pet])                 # "arr_myapp_models_Pet"
    namer.name_for_descriptor("map[string]pkg.V")
"""

import logging
from typing import Any

from ..constants import DEFINITIONS_REF_PREFIX
from .introspect import describe
from .parser import parse_descriptor
from .policy import DEFAULT_POLICY, NamingPolicy
from .qualifier import qualify
from .renderer import render_canonical
from .types import ParsedType

logger = logging.getLogger(__name__)


class TypeNamer:
    """Parse, qualify and render type names with a fixed policy."""

    def __init__(self, policy: NamingPolicy | None = None) -> None:
        self.policy = policy or DEFAULT_POLICY

    def tree_for(self, annotation: Any, home_package: str | None = None) -> ParsedType:
        """Describe and qualify an annotation or descriptor string."""
        return qualify(describe(annotation), self.policy, home_package)

    def name_for(self, annotation: Any, home_package: str | None = None) -> str:
        name = render_canonical(self.tree_for(annotation, home_package))
        logger.debug(f"Canonical name for {annotation!r}: {name}")
        return name

    def name_for_descriptor(self, text: str, home_package: str | None = None) -> str:
        """Canonical name for a descriptor string such as ``[]pkg/models.User``."""
        return render_canonical(qualify(parse_descriptor(text), self.policy, home_package))

    def render_node(self, node: ParsedType) -> str:
        """Canonical name of a node taken from an already qualified tree."""
        return render_canonical(node)

    @staticmethod
    def make_ref(name: str) -> str:
        return f"{DEFINITIONS_REF_PREFIX}{name}"


def make_name(annotation: Any, policy: NamingPolicy | None = None) -> str:
    """Convenience wrapper: canonical name under a one-off TypeNamer."""
    return TypeNamer(policy).name_for(annotation)


__all__ = ["TypeNamer", "make_name"]
