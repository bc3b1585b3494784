#!/usr/bin/env python3
# src/swagkit/naming/policy.py
"""
Naming policy - how package paths appear in canonical type names.

A policy is an immutable value bound into a TypeNamer for one document
generation session, so concurrent sessions can use different policies.
"""

import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace

from ..constants import ENV_QUALIFY_NAMES, ENV_STRIP_PREFIXES, TRUTHY_VALUES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NamingPolicy:
    """Qualification flag plus the ordered list of package prefixes to strip."""

    qualify_with_package: bool = False
    strip_prefixes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable of prefixes but store an immutable tuple
        object.__setattr__(self, "strip_prefixes", tuple(self.strip_prefixes))

    def strip(self, package: str) -> str:
        """Remove the first matching prefix from a package path."""
        for prefix in self.strip_prefixes:
            if prefix and package.startswith(prefix):
                return package[len(prefix) :]
        return package

    def qualified(self, flag: bool = True) -> "NamingPolicy":
        return replace(self, qualify_with_package=flag)

    def with_prefixes(self, *prefixes: str) -> "NamingPolicy":
        return replace(self, strip_prefixes=prefixes)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "NamingPolicy":
        """Build a policy from SWAGKIT_QUALIFY_NAMES and SWAGKIT_STRIP_PREFIXES."""
        env = os.environ if environ is None else environ
        qualify = env.get(ENV_QUALIFY_NAMES, "").strip().lower() in TRUTHY_VALUES
        prefixes = _split_prefixes(env.get(ENV_STRIP_PREFIXES, "").split(","))
        policy = cls(qualify_with_package=qualify, strip_prefixes=prefixes)
        logger.debug(f"Naming policy from environment: {policy}")
        return policy


def _split_prefixes(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(value.strip() for value in values if value.strip())


DEFAULT_POLICY = NamingPolicy()

__all__ = ["NamingPolicy", "DEFAULT_POLICY"]
