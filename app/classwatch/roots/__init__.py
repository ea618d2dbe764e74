"""Root directory providers.

This module exposes the contract the change detector consumes to learn
which directories to scan, plus stock implementations.
"""

from classwatch.roots.provider import (
    ClasspathRootProvider,
    RootProvider,
    StaticRootProvider,
    parse_classpath,
)

__all__ = [
    "ClasspathRootProvider",
    "RootProvider",
    "StaticRootProvider",
    "parse_classpath",
]
