"""Composition Errors

The :mod:`graphql_combine.error` package contains the errors raised while combining
modular units into one schema.
"""

from .composition_error import (
    CollisionError,
    CompositionError,
    MismatchDirection,
    SchemaResolverMismatchError,
    UsageError,
)

__all__ = [
    "CollisionError",
    "CompositionError",
    "MismatchDirection",
    "SchemaResolverMismatchError",
    "UsageError",
]
