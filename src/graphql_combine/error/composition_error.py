"""Errors raised while combining modular units"""

from __future__ import annotations

from enum import Enum
from typing import Any

__all__ = [
    "CollisionError",
    "CompositionError",
    "MismatchDirection",
    "SchemaResolverMismatchError",
    "UsageError",
]


class CompositionError(Exception):
    """Composition Error

    Base class of all errors raised while building a combined schema out of modular
    units. These errors describe authoring defects in the units themselves, so they
    are never retried: the first one found aborts the whole composition.
    """

    message: str
    """A message describing the error for debugging purposes"""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, CompositionError)
            and self.__class__ == other.__class__
            and self.message == other.message
        )

    def __ne__(self, other: Any) -> bool:
        return not self == other

    __hash__ = Exception.__hash__


class UsageError(CompositionError, TypeError):
    """A missing or wrongly typed argument"""


class CollisionError(CompositionError):
    """Two units claim the same name."""

    kind: str
    """The kind of thing that collided, e.g. ``"node"`` or ``"Query field"``"""

    name: str
    """The name used twice"""

    def __init__(self, message: str, kind: str, name: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.name = name


class MismatchDirection(Enum):
    """Which side of a node is missing an entry"""

    MISSING_RESOLVER = "missing_resolver"
    MISSING_DEFINITION = "missing_definition"


class SchemaResolverMismatchError(CompositionError):
    """Schema/resolver mismatch

    Raised when a field is declared under a root operation type in the type
    definitions of a node but has no resolver in the same node, or vice versa.
    """

    node_name: str
    operation: str
    field_name: str
    direction: MismatchDirection

    def __init__(
        self,
        node_name: str,
        operation: str,
        field_name: str,
        direction: MismatchDirection,
    ) -> None:
        if direction is MismatchDirection.MISSING_RESOLVER:
            message = (
                f"node with name: '{node_name}' has a {operation} in the typeDefs"
                f" called '{field_name}' thats not defined in resolvers"
            )
        else:
            message = (
                f"node with name: '{node_name}' has a {operation} resolver"
                f" called '{field_name}' thats not defined in typeDefs"
            )
        super().__init__(message)
        self.node_name = node_name
        self.operation = operation
        self.field_name = field_name
        self.direction = direction
