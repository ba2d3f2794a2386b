"""Flattening nested units"""

from __future__ import annotations

from typing import Collection, Dict, List, NamedTuple, Tuple

import structlog

from ..error import CollisionError
from ..units import (
    GraphQLDirectiveUnit,
    GraphQLEnumUnit,
    GraphQLNode,
    GraphQLScalarUnit,
    GraphQLUnit,
)

__all__ = ["FlatUnits", "flatten_units"]

logger = structlog.get_logger(__name__)


class FlatUnits(NamedTuple):
    """All units of a composition, one flat tuple per kind"""

    nodes: Tuple[GraphQLNode, ...]
    enums: Tuple[GraphQLEnumUnit, ...]
    scalars: Tuple[GraphQLScalarUnit, ...]
    directives: Tuple[GraphQLDirectiveUnit, ...]


class UnitRegistry:
    """Collects units of one kind in order, keyed by their name."""

    def __init__(self) -> None:
        self._units: Dict[str, GraphQLUnit] = {}

    def add(self, unit: GraphQLUnit) -> bool:
        """Add the unit and return whether it has not been seen before.

        Adding the same unit twice is a no-op. Adding a different unit with a name
        that is already taken raises a CollisionError.
        """
        name = unit.name
        seen = self._units.get(name)
        if seen is None:
            self._units[name] = unit
            return True
        if seen is unit:
            return False
        kind = unit.kind.value
        msg = f"Found more than one {kind} with the name '{name}'."
        raise CollisionError(msg, kind, name)

    def units(self) -> Tuple:
        return tuple(self._units.values())


def flatten_units(
    nodes: Collection[GraphQLNode],
    enums: Collection[GraphQLEnumUnit] = (),
    scalars: Collection[GraphQLScalarUnit] = (),
    directives: Collection[GraphQLDirectiveUnit] = (),
) -> FlatUnits:
    """Flatten nested units.

    The nested nodes are traversed depth-first in pre-order, left to right, so that
    the result is the same for the same input order. Every node is followed by the
    enums and scalars it embeds. The given global enums, scalars and directives are
    appended after the units found by the traversal.

    A unit that is reached more than once is only collected once, but two different
    units of the same kind and name raise a CollisionError.
    """
    node_registry = UnitRegistry()
    enum_registry = UnitRegistry()
    scalar_registry = UnitRegistry()
    directive_registry = UnitRegistry()

    stack: List[GraphQLNode] = list(reversed(tuple(nodes)))
    while stack:
        node = stack.pop()
        if not node_registry.add(node):
            continue
        for enum in node.enums:
            enum_registry.add(enum)
        for scalar in node.scalars:
            scalar_registry.add(scalar)
        stack.extend(reversed(node.nodes))

    for enum in enums:
        enum_registry.add(enum)
    for scalar in scalars:
        scalar_registry.add(scalar)
    for directive in directives:
        directive_registry.add(directive)

    flat_units = FlatUnits(
        node_registry.units(),
        enum_registry.units(),
        scalar_registry.units(),
        directive_registry.units(),
    )
    logger.debug(
        "units_flattened",
        nodes=len(flat_units.nodes),
        enums=len(flat_units.enums),
        scalars=len(flat_units.scalars),
        directives=len(flat_units.directives),
    )
    return flat_units
