"""Combining nodes into one schema"""

from __future__ import annotations

from itertools import chain
from typing import (
    Any,
    Callable,
    Collection,
    Dict,
    List,
    Mapping,
    NamedTuple,
    Optional,
    Tuple,
    Union,
)

import structlog

from ..error import CollisionError, UsageError
from ..pyutils import is_sequence
from ..units import (
    ROOT_OPERATIONS,
    GraphQLDirectiveUnit,
    GraphQLEnumUnit,
    GraphQLNode,
    GraphQLScalarUnit,
    assert_units,
    is_node,
)
from .assert_valid_resolvers import assert_valid_resolvers
from .flatten_units import flatten_units

__all__ = ["CombinedSchema", "combine_nodes", "print_schema_definition"]

logger = structlog.get_logger(__name__)

PREFIX = "combine_nodes: "


class CombinedSchema(NamedTuple):
    """The type definitions, resolvers and schema directives of a combined schema"""

    type_defs: str
    resolvers: Dict[str, Any]
    schema_directives: Dict[str, Callable]


def print_schema_definition(operations: Collection[str]) -> str:
    """Print a schema definition with the given root operation types."""
    lines = [f"  {operation.lower()}: {operation}" for operation in operations]
    return "\n".join(["schema {", *lines, "}"])


def _get_schema_globals(schema_globals: Any) -> Tuple[str, ...]:
    if schema_globals is None:
        return ()
    if isinstance(schema_globals, str):
        return (schema_globals,)
    if is_sequence(schema_globals) and all(
        isinstance(fragment, str) for fragment in schema_globals
    ):
        return tuple(schema_globals)
    msg = f"{PREFIX}expected schema_globals to be a string or an array of strings"
    raise UsageError(msg)


def _add_type_resolvers(resolvers: Dict[str, Any], name: str, value: Any) -> None:
    if name in resolvers:
        msg = f"Found more than one resolver entry for the type '{name}'."
        raise CollisionError(msg, "type", name)
    resolvers[name] = value


def combine_nodes(
    nodes: Collection[GraphQLNode],
    *,
    enums: Optional[Collection[GraphQLEnumUnit]] = None,
    scalars: Optional[Collection[GraphQLScalarUnit]] = None,
    directives: Optional[Collection[GraphQLDirectiveUnit]] = None,
    schema_globals: Union[str, Collection[str], None] = None,
) -> CombinedSchema:
    """Combine nodes into one schema.

    The given nodes and all nodes, enums and scalars nested inside them are combined
    with the given global enums, scalars, directives and shared type definitions.
    Before anything is merged, the root fields of every node are checked against its
    resolvers.

    The result contains the concatenated type definitions, ending with a schema
    definition for the root operation types that have resolvers, the merged resolvers
    keyed by type name and field name, and the resolvers of the directives keyed by
    directive name. The given units are not changed.
    """
    if nodes is None:
        msg = f"{PREFIX}nodes required"
        raise UsageError(msg)
    if not is_sequence(nodes):
        msg = (
            f"{PREFIX}expected nodes to be of type list"
            f" received '{type(nodes).__name__}'"
        )
        raise UsageError(msg)
    if not nodes:
        msg = f"{PREFIX}nodes required"
        raise UsageError(msg)
    if not all(is_node(node) for node in nodes):
        msg = f"{PREFIX}received a node not a instance of GraphQLNode"
        raise UsageError(msg)
    global_enums = assert_units(enums, GraphQLEnumUnit, "enums", PREFIX)
    global_scalars = assert_units(scalars, GraphQLScalarUnit, "scalars", PREFIX)
    global_directives = assert_units(
        directives, GraphQLDirectiveUnit, "directives", PREFIX
    )
    global_type_defs = _get_schema_globals(schema_globals)

    flat_units = flatten_units(
        nodes, global_enums, global_scalars, global_directives
    )
    assert_valid_resolvers(flat_units.nodes)

    resolvers: Dict[str, Any] = {operation: {} for operation in ROOT_OPERATIONS}
    owners: Dict[str, Dict[str, str]] = {operation: {} for operation in ROOT_OPERATIONS}
    for node in flat_units.nodes:
        for operation in ROOT_OPERATIONS:
            root_resolvers = resolvers[operation]
            root_owners = owners[operation]
            for field_name, resolver in node.resolvers.for_operation(
                operation
            ).items():
                if field_name in root_resolvers:
                    msg = (
                        f"node with name: '{node.name}' has a {operation} resolver"
                        f" called '{field_name}' that is already defined by node"
                        f" with name: '{root_owners[field_name]}'"
                    )
                    raise CollisionError(msg, f"{operation} field", field_name)
                root_resolvers[field_name] = resolver
                root_owners[field_name] = node.name
        if node.resolvers.fields:
            _add_type_resolvers(resolvers, node.name, dict(node.resolvers.fields))
    for enum in flat_units.enums:
        _add_type_resolvers(resolvers, enum.name, dict(enum.resolver))
    for scalar in flat_units.scalars:
        resolver = scalar.resolver
        if isinstance(resolver, Mapping):
            resolver = dict(resolver)
        _add_type_resolvers(resolvers, scalar.name, resolver)

    schema_directives = {
        directive.name: directive.resolver for directive in flat_units.directives
    }

    operations = [operation for operation in ROOT_OPERATIONS if resolvers[operation]]
    type_defs: List[str] = [
        unit.type_defs
        for unit in chain(
            flat_units.nodes,
            flat_units.enums,
            flat_units.scalars,
            flat_units.directives,
        )
    ]
    type_defs.extend(global_type_defs)
    if operations:
        type_defs.append(print_schema_definition(operations))

    logger.debug(
        "nodes_combined",
        nodes=len(flat_units.nodes),
        operations=operations,
        directives=list(schema_directives),
    )
    return CombinedSchema("\n".join(type_defs), resolvers, schema_directives)
