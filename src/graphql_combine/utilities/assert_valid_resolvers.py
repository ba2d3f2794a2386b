from typing import Collection

import structlog

from ..error import MismatchDirection, SchemaResolverMismatchError
from ..units import ROOT_OPERATIONS, GraphQLNode
from .get_root_fields import get_root_fields

__all__ = ["assert_node_resolvers", "assert_valid_resolvers"]

logger = structlog.get_logger(__name__)


def assert_node_resolvers(node: GraphQLNode) -> None:
    """Check that the root fields of a node match its resolvers.

    For each of the root operation types, every field the node declares must have a
    resolver in the node, and every resolver must belong to a declared field. Fields
    without resolvers are reported before resolvers without fields. The first mismatch
    raises a SchemaResolverMismatchError.
    """
    for operation in ROOT_OPERATIONS:
        declared_fields = get_root_fields(node.document, operation)
        resolver_fields = node.resolvers.for_operation(operation)
        for field_name in declared_fields:
            if field_name not in resolver_fields:
                raise SchemaResolverMismatchError(
                    node.name,
                    operation,
                    field_name,
                    MismatchDirection.MISSING_RESOLVER,
                )
        declared = set(declared_fields)
        for field_name in resolver_fields:
            if field_name not in declared:
                raise SchemaResolverMismatchError(
                    node.name,
                    operation,
                    field_name,
                    MismatchDirection.MISSING_DEFINITION,
                )


def assert_valid_resolvers(nodes: Collection[GraphQLNode]) -> None:
    """Check the resolvers of all given nodes, stopping at the first mismatch."""
    for node in nodes:
        assert_node_resolvers(node)
    logger.debug("node_resolvers_validated", nodes=len(nodes))
