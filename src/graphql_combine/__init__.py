"""GraphQL-combine

GraphQL-combine builds one schema out of independently written modular units.

A node bundles type definitions with the resolvers of its root fields and may embed
further nodes, enums and scalars. Combining nodes flattens them, checks that every
root field declared by a node has a resolver in the same node and vice versa, and
merges everything into type definitions, resolvers and schema directives that can be
turned into an executable schema with GraphQL-core.

All parts can be imported from the top level package or from the sub-packages:

  - :mod:`graphql_combine.units`: the modular units
  - :mod:`graphql_combine.utilities`: flattening, checking and combining units
  - :mod:`graphql_combine.error`: the errors raised while combining units
"""

# The version of this package
from .version import version, version_info

# Modular units
from .units import (
    ROOT_OPERATIONS,
    GraphQLDirectiveUnit,
    GraphQLEnumUnit,
    GraphQLNode,
    GraphQLScalarUnit,
    GraphQLUnit,
    NodeResolvers,
    UnitKind,
    assert_directive_unit,
    assert_enum_unit,
    assert_node,
    assert_scalar_unit,
    is_directive_unit,
    is_enum_unit,
    is_node,
    is_scalar_unit,
    is_unit,
)

# Utilities for combining units
from .utilities import (
    CombinedSchema,
    FlatUnits,
    assert_node_resolvers,
    assert_valid_resolvers,
    build_executable_schema,
    combine_nodes,
    flatten_units,
    get_root_fields,
    load_type_defs,
)

# Errors
from .error import (
    CollisionError,
    CompositionError,
    MismatchDirection,
    SchemaResolverMismatchError,
    UsageError,
)

__version__ = version
__version_info__ = version_info

__all__ = [
    "version",
    "version_info",
    "ROOT_OPERATIONS",
    "GraphQLDirectiveUnit",
    "GraphQLEnumUnit",
    "GraphQLNode",
    "GraphQLScalarUnit",
    "GraphQLUnit",
    "NodeResolvers",
    "UnitKind",
    "assert_directive_unit",
    "assert_enum_unit",
    "assert_node",
    "assert_scalar_unit",
    "is_directive_unit",
    "is_enum_unit",
    "is_node",
    "is_scalar_unit",
    "is_unit",
    "CombinedSchema",
    "FlatUnits",
    "assert_node_resolvers",
    "assert_valid_resolvers",
    "build_executable_schema",
    "combine_nodes",
    "flatten_units",
    "get_root_fields",
    "load_type_defs",
    "CollisionError",
    "CompositionError",
    "MismatchDirection",
    "SchemaResolverMismatchError",
    "UsageError",
]
