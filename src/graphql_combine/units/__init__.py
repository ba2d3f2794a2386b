"""Modular Units

The :mod:`graphql_combine.units` package contains the four kinds of units a schema
is composed of: nodes, enums, scalars and directives.
"""

from .definition import (
    ROOT_OPERATIONS,
    GraphQLDirectiveUnit,
    GraphQLEnumUnit,
    GraphQLNode,
    GraphQLScalarUnit,
    GraphQLUnit,
    NodeResolvers,
    TypeDefs,
    UnitKind,
    assert_directive_unit,
    assert_enum_unit,
    assert_node,
    assert_scalar_unit,
    assert_units,
    is_directive_unit,
    is_enum_unit,
    is_node,
    is_scalar_unit,
    is_unit,
)

__all__ = [
    "ROOT_OPERATIONS",
    "GraphQLDirectiveUnit",
    "GraphQLEnumUnit",
    "GraphQLNode",
    "GraphQLScalarUnit",
    "GraphQLUnit",
    "NodeResolvers",
    "TypeDefs",
    "UnitKind",
    "assert_directive_unit",
    "assert_enum_unit",
    "assert_node",
    "assert_scalar_unit",
    "assert_units",
    "is_directive_unit",
    "is_enum_unit",
    "is_node",
    "is_scalar_unit",
    "is_unit",
]
