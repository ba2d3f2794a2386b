"""Composition Utilities

The :mod:`graphql_combine.utilities` package contains the steps of combining modular
units: extracting root fields, flattening nested units, checking resolvers, merging
everything into one schema and building an executable schema from the result.
"""

# Get the names of the fields of a root operation type in a document.
from .get_root_fields import get_root_fields

# Load type definitions from a file.
from .load_type_defs import load_type_defs

# Flatten nested units into one tuple per kind.
from .flatten_units import FlatUnits, flatten_units

# Check the root fields of nodes against their resolvers.
from .assert_valid_resolvers import assert_node_resolvers, assert_valid_resolvers

# Combine nodes into type definitions, resolvers and schema directives.
from .combine_nodes import CombinedSchema, combine_nodes, print_schema_definition

# Build a GraphQLSchema with resolvers attached from combined nodes.
from .build_executable_schema import build_executable_schema, merge_root_types

__all__ = [
    "CombinedSchema",
    "FlatUnits",
    "assert_node_resolvers",
    "assert_valid_resolvers",
    "build_executable_schema",
    "combine_nodes",
    "flatten_units",
    "get_root_fields",
    "load_type_defs",
    "merge_root_types",
    "print_schema_definition",
]
