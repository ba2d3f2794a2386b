"""Building an executable schema from combined nodes"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional

import structlog
from graphql import (
    DocumentNode,
    GraphQLEnumType,
    GraphQLField,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLSchema,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    build_ast_schema,
    default_field_resolver,
    parse,
)
from graphql.execution.values import get_directive_values
from graphql.pyutils import inspect

from ..error import CompositionError, UsageError
from ..units import ROOT_OPERATIONS

__all__ = ["build_executable_schema", "merge_root_types"]

logger = structlog.get_logger(__name__)

SCALAR_FUNCTIONS = ("serialize", "parse_value", "parse_literal")


def merge_root_types(document: DocumentNode) -> DocumentNode:
    """Turn the root operation types of combined nodes into one definition each.

    Every node of a combined schema defines or extends its own ``type Query`` and so
    on. Only the first definition of each root operation type is kept as a
    definition, the following ones are treated as extensions of it. A root operation
    type that is only ever extended gets its first extension turned into the
    definition.
    """
    defined_roots = {
        definition.name.value
        for definition in document.definitions
        if isinstance(definition, ObjectTypeDefinitionNode)
        and definition.name.value in ROOT_OPERATIONS
    }
    seen = set()
    definitions = []
    for definition in document.definitions:
        if (
            isinstance(definition, (ObjectTypeDefinitionNode, ObjectTypeExtensionNode))
            and definition.name.value in ROOT_OPERATIONS
        ):
            name = definition.name.value
            if isinstance(definition, ObjectTypeDefinitionNode):
                if name in seen:
                    definition = ObjectTypeExtensionNode(
                        name=definition.name,
                        interfaces=definition.interfaces,
                        directives=definition.directives,
                        fields=definition.fields,
                        loc=definition.loc,
                    )
                seen.add(name)
            elif name not in defined_roots and name not in seen:
                definition = ObjectTypeDefinitionNode(
                    name=definition.name,
                    interfaces=definition.interfaces,
                    directives=definition.directives,
                    fields=definition.fields,
                    loc=definition.loc,
                )
                seen.add(name)
        definitions.append(definition)
    return DocumentNode(definitions=tuple(definitions), loc=document.loc)


def _set_object_resolvers(
    type_: GraphQLObjectType, resolvers: Any, is_subscription: bool
) -> None:
    if not isinstance(resolvers, Mapping):
        msg = (
            f"Resolvers of the type '{type_.name}' must be a mapping,"
            f" received {inspect(resolvers)}."
        )
        raise UsageError(msg)
    fields = type_.fields
    for field_name, resolver in resolvers.items():
        field = fields.get(field_name)
        if field is None:
            msg = f"{type_.name}.{field_name} defined in resolvers, but not in schema."
            raise CompositionError(msg)
        if not is_subscription:
            field.resolve = resolver
        elif isinstance(resolver, Mapping):
            field.subscribe = resolver["subscribe"]
            # without a resolve function the default resolver picks the field
            # from the event payload
            field.resolve = resolver.get("resolve")
        else:
            field.subscribe = resolver


def _set_enum_values(type_: GraphQLEnumType, values: Any) -> None:
    if not isinstance(values, Mapping):
        msg = (
            f"Values of the enum '{type_.name}' must be a mapping,"
            f" received {inspect(values)}."
        )
        raise UsageError(msg)
    for value_name, value in values.items():
        enum_value = type_.values.get(value_name)
        if enum_value is None:
            msg = f"{type_.name}.{value_name} defined in resolvers, but not in schema."
            raise CompositionError(msg)
        enum_value.value = value


def _set_scalar_functions(type_: GraphQLScalarType, resolver: Any) -> None:
    if isinstance(resolver, GraphQLScalarType):
        for function_name in SCALAR_FUNCTIONS:
            setattr(type_, function_name, getattr(resolver, function_name))
    elif isinstance(resolver, Mapping):
        for function_name, function in resolver.items():
            setattr(type_, function_name, function)
    else:
        type_.serialize = resolver  # type: ignore


def _apply_schema_directives(
    schema: GraphQLSchema, schema_directives: Mapping[str, Callable]
) -> None:
    for directive_name, directive_resolver in schema_directives.items():
        directive = schema.get_directive(directive_name)
        if directive is None:
            msg = (
                f"Schema directive '@{directive_name}' defined in resolvers,"
                " but not in schema."
            )
            raise CompositionError(msg)
        for type_ in schema.type_map.values():
            if not isinstance(type_, GraphQLObjectType) or type_.name.startswith(
                "__"
            ):
                continue
            for field in type_.fields.values():
                _apply_directive(field, directive, directive_resolver)


def _apply_directive(field: GraphQLField, directive: Any, resolver: Callable) -> None:
    node = field.ast_node
    if node is None:
        return
    args = get_directive_values(directive, node)
    if args is None:
        return
    field.resolve = resolver(field.resolve or default_field_resolver, args)


def build_executable_schema(
    type_defs: str,
    resolvers: Mapping[str, Any],
    schema_directives: Optional[Mapping[str, Callable]] = None,
) -> GraphQLSchema:
    """Build an executable schema from combined type definitions and resolvers.

    This takes the three parts returned by ``combine_nodes`` and builds a schema with
    the resolvers attached to their fields. Root operation types and other object
    types get field resolvers, enums get their internal values and scalars get their
    serialization functions. A resolver of a subscription field can be the subscribe
    function or a mapping with ``subscribe`` and ``resolve`` functions. Without a
    ``resolve`` function, the field is looked up in the event payload by its name.

    Each schema directive resolver is called with the current resolver of every field
    carrying the directive and the directive arguments, and must return the resolver
    that replaces it.
    """
    if not isinstance(type_defs, str):
        msg = "Must provide type definitions as a string."
        raise UsageError(msg)
    if not isinstance(resolvers, Mapping):
        msg = f"Expected resolvers to be a mapping, received {inspect(resolvers)}."
        raise UsageError(msg)

    schema = build_ast_schema(merge_root_types(parse(type_defs)))
    subscription_type = schema.subscription_type

    # root types without resolvers keep the default resolvers
    resolved: Dict[str, Any] = {
        name: value
        for name, value in resolvers.items()
        if not (isinstance(value, Mapping) and not value)
    }
    for type_name, type_resolvers in resolved.items():
        type_ = schema.get_type(type_name)
        if isinstance(type_, GraphQLObjectType):
            _set_object_resolvers(
                type_, type_resolvers, type_ is subscription_type
            )
        elif isinstance(type_, GraphQLEnumType):
            _set_enum_values(type_, type_resolvers)
        elif isinstance(type_, GraphQLScalarType):
            _set_scalar_functions(type_, type_resolvers)
        else:
            msg = f"{type_name} defined in resolvers, but not in schema."
            raise CompositionError(msg)

    if schema_directives:
        _apply_schema_directives(schema, schema_directives)

    logger.debug(
        "executable_schema_built",
        types=list(resolved),
        directives=list(schema_directives or ()),
    )
    return schema
