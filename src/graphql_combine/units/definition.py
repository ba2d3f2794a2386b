"""Modular unit definitions"""

from __future__ import annotations

from enum import Enum
from os import PathLike
from types import MappingProxyType
from typing import (
    Any,
    Callable,
    Collection,
    List,
    Mapping,
    NamedTuple,
    Optional,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from graphql import GraphQLScalarType, parse
from graphql.language import (
    DirectiveDefinitionNode,
    DocumentNode,
    EnumTypeDefinitionNode,
    EnumTypeExtensionNode,
    ScalarTypeDefinitionNode,
)
from graphql.pyutils import inspect
from graphql.type import assert_name

from ..error import UsageError
from ..pyutils import is_sequence

__all__ = [
    "GraphQLDirectiveUnit",
    "GraphQLEnumUnit",
    "GraphQLNode",
    "GraphQLScalarUnit",
    "GraphQLUnit",
    "NodeResolvers",
    "ROOT_OPERATIONS",
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

ROOT_OPERATIONS: Tuple[str, ...] = ("Query", "Mutation", "Subscription")

# node resolver groups and the attributes holding them
RESOLVER_GROUPS = {
    "Query": "query",
    "Mutation": "mutation",
    "Subscription": "subscription",
    "Fields": "fields",
}

SCALAR_RESOLVER_KEYS = ("serialize", "parse_value", "parse_literal")

SUBSCRIPTION_RESOLVER_KEYS = ("subscribe", "resolve")

TypeDefs = Union[str, "PathLike[str]", Collection[Union[str, "PathLike[str]"]]]


def get_type_defs_text(type_defs: TypeDefs, name: str) -> str:
    """Get the SDL text of the given type definitions.

    Paths are read from disk; a list of fragments is joined with newlines.
    """
    if isinstance(type_defs, str):
        return type_defs
    if isinstance(type_defs, PathLike):
        # Lazy import to avoid a cyclic dependency between units and utilities
        from ..utilities.load_type_defs import load_type_defs

        return load_type_defs(type_defs)
    if is_sequence(type_defs) and type_defs:
        fragments = []
        for fragment in type_defs:
            if not isinstance(fragment, (str, PathLike)):
                msg = (
                    f"{name} type_defs fragments must be strings or paths,"
                    f" received {inspect(fragment)}."
                )
                raise UsageError(msg)
            fragments.append(get_type_defs_text(fragment, name))
        return "\n".join(fragments)
    msg = (
        f"{name} type_defs must be a string, a path or a list of those,"
        f" received {inspect(type_defs)}."
    )
    raise UsageError(msg)


class UnitKind(Enum):
    """The closed set of modular unit kinds"""

    NODE = "node"
    ENUM = "enum"
    SCALAR = "scalar"
    DIRECTIVE = "directive"


class GraphQLUnit:
    """Modular Unit

    Base class of the four kinds of units a schema is composed of. A unit owns a name
    and a piece of type definition text which is parsed once when the unit is
    created, so that syntax errors surface immediately. Units are read-only.
    """

    kind: UnitKind

    __slots__ = ("_name", "_type_defs", "_document")

    def __init__(self, name: str, type_defs: TypeDefs) -> None:
        assert_name(name)
        text = get_type_defs_text(type_defs, name)
        self._name = name
        self._type_defs = text
        self._document = parse(text)

    @property
    def name(self) -> str:
        return self._name

    @property
    def type_defs(self) -> str:
        """The type definition text of this unit"""
        return self._type_defs

    @property
    def document(self) -> DocumentNode:
        """The parsed type definitions of this unit"""
        return self._document

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}({self})>"


class NodeResolvers(NamedTuple):
    """Resolver groups of a node

    All four groups are always present, empty if the node has no resolvers for them.
    """

    query: Mapping[str, Callable]
    mutation: Mapping[str, Callable]
    subscription: Mapping[str, Any]
    fields: Mapping[str, Callable]

    def for_operation(self, operation: str) -> Mapping[str, Any]:
        """Get the resolvers of the root operation type with the given name."""
        if operation not in ROOT_OPERATIONS:
            msg = f"Unknown root operation type: {inspect(operation)}."
            raise KeyError(msg)
        return getattr(self, RESOLVER_GROUPS[operation])


def _assert_subscription_resolver(name: str, field_name: str, resolver: Any) -> Any:
    if callable(resolver):
        return resolver
    if isinstance(resolver, Mapping):
        if not callable(resolver.get("subscribe")) or not all(
            key in SUBSCRIPTION_RESOLVER_KEYS and callable(value)
            for key, value in resolver.items()
        ):
            msg = (
                f"{name} Subscription resolver '{field_name}' must provide a callable"
                " 'subscribe' and optionally a callable 'resolve'."
            )
            raise UsageError(msg)
        return MappingProxyType(dict(resolver))
    msg = (
        f"{name} Subscription resolver '{field_name}' must be callable or a mapping,"
        f" received {inspect(resolver)}."
    )
    raise UsageError(msg)


def build_node_resolvers(name: str, resolvers: Any) -> NodeResolvers:
    """Check the resolvers given to a node and sort them into groups."""
    if resolvers is None:
        resolvers = {}
    elif not isinstance(resolvers, Mapping):
        msg = f"{name} resolvers must be a mapping, received {inspect(resolvers)}."
        raise UsageError(msg)
    for key in resolvers:
        if key not in RESOLVER_GROUPS:
            msg = (
                f"{name} resolvers can only contain"
                f" {', '.join(RESOLVER_GROUPS)}, received {inspect(key)}."
            )
            raise UsageError(msg)
    groups = {}
    for key, attr in RESOLVER_GROUPS.items():
        group = resolvers.get(key)
        if group is None:
            group = {}
        elif not isinstance(group, Mapping):
            msg = (
                f"{name} {key} resolvers must be a mapping of field names"
                f" to resolvers, received {inspect(group)}."
            )
            raise UsageError(msg)
        checked = {}
        for field_name, resolver in group.items():
            if not isinstance(field_name, str):
                msg = f"{name} {key} field names must be strings."
                raise UsageError(msg)
            if key == "Subscription":
                resolver = _assert_subscription_resolver(name, field_name, resolver)
            elif not callable(resolver):
                msg = (
                    f"{name} {key} resolver '{field_name}' must be callable,"
                    f" received {inspect(resolver)}."
                )
                raise UsageError(msg)
            checked[field_name] = resolver
        groups[attr] = MappingProxyType(checked)
    return NodeResolvers(**groups)


U = TypeVar("U", bound=GraphQLUnit)


def assert_units(
    units: Any, unit_class: Type[U], option: str, prefix: str = ""
) -> Tuple[U, ...]:
    """Check that the given option is a collection of units of the given class.

    Returns the units as a tuple. None is accepted as an empty collection.
    """
    if units is None:
        return ()
    if not is_sequence(units):
        msg = f"{prefix}expected {option} to be an array"
        raise UsageError(msg)
    singular = option[:-1]
    for unit in units:
        if not isinstance(unit, unit_class):
            msg = (
                f"{prefix}expected {singular} to be of type {unit_class.__name__},"
                f" received: {inspect(unit)}"
            )
            raise UsageError(msg)
    return tuple(units)


class GraphQLNode(GraphQLUnit):
    """GraphQL Node

    A node bundles the type definitions of one part of a schema with the resolvers
    of its root operation fields. Nodes may embed further nodes, enums and scalars,
    which become part of every composition the node takes part in.

    Example::

        UserNode = GraphQLNode(
            name="User",
            type_defs='''
                type User {
                    name: String
                }

                type Query {
                    getUserByID(id: ID!): User
                }
            ''',
            resolvers={"Query": {"getUserByID": get_user_by_id}},
        )

    The resolvers may contain the groups ``Query``, ``Mutation`` and ``Subscription``
    with the resolvers of the root fields, and ``Fields`` with the resolvers of the
    fields of the node's own object type.
    """

    kind = UnitKind.NODE

    __slots__ = ("_resolvers", "_nodes", "_enums", "_scalars")

    def __init__(
        self,
        name: str,
        type_defs: TypeDefs,
        resolvers: Optional[Mapping[str, Mapping[str, Any]]] = None,
        nodes: Optional[Collection[GraphQLNode]] = None,
        enums: Optional[Collection[GraphQLEnumUnit]] = None,
        scalars: Optional[Collection[GraphQLScalarUnit]] = None,
    ) -> None:
        super().__init__(name, type_defs)
        prefix = f"{name}: "
        self._resolvers = build_node_resolvers(name, resolvers)
        self._nodes = assert_units(nodes, GraphQLNode, "nodes", prefix)
        self._enums = assert_units(enums, GraphQLEnumUnit, "enums", prefix)
        self._scalars = assert_units(scalars, GraphQLScalarUnit, "scalars", prefix)

    @property
    def resolvers(self) -> NodeResolvers:
        return self._resolvers

    @property
    def nodes(self) -> Tuple[GraphQLNode, ...]:
        return self._nodes

    @property
    def enums(self) -> Tuple[GraphQLEnumUnit, ...]:
        return self._enums

    @property
    def scalars(self) -> Tuple[GraphQLScalarUnit, ...]:
        return self._scalars


def get_enum_values(document: DocumentNode, name: str) -> Optional[List[str]]:
    """Get the declared values of the enum type with the given name.

    Returns None if the document does not define such an enum type.
    """
    defined = False
    values: List[str] = []
    for definition in document.definitions:
        if (
            isinstance(definition, (EnumTypeDefinitionNode, EnumTypeExtensionNode))
            and definition.name.value == name
        ):
            if isinstance(definition, EnumTypeDefinitionNode):
                defined = True
            values.extend(value.name.value for value in definition.values or ())
    return values if defined else None


class GraphQLEnumUnit(GraphQLUnit):
    """GraphQL Enum Unit

    The type definitions must declare an enum type with the name of the unit. The
    resolver maps enum value names to their internal values. Values missing from the
    resolver keep their name as internal value.
    """

    kind = UnitKind.ENUM

    __slots__ = ("_resolver",)

    def __init__(
        self,
        name: str,
        type_defs: TypeDefs,
        resolver: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(name, type_defs)
        declared = get_enum_values(self.document, name)
        if declared is None:
            msg = f"{name} type_defs must declare 'enum {name}'."
            raise UsageError(msg)
        if resolver is None:
            resolver = {}
        elif not isinstance(resolver, Mapping):
            msg = (
                f"{name} resolver must be a mapping of enum values,"
                f" received {inspect(resolver)}."
            )
            raise UsageError(msg)
        for value_name in resolver:
            if value_name not in declared:
                msg = (
                    f"{name} resolver contains {inspect(value_name)}"
                    f" which is not a value of 'enum {name}'."
                )
                raise UsageError(msg)
        self._resolver = MappingProxyType(dict(resolver))

    @property
    def resolver(self) -> Mapping[str, Any]:
        return self._resolver


class GraphQLScalarUnit(GraphQLUnit):
    """GraphQL Scalar Unit

    The resolver can be a ``GraphQLScalarType``, a mapping with the ``serialize``,
    ``parse_value`` and ``parse_literal`` functions, or a single function which
    serializes values. If no type definitions are given, ``scalar <name>`` is used.
    """

    kind = UnitKind.SCALAR

    __slots__ = ("_resolver",)

    def __init__(
        self,
        name: str,
        resolver: Union[GraphQLScalarType, Mapping[str, Callable], Callable],
        type_defs: Optional[TypeDefs] = None,
    ) -> None:
        if type_defs is None:
            type_defs = f"scalar {assert_name(name)}"
        super().__init__(name, type_defs)
        if not any(
            isinstance(definition, ScalarTypeDefinitionNode)
            and definition.name.value == name
            for definition in self.document.definitions
        ):
            msg = f"{name} type_defs must declare 'scalar {name}'."
            raise UsageError(msg)
        if isinstance(resolver, Mapping):
            if not resolver or not all(
                key in SCALAR_RESOLVER_KEYS and callable(value)
                for key, value in resolver.items()
            ):
                msg = (
                    f"{name} resolver mapping must consist of callables named"
                    f" {', '.join(SCALAR_RESOLVER_KEYS)}."
                )
                raise UsageError(msg)
            resolver = MappingProxyType(dict(resolver))
        elif not (isinstance(resolver, GraphQLScalarType) or callable(resolver)):
            msg = (
                f"{name} resolver must be a GraphQLScalarType, a mapping or a"
                f" callable, received {inspect(resolver)}."
            )
            raise UsageError(msg)
        self._resolver = resolver

    @property
    def resolver(self) -> Union[GraphQLScalarType, Mapping[str, Callable], Callable]:
        return self._resolver


class GraphQLDirectiveUnit(GraphQLUnit):
    """GraphQL Directive Unit

    The type definitions must declare the directive itself and may contain the input
    types it needs. The resolver is applied to the resolvers of all fields using the
    directive when an executable schema is built.
    """

    kind = UnitKind.DIRECTIVE

    __slots__ = ("_resolver",)

    def __init__(self, name: str, type_defs: TypeDefs, resolver: Callable) -> None:
        super().__init__(name, type_defs)
        if not any(
            isinstance(definition, DirectiveDefinitionNode)
            and definition.name.value == name
            for definition in self.document.definitions
        ):
            msg = f"{name} type_defs must declare 'directive @{name}'."
            raise UsageError(msg)
        if not callable(resolver):
            msg = f"{name} resolver must be callable, received {inspect(resolver)}."
            raise UsageError(msg)
        self._resolver = resolver

    @property
    def resolver(self) -> Callable:
        return self._resolver


def is_unit(unit: Any) -> bool:
    return isinstance(unit, GraphQLUnit)


def is_node(node: Any) -> bool:
    return isinstance(node, GraphQLNode)


def assert_node(node: Any) -> GraphQLNode:
    if not is_node(node):
        msg = f"Expected {inspect(node)} to be a GraphQL node."
        raise UsageError(msg)
    return node


def is_enum_unit(unit: Any) -> bool:
    return isinstance(unit, GraphQLEnumUnit)


def assert_enum_unit(unit: Any) -> GraphQLEnumUnit:
    if not is_enum_unit(unit):
        msg = f"Expected {inspect(unit)} to be a GraphQL enum unit."
        raise UsageError(msg)
    return unit


def is_scalar_unit(unit: Any) -> bool:
    return isinstance(unit, GraphQLScalarUnit)


def assert_scalar_unit(unit: Any) -> GraphQLScalarUnit:
    if not is_scalar_unit(unit):
        msg = f"Expected {inspect(unit)} to be a GraphQL scalar unit."
        raise UsageError(msg)
    return unit


def is_directive_unit(unit: Any) -> bool:
    return isinstance(unit, GraphQLDirectiveUnit)


def assert_directive_unit(unit: Any) -> GraphQLDirectiveUnit:
    if not is_directive_unit(unit):
        msg = f"Expected {inspect(unit)} to be a GraphQL directive unit."
        raise UsageError(msg)
    return unit
