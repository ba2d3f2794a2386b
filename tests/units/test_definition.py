from types import MappingProxyType

from graphql import GraphQLScalarType
from graphql.error import GraphQLError, GraphQLSyntaxError
from pytest import mark, raises

from graphql_combine import (
    GraphQLDirectiveUnit,
    GraphQLEnumUnit,
    GraphQLNode,
    GraphQLScalarUnit,
    UnitKind,
    UsageError,
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

from ..fixtures import fixture_path

user_type_defs = """
    type User {
        name: String
        age: Int
    }

    type Query {
        getUserByID(id: ID!): User
    }
"""

status_type_defs = """
    enum Status {
        ONLINE
        OFFLINE
    }
"""

has_permission_type_defs = """
    input PermissionInput {
        resource: String!
        action: String!
    }

    directive @hasPermission(permission: PermissionInput!) on FIELD_DEFINITION
"""


def get_user_by_id(_root, _info, id):
    return {"name": id}


def describe_graphql_node():
    def defines_a_node():
        node = GraphQLNode(
            name="User",
            type_defs=user_type_defs,
            resolvers={"Query": {"getUserByID": get_user_by_id}},
        )
        assert node.name == "User"
        assert node.kind is UnitKind.NODE
        assert node.type_defs == user_type_defs
        assert node.document.definitions[0].name.value == "User"
        assert node.resolvers.query == {"getUserByID": get_user_by_id}
        assert str(node) == "User"
        assert repr(node) == "<GraphQLNode(User)>"

    def always_has_all_resolver_groups():
        node = GraphQLNode(name="User", type_defs="type User { name: String }")
        assert node.resolvers.query == {}
        assert node.resolvers.mutation == {}
        assert node.resolvers.subscription == {}
        assert node.resolvers.fields == {}
        assert node.resolvers.for_operation("Query") is node.resolvers.query
        assert node.resolvers.for_operation("Mutation") is node.resolvers.mutation
        assert (
            node.resolvers.for_operation("Subscription")
            is node.resolvers.subscription
        )
        assert node.nodes == ()
        assert node.enums == ()
        assert node.scalars == ()

    def rejects_unknown_root_operations():
        node = GraphQLNode(name="User", type_defs="type User { name: String }")
        with raises(KeyError):
            node.resolvers.for_operation("Fields")

    def cannot_be_changed():
        resolvers = {"Query": {"getUserByID": get_user_by_id}}
        node = GraphQLNode(name="User", type_defs=user_type_defs, resolvers=resolvers)
        assert isinstance(node.resolvers.query, MappingProxyType)
        with raises(TypeError):
            node.resolvers.query["users"] = get_user_by_id  # type: ignore
        with raises(AttributeError):
            node.name = "Other"  # type: ignore
        resolvers["Query"]["users"] = get_user_by_id
        assert "users" not in node.resolvers.query

    def loads_type_defs_from_a_path():
        node = GraphQLNode(
            name="User",
            type_defs=fixture_path("user"),
            resolvers={"Query": {"getUserByID": get_user_by_id}},
        )
        assert "type User" in node.type_defs

    def joins_a_list_of_type_defs():
        node = GraphQLNode(
            name="User",
            type_defs=["type User { name: String }", fixture_path("address")],
        )
        assert "type User" in node.type_defs
        assert "type Address" in node.type_defs

    def keeps_nested_units():
        nested = GraphQLNode(name="Nested", type_defs="type Nested { title: String }")
        status = GraphQLEnumUnit(name="Status", type_defs=status_type_defs)
        json = GraphQLScalarUnit(name="JSON", resolver=lambda value: value)
        node = GraphQLNode(
            name="User",
            type_defs="type User { name: String }",
            nodes=[nested],
            enums=[status],
            scalars=[json],
        )
        assert node.nodes == (nested,)
        assert node.enums == (status,)
        assert node.scalars == (json,)

    def accepts_subscription_resolvers():
        def subscribe(_root, _info):
            return iter(())

        node = GraphQLNode(
            name="User",
            type_defs="type Subscription { userCreated: String userUpdated: String }",
            resolvers={
                "Subscription": {
                    "userCreated": subscribe,
                    "userUpdated": {"subscribe": subscribe, "resolve": lambda *_: 1},
                }
            },
        )
        assert node.resolvers.subscription["userCreated"] is subscribe
        assert node.resolvers.subscription["userUpdated"]["subscribe"] is subscribe

    def rejects_subscription_resolvers_without_subscribe():
        with raises(UsageError) as exc_info:
            GraphQLNode(
                name="User",
                type_defs="type Subscription { userCreated: String }",
                resolvers={"Subscription": {"userCreated": {"resolve": print}}},
            )
        assert str(exc_info.value) == (
            "User Subscription resolver 'userCreated' must provide a callable"
            " 'subscribe' and optionally a callable 'resolve'."
        )

    def rejects_missing_names():
        with raises(TypeError) as exc_info:
            # noinspection PyTypeChecker
            GraphQLNode(name=None, type_defs=user_type_defs)  # type: ignore
        assert str(exc_info.value) == "Must provide name."

    def rejects_invalid_names():
        with raises(GraphQLError):
            GraphQLNode(name="42User", type_defs=user_type_defs)

    def rejects_invalid_type_defs():
        with raises(UsageError) as exc_info:
            # noinspection PyTypeChecker
            GraphQLNode(name="User", type_defs=42)  # type: ignore
        assert str(exc_info.value) == (
            "User type_defs must be a string, a path or a list of those,"
            " received 42."
        )

    def rejects_type_defs_with_syntax_errors():
        with raises(GraphQLSyntaxError):
            GraphQLNode(name="User", type_defs="type User {")

    def rejects_unknown_resolver_groups():
        with raises(UsageError) as exc_info:
            GraphQLNode(
                name="User",
                type_defs=user_type_defs,
                resolvers={"Queries": {"getUserByID": get_user_by_id}},
            )
        assert str(exc_info.value) == (
            "User resolvers can only contain Query, Mutation, Subscription, Fields,"
            " received 'Queries'."
        )

    @mark.parametrize("resolvers", ([], "Query", 42))
    def rejects_resolvers_that_are_no_mapping(resolvers):
        with raises(UsageError):
            GraphQLNode(name="User", type_defs=user_type_defs, resolvers=resolvers)

    def rejects_resolvers_that_are_not_callable():
        with raises(UsageError) as exc_info:
            GraphQLNode(
                name="User",
                type_defs=user_type_defs,
                resolvers={"Query": {"getUserByID": True}},
            )
        assert str(exc_info.value) == (
            "User Query resolver 'getUserByID' must be callable, received True."
        )

    def rejects_nested_units_of_wrong_kind():
        status = GraphQLEnumUnit(name="Status", type_defs=status_type_defs)
        with raises(UsageError) as exc_info:
            GraphQLNode(name="User", type_defs=user_type_defs, nodes=[status])
        assert str(exc_info.value).startswith(
            "User: expected node to be of type GraphQLNode, received: "
        )
        with raises(UsageError) as exc_info:
            GraphQLNode(name="User", type_defs=user_type_defs, enums={})
        assert str(exc_info.value) == "User: expected enums to be an array"


def describe_graphql_enum_unit():
    def defines_an_enum():
        status = GraphQLEnumUnit(
            name="Status",
            type_defs=status_type_defs,
            resolver={"ONLINE": "online", "OFFLINE": "offline"},
        )
        assert status.kind is UnitKind.ENUM
        assert status.resolver == {"ONLINE": "online", "OFFLINE": "offline"}

    def allows_partial_resolvers():
        status = GraphQLEnumUnit(
            name="Status", type_defs=status_type_defs, resolver={"ONLINE": 1}
        )
        assert status.resolver == {"ONLINE": 1}

    def rejects_undeclared_values():
        with raises(UsageError) as exc_info:
            GraphQLEnumUnit(
                name="Status", type_defs=status_type_defs, resolver={"AWAY": "away"}
            )
        assert str(exc_info.value) == (
            "Status resolver contains 'AWAY' which is not a value of 'enum Status'."
        )

    def rejects_type_defs_without_the_enum():
        with raises(UsageError) as exc_info:
            GraphQLEnumUnit(name="Mood", type_defs=status_type_defs)
        assert str(exc_info.value) == "Mood type_defs must declare 'enum Mood'."


def describe_graphql_scalar_unit():
    def generates_type_defs():
        json = GraphQLScalarUnit(name="JSON", resolver=lambda value: value)
        assert json.kind is UnitKind.SCALAR
        assert json.type_defs == "scalar JSON"

    def accepts_given_type_defs():
        json = GraphQLScalarUnit(
            name="JSON",
            resolver=lambda value: value,
            type_defs='"""Any JSON value"""\nscalar JSON',
        )
        assert "Any JSON value" in json.type_defs

    def accepts_scalar_types_and_mappings():
        date_type = GraphQLScalarType("Date", serialize=str)
        assert GraphQLScalarUnit(name="Date", resolver=date_type).resolver is date_type
        date = GraphQLScalarUnit(
            name="Date", resolver={"serialize": str, "parse_value": str}
        )
        assert date.resolver == {"serialize": str, "parse_value": str}

    def rejects_invalid_resolvers():
        with raises(UsageError):
            # noinspection PyTypeChecker
            GraphQLScalarUnit(name="Date", resolver=42)  # type: ignore
        with raises(UsageError):
            GraphQLScalarUnit(name="Date", resolver={"print": str})

    def rejects_type_defs_without_the_scalar():
        with raises(UsageError) as exc_info:
            GraphQLScalarUnit(name="Date", resolver=str, type_defs="scalar Time")
        assert str(exc_info.value) == "Date type_defs must declare 'scalar Date'."


def describe_graphql_directive_unit():
    def defines_a_directive():
        directive = GraphQLDirectiveUnit(
            name="hasPermission",
            type_defs=has_permission_type_defs,
            resolver=lambda resolve, _args: resolve,
        )
        assert directive.kind is UnitKind.DIRECTIVE
        assert "directive @hasPermission" in directive.type_defs

    def rejects_type_defs_without_the_directive():
        with raises(UsageError) as exc_info:
            GraphQLDirectiveUnit(
                name="isAdmin",
                type_defs=has_permission_type_defs,
                resolver=lambda resolve, _args: resolve,
            )
        assert str(exc_info.value) == (
            "isAdmin type_defs must declare 'directive @isAdmin'."
        )

    def rejects_resolvers_that_are_not_callable():
        with raises(UsageError):
            # noinspection PyTypeChecker
            GraphQLDirectiveUnit(
                name="hasPermission",
                type_defs=has_permission_type_defs,
                resolver="resolver",  # type: ignore
            )


def describe_predicates():
    node = GraphQLNode(name="User", type_defs="type User { name: String }")
    status = GraphQLEnumUnit(name="Status", type_defs=status_type_defs)
    json = GraphQLScalarUnit(name="JSON", resolver=str)
    directive = GraphQLDirectiveUnit(
        name="hasPermission", type_defs=has_permission_type_defs, resolver=print
    )

    def recognize_units():
        assert all(is_unit(unit) for unit in (node, status, json, directive))
        assert not is_unit({"name": "User"})

    def recognize_unit_kinds():
        assert is_node(node) and not is_node(status)
        assert is_enum_unit(status) and not is_enum_unit(json)
        assert is_scalar_unit(json) and not is_scalar_unit(directive)
        assert is_directive_unit(directive) and not is_directive_unit(node)

    def assert_unit_kinds():
        assert assert_node(node) is node
        assert assert_enum_unit(status) is status
        assert assert_scalar_unit(json) is json
        assert assert_directive_unit(directive) is directive
        with raises(UsageError) as exc_info:
            assert_node(status)
        assert str(exc_info.value).endswith(" to be a GraphQL node.")
