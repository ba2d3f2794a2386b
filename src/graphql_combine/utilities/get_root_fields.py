from typing import List

from graphql.language import (
    DocumentNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
)

__all__ = ["get_root_fields"]


def get_root_fields(document: DocumentNode, type_name: str) -> List[str]:
    """Get the names of the fields of an object type.

    Given a parsed document, return the names of all fields declared by definitions
    and extensions of the object type with the given name, usually one of the root
    operation types ``Query``, ``Mutation`` or ``Subscription``. The names come in
    declaration order. Duplicates are kept, and an empty list is returned if the type
    is not part of the document.
    """
    return [
        field.name.value
        for definition in document.definitions
        if isinstance(definition, (ObjectTypeDefinitionNode, ObjectTypeExtensionNode))
        and definition.name.value == type_name
        for field in definition.fields or ()
    ]
