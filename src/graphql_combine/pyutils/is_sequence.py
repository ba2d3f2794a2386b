from typing import AbstractSet, Any, Collection, Mapping

__all__ = ["is_sequence"]

no_sequence_type: Any = (str, bytes, bytearray, Mapping, AbstractSet)


def is_sequence(value: Any) -> bool:
    """Check if value is an ordered collection of items.

    Strings, mappings and sets are not considered to be sequences.
    """
    return isinstance(value, Collection) and not isinstance(value, no_sequence_type)
