from collections.abc import Collection, Iterable, Mapping
from typing import Any, TypeGuard

__all__ = ["is_collection", "is_iterable"]

not_iterable_types: Any = (str, bytes, bytearray, memoryview, Mapping)


def is_collection(value: Any) -> TypeGuard[Collection]:
    """Check if value is a collection, but not a string or a mapping."""
    return isinstance(value, Collection) and not isinstance(value, not_iterable_types)


def is_iterable(value: Any) -> TypeGuard[Iterable]:
    """Check if value is an iterable, but not a string or a mapping."""
    return isinstance(value, Iterable) and not isinstance(value, not_iterable_types)
