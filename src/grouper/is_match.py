"""Partial deep matching"""

from __future__ import annotations

from collections.abc import Mapping
from math import isnan
from typing import Any

from .get import get_property
from .pyutils import Undefined, is_collection

__all__ = ["is_match", "is_partial_equal", "is_strict_equal"]


def is_match(value: Any, source: Mapping) -> bool:
    """Check whether a value has all the properties of the given source.

    Only the properties listed in the source are compared, recursively for
    nested mappings. A property that the value does not have never matches,
    and an empty source matches every value.
    """
    for key, expected in source.items():
        actual = get_property(value, key)
        if actual is Undefined or not is_partial_equal(actual, expected):
            return False
    return True


def is_partial_equal(value: Any, other: Any) -> bool:
    """Check whether a value is a partial deep match for the other value.

    Mappings match if the value has all properties of the other mapping,
    lists and tuples match if every item of the other sequence matches some
    item of the value, and everything else must be strictly equal.
    """
    if isinstance(other, Mapping):
        return not _is_primitive(value) and is_match(value, other)
    if isinstance(other, (list, tuple)):
        return (
            is_collection(value)
            and len(other) <= len(value)
            and all(
                any(is_partial_equal(item, expected) for item in value)
                for expected in other
            )
        )
    return is_strict_equal(value, other)


def is_strict_equal(value: Any, other: Any) -> bool:
    """Check equality without coercion between booleans and numbers.

    NaN is considered to be equal to itself.
    """
    if value is other:
        return True
    if isinstance(value, bool) or isinstance(other, bool):
        return False
    if isinstance(value, float) and isinstance(other, float):
        if isnan(value) and isnan(other):
            return True
    return bool(value == other)


def _is_primitive(value: Any) -> bool:
    return value is None or value is Undefined or isinstance(
        value, (str, bytes, int, float, complex)
    )
