"""Grouping function"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .iteratee import iteratee
from .pyutils import Undefined, is_iterable
from .to_key_string import to_key_string

__all__ = ["group_by"]


def group_by(collection: Any = None, selector: Any = Undefined) -> dict[str, list]:
    """Group the elements of a collection by a key derived via a selector.

    The collection can be a sequence or any other iterable, or a mapping, in
    which case its values are grouped. Strings are grouped by character. None,
    Undefined and values that are not collections are treated as having no
    elements.

    See :func:`~grouper.iteratee.iteratee` for the supported selectors. The
    derived keys are converted to strings with
    :func:`~grouper.to_key_string.to_key_string`.

    The groups are returned in the order in which their keys were first seen,
    and every group keeps the elements in their original order. Errors raised
    by a selector function are propagated unchanged.
    """
    key_fn = iteratee(selector)
    groups: dict[str, list] = {}
    for position, value in _entries(collection):
        key = to_key_string(key_fn(value, position, collection))
        groups.setdefault(key, []).append(value)
    return groups


def _entries(collection: Any) -> Iterable[tuple[Any, Any]]:
    """Get (position, element) pairs, with keys as positions for mappings."""
    if isinstance(collection, Mapping):
        return collection.items()
    if isinstance(collection, str) or is_iterable(collection):
        return enumerate(collection)
    return ()
