"""Safe property lookup"""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Mapping, Sequence
from typing import Any

from .pyutils import Undefined
from .to_path import to_path

__all__ = ["get", "get_property"]


def get(value: Any, path: Any) -> Any:
    """Get the value at the given property path of a value.

    The path can be a single key, a dotted or bracketed path string, or a list of
    keys. A string path that is itself a key of a mapping value is used as such.
    Missing intermediate or terminal values resolve to Undefined, as does the
    empty path, which names no property.
    """
    if path is None or path is Undefined or path == "":
        return Undefined
    if isinstance(path, (list, tuple)):
        keys = list(path)
    elif _is_key(path, value):
        keys = [path]
    else:
        keys = to_path(path)
    if not keys:
        return Undefined
    for key in keys:
        value = get_property(value, key)
        if value is Undefined:
            break
    return value


def get_property(value: Any, key: Any) -> Any:
    """Get a single property of a value or Undefined if it does not exist.

    Mappings are accessed by key, sequences by non-negative integer index, and
    all other objects by attribute. None and Undefined have no properties.
    """
    if value is None or value is Undefined:
        return Undefined
    if isinstance(value, Mapping):
        for candidate in _key_candidates(key):
            if candidate in value and _is_same_kind_of_key(value, candidate):
                return value[candidate]
        return Undefined
    index = _to_index(key)
    if index is not None and isinstance(value, Sequence):
        return value[index] if index < len(value) else Undefined
    if isinstance(key, str) and key:
        return getattr(value, key, Undefined)
    return Undefined


def _is_key(path: Any, value: Any) -> bool:
    if not isinstance(path, str):
        return True
    if "." not in path and "[" not in path:
        return True
    return isinstance(value, Mapping) and path in value


def _is_same_kind_of_key(value: Mapping, key: Any) -> bool:
    """Check that an equal key of the mapping is a bool only if the key is one.

    Only 0 and 1 can collide with False and True, so only those are scanned.
    """
    if not isinstance(key, int) or key not in (0, 1):
        return True
    is_bool = isinstance(key, bool)
    return any(
        isinstance(stored, bool) is is_bool
        for stored in value
        if isinstance(stored, int) and stored == key
    )


def _key_candidates(key: Any) -> Iterator[Any]:
    """Yield the key and its alternative spellings as mapping keys."""
    if isinstance(key, Hashable):
        yield key
    if isinstance(key, bool):
        return
    if isinstance(key, int):
        yield str(key)
    elif isinstance(key, str) and key.isascii() and key.isdigit():
        yield int(key)


def _to_index(key: Any) -> int | None:
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key if key >= 0 else None
    if isinstance(key, str) and key.isascii() and key.isdigit():
        return int(key)
    return None
