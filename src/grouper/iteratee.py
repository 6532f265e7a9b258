"""Selector resolution

Each supported kind of selector is turned into a key function that accepts the
element, its position and the whole collection as positional arguments, so that
the grouping loop does not need to inspect the selector again.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from inspect import Parameter, signature
from typing import Any

from .get import get
from .is_match import is_match, is_partial_equal
from .pyutils import Undefined, identity_func
from .to_key_string import to_key_string

__all__ = ["KeyFunction", "iteratee", "matches", "matches_property", "prop"]

KeyFunction = Callable[..., Any]

_positional_kinds = (Parameter.POSITIONAL_ONLY, Parameter.POSITIONAL_OR_KEYWORD)


def iteratee(selector: Any = Undefined) -> KeyFunction:
    """Create a key function from the given selector.

    - None or Undefined: the element itself
    - a callable: called with as many of (element, position, collection)
      as it requires positionally, but at least with the element
    - a mapping: whether the element matches the mapping as a pattern
    - a list or tuple: a (path, value) pair, whether the value at the path
      of the element matches the given value
    - anything else: the value at the property path given by the selector
    """
    if selector is None or selector is Undefined:
        return identity_func
    if callable(selector):
        return _with_positional_args(selector)
    if isinstance(selector, Mapping):
        return matches(selector)
    if isinstance(selector, (list, tuple)):
        path = selector[0] if selector else Undefined
        value = selector[1] if len(selector) > 1 else Undefined
        return matches_property(path, value)
    if isinstance(selector, int) and not isinstance(selector, bool):
        return prop(selector)
    return prop(selector if isinstance(selector, str) else to_key_string(selector))


def prop(path: Any) -> KeyFunction:
    """Create a key function returning the value at the given property path."""

    def key_fn(value: Any, *_args: Any) -> Any:
        return get(value, path)

    return key_fn


def matches(source: Mapping) -> KeyFunction:
    """Create a key function checking whether an element matches the source."""

    def key_fn(value: Any, *_args: Any) -> bool:
        return is_match(value, source)

    return key_fn


def matches_property(path: Any, expected: Any) -> KeyFunction:
    """Create a key function checking the value at the given property path."""

    def key_fn(value: Any, *_args: Any) -> bool:
        actual = get(value, path)
        return actual is not Undefined and is_partial_equal(actual, expected)

    return key_fn


def _with_positional_args(func: Callable[..., Any]) -> KeyFunction:
    """Wrap the function so that it gets only the arguments it requires.

    Functions get as many of (element, position, collection) as they have
    required positional parameters, but at least the element if they accept
    any positional argument. Optional parameters keep their defaults.
    """
    try:
        parameters = list(signature(func).parameters.values())
    except (TypeError, ValueError):  # builtins without signature
        num_args = 1
    else:
        positional = [param for param in parameters if param.kind in _positional_kinds]
        required = sum(param.default is Parameter.empty for param in positional)
        if any(param.kind is Parameter.VAR_POSITIONAL for param in parameters):
            num_args = max(required, 1)
        else:
            num_args = min(max(required, 1), len(positional))

    def key_fn(*args: Any) -> Any:
        return func(*args[:num_args])

    return key_fn
