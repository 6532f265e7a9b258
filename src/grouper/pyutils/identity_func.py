from typing import Any, TypeVar, cast

from .undefined import Undefined


__all__ = ["identity_func"]


T = TypeVar("T")

DEFAULT_VALUE = cast(Any, Undefined)


def identity_func(x: T = DEFAULT_VALUE, *_args: Any) -> T:
    """Return the first received argument.

    This is the key function used when no selector is given: it gets the
    element, its position and the collection, and the element itself becomes
    the group key.
    """
    return x
