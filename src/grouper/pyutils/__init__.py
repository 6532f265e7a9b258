"""Python Utils

This package contains dependency-free Python utility functions used throughout the
codebase.

Each utility should belong in its own file and be the default export.

These functions are not part of the module interface and are subject to change.
"""

from .identity_func import identity_func
from .is_iterable import is_collection, is_iterable
from .undefined import Undefined, UndefinedType

__all__ = [
    "identity_func",
    "is_collection",
    "is_iterable",
    "Undefined",
    "UndefinedType",
]
