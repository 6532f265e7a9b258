"""grouper

The :mod:`grouper` package partitions collections into groups keyed by a value
derived from each element, like the "group by" helper of common utility
libraries::

    >>> from grouper import group_by
    >>> group_by([{"age": 25}, {"age": 30}, {"age": 25}], "age")
    {'25': [{'age': 25}, {'age': 25}], '30': [{'age': 30}]}

The selector can be omitted, a property path, a function, a pattern mapping or
a (path, value) pair. See :func:`grouper.iteratee` for details.

All derived keys are converted to strings. Missing properties are represented
by the :data:`Undefined` sentinel and end up in the group ``"undefined"``.
"""

# The grouping function

from .group_by import group_by

# Merging groups of partial collections

from .merge_groups import merge_groups

# Selector resolution

from .iteratee import KeyFunction, iteratee, matches, matches_property, prop

# Property access and pattern matching

from .get import get, get_property
from .is_match import is_match, is_partial_equal, is_strict_equal
from .to_path import to_path

# Group key conversion

from .to_key_string import to_key_string

# The absent-value sentinel

from .pyutils import Undefined, UndefinedType

# The version of grouper

from .version import version, version_info

__version__ = version
__version_info__ = version_info

__all__ = [
    "version",
    "version_info",
    "group_by",
    "merge_groups",
    "KeyFunction",
    "iteratee",
    "matches",
    "matches_property",
    "prop",
    "get",
    "get_property",
    "is_match",
    "is_partial_equal",
    "is_strict_equal",
    "to_path",
    "to_key_string",
    "Undefined",
    "UndefinedType",
]
