"""Merging of groups"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

__all__ = ["merge_groups"]


def merge_groups(*groupings: Mapping[str, Iterable]) -> dict[str, list]:
    """Merge groups computed over consecutive parts of the same collection.

    Keys are ordered by their first occurrence and the elements of the same key
    are concatenated in the order of the given groupings. The result is the same
    as grouping the concatenated parts at once. The groupings are not modified.
    """
    merged: dict[str, list] = {}
    for groups in groupings:
        for key, elements in groups.items():
            merged.setdefault(key, []).extend(elements)
    return merged
