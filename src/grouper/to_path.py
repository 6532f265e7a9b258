"""Property path parsing"""

from __future__ import annotations

import re

__all__ = ["to_path"]

# a name, a bracketed index or quoted key, or an empty segment between delimiters
_re_segment = re.compile(
    r"[^.[\]]+"
    r"|\[(?:([^\"'\]][^\]]*)|([\"'])((?:(?!\2)[^\\]|\\.)*?)\2)\]"
    r"|(?=(?:\.|\[\])(?:\.|\[\]|$))"
)
_re_escape = re.compile(r"\\(\\)?")


def to_path(path: str) -> list[str]:
    """Split a property path string into its keys.

    Both dot and bracket notation are understood, and bracketed keys may be
    quoted in order to contain delimiters::

        to_path("a.b")          # ['a', 'b']
        to_path("tags[0]")      # ['tags', '0']
        to_path('meta["a.b"]')  # ['meta', 'a.b']

    The empty string names no property and yields an empty list.
    """
    if not path:
        return []
    keys: list[str] = []
    append = keys.append
    if path.startswith("."):
        append("")
    for match in _re_segment.finditer(path):
        index, quote, quoted = match.groups()
        if quote:
            append(_re_escape.sub(r"\1", quoted))
        elif index is not None:
            append(index)
        else:
            append(match.group())
    return keys
