"""Archive path helpers."""

from __future__ import annotations

# Hierarchy separator used by archive entry paths
SEPARATOR = "/"


def substring_to_last(text: str, boundary: str, ignore_last: int = 0) -> str:
    """Return the longest prefix of *text* that ends with *boundary*.

    The last *ignore_last* characters of *text* are not searched, so repeated
    calls with ``ignore_last=1`` strip one trailing segment at a time::

        >>> substring_to_last("a/b/c", "/", 1)
        'a/b/'
        >>> substring_to_last("a/b/", "/", 1)
        'a/'
        >>> substring_to_last("a/", "/", 1)
        ''

    Returns ``""`` when *boundary* does not occur in the searched region, and
    *text* itself (the same object) when the match is already at its end.
    """
    end = len(text) - ignore_last
    if end <= 0:
        return ""
    index = text.rfind(boundary, 0, end)
    if index == -1:
        return ""
    cut = index + len(boundary)
    if cut == len(text):
        return text
    return text[:cut]


def relative_name(path: str, parent_path: str) -> str:
    """Return the part of *path* below *parent_path*."""
    return path[len(parent_path):]
