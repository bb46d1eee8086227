"""Shorten a path string from the left to fit a character budget."""

import os

ELLIPSIS = "..."


def shorten_path(path: str, max_len: int, sep: str = os.sep) -> str:
    """Keep the trailing segments of ``path`` that fit in ``max_len`` characters.

    Dropped leading segments are replaced by ``...`` followed by the separator.
    When even the last segment is too long, its first ``max_len - 3``
    characters are kept after the marker.

    Examples:
        >>> shorten_path("a/b/c.txt", 30, "/")
        "a/b/c.txt"
        >>> shorten_path("alpha/beta/gamma.txt", 12, "/")
        ".../gamma.txt"
    """
    kept = ""
    for part in reversed(path.split(sep)):
        extra = len(part) + (1 if kept else 0)
        if len(kept) + extra > max_len:
            if not kept:
                return f"{ELLIPSIS}{sep}{part[: max(max_len - len(ELLIPSIS), 0)]}"
            return f"{ELLIPSIS}{sep}{kept}"
        kept = f"{part}{sep}{kept}" if kept else part
    return kept
