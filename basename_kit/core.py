"""basename-kit — Base name of a '/'-separated path.

The result is the text after the last separator. Trailing separators are
not trimmed, so "a/b/" has an empty base name.
"""

__all__ = ["SEPARATOR", "base_name", "strip_suffix"]

SEPARATOR = "/"


def base_name(path: str) -> str:
    """Return the final component of *path*.

    No separator: *path* itself. Ends with a separator: "".
    Pure and total over str.
    """
    i = path.rfind(SEPARATOR)
    if i < 0:
        return str(path)
    return path[i + 1:]


def strip_suffix(name: str, suffix: str) -> str:
    """Remove *suffix* from *name*, unless it is the whole name."""
    if suffix and name.endswith(suffix) and name != suffix:
        return name[:-len(suffix)]
    return name
