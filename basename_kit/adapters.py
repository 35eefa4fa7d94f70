"""
basename-kit — Adapters for string-like path inputs.

Every input is converted to an owned str and handed to core.base_name,
so all accepted representations give identical results. The "baremetal"
profile keeps only the canonical str entry point.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from .core import base_name

logger = logging.getLogger("basename_kit.adapters")

__all__ = ["PROFILES", "base_name_of", "base_names", "to_text"]

PROFILES: frozenset[str] = frozenset({"full", "baremetal"})

_BUFFER_TYPES = (bytes, bytearray, memoryview)


def to_text(path: object, *, profile: str = "full") -> str:
    """
    Convert a string-like path to an owned str.

    Bytes-like values are decoded with os.fsdecode (surrogateescape), so
    decoding cannot fail. Raises TypeError for anything else, and for any
    non-str under the baremetal profile.
    """
    if profile not in PROFILES:
        valid = ", ".join(sorted(PROFILES))
        raise ValueError(f"Invalid profile: {profile!r}. Valid values: {valid}")

    if isinstance(path, str):
        return str(path)

    if profile == "baremetal":
        raise TypeError(
            f"baremetal profile accepts only str paths, got {type(path).__name__}"
        )

    if isinstance(path, _BUFFER_TYPES):
        return os.fsdecode(bytes(path))

    if isinstance(path, os.PathLike):
        raw = os.fspath(path)
        logger.debug("Converted %s to %r", type(path).__name__, raw)
        return raw if isinstance(raw, str) else os.fsdecode(raw)

    raise TypeError(f"expected a string-like path, got {type(path).__name__}")


def base_name_of(path: object, *, profile: str = "full") -> str:
    """Base name of any accepted path representation."""
    return base_name(to_text(path, profile=profile))


def base_names(paths: Iterable[object], *, profile: str = "full") -> list[str]:
    return [base_name_of(p, profile=profile) for p in paths]
