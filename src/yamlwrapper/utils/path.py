"""Dotted path syntax for addressing configuration sections."""

from __future__ import annotations

from typing import Any

__all__ = ["PATH_SEPARATOR", "normalize_path", "split_path", "join_path"]

PATH_SEPARATOR = "."


def normalize_path(path: Any) -> str | None:
    """Strip a path, or return None when it is not a string at all.

    None signals "unresolvable"; callers treat it as not found rather than
    raising.
    """
    if not isinstance(path, str):
        return None
    return path.strip()


def split_path(path: str) -> list[str]:
    """Split a dotted path into stripped segments.

    An empty path means "this node" and yields no segments. Empty segments
    produced by consecutive, leading or trailing separators are kept as
    literal empty-string keys.

    Args:
        path: An already normalized path.

    Returns:
        The ordered list of segments.
    """
    if not path:
        return []
    return [segment.strip() for segment in path.split(PATH_SEPARATOR)]


def join_path(*segments: str | None) -> str:
    """Join segments with the separator, skipping None entries."""
    return PATH_SEPARATOR.join(s for s in segments if s is not None)
