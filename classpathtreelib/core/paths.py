"""Portable path helpers.

Paths handed to clients are slash-separated strings, independent of the
host OS. These helpers compare them on segment boundaries.
"""

import posixpath
from typing import Optional


def to_portable(path: Optional[str]) -> Optional[str]:
    """Convert a path to its portable slash-separated form.

    Backslashes become slashes and a trailing slash is dropped (except
    for the root itself).

    Args:
        path: Path in any separator style, or None

    Returns:
        Portable path, or None if path was None
    """
    if path is None:
        return None
    portable = str(path).replace('\\', '/')
    while len(portable) > 1 and portable.endswith('/'):
        portable = portable[:-1]
    return portable


def canonicalize(path: Optional[str]) -> Optional[str]:
    """Normalize a portable path for comparison.

    Collapses duplicate separators and resolves '.' and '..' segments
    lexically. Symlinks are not followed here; backends that know about
    the filesystem may canonicalize further.
    """
    portable = to_portable(path)
    if not portable:
        return portable
    normalized = posixpath.normpath(portable)
    # normpath keeps a leading '//' as-is per POSIX
    if normalized.startswith('//'):
        normalized = '/' + normalized.lstrip('/')
    return normalized


def same_path(left: Optional[str], right: Optional[str]) -> bool:
    """Check two portable paths for equality, ignoring trailing slashes."""
    if left is None or right is None:
        return False
    return to_portable(left) == to_portable(right)


def is_path_prefix(prefix: str, path: str) -> bool:
    """Check whether prefix names path or one of its ancestors.

    The test respects segment boundaries, so '/a/bc' is a prefix of
    '/a/bc/d' but not of '/a/bcd'.

    Args:
        prefix: Candidate ancestor path
        path: Path to test

    Returns:
        True if path equals prefix or lies below it
    """
    prefix = to_portable(prefix)
    path = to_portable(path)
    if prefix is None or path is None:
        return False
    if path == prefix:
        return True
    if prefix == '/':
        return path.startswith('/')
    return path.startswith(prefix + '/')
