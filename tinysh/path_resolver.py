"""Executable lookup over the search path.

Names are matched against directory entries case-insensitively (ASCII
letters only), and the first directory in search order that holds a match
wins. Directories that cannot be listed are skipped.
"""

import logging
import os
import string
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_lower(name: str) -> str:
    """Lower-case ASCII letters only; other characters are left untouched."""
    return name.translate(_ASCII_LOWER)


def split_search_path(value: Optional[str]) -> List[str]:
    """Split a PATH-style value into its directories.

    Args:
        value: Raw variable value, or None if the variable is unset

    Returns:
        Directories in search order; empty segments are dropped

    Examples:
        split_search_path('/usr/bin:/bin') -> ['/usr/bin', '/bin']
        split_search_path(None) -> []
    """
    if not value:
        return []
    return [part for part in value.split(os.pathsep) if part]


def find_in_directory(name: str, directory: str) -> Optional[str]:
    """Find a regular file in ``directory`` whose name matches ``name``.

    Args:
        name: Program name to look for
        directory: Directory to list (not recursive)

    Returns:
        The matching entry's name as stored on disk, or None
    """
    wanted = ascii_lower(name)
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                try:
                    if not entry.is_file():
                        continue
                except OSError:
                    continue
                if ascii_lower(entry.name) == wanted:
                    return entry.name
    except OSError as e:
        logger.debug("skipping search path entry %r: %s", directory, e)
    return None


def find_executable(name: str, search_path: Sequence[str]) -> Optional[str]:
    """Locate ``name`` on the search path.

    Args:
        name: Program name
        search_path: Directories in search order

    Returns:
        Full path of the first match (directory joined with the on-disk
        file name), or None if no directory holds a match
    """
    for directory in search_path:
        found = find_in_directory(name, directory)
        if found is not None:
            path = os.path.join(directory, found)
            logger.debug("resolved %r to %s", name, path)
            return path
    logger.debug("%r not found on search path", name)
    return None
