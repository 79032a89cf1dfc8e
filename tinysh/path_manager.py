"""Working directory management for tinysh.

This module provides the PathManager class which handles:
- Current working directory tracking
- Path resolution (relative to absolute)
- Validated directory changes

The working directory lives here rather than in the interpreter process:
the shell never calls os.chdir, and external programs are started with the
tracked directory as their cwd.
"""

import logging
import os
from typing import Optional

from .exceptions import DirectoryNotFoundError, WorkingDirectoryError

logger = logging.getLogger(__name__)


class PathManager:
    """Manages paths and the working directory.

    Attributes:
        cwd: Current working directory (absolute, normalized), or None if
             it could not be determined at startup
    """

    def __init__(self, initial_cwd: Optional[str] = None):
        """Initialize the path manager.

        Args:
            initial_cwd: Initial working directory (default: the process cwd)
        """
        if initial_cwd is None:
            try:
                initial_cwd = os.getcwd()
            except OSError as e:
                logger.warning("cannot determine starting directory: %s", e)
        self.cwd = os.path.abspath(initial_cwd) if initial_cwd else None

    def resolve_path(self, path: str) -> str:
        """Resolve a relative or absolute path to an absolute path.

        Args:
            path: Path to resolve (can be relative or absolute)

        Returns:
            Absolute, normalized path

        Examples:
            resolve_path('/foo/bar') -> '/foo/bar'
            resolve_path('bar') with cwd='/foo' -> '/foo/bar'
            resolve_path('../baz') with cwd='/foo/bar' -> '/foo/baz'
        """
        return os.path.normpath(self.join_path(path))

    def join_path(self, path: str) -> str:
        """Join a path onto the working directory without normalizing it.

        Components such as '..' are kept, so the operating system resolves
        them against directories that actually exist.

        Examples:
            join_path('missing/..') with cwd='/foo' -> '/foo/missing/..'
        """
        if not path:
            path = "."
        if os.path.isabs(path):
            return path
        if self.cwd is None:
            return os.path.join(os.getcwd(), path)
        return os.path.join(self.cwd, path)

    def change_directory(self, path: str) -> str:
        """Change the current working directory.

        Args:
            path: New directory path (can be relative or absolute)

        Returns:
            The new working directory

        Raises:
            DirectoryNotFoundError: If the path is missing, is not a
                directory, or cannot be searched. The working directory
                is left unchanged.
        """
        joined = self.join_path(path)
        if not os.path.isdir(joined) or not os.access(joined, os.X_OK):
            raise DirectoryNotFoundError(path)
        target = os.path.normpath(joined)
        logger.debug("cd %s -> %s", self.cwd, target)
        self.cwd = target
        return target

    def get_cwd(self) -> str:
        """Get the current working directory.

        Returns:
            Current working directory

        Raises:
            WorkingDirectoryError: If the directory is unknown or no longer
                exists
        """
        if self.cwd is None:
            raise WorkingDirectoryError("No such file or directory")
        try:
            os.stat(self.cwd)
        except OSError as e:
            raise WorkingDirectoryError(e.strerror or str(e), self.cwd) from e
        return self.cwd
