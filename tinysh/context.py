"""
CommandContext - Encapsulates the session state commands run against.

The shell owns exactly one context and passes it by reference to every
process it creates, so builtins read and change the working directory and
environment through it instead of through process-wide globals.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
import os

from .path_manager import PathManager
from .path_resolver import split_search_path


@dataclass
class CommandContext:
    """
    Encapsulates all context needed for command execution.

    This provides commands with access to:
    - Current working directory
    - Environment variables (search path, home directory)

    Example:
        >>> from tinysh.context import CommandContext
        >>> from tinysh.path_manager import PathManager
        >>> ctx = CommandContext(env={'HOME': '/home/alice'},
        ...                      path_manager=PathManager('/tmp'))
        >>> ctx.resolve_path('file.txt')
        '/tmp/file.txt'
        >>> ctx.get_home_directory()
        '/home/alice'
    """

    env: Dict[str, str] = field(default_factory=dict)
    path_manager: PathManager = field(default_factory=PathManager)

    @property
    def cwd(self) -> Optional[str]:
        """Tracked working directory (None if it could not be determined)"""
        return self.path_manager.cwd

    def get_cwd(self) -> str:
        """
        Read the working directory.

        Raises:
            WorkingDirectoryError: If it cannot be read
        """
        return self.path_manager.get_cwd()

    def change_directory(self, path: str) -> str:
        """
        Change the working directory.

        Raises:
            DirectoryNotFoundError: If path is not an accessible directory
        """
        return self.path_manager.change_directory(path)

    def resolve_path(self, path: str) -> str:
        """
        Resolve relative paths against the working directory.

        Examples:
            >>> ctx = CommandContext(path_manager=PathManager('/home/user'))
            >>> ctx.resolve_path('../data')
            '/home/data'
        """
        return self.path_manager.resolve_path(path)

    def get_variable(self, name: str) -> Optional[str]:
        """
        Get an environment variable.

        Returns:
            Variable value or None if not set
        """
        return self.env.get(name)

    def get_search_path(self) -> List[str]:
        """
        Directories listed in PATH, in search order.

        Returns an empty list when PATH is unset, which simply means there
        is nowhere to search.
        """
        return split_search_path(self.get_variable('PATH'))

    def get_home_directory(self) -> Optional[str]:
        """
        Resolve the home directory.

        Read from the environment on every call: USERPROFILE on Windows,
        HOME elsewhere.

        Returns:
            Home directory, or None if the variable is unset
        """
        if os.name == 'nt':
            return self.get_variable('USERPROFILE')
        return self.get_variable('HOME')

    def __repr__(self):
        """String representation for debugging"""
        return (
            f"CommandContext(cwd={self.cwd!r}, "
            f"env_vars={len(self.env)})"
        )
