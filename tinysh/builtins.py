"""
Built-in shell commands registry.

The builtins themselves live in the commands/ package. This module loads
them once and exposes the lookup used by the dispatcher and by `type`.
"""

from typing import Callable, Optional

from .commands import load_all_commands, BUILTINS

load_all_commands()


def get_builtin(command: str) -> Optional[Callable]:
    """
    Get a built-in command executor.

    Args:
        command: The command name to look up

    Returns:
        The command function, or None if not found

    Example:
        >>> executor = get_builtin('echo')
        >>> if executor:
        ...     executor(process)
    """
    return BUILTINS.get(command)


def is_builtin(command: str) -> bool:
    """Check whether a name is a builtin"""
    return get_builtin(command) is not None
