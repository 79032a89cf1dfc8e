"""Decorators shared by command implementations"""

import functools
from typing import Callable

from .exit_codes import EXIT_CODE_SUCCESS


def command(usage: str = "") -> Callable:
    """
    Mark a function as a command executor.

    The wrapped executor always returns an int exit code: a command body
    that falls off the end (returns None) counts as success.

    Args:
        usage: One-line usage string, shown by commands on misuse

    Example:
        @register_command('echo')
        @command(usage="echo [arg ...]")
        def cmd_echo(process):
            ...
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(process) -> int:
            result = func(process)
            return EXIT_CODE_SUCCESS if result is None else result

        wrapper.usage = usage
        return wrapper

    return decorator
