"""
Base utilities for command implementations.

This module provides common helper functions that command modules can use
to keep their messages consistent.
"""

from typing import Optional

from ..exit_codes import EXIT_CODE_FAILURE
from ..process import Process


def write_error(process: Process, message: str, prefix_command: bool = True):
    """
    Write an error message to stderr.

    Args:
        process: The process object
        message: The error message
        prefix_command: If True, prefix message with command name
    """
    if prefix_command:
        process.stderr.write(f"{process.command}: {message}\n")
    else:
        process.stderr.write(f"{message}\n")


def validate_arg_count(process: Process, min_args: int = 0, max_args: Optional[int] = None,
                       usage: str = "") -> bool:
    """
    Validate the number of arguments.

    Args:
        process: The process object
        min_args: Minimum required arguments
        max_args: Maximum allowed arguments (None = unlimited)
        usage: Usage string to display on error

    Returns:
        True if valid, False if invalid (error already written to stderr)
    """
    arg_count = len(process.args)

    if arg_count < min_args:
        write_error(process, "missing operand")
        if usage:
            process.stderr.write(f"usage: {usage}\n")
        return False

    if max_args is not None and arg_count > max_args:
        write_error(process, "too many arguments")
        if usage:
            process.stderr.write(f"usage: {usage}\n")
        return False

    return True


def first_arg(process: Process, default: Optional[str] = None) -> Optional[str]:
    """
    Get the first argument; builtins that take one operand ignore the rest.

    Args:
        process: The process object
        default: Value returned when there are no arguments
    """
    return process.args[0] if process.args else default


def report_failure(process: Process, message: str, exit_code: int = EXIT_CODE_FAILURE) -> int:
    """
    Write a user-facing failure line to stdout and return the exit code.

    Used for expected misses (unknown command, missing directory) that the
    shell reports in-band rather than as diagnostics.
    """
    process.stdout.write(f"{message}\n")
    return exit_code


__all__ = [
    'write_error',
    'validate_arg_count',
    'first_arg',
    'report_failure',
]
