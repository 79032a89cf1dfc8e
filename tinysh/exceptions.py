"""
Custom exception hierarchy for tinysh.

This module defines a structured exception hierarchy that provides:
- Clear error categorization
- Consistent error messages
- Proper exit codes

Usage:
    from tinysh.exceptions import DirectoryNotFoundError

    try:
        context.change_directory(path)
    except DirectoryNotFoundError as e:
        process.stdout.write(f"{e}\n")
        return e.exit_code
"""

from typing import Optional

from .exit_codes import (
    EXIT_CODE_FAILURE,
    EXIT_CODE_COMMAND_NOT_FOUND,
    EXIT_CODE_EXECUTION_FAILED,
)


class ShellError(Exception):
    """
    Base class for all shell errors.

    All custom exceptions should inherit from this class.
    This allows catching all shell-specific errors with a single except clause.

    Attributes:
        message: Error message
        exit_code: Suggested exit code (default: 1)
    """

    def __init__(self, message: str, exit_code: int = EXIT_CODE_FAILURE):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


# =============================================================================
# File System Errors
# =============================================================================

class FileSystemError(ShellError):
    """
    Base class for filesystem-related errors.

    Raised when working directory operations fail.
    """

    def __init__(self, message: str, path: Optional[str] = None,
                 exit_code: int = EXIT_CODE_FAILURE):
        super().__init__(message, exit_code)
        self.path = path


class DirectoryNotFoundError(FileSystemError):
    """
    Raised when a path cannot be entered as a directory.

    Covers missing paths, paths that are not directories and directories
    without search permission; the message is the same for all of them.

    Example:
        raise DirectoryNotFoundError("/path/to/dir")
    """

    def __init__(self, path: str, message: Optional[str] = None):
        if message is None:
            message = f"{path}: No such file or directory"
        super().__init__(message, path)


class WorkingDirectoryError(FileSystemError):
    """
    Raised when the current working directory cannot be read.

    Example:
        raise WorkingDirectoryError("No such file or directory")
    """

    def __init__(self, reason: str, path: Optional[str] = None):
        message = f"error retrieving current directory: {reason}"
        super().__init__(message, path)
        self.reason = reason


# =============================================================================
# Command Errors
# =============================================================================

class CommandError(ShellError):
    """
    Base class for command-related errors.

    Raised when command execution fails.
    """

    def __init__(self, command: str, message: str, exit_code: int = EXIT_CODE_FAILURE):
        super().__init__(message, exit_code)
        self.command = command


class CommandNotFoundError(CommandError):
    """
    Raised when a command is neither a builtin nor runnable.

    Example:
        raise CommandNotFoundError("nonexistent")
    """

    def __init__(self, command: str):
        message = f"{command}: command not found"
        super().__init__(command, message, exit_code=EXIT_CODE_COMMAND_NOT_FOUND)


class ExecutionError(CommandError):
    """
    Raised when an external program cannot be spawned or its output
    cannot be decoded.

    Attributes:
        reason: Description of the underlying failure
        spawned: True if the child process was started before failing

    Example:
        raise ExecutionError("ls", "output is not valid UTF-8", spawned=True)
    """

    def __init__(self, command: str, reason: str, spawned: bool = False):
        message = f"{command}: execution failed"
        super().__init__(command, message, exit_code=EXIT_CODE_EXECUTION_FAILED)
        self.reason = reason
        self.spawned = spawned
