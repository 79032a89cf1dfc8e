"""
Control flow exceptions.

These are not errors: they unwind out of a running command so that the
shell loop can act on them. Process.execute lets them propagate.
"""

from .exit_codes import EXIT_CODE_SUCCESS


class ControlFlowException(Exception):
    """Base class for exceptions that alter the shell's control flow"""
    pass


class ExitRequested(ControlFlowException):
    """
    Raised by the exit builtin to end the session.

    Attributes:
        exit_code: Status the shell should terminate with
    """

    def __init__(self, exit_code: int = EXIT_CODE_SUCCESS):
        super().__init__(f"exit {exit_code}")
        self.exit_code = exit_code
