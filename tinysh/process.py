"""Process class for command execution"""

from typing import List, Optional, Callable

from .context import CommandContext
from .control_flow import ControlFlowException
from .exit_codes import EXIT_CODE_FAILURE
from .streams import OutputStream, ErrorStream


class Process:
    """Represents a single command invocation"""

    def __init__(
        self,
        command: str,
        args: List[str],
        executor: Callable,
        stdout: Optional[OutputStream] = None,
        stderr: Optional[ErrorStream] = None,
        context: Optional[CommandContext] = None,
    ):
        """
        Initialize a process

        Args:
            command: Command name
            args: Command arguments
            executor: Callable that executes the command
            stdout: Output stream
            stderr: Error stream
            context: CommandContext shared with the shell
        """
        self.command = command
        self.args = args
        self.stdout = stdout or OutputStream.to_buffer()
        self.stderr = stderr or ErrorStream.to_buffer()
        self.executor = executor
        self.context = context if context is not None else CommandContext()

        self.exit_code = 0

    def execute(self) -> int:
        """
        Execute the process

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        try:
            self.exit_code = self.executor(self)
        except KeyboardInterrupt:
            raise
        except ControlFlowException:
            # exit must reach the shell loop
            raise
        except Exception as e:
            self.stderr.write(f"Error executing '{self.command}': {str(e)}\n")
            self.exit_code = EXIT_CODE_FAILURE
        finally:
            self.stdout.flush()
            self.stderr.flush()

        return self.exit_code

    def get_stdout(self) -> bytes:
        """Get stdout contents"""
        return self.stdout.get_value()

    def get_stderr(self) -> bytes:
        """Get stderr contents"""
        return self.stderr.get_value()

    def __repr__(self):
        args_str = ' '.join(self.args) if self.args else ''
        return f"Process({self.command} {args_str})"
