"""
External program runner.

Anything that is not a builtin is started as a child process. Standard
output is captured, decoded as UTF-8 and relayed; standard error goes
straight to the terminal. A program that cannot be started, or whose output
is not valid UTF-8, is reported and the shell carries on.
"""

import logging
import subprocess
from typing import List

from .context import CommandContext
from .exceptions import CommandNotFoundError, ExecutionError
from .path_resolver import find_executable
from .process import Process
from .commands.base import report_failure

logger = logging.getLogger(__name__)


def run_program(name: str, args: List[str], context: CommandContext) -> subprocess.CompletedProcess:
    """
    Run a program and wait for it to finish.

    The operating system resolves ``name`` against the session PATH. The
    child runs in the session working directory with the session
    environment and an empty stdin.

    Args:
        name: Program name or path
        args: Arguments, not including the program name
        context: Session state

    Returns:
        CompletedProcess whose stdout is the decoded output

    Raises:
        ExecutionError: If the program cannot be started (spawned=False)
            or its output is not valid UTF-8 (spawned=True)
    """
    try:
        completed = subprocess.run(
            [name] + list(args),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            cwd=context.cwd,
            env=context.env,
        )
    except (OSError, ValueError) as e:
        # ValueError: the name holds a NUL byte
        logger.debug("failed to start %r: %s", name, e)
        raise ExecutionError(name, str(e)) from e

    try:
        completed.stdout = completed.stdout.decode('utf-8')
    except UnicodeDecodeError as e:
        logger.debug("output of %r is not UTF-8: %s", name, e)
        raise ExecutionError(name, f"output is not valid UTF-8: {e}", spawned=True) from e

    return completed


def cmd_external(process: Process) -> int:
    """
    Executor for commands that are not builtins.

    The program is looked up on the search path first; the lookup only
    decides how a failure is reported; the run itself always goes by name.
    """
    name = process.command
    found = find_executable(name, process.context.get_search_path())

    try:
        completed = run_program(name, process.args, process.context)
    except ExecutionError as e:
        if found is None and not e.spawned:
            error = CommandNotFoundError(name)
            return report_failure(process, str(error), error.exit_code)
        return report_failure(process, str(e), e.exit_code)

    process.stdout.write(completed.stdout)
    return completed.returncode
