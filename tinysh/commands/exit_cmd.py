"""
EXIT command - leave the shell.

Note: Module name is exit_cmd.py because 'exit' is a Python builtin.
"""

from ..process import Process
from ..command_decorators import command
from ..control_flow import ExitRequested
from ..exit_codes import EXIT_CODE_SUCCESS
from . import register_command


@register_command('exit')
@command(usage="exit")
def cmd_exit(process: Process) -> int:
    """
    Exit the shell

    Usage: exit

    Arguments are ignored; the shell always terminates with status 0.
    """
    raise ExitRequested(EXIT_CODE_SUCCESS)
