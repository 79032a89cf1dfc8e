"""
PWD command - print working directory.
"""

from ..process import Process
from ..command_decorators import command
from ..exceptions import WorkingDirectoryError
from . import register_command
from .base import write_error


@register_command('pwd')
@command(usage="pwd")
def cmd_pwd(process: Process) -> int:
    """
    Print working directory

    Usage: pwd

    Note:
        Reads process.context rather than the interpreter's own cwd, which
        the shell never changes.
    """
    try:
        cwd = process.context.get_cwd()
    except WorkingDirectoryError as e:
        write_error(process, str(e))
        return e.exit_code
    process.stdout.write(f"{cwd}\n")
    return 0
