"""
ECHO command - print arguments.
"""

from ..process import Process
from ..command_decorators import command
from . import register_command


@register_command('echo')
@command(usage="echo [arg ...]")
def cmd_echo(process: Process) -> int:
    """Echo arguments to stdout, separated by single spaces"""
    process.stdout.write(' '.join(process.args) + '\n')
    return 0
