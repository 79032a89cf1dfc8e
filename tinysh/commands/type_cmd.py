"""
TYPE command - describe how a name would be resolved.

Note: Module name is type_cmd.py because 'type' is a Python builtin.
"""

from ..process import Process
from ..command_decorators import command
from ..exit_codes import EXIT_CODE_FAILURE
from ..path_resolver import find_executable
from . import register_command
from .base import first_arg, report_failure, validate_arg_count


@register_command('type')
@command(usage="type name")
def cmd_type(process: Process) -> int:
    """
    Display how a command name is interpreted

    Usage: type name

    Only the first name is considered; any others are ignored.

    Examples:
        type echo   # echo is a shell builtin
        type ls     # ls is /usr/bin/ls
        type nope   # nope not found
    """
    # Imported here: builtins loads this module while it is being initialized
    from ..builtins import is_builtin

    if not validate_arg_count(process, min_args=1, usage=cmd_type.usage):
        return EXIT_CODE_FAILURE

    name = first_arg(process)
    if is_builtin(name):
        process.stdout.write(f"{name} is a shell builtin\n")
        return 0

    path = find_executable(name, process.context.get_search_path())
    if path is None:
        return report_failure(process, f"{name} not found")

    process.stdout.write(f"{name} is {path}\n")
    return 0
