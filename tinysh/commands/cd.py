"""
CD command - change the working directory.
"""

import logging

from ..process import Process
from ..command_decorators import command
from ..exceptions import DirectoryNotFoundError
from . import register_command
from .base import first_arg, report_failure

logger = logging.getLogger(__name__)

HOME_MARKER = '~'


def expand_home(process: Process, path: str):
    """
    Replace the leading ~ of a path with the home directory.

    Only the first ~ is replaced; 'cd ~/a~b' keeps the second one.

    Returns:
        The expanded path, or None if the home directory is not set
    """
    if not path.startswith(HOME_MARKER):
        return path
    home = process.context.get_home_directory()
    if home is None:
        return None
    return path.replace(HOME_MARKER, home, 1)


@register_command('cd')
@command(usage="cd [dir]")
def cmd_cd(process: Process) -> int:
    """
    Change directory

    Usage: cd [dir]

    With no argument, changes to the home directory. Extra arguments are
    ignored. If the home directory is needed but not set, nothing happens.
    """
    path = expand_home(process, first_arg(process, HOME_MARKER))
    if path is None:
        logger.debug("cd: home directory not set, ignoring")
        return 0

    try:
        process.context.change_directory(path)
    except DirectoryNotFoundError as e:
        return report_failure(process, str(e), e.exit_code)
    return 0
