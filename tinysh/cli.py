"""Command-line entry point"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from . import __version__
from .control_flow import ExitRequested
from .shell import Shell

LOG_LEVEL_ENV = 'TINYSH_LOG_LEVEL'
DEFAULT_LOG_LEVEL = 'WARNING'
LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def default_log_level() -> str:
    """Level from the environment, or the default if unset or not a known level"""
    level = os.environ.get(LOG_LEVEL_ENV, '').upper()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='tinysh',
        description='A minimal interactive command interpreter',
    )
    parser.add_argument(
        '-c', dest='command', metavar='COMMAND',
        help='run a single command line and exit with its status',
    )
    parser.add_argument(
        '--log-level',
        default=default_log_level(),
        type=str.upper,
        choices=LOG_LEVELS,
        help=f'logging verbosity (default: ${LOG_LEVEL_ENV} or {DEFAULT_LOG_LEVEL})',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def configure_logging(level: str) -> None:
    """Send log records to stderr at the given level"""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the shell.

    Returns:
        Exit status
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    shell = Shell()
    if args.command is not None:
        try:
            return shell.execute(args.command)
        except ExitRequested as e:
            return e.exit_code

    try:
        return shell.repl()
    except KeyboardInterrupt:
        shell.stdout.write("\n")
        shell.stdout.flush()
        return shell.last_exit_code


if __name__ == '__main__':
    sys.exit(main())
