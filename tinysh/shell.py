"""Interactive shell: prompt, read, dispatch"""

import logging
import os
import sys
from typing import Dict, IO, List, Optional, Union

from .builtins import get_builtin
from .context import CommandContext
from .control_flow import ExitRequested
from .exceptions import WorkingDirectoryError
from .exit_codes import EXIT_CODE_SUCCESS
from .external import cmd_external
from .path_manager import PathManager
from .process import Process
from .streams import OutputStream, ErrorStream

logger = logging.getLogger(__name__)


class Shell:
    """
    Read-dispatch loop around a single session.

    The shell owns the CommandContext (working directory and environment)
    and hands it to every process it creates.

    Example:
        >>> shell = Shell(initial_env={'PATH': '/usr/bin'}, cwd='/tmp')
        >>> shell.execute('pwd')
        /tmp
        0
    """

    def __init__(
        self,
        initial_env: Optional[Dict[str, str]] = None,
        cwd: Optional[str] = None,
        stdin: Optional[IO] = None,
        stdout: Optional[Union[OutputStream, IO]] = None,
        stderr: Optional[Union[ErrorStream, IO]] = None,
    ):
        """
        Initialize the shell

        Args:
            initial_env: Environment for the session (default: copy of os.environ)
            cwd: Starting directory (default: the process cwd)
            stdin: Text stream commands are read from (default: sys.stdin)
            stdout: Stream for prompts and command output (default: sys.stdout)
            stderr: Stream for diagnostics (default: sys.stderr)
        """
        env = dict(os.environ) if initial_env is None else dict(initial_env)
        self.context = CommandContext(env=env, path_manager=PathManager(cwd))
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = OutputStream.wrap(stdout) if stdout is not None else OutputStream.to_stdout()
        self.stderr = ErrorStream.wrap(stderr) if stderr is not None else ErrorStream.to_stderr()
        self.last_exit_code = EXIT_CODE_SUCCESS

    @property
    def cwd(self) -> Optional[str]:
        return self.context.cwd

    @property
    def env(self) -> Dict[str, str]:
        return self.context.env

    def prompt(self) -> str:
        """Prompt text: the working directory in parentheses, or a bare $"""
        try:
            return f"({self.context.get_cwd()}) $ "
        except WorkingDirectoryError:
            return "$ "

    @staticmethod
    def tokenize(line: str) -> List[str]:
        """Split a line on runs of whitespace; there is no quoting"""
        return line.split()

    def create_process(self, tokens: List[str]) -> Process:
        """Build the process for a non-empty token list"""
        name, args = tokens[0], tokens[1:]
        executor = get_builtin(name)
        if executor is None:
            executor = cmd_external
        return Process(
            command=name,
            args=args,
            stdout=self.stdout,
            stderr=self.stderr,
            executor=executor,
            context=self.context,
        )

    def execute(self, line: str) -> int:
        """
        Execute one command line.

        Returns:
            The command's exit code (0 for a blank line)

        Raises:
            ExitRequested: If the command was exit
        """
        tokens = self.tokenize(line)
        if not tokens:
            return EXIT_CODE_SUCCESS

        process = self.create_process(tokens)
        logger.debug("dispatching %r", process)
        self.last_exit_code = process.execute()
        return self.last_exit_code

    def read_line(self) -> Optional[str]:
        """
        Write the prompt and read one line.

        Returns:
            The line, '' if it was not valid UTF-8 (a diagnostic has been
            written), or None at end of input
        """
        self.stdout.write(self.prompt())
        self.stdout.flush()

        # Decode here rather than in the text layer, which cannot resume
        # after a bad byte
        buffer = getattr(self.stdin, 'buffer', None)
        if buffer is None:
            line = self.stdin.readline()
            return line if line else None

        raw = buffer.readline()
        if not raw:
            return None
        try:
            return raw.decode('utf-8')
        except UnicodeDecodeError as e:
            logger.debug("undecodable input line: %s", e)
            self.stderr.write("tinysh: input is not valid UTF-8\n")
            self.stderr.flush()
            return ''

    def repl(self) -> int:
        """
        Run the interactive loop until exit or end of input.

        Returns:
            Exit status for the interpreter
        """
        while True:
            line = self.read_line()
            if line is None:
                logger.debug("end of input")
                # Leave the cursor on a fresh line after the prompt
                self.stdout.write("\n")
                self.stdout.flush()
                return EXIT_CODE_SUCCESS
            try:
                self.execute(line)
            except ExitRequested as e:
                return e.exit_code
