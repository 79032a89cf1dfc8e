"""
Pytest configuration and shared fixtures for tinysh tests.

This module provides reusable test fixtures for:
- Captured output streams
- Session contexts bound to temporary directories
- Fake search-path directories holding small executables
- Shell instances with in-memory I/O
"""

import io
import os
import stat
from pathlib import Path

import pytest

from tinysh.context import CommandContext
from tinysh.path_manager import PathManager
from tinysh.process import Process
from tinysh.shell import Shell
from tinysh.streams import OutputStream, ErrorStream


posix_only = pytest.mark.skipif(os.name == 'nt', reason="uses /bin/sh scripts")


# ============================================================================
# Helper Functions
# ============================================================================

def make_executable(directory: Path, name: str, body: str = "exit 0\n") -> Path:
    """
    Create a /bin/sh script with the executable bits set.

    Args:
        directory: Directory to create it in
        name: File name
        body: Script body (without the #! line)
    """
    path = directory / name
    path.write_text("#!/bin/sh\n" + body)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


def get_stdout(process) -> str:
    """Get stdout content as string."""
    return process.get_stdout().decode('utf-8', errors='replace')


def get_stderr(process) -> str:
    """Get stderr content as string."""
    return process.get_stderr().decode('utf-8', errors='replace')


# ============================================================================
# Pytest Fixtures
# ============================================================================

@pytest.fixture
def capture_output():
    """
    Provides in-memory streams for capturing command output.

    Returns:
        tuple: (stdout, stderr) streams
    """
    return OutputStream(io.BytesIO()), ErrorStream(io.BytesIO())


@pytest.fixture
def home_dir(tmp_path):
    """A home directory with one subdirectory, 'projects'."""
    home = tmp_path / "home"
    (home / "projects").mkdir(parents=True)
    return home


@pytest.fixture
def work_dir(tmp_path):
    """Starting working directory with a subdirectory and a plain file."""
    work = tmp_path / "work"
    (work / "sub").mkdir(parents=True)
    (work / "notes.txt").write_text("not a directory")
    return work


@pytest.fixture
def bin_dirs(tmp_path):
    """
    Two search-path directories.

    Returns:
        tuple: (first, second) directories, in search order
    """
    first = tmp_path / "bin1"
    second = tmp_path / "bin2"
    first.mkdir()
    second.mkdir()
    return first, second


@pytest.fixture
def session_env(bin_dirs, home_dir):
    """Environment whose PATH is the fake bin directories."""
    first, second = bin_dirs
    return {
        'PATH': os.pathsep.join([str(first), str(second)]),
        'HOME': str(home_dir),
        'USERPROFILE': str(home_dir),
    }


@pytest.fixture
def session_context(session_env, work_dir):
    """CommandContext rooted at work_dir."""
    return CommandContext(env=session_env, path_manager=PathManager(str(work_dir)))


@pytest.fixture
def make_process(session_context, capture_output):
    """
    Factory for processes sharing the session context and captured streams.

    Example:
        def test_echo(make_process):
            process = make_process('echo', ['hi'], cmd_echo)
            assert process.execute() == 0
    """
    stdout, stderr = capture_output

    def factory(command, args, executor):
        return Process(
            command=command,
            args=list(args),
            stdout=stdout,
            stderr=stderr,
            executor=executor,
            context=session_context,
        )

    return factory


@pytest.fixture
def shell(session_env, work_dir):
    """Shell with in-memory stdout/stderr and an empty stdin."""
    return Shell(
        initial_env=session_env,
        cwd=str(work_dir),
        stdin=io.StringIO(""),
        stdout=io.BytesIO(),
        stderr=io.BytesIO(),
    )


@pytest.fixture
def shell_output(shell):
    """Returns a callable giving (stdout, stderr) written by the shell so far."""
    def read():
        return (
            shell.stdout.get_value().decode('utf-8'),
            shell.stderr.get_value().decode('utf-8'),
        )

    return read
