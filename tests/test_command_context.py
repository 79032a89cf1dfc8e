"""
Tests for CommandContext.

This module tests the session state handed to every command.
"""

import os

import pytest

from tinysh.context import CommandContext
from tinysh.path_manager import PathManager


class TestCommandContextCreation:
    """Test CommandContext creation and initialization"""

    def test_default_creation(self):
        """Test creating context with default values"""
        ctx = CommandContext()
        assert ctx.env == {}
        assert ctx.cwd == os.getcwd()

    def test_creation_with_values(self, work_dir):
        """Test creating context with specific values"""
        env = {'USER': 'alice', 'HOME': '/home/alice'}
        ctx = CommandContext(env=env, path_manager=PathManager(str(work_dir)))
        assert ctx.cwd == str(work_dir)
        assert ctx.get_variable('USER') == 'alice'

    def test_repr(self, work_dir):
        ctx = CommandContext(env={'A': '1'}, path_manager=PathManager(str(work_dir)))
        assert 'env_vars=1' in repr(ctx)


class TestSearchPath:
    """Test search path derivation"""

    def test_search_path_from_env(self):
        ctx = CommandContext(env={'PATH': os.pathsep.join(['/x', '/y'])})
        assert ctx.get_search_path() == ['/x', '/y']

    def test_unset_path_searches_nothing(self):
        ctx = CommandContext(env={})
        assert ctx.get_search_path() == []

    def test_search_path_is_reread(self):
        """Test changes to PATH are visible on the next lookup"""
        ctx = CommandContext(env={'PATH': '/x'})
        ctx.env['PATH'] = '/z'
        assert ctx.get_search_path() == ['/z']


class TestHomeDirectory:
    """Test home directory resolution"""

    @pytest.mark.skipif(os.name == 'nt', reason="HOME is not consulted on Windows")
    def test_home_from_env(self):
        ctx = CommandContext(env={'HOME': '/home/alice'})
        assert ctx.get_home_directory() == '/home/alice'

    def test_missing_home(self):
        ctx = CommandContext(env={})
        assert ctx.get_home_directory() is None

    def test_windows_uses_userprofile(self, monkeypatch):
        monkeypatch.setattr(os, 'name', 'nt')
        ctx = CommandContext(env={'HOME': '/home/alice', 'USERPROFILE': 'C:\\Users\\alice'})
        assert ctx.get_home_directory() == 'C:\\Users\\alice'

    def test_home_is_not_cached(self, session_context, tmp_path):
        """Test every lookup reads the environment again"""
        first = session_context.get_home_directory()
        session_context.env['HOME'] = str(tmp_path)
        session_context.env['USERPROFILE'] = str(tmp_path)
        assert session_context.get_home_directory() == str(tmp_path)
        assert first != str(tmp_path)


class TestWorkingDirectory:
    """Test working directory access through the context"""

    def test_change_directory(self, session_context, work_dir):
        session_context.change_directory('sub')
        assert session_context.cwd == str(work_dir / 'sub')
        assert session_context.get_cwd() == str(work_dir / 'sub')

    def test_resolve_relative_path(self, session_context, work_dir):
        assert session_context.resolve_path('notes.txt') == str(work_dir / 'notes.txt')
