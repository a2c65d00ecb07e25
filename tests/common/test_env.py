"""Tests for environment configuration interface."""

from pathlib import Path

from common.env import Environment, env


class TestEnvironment:
    """Tests for Environment class."""

    def test_base_dir_default(self, monkeypatch):
        """Test base_dir returns the current directory by default."""
        monkeypatch.delenv("PROSE_LINT_BASE_DIR", raising=False)
        assert Environment.base_dir() == Path(".")

    def test_base_dir_from_env(self, monkeypatch):
        """Test base_dir reads from environment."""
        monkeypatch.setenv("PROSE_LINT_BASE_DIR", "/srv/docs")
        assert Environment.base_dir() == Path("/srv/docs")

    def test_max_concurrency_default(self, monkeypatch):
        """Test max_concurrency returns default value."""
        monkeypatch.delenv("PROSE_LINT_MAX_CONCURRENCY", raising=False)
        assert Environment.max_concurrency() == 16

    def test_max_concurrency_from_env(self, monkeypatch):
        """Test max_concurrency reads and converts from environment."""
        monkeypatch.setenv("PROSE_LINT_MAX_CONCURRENCY", "4")
        assert Environment.max_concurrency() == 4

    def test_output_format_default(self, monkeypatch):
        """Test output_format returns default value."""
        monkeypatch.delenv("PROSE_LINT_FORMAT", raising=False)
        assert Environment.output_format() == "console"

    def test_output_format_from_env(self, monkeypatch):
        """Test output_format reads from environment."""
        monkeypatch.setenv("PROSE_LINT_FORMAT", "json")
        assert Environment.output_format() == "json"

    def test_log_level_is_uppercased(self, monkeypatch):
        """Test log_level normalizes case."""
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert Environment.log_level() == "DEBUG"


def test_singleton_instance():
    """Test that env is an Environment instance."""
    assert isinstance(env, Environment)
