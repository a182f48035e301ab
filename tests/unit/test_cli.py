"""Tests for the command-line interface."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from classroom_assistant import __version__
from classroom_assistant.cli import _mask, app

runner = CliRunner()


@pytest.fixture
def cli_env(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the CLI at a throwaway SQLite database and log directory."""
    monkeypatch.chdir(temp_dir)
    monkeypatch.setenv("LOG_DIRECTORY", str(temp_dir / "logs"))
    monkeypatch.setenv("PREFERENCES_BACKEND", "sqlite")
    monkeypatch.setenv("PREFERENCES_DATABASE_PATH", str(temp_dir / "data" / "preferences.db"))
    return temp_dir


class TestMask:
    """Test API key masking."""

    def test_long_key(self):
        assert _mask("sk-1234567890abcd") == "sk-1…abcd"

    def test_short_key(self):
        assert _mask("abc") == "****"

    def test_missing_key(self):
        assert "not set" in _mask(None)


class TestClassifyCommand:
    """Test the classify command."""

    def test_classify_stdin(self, cli_env: Path):
        result = runner.invoke(app, ["classify"], input="TOPIC: Optics\n\nWhat is light?\nHere's an analysis of it\n")

        assert result.exit_code == 0
        assert "Extracted content (2 items)" in result.output
        assert "Optics" in result.output
        assert "What is light?" in result.output
        assert "analysis" not in result.output

    def test_classify_file_with_filter(self, cli_env: Path):
        notes = cli_env / "notes.txt"
        notes.write_text("- TOPIC: Lenses\n- QUESTION: Why is the sky blue?\n", encoding="utf-8")

        result = runner.invoke(app, ["classify", str(notes), "--only", "question"])

        assert result.exit_code == 0
        assert "Extracted content (1 items)" in result.output
        assert "Why is the sky blue?" in result.output
        assert "Lenses" not in result.output

    def test_classify_missing_file(self, cli_env: Path):
        result = runner.invoke(app, ["classify", str(cli_env / "missing.txt")])

        assert result.exit_code == 1
        assert "File not found" in result.output


class TestPreferencesCommands:
    """Test the preferences sub-commands against SQLite storage."""

    def test_set_key_and_show(self, cli_env: Path):
        result = runner.invoke(app, ["preferences", "set-key", "gemini", "--key", "gemini-key-123456"])
        assert result.exit_code == 0
        assert "gemini API key saved" in result.output

        result = runner.invoke(app, ["preferences", "show"])

        assert result.exit_code == 0
        assert "Embedding provider: google" in result.output
        assert "gemi…3456" in result.output
        assert "gemini-key-123456" not in result.output
        assert (cli_env / "data" / "preferences.db").exists()

    def test_set_provider_persists(self, cli_env: Path):
        result = runner.invoke(app, ["preferences", "set-provider", "meta"])
        assert result.exit_code == 0

        result = runner.invoke(app, ["preferences", "show"])

        assert "Embedding provider: meta" in result.output

    def test_set_provider_rejects_unknown_kind(self, cli_env: Path):
        result = runner.invoke(app, ["preferences", "set-provider", "cohere"])

        assert result.exit_code != 0

    def test_delete_key(self, cli_env: Path):
        runner.invoke(app, ["preferences", "set-key", "openai", "--key", "sk-test-123456"])

        result = runner.invoke(app, ["preferences", "delete-key", "openai"])
        assert "openai API key deleted" in result.output

        result = runner.invoke(app, ["preferences", "delete-key", "openai"])
        assert "No openai API key stored" in result.output


class TestEmbedCommand:
    """Test the embed command."""

    def test_embed_without_key_exits(self, cli_env: Path):
        result = runner.invoke(app, ["embed", "photons"])

        assert result.exit_code == 1
        assert "Embeddings unavailable" in result.output

    def test_embed_with_provider_override_without_key_exits(self, cli_env: Path):
        result = runner.invoke(app, ["embed", "photons", "--provider", "openai"])

        assert result.exit_code == 1


def test_version(cli_env: Path):
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert f"Classroom Assistant version {__version__}" in result.output
