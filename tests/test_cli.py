"""Tests for CLI module."""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from heritage_archive.api.auth import decode_token
from heritage_archive.cli import app
from heritage_archive.config import ArchiveSettings

runner = CliRunner()


@pytest.fixture(autouse=True)
def local_settings():
    """Run every command against memory-only settings."""
    settings = ArchiveSettings(admin_email="admin@example.com", jwt_secret="cli-secret")
    with patch("heritage_archive.cli.load_settings", return_value=settings):
        yield settings


class TestArtifactsCommand:
    """Tests for the artifacts command."""

    def test_lists_seed(self):
        result = runner.invoke(app, ["artifacts"])
        assert result.exit_code == 0
        assert "Artifacts (1)" in result.stdout
        assert "memory" in result.stdout

    def test_json_output(self):
        result = runner.invoke(app, ["artifacts", "--json"])
        assert result.exit_code == 0
        assert "viewerReference" in result.stdout
        assert "eec7679f" in result.stdout


class TestShowCommand:
    """Tests for the show command."""

    def test_show_seed(self):
        result = runner.invoke(app, ["show", "1"])
        assert result.exit_code == 0
        assert "HAMMOCK" in result.stdout

    def test_show_missing(self):
        result = runner.invoke(app, ["show", "missing"])
        assert result.exit_code == 1
        assert "not found" in result.stdout


class TestEmbedCommand:
    """Tests for the embed command."""

    def test_valid_iframe(self):
        result = runner.invoke(app, ["embed", '<iframe src="https://superspl.at/s?id=x"></iframe>'])
        assert result.exit_code == 0
        assert "https://superspl.at/s?id=x" in result.stdout
        assert "Valid" in result.stdout

    def test_invalid_reference(self):
        result = runner.invoke(app, ["embed", "https://example.com"])
        assert result.exit_code == 1
        assert "Not a valid" in result.stdout


class TestTokenCommand:
    """Tests for the token command."""

    def test_issues_admin_token(self):
        result = runner.invoke(app, ["token"])
        assert result.exit_code == 0

        payload = decode_token(result.stdout.strip(), secret="cli-secret")
        assert payload.sub == "admin@example.com"
        assert payload.is_admin

    def test_custom_subject(self):
        result = runner.invoke(app, ["token", "--subject", "ops@example.com"])
        payload = decode_token(result.stdout.strip(), secret="cli-secret")
        assert payload.sub == "ops@example.com"

    def test_requires_subject(self, local_settings):
        local_settings.admin_email = None
        result = runner.invoke(app, ["token"])
        assert result.exit_code == 1

    def test_requires_signing_secret(self, local_settings):
        local_settings.jwt_secret = None
        result = runner.invoke(app, ["token"])

        assert result.exit_code == 1
        assert "HA_JWT_SECRET" in result.stdout


class TestServeCommand:
    """Tests for the serve command."""

    def test_runs_uvicorn(self):
        with patch("uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve", "--port", "9000"])

        assert result.exit_code == 0
        mock_run.assert_called_once_with(
            "heritage_archive.api.app:app", host="127.0.0.1", port=9000, reload=False
        )


class TestVersionCommand:
    """Tests for the version command."""

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "Heritage Archive v" in result.stdout
