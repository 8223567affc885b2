"""CLI tests using click.testing.CliRunner.

Profile lookups are mocked at ``_resolve_profile``; ``serve`` is checked
against mocked ``create_app`` and ``uvicorn.run``.
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from bizbuz.cli.main import cli
from bizbuz.errors import ProfileFormatError
from bizbuz.profiles import Profile, demo_profile


@pytest.fixture
def runner():
    """Click CliRunner for CLI testing."""
    return CliRunner()


@pytest.fixture(autouse=True)
def prof_env(monkeypatch):
    monkeypatch.setenv("PROF_BASE_URL", "http://prof.test")
    monkeypatch.delenv("PORT", raising=False)


def test_cli_help(runner: CliRunner):
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    for cmd in ("serve", "vcard"):
        assert cmd in result.output


# ---------------------------------------------------------------------------
# bizbuz vcard
# ---------------------------------------------------------------------------


class TestVCardCommand:
    def test_prints_vcard(self, runner: CliRunner):
        with patch("bizbuz.cli.main._resolve_profile", new_callable=AsyncMock, return_value=demo_profile()) as mock_resolve:
            result = runner.invoke(cli, ["vcard", "demo"])
        assert result.exit_code == 0, result.output
        assert result.output.startswith("BEGIN:VCARD\r\n")
        assert "FN:Ada Lovelace\r\n" in result.output
        mock_resolve.assert_awaited_once_with("http://prof.test", 10.0, "demo")

    def test_prof_url_option(self, runner: CliRunner):
        with patch("bizbuz.cli.main._resolve_profile", new_callable=AsyncMock, return_value=demo_profile()) as mock_resolve:
            result = runner.invoke(cli, ["--prof-url", "https://prof.example.com/", "vcard", "abc"])
        assert result.exit_code == 0
        mock_resolve.assert_awaited_once_with("https://prof.example.com", 10.0, "abc")

    def test_writes_output_file(self, runner: CliRunner, tmp_path: Path):
        out = tmp_path / "card.vcf"
        with patch("bizbuz.cli.main._resolve_profile", new_callable=AsyncMock, return_value=Profile(name="Cher")):
            result = runner.invoke(cli, ["vcard", "abc", "--output", str(out)])
        assert result.exit_code == 0
        assert out.read_bytes() == b"BEGIN:VCARD\r\nVERSION:3.0\r\nFN:Cher\r\nN:;Cher;;;\r\nEND:VCARD\r\n"
        assert f"vCard saved: {out}" in result.output

    def test_save_uses_sanitized_filename(self, runner: CliRunner):
        with runner.isolated_filesystem():
            with patch("bizbuz.cli.main._resolve_profile", new_callable=AsyncMock, return_value=Profile(name="Jane O'Brien!")):
                result = runner.invoke(cli, ["vcard", "jane", "--save"])
            assert result.exit_code == 0
            assert Path("Jane_O_Brien_.vcf").exists()

    def test_not_found_exits_1(self, runner: CliRunner):
        with patch("bizbuz.cli.main._resolve_profile", new_callable=AsyncMock, return_value=None):
            result = runner.invoke(cli, ["vcard", "nobody"])
        assert result.exit_code == 1
        assert "Profile not found: nobody" in result.output

    def test_malformed_profile_exits_1(self, runner: CliRunner):
        with patch(
            "bizbuz.cli.main._resolve_profile",
            new_callable=AsyncMock,
            side_effect=ProfileFormatError("Malformed profile for abc"),
        ):
            result = runner.invoke(cli, ["vcard", "abc"])
        assert result.exit_code == 1
        assert "Error: Malformed profile for abc" in result.output


# ---------------------------------------------------------------------------
# bizbuz serve
# ---------------------------------------------------------------------------


class TestServeCommand:
    def test_runs_built_app(self, runner: CliRunner):
        with patch("bizbuz.cli.main.create_app") as mock_create, patch("bizbuz.cli.main.uvicorn.run") as mock_run:
            result = runner.invoke(cli, ["serve", "--host", "127.0.0.1", "--port", "9000"])
        assert result.exit_code == 0, result.output
        settings = mock_create.call_args.args[0]
        assert settings.host == "127.0.0.1"
        assert settings.port == 9000
        assert settings.prof_base_url == "http://prof.test"
        mock_run.assert_called_once_with(
            mock_create.return_value,
            host="127.0.0.1",
            port=9000,
            log_level="info",
        )
        assert "BizBuz running on http://127.0.0.1:9000" in result.output
        assert "Profile service: http://prof.test" in result.output

    def test_prof_url_option_reaches_app(self, runner: CliRunner):
        with patch("bizbuz.cli.main.create_app") as mock_create, patch("bizbuz.cli.main.uvicorn.run"):
            result = runner.invoke(cli, ["--prof-url", "https://prof.example.com/", "serve"])
        assert result.exit_code == 0, result.output
        assert mock_create.call_args.args[0].prof_base_url == "https://prof.example.com"

    def test_reload_exports_bound_settings(self, runner: CliRunner, monkeypatch):
        # Registered with monkeypatch so the values written by serve are undone
        monkeypatch.setenv("PORT", "3013")
        monkeypatch.setenv("BIZBUZ_HOST", "0.0.0.0")
        with patch("bizbuz.cli.main.create_app") as mock_create, patch("bizbuz.cli.main.uvicorn.run") as mock_run:
            result = runner.invoke(
                cli,
                ["--prof-url", "https://prof.example.com", "serve", "--host", "127.0.0.1", "--port", "9000", "--reload"],
            )
        assert result.exit_code == 0, result.output
        mock_create.assert_not_called()
        mock_run.assert_called_once_with(
            "bizbuz.server.app:create_app",
            factory=True,
            host="127.0.0.1",
            port=9000,
            reload=True,
            log_level="info",
        )
        assert os.environ["PORT"] == "9000"
        assert os.environ["BIZBUZ_HOST"] == "127.0.0.1"
        assert os.environ["PROF_BASE_URL"] == "https://prof.example.com"

    def test_defaults_from_environment(self, runner: CliRunner, monkeypatch):
        monkeypatch.setenv("PORT", "4000")
        with patch("bizbuz.cli.main.create_app") as mock_create, patch("bizbuz.cli.main.uvicorn.run") as mock_run:
            result = runner.invoke(cli, ["serve"])
        assert result.exit_code == 0
        assert mock_run.call_args.kwargs["port"] == 4000
        assert mock_create.call_args.args[0].port == 4000
