"""Tests for the nix-headbump CLI (typer.testing.CliRunner)."""

import pytest
from typer.testing import CliRunner

import cli.main
from cli.main import USAGE_ERROR, app
from conftest import FakeSource, pinned
from core.domain.errors import FetchError
from core.version import version_banner

runner = CliRunner()


@pytest.fixture
def source(monkeypatch):
    """Replace the GitHub client used by the commands."""
    fake = FakeSource("def456")
    monkeypatch.setattr(cli.main, "GitHubBranchSource", lambda **kwargs: fake)
    return fake


def test_version_flag():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.stdout.strip() == version_banner()


def test_single_dash_version_flag():
    result = runner.invoke(app, ["-version"])
    assert result.exit_code == 0
    assert result.stdout.startswith("nix-headbump ")


def test_no_subcommand_is_a_usage_error(project_dir):
    result = runner.invoke(app, [])
    assert result.exit_code == 1
    assert USAGE_ERROR in result.output


def test_unknown_subcommand_exits_one(project_dir):
    result = runner.invoke(app, ["frobnicate"])
    assert result.exit_code == 1
    assert result.stdout.strip() == USAGE_ERROR


def test_unknown_detect_flag_exits_one(project_dir):
    result = runner.invoke(app, ["detect", "--bogus"])
    assert result.exit_code == 1


def test_detect_target_prefers_default_nix(project_dir):
    (project_dir / "default.nix").write_text(pinned("abc123"))
    (project_dir / "shell.nix").write_text(pinned("abc123"))
    result = runner.invoke(app, ["detect", "--target"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "default.nix"


def test_detect_target_with_only_shell_nix(project_dir):
    (project_dir / "shell.nix").write_text(pinned("abc123"))
    result = runner.invoke(app, ["detect", "-target"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "shell.nix"


def test_detect_target_without_files(project_dir):
    result = runner.invoke(app, ["detect", "--target"])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_detect_current(project_dir):
    (project_dir / "default.nix").write_text(pinned("abc123"))
    result = runner.invoke(app, ["detect", "-current"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "abc123"


def test_detect_current_without_pin(project_dir):
    (project_dir / "default.nix").write_text("{ }\n")
    result = runner.invoke(app, ["detect", "--current"])
    assert result.exit_code == 1
    assert "no pinned nixpkgs revision" in result.output


def test_detect_last(project_dir, source):
    result = runner.invoke(app, ["detect", "--last"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "def456"
    assert source.calls == 1


def test_detect_target_takes_precedence(project_dir, source):
    (project_dir / "default.nix").write_text(pinned("abc123"))
    result = runner.invoke(app, ["detect", "--last", "--current", "--target"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "default.nix"
    assert source.calls == 0


def test_detect_without_flags_prints_help(project_dir, source):
    result = runner.invoke(app, ["detect"])
    assert result.exit_code == 0
    assert "--current" in result.stdout
    assert source.calls == 0


def test_bump(project_dir, source):
    (project_dir / "default.nix").write_text(pinned("abc123"))
    result = runner.invoke(app, ["bump"])
    assert result.exit_code == 0
    assert (project_dir / "default.nix").read_text() == pinned("def456")


def test_bump_already_current_does_not_write(project_dir, source):
    path = project_dir / "default.nix"
    path.write_text(pinned("def456"))
    before = path.stat().st_mtime_ns
    result = runner.invoke(app, ["bump"])
    assert result.exit_code == 0
    assert path.stat().st_mtime_ns == before


def test_bump_without_target(project_dir, source):
    result = runner.invoke(app, ["bump"])
    assert result.exit_code == 1
    assert "not found" in result.output
    assert source.calls == 0


def test_bump_network_failure_is_fatal(project_dir, source):
    source.error = FetchError("request failed: connection refused")
    (project_dir / "default.nix").write_text(pinned("abc123"))
    result = runner.invoke(app, ["bump"])
    assert result.exit_code == 1
    assert "Bumping the version failed" in result.output
    assert "connection refused" in result.output
    assert (project_dir / "default.nix").read_text() == pinned("abc123")


def test_invalid_configuration_exits_one(project_dir, monkeypatch):
    monkeypatch.setenv("NIX_HEADBUMP_HTTP_TIMEOUT_SECONDS", "-1")
    result = runner.invoke(app, ["detect", "--target"])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_unknown_top_level_flag_exits_one(project_dir):
    result = runner.invoke(app, ["--bogus", "detect"])
    assert result.exit_code == 1


def test_bump_keeps_non_utf8_bytes(project_dir, source):
    path = project_dir / "default.nix"
    path.write_bytes(b"# caf\xe9\n" + pinned("abc123").encode())
    result = runner.invoke(app, ["bump"])
    assert result.exit_code == 0
    assert path.read_bytes() == b"# caf\xe9\n" + pinned("def456").encode()


def test_detect_current_with_non_utf8_comment(project_dir):
    (project_dir / "default.nix").write_bytes(b"# caf\xe9\n" + pinned("abc123").encode())
    result = runner.invoke(app, ["detect", "--current"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "abc123"
