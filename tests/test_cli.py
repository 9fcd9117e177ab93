"""Tests for the root identiconctl CLI."""

import base64
import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from identiconctl import __version__
from identiconctl.cli import cli
from identiconctl.domain import compositor


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "identiconctl" in result.output
    assert "NAME" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert "Usage" in result.output


def test_name_without_command(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["alice"])
    assert result.exit_code == 2
    assert "Missing command" in result.output


# --- Global flags ---


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_global_flag_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


def test_config_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/tmp/test.toml", "--version"])
    assert result.exit_code == 0


@pytest.mark.parametrize("command", ["render", "encode"])
def test_commands_registered(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert command in result.output


# --- Identicon options ---


@pytest.mark.parametrize("background", ["255,0", "256,0,0", "a,b,c", "1,2,3,4"])
def test_bad_background_is_usage_error(cli_runner: CliRunner, background: str) -> None:
    result = cli_runner.invoke(cli, ["-b", background, "alice", "encode", "PNG"])
    assert result.exit_code == 2
    assert "invalid color" in result.output


@pytest.mark.parametrize("size", ["0", "-3", "x", "306783379", "613566756"])
def test_bad_size_is_usage_error(cli_runner: CliRunner, size: str) -> None:
    result = cli_runner.invoke(cli, ["--size", size, "alice", "encode", "PNG"])
    assert result.exit_code == 2


def test_size_and_background_reach_output(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(
        cli, ["--json", "-s", "3", "-b", "0,0,0", "alice", "encode", "PNG"]
    )
    assert result.exit_code == 0
    data = json.loads(result.output)["data"]
    assert data["size"] == 3
    assert data["side"] == 21
    assert data["background"] == "0,0,0"


def test_config_file_supplies_defaults(cli_runner: CliRunner, tmp_path: Path) -> None:
    config = tmp_path / "look.toml"
    config.write_text('[identicon]\nsize = 2\nbackground = "9,9,9"\n')
    result = cli_runner.invoke(cli, ["--json", "-c", str(config), "alice", "encode", "GIF"])
    assert result.exit_code == 0
    data = json.loads(result.output)["data"]
    assert data["size"] == 2
    assert data["background"] == "9,9,9"


def test_cli_flag_beats_config_file(cli_runner: CliRunner, tmp_path: Path) -> None:
    config = tmp_path / "look.toml"
    config.write_text("[identicon]\nsize = 2\n")
    result = cli_runner.invoke(
        cli, ["--json", "-c", str(config), "-s", "5", "alice", "encode", "GIF"]
    )
    assert json.loads(result.output)["data"]["size"] == 5


def test_invalid_config_value(cli_runner: CliRunner, tmp_path: Path) -> None:
    config = tmp_path / "look.toml"
    config.write_text("[identicon]\nsize = 0\n")
    result = cli_runner.invoke(cli, ["-c", str(config), "alice", "encode", "PNG"])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_end_to_end_render_matches_encode(cli_runner: CliRunner, tmp_path: Path) -> None:
    target = tmp_path / "alice.png"
    rendered = cli_runner.invoke(cli, ["-s", "4", "alice", "render", str(target)])
    encoded = cli_runner.invoke(cli, ["-s", "4", "alice", "encode", "PNG"])
    assert rendered.exit_code == 0
    assert encoded.exit_code == 0
    assert base64.b64decode(encoded.output.strip()) == target.read_bytes()


def test_unallocatable_size_reports_error(
    cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
) -> None:
    def _new(*args: object, **kwargs: object) -> None:
        raise MemoryError

    monkeypatch.setattr(compositor.Image, "new", _new)
    result = cli_runner.invoke(cli, ["--json", "-s", "306783378", "alice", "encode", "PNG"])
    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    data = json.loads(result.stderr)
    assert data["error"]["code"] == "IMAGE_TOO_LARGE"


def test_log_records_carry_identicon_name(cli_runner: CliRunner, tmp_path: Path) -> None:
    target = tmp_path / "alice.png"
    result = cli_runner.invoke(
        cli, ["-v", "--log-json", "-s", "1", "alice", "render", str(target)]
    )
    assert result.exit_code == 0
    records = [json.loads(line) for line in result.stderr.splitlines() if line.startswith("{")]
    assert records
    assert all(record["identicon"] == "alice" for record in records)
