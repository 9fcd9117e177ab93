"""Shared pytest fixtures and test helpers for identiconctl tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from identiconctl.config.discovery import CONFIG_ENV_VAR
from identiconctl.services.telemetry import disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run every test from an empty directory with no config overrides.

    Keeps a stray ``identiconctl.toml`` or ``IDENTICONCTL_*`` variable on
    the host from leaking into results, and resets telemetry and log context afterwards.
    """
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.delenv("IDENTICONCTL_IDENTICON__SIZE", raising=False)
    monkeypatch.delenv("IDENTICONCTL_IDENTICON__BACKGROUND", raising=False)
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    yield
    disable_telemetry()
    structlog.contextvars.clear_contextvars()
