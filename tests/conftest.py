"""Shared pytest fixtures and test helpers for subjectctl tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from subjectctl.domain.codec import parse_subject
from subjectctl.domain.subject import Subject

# Reference wire strings used across test modules.
LOCAL_SUBJECT = "prod.abc.xyz.local.plc-gateway.1.data.system.sub-system.sensor.value"
GLOBAL_SUBJECT = "prod.abc.xyz.global.plc-gateway.1.data.system.sub-system.sensor.value"
LOCATOR_SUBJECT = "prod.abc.xyz.US-CA.south.abc.plc-gateway.1.data"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def local_subject() -> Subject:
    return parse_subject(LOCAL_SUBJECT)


@pytest.fixture
def locator_subject() -> Subject:
    return parse_subject(LOCATOR_SUBJECT)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty temp directory with no config discovery overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on CLI test
    classes so a stray ``subjectctl.toml`` never leaks into a test.
    """
    monkeypatch.delenv("SUBJECTCTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
