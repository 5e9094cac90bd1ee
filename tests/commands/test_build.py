"""Tests for the build command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from subjectctl.cli import cli
from tests.conftest import LOCATOR_SUBJECT

FULL_ARGS = [
    "--env",
    "prod",
    "--enterprise",
    "abc",
    "--op-group",
    "xyz",
    "--service",
    "plc-gateway",
    "--instance",
    "1",
    "--type",
    "data",
]


class TestBuildCommand:
    @pytest.mark.usefixtures("_isolated_cwd")
    def test_local_with_path(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "build", *FULL_ARGS, "--path", "system.sub-system.sensor.value"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == (
            "prod.abc.xyz.local.plc-gateway.1.data.system.sub-system.sensor.value"
        )

    @pytest.mark.usefixtures("_isolated_cwd")
    def test_explicit_locator(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "build", *FULL_ARGS, "--geo", "US-CA.south.abc"])
        assert result.exit_code == 0
        assert result.output.strip() == LOCATOR_SUBJECT

    @pytest.mark.usefixtures("_isolated_cwd")
    def test_missing_field_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "build", "--type", "data"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["error"]["code"] == "MISSING_FIELD"
        assert data["error"]["detail"]["field"] == "ownership_group"

    @pytest.mark.usefixtures("_isolated_cwd")
    def test_empty_env_exits_1(self, cli_runner: CliRunner) -> None:
        args = [a if a != "prod" else "" for a in FULL_ARGS]
        result = cli_runner.invoke(cli, ["--json", "build", *args])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["error"]["code"] == "INVALID_ENUM_TOKEN"
        assert data["error"]["detail"]["field"] == "environment"

    @pytest.mark.usefixtures("_isolated_cwd")
    def test_unknown_region_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["build", *FULL_ARGS, "--geo", "US-AA.south.abc"])
        assert result.exit_code == 1
        assert "INVALID_GEO_CODE" in result.output

    def test_defaults_from_toml(self, cli_runner: CliRunner, _isolated_cwd: Path) -> None:
        (_isolated_cwd / "subjectctl.toml").write_text(
            "[defaults]\n"
            'environment = "staging"\n'
            'enterprise = "acme"\n'
            'op_group = "ops"\n'
            'geo = "global"\n'
            'service_name = "ingest"\n'
            'instance_id = "7"\n'
        )
        result = cli_runner.invoke(cli, ["-q", "build", "--type", "heartbeat"])
        assert result.exit_code == 0
        assert result.output.strip() == "staging.acme.ops.global.ingest.7.heartbeat"

    def test_explicit_config_flag(self, cli_runner: CliRunner, _isolated_cwd: Path) -> None:
        config = _isolated_cwd / "other.toml"
        config.write_text('[defaults]\nenterprise = "cfg"\nop_group = "grp"\n')
        result = cli_runner.invoke(
            cli,
            [
                "-c",
                str(config),
                "-q",
                "build",
                "--service",
                "s",
                "--instance",
                "0",
                "--type",
                "event",
            ],
        )
        assert result.exit_code == 0
        assert result.output.strip() == "dev.cfg.grp.local.s.0.event"
