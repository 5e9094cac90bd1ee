"""Command: build a subject from individual fields."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from subjectctl.commands._base import SubjectCommand

if TYPE_CHECKING:
    from subjectctl.commands._context import AppContext


@click.command(
    cls=SubjectCommand,
    examples="""\
  subjectctl build --env prod --enterprise abc --op-group xyz \\
      --service plc-gateway --instance 1 --type data --path system.sensor
  subjectctl build --geo US-CA.south.abc --service plc-gateway --instance 1 --type event
  subjectctl -q build --type heartbeat   # remaining fields from subjectctl.toml [defaults]""",
)
@click.option(
    "--env",
    "environment",
    default=None,
    help="Environment: prod, staging, or dev.",
)
@click.option("--enterprise", default=None, help="Owning enterprise.")
@click.option("--op-group", default=None, help="Owning operational group.")
@click.option(
    "--geo",
    default=None,
    help="'local', 'global', or an explicit REGION.OP_REGION.OP_ID locator.",
)
@click.option("--service", "service_name", default=None, help="Service name.")
@click.option("--instance", "instance_id", default=None, help="Service instance id.")
@click.option(
    "--type",
    "payload_type",
    default=None,
    help="Payload type: heartbeat, data, diagnostics, command, event, custom.",
)
@click.option("--path", "payload_path", default="", help="Dotted payload path (may be empty).")
@click.pass_obj
def build(
    app: AppContext,
    environment: str | None,
    enterprise: str | None,
    op_group: str | None,
    geo: str | None,
    service_name: str | None,
    instance_id: str | None,
    payload_type: str | None,
    payload_path: str,
) -> None:
    """Build a validated subject; omitted fields fall back to [defaults]."""
    app.emit(
        app.service.build(
            environment=environment,
            enterprise=enterprise,
            op_group=op_group,
            geo=geo,
            service_name=service_name,
            instance_id=instance_id,
            payload_type=payload_type,
            payload_path=payload_path.split(".") if payload_path else [],
        )
    )
