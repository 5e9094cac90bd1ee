"""Command: parse a wire subject into its fields."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from subjectctl.commands._base import SubjectCommand

if TYPE_CHECKING:
    from subjectctl.commands._context import AppContext


@click.command(
    cls=SubjectCommand,
    examples="""\
  subjectctl parse prod.abc.xyz.local.plc-gateway.1.data.system.sensor
  subjectctl parse prod.abc.xyz.US-CA.south.abc.plc-gateway.1.data
  subjectctl --json parse dev.abc.xyz.global.ingest.7.heartbeat""",
)
@click.argument("subject")
@click.pass_obj
def parse(app: AppContext, subject: str) -> None:
    """Parse and validate a dotted SUBJECT string."""
    app.emit(app.service.parse(subject))
