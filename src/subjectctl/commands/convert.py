"""Command: convert the structured JSON form to a wire subject."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from subjectctl.commands._base import SubjectCommand

if TYPE_CHECKING:
    from subjectctl.commands._context import AppContext


@click.command(
    "from-json",
    cls=SubjectCommand,
    examples="""\
  subjectctl from-json subject.json
  subjectctl --json parse prod.abc.xyz.local.gw.1.data | jq .data | subjectctl from-json -""",
)
@click.argument("source", type=click.File("r"), default="-")
@click.pass_obj
def from_json(app: AppContext, source: TextIO) -> None:
    """Read a structured subject from SOURCE (JSON, default stdin) and format it."""
    app.emit(app.service.from_structured(source.read()))
