"""Geo command group: ISO 3166-2 region-code lookups."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from subjectctl.commands._base import SubjectGroup

if TYPE_CHECKING:
    from subjectctl.commands._context import AppContext


@click.group(
    cls=SubjectGroup,
    examples="""\
  subjectctl geo check US-CA
  subjectctl --json geo check DE-BY""",
)
def geo() -> None:
    """Inspect ISO 3166-2 region codes used by explicit locators."""


@geo.command(
    examples="""\
  subjectctl geo check US-CA
  subjectctl -q geo check US-AA   # exits 1""",
)
@click.argument("code")
@click.pass_obj
def check(app: AppContext, code: str) -> None:
    """Check whether CODE is a recognized region code."""
    app.emit(app.service.check_geo(code))
