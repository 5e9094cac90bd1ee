"""Subcommand modules for subjectctl.

Provides register_commands() which uses deferred imports to keep
``subjectctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from subjectctl.commands.geo import geo

    cli.add_command(geo)

    # --- Standalone commands ---
    from subjectctl.commands.build import build
    from subjectctl.commands.convert import from_json
    from subjectctl.commands.parse import parse

    cli.add_command(parse)
    cli.add_command(build)
    cli.add_command(from_json)
