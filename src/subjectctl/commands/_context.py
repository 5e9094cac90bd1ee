"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides the configured SubjectService and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from subjectctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from subjectctl.config.settings import SubjectSettings
    from subjectctl.services.result import ServiceResult
    from subjectctl.services.subject import SubjectService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: SubjectSettings) -> None:
        self.settings = settings
        self._service: SubjectService | None = None

        from subjectctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> SubjectService:
        """The subject service (created lazily with the configured defaults)."""
        if self._service is None:
            from subjectctl.services.subject import SubjectService

            self._service = SubjectService(self.settings.defaults)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            width=self.settings.output.width,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
