"""Rich Console factory and theme for subjectctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SUBJECT_THEME = Theme(
    {
        "subj.ok": "bold green",
        "subj.error": "bold red",
        "subj.warning": "bold yellow",
        "subj.op": "bold cyan",
        "subj.key": "dim",
        "subj.subject": "bold blue",
        "subj.env.prod": "bold red",
        "subj.env.staging": "yellow",
        "subj.env.dev": "green",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=SUBJECT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_environment(environment: str) -> str:
    """Return the Rich style name for an environment token."""
    if environment in ("prod", "staging", "dev"):
        return f"subj.env.{environment}"
    return ""
