"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from subjectctl.output.console import create_console, get_output, style_for_environment

if TYPE_CHECKING:
    from rich.console import Console

    from subjectctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, width: int | None = None) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Subject operations print the bare wire string so output can be piped.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    subject = result.data.get("subject")
    if subject:
        return str(subject)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="subj.ok")
    op = Text(f"  {result.op}", style="subj.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="subj.key")
    style = "subj.subject" if key == "subject" else ""
    console.print(k, Text(str(value), style=style), sep="", end="")
    console.print()


def _describe_geo(geo: dict[str, Any]) -> str:
    if geo.get("kind") == "locator":
        return f"{geo['iso_region_code']} / {geo['op_region']} / {geo['op_identifier']}"
    return str(geo.get("kind", ""))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="subj.error")
    op = Text(f"  {result.op}", style="subj.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if err:
        console.print(Text(f"  code: {err.code}", style="dim"))
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Subject renderer ──────────────────────────────────────────────────


def _render_subject(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render parse/build/format results as the wire string plus a field table."""
    _status_line(console, result)
    data = result.data
    _field(console, "subject", data.get("subject", ""))

    environment = str(data.get("environment", ""))
    ownership = data.get("ownership_group", {})
    service = data.get("service_identifier", {})
    payload_path = data.get("payload_identifier", [])

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Field", style="subj.key", no_wrap=True)
    table.add_column("Value")
    table.add_row("environment", Text(environment, style=style_for_environment(environment)))
    table.add_row("ownership_group", f"{ownership.get('enterprise')} / {ownership.get('op_group')}")
    table.add_row("geo_locator", _describe_geo(data.get("geo_locator", {})))
    table.add_row(
        "service_identifier", f"{service.get('service_name')} / {service.get('instance_id')}"
    )
    table.add_row("payload_type", str(data.get("payload_type", "")))
    table.add_row("payload_identifier", " / ".join(payload_path) if payload_path else "(empty)")
    console.print()
    console.print(table)

    if verbose:
        token_count = len(str(data.get("subject", "")).split("."))
        console.print(Text(f"  tokens: {token_count}", style="dim"))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "parse_subject": _render_subject,
    "build_subject": _render_subject,
    "format_subject": _render_subject,
    "check_geo": _render_generic,
}
