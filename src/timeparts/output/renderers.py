"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from timeparts.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from timeparts.services.result import ServiceResult

# Primary value printed in --quiet mode, per op.
_QUIET_KEYS: dict[str, str] = {
    "now": "formatted",
    "parse": "formatted",
    "format": "formatted",
    "describe_year": "days_in_year",
    "describe_month": "days",
    "describe_weekday": "name",
    "clamp_day": "clamped",
}


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item.get("pattern", "")) for item in items)

    key = _QUIET_KEYS.get(result.op)
    if key is not None and key in result.data:
        return str(result.data[key])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="tp.ok")
    op = Text(f"  {result.op}", style="tp.op")
    console.print(label, op, sep="", end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="tp.key")
    if key == "formatted":
        v = Text(str(value), style="tp.value")
    elif key == "pattern":
        v = Text(str(value), style="tp.pattern")
    elif isinstance(value, (dict, list)):
        v = Text(json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(k, v, sep="", end="")
    console.print()


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="tp.error")
    op = Text(f"  {result.op}", style="tp.op")
    console.print(label, op, Text(f" — {msg}"), sep="", end="")
    console.print()
    if verbose and err is not None:
        console.print(Text(f"  code: {err.code}", style="tp.key"))
        for key, value in err.detail.items():
            console.print(Text(f"  {key}: {value}", style="tp.key"))


# ── Op renderers ──────────────────────────────────────────────────────


def _render_moment(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Formatted value first; ISO and UTC forms follow."""
    d = result.data
    _status_line(console, result)
    _field(console, "formatted", d["formatted"])
    _field(console, "weekday", d["weekday"])
    _field(console, "iso8601", d["iso8601"])
    _field(console, "utc", d["utc"])
    if verbose:
        _field(console, "pattern", d["pattern"])
        _field(console, "epoch_milliseconds", d["epoch_milliseconds"])


def _render_formats(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Preset table: name, pattern, sample rendering."""
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Name", style="tp.name", no_wrap=True)
    table.add_column("Pattern", style="tp.pattern")
    table.add_column("Sample")
    for item in result.data.get("items", []):
        table.add_row(
            Text(str(item["name"])),
            Text(str(item["pattern"])),
            Text(str(item["sample"])),
        )
    console.print(table)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if value is None:
            continue
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "now": _render_moment,
    "parse": _render_moment,
    "format": _render_moment,
    "list_formats": _render_formats,
}
