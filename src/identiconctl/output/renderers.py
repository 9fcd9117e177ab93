"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.text import Text

from identiconctl.domain.color import parse_color
from identiconctl.domain.errors import InvalidColorStringError
from identiconctl.output.console import create_console, get_output, swatch_style

if TYPE_CHECKING:
    from rich.console import Console

    from identiconctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
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
    if "encoded" in result.data:
        return str(result.data["encoded"])
    if "path" in result.data:
        return str(result.data["path"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="idc.ok")
    op = Text(f"  {result.op}", style="idc.op")
    console.print(label, op, sep="", end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="idc.key")
    if key == "path":
        v = Text(str(value), style="idc.path")
    elif key == "name":
        v = Text(str(value), style="idc.name")
    elif key == "format":
        v = Text(str(value), style="idc.format")
    else:
        v = Text(str(value))
    console.print(k, v, sep="", end="")
    console.print()


def _color_field(console: Console, key: str, value: str) -> None:
    """Print a color field followed by a swatch of that color."""
    k = Text(f"  {key}: ", style="idc.key")
    try:
        swatch = Text("  ", style=swatch_style(parse_color(value)))
    except InvalidColorStringError:
        swatch = Text("")
    console.print(k, Text(value), Text(" "), swatch, sep="", end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block, including the telemetry span tree."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {name}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{ak}={av}" for ak, av in annotations.items()) + ")"
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _render_summary(console: Console, data: dict[str, Any]) -> None:
    for key in ("name", "size", "side"):
        if key in data:
            _field(console, key, data[key])
    for key in ("foreground", "background"):
        if key in data:
            _color_field(console, key, str(data[key]))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="idc.error")
    op = Text(f"  {result.op}", style="idc.op")
    dash = Text(" — ")
    console.print(label, op, dash, Text(msg), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_render(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a completed file render: where it went and what it looks like."""
    _status_line(console, result)
    d = result.data
    for key in ("path", "format"):
        if key in d:
            _field(console, key, d[key])
    _render_summary(console, d)
    if verbose:
        _render_meta(console, result)


def _render_encode(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render base64 output with its size, then the text itself."""
    _status_line(console, result)
    d = result.data
    for key in ("format", "byte_count"):
        if key in d:
            _field(console, key, d[key])
    _render_summary(console, d)
    if "encoded" in d:
        console.print()
        console.print(Text(str(d["encoded"])), soft_wrap=True)
    if verbose:
        _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "render": _render_render,
    "encode": _render_encode,
}
