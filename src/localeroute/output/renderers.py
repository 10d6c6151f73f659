"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers are
dispatched by ``result.op`` in :func:`render_result`; unknown ops fall
through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from localeroute.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from localeroute.services.result import ServiceResult

    Renderer = Callable[..., None]

_NONE = "(none)"


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
    """Render just the answer: one pathname or locale per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if result.op == "match":
        locale = data.get("detected_locale")
        return f"{data['pathname']}\t{locale}" if locale else data["pathname"]
    if result.op == "normalize":
        return "\n".join(item["pathname"] for item in data.get("items", []))
    if result.op == "detect_domain":
        return str(data.get("domain", ""))
    if result.op == "list_locales":
        return "\n".join(item["locale"] for item in data.get("items", []))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="lr.ok"), Text(f"  {result.op}", style="lr.op"))


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    """Print a single indented key-value field."""
    shown = _NONE if value is None else str(value)
    console.print(Text(f"  {key}: ", style="lr.key"), Text(shown, style=style), sep="")


def _plain(console: Console, text: str) -> None:
    """Print user-derived text literally; brackets are not Rich markup."""
    console.print(Text(text))


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        _plain(console, f"    {k}: {v}")


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="lr.error")
    op = Text(f"  {result.op}", style="lr.op")
    console.print(label, op, Text(" — "), Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            _plain(console, f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_match(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "pathname", data["pathname"], "lr.path")
    _field(console, "detected_locale", data.get("detected_locale"), "lr.locale")
    if verbose:
        _field(console, "input", data.get("input"), "lr.unchanged")
        _field(console, "stripped", data.get("stripped"))
        _render_meta(console, result)


def _render_normalize(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    _status_line(console, result)

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Input", style="lr.unchanged")
    table.add_column("Pathname", style="lr.path")
    for item in items:
        table.add_row(Text(item["input"]), Text(item["pathname"]))
    console.print(table)

    if verbose:
        _render_meta(console, result)


def _render_domain(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "domain", data.get("domain"), "lr.domain")
    _field(console, "default_locale", data.get("default_locale"), "lr.locale")
    if "locales" in data:
        _field(console, "locales", ", ".join(data["locales"]), "lr.locale")
    if "http" in data:
        _field(console, "http", data["http"])
    if verbose:
        _render_meta(console, result)


def _render_locales(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "default_locale", data.get("default_locale") or None, "lr.locale")

    items = data.get("items", [])
    if items:
        console.print()
        table = Table(title="Locales", show_header=True, header_style="bold")
        table.add_column("Locale", style="lr.locale")
        table.add_column("Default", justify="center")
        for item in items:
            table.add_row(Text(item["locale"]), "*" if item.get("default") else "")
        console.print(table)

    domains = data.get("domains", [])
    if domains:
        console.print()
        table = Table(title="Domains", show_header=True, header_style="bold")
        table.add_column("Domain", style="lr.domain")
        table.add_column("Default locale", style="lr.locale")
        table.add_column("Locales")
        table.add_column("HTTP", justify="center")
        for domain in domains:
            table.add_row(
                Text(domain["domain"]),
                Text(domain["default_locale"]),
                Text(", ".join(domain.get("locales", []))),
                "yes" if domain.get("http") else "",
            )
        console.print(table)

    if verbose:
        _render_meta(console, result)


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

_OP_RENDERERS: dict[str, Renderer] = {
    "match": _render_match,
    "normalize": _render_normalize,
    "detect_domain": _render_domain,
    "list_locales": _render_locales,
}
