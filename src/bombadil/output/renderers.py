"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from bombadil.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from bombadil.services.result import ServiceResult


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


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="bombadil.ok")
    op = Text(f"  {result.op}", style="bombadil.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="bombadil.key")
    style = "bombadil.path" if key == "path" or key.endswith(("_path", "_root")) else ""
    console.print(k, Text(str(value), style=style), end="")
    console.print()


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="bombadil.error")
    op = Text(f"  {result.op}", style="bombadil.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Settings renderers ────────────────────────────────────────────────


def _hook_lines(console: Console, label: str, hooks: list[str]) -> None:
    if not hooks:
        return
    console.print(Text(f"  {label}:", style="bombadil.key"))
    for hook in hooks:
        console.print(Text(f"    {hook}", style="bombadil.hook"))


def _render_settings(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render merged settings: dots table, hooks, vars and profile names."""
    _status_line(console, result)
    d = result.data
    for key in ("config_path", "dotfiles_root"):
        if key in d:
            _field(console, key, d[key])
    if result.warnings:
        skipped = Text(f"  skipped imports: {len(result.warnings)}", style="bombadil.warning")
        console.print(skipped)

    settings: dict[str, Any] = d.get("settings", {})
    if settings.get("gpg_user_id"):
        _field(console, "gpg_user_id", settings["gpg_user_id"])

    active: dict[str, Any] = settings.get("settings", {})
    dots: dict[str, Any] = active.get("dots", {})
    if dots:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("Dot", style="bombadil.name", no_wrap=True)
        table.add_column("Source", style="bombadil.path")
        table.add_column("Target", style="bombadil.path")
        for name in sorted(dots):
            dot = dots[name]
            table.add_row(name, str(dot.get("source", "")), str(dot.get("target", "")))
        console.print()
        console.print(table)

    _hook_lines(console, "prehooks", active.get("prehooks", []))
    _hook_lines(console, "posthooks", active.get("posthooks", []))
    if active.get("vars"):
        _field(console, "vars", ", ".join(active["vars"]))

    profiles: dict[str, Any] = settings.get("profiles", {})
    if profiles:
        _field(console, "profiles", ", ".join(sorted(profiles)))
    if verbose:
        for name in sorted(profiles):
            extra = profiles[name].get("extra_profiles", [])
            if extra:
                console.print(f"    {name} -> {', '.join(extra)}")


def _render_imports(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list_imports as a table, flagging missing files."""
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Import", style="bombadil.name")
    table.add_column("Resolved", style="bombadil.path")
    table.add_column("Found")
    for item in items:
        if item["exists"]:
            found = Text("yes", style="bombadil.ok")
        else:
            found = Text("no", style="bombadil.error")
        table.add_row(item["path"], item["resolved"], found)
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} imports")


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "show_settings": _render_settings,
    "list_imports": _render_imports,
}
