"""Rich rendering for batches of calculator results."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from strcalc.models import CalcResult


def _fmt_input(text: str) -> str:
    """Show newlines as `\\n` so each input stays on one row."""
    if not text:
        return "[dim](empty)[/dim]"
    return escape(text.replace("\n", "\\n"))


def summarize(results: list[CalcResult]) -> tuple[int, int]:
    """Count (succeeded, failed) results."""
    ok = sum(1 for r in results if r.ok)
    return ok, len(results) - ok


def render_results(results: list[CalcResult], console: Console) -> None:
    """Render a Rich table with one row per evaluated input."""
    if not results:
        console.print("[yellow]No inputs.[/yellow]")
        return

    table = Table(title="strcalc", show_header=True, header_style="bold")
    table.add_column("Input", style="dim", min_width=12)
    table.add_column("Result", justify="right", min_width=8)
    table.add_column("Detail", min_width=20)

    for r in results:
        if r.ok:
            result = f"[green]{r.value}[/green]"
            detail = ""
        else:
            kind = r.error_kind.value if r.error_kind else "error"
            result = f"[red]{kind}[/red]"
            detail = escape(r.message)
        table.add_row(_fmt_input(r.text), result, detail)

    ok, failed = summarize(results)
    console.print()
    console.print(table)
    console.print(f"  {ok} ok, {failed} failed")
    console.print()
