"""CLI for strcalc.

Usage:
    python -m strcalc add "1,2,3"               # Prints 6
    python -m strcalc add "//[***]\\n1***2"      # Escaped newline in the header
    python -m strcalc add --raw "$(printf '1\\n2')"
    python -m strcalc batch -- "1,2" "-1" "2,1001"  # Table; "--" lets "-1" through
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from strcalc.calculator import evaluate
from strcalc.report import render_results, summarize

app = typer.Typer(
    name="strcalc",
    help="Sum delimited integers from a string",
    no_args_is_help=True,
)
console = Console(stderr=True)


def _unescape(text: str, raw: bool) -> str:
    """Turn a literal backslash-n into a newline unless --raw is given."""
    if raw:
        return text
    return text.replace("\\n", "\n")


@app.command("add")
def cmd_add(
    text: str = typer.Argument(help="Numbers to sum, e.g. '1,2' or '//;\\n1;2'"),
    raw: bool = typer.Option(False, "--raw", help="Don't translate '\\n' escapes into newlines"),
) -> None:
    """Sum one input string."""
    result = evaluate(_unescape(text, raw))
    if not result.ok:
        console.print(f"[red]Error:[/red] {escape(result.message)}")
        raise typer.Exit(1)
    typer.echo(result.value)


@app.command("batch")
def cmd_batch(
    texts: list[str] = typer.Argument(help="Input strings, evaluated independently"),
    raw: bool = typer.Option(False, "--raw", help="Don't translate '\\n' escapes into newlines"),
) -> None:
    """Sum several input strings and show a result table."""
    results = [evaluate(_unescape(t, raw)) for t in texts]
    render_results(results, console)
    _, failed = summarize(results)
    if failed:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
