"""Rich console display utilities for derivative results."""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from src.core.errors import ParseError
from src.core.pipeline import DEFAULT_PREFIX, DerivativeResult

console = Console()


def display_result(
    result: DerivativeResult, prefix: str = DEFAULT_PREFIX, out: Console | None = None
) -> None:
    """Print the expression, its derivative and the simplified derivative."""
    out = out or console
    for line in result.lines(prefix):
        out.print(line, markup=False, highlight=False, soft_wrap=True)


def display_error(error: ParseError, out: Console | None = None) -> None:
    """Print a parse failure with a caret under the offending position."""
    out = out or console
    out.print(f"[red]{escape(str(error))}[/red]")
    if error.text:
        out.print(f"  {error.text}", markup=False, highlight=False, soft_wrap=True, style="dim")
        out.print("  " + " " * error.position + "^", markup=False, highlight=False, style="red")


def display_results_table(results: Sequence[DerivativeResult], title: str = "Derivatives") -> None:
    """Display a batch of results as a table."""
    table = Table(title=title)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Input", style="cyan")
    table.add_column("Expression")
    table.add_column("Derivative", style="yellow")
    table.add_column("Simplified", style="green")

    for i, r in enumerate(results, 1):
        row = r.to_dict()
        table.add_row(
            str(i),
            escape(row["source"]),
            row["expression"],
            row["derivative"],
            row["simplified"],
        )

    console.print(table)
