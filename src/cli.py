"""CLI interface for the symbolic derivative calculator.

Usage:
    derivcalc repl --samples
    derivcalc diff "x * sin x" "(x + 2) / (x - 1)"
    derivcalc samples --table
"""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from src.core.errors import ParseError
from src.core.parser import DEFAULT_MAX_DEPTH
from src.core.pipeline import DEFAULT_PREFIX
from src.session.loop import ReadLoop, SessionConfig, SessionSummary

console = Console()


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log parser and session activity")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Symbolic differentiation of expressions in x."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@main.command()
@click.option("--prefix", default=DEFAULT_PREFIX, show_default=True, help="Indent before each derivative line")
@click.option("--max-depth", default=DEFAULT_MAX_DEPTH, show_default=True, help="Maximum nesting depth accepted by the parser")
@click.option("--samples", is_flag=True, help="Evaluate the built-in sample expressions first")
@click.option("--stop-on-error", is_flag=True, help="Abort on the first parse error instead of reporting it")
def repl(prefix: str, max_depth: int, samples: bool, stop_on_error: bool) -> None:
    """Read expressions from standard input, one per line, until an empty line."""
    config = SessionConfig(
        prefix=prefix,
        max_depth=max_depth,
        show_samples=samples,
        stop_on_error=stop_on_error,
    )
    loop = ReadLoop(config, console)
    try:
        loop.run(click.get_text_stream("stdin"))
    except ParseError as e:
        console.print(f"[red]Stopped: {escape(str(e))}[/red]")
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("expressions", nargs=-1, required=True)
@click.option("--prefix", default=DEFAULT_PREFIX, show_default=True, help="Indent before each derivative line")
@click.option("--max-depth", default=DEFAULT_MAX_DEPTH, show_default=True, help="Maximum nesting depth accepted by the parser")
def diff(expressions: tuple[str, ...], prefix: str, max_depth: int) -> None:
    """Differentiate the given expressions.

    Expressions may start with a minus sign, e.g. `derivcalc diff "-x"`.
    Exits with status 1 if any of them fails to parse.
    """
    loop = ReadLoop(SessionConfig(prefix=prefix, max_depth=max_depth), console)
    summary = SessionSummary()
    for text in expressions:
        loop.evaluate(text, summary)

    if summary.failed:
        console.print(f"[red]{summary.failed} of {summary.evaluated} expression(s) failed to parse[/red]")
        sys.exit(1)


@main.command()
@click.option("--table", is_flag=True, help="Show the results as a table")
@click.option("--prefix", default=DEFAULT_PREFIX, show_default=True, help="Indent before each derivative line")
def samples(table: bool, prefix: str) -> None:
    """Differentiate the built-in sample expressions."""
    from src.core.pipeline import SAMPLE_EXPRESSIONS, differentiate
    from src.utils.display import display_results_table

    if table:
        results = [differentiate(text) for text in SAMPLE_EXPRESSIONS]
        display_results_table(results, title="Sample Expressions")
        return

    loop = ReadLoop(SessionConfig(prefix=prefix, show_samples=True), console)
    loop.run([])


if __name__ == "__main__":
    main()
