"""
termquery CLI.

Commands:
- match: test a query against one or more subjects
- parse: show how a query is grouped
- tokens: show the token stream of a query

Exit codes follow grep: 0 when every subject matches, 1 when any subject
does not, 2 when the query cannot be compiled.
"""

from __future__ import annotations

import json
import logging
import platform

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from termquery._version import get_version
from termquery.core.environment import get_log_level, parse_log_level
from termquery.core.errors import QueryError
from termquery.core.interpreter import Interpreter
from termquery.core.ir.nodes import MatchContext
from termquery.core.query_lang.lexer import tokenize
from termquery.core.query_lang.parser import parse_query

EXIT_NO_MATCH = 1
EXIT_QUERY_ERROR = 2

console = Console()

app = typer.Typer(
    help="termquery - boolean fuzzy-match queries over text",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"termquery {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version information",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="debug, info, warning or error (default: $TERMQUERY_LOG_LEVEL or warning)",
    ),
) -> None:
    """termquery CLI main callback for global options."""
    level = parse_log_level(log_level) if log_level else get_log_level()
    logging.basicConfig(
        level=level.to_logging(),
        format="%(levelname)s %(name)s: %(message)s",
    )


def _report_query_error(e: QueryError) -> None:
    console.print(f"[red]Query error:[/red] {escape(e.message)} (position {e.position})")
    if e.context:
        console.print(e.context.format(), markup=False, highlight=False)


def _print_result(subject: str, result: MatchContext) -> None:
    status = "[green]MATCH[/green]" if result.success else "[red]NO MATCH[/red]"
    console.print(f"{status} {escape(subject)}", highlight=False)
    if not result.term:
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Offset", justify="right")
    table.add_column("Length", justify="right")
    table.add_column("Gap", justify="right")
    table.add_column("Text")
    for offset in sorted(result.term):
        found = result.term[offset]
        table.add_row(
            str(offset),
            str(found.length),
            str(found.gap),
            escape(subject[offset : offset + found.length]),
        )
    console.print(table)


@app.command(name="match")
def match_command(
    query: str = typer.Argument(..., help="Query, e.g. 'abc & !xxx | def'"),
    subjects: list[str] = typer.Argument(..., help="Strings to test"),  # noqa: B008
    as_json: bool = typer.Option(False, "--json", help="Output match results as JSON"),
) -> None:
    """
    Test QUERY against each SUBJECT.

    The query is compiled once and reused for every subject.

    Examples:
        termquery match 'abc & !xxx | def' 'mystring abc def'
        termquery match 'red blue' 'a red car' 'a green car' --json
    """
    interpreter = Interpreter(query)
    try:
        interpreter.compile()
    except QueryError as e:
        _report_query_error(e)
        raise typer.Exit(code=EXIT_QUERY_ERROR)

    results = [(subject, interpreter.execute(subject)) for subject in subjects]

    if as_json:
        payload = [{"subject": subject, **result.to_dict()} for subject, result in results]
        typer.echo(json.dumps(payload, indent=2))
    else:
        for subject, result in results:
            _print_result(subject, result)

    if not all(result.success for _, result in results):
        raise typer.Exit(code=EXIT_NO_MATCH)


@app.command(name="parse")
def parse_command(
    query: str = typer.Argument(..., help="Query to parse"),
    as_json: bool = typer.Option(False, "--json", help="Output the AST as JSON"),
) -> None:
    """
    Show how QUERY is grouped.

    Prints the query fully parenthesized, e.g. 'a & b | c' becomes
    '((a & b) | c)'.
    """
    try:
        tree = parse_query(query)
    except QueryError as e:
        _report_query_error(e)
        raise typer.Exit(code=EXIT_QUERY_ERROR)

    if as_json:
        typer.echo(tree.model_dump_json(indent=2))
    else:
        typer.echo(str(tree))


@app.command(name="tokens")
def tokens_command(
    query: str = typer.Argument(..., help="Query to tokenize"),
) -> None:
    """Print the tokens of QUERY, one per line."""
    try:
        tokens = tokenize(query)
    except QueryError as e:
        _report_query_error(e)
        raise typer.Exit(code=EXIT_QUERY_ERROR)

    for tok in tokens:
        typer.echo(f"{tok.pos:>4}  {tok.kind:<6}  {tok.value}")


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
