"""CLI entry point for phpexpr.

Invoked as::

    phpexpr [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m phpexpr.cli.main

Commands
--------
parse       Dump the parsed AST to JSON or YAML
check       Report whether a source parses, with error details
grammar     Print the reference grammar
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from phpexpr.ast.nodes import Expression
    from phpexpr.parser.errors import ParseError

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _read_source(path: str) -> bytes:
    """Read a source file, or stdin for ``-``, exiting on error."""
    if path == "-":
        return click.get_binary_stream("stdin").read()
    try:
        return Path(path).read_bytes()
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {path}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)


def _load(file: str | None, expression: str | None) -> tuple[bytes, str]:
    """Return the source buffer and a label for it from FILE or ``-e``."""
    if (file is None) == (expression is None):
        raise click.UsageError("Provide exactly one of FILE or --expression.")
    if expression is not None:
        return expression.encode("utf-8"), "<expression>"
    return _read_source(file), file


def _print_parse_error(error: "ParseError", label: str) -> None:
    """Print a parse error and the chain of failures nested in it."""
    furthest = error.furthest()
    err_console.print(f"[red]Parse error[/red] in {label}: {error}")
    if furthest is not error:
        err_console.print(f"  furthest failure: {furthest}")

    table = Table(title="Failure chain", show_lines=False)
    table.add_column("Kind", style="bold", min_width=10)
    table.add_column("Location", min_width=8)
    table.add_column("Message")
    for depth, nested in error.walk():
        table.add_row(
            ("  " * depth) + nested.kind.name,
            f"{nested.line}:{nested.column}",
            nested.message,
        )
    err_console.print(table)


def _parse_or_exit(source: bytes, label: str) -> "Expression":
    """Parse a source buffer, printing errors and exiting on failure."""
    from phpexpr.parser import ParseError, parse

    try:
        return parse(source)
    except ParseError as exc:
        logger.debug("Parsing %s failed with %s", label, exc.kind.name)
        _print_parse_error(exc, label)
        sys.exit(1)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="phpexpr")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Primary-expression grammar for a PHP-like language."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from phpexpr import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]phpexpr[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# grammar command
# ---------------------------------------------------------------------------


@cli.command(name="grammar")
def grammar_command() -> None:
    """Print the reference grammar in EBNF-like notation."""
    from phpexpr.grammar import FULL_GRAMMAR

    console.print(Syntax(FULL_GRAMMAR, "text"))


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


@cli.command(name="check")
@click.argument("file", required=False, type=click.Path(exists=False, allow_dash=True))
@click.option("--expression", "-e", default=None, help="Source text to check instead of FILE")
def check_command(file: str | None, expression: str | None) -> None:
    """Check that a source is a single well-formed expression.

    FILE is the path to the source file, or - for stdin.
    """
    source, label = _load(file, expression)
    expr = _parse_or_exit(source, label)
    console.print(f"[green]OK[/green] {label}: {type(expr).__name__}")


# ---------------------------------------------------------------------------
# parse command
# ---------------------------------------------------------------------------


@cli.command(name="parse")
@click.argument("file", required=False, type=click.Path(exists=False, allow_dash=True))
@click.option("--expression", "-e", default=None, help="Source text to parse instead of FILE")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="json",
    help="AST output format",
)
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
def parse_command(
    file: str | None,
    expression: str | None,
    output_format: str,
    output: str | None,
) -> None:
    """Parse a source and dump the AST.

    FILE is the path to the source file, or - for stdin.
    """
    from phpexpr.ast import AstSerializer

    source, label = _load(file, expression)
    expr = _parse_or_exit(source, label)

    serializer = AstSerializer()

    if output_format.lower() == "json":
        text = serializer.to_json(expr, indent=2)
        lang = "json"
    else:
        text = serializer.to_yaml(expr)
        lang = "yaml"

    if output:
        Path(output).write_text(text, encoding="utf-8")
        logger.debug("Wrote %s AST for %s to %s", lang, label, output)
        console.print(f"[green]AST written to[/green] {output}")
    else:
        syntax = Syntax(text, lang, line_numbers=True)
        console.print(syntax)


if __name__ == "__main__":
    cli()
