"""CLI entry point for numconv.

Invoked as::

    numconv [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m numconv.cli.main

Commands
--------
convert     Convert one value to every notation
batch       Convert every line of a file
notations   List the supported notations
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from numconv.cli.messages import error_message
from numconv.engine import ConversionEngine, Outcome
from numconv.grammar import Notation
from numconv.result import ConversionError
from numconv.serializer import ResultSerializer

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)

BASE_CHOICES: list[str] = [n.value for n in Notation]
FORMAT_CHOICES: list[str] = ["table", "json", "yaml"]
LOG_LEVELS: list[str] = ["DEBUG", "INFO", "WARNING", "ERROR"]

_EMPTY_CELL = "-"


def _configure_logging(level: str) -> None:
    """Send numconv log records to stderr through Rich at ``level``.

    Safe to call once per invocation: the handler is installed once and the
    level is applied every time.
    """
    package_logger = logging.getLogger("numconv")
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=err_console, show_path=False))
    package_logger.setLevel(level.upper())


def _read_source(path: str) -> str:
    """Read an input file (``-`` for stdin), exiting on error."""
    if path == "-":
        return click.get_text_stream("stdin").read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {escape(path)}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {escape(path)}: {escape(str(exc))}")
        sys.exit(1)


def _emit_serialized(outcome: Outcome | list[Outcome], output_format: str) -> None:
    serializer = ResultSerializer()
    if output_format == "json":
        click.echo(serializer.to_json(outcome, indent=2))
    else:
        click.echo(serializer.to_yaml(outcome), nl=False)


def _print_error(error: ConversionError) -> None:
    err_console.print(f"[red]Error:[/red] {error_message(error)}")
    if error.reason:
        err_console.print(f"[dim]{escape(error.reason)}[/dim]")


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="numconv")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="NUMCONV_LOG_LEVEL",
    help="Logging threshold for diagnostics on stderr",
)
def cli(log_level: str) -> None:
    """Convert numbers between binary, octal, decimal, hexadecimal and Roman numerals."""
    _configure_logging(log_level)


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from numconv import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]numconv[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# notations command
# ---------------------------------------------------------------------------


@cli.command(name="notations")
def notations_command() -> None:
    """List the supported notations and their --base tokens."""
    table = Table(title="Notations")
    table.add_column("Token", style="bold")
    table.add_column("Name")
    table.add_column("Base")
    for notation in Notation:
        table.add_row(
            notation.value,
            notation.label,
            str(notation.base) if notation.base is not None else _EMPTY_CELL,
        )
    console.print(table)


# ---------------------------------------------------------------------------
# convert command
# ---------------------------------------------------------------------------


@cli.command(name="convert")
@click.option("--value", "-v", "value", required=True, help="The number to convert")
@click.option(
    "--base",
    "-b",
    type=click.Choice(BASE_CHOICES, case_sensitive=False),
    default="10",
    show_default=True,
    help="Notation the value is written in",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(FORMAT_CHOICES, case_sensitive=False),
    default="table",
    show_default=True,
    envvar="NUMCONV_FORMAT",
    help="Output format",
)
def convert_command(value: str, base: str, output_format: str) -> None:
    """Convert one value to every supported notation.

    Examples:

    \b
        numconv convert --value 255
        numconv convert --value ff --base 16
        numconv convert --value XIV --base roman --format json
    """
    notation = Notation.parse(base)
    logger.debug("Converting %r as %s", value, notation.label)
    outcome = ConversionEngine().convert(value, notation)

    if output_format != "table":
        _emit_serialized(outcome, output_format)
        if outcome.is_error:
            sys.exit(1)
        return

    if isinstance(outcome, ConversionError):
        _print_error(outcome)
        sys.exit(1)

    table = Table(title=f"{escape(value.strip())} ({notation.label})", show_header=False)
    table.add_column("Notation", style="bold")
    table.add_column("Value")
    for target in (
        Notation.DECIMAL,
        Notation.BINARY,
        Notation.OCTAL,
        Notation.HEXADECIMAL,
        Notation.ROMAN,
    ):
        rendering = outcome.render(target)
        if target is Notation.ROMAN and not outcome.roman_in_range:
            rendering = f"[yellow]{rendering}[/yellow]"
        table.add_row(target.label, rendering)
    console.print(table)


# ---------------------------------------------------------------------------
# batch command
# ---------------------------------------------------------------------------


@cli.command(name="batch")
@click.argument("file", type=click.Path(exists=False, allow_dash=True))
@click.option(
    "--base",
    "-b",
    type=click.Choice(BASE_CHOICES, case_sensitive=False),
    default="10",
    show_default=True,
    help="Notation every line is written in",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(FORMAT_CHOICES, case_sensitive=False),
    default="table",
    show_default=True,
    envvar="NUMCONV_FORMAT",
    help="Output format",
)
def batch_command(file: str, base: str, output_format: str) -> None:
    """Convert every non-blank line of FILE.

    FILE is a text file with one value per line, or ``-`` for stdin.
    Exits with status 1 if any line fails to convert.
    """
    notation = Notation.parse(base)
    lines = [line.strip() for line in _read_source(file).splitlines() if line.strip()]
    outcomes = ConversionEngine().convert_many(lines, notation)
    failures = sum(1 for o in outcomes if o.is_error)
    logger.debug("Converted %d line(s) from %s, %d failure(s)", len(outcomes), file, failures)

    if output_format != "table":
        _emit_serialized(outcomes, output_format)
    else:
        table = Table(title=f"Batch: {escape(file)} ({notation.label})", show_lines=True)
        table.add_column("Input", style="bold")
        for target in ("Decimal", "Binary", "Octal", "Hexadecimal", "Roman"):
            table.add_column(target)

        for line, outcome in zip(lines, outcomes):
            if isinstance(outcome, ConversionError):
                table.add_row(
                    escape(line),
                    f"[red]{error_message(outcome)}[/red]",
                    *[_EMPTY_CELL] * 4,
                )
            else:
                table.add_row(escape(line), *outcome.as_dict().values())
        console.print(table)
        console.print(
            f"\n[bold]Summary:[/bold] {len(outcomes) - failures} converted, {failures} failed"
        )

    if failures:
        sys.exit(1)


if __name__ == "__main__":
    cli()
