"""Ansicss command line interface.

Convert terminal output with ANSI colors into arguments for a browser
console, where styles are applied with %c directives, or strip the colors.
"""

import json
import sys
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from enum import StrEnum, auto
from pathlib import Path
from typing import Any

import typer
from rich.markup import escape

from ansicss.ansi import strip_ansi
from ansicss.console import (
    print_error,
    print_verbose,
    print_warning,
    set_verbose,
)
from ansicss.params import assemble_params

app = typer.Typer(no_args_is_help=True)


# ruff: noqa: FBT001 FBT003 Typer API uses boolean arguments for flags
# ruff: noqa: B008 function-call-in-default-argument


class OutputFormat(StrEnum):
    """Output format of the convert command."""

    JSON = auto()
    JS = auto()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "-v",
        "--verbose",
        envvar="ANSICSS_VERBOSE",
        help="Show verbose output",
    ),
) -> None:
    """Ansicss: ANSI colors for %c styled consoles."""
    if verbose:
        set_verbose()


def format_params(params: list[Any], output_format: OutputFormat) -> str:
    """Serialize console arguments as a JSON array or a console.log call."""
    if output_format == OutputFormat.JS:
        args = ", ".join(json.dumps(p, ensure_ascii=False) for p in params)
        return f"console.log({args});"
    return json.dumps(params, ensure_ascii=False)


@contextmanager
def _open_input(path: Path | None) -> Iterator[Iterable[str]]:
    try:
        if path is None:
            yield sys.stdin
            return
        with path.open(encoding="utf-8") as file:
            yield file
    except (OSError, UnicodeDecodeError) as error:
        print_error("Error reading input:", escape(str(error)))
        raise typer.Exit(1) from error


def _read_lines(
    text: list[str], input_path: Path | None
) -> Iterator[list[str]]:
    """Yield argument lists: the command arguments, or one per input line."""
    if text and input_path is not None:
        print_error(None, "Arguments and --input are mutually exclusive")
        raise typer.Exit(1)
    if text:
        yield text
        return
    with _open_input(input_path) as lines:
        for line in lines:
            yield [line.rstrip("\n")]


@app.command()
def convert(
    text: list[str] = typer.Argument(
        default_factory=list, help="Text to convert, default: read lines"
    ),
    input_path: Path | None = typer.Option(
        None, "-i", "--input", help="Read lines from file instead of stdin"
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.JSON,
        "-f",
        "--format",
        envvar="ANSICSS_FORMAT",
        help="Output a JSON array or a console.log statement",
    ),
) -> None:
    """Convert ANSI styled text to console arguments.

    Command arguments are converted together, like the arguments of a single
    console.log call. Input lines are converted one at a time.
    """
    count = styled = 0
    for args in _read_lines(text, input_path):
        params = assemble_params(*args)
        count += 1
        if params != args:
            styled += 1
        typer.echo(format_params(params, output_format))
    print_verbose("Converted", count, "lines,", styled, "styled")
    if count and not styled:
        print_warning("No ANSI escape sequences found")


@app.command()
def strip(
    text: list[str] = typer.Argument(
        default_factory=list, help="Text to strip, default: read lines"
    ),
    input_path: Path | None = typer.Option(
        None, "-i", "--input", help="Read lines from file instead of stdin"
    ),
) -> None:
    """Remove ANSI escape sequences."""
    count = 0
    for args in _read_lines(text, input_path):
        typer.echo(strip_ansi(" ".join(args)))
        count += 1
    print_verbose("Stripped", count, "lines")
