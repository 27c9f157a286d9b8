"""Typer application exposing the four exercises as subcommands."""

from __future__ import annotations

from collections.abc import Callable
from importlib.metadata import PackageNotFoundError, version as package_version

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from adapters.json_exporter import export_result_json
from cli.ui_components import (
    format_area,
    format_conversion,
    format_fibonacci,
    format_rectangle_dump,
)
from core.config import AppSettings
from core.errors import InvalidInputError
from core.logging_setup import get_logger, setup_logging
from core.services import fibonacci, rectangles, temperature, twelve_days

app = typer.Typer(no_args_is_help=True, help="Small console exercises: conversions, sequences, structs and a carol.")

_err_console = Console(stderr=True)
logger = get_logger(__name__)

_JSON_HELP = "Print the result as JSON instead of a sentence."


def _version() -> str:
    try:
        return package_version("drills")
    except PackageNotFoundError:
        return "0.0.0+local"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"drills {_version()}")
        raise typer.Exit()


def _settings(ctx: typer.Context) -> AppSettings:
    if isinstance(ctx.obj, AppSettings):
        return ctx.obj
    return AppSettings()


def _prompt_until_valid(text: str, parse: Callable[[str], int], error: str) -> int:
    """Prompt until ``parse`` accepts a line. There is no retry limit.

    Closing stdin (or Ctrl-C) while waiting ends the command with status 1.
    """

    def _value_proc(raw: str) -> int:
        try:
            return parse(raw)
        except InvalidInputError as exc:
            logger.debug("Rejected input: %s", exc)
            raise typer.BadParameter(error) from exc

    # default="" hands empty lines to _value_proc instead of silently reprompting.
    try:
        return typer.prompt(text, default="", show_default=False, value_proc=_value_proc)
    except typer.Abort:
        logger.error("Input stream closed while prompting: %s", text)
        _err_console.print("[red]Failed to read line[/red]")
        raise typer.Exit(code=1) from None


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Load settings and configure logging before any command runs."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _err_console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    setup_logging(settings.log_level)
    ctx.obj = settings


@app.command(name="f-to-c")
def f_to_c(json_output: bool = typer.Option(False, "--json", help=_JSON_HELP)) -> None:
    """Convert a Fahrenheit temperature to Celsius."""

    fahrenheit = _prompt_until_valid(
        "Enter Fahrenheit value",
        temperature.parse_fahrenheit,
        "Invalid value",
    )
    result = temperature.convert(fahrenheit)
    logger.debug("Converted %sF to %sC", result.fahrenheit, result.celsius)

    typer.echo(export_result_json(result) if json_output else format_conversion(result))


@app.command(name="fibonacci")
def fibonacci_cmd(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help=_JSON_HELP),
) -> None:
    """Find the Nth Fibonacci number (naive recursion)."""

    settings = _settings(ctx)
    n = _prompt_until_valid(
        "Enter sequence number to find",
        fibonacci.parse_sequence_index,
        "Invalid number",
    )
    if n > settings.fibonacci_slow_threshold:
        logger.warning(
            "Sequence index %s is above %s; unmemoized recursion will be slow",
            n,
            settings.fibonacci_slow_threshold,
        )

    result = fibonacci.compute(n)
    typer.echo(export_result_json(result) if json_output else format_fibonacci(result))


@app.command(name="rectangles")
def rectangles_cmd(json_output: bool = typer.Option(False, "--json", help=_JSON_HELP)) -> None:
    """Print a 30x50 rectangle and its area."""

    rect = rectangles.default_rectangle()
    report = rectangles.measure(rect)
    logger.debug("Measured %r: %s", rect, report.area)

    if json_output:
        typer.echo(export_result_json(report))
        return

    typer.echo(format_rectangle_dump(rect))
    typer.echo(format_area(report))


@app.command(name="twelve-days")
def twelve_days_cmd(
    day: int | None = typer.Option(
        None,
        "--day",
        min=1,
        max=12,
        help="Print only this day's verse (1-12).",
    ),
    json_output: bool = typer.Option(False, "--json", help=_JSON_HELP),
) -> None:
    """Print the verses of "The Twelve Days of Christmas"."""

    if day is None:
        selected = twelve_days.verses()
    else:
        selected = [twelve_days.build_verse(day - 1)]

    if json_output:
        typer.echo(export_result_json(selected))
        return

    for verse in selected:
        typer.echo(verse.text)


def run() -> None:
    app()
