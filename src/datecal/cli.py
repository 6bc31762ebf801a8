"""Typer CLI for datecal."""

from __future__ import annotations

import asyncio
import datetime
import json
import logging
import sys

import typer

from datecal.clock import get_current_year
from datecal.dates import DateUnit, add, is_date_before, is_same_day, is_within_range, to_date
from datecal.exceptions import DateCalError
from datecal.holidays import PRESETS, HolidayCalendar, named_holidays

app = typer.Typer(
    name="datecal",
    help="Calendar utilities: date arithmetic, comparisons and holiday lookup.",
    add_completion=False,
)

COUNTRY_ENVVAR = "DATECAL_COUNTRY"


@app.callback()
def _main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def _fail(exc: Exception) -> typer.Exit:
    typer.echo(f"Error: {exc}", err=True)
    return typer.Exit(code=1)


def _echo_bool(value: bool) -> None:
    typer.echo("true" if value else "false")


def _format(value: datetime.date) -> str:
    return value.isoformat()


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command("add", context_settings={"ignore_unknown_options": True})
def add_command(
    date: str = typer.Argument(..., help="Start date (YYYY-MM-DD or ISO-8601 datetime)."),
    amount: int = typer.Argument(..., help="Number of units to add; negative subtracts."),
    unit: DateUnit = typer.Option(DateUnit.DAYS, "--unit", "-u", help="Unit of the offset."),
) -> None:
    """Add days, months or years to a date."""
    try:
        result = add(date, amount, unit)
    except DateCalError as exc:
        raise _fail(exc) from None
    typer.echo(_format(result))


@app.command()
def before(
    date: str = typer.Argument(..., help="Date to test."),
    compare: str = typer.Argument(..., help="Date to compare against."),
) -> None:
    """Print whether DATE is strictly before COMPARE."""
    try:
        _echo_bool(is_date_before(date, compare))
    except DateCalError as exc:
        raise _fail(exc) from None


@app.command("same-day")
def same_day(
    a: str = typer.Argument(..., help="First date."),
    b: str = typer.Argument(..., help="Second date."),
) -> None:
    """Print whether A and B fall on the same calendar day."""
    try:
        _echo_bool(is_same_day(a, b))
    except DateCalError as exc:
        raise _fail(exc) from None


@app.command()
def within(
    date: str = typer.Argument(..., help="Date to test."),
    from_: str = typer.Argument(..., metavar="FROM", help="Range start (exclusive)."),
    to: str = typer.Argument(..., help="Range end (exclusive)."),
) -> None:
    """Print whether DATE lies strictly between FROM and TO."""
    try:
        _echo_bool(is_within_range(date, from_, to))
    except DateCalError as exc:
        raise _fail(exc) from None


@app.command()
def year() -> None:
    """Print the current year."""
    typer.echo(str(get_current_year()))


@app.command()
def holidays(
    country: str = typer.Option(
        "us",
        "--country",
        "-c",
        envvar=COUNTRY_ENVVAR,
        help=f"Country preset ({', '.join(sorted(PRESETS))}).",
    ),
    year: int = typer.Option(
        None,
        "--year",
        "-y",
        help="Year to list holidays for. Defaults to the current year.",
    ),
    observed: bool = typer.Option(
        False,
        "--observed/--actual",
        help="Shift weekend holidays to their observed weekday.",
    ),
    output_json: bool = typer.Option(False, "--json", help="Output results as JSON."),
) -> None:
    """List holidays for a country preset."""
    resolved_year = year if year is not None else get_current_year()

    try:
        preset = named_holidays(country, resolved_year, observed)
    except DateCalError as exc:
        raise _fail(exc) from None

    if output_json:
        output = {
            "country": country,
            "year": resolved_year,
            "observed": observed,
            "holidays": [{"date": _format(d), "name": name} for d, name in preset],
        }
        json.dump(output, sys.stdout, indent=2)
        typer.echo()
        return

    typer.echo(f"  {PRESETS[country]} — {resolved_year}")
    typer.echo()
    for d, name in preset:
        typer.echo(f"    {d.strftime('%a, %b %d'):>12}  {name}")


@app.command("is-holiday")
def is_holiday_command(
    date: str = typer.Argument(..., help="Date to check."),
    country: str = typer.Option(
        "us",
        "--country",
        "-c",
        envvar=COUNTRY_ENVVAR,
        help=f"Country preset ({', '.join(sorted(PRESETS))}).",
    ),
    observed: bool = typer.Option(
        False,
        "--observed/--actual",
        help="Shift weekend holidays to their observed weekday.",
    ),
) -> None:
    """Print whether DATE is a holiday."""
    try:
        calendar = HolidayCalendar(country, observed=observed)
        _echo_bool(asyncio.run(calendar.is_holiday(to_date(date))))
    except DateCalError as exc:
        raise _fail(exc) from None


def main() -> None:
    """Entry point for the CLI."""
    app()
