"""CLI helpers for period resolution."""

from datetime import date

import click

from superjofi.domain.entities import Period


PERIOD_FLAG_NAMES = ("this-month", "last-month", "next-month")


def resolve_cli_period(
    ctx,
    *,
    month: int | None,
    year: int | None,
    period_flags: dict[str, bool],
    today: date | None = None,
) -> Period:
    """Resolve the period to show from CLI flags or an explicit month/year.

    ``month`` is the human month number (1-12). Missing values default to
    the current month and year.
    """
    period_count = sum(1 for is_set in period_flags.values() if is_set)

    if period_count > 1:
        click.echo(
            "Error: Only one period option (--this-month, --last-month, --next-month) can be specified at a time.",
            err=True,
        )
        ctx.exit(1)

    if period_count > 0 and (month is not None or year is not None):
        click.echo(
            "Error: Period options (--this-month, etc.) cannot be combined with --month or --year.",
            err=True,
        )
        ctx.exit(1)

    current = Period.current(today)

    if period_count == 1:
        if period_flags.get("last-month"):
            return current.previous()
        if period_flags.get("next-month"):
            return current.next()
        return current

    if month is not None and not 1 <= month <= 12:
        click.echo(f"Error: Invalid month {month}: use 1 to 12.", err=True)
        ctx.exit(1)

    return Period(
        month=current.month if month is None else month - 1,
        year=current.year if year is None else year,
    )
