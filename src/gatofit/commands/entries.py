"""Weight record commands."""

import math
from datetime import date

import click
import questionary

from ..models.weight import NewWeightRecord
from ..services.series import history as history_pairs
from ..services.series import normalize
from .base import (
    async_command,
    echo_info,
    echo_success,
    ensure_initialized,
    format_change,
    format_date,
    format_table,
    format_weight,
    open_store,
)


async def _prompt_entry(note: str | None) -> tuple[str | None, str | None]:
    """Ask for the fields that were not given on the command line."""
    weight = await questionary.text(
        "Weight (kg):",
        validate=lambda text: _is_positive_number(text) or "Please enter a valid weight.",
    ).ask_async()

    if note is None:
        note = await questionary.text("Notes (optional):", default="").ask_async()

    return weight, note


def _is_positive_number(text: str) -> bool:
    try:
        value = float(text)
    except (TypeError, ValueError):
        return False
    return math.isfinite(value) and value > 0


@click.command()
@click.option(
    "--date",
    "date_value",
    default=lambda: date.today().isoformat(),
    show_default="today",
    help="Measurement date (YYYY-MM-DD)",
)
@click.option("--weight", "-w", "weight", default=None, help="Weight in kg")
@click.option("--note", "-n", default=None, help="Optional note (e.g. 'Changed food')")
@click.pass_context
@async_command
async def add(ctx: click.Context, date_value: str, weight: str | None, note: str | None):
    """Record a new weight measurement.

    Prompts for the weight when --weight is not given.

    Examples:

        gatofit add --weight 4.5

        gatofit add --date 2024-03-01 --weight 4.35 --note "After vet visit"
    """
    ensure_initialized(ctx)

    if weight is None:
        weight, note = await _prompt_entry(note)

    try:
        entry = NewWeightRecord.from_input(date_value, weight, note)
    except ValueError as e:
        raise click.BadParameter(str(e))

    store = await open_store()
    await store.add(entry)

    echo_success(f"Recorded {format_weight(entry.weight)} on {format_date(entry.date)}")


@click.command()
@click.argument("record_id")
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
@async_command
async def remove(ctx: click.Context, record_id: str, yes: bool):
    """Delete a weight record by its ID."""
    ensure_initialized(ctx)

    store = await open_store()
    record = store.get(record_id)

    if record is None:
        echo_info(f"No record with ID {record_id}.")
        return

    if not yes and not click.confirm(
        f"Delete the {format_weight(record.weight)} record from {format_date(record.date)}?"
    ):
        return

    await store.remove(record_id)
    echo_success("Record deleted.")


@click.command()
@click.pass_context
@async_command
async def history(ctx: click.Context):
    """List all records, newest first, with the change from the previous one."""
    ensure_initialized(ctx)

    store = await open_store()
    pairs = history_pairs(normalize(store.all()))

    if not pairs:
        echo_info("No records yet. Use 'gatofit add' to record a weight.")
        return

    rows = []
    for record, trend in pairs:
        rows.append([
            format_date(record.date),
            format_weight(record.weight),
            format_change(trend.delta) if trend else "",
            record.note or "",
            record.id,
        ])

    click.echo()
    click.echo(format_table(["Date", "Weight", "Change", "Note", "ID"], rows))
    click.echo()
    click.echo(f"{len(rows)} records")
