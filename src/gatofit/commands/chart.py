"""Chart and summary commands."""

from datetime import datetime

import click

from ..models.weight import TimeWindow
from ..services.series import chart_bounds, compute_metrics, normalize, project
from .base import (
    async_command,
    echo_info,
    ensure_initialized,
    format_change,
    format_weight,
    open_store,
)

BAR_WIDTH = 40


def render_bars(records, bounds: tuple[float, float], width: int = BAR_WIDTH) -> list[str]:
    """Render one horizontal bar per record, scaled to the chart bounds."""
    low, high = bounds
    span = high - low
    lines = []
    for record in records:
        filled = round((record.weight - low) / span * width) if span > 0 else width
        bar = "#" * filled
        lines.append(f"{record.date.strftime('%d/%m')}  {bar.ljust(width)}  {record.weight:.2f}")
    return lines


@click.command()
@click.option(
    "--window",
    "-r",
    type=click.Choice([w.value for w in TimeWindow], case_sensitive=False),
    default=TimeWindow.ALL.value,
    show_default=True,
    help="Time window to show",
)
@click.pass_context
@async_command
async def chart(ctx: click.Context, window: str):
    """Show the weight series as a text chart."""
    ensure_initialized(ctx)

    store = await open_store()
    ordered = normalize(store.all())

    if not ordered:
        echo_info("No data to show. Add the first weight!")
        return

    selected = TimeWindow(window.upper())
    points = project(ordered, selected, datetime.now())

    click.echo()
    click.echo(click.style(f"Weight ({selected.get_display()})", bold=True))
    click.echo("=" * 50)

    bounds = chart_bounds(points)
    if bounds is None:
        echo_info("No records in this window.")
        return

    for line in render_bars(points, bounds):
        click.echo(line)

    metrics = compute_metrics(points)
    click.echo()
    click.echo(
        f"Range: {format_weight(metrics.min_weight)} - {format_weight(metrics.max_weight)}"
    )


@click.command()
@click.pass_context
@async_command
async def summary(ctx: click.Context):
    """Show current weight and total change."""
    ensure_initialized(ctx)

    store = await open_store()
    metrics = compute_metrics(normalize(store.all()))

    click.echo()
    click.echo(f"Current weight: {format_weight(metrics.current_value)}")
    click.echo(f"Total change:   {format_change(metrics.net_change)}")
    click.echo(f"Records:        {len(store.all())}")
