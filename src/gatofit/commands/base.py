"""Shared CLI utilities."""

import asyncio
from datetime import date
from functools import wraps

import click

from ..db import get_db_path
from ..services.entry_store import EntryStore


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    db_path = get_db_path()
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Project not initialized. Run 'gatofit init' first."
        )
        ctx.exit(1)


async def open_store() -> EntryStore:
    """Create an entry store and load the persisted records."""
    store = EntryStore(get_db_path())
    await store.load()
    return store


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_weight(value: float | None) -> str:
    """Format a weight in kg, or '--' when there is none."""
    if value is None:
        return "--"
    return f"{value:.2f} kg"


def format_change(delta: float) -> str:
    """Format a signed weight change."""
    if delta > 0:
        return f"+{delta:.2f} kg"
    if delta < 0:
        return f"-{abs(delta):.2f} kg"
    return "0.00 kg"


def format_date(value: date) -> str:
    """Format a date for listings (e.g. '1 Mar 2024')."""
    return f"{value.day} {value.strftime('%b %Y')}"


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = []

    header_line = ""
    for i, h in enumerate(headers):
        header_line += h.ljust(widths[i] + padding)
    lines.append(header_line.rstrip())

    sep_line = ""
    for w in widths:
        sep_line += "-" * w + " " * padding
    lines.append(sep_line.rstrip())

    for row in rows:
        row_line = ""
        for i, cell in enumerate(row):
            row_line += str(cell).ljust(widths[i] + padding)
        lines.append(row_line.rstrip())

    return "\n".join(lines)
