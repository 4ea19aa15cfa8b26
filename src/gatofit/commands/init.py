"""Initialize project command."""

import click

from ..config import Config
from ..db import get_db_path, init_db
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the gatofit data directory and database.

    This creates the data directory and the SQLite database that holds
    the weight records.
    """
    data_dir = Config.from_env().data_dir
    db_path = get_db_path(data_dir)

    echo_info(f"Initializing gatofit in {data_dir}")

    await init_db(db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("gatofit is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Record a weight:")
    click.echo("     gatofit add --weight 4.5 --note 'New food'")
    click.echo()
    click.echo("  2. Review the trend:")
    click.echo("     gatofit history")
    click.echo("     gatofit chart --window 3M")
    click.echo("     gatofit analyze")
