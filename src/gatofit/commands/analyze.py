"""AI trend analysis command."""

import click

from ..config import Config
from ..models.analysis import AnalysisStatus
from ..services.trend_advisor import TrendAdvisor
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_warning,
    ensure_initialized,
    open_store,
)

STATUS_STYLES = {
    AnalysisStatus.HEALTHY: ("Healthy", "green"),
    AnalysisStatus.WARNING: ("Warning", "yellow"),
    AnalysisStatus.UNKNOWN: ("Unknown", "white"),
}


@click.command()
@click.pass_context
@async_command
async def analyze(ctx: click.Context):
    """Ask the AI vet for an assessment of the weight trend.

    Sends the most recent records to Gemini. Requires GEMINI_API_KEY.
    """
    ensure_initialized(ctx)

    config = Config.from_env()
    try:
        config.validate()
    except ValueError as e:
        echo_error(f"Configuration error: {e}")
        ctx.exit(1)

    if not config.gemini_api_key:
        echo_warning("GEMINI_API_KEY is not set, the analysis will not be available.")

    store = await open_store()
    echo_info("Analysing your cat's weight history...")

    result = await TrendAdvisor(config).analyze(store.all())

    label, color = STATUS_STYLES[result.status]
    click.echo()
    click.echo(click.style(f"Status: {label}", fg=color, bold=True))
    click.echo(result.message)
    click.echo()
    click.echo(f"Tip: {result.recommendation}")
