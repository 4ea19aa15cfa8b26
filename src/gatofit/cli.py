"""CLI entry point for gatofit."""

import logging

import click

from .commands import add, analyze, chart, history, init, remove, serve, summary


@click.group()
@click.version_option(version="0.1.0", prog_name="gatofit")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool):
    """gatofit: keep track of your cat's weight.

    Record weight measurements, review the history and trend, and ask an
    AI vet for an assessment.

    Example usage:

        # Initialize the project
        gatofit init

        # Record a weight
        gatofit add --weight 4.5

        # Review
        gatofit history
        gatofit chart --window 6M
        gatofit analyze
    """
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if verbose else logging.WARNING,
    )


# Register commands
main.add_command(init)
main.add_command(add)
main.add_command(remove)
main.add_command(history)
main.add_command(chart)
main.add_command(summary)
main.add_command(analyze)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
