"""Zoo intake CLI.

Names the animals listed in arrivingAnimals.txt using animalNames.txt, appends
them to newAnimals.txt and prints the updated report. All three files are read
from the current working directory.

Usage:
    zoo-intake
"""

import sys

import click

from zoointake.animals.arrivals import ArrivalParseError
from zoointake.config import ConfigManager, ZooConfig
from zoointake.managers.intake_manager import IntakeManager
from zoointake.system.path_resolver import PathResolver
from zoointake.system.structlog_configurator import configure_structlog


@click.command()
def cli() -> None:
    """Name newly arrived animals and append them to the population report."""
    path_resolver = PathResolver()

    try:
        config = ConfigManager(path_resolver).load()
    except ValueError as e:
        click.echo(f"Ignoring configuration, using defaults: {e}", err=True)
        config = ZooConfig()
    configure_structlog(config)

    manager = IntakeManager(path_resolver)
    try:
        manager.run()
    except ArrivalParseError as e:
        click.echo(f"Invalid arrival record: {e}", err=True)
        sys.exit(1)

    try:
        manager.display_report()
    except OSError:
        click.echo("Error opening newAnimals file.", err=True)
        sys.exit(1)


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
