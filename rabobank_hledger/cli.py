#!/usr/bin/env python3

"""Command line entry point."""

import logging

import click
import yaml

from rabobank_hledger.config import Config
from rabobank_hledger.importers import RabobankCsvImporter, distinct
from rabobank_hledger.output import RunContext

USAGE = (
    "Usage: rabobank-hledger pathname [pathname ...]\n\n"
    "Converts Rabobank CSV export file format to HLedger."
)


@click.command()
@click.argument("paths", nargs=-1, type=click.Path(dir_okay=False))
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file overriding account names, currency or extension.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log every converted record.")
@click.pass_context
def cli(ctx, paths: tuple[str, ...], config_file: str | None, verbose: bool):
    """Converts Rabobank CSV exports to HLedger journals.

    Every PATH is written to PATH#<account>.journal, one journal per own
    account found in the file.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not paths:
        click.echo(USAGE)
        return

    try:
        config = Config.from_yaml(config_file) if config_file else Config()
        importer = RabobankCsvImporter(config=config)
        context = RunContext(file_encoding=config.file_encoding)

        for path in paths:
            click.echo(f"{path}:")
            accounts = distinct(importer.convert(path, context))
            click.echo("\t" + "\n\t".join(accounts))
    except (ValueError, TypeError, OSError, yaml.YAMLError) as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
