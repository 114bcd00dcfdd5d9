# libms/cli/main.py
import logging
import click
from libms.config import LOG_LEVEL
from .commands.db import db
from .commands.catalog import books, issued
from .commands.test import test

@click.group()
@click.option('--verbose/--no-verbose', default=False, help='Log at DEBUG level')
def cli(verbose: bool):
    """Library management test database CLI"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else LOG_LEVEL,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

cli.add_command(db)
cli.add_command(books)
cli.add_command(issued)
cli.add_command(test)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
