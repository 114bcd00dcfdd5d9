# libms/cli/commands/db.py
import click
from libms.database import Database
from libms.bootstrap import setup_test_database, seed_test_data, cleanup_test_data
from ..utils import print_step

@click.group()
def db():
    """Test database management commands"""
    pass

@db.command()
@click.option('--seed/--no-seed', default=True, help='Insert sample rows after creating the tables')
def setup(seed: bool):
    """Create the test database and its tables

    Existing tables are dropped first.

    Example:
        libms db setup
        libms db setup --no-seed
    """
    database = Database.get_instance()
    ok = setup_test_database(database)
    print_step("Create tables", ok)
    if ok and seed:
        ok = seed_test_data(database)
        print_step("Seed test data", ok)
    if not ok:
        raise click.exceptions.Exit(1)

@db.command()
def seed():
    """Insert the sample admin, authors, categories, books and students"""
    ok = seed_test_data(Database.get_instance())
    print_step("Seed test data", ok)
    if not ok:
        raise click.exceptions.Exit(1)

@db.command()
def reset():
    """Empty every table, reset id counters and insert the base category and author"""
    database = Database.get_instance()
    ok = database.reset_test_database()
    if ok:
        database.commit_transaction()
    print_step("Reset test database", ok)
    if not ok:
        raise click.exceptions.Exit(1)

@db.command()
def cleanup():
    """Delete all rows, keeping the tables"""
    ok = cleanup_test_data(Database.get_instance())
    print_step("Clean up test data", ok)
    if not ok:
        raise click.exceptions.Exit(1)
