# libms/cli/commands/test.py
import sys
from pathlib import Path
import click
from sqlalchemy.exc import SQLAlchemyError
from libms.database import Database
from libms.bootstrap import check_connection, setup_test_database
from ..utils import print_step

MIN_PYTHON = (3, 11)
COVERAGE_DIR = Path('tests') / 'coverage'

@click.command(context_settings={'ignore_unknown_options': True})
@click.option('--coverage/--no-coverage', default=False, help='Write an HTML coverage report to tests/coverage')
@click.argument('pytest_args', nargs=-1, type=click.UNPROCESSED)
def test(coverage: bool, pytest_args: tuple):
    """Check the environment, set up the test database and run the test suite

    Extra arguments are passed straight to pytest.

    Example:
        libms test
        libms test --coverage
        libms test -- -k student -x
    """
    python_ok = sys.version_info >= MIN_PYTHON
    print_step("Python version", python_ok, ".".join(str(part) for part in sys.version_info[:3]))
    if not python_ok:
        raise click.exceptions.Exit(1)

    database = Database.get_instance()
    try:
        check_connection(database)
        print_step("Database connection", True)
    except SQLAlchemyError as e:
        print_step("Database connection", False, str(e))
        raise click.exceptions.Exit(1)

    if not setup_test_database(database):
        print_step("Test database setup", False)
        raise click.exceptions.Exit(1)
    print_step("Test database setup", True)

    import pytest

    args = list(pytest_args)
    if coverage:
        COVERAGE_DIR.mkdir(parents=True, exist_ok=True)
        args += ['--cov=libms', f'--cov-report=html:{COVERAGE_DIR}']

    click.echo(click.style("\nRunning tests...\n", fg='blue'))
    exit_code = int(pytest.main(args))
    if coverage:
        click.echo(click.style(f"\nCoverage report written to {COVERAGE_DIR / 'index.html'}", fg='blue'))
    raise click.exceptions.Exit(exit_code)
