# libms/bootstrap.py
"""Create, seed and empty the library test database."""
import logging
from decimal import Decimal
from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import SQLAlchemyError

from libms.database import Database, RESET_TABLES
from libms.models import Admin, Author, Book, Category, Student
from libms.models.category import ACTIVE
from libms.security import legacy_hash

logger = logging.getLogger(__name__)

# Password for every seeded account
SEED_PASSWORD = "123456"


def server_url(connection_string: str) -> URL:
    """The connection URL with the database name removed, for talking to the server itself"""
    return make_url(connection_string).set(database=None)


def check_connection(db: Database) -> None:
    """Connect to the database server and run a trivial query.

    Server databases are checked without selecting the test database, which may
    not exist yet. Raises SQLAlchemyError if the server cannot be reached.
    """
    if db.is_sqlite:
        with db.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return

    server_engine = create_engine(server_url(db.connection_string))
    try:
        with server_engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    finally:
        server_engine.dispose()


def create_database(db: Database) -> None:
    """Create the target database on the server if it does not exist yet.

    SQLite creates its file on first connect, so there is nothing to do there.

    Raises:
        ValueError: if the connection URL names no database
    """
    if db.is_sqlite:
        return

    name = make_url(db.connection_string).database
    if not name:
        raise ValueError(f"No database name in {db.connection_string}")

    server_engine = create_engine(server_url(db.connection_string), isolation_level="AUTOCOMMIT")
    try:
        quoted = server_engine.dialect.identifier_preparer.quote(name)
        with server_engine.connect() as conn:
            conn.execute(text(f"CREATE DATABASE IF NOT EXISTS {quoted}"))
    finally:
        server_engine.dispose()


def setup_test_database(db: Database) -> bool:
    """Create the test database and (re)create all tables with their constraints

    Returns:
        True on success, False if the database could not be set up
    """
    try:
        create_database(db)
        db.close_session()
        db.drop_db()
        db.init_db()
        logger.info(f"Test database structure created at {db.engine.url.render_as_string(hide_password=True)}")
        return True
    except (SQLAlchemyError, ValueError, ImportError) as e:
        # ImportError: the driver for the URL (e.g. PyMySQL) is not installed
        logger.error(f"Database setup error: {str(e)}")
        return False


def seed_test_data(db: Database) -> bool:
    """Insert one admin plus two authors, categories, books and students"""
    try:
        with db.get_db() as session:
            session.add(Admin(
                full_name="Test Admin",
                email="testadmin@example.com",
                username="testadmin",
                password=legacy_hash(SEED_PASSWORD)
            ))

            authors = [Author(name="Test Author 1"), Author(name="Test Author 2")]
            categories = [
                Category(name="Test Category 1", status=ACTIVE),
                Category(name="Test Category 2", status=ACTIVE)
            ]
            session.add_all(authors + categories)
            session.flush()

            session.add_all([
                Book(name="Test Book 1", category_id=categories[0].id, author_id=authors[0].id,
                     isbn="1234567890", price=Decimal("25")),
                Book(name="Test Book 2", category_id=categories[1].id, author_id=authors[1].id,
                     isbn="9876543210", price=Decimal("30")),
            ])

            session.add_all([
                Student(student_id="TEST001", full_name="Test Student 1", email="student1@example.com",
                        mobile_number="1234567890", password=legacy_hash(SEED_PASSWORD), status=ACTIVE),
                Student(student_id="TEST002", full_name="Test Student 2", email="student2@example.com",
                        mobile_number="9876543210", password=legacy_hash(SEED_PASSWORD), status=ACTIVE),
            ])
        return True
    except SQLAlchemyError as e:
        logger.error(f"Failed to seed test data: {str(e)}")
        return False


def cleanup_test_data(db: Database) -> bool:
    """Delete every row from every table, leaving the schema in place"""
    try:
        with db.get_db() as session:
            for table in RESET_TABLES:
                session.execute(text(f"DELETE FROM {table}"))
        return True
    except SQLAlchemyError as e:
        logger.error(f"Failed to clean up test data: {str(e)}")
        return False


if __name__ == "__main__":
    database = Database.get_instance()
    if setup_test_database(database) and seed_test_data(database):
        print("Test database created and seeded.")
