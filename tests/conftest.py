# tests/conftest.py
import os
import sys
import pytest
from decimal import Decimal
from pathlib import Path

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from libms.config import get_database_url
from libms.database import Database, BASE_AUTHOR_NAME, BASE_CATEGORY_NAME
from libms.bootstrap import setup_test_database
from libms.models import Admin, Author, Category, Book, Student
from libms.models.category import ACTIVE
from libms.models.student import BLOCKED
from libms.security import legacy_hash
from tests.utils import STUDENT_PASSWORD

@pytest.fixture(scope="session")
def test_db_path(tmp_path_factory):
    """Create a temporary directory for the test database."""
    test_dir = tmp_path_factory.mktemp("test_db")
    return str(test_dir / "library_test.db")

def configured_database_url():
    """The database named by DATABASE_URL or TEST_DB_DRIVER, or None to use a temporary SQLite file"""
    if os.getenv("DATABASE_URL") or os.getenv("TEST_DB_DRIVER"):
        return get_database_url()
    return None

@pytest.fixture(scope="session")
def database(test_db_path):
    """Create the test database with all six tables"""
    db = Database(configured_database_url() or f"sqlite:///{test_db_path}")
    assert setup_test_database(db), "could not create the test database"

    yield db

    db.dispose()
    try:
        os.remove(test_db_path)
    except OSError:
        pass  # Ignore errors if file doesn't exist

@pytest.fixture(scope="function")
def db_session(database):
    """Reset the database and hand out the shared session inside a transaction.

    Everything the test writes is rolled back afterwards.
    """
    assert database.reset_test_database(), "database reset failed"
    try:
        yield database.session
    finally:
        database.rollback_transaction()

@pytest.fixture
def base_category(db_session) -> Category:
    """The category every reset seeds"""
    return db_session.query(Category).filter(Category.name == BASE_CATEGORY_NAME).one()

@pytest.fixture
def base_author(db_session) -> Author:
    """The author every reset seeds"""
    return db_session.query(Author).filter(Author.name == BASE_AUTHOR_NAME).one()

@pytest.fixture
def sample_book(db_session, base_category, base_author) -> Book:
    """Create a sample book for testing."""
    book = Book(
        name="Test Book",
        category_id=base_category.id,
        author_id=base_author.id,
        isbn="1234567890",
        price=Decimal("29.99")
    )
    db_session.add(book)
    db_session.flush()
    return book

@pytest.fixture
def multiple_books(db_session, base_category, base_author):
    """Create 15 books named Page Book 01 to Page Book 15."""
    books = []
    for i in range(1, 16):
        book = Book(
            name=f"Page Book {i:02d}",
            category_id=base_category.id,
            author_id=base_author.id,
            isbn=f"ISBN{i:04d}",
            price=Decimal(10 + i)
        )
        db_session.add(book)
        books.append(book)
    db_session.flush()
    return books

@pytest.fixture
def sample_student(db_session) -> Student:
    """Create an active student with a known password."""
    student = Student(
        student_id="SID001",
        full_name="Test Student",
        email="teststudent@example.com",
        mobile_number="1234567890",
        password=legacy_hash(STUDENT_PASSWORD),
        status=ACTIVE
    )
    db_session.add(student)
    db_session.flush()
    return student

@pytest.fixture
def blocked_student(db_session) -> Student:
    """Create a blocked student with a known password."""
    student = Student(
        student_id="SID002",
        full_name="Blocked Student",
        email="blocked@example.com",
        mobile_number="9876543210",
        password=legacy_hash(STUDENT_PASSWORD),
        status=BLOCKED
    )
    db_session.add(student)
    db_session.flush()
    return student

@pytest.fixture
def sample_admin(db_session) -> Admin:
    """Create the admin account the web application ships with."""
    admin = Admin(
        full_name="Test Admin",
        email="testadmin@example.com",
        username="testadmin",
        password=legacy_hash("123456")
    )
    db_session.add(admin)
    db_session.flush()
    return admin
