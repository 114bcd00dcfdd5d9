# tests/test_repositories/test_category_repository.py
import pytest
from sqlalchemy.exc import IntegrityError, StatementError
from libms.repositories import CategoryRepository, BookRepository
from libms.models.category import ACTIVE, INACTIVE

@pytest.fixture
def category_repo(db_session):
    """Fixture to create a CategoryRepository instance"""
    return CategoryRepository(db_session)

def test_create_category(category_repo):
    """Test adding a category defaults to active"""
    category = category_repo.create("Science Fiction")
    fetched = category_repo.get_by_name("Science Fiction")
    assert fetched is not None
    assert fetched.id == category.id
    assert fetched.status == ACTIVE
    assert fetched.is_active

def test_create_inactive_category(category_repo):
    category = category_repo.create("Archived", status=INACTIVE)
    assert not category_repo.get_by_id(category.id).is_active

def test_get_nonexistent_category(category_repo):
    assert category_repo.get_by_id(999) is None
    assert category_repo.get_by_name("Nothing") is None

def test_duplicate_category_name(category_repo):
    """Test category names are unique"""
    with pytest.raises(IntegrityError):
        category_repo.create("Test Category")

def test_category_name_too_long(category_repo):
    with pytest.raises(StatementError, match="Data too long"):
        category_repo.create("C" * 151)

def test_list_categories(category_repo):
    category_repo.create("History")
    category_repo.create("Poetry", status=INACTIVE)

    names = [c.name for c in category_repo.list_categories()]
    assert names == ["Test Category", "History", "Poetry"]

def test_get_active(category_repo):
    """Test only active categories are offered"""
    category_repo.create("History")
    category_repo.create("Poetry", status=INACTIVE)

    names = [c.name for c in category_repo.get_active()]
    assert names == ["Test Category", "History"]

def test_update_category_name(category_repo, base_category):
    updated = category_repo.update(base_category.id, name="Fiction")
    assert updated.name == "Fiction"
    assert updated.status == ACTIVE
    assert updated.updated_at is not None

def test_update_category_status(category_repo, base_category):
    """Test deactivating a category keeps its name"""
    updated = category_repo.update(base_category.id, status=INACTIVE)
    assert updated.name == "Test Category"
    assert not updated.is_active
    assert category_repo.get_active() == []

def test_update_missing_category(category_repo):
    assert category_repo.update(999, name="Ghost") is None

def test_rename_to_existing_name(category_repo, base_category):
    category_repo.create("History")
    with pytest.raises(IntegrityError):
        category_repo.update(base_category.id, name="History")

def test_delete_category_cascades_to_books(category_repo, db_session, base_category, sample_book):
    """Test deleting a category removes its books"""
    book_id = sample_book.id
    category_id = base_category.id
    assert category_repo.count_books(category_id) == 1

    assert category_repo.delete(category_id)
    db_session.expire_all()
    assert category_repo.get_by_id(category_id) is None
    assert BookRepository(db_session).get_by_id(book_id) is None

def test_delete_missing_category(category_repo):
    assert not category_repo.delete(999)
