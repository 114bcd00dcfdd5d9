# libms/repositories/category.py

from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from libms.models import Category, Book, utcnow
from libms.models.category import ACTIVE

class CategoryRepository:
    """Repository for managing Category entities."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def get_by_id(self, category_id: int) -> Optional[Category]:
        """Get a category by its ID.

        Args:
            category_id: The ID of the category to retrieve

        Returns:
            The Category object if found, None otherwise
        """
        return self.session.query(Category).filter(Category.id == category_id).first()

    def get_by_name(self, name: str) -> Optional[Category]:
        """Get a category by its name.

        Args:
            name: The name of the category to retrieve

        Returns:
            The Category object if found, None otherwise
        """
        return self.session.query(Category).filter(Category.name == name).first()

    def list_categories(self) -> List[Category]:
        """Get every category ordered by ID."""
        return self.session.query(Category).order_by(Category.id).all()

    def get_active(self) -> List[Category]:
        """Get the categories that are offered when adding a book.

        Returns:
            List of Category objects whose status flag is active
        """
        return (
            self.session.query(Category)
            .filter(Category.status == ACTIVE)
            .order_by(Category.id)
            .all()
        )

    def count_books(self, category_id: int) -> int:
        """Count the books filed under a category.

        Args:
            category_id: The ID of the category

        Returns:
            Number of books in the category
        """
        return (
            self.session.query(func.count(Book.id))
            .filter(Book.category_id == category_id)
            .scalar()
        )

    def create(self, name: str, status: int = ACTIVE) -> Category:
        """Create a new category.

        Args:
            name: The category name, unique across categories
            status: 1 for active, 0 for inactive (default: active)

        Returns:
            The created Category object

        Raises:
            IntegrityError: if a category with this name already exists
        """
        category = Category(name=name, status=status)
        self.session.add(category)
        self.session.flush()
        return category

    def update(
        self,
        category_id: int,
        name: Optional[str] = None,
        status: Optional[int] = None
    ) -> Optional[Category]:
        """Update a category's name and/or status.

        Args:
            category_id: The ID of the category to update
            name: Optional new name
            status: Optional new status flag

        Returns:
            The updated Category object if found, None otherwise
        """
        category = self.get_by_id(category_id)
        if not category:
            return None

        if name is not None:
            category.name = name
        if status is not None:
            category.status = status
        category.updated_at = utcnow()

        self.session.flush()
        return category

    def delete(self, category_id: int) -> bool:
        """Delete a category together with its books.

        Args:
            category_id: The ID of the category to delete

        Returns:
            True if the category was deleted, False if not found
        """
        category = self.get_by_id(category_id)
        if not category:
            return False

        self.session.delete(category)
        self.session.flush()
        return True
