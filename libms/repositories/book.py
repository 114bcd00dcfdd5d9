# libms/repositories/book.py
from decimal import Decimal
from typing import List, Optional, Tuple
from sqlalchemy import func
from sqlalchemy.orm import Session
from ..models import Book, Category, Author, utcnow

class BookRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, book_id: int) -> Optional[Book]:
        """Get a book by ID"""
        return self.session.query(Book).filter(Book.id == book_id).first()

    def get_by_isbn(self, isbn: str) -> List[Book]:
        """Get books by ISBN"""
        return self.session.query(Book).filter(Book.isbn == isbn).order_by(Book.id).all()

    def search_books(self, query: str, limit: int = 20) -> List[Book]:
        """Search books by name"""
        base_query = self.session.query(Book)
        if query:
            base_query = base_query.filter(Book.name.ilike(f"%{query}%"))
        return base_query.order_by(Book.id).limit(limit).all()

    def create(
        self,
        name: Optional[str],
        category_id: Optional[int],
        author_id: Optional[int],
        isbn: Optional[str] = None,
        price: Optional[Decimal | float | str] = None,
        image: Optional[str] = None
    ) -> Book:
        """Add a book.

        Raises StatementError if the name is too long or the price is not a number,
        IntegrityError if the category or author does not exist.
        """
        book = Book(
            name=name,
            category_id=category_id,
            author_id=author_id,
            isbn=isbn,
            price=price,
            image=image
        )
        self.session.add(book)
        self.session.flush()
        return book

    def update(
        self,
        book_id: int,
        name: Optional[str] = None,
        isbn: Optional[str] = None,
        price: Optional[Decimal | float | str] = None,
        category_id: Optional[int] = None,
        author_id: Optional[int] = None
    ) -> Optional[Book]:
        """Update the given fields of a book and stamp the update time.

        An empty string is a valid name; only None leaves a field unchanged.
        """
        book = self.get_by_id(book_id)
        if not book:
            return None

        if name is not None:
            book.name = name
        if isbn is not None:
            book.isbn = isbn
        if price is not None:
            book.price = price
        if category_id is not None:
            book.category_id = category_id
        if author_id is not None:
            book.author_id = author_id
        book.updated_at = utcnow()

        self.session.flush()
        return book

    def delete(self, book_id: int) -> bool:
        """Delete a book along with its issue records"""
        book = self.get_by_id(book_id)
        if not book:
            return False
        self.session.delete(book)
        self.session.flush()
        return True

    def get_with_details(self, book_id: int) -> Optional[Tuple[Book, str, str]]:
        """Get a book with the names of its category and author.

        Returns:
            (book, category_name, author_name), or None if the book is missing
            or either reference is dangling
        """
        row = (
            self.session.query(Book, Category.name, Author.name)
            .join(Category, Book.category_id == Category.id)
            .join(Author, Book.author_id == Author.id)
            .filter(Book.id == book_id)
            .first()
        )
        if row is None:
            return None
        book, category_name, author_name = row
        return book, category_name, author_name

    def count_books(self, prefix: Optional[str] = None) -> int:
        """Count books, optionally only those whose name starts with prefix"""
        query = self.session.query(func.count(Book.id))
        if prefix:
            query = query.filter(Book.name.like(f"{prefix}%"))
        return query.scalar()

    def filter_books(self, prefix: Optional[str] = None, limit: int = 10, offset: int = 0) -> List[Book]:
        """Get one window of books ordered by ID

        Args:
            prefix: Only include books whose name starts with this (SQL LIKE semantics)
            limit: Maximum number of books to return
            offset: Number of books to skip

        Returns:
            List of at most `limit` Book objects
        """
        query = self.session.query(Book)
        if prefix:
            query = query.filter(Book.name.like(f"{prefix}%"))
        return query.order_by(Book.id).offset(offset).limit(limit).all()

    def paginate(
        self,
        prefix: Optional[str] = None,
        page: int = 1,
        per_page: int = 10
    ) -> tuple[List[Book], int]:
        """Get one page of books and the total number of matching books

        Args:
            prefix: Only include books whose name starts with this
            page: 1-based page number
            per_page: Page size

        Returns:
            Tuple containing:
            - The books on the requested page (empty past the last page)
            - Total count of matching books
        """
        if page < 1:
            raise ValueError(f"page must be 1 or greater, got {page}")
        if per_page < 1:
            raise ValueError(f"per_page must be 1 or greater, got {per_page}")

        total = self.count_books(prefix)
        books = self.filter_books(prefix, limit=per_page, offset=(page - 1) * per_page)
        return books, total
