# libms/repositories/author.py
from typing import Optional, List
from sqlalchemy.orm import Session
from ..models import Author, Book, utcnow

class AuthorRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, author_id: int) -> Optional[Author]:
        """Get an author by ID"""
        return self.session.query(Author).filter(Author.id == author_id).first()

    def get_by_name(self, name: str) -> Optional[Author]:
        """Get an author by exact name"""
        return self.session.query(Author).filter(Author.name == name).first()

    def list_authors(self, limit: Optional[int] = None) -> List[Author]:
        """List authors in insertion order"""
        query = self.session.query(Author).order_by(Author.id)
        if limit:
            query = query.limit(limit)
        return query.all()

    def search_authors(self, query: str, limit: int = 20) -> List[Author]:
        """Search authors by name"""
        base_query = self.session.query(Author)
        if query:  # Only apply filter if query is not empty
            base_query = base_query.filter(Author.name.ilike(f"%{query}%"))
        return base_query.order_by(Author.id).limit(limit).all()

    def get_books(self, author_id: int) -> List[Book]:
        """Get all books written by an author"""
        return self.session.query(Book).filter(Book.author_id == author_id).order_by(Book.id).all()

    def create(self, name: str) -> Author:
        """Add an author. Raises IntegrityError if the name is taken."""
        author = Author(name=name)
        self.session.add(author)
        self.session.flush()
        return author

    def update_name(self, author_id: int, name: str) -> Optional[Author]:
        """Rename an author and stamp the update time"""
        author = self.get_by_id(author_id)
        if not author:
            return None
        author.name = name
        author.updated_at = utcnow()
        self.session.flush()
        return author

    def delete(self, author_id: int) -> bool:
        """Delete an author. The database cascades the delete to the author's books."""
        author = self.get_by_id(author_id)
        if not author:
            return False
        self.session.delete(author)
        self.session.flush()
        return True
