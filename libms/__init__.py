# libms/__init__.py
from .database import Database
from .models import (
    Base, Admin, Author, Category,
    Book, Student, IssuedBookDetail
)

__all__ = [
    'Database',
    'Base',
    'Admin',
    'Author',
    'Category',
    'Book',
    'Student',
    'IssuedBookDetail'
]
