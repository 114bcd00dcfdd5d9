# libms/models/__init__.py
from .base import Base, TimestampMixin, RegistrationMixin, utcnow
from .types import BoundedString, StrictNumeric
from .admin import Admin
from .author import Author
from .category import Category
from .book import Book
from .student import Student
from .issued_book import IssuedBookDetail

__all__ = [
    'Base',
    'TimestampMixin',
    'RegistrationMixin',
    'utcnow',
    'BoundedString',
    'StrictNumeric',
    'Admin',
    'Author',
    'Category',
    'Book',
    'Student',
    'IssuedBookDetail'
]
