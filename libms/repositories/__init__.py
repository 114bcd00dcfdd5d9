# libms/repositories/__init__.py
from .admin import AdminRepository
from .author import AuthorRepository
from .category import CategoryRepository
from .book import BookRepository
from .student import StudentRepository
from .issued_book import IssuedBookRepository

__all__ = [
    'AdminRepository',
    'AuthorRepository',
    'CategoryRepository',
    'BookRepository',
    'StudentRepository',
    'IssuedBookRepository',
]
