"""CLI package for the library test database"""
from .main import cli
from .commands.db import db

__all__ = ['cli', 'db']
