"""
Database package for the Library Catalog service.

This package provides:
- SQLAlchemy schema definitions (schema.py)
- Session management and connection handling (session.py)
- Per-table repositories and the CatalogStore adapter used by resolvers
"""

from .author_repository import AuthorCreateSchema, AuthorRepository
from .book_repository import BookCreateSchema, BookFilter, BookRepository
from .repository import BaseRepository
from .schema import Author, Base, Book, User
from .session import DatabaseManager, safe_commit
from .store import CatalogStore
from .user_repository import UserCreateSchema, UserRepository

__all__ = [
    "Author",
    "AuthorCreateSchema",
    "AuthorRepository",
    "Base",
    "BaseRepository",
    "Book",
    "BookCreateSchema",
    "BookFilter",
    "BookRepository",
    "CatalogStore",
    "DatabaseManager",
    "User",
    "UserCreateSchema",
    "UserRepository",
    "safe_commit",
]
