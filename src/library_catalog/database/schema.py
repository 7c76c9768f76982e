"""
SQLAlchemy database schema for the Library Catalog service.

Three tables back the catalog:
1. authors - keyed by id, with a unique name used to resolve a book's author
2. books - each row references exactly one author; titles are unique
3. users - identity anchors for token issuance, unique by username

The unique indexes are the store's own backstop for the best-effort
uniqueness checks made by the validation layer.
"""

import json
from datetime import datetime
from uuid import uuid4

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import declarative_base, relationship

# Base class for all SQLAlchemy models
Base = declarative_base()


def generate_id() -> str:
    """System-assigned identifier for new rows."""
    return uuid4().hex


class Author(Base):
    """
    Authors table.

    Authors never store their books; the derived book count is computed
    at query time from the books table.
    """

    __tablename__ = "authors"

    id = Column(String(32), primary_key=True, default=generate_id)
    name = Column(String(200), nullable=False, unique=True)
    born = Column(Integer, nullable=True)

    created_at = Column(DateTime, nullable=False, default=datetime.now)
    updated_at = Column(DateTime, nullable=False, default=datetime.now, onupdate=datetime.now)


class Book(Base):
    """
    Books table.

    Genres are kept as a JSON array in a text column so their order is
    preserved across SQLite and other backends alike.
    """

    __tablename__ = "books"

    id = Column(String(32), primary_key=True, default=generate_id)
    title = Column(String(500), nullable=False, unique=True)
    published = Column(Integer, nullable=False)
    author_id = Column(String(32), ForeignKey("authors.id"), nullable=False)
    genres_json = Column("genres", Text, nullable=False, default="[]")

    created_at = Column(DateTime, nullable=False, default=datetime.now)

    author = relationship("Author", lazy="joined")

    __table_args__ = (
        Index("idx_book_author", "author_id"),
        CheckConstraint("length(title) >= 2", name="check_title_length"),
    )

    @property
    def genres(self) -> list[str]:
        return json.loads(self.genres_json or "[]")

    @genres.setter
    def genres(self, value: list[str]) -> None:
        self.genres_json = json.dumps(list(value))


class User(Base):
    """Users table - identity anchors for bearer tokens."""

    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=generate_id)
    username = Column(String(100), nullable=False, unique=True)
    favorite_genre = Column(String(100), nullable=False)

    created_at = Column(DateTime, nullable=False, default=datetime.now)
