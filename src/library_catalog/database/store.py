"""
Catalog store adapter.

``CatalogStore`` is the single entry point the resolvers use to reach the
database. It bundles the per-table repositories around one session, so a
store lives exactly as long as the request that opened it.
"""

import logging
from collections.abc import Iterable

from sqlalchemy.orm import Session

from ..models import Author, Book, User
from .author_repository import AuthorCreateSchema, AuthorRepository
from .book_repository import BookCreateSchema, BookFilter, BookRepository
from .user_repository import UserCreateSchema, UserRepository

logger = logging.getLogger(__name__)


class CatalogStore:
    """Typed access to the books, authors and users collections."""

    def __init__(self, session: Session):
        self.authors = AuthorRepository(session)
        self.books = BookRepository(session)
        self.users = UserRepository(session)

    # === Authors ===

    def find_author_by_name(self, name: str) -> Author | None:
        return self.authors.find_by_name(name)

    def insert_author(self, name: str, born: int | None = None) -> Author:
        author = self.authors.create(AuthorCreateSchema(name=name, born=born))
        logger.info("Created author %s (%s)", author.name, author.id)
        return author

    def update_author_birth_year(self, author: Author, year: int) -> Author | None:
        """Persist a new birth year; None if the author vanished meanwhile."""
        return self.authors.update_born(author.id, year)

    def all_authors(self) -> list[Author]:
        return self.authors.get_all()

    def count_authors(self) -> int:
        return self.authors.count()

    # === Books ===

    def find_book_by_title(self, title: str) -> Book | None:
        return self.books.find_by_title(title)

    def find_books(
        self, author_ids: Iterable[str] | None = None, genre: str | None = None
    ) -> list[Book]:
        """
        Books matching an optional conjunction of filters.

        Args:
            author_ids: Only books whose author id is in this collection
            genre: Only books tagged with this genre
        """
        book_filter = BookFilter(
            author_ids=set(author_ids) if author_ids is not None else None,
            genre=genre,
        )
        return self.books.find(book_filter)

    def insert_book(
        self, title: str, published: int, author: Author, genres: list[str] | None = None
    ) -> Book:
        book = self.books.create(
            BookCreateSchema(
                title=title,
                published=published,
                author_id=author.id,
                genres=genres or [],
            )
        )
        logger.info("Created book %r by %s", book.title, book.author.name)
        return book

    def count_books(self) -> int:
        return self.books.count()

    # === Users ===

    def find_user_by_username(self, username: str) -> User | None:
        return self.users.find_by_username(username)

    def find_user_by_id(self, user_id: str) -> User | None:
        return self.users.get_by_id(user_id)

    def insert_user(self, username: str, favorite_genre: str) -> User:
        user = self.users.create(UserCreateSchema(username=username, favorite_genre=favorite_genre))
        logger.info("Created user %s (%s)", user.username, user.id)
        return user
