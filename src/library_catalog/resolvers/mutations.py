"""
Mutation resolvers for the Library Catalog service.

Every write follows the same order:

1. AUTHENTICATE: ``addBook`` and ``editAuthor`` need a current user
2. VALIDATE: field and uniqueness checks, before anything is written
3. WRITE: through the CatalogStore; store rejections become ValidationError
4. NOTIFY: a created book is published to ``bookAdded`` subscribers

``createUser`` and ``login`` are open to anonymous callers.
"""

import logging
import secrets
from collections.abc import Callable
from typing import Any, TypeVar

from ..config import CatalogConfig, get_config
from ..database.store import CatalogStore
from ..errors import AuthenticationError, PersistenceError, ValidationError
from ..identity import TokenService
from ..models import Author, Book, Token, User
from ..notifications import CatalogEvent, NotificationHub
from ..validation import check_author_name, check_username, validate_new_book

logger = logging.getLogger(__name__)

T = TypeVar("T")

WRONG_CREDENTIALS_MESSAGE = "wrong credentials"


class MutationResolver:
    """Performs writes against one request's store."""

    def __init__(
        self,
        store: CatalogStore,
        hub: NotificationHub,
        tokens: TokenService,
        config: CatalogConfig | None = None,
    ):
        self.store = store
        self.hub = hub
        self.tokens = tokens
        self.config = config or get_config()

    @staticmethod
    def _require_user(current_user: User | None) -> User:
        if current_user is None:
            raise AuthenticationError()
        return current_user

    @staticmethod
    def _write(operation: Callable[[], T], args: dict[str, Any]) -> T:
        """Run a store write, reporting store rejections as bad input."""
        try:
            return operation()
        except PersistenceError as e:
            logger.info("Store rejected write: %s", e.message)
            raise ValidationError(e.message, invalid_args=args) from e

    async def add_book(
        self,
        current_user: User | None,
        title: str,
        author: str,
        published: int,
        genres: list[str] | None = None,
    ) -> Book:
        """
        Add a book, creating its author on first mention.

        Raises:
            AuthenticationError: If there is no current user
            ValidationError: If a field is missing or too short, the title is
                taken, or the store rejects the write
        """
        self._require_user(current_user)

        args = {"title": title, "author": author, "published": published, "genres": genres}
        validate_new_book(self.store, args)

        book_author = self.store.find_author_by_name(author)
        if book_author is None:
            check_author_name(author, args)
            book_author = self._write(lambda: self.store.insert_author(author), args)

        book = self._write(
            lambda: self.store.insert_book(title, published, book_author, genres or []),
            args,
        )

        delivered = self.hub.publish(CatalogEvent.BOOK_ADDED.value, book)
        logger.info("Book %r added; notified %d subscriber(s)", book.title, delivered)
        return book

    async def edit_author(
        self, current_user: User | None, name: str, set_born_to: int
    ) -> Author | None:
        """
        Set an author's birth year.

        Returns:
            The updated author, or None when no author has that name (nothing
            is written in that case)
        """
        self._require_user(current_user)

        author = self.store.find_author_by_name(name)
        if author is None:
            logger.info("editAuthor: no author named %r", name)
            return None

        args = {"name": name, "setBornTo": set_born_to}
        return self._write(lambda: self.store.update_author_birth_year(author, set_born_to), args)

    async def create_user(self, username: str, favorite_genre: str) -> User:
        """
        Register a user.

        Raises:
            ValidationError: If the username is blank, too long or taken
        """
        args = {"username": username, "favoriteGenre": favorite_genre}
        check_username(args)
        return self._write(lambda: self.store.insert_user(username, favorite_genre), args)

    async def login(self, username: str, password: str) -> Token:
        """
        Exchange credentials for a signed token.

        Every user shares one configured password.

        Raises:
            ValidationError: "wrong credentials" for an unknown user or a bad
                password
        """
        user = self.store.find_user_by_username(username)
        password_ok = secrets.compare_digest(
            password.encode(), self.config.shared_password.encode()
        )
        if user is None or not password_ok:
            logger.info("Failed login for %r", username)
            raise ValidationError(WRONG_CREDENTIALS_MESSAGE)

        return Token(value=self.tokens.issue_for(user), favorite_genre=user.favorite_genre)
