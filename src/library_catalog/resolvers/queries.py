"""
Query resolvers for the Library Catalog service.

Read operations: catalog counts, book listings filtered by author and/or
genre, authors with their derived book counts, and the current user.
"""

import logging
from collections import Counter

from ..database.store import CatalogStore
from ..models import Author, Book, User

logger = logging.getLogger(__name__)


class QueryResolver:
    """Answers read operations against one request's store."""

    def __init__(self, store: CatalogStore):
        self.store = store

    async def book_count(self) -> int:
        return self.store.count_books()

    async def author_count(self) -> int:
        return self.store.count_authors()

    async def all_books(self, author: str | None = None, genre: str | None = None) -> list[Book]:
        """
        List books, optionally filtered by author name and/or genre.

        An author name that matches no author gives an empty list rather
        than an error.
        """
        if author and genre:
            return self.store.find_books(author_ids=self._author_ids(author), genre=genre)
        if author:
            return self.store.find_books(author_ids=self._author_ids(author))
        if genre:
            return self.store.find_books(genre=genre)
        return self.store.find_books()

    def _author_ids(self, name: str) -> set[str]:
        found = self.store.find_author_by_name(name)
        if found is None:
            logger.debug("No author named %r; book filter is empty", name)
            return set()
        return {found.id}

    async def all_authors(self) -> list[Author]:
        """
        Every author with a derived ``book_count``.

        Books are matched to authors by author *name*: one pass over all
        books builds a name -> count map, then each author is a lookup.
        """
        books = self.store.find_books()
        counts = Counter(book.author.name for book in books)
        return [
            author.with_book_count(counts.get(author.name, 0))
            for author in self.store.all_authors()
        ]

    async def me(self, current_user: User | None) -> User | None:
        return current_user
