"""
Book repository implementation for the Library Catalog service.

Books are always loaded together with their author (the relationship is
joined-eager), so every model handed back carries the full author record.
"""

from pydantic import BaseModel, Field
from sqlalchemy import select

from ..models.book import Book as BookModel
from .repository import BaseRepository
from .schema import Book as BookDB


class BookCreateSchema(BaseModel):
    """Schema for creating a new book."""

    title: str
    published: int
    author_id: str
    genres: list[str] = Field(default_factory=list)


class BookFilter(BaseModel):
    """
    Conjunctive filter over the books table.

    ``author_ids`` restricts to books whose author is in the set; an empty
    set matches nothing. ``genre`` restricts to books tagged with it.
    """

    author_ids: set[str] | None = None
    genre: str | None = None


class BookRepository(BaseRepository[BookDB, BookModel]):
    """Repository for book data access."""

    @property
    def model_class(self):
        return BookDB

    @property
    def response_schema(self):
        return BookModel

    def find_by_title(self, title: str) -> BookModel | None:
        db_book = self._first(BookDB.title == title)
        if db_book is None:
            return None
        return self._to_response_model(db_book)

    def find(self, book_filter: BookFilter | None = None) -> list[BookModel]:
        """
        Find books matching a filter, oldest first.

        The author restriction runs in SQL. Genres live in a JSON column,
        so genre membership is checked on the loaded rows.
        """
        book_filter = book_filter or BookFilter()
        if book_filter.author_ids is not None and not book_filter.author_ids:
            return []

        query = select(BookDB).order_by(BookDB.created_at)
        if book_filter.author_ids is not None:
            query = query.where(BookDB.author_id.in_(book_filter.author_ids))

        results = self._query(query, "Failed to find books").unique().scalars().all()
        books = [self._to_response_model(book) for book in results]

        if book_filter.genre is not None:
            books = [book for book in books if book.has_genre(book_filter.genre)]
        return books

    def create(self, data: BookCreateSchema) -> BookModel:
        """
        Create a new book.

        Raises:
            DuplicateError: If a book with the same title already exists
        """
        db_book = BookDB(
            title=data.title,
            published=data.published,
            author_id=data.author_id,
        )
        db_book.genres = data.genres
        db_book = self._add(db_book, "create book")
        return self._to_response_model(db_book)
