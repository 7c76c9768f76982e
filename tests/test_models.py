"""
Tests for the catalog models.

These tests verify that the models:
1. Validate field constraints
2. Build from ORM rows
3. Keep derived values off the stored record
"""

import pytest
from pydantic import ValidationError

from library_catalog.database.schema import Author as AuthorDB
from library_catalog.database.schema import Book as BookDB
from library_catalog.models import Author, Book, Token, User


class TestAuthorModel:
    def test_create_valid_author(self):
        author = Author(id="a1", name="Robert Martin", born=1952)

        assert author.name == "Robert Martin"
        assert author.born == 1952
        assert author.book_count is None

    def test_born_is_optional(self):
        assert Author(id="a1", name="Sandi Metz").born is None

    def test_with_book_count_copies(self):
        author = Author(id="a1", name="Robert Martin")

        counted = author.with_book_count(2)

        assert counted.book_count == 2
        assert author.book_count is None
        assert counted.id == author.id

    def test_negative_book_count_rejected(self):
        with pytest.raises(ValidationError):
            Author(id="a1", name="Robert Martin", book_count=-1)

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            Author(id="a1", name="")


class TestBookModel:
    def test_create_valid_book(self):
        book = Book(
            id="b1",
            title="Clean Code",
            published=2008,
            genres=["refactoring"],
            author=Author(id="a1", name="Robert Martin"),
        )

        assert book.author.name == "Robert Martin"
        assert book.has_genre("refactoring")
        assert not book.has_genre("crime")

    def test_genres_default_empty(self):
        book = Book(id="b1", title="Clean Code", published=2008, author=Author(id="a1", name="Bob"))
        assert book.genres == []

    def test_short_title_rejected(self):
        with pytest.raises(ValidationError):
            Book(id="b1", title="X", published=2008, author=Author(id="a1", name="Bob"))

    def test_from_orm_row(self):
        author_row = AuthorDB(id="a1", name="Fyodor Dostoevsky", born=1821)
        book_row = BookDB(id="b1", title="The Demon", published=1872, author=author_row)
        book_row.genres = ["classic", "revolution"]

        book = Book.model_validate(book_row)

        assert book.genres == ["classic", "revolution"]
        assert book.author == Author(id="a1", name="Fyodor Dostoevsky", born=1821)


class TestUserModels:
    def test_user(self):
        user = User(id="u1", username="mluukkai", favorite_genre="refactoring")
        assert user.username == "mluukkai"

    def test_empty_username_rejected(self):
        with pytest.raises(ValidationError):
            User(id="u1", username="", favorite_genre="refactoring")

    def test_token(self):
        token = Token(value="abc", favorite_genre="crime")
        assert token.model_dump() == {"value": "abc", "favorite_genre": "crime"}
