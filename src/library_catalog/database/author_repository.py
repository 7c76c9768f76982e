"""
Author repository implementation for the Library Catalog service.

Authors are found by name, since a book's author argument is a name, and
only their birth year is ever updated.
"""

from pydantic import BaseModel

from ..models.author import Author as AuthorModel
from .repository import BaseRepository
from .schema import Author as AuthorDB
from .session import safe_commit


class AuthorCreateSchema(BaseModel):
    """Schema for creating a new author."""

    name: str
    born: int | None = None


class AuthorRepository(BaseRepository[AuthorDB, AuthorModel]):
    """Repository for author data access."""

    @property
    def model_class(self):
        return AuthorDB

    @property
    def response_schema(self):
        return AuthorModel

    def find_by_name(self, name: str) -> AuthorModel | None:
        """
        Find an author by exact name.

        Args:
            name: The author's full name

        Returns:
            Author model or None if no author has that name
        """
        db_author = self._first(AuthorDB.name == name)
        if db_author is None:
            return None
        return self._to_response_model(db_author)

    def create(self, data: AuthorCreateSchema) -> AuthorModel:
        """
        Create a new author.

        Raises:
            DuplicateError: If an author with the same name already exists
        """
        db_author = self._add(AuthorDB(**data.model_dump()), "create author")
        return self._to_response_model(db_author)

    def update_born(self, author_id: str, born: int) -> AuthorModel | None:
        """
        Set an author's birth year and nothing else.

        Returns:
            The updated author, or None if the author no longer exists
        """
        db_author = self._first(AuthorDB.id == author_id)
        if db_author is None:
            return None

        db_author.born = born
        safe_commit(self.session, "update author")
        self.session.refresh(db_author)
        return self._to_response_model(db_author)
