"""
Author model for the Library Catalog service.

Authors are created implicitly the first time a book names them and are
looked up by name afterwards. ``book_count`` is never stored; the query
resolver fills it in when listing authors.
"""

from pydantic import BaseModel, ConfigDict, Field


class Author(BaseModel):
    """An author as returned to API callers."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(
        ...,
        description="System-assigned identifier",
    )

    name: str = Field(
        ...,
        description="Full name of the author, unique across the catalog",
        min_length=1,
        max_length=200,
        examples=["Robert Martin", "Fyodor Dostoevsky"],
    )

    born: int | None = Field(
        None,
        description="Birth year, if known",
        examples=[1952, 1821],
    )

    book_count: int | None = Field(
        None,
        description="Number of catalog books by this author (derived)",
        ge=0,
    )

    def with_book_count(self, book_count: int) -> "Author":
        """Copy of this author carrying a derived book count."""
        return self.model_copy(update={"book_count": book_count})
