"""
Book model for the Library Catalog service.

A book is always handed to callers with its full author record attached,
never just the author's identifier.
"""

from pydantic import BaseModel, ConfigDict, Field

from .author import Author


class Book(BaseModel):
    """A catalog book with its resolved author."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(
        ...,
        description="System-assigned identifier",
    )

    title: str = Field(
        ...,
        description="Title of the book, unique across the catalog",
        min_length=2,
        max_length=500,
        examples=["Clean Code", "Crime and Punishment"],
    )

    published: int = Field(
        ...,
        description="Year the book was published",
        examples=[2008, 1866],
    )

    genres: list[str] = Field(
        default_factory=list,
        description="Ordered genre tags",
        examples=[["refactoring", "design"], ["classic", "crime"]],
    )

    author: Author = Field(
        ...,
        description="The book's author",
    )

    def has_genre(self, genre: str) -> bool:
        return genre in self.genres
