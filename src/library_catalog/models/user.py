"""
User and token models for the Library Catalog service.

Users exist only to anchor bearer tokens; they own no catalog entries.
"""

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """A registered user."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="System-assigned identifier")

    username: str = Field(
        ...,
        description="Unique login name",
        min_length=1,
        max_length=100,
        examples=["mluukkai", "root"],
    )

    favorite_genre: str = Field(
        ...,
        description="Genre used for personal recommendations",
        examples=["refactoring", "crime"],
    )


class Token(BaseModel):
    """Result of a successful login."""

    value: str = Field(..., description="Signed bearer token")
    favorite_genre: str = Field(..., description="The user's favorite genre")
