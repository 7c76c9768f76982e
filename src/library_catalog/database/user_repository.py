"""
User repository implementation for the Library Catalog service.
"""

from pydantic import BaseModel

from ..models.user import User as UserModel
from .repository import BaseRepository
from .schema import User as UserDB


class UserCreateSchema(BaseModel):
    """Schema for creating a new user."""

    username: str
    favorite_genre: str


class UserRepository(BaseRepository[UserDB, UserModel]):
    """Repository for user data access."""

    @property
    def model_class(self):
        return UserDB

    @property
    def response_schema(self):
        return UserModel

    def find_by_username(self, username: str) -> UserModel | None:
        db_user = self._first(UserDB.username == username)
        if db_user is None:
            return None
        return self._to_response_model(db_user)

    def create(self, data: UserCreateSchema) -> UserModel:
        """
        Create a new user.

        Raises:
            DuplicateError: If the username is taken
        """
        db_user = self._add(UserDB(**data.model_dump()), "create user")
        return self._to_response_model(db_user)
