"""
Repository pattern implementation for the Library Catalog service.

Repositories keep SQLAlchemy out of the resolvers: every method takes or
returns Pydantic models, and every failure surfaces as a catalog
PersistenceError rather than a driver exception.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..errors import PersistenceError
from .schema import Base
from .session import safe_commit

ModelType = TypeVar("ModelType", bound=Base)
ResponseSchemaType = TypeVar("ResponseSchemaType", bound=BaseModel)


class BaseRepository(ABC, Generic[ModelType, ResponseSchemaType]):
    """
    Abstract base repository providing the reads shared by every table.

    Writes go through ``_add`` so that constraint violations are translated
    in a single place.
    """

    def __init__(self, session: Session):
        """Initialize repository with database session."""
        self.session = session

    @property
    @abstractmethod
    def model_class(self) -> type[ModelType]:
        """Return the SQLAlchemy model class."""

    @property
    @abstractmethod
    def response_schema(self) -> type[ResponseSchemaType]:
        """Return the Pydantic response schema."""

    def _to_response_model(self, db_obj: ModelType) -> ResponseSchemaType:
        """Convert database model to Pydantic response model."""
        return self.response_schema.model_validate(db_obj, from_attributes=True)

    def _query(self, statement, error_msg: str):
        """Execute a statement, wrapping driver errors."""
        try:
            return self.session.execute(statement)
        except SQLAlchemyError as e:
            raise PersistenceError(f"{error_msg}: {e!s}") from e

    def _first(self, *criteria) -> ModelType | None:
        query = select(self.model_class).where(*criteria)
        result = self._query(query, f"Failed to get {self.model_class.__name__}")
        return result.unique().scalars().first()

    def _add(self, db_obj: ModelType, operation: str) -> ModelType:
        """Persist a new row and refresh it from the store."""
        self.session.add(db_obj)
        safe_commit(self.session, operation)
        self.session.refresh(db_obj)
        return db_obj

    def get_by_id(self, id: str) -> ResponseSchemaType | None:
        """
        Get entity by ID.

        Returns:
            Pydantic model or None if not found
        """
        db_obj = self._first(self.model_class.id == id)
        if db_obj is None:
            return None
        return self._to_response_model(db_obj)

    def get_all(self) -> list[ResponseSchemaType]:
        """Every row of the table, oldest first."""
        query = select(self.model_class).order_by(self.model_class.created_at)
        results = self._query(query, "Failed to get all results").unique().scalars().all()
        return [self._to_response_model(item) for item in results]

    def count(self) -> int:
        query = select(func.count()).select_from(self.model_class)
        return self._query(query, "Failed to get total count").scalar() or 0
