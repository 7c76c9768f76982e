"""
Error taxonomy for the Library Catalog service.

Every failure the resolution engine surfaces derives from CatalogError and
carries a machine-readable ``code``. The GraphQL layer copies ``code`` (and
the offending arguments, when known) into the error's ``extensions`` so
clients can tell a rejected input from a missing credential.
"""

from typing import Any


class CatalogError(Exception):
    """Base class for all catalog errors."""

    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str, invalid_args: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.invalid_args = invalid_args

    @property
    def extensions(self) -> dict[str, Any]:
        """Extensions payload for the GraphQL error envelope.

        graphql-core copies a dict-valued ``extensions`` attribute of the
        original exception onto the reported error.
        """
        extensions: dict[str, Any] = {"code": self.code}
        if self.invalid_args is not None:
            extensions["invalidArgs"] = self.invalid_args
        return extensions


class ValidationError(CatalogError):
    """Bad or duplicate input: presence, length, uniqueness, credentials."""

    code = "BAD_USER_INPUT"


class AuthenticationError(CatalogError):
    """A write was attempted without a current user."""

    code = "UNAUTHENTICATED"

    def __init__(self, message: str = "not authenticated"):
        super().__init__(message)


class TokenError(CatalogError):
    """A bearer credential is malformed or its signature does not verify."""

    code = "INVALID_TOKEN"


class PersistenceError(CatalogError):
    """The underlying store rejected an operation."""

    code = "PERSISTENCE_ERROR"


class DuplicateError(PersistenceError):
    """A write violated a unique constraint in the store."""
