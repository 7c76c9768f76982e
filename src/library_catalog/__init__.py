"""
Library Catalog Package.

A catalog of books and authors behind a GraphQL API, with token-based
access control on writes and a live ``bookAdded`` subscription.

Key Components:
- models: Pydantic models returned by the store and resolvers
- database: SQLAlchemy schema, sessions, repositories and the CatalogStore
- validation: checks run before any mutation writes
- resolvers: query and mutation resolution engine
- notifications: in-process publish/subscribe hub
- identity: bearer token issue/verify and caller resolution
- graphql_api / server: Strawberry schema and ASGI entry point
"""

__version__ = "0.1.0"

from . import database

__all__ = [
    "__version__",
    "database",
]
