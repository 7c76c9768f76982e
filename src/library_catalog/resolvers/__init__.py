"""
Resolution engine: maps typed catalog operations onto store reads/writes.

- QueryResolver: counts, book listings, authors with book counts, ``me``
- MutationResolver: addBook, editAuthor, createUser, login
"""

from .mutations import MutationResolver
from .queries import QueryResolver

__all__ = [
    "MutationResolver",
    "QueryResolver",
]
