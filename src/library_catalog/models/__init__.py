"""
Library Catalog Models.

Pydantic models returned by the store adapter and the resolvers:
- Author: catalog authors, with an optional derived book count
- Book: catalog books with their author resolved
- User / Token: identities and login results
"""

from .author import Author
from .book import Book
from .user import Token, User

__all__ = [
    "Author",
    "Book",
    "Token",
    "User",
]
