"""
Validation and invariant checks for catalog mutations.

All checks run before anything is written. A failing check raises
ValidationError with a readable message and the offending argument set,
so a rejected mutation never leaves partial state behind.

The title uniqueness check is a lookup followed later by an insert, not an
atomic operation. Two concurrent ``addBook`` calls can both pass it; the
unique index on ``books.title`` rejects the second insert, and the mutation
resolver reports that rejection as a ValidationError too.
"""

from typing import Any

from .database.store import CatalogStore
from .errors import ValidationError

MIN_TITLE_LENGTH = 2
MAX_TITLE_LENGTH = 500
MIN_AUTHOR_NAME_LENGTH = 4
MAX_AUTHOR_NAME_LENGTH = 200
MAX_USERNAME_LENGTH = 100

MISSING_FIELDS_MESSAGE = "The title, author and published fields must all have valid values"
TITLE_LENGTH_MESSAGE = (
    f"The length of the title must be at least {MIN_TITLE_LENGTH} characters long"
)
TITLE_TOO_LONG_MESSAGE = f"The title must not exceed {MAX_TITLE_LENGTH} characters"
TITLE_UNIQUE_MESSAGE = "Title must be unique"
AUTHOR_NAME_LENGTH_MESSAGE = (
    f"The length of the author's name must be at least {MIN_AUTHOR_NAME_LENGTH} characters long"
)
AUTHOR_NAME_TOO_LONG_MESSAGE = (
    f"The author's name must not exceed {MAX_AUTHOR_NAME_LENGTH} characters"
)
USERNAME_MESSAGE = f"The username must be between 1 and {MAX_USERNAME_LENGTH} characters long"


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def check_book_fields(args: dict[str, Any]) -> None:
    """Title, author and published must be present; title and author within length limits."""
    if any(_is_blank(args.get(field)) for field in ("title", "author", "published")):
        raise ValidationError(MISSING_FIELDS_MESSAGE, invalid_args=args)

    if len(args["title"]) < MIN_TITLE_LENGTH:
        raise ValidationError(TITLE_LENGTH_MESSAGE, invalid_args=args)
    if len(args["title"]) > MAX_TITLE_LENGTH:
        raise ValidationError(TITLE_TOO_LONG_MESSAGE, invalid_args=args)

    if len(args["author"]) > MAX_AUTHOR_NAME_LENGTH:
        raise ValidationError(AUTHOR_NAME_TOO_LONG_MESSAGE, invalid_args=args)


def check_title_unique(store: CatalogStore, args: dict[str, Any]) -> None:
    """Best-effort check that no book already has this title."""
    if store.find_book_by_title(args["title"]) is not None:
        raise ValidationError(TITLE_UNIQUE_MESSAGE, invalid_args={"title": args["title"]})


def check_author_name(name: str, args: dict[str, Any]) -> None:
    """A name must be long enough before an author is created for it."""
    if len(name) < MIN_AUTHOR_NAME_LENGTH:
        raise ValidationError(AUTHOR_NAME_LENGTH_MESSAGE, invalid_args=args)


def check_username(args: dict[str, Any]) -> None:
    """A username must fit the users table before it is stored."""
    username = args.get("username")
    if _is_blank(username) or len(username) > MAX_USERNAME_LENGTH:
        raise ValidationError(USERNAME_MESSAGE, invalid_args=args)


def validate_new_book(store: CatalogStore, args: dict[str, Any]) -> None:
    """Run every check that must pass before a book is created."""
    check_book_fields(args)
    check_title_unique(store, args)
