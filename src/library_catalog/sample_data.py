"""
Sample catalog used to bootstrap a development database.

Authors and books from the classic library exercise. Loading goes through
the CatalogStore so the same unique indexes apply; entries that already
exist are skipped, which makes loading repeatable.
"""

import logging

from .database.store import CatalogStore

logger = logging.getLogger(__name__)

SAMPLE_AUTHORS: list[dict] = [
    {"name": "Robert Martin", "born": 1952},
    {"name": "Martin Fowler", "born": 1963},
    {"name": "Fyodor Dostoevsky", "born": 1821},
    {"name": "Joshua Kerievsky"},
    {"name": "Sandi Metz"},
]

SAMPLE_BOOKS: list[dict] = [
    {
        "title": "Clean Code",
        "published": 2008,
        "author": "Robert Martin",
        "genres": ["refactoring"],
    },
    {
        "title": "Agile software development",
        "published": 2002,
        "author": "Robert Martin",
        "genres": ["agile", "patterns", "design"],
    },
    {
        "title": "Refactoring, edition 2",
        "published": 2018,
        "author": "Martin Fowler",
        "genres": ["refactoring"],
    },
    {
        "title": "Refactoring to patterns",
        "published": 2008,
        "author": "Joshua Kerievsky",
        "genres": ["refactoring", "patterns"],
    },
    {
        "title": "Practical Object-Oriented Design, An Agile Primer Using Ruby",
        "published": 2012,
        "author": "Sandi Metz",
        "genres": ["refactoring", "design"],
    },
    {
        "title": "Crime and punishment",
        "published": 1866,
        "author": "Fyodor Dostoevsky",
        "genres": ["classic", "crime"],
    },
    {
        "title": "The Demon",
        "published": 1872,
        "author": "Fyodor Dostoevsky",
        "genres": ["classic", "revolution"],
    },
]


def load_sample_data(store: CatalogStore) -> tuple[int, int]:
    """
    Insert the sample authors and books that are not already present.

    Returns:
        (authors created, books created)
    """
    authors_created = 0
    for entry in SAMPLE_AUTHORS:
        if store.find_author_by_name(entry["name"]) is None:
            store.insert_author(entry["name"], entry.get("born"))
            authors_created += 1

    books_created = 0
    for entry in SAMPLE_BOOKS:
        if store.find_book_by_title(entry["title"]) is not None:
            continue
        author = store.find_author_by_name(entry["author"])
        store.insert_book(entry["title"], entry["published"], author, entry["genres"])
        books_created += 1

    logger.info("Sample data: %d authors and %d books created", authors_created, books_created)
    return authors_created, books_created
