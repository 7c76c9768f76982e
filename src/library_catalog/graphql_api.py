"""
GraphQL schema for the Library Catalog service.

Strawberry types mirror the Pydantic models, and every field resolver
delegates to the resolution engine:

- Query fields -> QueryResolver
- Mutation fields -> MutationResolver
- Subscription ``bookAdded`` -> NotificationHub stream

Each field resolver opens its own database session through the request
context, so concurrent requests never share one. The caller is resolved
from the bearer header only by the fields that need it, which means a bad
token fails ``me``, ``addBook`` and ``editAuthor`` but not public reads.
"""

import logging
from collections.abc import AsyncGenerator, Iterator
from contextlib import aclosing, contextmanager
from dataclasses import dataclass

import strawberry
from strawberry.types import Info

from .config import CatalogConfig
from .database.session import DatabaseManager
from .database.store import CatalogStore
from .identity import TokenService, resolve_caller
from .models import Author, Book, Token, User
from .notifications import CatalogEvent, NotificationHub
from .resolvers import MutationResolver, QueryResolver

logger = logging.getLogger(__name__)


# =============================================================================
# REQUEST CONTEXT
# =============================================================================


@dataclass
class CatalogContext:
    """Per-request context handed to every resolver as ``info.context``."""

    db: DatabaseManager
    hub: NotificationHub
    tokens: TokenService
    config: CatalogConfig
    authorization: str | None = None

    @contextmanager
    def store(self) -> Iterator[CatalogStore]:
        with self.db.session_scope() as session:
            yield CatalogStore(session)

    def current_user(self, store: CatalogStore) -> User | None:
        return resolve_caller(self.authorization, store, self.tokens)

    def mutations(self, store: CatalogStore) -> MutationResolver:
        return MutationResolver(store, self.hub, self.tokens, self.config)


# =============================================================================
# OUTPUT TYPES
# =============================================================================


@strawberry.type(name="Author")
class AuthorType:
    id: strawberry.ID
    name: str
    born: int | None = None
    book_count: int | None = None

    @classmethod
    def from_model(cls, author: Author) -> "AuthorType":
        return cls(
            id=strawberry.ID(author.id),
            name=author.name,
            born=author.born,
            book_count=author.book_count,
        )


@strawberry.type(name="Book")
class BookType:
    id: strawberry.ID
    title: str
    published: int
    author: AuthorType
    genres: list[str]

    @classmethod
    def from_model(cls, book: Book) -> "BookType":
        return cls(
            id=strawberry.ID(book.id),
            title=book.title,
            published=book.published,
            author=AuthorType.from_model(book.author),
            genres=list(book.genres),
        )


@strawberry.type(name="User")
class UserType:
    id: strawberry.ID
    username: str
    favorite_genre: str

    @classmethod
    def from_model(cls, user: User) -> "UserType":
        return cls(
            id=strawberry.ID(user.id),
            username=user.username,
            favorite_genre=user.favorite_genre,
        )


@strawberry.type(name="Token")
class TokenType:
    value: str
    favorite_genre: str

    @classmethod
    def from_model(cls, token: Token) -> "TokenType":
        return cls(value=token.value, favorite_genre=token.favorite_genre)


# =============================================================================
# OPERATIONS
# =============================================================================


@strawberry.type
class Query:
    @strawberry.field
    async def book_count(self, info: Info) -> int:
        with info.context.store() as store:
            return await QueryResolver(store).book_count()

    @strawberry.field
    async def author_count(self, info: Info) -> int:
        with info.context.store() as store:
            return await QueryResolver(store).author_count()

    @strawberry.field
    async def all_books(
        self, info: Info, author: str | None = None, genre: str | None = None
    ) -> list[BookType]:
        with info.context.store() as store:
            books = await QueryResolver(store).all_books(author=author, genre=genre)
        return [BookType.from_model(book) for book in books]

    @strawberry.field
    async def all_authors(self, info: Info) -> list[AuthorType]:
        with info.context.store() as store:
            authors = await QueryResolver(store).all_authors()
        return [AuthorType.from_model(author) for author in authors]

    @strawberry.field
    async def me(self, info: Info) -> UserType | None:
        with info.context.store() as store:
            user = await QueryResolver(store).me(info.context.current_user(store))
        return UserType.from_model(user) if user else None


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def add_book(
        self,
        info: Info,
        title: str,
        author: str,
        published: int,
        genres: list[str | None] | None = None,
    ) -> BookType | None:
        # Null list entries carry no tag
        tags = [genre for genre in genres if genre is not None] if genres is not None else None
        with info.context.store() as store:
            book = await info.context.mutations(store).add_book(
                info.context.current_user(store), title, author, published, tags
            )
        return BookType.from_model(book)

    @strawberry.mutation
    async def edit_author(self, info: Info, name: str, set_born_to: int) -> AuthorType | None:
        with info.context.store() as store:
            author = await info.context.mutations(store).edit_author(
                info.context.current_user(store), name, set_born_to
            )
        return AuthorType.from_model(author) if author else None

    @strawberry.mutation
    async def create_user(self, info: Info, username: str, favorite_genre: str) -> UserType | None:
        with info.context.store() as store:
            user = await info.context.mutations(store).create_user(username, favorite_genre)
        return UserType.from_model(user)

    @strawberry.mutation
    async def login(self, info: Info, username: str, password: str) -> TokenType | None:
        with info.context.store() as store:
            token = await info.context.mutations(store).login(username, password)
        return TokenType.from_model(token)


@strawberry.type
class Subscription:
    @strawberry.subscription
    async def book_added(self, info: Info) -> AsyncGenerator[BookType, None]:
        """One event per successful addBook, for as long as the client stays."""
        hub: NotificationHub = info.context.hub
        async with aclosing(hub.subscribe(CatalogEvent.BOOK_ADDED.value)) as stream:
            async for book in stream:
                yield BookType.from_model(book)


schema = strawberry.Schema(query=Query, mutation=Mutation, subscription=Subscription)
