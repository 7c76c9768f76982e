"""Test configuration and fixtures for the Library Catalog service.

Every test gets:
1. An isolated in-memory database - a fresh schema per test
2. An explicit configuration - no dependence on the developer's environment
3. Its own NotificationHub - closed at teardown so no stream outlives a test
"""

import os
from collections.abc import Generator
from pathlib import Path

import pytest
from sqlalchemy.orm import Session

from library_catalog.config import CatalogConfig, reset_config
from library_catalog.database import CatalogStore, DatabaseManager
from library_catalog.graphql_api import CatalogContext
from library_catalog.identity import TokenService
from library_catalog.models import User
from library_catalog.notifications import NotificationHub
from library_catalog.resolvers import MutationResolver, QueryResolver

TEST_SECRET = "test-signing-key-that-is-long-enough-for-hs256"
TEST_PASSWORD = "secret"


# === Configuration Fixtures ===


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Remove LIBRARY_CATALOG_* variables for the duration of a test."""
    original_env = os.environ.copy()

    for key in list(os.environ.keys()):
        if key.upper().startswith("LIBRARY_CATALOG_"):
            del os.environ[key]

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def test_config(tmp_path: Path, clean_env) -> Generator[CatalogConfig, None, None]:
    """Configuration pointing at a temporary database file."""
    reset_config()

    config = CatalogConfig(
        server_name="test-library-catalog",
        database_path=tmp_path / "test_library.db",
        token_secret=TEST_SECRET,
        shared_password=TEST_PASSWORD,
        debug=True,
        log_level="DEBUG",
    )

    yield config

    reset_config()


# === Database Fixtures ===


@pytest.fixture
def db_manager() -> Generator[DatabaseManager, None, None]:
    """In-memory database with the catalog schema created."""
    manager = DatabaseManager("sqlite:///:memory:")
    manager.init_database()
    yield manager
    manager.close()


@pytest.fixture
def db_session(db_manager: DatabaseManager) -> Generator[Session, None, None]:
    session = db_manager.create_session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store(db_session: Session) -> CatalogStore:
    return CatalogStore(db_session)


# === Engine Fixtures ===


@pytest.fixture
def hub() -> Generator[NotificationHub, None, None]:
    notification_hub = NotificationHub()
    yield notification_hub
    notification_hub.close()


@pytest.fixture
def tokens() -> TokenService:
    return TokenService(TEST_SECRET)


@pytest.fixture
def queries(store: CatalogStore) -> QueryResolver:
    return QueryResolver(store)


@pytest.fixture
def mutations(
    store: CatalogStore,
    hub: NotificationHub,
    tokens: TokenService,
    test_config: CatalogConfig,
) -> MutationResolver:
    return MutationResolver(store, hub, tokens, test_config)


@pytest.fixture
def user(store: CatalogStore) -> User:
    """A registered user acting as the authenticated caller."""
    return store.insert_user("mluukkai", "refactoring")


@pytest.fixture
def make_context(db_manager, hub, tokens, test_config):
    """Build GraphQL request contexts, optionally with an Authorization header."""

    def _make(authorization: str | None = None) -> CatalogContext:
        return CatalogContext(
            db=db_manager,
            hub=hub,
            tokens=tokens,
            config=test_config,
            authorization=authorization,
        )

    return _make
