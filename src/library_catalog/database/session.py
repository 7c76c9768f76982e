"""
Database session management for the Library Catalog service.

Each GraphQL operation gets its own short-lived session, so unrelated
requests never share transaction state. Sessions are opened through
``DatabaseManager.session_scope()`` which commits on success and rolls
back on any error.
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ..config import get_config
from ..errors import DuplicateError, PersistenceError
from .schema import Base

logger = logging.getLogger(__name__)


class DatabaseManager:
    """
    Owns the engine and session factory for the catalog database.

    Created once at process start and disposed with ``close()`` at
    shutdown.
    """

    def __init__(self, database_url: str | None = None):
        """
        Initialize the database manager.

        Args:
            database_url: SQLAlchemy database URL. If None, uses the configured
                SQLite database file.
        """
        if database_url is None:
            config = get_config()
            database_url = config.database_url
            logger.info("Using SQLite database at: %s", config.database_path)

        self.database_url = database_url
        self._engine: Engine | None = None
        self._session_factory: sessionmaker | None = None

    @property
    def engine(self) -> Engine:
        """
        Get or create the database engine.

        SQLite engines share a single connection (StaticPool) so in-memory
        databases survive across sessions, and enforce foreign keys.
        """
        if self._engine is None:
            if self.database_url.startswith("sqlite"):
                self._engine = create_engine(
                    self.database_url,
                    poolclass=StaticPool,
                    connect_args={"check_same_thread": False},
                    echo=False,
                )

                @event.listens_for(self._engine, "connect")
                def set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ARG001
                    cursor = dbapi_connection.cursor()
                    cursor.execute("PRAGMA foreign_keys=ON")
                    cursor.close()
            else:
                self._engine = create_engine(
                    self.database_url,
                    pool_size=10,
                    max_overflow=20,
                    pool_pre_ping=True,  # Verify connections before use
                    echo=False,
                )

            logger.info("Database engine created: %s", self._engine.url)

        return self._engine

    @property
    def session_factory(self) -> sessionmaker:
        """Get or create the session factory."""
        if self._session_factory is None:
            self._session_factory = sessionmaker(
                bind=self.engine,
                autocommit=False,
                autoflush=False,
                expire_on_commit=False,  # Keep objects usable after commit
            )
        return self._session_factory

    def create_session(self) -> Session:
        """Create a new database session. The caller must close it."""
        return self.session_factory()

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """
        Provide a transactional scope for one request.

        ```python
        with db_manager.session_scope() as session:
            store = CatalogStore(session)
            store.count_books()
        ```
        """
        session = self.create_session()
        try:
            yield session
            session.commit()
            logger.debug("Database transaction committed successfully")
        except Exception:
            logger.debug("Rolling back database transaction")
            session.rollback()
            raise
        finally:
            session.close()

    def init_database(self, drop_existing: bool = False) -> None:
        """
        Create the catalog tables.

        Args:
            drop_existing: If True, drop all tables before creating
        """
        engine = self.engine

        if drop_existing:
            logger.warning("Dropping all existing tables...")
            Base.metadata.drop_all(bind=engine)

        logger.info("Creating database tables...")
        Base.metadata.create_all(bind=engine)
        logger.info("Database initialization complete")

    def verify_connection(self) -> bool:
        """Return True when a trivial query succeeds."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            logger.info("Database connection verified")
            return True
        except SQLAlchemyError:
            logger.exception("Database connection failed")
            return False

    def close(self) -> None:
        """Dispose the engine. Called when the server shuts down."""
        if self._engine:
            self._engine.dispose()
            logger.info("Database engine disposed")
        self._engine = None
        self._session_factory = None


def safe_commit(session: Session, operation: str) -> None:
    """
    Commit a session, translating store failures into catalog errors.

    Args:
        session: The database session
        operation: Description of the operation (for error messages)

    Raises:
        DuplicateError: If a unique constraint rejected the write
        PersistenceError: On any other database failure
    """
    try:
        session.commit()
    except IntegrityError as e:
        session.rollback()
        message = f"Database operation '{operation}' failed: {e.orig}"
        if "unique" in str(e.orig).lower():
            raise DuplicateError(message) from e
        raise PersistenceError(message) from e
    except SQLAlchemyError as e:
        session.rollback()
        raise PersistenceError(f"Database operation '{operation}' failed: {e!s}") from e
