"""Library Catalog service - HTTP/WebSocket entry point.

Serves the GraphQL schema as an ASGI application:
- Queries and mutations over HTTP POST (GraphiQL on GET when enabled)
- The ``bookAdded`` subscription over WebSocket (graphql-transport-ws and
  graphql-ws protocols)

Process lifecycle:
1. Configure logging and load configuration
2. Create the database manager, tables, notification hub and token service
3. Run uvicorn until interrupted
4. Close the hub (ending open subscriptions) and dispose the engine
"""

import logging
import sys
from typing import Any

import uvicorn
from strawberry.asgi import GraphQL

from .config import CatalogConfig, get_config
from .database.session import DatabaseManager
from .graphql_api import CatalogContext, schema
from .identity import TokenService
from .notifications import NotificationHub

logger = logging.getLogger(__name__)


class CatalogGraphQL(GraphQL):
    """Strawberry ASGI app that builds a CatalogContext per request."""

    def __init__(
        self,
        config: CatalogConfig,
        db: DatabaseManager,
        hub: NotificationHub,
        tokens: TokenService,
    ):
        super().__init__(schema, graphql_ide="graphiql" if config.graphiql else None)
        self.config = config
        self.db = db
        self.hub = hub
        self.tokens = tokens

    async def get_context(self, request: Any, response: Any = None) -> CatalogContext:
        return CatalogContext(
            db=self.db,
            hub=self.hub,
            tokens=self.tokens,
            config=self.config,
            authorization=request.headers.get("authorization"),
        )


def create_app(
    config: CatalogConfig | None = None,
    db: DatabaseManager | None = None,
    hub: NotificationHub | None = None,
) -> CatalogGraphQL:
    """
    Build the ASGI application.

    Collaborators not supplied are created from configuration; the caller
    owns their shutdown (see ``main``).
    """
    config = config or get_config()
    db = db or DatabaseManager(config.database_url)
    hub = hub or NotificationHub()
    return CatalogGraphQL(config, db, hub, TokenService.from_config(config))


def configure_logging(config: CatalogConfig) -> None:
    logging.basicConfig(
        level=logging.DEBUG if config.debug else config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    if not config.is_development:
        logging.getLogger("strawberry").setLevel(logging.WARNING)


def main() -> None:
    """Entry point for the ``library-catalog`` console script."""
    config = get_config()
    configure_logging(config)

    logger.info("=" * 60)
    logger.info("Library Catalog")
    logger.info("Version: %s", config.server_version)
    logger.info("Listening on: http://%s:%d", config.http_host, config.http_port)
    logger.info("Debug Mode: %s", config.debug)
    logger.info("=" * 60)

    db = DatabaseManager(config.database_url)
    hub = NotificationHub()
    try:
        db.init_database()
        app = create_app(config, db, hub)
        uvicorn.run(
            app,
            host=config.http_host,
            port=config.http_port,
            log_level=config.log_level.lower(),
        )
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception:
        logger.exception("Failed to start Library Catalog server")
        sys.exit(1)
    finally:
        hub.close()
        db.close()
        logger.info("Shutdown complete")


if __name__ == "__main__":
    main()
