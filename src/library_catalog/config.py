"""Configuration management for the Library Catalog service.

Settings are read from the environment (``LIBRARY_CATALOG_`` prefix) or a
local ``.env`` file and validated with Pydantic v2:
1. Service metadata - name and version reported by the server
2. Persistence - where the catalog database lives
3. HTTP transport - where the GraphQL endpoint listens
4. Security - token signing key and the shared login password
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogConfig(BaseSettings):
    """Library Catalog service configuration.

    Every field can be overridden with an environment variable such as
    ``LIBRARY_CATALOG_DATABASE_PATH`` or ``LIBRARY_CATALOG_TOKEN_SECRET``.
    """

    model_config = SettingsConfigDict(
        # Use LIBRARY_CATALOG_ prefix for all env vars
        env_prefix="LIBRARY_CATALOG_",
        # Load from .env file if present
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Service Metadata ===

    server_name: str = Field(
        default="library-catalog",
        description="Service name reported in logs",
        pattern=r"^[a-z0-9-]+$",
    )

    server_version: str = Field(
        default="0.1.0",
        description="Service version",
        pattern=r"^\d+\.\d+\.\d+(-[a-zA-Z0-9.]+)?$",
    )

    # === Database Configuration ===

    database_path: Path = Field(
        default=Path("data/library.db"),
        description="SQLite database file path",
    )

    # === HTTP Transport ===

    http_host: str = Field(
        default="127.0.0.1",
        description="Host the GraphQL endpoint binds to",
    )

    http_port: int = Field(
        default=4000,
        description="Port the GraphQL endpoint binds to",
        ge=1024,  # Avoid privileged ports
        le=65535,
    )

    graphiql: bool = Field(
        default=True,
        description="Serve the GraphiQL explorer on GET requests",
    )

    # === Security Configuration ===

    token_secret: str = Field(
        default="library-catalog-development-signing-key",
        description="Key used to sign and verify bearer tokens",
        min_length=8,
        repr=False,  # Hide from string representation
    )

    token_algorithm: str = Field(
        default="HS256",
        description="JWT signing algorithm",
        pattern=r"^HS(256|384|512)$",
    )

    shared_password: str = Field(
        default="secret",
        description="Password accepted by login for every user",
        min_length=1,
        repr=False,
    )

    # === Development Configuration ===

    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
    )

    # === Validation Methods ===

    @field_validator("database_path")
    @classmethod
    def validate_database_path(cls, v: Path) -> Path:
        """Ensure the database directory exists."""
        abs_path = v.absolute()
        abs_path.parent.mkdir(parents=True, exist_ok=True)

        if not abs_path.parent.is_dir():
            raise ValueError(f"Database directory {abs_path.parent} is not accessible")

        return abs_path

    @field_validator("server_name")
    @classmethod
    def validate_server_name(cls, v: str) -> str:
        if len(v) < 3:
            raise ValueError("Server name must be at least 3 characters")
        if len(v) > 50:
            raise ValueError("Server name must not exceed 50 characters")
        return v

    @field_validator("http_port")
    @classmethod
    def validate_http_port(cls, v: int) -> int:
        """Reject ports that usually belong to other services."""
        reserved_ports = {3306, 5432, 6379, 27017}
        if v in reserved_ports:
            raise ValueError(f"Port {v} is commonly reserved, choose another")
        return v

    # === Computed Properties ===

    @property
    def is_development(self) -> bool:
        return self.debug or self.log_level == "DEBUG"

    @property
    def database_url(self) -> str:
        """SQLAlchemy URL for the configured database file."""
        return f"sqlite:///{self.database_path}"


# === Global Configuration Instance ===


class _ConfigStore:
    """Internal storage for configuration singleton."""

    _instance: CatalogConfig | None = None


def get_config() -> CatalogConfig:
    """Get or create the process-wide configuration instance."""
    if _ConfigStore._instance is None:  # type: ignore[reportPrivateUsage]
        _ConfigStore._instance = CatalogConfig()  # type: ignore[reportPrivateUsage]
    return _ConfigStore._instance  # type: ignore[reportPrivateUsage]


def reset_config() -> None:
    """Reset configuration (useful for testing)."""
    _ConfigStore._instance = None  # type: ignore[reportPrivateUsage]
