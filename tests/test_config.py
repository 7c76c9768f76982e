"""Tests for the Library Catalog configuration.

These tests cover:
1. Default values
2. Environment variable loading
3. Field validation
4. Secrets hidden from repr
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from library_catalog.config import CatalogConfig, get_config, reset_config


@pytest.fixture(autouse=True)
def _isolated(clean_env, tmp_path, monkeypatch):
    """Run each test from an empty directory so no .env file leaks in."""
    monkeypatch.chdir(tmp_path)
    reset_config()
    yield
    reset_config()


class TestCatalogConfig:
    """Test configuration behavior."""

    def test_default_configuration(self):
        config = CatalogConfig()

        assert config.server_name == "library-catalog"
        assert config.server_version == "0.1.0"
        assert config.database_path == Path("data/library.db").absolute()
        assert config.http_host == "127.0.0.1"
        assert config.http_port == 4000
        assert config.token_algorithm == "HS256"
        assert config.shared_password == "secret"
        assert config.debug is False
        assert config.log_level == "INFO"

    def test_environment_variable_loading(self, tmp_path):
        env_vars = {
            "LIBRARY_CATALOG_SERVER_NAME": "test-catalog",
            "LIBRARY_CATALOG_DATABASE_PATH": str(tmp_path / "env.db"),
            "LIBRARY_CATALOG_HTTP_PORT": "8081",
            "LIBRARY_CATALOG_TOKEN_SECRET": "an-env-provided-signing-secret",
            "LIBRARY_CATALOG_SHARED_PASSWORD": "hunter22",
            "LIBRARY_CATALOG_DEBUG": "true",
        }

        with patch.dict(os.environ, env_vars):
            config = CatalogConfig()

            assert config.server_name == "test-catalog"
            assert config.database_path == tmp_path / "env.db"
            assert config.http_port == 8081
            assert config.token_secret == "an-env-provided-signing-secret"
            assert config.shared_password == "hunter22"
            assert config.debug is True

    def test_dotenv_file_loading(self, tmp_path):
        """Settings can come from a .env file in the working directory."""
        (tmp_path / ".env").write_text("LIBRARY_CATALOG_LOG_LEVEL=WARNING\n")

        config = CatalogConfig()

        assert config.log_level == "WARNING"

    def test_server_name_validation(self):
        for name in ["catalog", "library-catalog", "books-2"]:
            assert CatalogConfig(server_name=name).server_name == name

        for name in ["Library_Catalog", "library catalog", "ab", "a" * 51]:
            with pytest.raises(ValidationError):
                CatalogConfig(server_name=name)

    def test_version_validation(self):
        for version in ["1.0.0", "0.1.0", "1.0.0-beta.1"]:
            assert CatalogConfig(server_version=version).server_version == version

        for version in ["1.0", "v1.0.0", "latest"]:
            with pytest.raises(ValidationError):
                CatalogConfig(server_version=version)

    def test_port_validation(self):
        assert CatalogConfig(http_port=8080).http_port == 8080

        with pytest.raises(ValidationError, match="reserved"):
            CatalogConfig(http_port=5432)
        with pytest.raises(ValidationError):
            CatalogConfig(http_port=1023)
        with pytest.raises(ValidationError):
            CatalogConfig(http_port=65536)

    def test_log_level_and_algorithm_validation(self):
        with pytest.raises(ValidationError):
            CatalogConfig(log_level="TRACE")
        with pytest.raises(ValidationError):
            CatalogConfig(token_algorithm="RS256")

    def test_short_token_secret_rejected(self):
        with pytest.raises(ValidationError):
            CatalogConfig(token_secret="short")

    def test_database_path_creates_parent(self, tmp_path):
        db_path = tmp_path / "subdir" / "catalog.db"
        config = CatalogConfig(database_path=db_path)

        assert db_path.parent.is_dir()
        assert config.database_path.is_absolute()
        assert config.database_url == f"sqlite:///{db_path}"

    def test_is_development(self):
        assert CatalogConfig(debug=False, log_level="INFO").is_development is False
        assert CatalogConfig(debug=True, log_level="INFO").is_development is True
        assert CatalogConfig(debug=False, log_level="DEBUG").is_development is True

    def test_secrets_hidden_from_repr(self):
        config = CatalogConfig(
            token_secret="very-private-signing-key",
            shared_password="not-for-logs",
        )

        config_str = repr(config)
        assert "very-private-signing-key" not in config_str
        assert "not-for-logs" not in config_str
        assert config.token_secret == "very-private-signing-key"

    def test_global_config_singleton(self):
        config1 = get_config()
        assert get_config() is config1

        reset_config()
        assert get_config() is not config1
