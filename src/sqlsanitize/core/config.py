"""Configuration utilities for database access."""

import os

import dotenv

from ..models.config import DEFAULT_USER_TABLE, DatabaseConfig
from .exceptions import ConfigError

DB_URL_ENV = "SQLSANITIZE_DB_URL"
TABLE_PREFIX_ENV = "SQLSANITIZE_TABLE_PREFIX"
USER_TABLE_ENV = "SQLSANITIZE_USER_TABLE"


def check_env_file(env_path: str = ".env") -> None:
    """Load a .env file from the working directory when present."""
    if os.path.exists(env_path):
        dotenv.load_dotenv(env_path)


def get_database_config(db_url: str = "", db_prefix: bool = False) -> DatabaseConfig:
    """Resolve the database configuration for a sanitize run.

    The --db-url option wins over SQLSANITIZE_DB_URL.

    Args:
        db_url: URL given on the command line, empty to use the environment
        db_prefix: Whether {table} placeholders get the table prefix

    Returns:
        DatabaseConfig: Resolved configuration

    Raises:
        ConfigError: If no database URL is configured
    """
    check_env_file()

    url = (db_url or os.getenv(DB_URL_ENV, "")).strip()
    if not url:
        raise ConfigError(
            "No database URL configured",
            f"Pass --db-url or set {DB_URL_ENV}",
        )

    user_table = os.getenv(USER_TABLE_ENV, "").strip() or DEFAULT_USER_TABLE

    return DatabaseConfig(
        url=url,
        table_prefix=os.getenv(TABLE_PREFIX_ENV, "").strip(),
        use_prefix=db_prefix,
        user_table=user_table,
    )
