"""Configuration data models for database access."""

from dataclasses import dataclass
from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

DEFAULT_USER_TABLE = "users_field_data"


@dataclass(frozen=True)
class DatabaseConfig:
    """Configuration for the database being sanitized."""

    url: str
    table_prefix: str = ""
    use_prefix: bool = False
    user_table: str = DEFAULT_USER_TABLE

    def table(self, name: str) -> str:
        """Get the physical table name for a logical table.

        Args:
            name: Logical table name, e.g. "sessions"

        Returns:
            str: Table name with the prefix applied when prefixing is enabled
        """
        if self.use_prefix and self.table_prefix:
            return f"{self.table_prefix}{name}"
        return name

    def redacted_url(self) -> str:
        """Get the URL with any password hidden."""
        try:
            return make_url(self.url).render_as_string(hide_password=True)
        except ArgumentError:
            return "***REDACTED***"

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary format.

        Returns:
            Dict[str, Any]: Configuration as dictionary
        """
        return {
            "url": self.redacted_url(),
            "table_prefix": self.table_prefix,
            "use_prefix": self.use_prefix,
            "user_table": self.user_table,
        }
