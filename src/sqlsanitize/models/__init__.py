"""Data models for database sanitization."""

from sqlsanitize.models.config import DEFAULT_USER_TABLE, DatabaseConfig
from sqlsanitize.models.messages import ConfirmationMessages
from sqlsanitize.models.options import (
    DEFAULT_SANITIZE_EMAIL,
    DEFAULT_SANITIZE_PASSWORD,
    SANITIZE_SKIP,
    OperationOptions,
    parse_whitelist_fields,
)

__all__ = [
    # Option models
    "OperationOptions",
    "parse_whitelist_fields",
    "DEFAULT_SANITIZE_EMAIL",
    "DEFAULT_SANITIZE_PASSWORD",
    "SANITIZE_SKIP",
    # Preview models
    "ConfirmationMessages",
    # Config models
    "DatabaseConfig",
    "DEFAULT_USER_TABLE",
]
