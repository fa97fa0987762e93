"""Core functionality for sqlsanitize."""

from sqlsanitize.core.config import check_env_file, get_database_config
from sqlsanitize.core.exceptions import (
    ActionError,
    ConfigError,
    DatabaseError,
    ProviderError,
    SanitizeError,
    ValidationError,
)
from sqlsanitize.core.registry import HandlerRegistry, Phase, handler_name

__all__ = [
    "check_env_file",
    "get_database_config",
    "SanitizeError",
    "ConfigError",
    "ProviderError",
    "ActionError",
    "DatabaseError",
    "ValidationError",
    "HandlerRegistry",
    "Phase",
    "handler_name",
]
