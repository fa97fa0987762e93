"""Sanitize operations and the built-in sanitizers."""

from ..core.registry import HandlerRegistry
from .base import BaseSanitizer, DatabaseFactory, database_for_options
from .sanitize_ops import SanitizeReport, execute_sanitize_actions, run_sql_sanitize
from .session_ops import SessionSanitizer
from .user_fields_ops import UserFieldsSanitizer, find_user_fields
from .user_table_ops import UserTableSanitizer, expand_email_pattern

BUILTIN_SANITIZERS: tuple[type[BaseSanitizer], ...] = (
    UserTableSanitizer,
    UserFieldsSanitizer,
    SessionSanitizer,
)


def register_builtin_sanitizers(
    registry: HandlerRegistry, database_factory: DatabaseFactory | None = None
) -> HandlerRegistry:
    """Register the bundled sanitizers, in a fixed order.

    Args:
        registry: Registry to populate
        database_factory: Opens the database for an options record

    Returns:
        HandlerRegistry: The same registry, for chaining
    """
    for sanitizer_class in BUILTIN_SANITIZERS:
        sanitizer_class(database_factory).register(registry)
    return registry


__all__ = [
    "BaseSanitizer",
    "DatabaseFactory",
    "database_for_options",
    "SanitizeReport",
    "execute_sanitize_actions",
    "run_sql_sanitize",
    "SessionSanitizer",
    "UserFieldsSanitizer",
    "UserTableSanitizer",
    "find_user_fields",
    "expand_email_pattern",
    "BUILTIN_SANITIZERS",
    "register_builtin_sanitizers",
]
