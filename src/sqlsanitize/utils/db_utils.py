"""SQLAlchemy helpers used by the built-in sanitizers."""

import re
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from ..core.exceptions import DatabaseError
from ..models.config import DatabaseConfig
from .logging_utils import get_logger

logger = get_logger(__name__)

_TABLE_PLACEHOLDER = re.compile(r"\{([A-Za-z0-9_]+)\}")


def prefix_tables(query: str, config: DatabaseConfig) -> str:
    """Resolve {table} placeholders in a query.

    With prefixing enabled the configured prefix is prepended to each table
    name; otherwise the braces are simply removed.

    Args:
        query: SQL containing placeholders, e.g. "DELETE FROM {sessions}"
        config: Database configuration

    Returns:
        str: SQL with physical table names
    """
    return _TABLE_PLACEHOLDER.sub(lambda match: config.table(match.group(1)), query)


class SanitizeDatabase:
    """Thin wrapper around a SQLAlchemy engine for sanitize queries."""

    def __init__(self, config: DatabaseConfig, engine: Engine | None = None) -> None:
        self.config = config
        self._engine = engine

    @property
    def engine(self) -> Engine:
        """Engine for the configured URL, created on first use."""
        if self._engine is None:
            try:
                self._engine = create_engine(self.config.url)
            except (SQLAlchemyError, ValueError) as e:
                raise DatabaseError(
                    "Could not create database engine",
                    details=f"{self.config.redacted_url()}: {e}",
                ) from e
        return self._engine

    def table(self, name: str) -> str:
        """Physical name of a logical table."""
        return self.config.table(name)

    def has_table(self, name: str) -> bool:
        """Check whether a logical table exists."""
        try:
            return inspect(self.engine).has_table(self.table(name))
        except SQLAlchemyError as e:
            raise DatabaseError(
                "Could not inspect database", table=self.table(name), details=str(e)
            ) from e

    def table_names(self) -> list[str]:
        """List physical table names."""
        try:
            return inspect(self.engine).get_table_names()
        except SQLAlchemyError as e:
            raise DatabaseError("Could not list tables", details=str(e)) from e

    def columns(self, physical_table: str) -> list[dict[str, Any]]:
        """Describe the columns of a physical table."""
        try:
            return inspect(self.engine).get_columns(physical_table)
        except SQLAlchemyError as e:
            raise DatabaseError(
                "Could not read columns", table=physical_table, details=str(e)
            ) from e

    def fetch_all(
        self,
        query: str,
        params: Mapping[str, Any] | None = None,
        conn: Connection | None = None,
    ) -> list[dict[str, Any]]:
        """Run a SELECT and return rows as dictionaries."""
        sql = prefix_tables(query, self.config)
        if conn is not None:
            result = conn.execute(text(sql), dict(params or {}))
            return [dict(row) for row in result.mappings()]
        try:
            with self.engine.connect() as own_conn:
                result = own_conn.execute(text(sql), dict(params or {}))
                return [dict(row) for row in result.mappings()]
        except SQLAlchemyError as e:
            raise DatabaseError("Query failed", details=f"{sql}: {e}") from e

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """Open a connection inside a transaction, committed on success."""
        try:
            with self.engine.begin() as conn:
                yield conn
        except SQLAlchemyError as e:
            raise DatabaseError("Transaction failed", details=str(e)) from e

    def execute(
        self,
        query: str,
        params: Mapping[str, Any] | list[Mapping[str, Any]] | None = None,
        conn: Connection | None = None,
    ) -> int:
        """Run a data-modifying statement.

        Args:
            query: SQL with optional {table} placeholders
            params: Bound parameters, or a list of them for executemany
            conn: Connection of an open transaction to reuse

        Returns:
            int: Number of affected rows as reported by the driver
        """
        sql = prefix_tables(query, self.config)
        bound: Any
        if isinstance(params, list):
            bound = [dict(p) for p in params]
        else:
            bound = dict(params or {})
        logger.debug(f"Executing: {sql}")
        if conn is not None:
            return conn.execute(text(sql), bound).rowcount
        with self.transaction() as own_conn:
            return own_conn.execute(text(sql), bound).rowcount

    def dispose(self) -> None:
        """Release pooled connections."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None


@contextmanager
def open_database(config: DatabaseConfig) -> Iterator[SanitizeDatabase]:
    """Context manager yielding a SanitizeDatabase, disposed on exit."""
    database = SanitizeDatabase(config)
    try:
        yield database
    finally:
        database.dispose()
