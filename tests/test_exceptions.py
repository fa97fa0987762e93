"""Tests for the exception hierarchy."""

from sqlsanitize.core.exceptions import (
    ActionError,
    ConfigError,
    DatabaseError,
    HandlerError,
    ProviderError,
    SanitizeError,
    ValidationError,
)


class TestSanitizeError:
    """Test the base exception."""

    def test_message_only(self):
        """Test a plain message."""
        assert str(SanitizeError("Something broke")) == "Something broke"

    def test_details(self):
        """Test details are appended."""
        error = ConfigError("No database URL configured", "Pass --db-url")
        assert str(error) == "No database URL configured: Pass --db-url"
        assert isinstance(error, SanitizeError)


class TestHandlerErrors:
    """Test provider and action errors."""

    def test_provider_error(self):
        """Test the provider error names the handler and the cause."""
        original = RuntimeError("table missing")
        error = ProviderError("pkg.messages", original)

        assert error.handler == "pkg.messages"
        assert error.original is original
        assert str(error) == "Provider pkg.messages failed | Error: table missing"
        assert isinstance(error, HandlerError)

    def test_action_error_details(self):
        """Test action errors carry details."""
        error = ActionError("pkg.sanitize", ValueError("bad"), "1 action(s) completed before")
        assert str(error) == (
            "Action pkg.sanitize failed | Error: bad | "
            "Details: 1 action(s) completed before"
        )


class TestContextErrors:
    """Test errors with extra context."""

    def test_database_error(self):
        """Test the table is included."""
        error = DatabaseError("Query failed", table="sessions", details="locked")
        assert str(error) == "Query failed | Table: sessions | Details: locked"

    def test_validation_error(self):
        """Test field and value are included."""
        error = ValidationError(
            "Invalid field name in whitelist", field="whitelist-fields", value="a b"
        )
        assert error.field == "whitelist-fields"
        assert str(error) == (
            "Invalid field name in whitelist | Field: whitelist-fields | Value: a b"
        )
