"""Custom exception hierarchy for the sqlsanitize database sanitization tool."""


class SanitizeError(Exception):
    """Base exception for sqlsanitize.

    This is the root exception class for all sqlsanitize-specific errors.
    All other custom exceptions should inherit from this class.
    """

    def __init__(self, message: str, details: str | None = None):
        """Initialize the exception.

        Args:
            message: The main error message
            details: Optional additional details about the error
        """
        self.message = message
        self.details = details
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the complete error message."""
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ConfigError(SanitizeError):
    """Configuration errors.

    Raised when required configuration is missing or malformed, such as
    a missing database URL.
    """


class HandlerError(SanitizeError):
    """Failure raised by a registered sanitize handler.

    Wraps the original exception so callers can tell which extension failed
    and still inspect what went wrong.
    """

    phase_label = "handler"

    def __init__(
        self,
        handler: str,
        original: BaseException,
        details: str | None = None,
    ):
        """Initialize the handler error.

        Args:
            handler: Name of the handler that failed
            original: The exception raised by the handler
            details: Optional additional details about the error
        """
        self.handler = handler
        self.original = original
        super().__init__(f"{self.phase_label.capitalize()} {handler} failed", details)

    def _format_message(self) -> str:
        """Format the complete error message with handler context."""
        parts = [self.message, f"Error: {self.original}"]

        if self.details:
            parts.append(f"Details: {self.details}")

        return " | ".join(parts)


class ProviderError(HandlerError):
    """A confirmation-message provider failed while building the preview.

    Fatal for the invocation: raised before any prompt is shown and before
    any sanitize action runs.
    """

    phase_label = "provider"


class ActionError(HandlerError):
    """A sanitize action failed after the operation was confirmed.

    Actions registered after the failing one are not invoked.
    """

    phase_label = "action"


class DatabaseError(SanitizeError):
    """Database errors.

    Raised when a built-in sanitizer cannot read or update the database.
    """

    def __init__(
        self,
        message: str,
        table: str | None = None,
        details: str | None = None,
    ):
        """Initialize the database error.

        Args:
            message: The main error message
            table: The table involved in the failing statement
            details: Optional additional details about the error
        """
        self.table = table
        super().__init__(message, details)

    def _format_message(self) -> str:
        """Format the complete error message with table context."""
        parts = [self.message]

        if self.table:
            parts.append(f"Table: {self.table}")

        if self.details:
            parts.append(f"Details: {self.details}")

        return " | ".join(parts)


class ValidationError(SanitizeError):
    """Input validation errors.

    Raised when an option value or a preview message fails validation.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: str | None = None,
        details: str | None = None,
    ):
        """Initialize the validation error.

        Args:
            message: The main error message
            field: The field that failed validation
            value: The invalid value
            details: Optional additional details about the error
        """
        self.field = field
        self.value = value
        super().__init__(message, details)

    def _format_message(self) -> str:
        """Format the complete error message with validation context."""
        parts = [self.message]

        if self.field:
            parts.append(f"Field: {self.field}")

        if self.value:
            parts.append(f"Value: {self.value}")

        if self.details:
            parts.append(f"Details: {self.details}")

        return " | ".join(parts)
