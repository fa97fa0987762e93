"""Protocol interfaces for sanitize extensions and user interaction."""

from typing import Protocol

from ..models.messages import ConfirmationMessages
from ..models.options import OperationOptions


class ConfirmationProvider(Protocol):
    """Describes what an extension will do once the operation is confirmed."""

    def __call__(
        self, messages: ConfirmationMessages, options: OperationOptions
    ) -> None:
        """Append zero or more descriptions to messages.

        Args:
            messages: Accumulator for this provider's preview lines
            options: Read-only operation options
        """
        ...


class SanitizeAction(Protocol):
    """Performs an extension's sanitization after confirmation."""

    def __call__(self, options: OperationOptions) -> None:
        """Sanitize the database.

        Args:
            options: Read-only operation options
        """
        ...


class Confirmer(Protocol):
    """Source of the single yes/no decision gating the operation."""

    def __call__(self, question: str) -> bool:
        """Ask the question and return True when the user accepts."""
        ...
