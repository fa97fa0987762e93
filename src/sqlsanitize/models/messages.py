"""Confirmation message accumulator used during the preview phase."""

from collections.abc import Iterable, Iterator

from ..core.exceptions import ValidationError


class ConfirmationMessages:
    """Ordered list of human-readable descriptions of pending operations.

    Providers append to the accumulator they are handed; the orchestrator
    merges each provider's accumulator into the aggregate preview.
    """

    def __init__(self, messages: Iterable[str] = ()) -> None:
        self._messages: list[str] = []
        self.extend(messages)

    def append(self, message: str) -> None:
        """Add one message to the end of the preview.

        Raises:
            ValidationError: If the message is not a string
        """
        if not isinstance(message, str):
            raise ValidationError(
                "Confirmation messages must be strings",
                value=repr(message),
            )
        self._messages.append(message)

    def extend(self, messages: Iterable[str]) -> None:
        """Add several messages, keeping their order."""
        for message in messages:
            self.append(message)

    def merge(self, other: "ConfirmationMessages") -> None:
        """Append every message of another accumulator."""
        self.extend(other)

    def freeze(self) -> tuple[str, ...]:
        """Return a read-only snapshot of the messages."""
        return tuple(self._messages)

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __bool__(self) -> bool:
        return bool(self._messages)

    def __repr__(self) -> str:
        return f"ConfirmationMessages({self._messages!r})"
