"""Handler registry for the phases of the sanitize operation."""

from collections.abc import Callable
from enum import Enum
from typing import Any

from ..utils.logging_utils import get_logger

logger = get_logger(__name__)


class Phase(str, Enum):
    """Extension points of the sanitize operation."""

    CONFIRM = "sql-sanitize-confirms"
    EXECUTE = "sql-sanitize"


def _phase_key(phase: Phase | str) -> str:
    if isinstance(phase, Phase):
        return phase.value
    return str(phase)


def handler_name(handler: Callable[..., Any]) -> str:
    """Get a readable name for a handler, used in logs and errors."""
    name = getattr(handler, "__qualname__", None)
    if name is None:
        # Callable instances
        name = type(handler).__qualname__
        module = type(handler).__module__
    else:
        module = getattr(handler, "__module__", None)
    return f"{module}.{name}" if module else name


class HandlerRegistry:
    """Ordered collection of handlers keyed by phase.

    Extensions register their handlers once at startup; the orchestrator and
    the execution runner look them up by phase. Registration order is the
    invocation order. Duplicate registrations are kept and run twice.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[Callable[..., Any]]] = {}

    def register(self, phase: Phase | str, handler: Callable[..., Any]) -> None:
        """Append a handler to the list for a phase.

        Args:
            phase: Phase the handler participates in
            handler: Callable invoked when the phase runs

        Raises:
            TypeError: If handler is not callable
        """
        if not callable(handler):
            raise TypeError(
                f"Handler must be callable, got {type(handler).__name__}"
            )
        key = _phase_key(phase)
        self._handlers.setdefault(key, []).append(handler)
        logger.debug(
            f"Registered {handler_name(handler)} for {key}",
            extra={"phase": key, "handler": handler_name(handler)},
        )

    def on(
        self, phase: Phase | str
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Decorator form of register.

        Example:
            @registry.on(Phase.CONFIRM)
            def describe(messages, options):
                messages.append("Clear the cache tables.")
        """

        def decorator(handler: Callable[..., Any]) -> Callable[..., Any]:
            self.register(phase, handler)
            return handler

        return decorator

    def lookup(self, phase: Phase | str) -> tuple[Callable[..., Any], ...]:
        """Get the handlers for a phase in registration order.

        Unknown phases yield an empty tuple.
        """
        return tuple(self._handlers.get(_phase_key(phase), ()))

    def phases(self) -> list[str]:
        """List phases that have at least one handler."""
        return [key for key, handlers in self._handlers.items() if handlers]

    def __len__(self) -> int:
        return sum(len(handlers) for handlers in self._handlers.values())
