"""Sanitize orchestrator: preview, confirm, then authorize execution.

The orchestrator runs every confirmation provider registered for
``Phase.CONFIRM``, shows the combined preview, and asks for a single
confirmation. It never runs sanitize actions itself; a ``CONFIRMED`` result
is the caller's permission to run the ``Phase.EXECUTE`` handlers.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

import click

from ..models.messages import ConfirmationMessages
from ..models.options import OperationOptions
from ..utils.display_utils import InteractiveConfirmer, render_preview
from ..utils.logging_utils import get_logger, log_handler_call
from .exceptions import ProviderError
from .interfaces import Confirmer
from .registry import HandlerRegistry, Phase, handler_name

logger = get_logger(__name__)

CONFIRM_QUESTION = "Do you really want to sanitize the current database?"


class OrchestratorState(Enum):
    """Lifecycle of a single sanitize invocation."""

    IDLE = "idle"
    COLLECTING_MESSAGES = "collecting_messages"
    AWAITING_CONFIRMATION = "awaiting_confirmation"
    ABORTED = "aborted"
    CONFIRMED = "confirmed"
    FAILED = "failed"


class OperationStatus(Enum):
    """Terminal outcome of a sanitize invocation."""

    CONFIRMED = "confirmed"
    ABORTED = "aborted"


@dataclass(frozen=True)
class OperationResult:
    """Outcome of SanitizeOrchestrator.run."""

    status: OperationStatus
    messages: tuple[str, ...] = ()
    prompted: bool = False

    @property
    def confirmed(self) -> bool:
        """Whether sanitize actions are now authorized to run."""
        return self.status is OperationStatus.CONFIRMED

    @property
    def aborted(self) -> bool:
        """Whether the user declined the operation."""
        return self.status is OperationStatus.ABORTED


class SanitizeOrchestrator:
    """Collects the preview and gates the sanitize operation on confirmation.

    Args:
        registry: Registry holding the confirmation providers
        confirmer: Yes/no decision source, interactive by default
        echo: Line-oriented output used for the preview
    """

    def __init__(
        self,
        registry: HandlerRegistry,
        confirmer: Confirmer | None = None,
        echo: Callable[[str], None] = click.echo,
    ) -> None:
        self.registry = registry
        self.confirmer = confirmer if confirmer is not None else InteractiveConfirmer()
        self.echo = echo
        self.state = OrchestratorState.IDLE

    def run(self, options: OperationOptions) -> OperationResult:
        """Run one sanitize invocation up to the confirmation decision.

        Args:
            options: Read-only options handed to every provider

        Returns:
            OperationResult: CONFIRMED or ABORTED, with the preview shown

        Raises:
            ProviderError: If a confirmation provider fails; nothing is
                shown and no prompt is issued
        """
        self.state = OrchestratorState.IDLE
        messages = self._collect_messages(options)

        self.state = OrchestratorState.AWAITING_CONFIRMATION
        if messages:
            render_preview(messages, self.echo)

        # A run without any preview is still destructive in principle
        if not self.confirmer(CONFIRM_QUESTION):
            self.state = OrchestratorState.ABORTED
            logger.info("Sanitize operation aborted by user", extra={"status": "aborted"})
            return OperationResult(OperationStatus.ABORTED, messages, prompted=True)

        self.state = OrchestratorState.CONFIRMED
        logger.info(
            f"Sanitize operation confirmed with {len(messages)} pending operation(s)",
            extra={"status": "confirmed"},
        )
        return OperationResult(OperationStatus.CONFIRMED, messages, prompted=True)

    def _collect_messages(self, options: OperationOptions) -> tuple[str, ...]:
        """Invoke every confirmation provider in registration order."""
        self.state = OrchestratorState.COLLECTING_MESSAGES
        preview = ConfirmationMessages()
        phase = Phase.CONFIRM.value

        for provider in self.registry.lookup(Phase.CONFIRM):
            name = handler_name(provider)
            provided = ConfirmationMessages()
            log_handler_call(phase, name)
            started = time.perf_counter()
            try:
                provider(provided, options)
            except Exception as e:
                self.state = OrchestratorState.FAILED
                log_handler_call(
                    phase,
                    name,
                    status="failed",
                    duration=time.perf_counter() - started,
                    error=e,
                )
                raise ProviderError(name, e) from e
            log_handler_call(
                phase, name, status="completed", duration=time.perf_counter() - started
            )
            preview.merge(provided)

        return preview.freeze()
