"""End-to-end sanitize operation: confirmation gate followed by the actions."""

import time
from collections.abc import Callable
from dataclasses import dataclass, field

import click

from ..core.exceptions import ActionError
from ..core.interfaces import Confirmer
from ..core.orchestrator import OperationResult, SanitizeOrchestrator
from ..core.registry import HandlerRegistry, Phase, handler_name
from ..models.options import OperationOptions
from ..utils.logging_utils import get_logger, log_handler_call

logger = get_logger(__name__)


@dataclass
class SanitizeReport:
    """What happened during one sanitize invocation."""

    result: OperationResult
    executed_actions: list[str] = field(default_factory=list)
    duration: float = 0.0

    @property
    def confirmed(self) -> bool:
        """Whether the user confirmed the operation."""
        return self.result.confirmed


def execute_sanitize_actions(
    registry: HandlerRegistry, options: OperationOptions
) -> list[str]:
    """Run every sanitize action in registration order.

    Must only be called after the orchestrator returned a confirmed result.

    Args:
        registry: Registry holding the sanitize actions
        options: Read-only options handed to every action

    Returns:
        list[str]: Names of the actions that ran

    Raises:
        ActionError: If an action fails; later actions are not invoked
    """
    executed = []
    phase = Phase.EXECUTE.value

    for action in registry.lookup(Phase.EXECUTE):
        name = handler_name(action)
        log_handler_call(phase, name)
        started = time.perf_counter()
        try:
            action(options)
        except Exception as e:
            log_handler_call(
                phase,
                name,
                status="failed",
                duration=time.perf_counter() - started,
                error=e,
            )
            raise ActionError(
                name, e, details=f"{len(executed)} action(s) completed before"
            ) from e
        log_handler_call(
            phase, name, status="completed", duration=time.perf_counter() - started
        )
        executed.append(name)

    return executed


def run_sql_sanitize(
    registry: HandlerRegistry,
    options: OperationOptions,
    confirmer: Confirmer | None = None,
    echo: Callable[[str], None] = click.echo,
) -> SanitizeReport:
    """Preview, confirm and, only when confirmed, sanitize.

    Args:
        registry: Registry with providers and actions
        options: Operation options
        confirmer: Decision source, interactive when omitted
        echo: Output for the preview

    Returns:
        SanitizeReport: Outcome and the actions that ran

    Raises:
        ProviderError: If building the preview failed
        ActionError: If a sanitize action failed
    """
    started = time.perf_counter()
    orchestrator = SanitizeOrchestrator(registry, confirmer=confirmer, echo=echo)
    result = orchestrator.run(options)

    if not result.confirmed:
        return SanitizeReport(result=result, duration=time.perf_counter() - started)

    executed = execute_sanitize_actions(registry, options)
    duration = time.perf_counter() - started
    logger.info(
        f"Sanitize operation finished: {len(executed)} action(s)",
        extra={"operation": "sql-sanitize", "status": "success", "duration": duration},
    )
    return SanitizeReport(result=result, executed_actions=executed, duration=duration)
