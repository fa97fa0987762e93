"""Command handlers for CLI operations."""

from ..core.exceptions import ActionError, ProviderError, ValidationError
from ..core.interfaces import Confirmer
from ..core.registry import HandlerRegistry, Phase, handler_name
from ..models.options import OperationOptions
from ..operations import register_builtin_sanitizers, run_sql_sanitize
from ..utils.display_utils import (
    AutoConfirmer,
    InteractiveConfirmer,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from ..utils.logging_utils import get_logger
from ..utils.rich_utils import build_handler_table, get_console

logger = get_logger(__name__)


def build_registry() -> HandlerRegistry:
    """Create the process registry with every bundled sanitizer."""
    return register_builtin_sanitizers(HandlerRegistry())


class SanitizeCommandHandler:
    """Handles the sql-sanitize CLI operations.

    Owns the handler registry for the process and turns operation outcomes
    into user-facing messages.
    """

    def __init__(self, registry: HandlerRegistry | None = None):
        """Initialize the handler.

        Args:
            registry: Registry to use, the bundled sanitizers when omitted
        """
        self.registry = registry if registry is not None else build_registry()

    def _make_confirmer(self, assume_yes: bool, assume_no: bool) -> Confirmer:
        """Pick the decision source for this run.

        Args:
            assume_yes: Answer yes without prompting
            assume_no: Answer no without prompting

        Returns:
            Confirmer: Fixed or interactive decision source
        """
        if assume_yes:
            return AutoConfirmer(True)
        if assume_no:
            return AutoConfirmer(False)
        return InteractiveConfirmer()

    def handle_sql_sanitize(
        self,
        db_prefix: bool,
        db_url: str,
        sanitize_email: str,
        sanitize_password: str,
        whitelist_fields: str,
        assume_yes: bool = False,
        assume_no: bool = False,
    ) -> bool:
        """Run the sanitize operation.

        Returns:
            bool: False when the operation failed, True when it completed or
                was aborted by the user
        """
        try:
            options = OperationOptions.from_cli(
                db_prefix=db_prefix,
                db_url=db_url,
                sanitize_email=sanitize_email,
                sanitize_password=sanitize_password,
                whitelist_fields=whitelist_fields,
            )
        except ValidationError as e:
            print_error(f"Invalid option: {e}")
            return False

        logger.debug("Sanitize options", extra={"operation": "sql-sanitize"})
        confirmer = self._make_confirmer(assume_yes, assume_no)

        try:
            report = run_sql_sanitize(self.registry, options, confirmer=confirmer)
        except ProviderError as e:
            print_error(f"Could not prepare the sanitize operation: {e}")
            return False
        except ActionError as e:
            print_error(f"Sanitization failed: {e}")
            return False

        if not report.confirmed:
            print_warning("Aborted.")
            return True

        if not report.executed_actions:
            print_info("No sanitize actions are registered.")
        print_success(
            f"Sanitized the database with {len(report.executed_actions)} action(s) "
            f"in {report.duration:.2f}s."
        )
        return True

    def handle_list_handlers(self) -> None:
        """Print the registered providers and actions."""
        rows = []
        for phase in (Phase.CONFIRM, Phase.EXECUTE):
            for position, handler in enumerate(self.registry.lookup(phase), 1):
                rows.append((phase.value, position, handler_name(handler)))

        if not rows:
            print_info("No sanitize handlers are registered.")
            return

        get_console().print(build_handler_table(rows))
