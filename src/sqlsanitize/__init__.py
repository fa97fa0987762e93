"""sqlsanitize - Database Sanitization Tool - Main Package."""

from .core.exceptions import (
    ActionError,
    ConfigError,
    DatabaseError,
    ProviderError,
    SanitizeError,
    ValidationError,
)
from .core.orchestrator import (
    CONFIRM_QUESTION,
    OperationResult,
    OperationStatus,
    OrchestratorState,
    SanitizeOrchestrator,
)
from .core.registry import HandlerRegistry, Phase, handler_name
from .models.messages import ConfirmationMessages
from .models.options import (
    DEFAULT_SANITIZE_EMAIL,
    DEFAULT_SANITIZE_PASSWORD,
    SANITIZE_SKIP,
    OperationOptions,
)
from .operations import (
    BaseSanitizer,
    SanitizeReport,
    execute_sanitize_actions,
    register_builtin_sanitizers,
    run_sql_sanitize,
)
from .utils.display_utils import AutoConfirmer, InteractiveConfirmer

__version__ = "1.0.0"

__all__ = [
    # Exceptions
    "SanitizeError",
    "ConfigError",
    "ProviderError",
    "ActionError",
    "DatabaseError",
    "ValidationError",
    # Registry
    "HandlerRegistry",
    "Phase",
    "handler_name",
    # Orchestrator
    "SanitizeOrchestrator",
    "OperationResult",
    "OperationStatus",
    "OrchestratorState",
    "CONFIRM_QUESTION",
    # Models
    "ConfirmationMessages",
    "OperationOptions",
    "DEFAULT_SANITIZE_EMAIL",
    "DEFAULT_SANITIZE_PASSWORD",
    "SANITIZE_SKIP",
    # Operations
    "BaseSanitizer",
    "SanitizeReport",
    "execute_sanitize_actions",
    "register_builtin_sanitizers",
    "run_sql_sanitize",
    # Confirmers
    "AutoConfirmer",
    "InteractiveConfirmer",
]
