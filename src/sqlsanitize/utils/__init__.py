"""Utilities module for sqlsanitize."""

from .display_utils import (
    AutoConfirmer,
    InteractiveConfirmer,
    print_error,
    print_info,
    print_success,
    print_warning,
    render_preview,
)
from .logging_utils import (
    configure_from_env,
    configure_from_yaml,
    get_logger,
    log_handler_call,
    setup_logging,
)
from .password_utils import (
    generate_random_int,
    hash_password,
    verify_password,
)

__all__ = [
    # Display
    "AutoConfirmer",
    "InteractiveConfirmer",
    "render_preview",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    # Logging
    "configure_from_env",
    "configure_from_yaml",
    "get_logger",
    "log_handler_call",
    "setup_logging",
    # Generated values
    "hash_password",
    "verify_password",
    "generate_random_int",
]
