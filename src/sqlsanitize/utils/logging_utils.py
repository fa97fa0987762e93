"""Structured logging utilities for sqlsanitize."""

import json
import logging
import logging.config
import os
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import yaml

ROOT_LOGGER_NAME = "sqlsanitize"

# Extra record attributes understood by the formatters
CONTEXT_FIELDS = ("operation", "phase", "handler", "status", "duration")


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name when writing to a terminal."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
        "RESET": "\033[0m",
    }

    def __init__(self, *args: Any, disable_colors: bool = False, **kwargs: Any) -> None:
        """Initialize formatter with color configuration.

        Args:
            disable_colors: Whether to disable colored output
        """
        super().__init__(*args, **kwargs)
        self.disable_colors = disable_colors

    def format(self, record: logging.LogRecord) -> str:
        """Format log record, coloring the level name on a tty."""
        if self.disable_colors or not (
            hasattr(sys.stderr, "isatty") and sys.stderr.isatty()
        ):
            return super().format(record)

        original = record.levelname
        color = self.COLORS.get(original, "")
        record.levelname = f"{color}{original}{self.COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured JSON."""
        log_entry: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        for name in CONTEXT_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)

        return json.dumps(log_entry, default=str)


class DetailedFormatter(logging.Formatter):
    """Formatter that appends phase and handler context to each line."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with detailed context."""
        base_msg = super().format(record)

        context_parts = []
        if hasattr(record, "operation"):
            context_parts.append(f"op={record.operation}")
        if hasattr(record, "phase"):
            context_parts.append(f"phase={record.phase}")
        if hasattr(record, "handler"):
            context_parts.append(f"handler={record.handler}")
        if hasattr(record, "status"):
            context_parts.append(f"status={record.status}")
        if hasattr(record, "duration"):
            context_parts.append(f"duration={record.duration:.3f}s")

        if context_parts:
            return base_msg + " [" + ", ".join(context_parts) + "]"

        return base_msg


class OperationFilter(logging.Filter):
    """Filter to add operation context to log records."""

    def __init__(self, operation: str | None = None):
        """Initialize the filter with an operation context.

        Args:
            operation: The current operation being performed
        """
        super().__init__()
        self.operation = operation

    def filter(self, record: logging.LogRecord) -> bool:
        """Add operation context to the record."""
        if self.operation and not hasattr(record, "operation"):
            record.operation = self.operation
        return True


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    structured: bool = False,
    operation: str | None = None,
    log_format: str = "console",
    disable_colors: bool = False,
) -> logging.Logger:
    """Configure logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path for file output
        structured: Whether to use structured JSON logging
        operation: Current operation context for filtering
        log_format: Log format (console, json, detailed)
        disable_colors: Whether to disable colored output

    Returns:
        logging.Logger: Configured package logger
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()

    log_level = getattr(logging, level.upper(), logging.INFO)
    root_logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)

    if structured or log_format == "json":
        console_formatter: logging.Formatter = StructuredFormatter()
    elif log_format == "detailed":
        console_formatter = DetailedFormatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        console_formatter = ColoredFormatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            disable_colors=disable_colors,
        )

    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        # Files always get JSON lines
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(StructuredFormatter())
        root_logger.addHandler(file_handler)

    if operation:
        operation_filter = OperationFilter(operation)
        for handler in root_logger.handlers:
            handler.addFilter(operation_filter)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the package logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger: Logger instance
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_from_env() -> logging.Logger:
    """Configure logging from environment variables.

    Environment variables:
        SQLSANITIZE_LOG_LEVEL: Log level (default: WARNING)
        SQLSANITIZE_LOG_FILE: Log file path (optional)
        SQLSANITIZE_LOG_STRUCTURED: Use structured logging (default: false)
        SQLSANITIZE_LOG_OPERATION: Current operation context (optional)
        SQLSANITIZE_LOG_FORMAT: Log format (console, json, detailed) (default: console)
        SQLSANITIZE_LOG_DISABLE_COLORS: Disable colored output (default: false)

    Returns:
        logging.Logger: Configured logger instance
    """
    level = os.getenv("SQLSANITIZE_LOG_LEVEL", "WARNING")
    log_file = os.getenv("SQLSANITIZE_LOG_FILE")
    structured = os.getenv("SQLSANITIZE_LOG_STRUCTURED", "false").lower() == "true"
    operation = os.getenv("SQLSANITIZE_LOG_OPERATION")
    log_format = os.getenv("SQLSANITIZE_LOG_FORMAT", "console")
    disable_colors = (
        os.getenv("SQLSANITIZE_LOG_DISABLE_COLORS", "false").lower() == "true"
    )

    return setup_logging(
        level=level,
        log_file=log_file,
        structured=structured,
        operation=operation,
        log_format=log_format,
        disable_colors=disable_colors,
    )


def configure_from_yaml(config_path: str | Path) -> logging.Logger:
    """Configure logging from a YAML dictConfig file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        logging.Logger: Configured package logger

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is invalid
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Logging config file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            config = yaml.safe_load(f)
        logging.config.dictConfig(config)
    except (yaml.YAMLError, ValueError, TypeError, AttributeError) as e:
        raise ValueError(f"Invalid logging configuration: {e}") from e

    return logging.getLogger(ROOT_LOGGER_NAME)


def init_default_logging() -> None:
    """Initialize logging once, preferring SQLSANITIZE_LOG_CONFIG when set."""
    if logging.getLogger(ROOT_LOGGER_NAME).handlers:
        return

    config_path = os.getenv("SQLSANITIZE_LOG_CONFIG")
    if config_path:
        try:
            configure_from_yaml(config_path)
            return
        except (FileNotFoundError, ValueError) as e:
            # Fall back to environment configuration if YAML config fails
            configure_from_env()
            get_logger(__name__).warning(f"Ignoring SQLSANITIZE_LOG_CONFIG: {e}")
            return

    configure_from_env()


def log_handler_call(
    phase: str,
    handler: str,
    status: str = "started",
    duration: float | None = None,
    error: BaseException | None = None,
) -> None:
    """Log one handler invocation with structured context.

    Args:
        phase: Phase the handler belongs to
        handler: Handler name
        status: started, completed or failed
        duration: Seconds spent in the handler
        error: Exception raised by the handler, if any
    """
    logger = get_logger("handlers")
    context: dict[str, Any] = {"phase": phase, "handler": handler, "status": status}
    if duration is not None:
        context["duration"] = duration

    if status == "failed":
        logger.error(f"{handler} failed during {phase}: {error}", extra=context)
    elif status == "completed":
        logger.info(f"{handler} completed during {phase}", extra=context)
    else:
        logger.debug(f"{handler} {status} during {phase}", extra=context)


init_default_logging()
