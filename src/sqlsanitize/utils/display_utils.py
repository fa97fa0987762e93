"""Display utilities for user interaction."""

from collections.abc import Callable, Iterable

import click

from .logging_utils import get_logger

# Color constants for terminal output
RED = "\033[91m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
CYAN = "\033[96m"
RESET = "\033[0m"

PREVIEW_HEADER = "The following operations will be performed:"

logger = get_logger(__name__)


def render_preview(
    messages: Iterable[str], echo: Callable[[str], None] = click.echo
) -> None:
    """Print the bulleted list of pending operations.

    Args:
        messages: Descriptions collected from confirmation providers
        echo: Line-oriented output function
    """
    echo(PREVIEW_HEADER)
    for message in messages:
        echo(f"* {message}")


class InteractiveConfirmer:
    """Ask the user a yes/no question on the terminal.

    End of input or Ctrl+C at the prompt counts as a refusal.
    """

    def __init__(self, default: bool = False) -> None:
        self.default = default

    def __call__(self, question: str) -> bool:
        try:
            return bool(click.confirm(question, default=self.default))
        except click.Abort:
            click.echo()
            logger.info("Confirmation prompt interrupted, treating as refusal")
            return False


class AutoConfirmer:
    """Answer every confirmation with a fixed decision.

    Used for non-interactive runs (--yes / --no) and in tests. The question
    and the answer are still echoed so logs show what was decided.
    """

    def __init__(
        self, answer: bool, echo: Callable[[str], None] | None = click.echo
    ) -> None:
        self.answer = answer
        self.echo = echo
        self.questions: list[str] = []

    def __call__(self, question: str) -> bool:
        self.questions.append(question)
        if self.echo is not None:
            self.echo(f"{question} [y/N]: {'y' if self.answer else 'n'}")
        return self.answer


def print_warning(message: str) -> None:
    """Print a warning message.

    Args:
        message: Warning message
    """
    click.echo(f"{YELLOW}{message}{RESET}")


def print_error(message: str) -> None:
    """Print an error message to stderr.

    Args:
        message: Error message
    """
    click.echo(f"{RED}ERROR: {message}{RESET}", err=True)


def print_success(message: str) -> None:
    """Print a success message.

    Args:
        message: Success message
    """
    click.echo(f"{GREEN}SUCCESS: {message}{RESET}")


def print_info(message: str) -> None:
    """Print an info message.

    Args:
        message: Info message
    """
    click.echo(f"{CYAN}{message}{RESET}")
