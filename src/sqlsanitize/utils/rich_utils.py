"""Rich helpers for the handler listing and tracebacks."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.theme import Theme
from rich.traceback import install as rich_traceback_install

SANITIZE_THEME = Theme(
    {
        "phase.confirm": "cyan",
        "phase.execute": "magenta",
        "position": "grey62",
        "handler": "bold",
    }
)

_console: Console | None = None


def get_console() -> Console:
    """Return the process-wide console, created on first use."""
    global _console
    if _console is None:
        _console = Console(theme=SANITIZE_THEME, highlight=False, soft_wrap=False)
    return _console


def build_handler_table(rows: list[tuple[str, int, str]]) -> Table:
    """Build a table of registered handlers.

    Args:
        rows: (phase, position, handler name) tuples in invocation order

    Returns:
        Table: Renderable table
    """
    table = Table(title="Registered sanitize handlers")
    table.add_column("Phase")
    table.add_column("#", justify="right", style="position")
    table.add_column("Handler", style="handler")
    for phase, position, name in rows:
        style = "phase.confirm" if phase.endswith("-confirms") else "phase.execute"
        table.add_row(f"[{style}]{phase}[/]", str(position), name)
    return table


def install_rich_tracebacks() -> None:
    """Render uncaught errors with rich, hiding click and SQLAlchemy frames."""
    rich_traceback_install(
        show_locals=False, word_wrap=True, suppress=["click", "sqlalchemy"]
    )
