"""Rich utilities: shared console, themes, and helpers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme
from rich.traceback import install as rich_traceback_install

_console: Console | None = None


def get_console() -> Console:
    """Return a shared Rich Console instance."""
    global _console
    if _console is None:
        theme = Theme(
            {
                "info": "cyan",
                "warning": "yellow",
                "error": "red",
                "success": "green",
                "muted": "grey62",
            }
        )
        _console = Console(theme=theme, highlight=False, soft_wrap=False)
    return _console


def install_rich_tracebacks() -> None:
    """Enable rich tracebacks globally for nicer error output."""
    rich_traceback_install(show_locals=False, word_wrap=True, suppress=["click"])


def print_error(message: str) -> None:
    get_console().print(f"[error]ERROR: {escape(message)}[/error]")


def print_success(message: str) -> None:
    get_console().print(f"[success]SUCCESS: {escape(message)}[/success]")


def print_warning(message: str) -> None:
    get_console().print(f"[warning]WARNING: {escape(message)}[/warning]")


def build_table(
    title: str, columns: Sequence[str], rows: Iterable[Sequence[Any]]
) -> Table:
    """Build a table; ``None`` cells render as a muted dash."""
    table = Table(title=escape(title), header_style="info")
    for column in columns:
        table.add_column(column)
    for row in rows:
        table.add_row(
            *("[muted]-[/muted]" if cell is None else escape(str(cell)) for cell in row)
        )
    return table
