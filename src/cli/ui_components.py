"""Rich UI components for the CLI.

Why separate components:
- Keeps command logic apart from presentation details.
- stdout stays clean (only the requested revision or path) for use in scripts;
  errors and logs go to stderr.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

stderr_console = Console(stderr=True)


def configure_logging(level: str, console: Console | None = None) -> None:
    """Route the standard `logging` tree through Rich on stderr."""

    handler = RichHandler(
        console=console or stderr_console,
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(level=level, format="%(message)s", handlers=[handler], force=True)


def print_error(message: str, console: Console | None = None) -> None:
    (console or stderr_console).print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)
