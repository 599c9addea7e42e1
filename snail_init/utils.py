"""Console helpers for the snail-init command line.

All user-facing output goes through the shared Rich ``console``.  The core
scaffolding modules never print; they only log through ``logging``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

console = Console()
err_console = Console(stderr=True)

BANNER = r"""
  .----.   @   @
 / .-"-.'.  \v/
 | | '\ \ \_/ )
,-\ '-.' /.'  /
'---`----'----'
"""

NEXT_STEP_COMMANDS = ("bun install", "bun run build")


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def configure_logging(verbose: bool = False) -> None:
    """Route ``logging`` records to stderr through Rich.

    Only warnings are shown unless *verbose* is set.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_banner() -> None:
    """Print the snail greeting."""
    console.print(BANNER, style="bright_green", highlight=False, markup=False)
    console.print("hii O-O, seems like you want to make a plugin?\n")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message to stderr, without wrapping it."""
    err_console.print(
        f"[bold red]{escape(message)}[/bold red]", highlight=False, soft_wrap=True
    )


def print_next_steps(target_dir: Path, project_name: str, cwd: Path | None = None) -> None:
    """Print where the project was created and what to run next.

    Args:
        target_dir: Absolute path of the generated project.
        project_name: Name shown in the success line.
        cwd: Directory the path is shown relative to (default: ``Path.cwd()``).
    """
    relative = display_path(target_dir, cwd)
    console.print()
    print_success(f"✨ Created {project_name} in {relative}")
    commands = "\n".join(f"  {cmd}" for cmd in (f"cd {relative}", *NEXT_STEP_COMMANDS))
    console.print(
        Panel(commands, title="[bold]Next steps[/bold]", border_style="bright_cyan", expand=False),
        highlight=False,
    )


def display_path(path: Path, cwd: Path | None = None) -> str:
    """Return *path* relative to *cwd* (default: the current directory)."""
    base = cwd or Path.cwd()
    try:
        return os.path.relpath(path, base)
    except ValueError:
        # Different drives on Windows.
        return str(path)
