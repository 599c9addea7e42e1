"""snail-init command line entry point.

Usage::

    snail-init my-plugin
    snail-init create my-plugin -d plugins/my-plugin --icon assets/icon.png
    snail-init my-plugin --yes --description "Does snail things"

Only the questions whose flag was not given are asked.  Values are resolved
by precedence: explicit flag, then prompt answer, then computed default.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Sequence, TypedDict

from rich.prompt import Prompt

from . import __version__
from .config import (
    DEFAULT_PROJECT_NAME,
    Settings,
    TemplateContext,
    resolve_option,
)
from .errors import OperationCancelledError, SnailInitError
from .naming import normalize_project_name, to_display_name
from .scaffolder import ensure_template_directory, ensure_writable, materialize
from .utils import configure_logging, console, print_banner, print_error, print_next_steps

PROGRAM_NAME = "snail-init"

logger = logging.getLogger(__name__)


class PromptAnswers(TypedDict, total=False):
    project_name: str | None
    plugin_name: str | None
    plugin_description: str | None
    plugin_icon: str | None


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Scaffold a Snail plugin project from the official template.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            f"  {PROGRAM_NAME} my-plugin\n"
            f"  {PROGRAM_NAME} create my-plugin -d plugins/my-plugin\n"
            f"  {PROGRAM_NAME} my-plugin --yes --icon assets/icon.png\n"
        ),
    )
    parser.add_argument(
        "project_name",
        nargs="?",
        metavar="project-name",
        help="Directory name for the new project",
    )
    parser.add_argument(
        "-d", "--directory",
        help="Directory to create the project in (defaults to the project name)",
    )
    parser.add_argument("--plugin-name", help="Display name for your plugin")
    parser.add_argument("--description", help="Description for your plugin")
    parser.add_argument("--icon", help="Icon URL or asset path for your plugin")
    parser.add_argument(
        "-y", "--yes",
        action="store_true",
        help="Do not prompt; use flags and defaults (requires project-name)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------


def ask_questions(args: argparse.Namespace, settings: Settings) -> PromptAnswers:
    """Ask for every value not supplied on the command line.

    Blank answers are returned as ``None`` so the computed default applies.

    Raises:
        OperationCancelledError: If the user hits Ctrl-C or closes stdin.
    """
    answers: PromptAnswers = {}
    try:
        if not args.project_name:
            answers["project_name"] = _ask_project_name()
        if args.plugin_name is None:
            initial = to_display_name(args.project_name) if args.project_name else None
            answers["plugin_name"] = _ask("Plugin display name", initial)
        if args.description is None:
            answers["plugin_description"] = _ask(
                "Plugin description", settings.default_description
            )
        if args.icon is None:
            answers["plugin_icon"] = _ask("Plugin icon URL", settings.default_icon)
    except (KeyboardInterrupt, EOFError):
        raise OperationCancelledError() from None
    return answers


def _ask(question: str, default: str | None) -> str | None:
    answer = Prompt.ask(
        question, console=console, default=default, show_default=default is not None
    )
    if answer is None or not answer.strip():
        return None
    return answer


def _ask_project_name() -> str:
    while True:
        answer = _ask("Project folder name", DEFAULT_PROJECT_NAME)
        if answer:
            return answer
        console.print("[prompt.invalid]Please enter a project name.")


# ---------------------------------------------------------------------------
# Flow
# ---------------------------------------------------------------------------


def create_project(
    args: argparse.Namespace,
    settings: Settings,
    *,
    cwd: Path | None = None,
) -> tuple[Path, TemplateContext]:
    """Run the whole create flow and return the project path and its context.

    Nothing is written until the template tree exists, every question has
    been answered, and the destination has passed ``ensure_writable``.
    """
    template_dir = ensure_template_directory(settings.template_dir)
    answers = {} if args.yes else ask_questions(args, settings)

    project_name = normalize_project_name(args.project_name or answers.get("project_name"))
    target_dir = ((cwd or Path.cwd()) / (args.directory or project_name)).resolve()
    ensure_writable(target_dir)

    context = TemplateContext.build(
        project_name,
        plugin_name=resolve_option(
            args.plugin_name, answers.get("plugin_name"), to_display_name(project_name)
        ),
        plugin_description=resolve_option(
            args.description, answers.get("plugin_description"), settings.default_description
        ),
        plugin_icon=resolve_option(
            args.icon, answers.get("plugin_icon"), settings.default_icon
        ),
        settings=settings,
    )
    logger.debug("creating %s in %s from %s", project_name, target_dir, template_dir)

    written = asyncio.run(materialize(template_dir, target_dir, context, settings=settings))
    logger.debug("wrote %d files", len(written))
    return target_dir, context


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for ``snail-init`` and ``python -m snail_init``."""
    argv = list(sys.argv[1:] if argv is None else argv)
    # "create" is the only command and may be omitted.
    if argv[:1] == ["create"]:
        argv = argv[1:]

    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    print_banner()

    try:
        target_dir, context = create_project(args, Settings.from_env())
    except (SnailInitError, OSError) as exc:
        print_error(f"\n❌ {exc}")
        return 1

    print_next_steps(target_dir, context.project_name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
