"""Exception hierarchy for snail-init.

Every error the command line reports derives from :class:`SnailInitError`.
Filesystem failures are not wrapped: they propagate as the built-in
:class:`OSError`.
"""

from __future__ import annotations

from pathlib import Path


class SnailInitError(Exception):
    """Base class for all errors raised by snail-init."""


class ValidationError(SnailInitError):
    """Raised when user input (e.g. the project name) is invalid."""


class DestinationError(SnailInitError):
    """Raised when the target path cannot safely receive a new project."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(message)


class TemplateError(SnailInitError):
    """Raised when a template is malformed or references an unknown value."""

    def __init__(self, message: str, template: Path | None = None) -> None:
        self.template = template
        if template is not None:
            message = f"{template}: {message}"
        super().__init__(message)


class ConfigurationError(SnailInitError):
    """Raised when the bundled template tree is missing."""


class OperationCancelledError(SnailInitError):
    """Raised when the user aborts the interactive prompts."""

    def __init__(self) -> None:
        super().__init__("Operation cancelled.")
