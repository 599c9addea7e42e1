"""Pre-flight checks run before any file is written.

Neither check creates anything: ``ensure_writable`` only inspects the target
and ``ensure_template_directory`` only inspects the template tree.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..errors import ConfigurationError, DestinationError

logger = logging.getLogger(__name__)


def ensure_writable(path: str | Path) -> None:
    """Check that *path* is absent or an empty directory.

    Any entry counts, hidden files included.

    Raises:
        DestinationError: If *path* exists and is not a directory, or is a
            directory with at least one entry.
    """
    target = Path(path)
    # A dangling symlink is an existing entry even though exists() is False.
    if not target.exists() and not target.is_symlink():
        logger.debug("destination %s does not exist yet", target)
        return
    if not target.is_dir():
        raise DestinationError(
            target, f'Path "{target}" already exists and is not a directory.'
        )
    if next(target.iterdir(), None) is not None:
        raise DestinationError(
            target, f'Directory "{target}" already exists and is not empty.'
        )
    logger.debug("destination %s is an empty directory", target)


def ensure_template_directory(path: str | Path) -> Path:
    """Return *path* if it is a directory, else raise ``ConfigurationError``."""
    template_dir = Path(path)
    if not template_dir.is_dir():
        raise ConfigurationError(f"Template directory not found at {template_dir}")
    return template_dir
