"""Template tree materialization.

Walks a template tree depth-first and reproduces it under a destination
directory:

* names listed in ``Settings.ignore_names`` are skipped;
* directories are created (idempotently) and walked;
* files ending in ``Settings.template_suffix`` are rendered and written
  without the suffix;
* every other file is copied byte-for-byte.

Files are processed one at a time.  Blocking I/O runs in a worker thread via
``asyncio.to_thread`` so the event loop stays responsive, but nothing runs
concurrently.  The first failure aborts the walk; files written before it are
left in place.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from ..config import Settings, TemplateContext
from ..errors import TemplateError
from .templates import TemplateRenderer

logger = logging.getLogger(__name__)


async def materialize(
    source_root: str | Path,
    dest_root: str | Path,
    context: TemplateContext,
    *,
    renderer: TemplateRenderer | None = None,
    settings: Settings | None = None,
) -> list[Path]:
    """Render the template tree at *source_root* into *dest_root*.

    The destination should have passed ``ensure_writable`` beforehand.  Files
    are created in exclusive mode, so an existing file is never overwritten:
    a collision raises ``FileExistsError``.

    Args:
        source_root: Root of the template tree.
        dest_root: Directory to create the project in.  Created if missing.
        context: Values for template placeholders.
        renderer: Renderer to use; a fresh ``TemplateRenderer`` by default.
        settings: Template suffix and ignore list; defaults to ``Settings()``.

    Returns:
        Paths of every file written, in processing order.

    Raises:
        TemplateError: If a template is not UTF-8 text or fails to render.
        OSError: If a source entry cannot be read or a destination written.
    """
    renderer = renderer or TemplateRenderer()
    settings = settings or Settings()
    written: list[Path] = []
    await _materialize_dir(
        Path(source_root), Path(dest_root), context, renderer, settings, written
    )
    return written


async def _materialize_dir(
    src_dir: Path,
    dest_dir: Path,
    context: TemplateContext,
    renderer: TemplateRenderer,
    settings: Settings,
    written: list[Path],
) -> None:
    await asyncio.to_thread(dest_dir.mkdir, parents=True, exist_ok=True)
    entries = await asyncio.to_thread(lambda: sorted(src_dir.iterdir()))

    for src_path in entries:
        if src_path.name in settings.ignore_names:
            logger.debug("skipping ignored entry %s", src_path)
            continue

        if src_path.is_dir():
            await _materialize_dir(
                src_path, dest_dir / src_path.name, context, renderer, settings, written
            )
            continue

        dest_path = dest_dir / settings.output_name(src_path.name)
        if settings.is_template(src_path.name):
            try:
                text = await asyncio.to_thread(src_path.read_text, encoding="utf-8")
            except UnicodeDecodeError as exc:
                raise TemplateError(f"not valid UTF-8 text ({exc.reason})", src_path) from exc
            rendered = renderer.render(text, context, template_path=src_path)
            await asyncio.to_thread(_write_new_file, dest_path, rendered.encode("utf-8"))
            logger.debug("rendered %s -> %s", src_path, dest_path)
        else:
            data = await asyncio.to_thread(src_path.read_bytes)
            await asyncio.to_thread(_write_new_file, dest_path, data)
            logger.debug("copied %s -> %s", src_path, dest_path)
        written.append(dest_path)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _write_new_file(path: Path, content: bytes) -> None:
    """Synchronous helper: write *content* to a file that must not exist yet."""
    with path.open("xb") as fh:
        fh.write(content)
