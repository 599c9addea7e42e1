"""Shared pytest fixtures for the snail-init test suite.

Provides reusable fixtures for:
- Building template trees on disk from ``{relative_path: content}`` dicts
- Reading generated trees back for comparison
- A ready-made ``TemplateContext``
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from snail_init.config import Settings, TemplateContext


# ---------------------------------------------------------------------------
# Tree helpers
# ---------------------------------------------------------------------------


def write_tree(root: Path, files: dict[str, str | bytes]) -> Path:
    """Create *files* (relative path -> content) under *root*."""
    root.mkdir(parents=True, exist_ok=True)
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    return root


def read_tree(root: Path) -> dict[str, bytes]:
    """Return every file under *root* as ``{posix relative path: bytes}``."""
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[dict[str, str | bytes]], Path]:
    """Factory writing a template tree into ``tmp_path / "template"``."""

    def _make(files: dict[str, str | bytes]) -> Path:
        return write_tree(tmp_path / "template", files)

    return _make


# ---------------------------------------------------------------------------
# Context & settings
# ---------------------------------------------------------------------------


@pytest.fixture
def demo_context() -> TemplateContext:
    """Context for a project called ``demo`` with no icon."""
    return TemplateContext.build("demo", plugin_icon="null")


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def tree_reader() -> Callable[[Path], dict[str, bytes]]:
    """Expose :func:`read_tree` to tests."""
    return read_tree
