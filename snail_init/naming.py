"""Name helpers: project name, display name and slug.

All functions are pure.  ``to_slug`` is idempotent, so a slug can safely be
passed through it again.

Examples::

    to_display_name("my_cool-plugin") -> "My Cool Plugin"
    to_slug("My Cool Plugin!!")       -> "my-cool-plugin"
"""

from __future__ import annotations

import re

from .errors import ValidationError

__all__ = [
    "FALLBACK_DISPLAY_NAME",
    "FALLBACK_SLUG",
    "normalize_project_name",
    "to_display_name",
    "to_slug",
]

FALLBACK_DISPLAY_NAME = "Snail Plugin"
FALLBACK_SLUG = "snail-plugin"

_WORD_SEPARATORS = re.compile(r"[\s_-]+")
_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def normalize_project_name(value: str | None) -> str:
    """Return *value* with surrounding whitespace removed.

    Raises:
        ValidationError: If nothing is left after trimming.
    """
    normalized = value.strip() if value else ""
    if not normalized:
        raise ValidationError("A project name is required.")
    return normalized


def to_display_name(value: str) -> str:
    """Turn ``some_project-name`` into ``Some Project Name``."""
    words = [word for word in _WORD_SEPARATORS.split(value) if word]
    if not words:
        return FALLBACK_DISPLAY_NAME
    return " ".join(word[0].upper() + word[1:].lower() for word in words)


def to_slug(value: str) -> str:
    """Convert *value* to a lowercase, hyphen-separated URL/path-safe slug."""
    slug = _NON_SLUG_CHARS.sub("-", value.strip().lower()).strip("-")
    return slug or FALLBACK_SLUG
