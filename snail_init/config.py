"""snail-init configuration and template context.

Both models use Pydantic v2 so values are validated at construction time.
``Settings`` describes *where* and *how* templates are read; ``TemplateContext``
is the immutable set of values every template is rendered against.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigurationError
from .naming import to_display_name, to_slug

T = TypeVar("T")

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "template"
DEFAULT_TEMPLATE_SUFFIX = ".tmpl"
DEFAULT_DESCRIPTION = "A new Snail plugin created with snail-init"
DEFAULT_ICON = "null"
DEFAULT_PROJECT_NAME = "snail-plugin"

# Icon value meaning "no icon configured" in the generated project.
NULL_ICON = "null"


# ---------------------------------------------------------------------------
# Precedence
# ---------------------------------------------------------------------------


def resolve_option(flag: T | None, answer: T | None, default: T) -> T:
    """Pick a value by precedence: explicit flag, then prompt answer, then default."""
    if flag is not None:
        return flag
    if answer is not None:
        return answer
    return default


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


class Settings(BaseModel):
    """Tuning knobs for template discovery and rendering."""

    template_dir: Path = Field(default=DEFAULT_TEMPLATE_DIR)
    template_suffix: str = Field(
        default=DEFAULT_TEMPLATE_SUFFIX,
        min_length=2,
        pattern=r"^\.",
        description="Filename suffix marking a file as a template",
    )
    ignore_names: list[str] = Field(
        default_factory=lambda: [".DS_Store"],
        description="Entry names that are never copied",
    )
    default_description: str = Field(default=DEFAULT_DESCRIPTION)
    default_icon: str = Field(default=DEFAULT_ICON)

    def output_name(self, name: str) -> str:
        """Return the destination filename for a source file called *name*."""
        if self.is_template(name):
            return name[: -len(self.template_suffix)]
        return name

    def is_template(self, name: str) -> bool:
        return name.endswith(self.template_suffix) and name != self.template_suffix

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            SNAIL_INIT_TEMPLATE_DIR, SNAIL_INIT_TEMPLATE_SUFFIX.

        Raises:
            ConfigurationError: If a variable holds an invalid value.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("SNAIL_INIT_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["SNAIL_INIT_TEMPLATE_DIR"])
        if os.environ.get("SNAIL_INIT_TEMPLATE_SUFFIX"):
            kwargs["template_suffix"] = os.environ["SNAIL_INIT_TEMPLATE_SUFFIX"]
        try:
            return cls(**kwargs)
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
                for error in exc.errors()
            )
            raise ConfigurationError(f"Invalid environment settings: {problems}") from exc


# ---------------------------------------------------------------------------
# Template context
# ---------------------------------------------------------------------------


class TemplateContext(BaseModel):
    """Values exposed to templates.

    Attributes are snake_case; templates see them under the camelCase names
    returned by :meth:`template_vars` (``{{ projectName }}`` etc.).
    """

    model_config = ConfigDict(frozen=True)

    plugin_name: str
    plugin_description: str
    plugin_icon: str
    project_name: str = Field(..., min_length=1)
    project_slug: str = Field(..., pattern=r"^[a-z0-9]+(-[a-z0-9]+)*$")

    @field_validator("plugin_icon")
    @classmethod
    def _normalize_null_icon(cls, value: str) -> str:
        if value.lower() == NULL_ICON:
            return NULL_ICON
        return value

    @classmethod
    def build(
        cls,
        project_name: str,
        *,
        plugin_name: str | None = None,
        plugin_description: str | None = None,
        plugin_icon: str | None = None,
        settings: Settings | None = None,
    ) -> "TemplateContext":
        """Create a context, filling unset fields with their computed defaults.

        Args:
            project_name: Already-normalized project name.
            plugin_name: Display name; defaults to ``to_display_name(project_name)``.
            plugin_description: Defaults to ``settings.default_description``.
            plugin_icon: Defaults to ``settings.default_icon`` (``"null"``).
            settings: Source of the defaults.

        Returns:
            A frozen ``TemplateContext``.
        """
        settings = settings or Settings()
        if plugin_name is None:
            plugin_name = to_display_name(project_name)
        if plugin_description is None:
            plugin_description = settings.default_description
        if plugin_icon is None:
            plugin_icon = settings.default_icon
        return cls(
            plugin_name=plugin_name,
            plugin_description=plugin_description,
            plugin_icon=plugin_icon,
            project_name=project_name,
            project_slug=to_slug(project_name),
        )

    def template_vars(self) -> dict[str, str]:
        """Return the ``{placeholder: value}`` mapping used for rendering."""
        return {
            "pluginName": self.plugin_name,
            "pluginDescription": self.plugin_description,
            "pluginIcon": self.plugin_icon,
            "projectName": self.project_name,
            "projectSlug": self.project_slug,
        }
