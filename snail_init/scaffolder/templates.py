"""Jinja2 template rendering for plugin scaffolding.

Provides the TemplateRenderer class which renders template text against a
``TemplateContext``.  Rendering is pure: the renderer never touches the
filesystem, so the caller decides where template text comes from and where
the output goes.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jinja2 import Environment, StrictUndefined, TemplateSyntaxError, UndefinedError
from jinja2 import TemplateError as JinjaTemplateError

from ..config import TemplateContext
from ..errors import TemplateError
from ..naming import to_display_name, to_slug


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 template text for project scaffolding.

    Placeholders use the usual ``{{ name }}`` syntax and resolve against the
    camelCase variables of a ``TemplateContext`` (``projectName``,
    ``projectSlug``, ``pluginName``, ``pluginDescription``, ``pluginIcon``).
    Referencing any other name raises :class:`TemplateError`.
    """

    def __init__(self) -> None:
        self.env = Environment(
            undefined=StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register custom filters
        self.env.filters["slugify"] = to_slug
        self.env.filters["display_name"] = to_display_name

    def render(
        self,
        template_text: str,
        context: TemplateContext | Mapping[str, Any],
        *,
        template_path: Path | None = None,
    ) -> str:
        """Render *template_text* with the provided context.

        Args:
            template_text: Raw template source.
            context: A ``TemplateContext`` or a plain mapping of variables.
            template_path: Where the text came from; only used in error
                messages.

        Returns:
            The rendered text.

        Raises:
            TemplateError: On a syntax error or an undefined placeholder.
        """
        variables = _template_vars(context)
        try:
            template = self.env.from_string(template_text)
            return template.render(**variables)
        except TemplateSyntaxError as exc:
            raise TemplateError(
                f"syntax error on line {exc.lineno}: {exc.message}", template_path
            ) from exc
        except UndefinedError as exc:
            raise TemplateError(
                f"{exc.message} (available: {', '.join(sorted(variables))})",
                template_path,
            ) from exc
        except JinjaTemplateError as exc:
            raise TemplateError(str(exc), template_path) from exc


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _template_vars(context: TemplateContext | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(context, TemplateContext):
        return context.template_vars()
    return dict(context)
