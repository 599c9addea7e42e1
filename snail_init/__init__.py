"""snail-init -- scaffold Snail plugin projects from a template tree.

The package turns a project name (plus optional plugin metadata) into an
immutable ``TemplateContext`` and materializes the bundled template tree with
it: ``*.tmpl`` files are rendered through Jinja2 and written without the
suffix, everything else is copied byte-for-byte.
"""

__version__ = "0.1.0"

from snail_init.config import Settings, TemplateContext, resolve_option
from snail_init.errors import (
    ConfigurationError,
    DestinationError,
    OperationCancelledError,
    SnailInitError,
    TemplateError,
    ValidationError,
)
from snail_init.naming import normalize_project_name, to_display_name, to_slug
from snail_init.scaffolder import (
    TemplateRenderer,
    ensure_template_directory,
    ensure_writable,
    materialize,
)

__all__ = [
    "ConfigurationError",
    "DestinationError",
    "OperationCancelledError",
    "Settings",
    "SnailInitError",
    "TemplateContext",
    "TemplateError",
    "TemplateRenderer",
    "ValidationError",
    "__version__",
    "ensure_template_directory",
    "ensure_writable",
    "materialize",
    "normalize_project_name",
    "resolve_option",
    "to_display_name",
    "to_slug",
]
