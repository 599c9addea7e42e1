"""snail-init scaffolder -- materializes a plugin template tree.

Quick usage::

    from snail_init.config import TemplateContext
    from snail_init.scaffolder import ensure_writable, materialize

    context = TemplateContext.build("my-plugin")
    ensure_writable("/tmp/my-plugin")
    written = await materialize(template_dir, "/tmp/my-plugin", context)
"""

from snail_init.scaffolder.guard import ensure_template_directory, ensure_writable
from snail_init.scaffolder.materializer import materialize
from snail_init.scaffolder.templates import TemplateRenderer

__all__ = [
    "TemplateRenderer",
    "ensure_template_directory",
    "ensure_writable",
    "materialize",
]
