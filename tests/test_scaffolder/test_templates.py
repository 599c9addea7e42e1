"""Tests for the Jinja2 template renderer.

Covers:
- Placeholder substitution from a TemplateContext and from a plain mapping
- Undefined placeholders and syntax errors raising TemplateError
- The "null" icon sentinel
- Custom filters
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from snail_init.config import TemplateContext
from snail_init.errors import TemplateError
from snail_init.scaffolder.templates import TemplateRenderer

pytestmark = pytest.mark.unit


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


class TestRender:
    def test_placeholder_without_spaces(self, renderer, demo_context):
        assert renderer.render("Hi {{projectName}}", demo_context) == "Hi demo"

    def test_all_fields(self, renderer):
        ctx = TemplateContext.build(
            "My Plugin",
            plugin_description="Desc",
            plugin_icon="icon.png",
        )
        text = "{{ projectName }}|{{ projectSlug }}|{{ pluginName }}|{{ pluginDescription }}|{{ pluginIcon }}"
        assert renderer.render(text, ctx) == "My Plugin|my-plugin|My Plugin|Desc|icon.png"

    def test_plain_mapping(self, renderer):
        assert renderer.render("{{ projectName }}!", {"projectName": "x"}) == "x!"

    def test_text_without_placeholders(self, renderer, demo_context):
        assert renderer.render("plain text\n", demo_context) == "plain text\n"

    def test_trailing_newline_kept(self, renderer, demo_context):
        assert renderer.render("{{ projectName }}\n", demo_context) == "demo\n"

    def test_no_html_escaping(self, renderer):
        ctx = TemplateContext.build("demo", plugin_description="<b>&'\"")
        assert renderer.render("{{ pluginDescription }}", ctx) == "<b>&'\""

    def test_snake_case_names_not_exposed(self, renderer, demo_context):
        with pytest.raises(TemplateError):
            renderer.render("{{ project_name }}", demo_context)


class TestRenderErrors:
    def test_undefined_placeholder(self, renderer, demo_context):
        with pytest.raises(TemplateError, match="undefined") as exc_info:
            renderer.render("Hi {{ nope }}", demo_context)
        assert exc_info.value.template is None

    def test_undefined_error_lists_available(self, renderer, demo_context):
        with pytest.raises(TemplateError, match="projectSlug"):
            renderer.render("{{ nope }}", demo_context)

    def test_syntax_error(self, renderer, demo_context):
        with pytest.raises(TemplateError, match="syntax error"):
            renderer.render("{{ projectName ", demo_context)

    def test_template_path_in_message(self, renderer, demo_context):
        path = Path("sub/c.txt.tmpl")
        with pytest.raises(TemplateError) as exc_info:
            renderer.render("{{ nope }}", demo_context, template_path=path)
        assert exc_info.value.template == path
        assert str(path) in str(exc_info.value)


class TestIconSentinel:
    def test_null_icon_renders_literal(self, renderer):
        ctx = TemplateContext.build("demo", plugin_icon="NULL")
        assert renderer.render("{{pluginIcon}}", ctx) == "null"

    def test_conditional_on_sentinel(self, renderer):
        text = (
            '{% if pluginIcon == "null" %}null{% else %}{{ pluginIcon | tojson }}{% endif %}'
        )
        no_icon = TemplateContext.build("demo", plugin_icon="Null")
        icon = TemplateContext.build("demo", plugin_icon="a.png")
        assert json.loads(renderer.render(text, no_icon)) is None
        assert json.loads(renderer.render(text, icon)) == "a.png"


class TestFilters:
    def test_slugify(self, renderer):
        assert renderer.render("{{ pluginName | slugify }}", {"pluginName": "My Cool Plugin!!"}) == (
            "my-cool-plugin"
        )

    def test_display_name(self, renderer):
        assert renderer.render("{{ projectName | display_name }}", {"projectName": "a_b"}) == "A B"
