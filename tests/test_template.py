from __future__ import annotations

import pytest

from jlfoundry.template import TemplateRenderer, TemplateRenderingError, toml_escape, yaml_scalar


@pytest.fixture()
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


def test_render_string_with_filters(renderer: TemplateRenderer):
    template = 'name = "{{ name|toml }}"\nversion: {{ version|yaml }}'
    context = {"name": 'say "hi"', "version": "1.10"}
    rendered = renderer.render_string(template, context)
    assert rendered == 'name = "say \\"hi\\""\nversion: "1.10"'


def test_render_string_resolves_dotted_paths(renderer: TemplateRenderer):
    context = {"project": {"name": "Demo"}}
    assert renderer.render_string("{{ project.name }}", context) == "Demo"


def test_render_string_missing_policy_keep(renderer: TemplateRenderer):
    template = "Hello {{ missing }}"
    assert renderer.render_string(template, {}, missing="keep") == template


def test_render_string_missing_policy_empty(renderer: TemplateRenderer):
    template = "Hello {{ missing }}"
    assert renderer.render_string(template, {}, missing="empty") == "Hello "


def test_render_string_missing_policy_error(renderer: TemplateRenderer):
    with pytest.raises(TemplateRenderingError):
        renderer.render_string("{{ missing }}", {}, missing="error")


def test_render_string_rejects_unknown_policy(renderer: TemplateRenderer):
    with pytest.raises(ValueError):
        renderer.render_string("{{ name }}", {"name": "x"}, missing="ignore")


def test_unknown_filter_raises(renderer: TemplateRenderer):
    with pytest.raises(TemplateRenderingError):
        renderer.render_string("{{ name|unknown }}", {"name": "demo"})


def test_github_expressions_are_left_untouched(renderer: TemplateRenderer):
    template = "version: ${{ matrix.julia-version }} for {{ name }}"
    rendered = renderer.render_string(template, {"name": "Demo"}, missing="error")
    assert rendered == "version: ${{ matrix.julia-version }} for Demo"


def test_toml_filter_escapes_quotes_and_backslashes(renderer: TemplateRenderer):
    rendered = renderer.render_string('authors = ["{{ author|toml }}"]', {"author": 'Jo "JD" D\\oe'})
    assert rendered == 'authors = ["Jo \\"JD\\" D\\\\oe"]'


def test_toml_escape_leaves_plain_text_alone():
    assert toml_escape("John Doe <john@example.com>") == "John Doe <john@example.com>"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("a\nb", "a\\nb"),
        ("a\rb", "a\\rb"),
        ("a\bb", "a\\bb"),
        ("a\fb", "a\\fb"),
        ("a\tb", "a\tb"),
        ("Jane\x1bDoe", "Jane\\u001BDoe"),
        ("nul\x00", "nul\\u0000"),
        ("del\x7f", "del\\u007F"),
    ],
)
def test_toml_escape_control_characters(value, expected):
    assert toml_escape(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1.12", '"1.12"'),
        ("1.10'", '"1.10\'"'),
        ('say "hi"', '"say \\"hi\\""'),
        ("a\\b", '"a\\\\b"'),
        ("bell\x07", '"bell\\u0007"'),
    ],
)
def test_yaml_scalar_quotes_and_escapes(value, expected):
    assert yaml_scalar(value) == expected


def test_default_filters():
    assert set(TemplateRenderer().filters) == {"toml", "yaml"}


def test_custom_filters_replace_defaults():
    renderer = TemplateRenderer(filters={"shout": lambda value: f"{value}!"})
    assert renderer.render_string("{{ name|shout }}", {"name": "hi"}) == "hi!"
    with pytest.raises(TemplateRenderingError):
        renderer.render_string("{{ name|toml }}", {"name": "hi"})
