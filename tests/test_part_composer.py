"""Tests for single-field composition (FormBuilder.input)."""

import re

import pytest

from semantic_formgen.forms.form_builder import FormBuilder
from semantic_formgen.protocols import FormGenConfig, set_form_config


def wrapper_classes(html):
    return re.match(r'<li class="([^"]*)"', html).group(1).split()


def test_string_input_markup(builder):
    """A required string column renders label then control inside an li."""
    assert builder.input("title") == (
        '<li class="string required" id="article_title_input">'
        '<label class="label" for="article_title">Title<abbr title="required">*</abbr></label>\n'
        '<input type="text" id="article_title" name="article[title]" required value="Hello">'
        '</li>'
    )


@pytest.mark.parametrize("field", ["title", "body", "author", "created_at"])
def test_exactly_one_of_required_or_optional(builder, field):
    classes = wrapper_classes(builder.input(field))
    assert ("required" in classes) != ("optional" in classes)


def test_caller_requiredness_class_is_dropped(builder):
    """Only the resolved required/optional marker reaches the wrapper."""
    assert wrapper_classes(builder.input("title", wrapper_html={"class": "optional wide"})) == [
        "string", "required", "wide",
    ]
    assert wrapper_classes(builder.input("body", wrapper_html={"class_": ["required"]})) == [
        "text", "optional",
    ]


def test_required_option_flips_wrapper_class(builder):
    assert wrapper_classes(builder.input("title", required=False)) == ["string", "optional"]
    assert wrapper_classes(builder.input("body", required=True)) == ["text", "required"]


def test_error_class_and_inline_errors(article):
    article.errors = {"title": ["is required", "is too short"]}
    html = FormBuilder(article).input("title")
    assert wrapper_classes(html) == ["string", "required", "error"]
    assert '<p class="inline-errors">is required and is too short</p>' in html


def test_inline_error_list_mode(article):
    set_form_config(FormGenConfig(inline_errors="list"))
    article.errors = {"title": ["is required", "is too short"]}
    html = FormBuilder(article).input("title")
    assert '<ul class="errors"><li>is required</li><li>is too short</li></ul>' in html


def test_inline_errors_disabled(article):
    set_form_config(FormGenConfig(inline_errors="none"))
    article.errors = {"title": ["is required"]}
    html = FormBuilder(article).input("title")
    assert "error" in wrapper_classes(html)
    assert "is required" not in html


def test_caller_classes_are_appended_without_duplicates(builder):
    html = builder.input("title", wrapper_html={"class": "string wide", "data_role": "x"})
    assert wrapper_classes(html) == ["string", "required", "wide"]
    assert 'data-role="x"' in html


def test_wrapper_id_override(builder):
    html = builder.input("title", wrapper_html={"id": "custom"})
    assert 'id="custom"' in html
    assert "article_title_input" not in html


def test_input_id_becomes_label_target(builder):
    html = builder.input("title", input_html={"id": "headline"})
    assert '<label class="label" for="headline">' in html
    assert '<input type="text" id="headline"' in html


def test_explicit_label_target_is_kept(builder):
    html = builder.input("title", input_html={"id": "headline"}, label_html={"for": "elsewhere"})
    assert 'for="elsewhere"' in html
    assert 'for="headline"' not in html


def test_keyword_spelling_of_label_target_is_kept(builder):
    html = builder.input("title", input_html={"id_": "headline"}, label_html={"for_": "elsewhere"})
    assert '<label class="label" for="elsewhere">' in html
    assert html.count(" for=") == 1
    assert '<input type="text" id="headline"' in html


def test_caller_options_are_not_mutated(builder):
    input_html = {"id": "headline"}
    label_html = {}
    builder.input("title", input_html=input_html, label_html=label_html)
    assert input_html == {"id": "headline"}
    assert label_html == {}


def test_label_text_and_suppression(builder):
    assert ">Headline<abbr" in builder.input("title", label="Headline")
    assert "<label" not in builder.input("title", label=False)


def test_hint_rendered_after_control(builder):
    html = builder.input("title", hint="Keep it short")
    assert html.index("<input") < html.index('<p class="inline-hints">Keep it short</p>')


def test_hidden_never_renders_hints_or_errors(article):
    set_form_config(FormGenConfig(custom_inline_order={"hidden": ("errors", "hint", "control")}))
    article.errors = {"title": ["is required"]}
    html = FormBuilder(article).input("title", as_="hidden", hint="never shown")
    assert "never shown" not in html
    assert "inline-errors" not in html
    assert '<input type="hidden"' in html
    assert "<label" not in html


def test_hidden_with_default_order_keeps_label(builder):
    html = builder.input("title", as_="hidden", hint="never shown")
    assert "<label" in html
    assert "never shown" not in html


def test_custom_inline_order_per_type(builder):
    set_form_config(FormGenConfig(custom_inline_order={"string": ("control", "label")}))
    html = builder.input("title")
    assert html.index("<input") < html.index("<label")
    # Other types keep the default order
    text_html = builder.input("body")
    assert text_html.index("<label") < text_html.index("<textarea")


def test_unknown_inline_part_is_rejected():
    with pytest.raises(ValueError):
        FormGenConfig(inline_order=("label", "widget"))


def test_input_is_idempotent(article):
    article.errors = {"title": ["is required"]}
    builder = FormBuilder(article)
    options = {"hint": "Short", "input_html": {"class": "big"}}
    assert builder.input("title", **options) == builder.input("title", **options)


def test_no_bound_object(builder):
    html = FormBuilder(None, "search").input("query")
    assert 'name="search[query]"' in html
    assert wrapper_classes(html) == ["string", "optional"]


def test_value_is_escaped(person):
    person.first_name = '<script>"x"</script>'
    html = FormBuilder(person).input("first_name")
    assert "<script>" not in html
    assert 'value="&lt;script&gt;&#34;x&#34;&lt;/script&gt;"' in html


def test_describe_field_is_frozen(builder):
    descriptor = builder.part_composer.describe_field(builder, "title", {"input_html": {"id": "x"}})
    assert descriptor.input_type == "string"
    assert descriptor.label_html["for"] == "x"
    with pytest.raises(TypeError):
        descriptor.input_html["id"] = "y"
    with pytest.raises(AttributeError):
        descriptor.required = False
