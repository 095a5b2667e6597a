"""Tests for renderer registration and builder-hierarchy lookup."""

import pytest
from markupsafe import Markup

from semantic_formgen.exceptions import UnknownInputTypeError
from semantic_formgen.forms.form_builder import FormBuilder
from semantic_formgen.forms.input_types import register_input_type, unregister_input_type
from semantic_formgen.forms.renderer_registry import RENDERERS, RendererRegistry


def fancy_string(builder, field):
    return Markup("<fancy>{}</fancy>").format(field.name)


def plain_string(builder, field):
    return Markup("<plain>{}</plain>").format(field.name)


def test_every_core_type_has_a_default_renderer():
    """The base builder can render every core input type."""
    from semantic_formgen.forms.input_types import InputType

    for input_type in InputType:
        assert callable(RENDERERS.lookup(input_type, FormBuilder))


def test_most_specific_builder_wins():
    """A subclass binding shadows the base binding for that subclass only."""
    class AdminBuilder(FormBuilder):
        pass

    class SuperAdminBuilder(AdminBuilder):
        pass

    FormBuilder.register_input("string", plain_string)
    AdminBuilder.register_input("string", fancy_string)
    try:
        assert RENDERERS.lookup("string", AdminBuilder) is fancy_string
        assert RENDERERS.lookup("string", SuperAdminBuilder) is fancy_string
        assert RENDERERS.lookup("string", FormBuilder) is plain_string
        # Other tags still come from the defaults
        assert RENDERERS.lookup("text", AdminBuilder) is RENDERERS.lookup("text", FormBuilder)
    finally:
        RENDERERS.unregister("string", FormBuilder)
        RENDERERS.unregister("string", AdminBuilder)


def test_subclass_override_used_when_rendering(article):
    class AdminBuilder(FormBuilder):
        pass

    AdminBuilder.register_input("string", fancy_string)
    try:
        assert "<fancy>title</fancy>" in AdminBuilder(article).input("title")
        assert "<fancy>" not in FormBuilder(article).input("title")
    finally:
        RENDERERS.unregister("string", AdminBuilder)


def test_resolution_chain_order():
    class AdminBuilder(FormBuilder):
        pass

    registry = RendererRegistry()
    registry.register("string", plain_string)
    registry.register("string", fancy_string, AdminBuilder)
    assert registry.resolution_chain(AdminBuilder) == [AdminBuilder, None]


def test_undeclared_tag_fails_at_registration():
    with pytest.raises(UnknownInputTypeError):
        RENDERERS.register("colour", fancy_string)


def test_declared_tag_without_renderer_fails_at_lookup():
    register_input_type("colour")
    try:
        with pytest.raises(UnknownInputTypeError) as exc_info:
            RENDERERS.lookup("colour", FormBuilder)
        assert "colour" in str(exc_info.value)
    finally:
        unregister_input_type("colour")


def test_extension_tag_end_to_end(article):
    register_input_type("colour")
    RENDERERS.register("colour", fancy_string)
    try:
        html = FormBuilder(article).input("title", as_="colour")
        assert 'class="colour required"' in html
        assert "<fancy>title</fancy>" in html
    finally:
        RENDERERS.unregister("colour")
        unregister_input_type("colour")


def test_control_renderer_subclass_auto_registers(article):
    """Defining a ControlRenderer subclass binds it to its builder."""
    from semantic_formgen.renderers.base import ControlRenderer

    class ReportBuilder(FormBuilder):
        pass

    class ShoutingString(ControlRenderer):
        input_type = "string"
        builder = ReportBuilder

        def render(self, builder, field):
            return Markup("<b>{}</b>").format(field.name.upper())

    try:
        assert isinstance(RENDERERS.lookup("string", ReportBuilder), ShoutingString)
        assert "<b>TITLE</b>" in ReportBuilder(article).input("title")
    finally:
        RENDERERS.unregister("string", ReportBuilder)


def test_abstract_renderer_is_not_registered():
    from semantic_formgen.renderers.base import ControlRenderer

    class StillAbstract(ControlRenderer):
        input_type = "string"

    assert not isinstance(RENDERERS.lookup("string", FormBuilder), StillAbstract)


def test_lookup_is_cached_until_registration():
    class CachedBuilder(FormBuilder):
        pass

    registry = RendererRegistry()
    registry.register("string", plain_string)
    assert registry.lookup("string", CachedBuilder) is plain_string
    registry.register("string", fancy_string, CachedBuilder)
    assert registry.lookup("string", CachedBuilder) is fancy_string
