"""Label, hint and inline error sub-part renderers."""

from typing import TYPE_CHECKING

from markupsafe import Markup

from semantic_formgen.core.html import join_markup, merge_attributes, wrap_element
from semantic_formgen.core.naming import humanize
from semantic_formgen.forms.field_descriptor import FieldDescriptor
from semantic_formgen.forms.form_constants import CONSTANTS
from semantic_formgen.forms.input_types import InputType

if TYPE_CHECKING:
    from semantic_formgen.forms.form_builder import FormBuilder

# Controls that render their own label or legend
SELF_LABELLED_TYPES = frozenset({
    InputType.BOOLEAN.value, InputType.RADIO.value, InputType.CHECK_BOXES.value,
})


def label_text(builder: "FormBuilder", field: FieldDescriptor) -> Markup:
    """Label text plus the configured required/optional marker."""
    text = field.option(CONSTANTS.LABEL_OPTION)
    if text is None or text is True:
        text = humanize(field.name)
    marker = builder.config.required_string if field.required else builder.config.optional_string
    # Markers come from configuration and are trusted markup
    return Markup("{}{}").format(text, Markup(marker))


def label_for(builder: "FormBuilder", field: FieldDescriptor) -> Markup:
    if field.option(CONSTANTS.LABEL_OPTION) is False:
        return Markup("")
    if field.input_type in SELF_LABELLED_TYPES:
        return Markup("")
    attributes = merge_attributes({"class": ["label"]}, field.label_html)
    return wrap_element("label", label_text(builder, field), attributes)


def hint_for(builder: "FormBuilder", field: FieldDescriptor) -> Markup:
    hint = field.option(CONSTANTS.HINT_OPTION)
    if not hint:
        return Markup("")
    return wrap_element("p", hint, {"class": builder.config.default_hint_class})


def _to_sentence(messages) -> str:
    if len(messages) <= 1:
        return "".join(messages)
    return f"{', '.join(messages[:-1])} and {messages[-1]}"


def errors_for(builder: "FormBuilder", field: FieldDescriptor) -> Markup:
    mode = builder.config.inline_errors
    messages = list(field.errors)
    if not messages or mode == "none":
        return Markup("")
    if mode == "list":
        items = [wrap_element("li", message) for message in messages]
        return wrap_element("ul", join_markup(items, ""), {"class": builder.config.default_error_list_class})
    text = messages[0] if mode == "first" else _to_sentence(messages)
    return wrap_element("p", text, {"class": builder.config.default_inline_error_class})
