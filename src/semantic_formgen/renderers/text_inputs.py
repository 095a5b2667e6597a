"""Single-value text-like controls: <input type=...> and <textarea>."""

from typing import TYPE_CHECKING, Any, Optional

from markupsafe import Markup

from semantic_formgen.core.html import void_element, wrap_element
from semantic_formgen.forms.field_descriptor import FieldDescriptor
from semantic_formgen.forms.input_types import InputType
from .base import ControlRenderer

if TYPE_CHECKING:
    from semantic_formgen.forms.form_builder import FormBuilder


class TextFieldInput(ControlRenderer):
    """``<input>`` with the builder's current value; subclasses pick the type."""

    html_type: str = "text"
    include_value: bool = True

    def format_value(self, value: Any) -> Optional[str]:
        return None if value is None else str(value)

    def render(self, builder: "FormBuilder", field: FieldDescriptor) -> Markup:
        attributes = {"type": self.html_type}
        attributes.update(self.base_attributes(builder, field))
        if self.include_value and "value" not in field.input_html:
            attributes["value"] = self.format_value(builder.value_of(field.name))
        return void_element("input", attributes)


class StringInput(TextFieldInput):
    input_type = InputType.STRING.value


class PasswordInput(TextFieldInput):
    input_type = InputType.PASSWORD.value
    html_type = "password"
    include_value = False


class EmailInput(TextFieldInput):
    input_type = InputType.EMAIL.value
    html_type = "email"


class UrlInput(TextFieldInput):
    input_type = InputType.URL.value
    html_type = "url"


class PhoneInput(TextFieldInput):
    input_type = InputType.PHONE.value
    html_type = "tel"


class SearchInput(TextFieldInput):
    input_type = InputType.SEARCH.value
    html_type = "search"


class NumericInput(TextFieldInput):
    input_type = InputType.NUMERIC.value
    html_type = "number"


class HiddenInput(TextFieldInput):
    input_type = InputType.HIDDEN.value
    html_type = "hidden"

    def base_attributes(self, builder, field, name=None):
        attributes = super().base_attributes(builder, field, name)
        # Hidden fields are never validated client side
        attributes.pop("required", None)
        return attributes


class TextInput(ControlRenderer):
    input_type = InputType.TEXT.value

    def render(self, builder: "FormBuilder", field: FieldDescriptor) -> Markup:
        value = builder.value_of(field.name)
        attributes = {"rows": 20}
        attributes.update(self.base_attributes(builder, field))
        return wrap_element("textarea", "" if value is None else str(value), attributes)
