"""
Core renderers.

Importing this package defines every core ControlRenderer subclass, which
binds them to the default registry through RendererMeta.
"""

from .base import ControlRenderer, collection_choices
from .parts import label_for, hint_for, errors_for, label_text
from .text_inputs import (
    TextFieldInput,
    StringInput,
    PasswordInput,
    EmailInput,
    UrlInput,
    PhoneInput,
    SearchInput,
    NumericInput,
    HiddenInput,
    TextInput,
)
from .temporal_inputs import DateInput, DateTimeInput, TimeInput
from .choice_inputs import (
    SelectInput,
    RadioInput,
    CheckBoxesInput,
    BooleanInput,
    TimeZoneInput,
    CountryInput,
)

__all__ = [
    "ControlRenderer",
    "collection_choices",
    "label_for",
    "hint_for",
    "errors_for",
    "label_text",
    "TextFieldInput",
    "StringInput",
    "PasswordInput",
    "EmailInput",
    "UrlInput",
    "PhoneInput",
    "SearchInput",
    "NumericInput",
    "HiddenInput",
    "TextInput",
    "DateInput",
    "DateTimeInput",
    "TimeInput",
    "SelectInput",
    "RadioInput",
    "CheckBoxesInput",
    "BooleanInput",
    "TimeZoneInput",
    "CountryInput",
]
