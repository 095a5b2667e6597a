"""Renderer protocol consumed by the composition engine."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from markupsafe import Markup
    from semantic_formgen.forms.field_descriptor import FieldDescriptor
    from semantic_formgen.forms.form_builder import FormBuilder


class Renderer(Protocol):
    """Anything that turns one resolved field into markup.

    Control renderers (one per input type tag) and sub-part renderers
    (label, hint, errors) share this signature. The bound object is
    available as ``builder.object``. Returning an empty string means
    "nothing to render" and the part is dropped.
    """

    def __call__(self, builder: "FormBuilder", field: "FieldDescriptor") -> "Markup":
        ...
