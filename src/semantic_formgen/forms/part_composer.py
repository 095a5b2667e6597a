"""
Part composition: one field -> one wrapped composition unit.

A unit is the ordered concatenation of the field's sub-parts (label,
control, hint, errors) inside an ``li`` carrying the computed class list
and id. Which parts appear, and in what order, comes from the config
(``inline_order`` / ``custom_inline_order``); hidden inputs never render
hints or errors.
"""

from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Mapping, Optional
import logging

from markupsafe import Markup

from semantic_formgen.core.html import join_markup, merge_classes, normalize_attributes, wrap_element
from .field_descriptor import FieldDescriptor
from .form_constants import CONSTANTS
from .input_types import InputType
from .type_resolver import TypeResolver

if TYPE_CHECKING:
    from .form_builder import FormBuilder

logger = logging.getLogger(__name__)


class Part(str, Enum):
    """Sub-parts of a composition unit."""
    LABEL = "label"
    CONTROL = "control"
    HINT = "hint"
    ERRORS = "errors"


# Closed part -> sub-renderer table; builders override the render_* methods
PART_RENDERERS: Dict[Part, Callable[["FormBuilder", FieldDescriptor], Markup]] = {
    Part.LABEL: lambda builder, field: builder.render_label(field),
    Part.CONTROL: lambda builder, field: builder.render_control(field),
    Part.HINT: lambda builder, field: builder.render_hint(field),
    Part.ERRORS: lambda builder, field: builder.render_errors(field),
}

HIDDEN_EXCLUDED_PARTS = frozenset({Part.HINT, Part.ERRORS})

REQUIREDNESS_CLASSES = frozenset({CONSTANTS.REQUIRED_CLASS, CONSTANTS.OPTIONAL_CLASS})


class PartComposer:
    """Builds FieldDescriptors and renders them into composition units."""

    def __init__(self, resolver: Optional[TypeResolver] = None):
        self.resolver = resolver or TypeResolver()

    def describe_field(self, builder: "FormBuilder", field: str,
                       options: Optional[Mapping[str, Any]] = None) -> FieldDescriptor:
        """
        Resolve one field into a FieldDescriptor.

        Args:
            builder: Builder supplying the bound object and naming
            field: Field identifier
            options: Caller options for ``input``

        Returns:
            Immutable FieldDescriptor
        """
        # Copy so callers can share an options dict between input() calls
        options = dict(options or {})
        resolution = self.resolver.describe(builder.object, field, options)
        errors = tuple(builder.errors_on(field))

        wrapper_html = normalize_attributes(options.pop(CONSTANTS.WRAPPER_HTML_OPTION, None))
        input_html = normalize_attributes(options.pop(CONSTANTS.INPUT_HTML_OPTION, None))
        label_html = normalize_attributes(options.pop(CONSTANTS.LABEL_HTML_OPTION, None))

        # The resolved marker is the only required/optional class on the wrapper
        caller_classes = [
            name for name in merge_classes(wrapper_html.pop("class", None))
            if name not in REQUIREDNESS_CLASSES
        ]
        html_class = merge_classes(
            [
                resolution.input_type,
                CONSTANTS.REQUIRED_CLASS if resolution.required else CONSTANTS.OPTIONAL_CLASS,
                CONSTANTS.ERROR_CLASS if errors else None,
            ],
            caller_classes,
        )
        html_id = wrapper_html.pop("id", None) or builder.wrapper_id(field)

        # An explicit control id becomes the label's target unless the caller chose one
        control_id = input_html.get("id") or builder.control_id(field)
        label_html.setdefault("for", control_id)

        options[CONSTANTS.AS_OPTION] = resolution.input_type
        options[CONSTANTS.REQUIRED_OPTION] = resolution.required

        return FieldDescriptor(
            name=field,
            input_type=resolution.input_type,
            required=resolution.required,
            options=options,
            input_html=input_html,
            wrapper_html=wrapper_html,
            label_html=label_html,
            html_id=html_id,
            html_class=tuple(html_class),
            errors=errors,
            column_type=resolution.column_type,
            association=resolution.association,
        )

    def parts_for(self, builder: "FormBuilder", input_type: str) -> List[Part]:
        """Ordered sub-parts to render for an input type."""
        parts = [Part(part) for part in builder.config.inline_order_for(input_type)]
        if input_type == InputType.HIDDEN.value:
            parts = [part for part in parts if part not in HIDDEN_EXCLUDED_PARTS]
        return parts

    def compose_field(self, builder: "FormBuilder", field: str,
                      options: Optional[Mapping[str, Any]] = None) -> Markup:
        """
        Render one field as a wrapped composition unit.

        Empty sub-part output is dropped rather than wrapped.

        Raises:
            UnknownInputTypeError: If the resolved tag has no renderer
        """
        descriptor = self.describe_field(builder, field, options)
        rendered = [
            PART_RENDERERS[part](builder, descriptor)
            for part in self.parts_for(builder, descriptor.input_type)
        ]
        content = join_markup(rendered, builder.config.part_separator)
        attributes = {"class": list(descriptor.html_class), "id": descriptor.html_id}
        attributes.update(descriptor.wrapper_html)
        return wrap_element(CONSTANTS.WRAPPER_ELEMENT, content, attributes)
