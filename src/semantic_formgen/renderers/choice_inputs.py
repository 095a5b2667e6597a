"""
Choice controls: select, radio, check_boxes, boolean, time_zone, country.

Choices come from the ``collection`` option. Associations submit ids:
single references as ``<field>_id``, collections as ``<singular>_ids[]``.
"""

import zoneinfo
from typing import TYPE_CHECKING, List, Set
import logging

from markupsafe import Markup

from semantic_formgen.core.html import join_markup, merge_attributes, void_element, wrap_element
from semantic_formgen.core.naming import sanitize_id, singularize
from semantic_formgen.forms.field_descriptor import FieldDescriptor
from semantic_formgen.forms.form_constants import CONSTANTS
from semantic_formgen.forms.input_types import InputType
from semantic_formgen.protocols.schema_introspector import ColumnType
from .base import Choice, ControlRenderer, collection_choices, selected_values
from .parts import label_text

if TYPE_CHECKING:
    from semantic_formgen.forms.form_builder import FormBuilder

logger = logging.getLogger(__name__)

BOOLEAN_CHOICES: List[Choice] = [("Yes", True), ("No", False)]


def _is_multiple(field: FieldDescriptor) -> bool:
    if field.option("multiple") is not None:
        return bool(field.option("multiple"))
    return field.association is not None and field.association.is_collection


def submitted_name(builder: "FormBuilder", field: FieldDescriptor) -> str:
    """Parameter name the control submits under."""
    if field.association is not None and field.association.is_collection:
        return builder.param_name(
            f"{singularize(field.name)}{CONSTANTS.COLLECTION_REFERENCE_SUFFIX}"
        ) + "[]"
    if field.association is not None and field.association.is_single_reference:
        return builder.param_name(f"{field.name}{CONSTANTS.SINGLE_REFERENCE_SUFFIX}")
    if field.input_type == InputType.CHECK_BOXES.value or _is_multiple(field):
        return builder.param_name(field.name) + "[]"
    return builder.param_name(field.name)


class ChoiceInput(ControlRenderer):
    """Shared choice lookup for the collection-driven controls."""

    def choices(self, builder: "FormBuilder", field: FieldDescriptor) -> List[Choice]:
        collection = field.option(CONSTANTS.COLLECTION_OPTION)
        if collection is None and field.column_type is ColumnType.BOOLEAN:
            return list(BOOLEAN_CHOICES)
        if collection is None:
            logger.debug(f"No collection given for {field.name}, rendering without choices")
        return collection_choices(collection)

    def selected(self, builder: "FormBuilder", field: FieldDescriptor) -> Set[str]:
        return set(selected_values(builder.value_of(field.name)))


class SelectInput(ChoiceInput):
    input_type = InputType.SELECT.value

    def render_options(self, choices: List[Choice], selected: Set[str],
                       include_blank: bool) -> Markup:
        options = []
        if include_blank:
            options.append(wrap_element("option", "", {"value": ""}))
        for label, value in choices:
            options.append(wrap_element("option", label, {
                "value": "" if value is None else str(value),
                "selected": str(value) in selected,
            }))
        return join_markup(options, "\n")

    def render(self, builder: "FormBuilder", field: FieldDescriptor) -> Markup:
        multiple = _is_multiple(field)
        include_blank = field.option("include_blank")
        if include_blank is None:
            include_blank = builder.config.include_blank_for_select_by_default and not multiple
        attributes = self.base_attributes(builder, field, submitted_name(builder, field))
        attributes.setdefault("multiple", multiple or None)
        options = self.render_options(
            self.choices(builder, field), self.selected(builder, field), bool(include_blank),
        )
        return wrap_element("select", options, attributes)


class ChoiceListInput(ChoiceInput):
    """fieldset > legend + ol of labelled radio buttons or check boxes."""

    html_type: str = "radio"

    def render(self, builder: "FormBuilder", field: FieldDescriptor) -> Markup:
        name = submitted_name(builder, field)
        selected = self.selected(builder, field)
        base_id = builder.control_id(field.name)
        items = []
        for label, value in self.choices(builder, field):
            value_text = "" if value is None else str(value)
            choice_id = sanitize_id(f"{base_id}_{value_text}").lower()
            control = void_element("input", merge_attributes({
                "type": self.html_type,
                "id": choice_id,
                "name": name,
                "value": value_text,
                "checked": value_text in selected,
            }, field.input_html))
            label_element = wrap_element(
                "label", Markup("{} {}").format(control, label), {"for": choice_id},
            )
            items.append(wrap_element("li", label_element))
        legend = ""
        if field.option(CONSTANTS.LABEL_OPTION) is not False:
            legend = wrap_element("legend", wrap_element(
                "label", label_text(builder, field), {"class": "label"},
            ))
        body = join_markup([legend, wrap_element("ol", join_markup(items, "\n"))], "\n")
        return wrap_element("fieldset", body)


class RadioInput(ChoiceListInput):
    input_type = InputType.RADIO.value
    html_type = "radio"


class CheckBoxesInput(ChoiceListInput):
    input_type = InputType.CHECK_BOXES.value
    html_type = "checkbox"


class BooleanInput(ControlRenderer):
    """Hidden "0" plus a checkbox, so unchecked boxes still submit a value."""

    input_type = InputType.BOOLEAN.value
    checked_value: str = "1"
    unchecked_value: str = "0"

    def render(self, builder: "FormBuilder", field: FieldDescriptor) -> Markup:
        attributes = {"type": "checkbox", "value": self.checked_value}
        attributes.update(self.base_attributes(builder, field))
        attributes["checked"] = bool(builder.value_of(field.name))
        attributes.pop("required", None)
        hidden = void_element("input", {
            "type": "hidden", "name": attributes["name"], "value": self.unchecked_value,
        })
        checkbox = void_element("input", attributes)
        if field.option(CONSTANTS.LABEL_OPTION) is False:
            return join_markup([hidden, checkbox], "")
        return wrap_element(
            "label",
            Markup("{}{} {}").format(hidden, checkbox, label_text(builder, field)),
            {"for": attributes["id"]},
        )


class TimeZoneInput(SelectInput):
    input_type = InputType.TIME_ZONE.value

    def choices(self, builder: "FormBuilder", field: FieldDescriptor) -> List[Choice]:
        if field.option(CONSTANTS.COLLECTION_OPTION) is not None:
            return super().choices(builder, field)
        priority = list(field.option("priority_zones") or builder.config.priority_time_zones)
        rest = sorted(zoneinfo.available_timezones() - set(priority))
        return [(zone, zone) for zone in [*priority, *rest]]


class CountryInput(SelectInput):
    input_type = InputType.COUNTRY.value

    def choices(self, builder: "FormBuilder", field: FieldDescriptor) -> List[Choice]:
        if field.option(CONSTANTS.COLLECTION_OPTION) is not None:
            return super().choices(builder, field)
        return collection_choices(builder.config.country_choices)
