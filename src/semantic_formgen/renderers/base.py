"""
Control renderer base class and shared helpers.

Concrete subclasses declare ``input_type`` and implement ``render``; the
RendererMeta metaclass binds an instance to the default registry (or to
``builder`` when set) as soon as the class is defined.
"""

from abc import abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Tuple, Type

from markupsafe import Markup

from semantic_formgen.core.html import merge_attributes
from semantic_formgen.forms.field_descriptor import FieldDescriptor
from semantic_formgen.forms.renderer_registry import RendererMeta

if TYPE_CHECKING:
    from semantic_formgen.forms.form_builder import FormBuilder


class ControlRenderer(metaclass=RendererMeta):
    """Renders the control element for one input type."""

    input_type: Optional[str] = None
    # Builder class the renderer is bound to; None means every builder
    builder: Optional[Type] = None

    @abstractmethod
    def render(self, builder: "FormBuilder", field: FieldDescriptor) -> Markup:
        """Return the control markup for ``field``."""

    def __call__(self, builder: "FormBuilder", field: FieldDescriptor) -> Markup:
        return self.render(builder, field)

    def base_attributes(self, builder: "FormBuilder", field: FieldDescriptor,
                        name: Optional[str] = None) -> Dict[str, Any]:
        """id and name defaults merged with the caller's ``input_html``."""
        defaults = {
            "id": builder.control_id(field.name),
            "name": name or builder.param_name(field.name),
            "required": field.required or None,
        }
        return merge_attributes(defaults, field.input_html)


Choice = Tuple[str, Any]


def collection_choices(collection: Any) -> List[Choice]:
    """
    Normalize a ``collection`` option to (label, value) pairs.

    Accepts an Enum class, a mapping of label -> value, an iterable of
    (label, value) pairs, or an iterable of plain values.
    """
    if collection is None:
        return []
    if isinstance(collection, type) and issubclass(collection, Enum):
        return [(member.name.replace("_", " ").title(), member.value) for member in collection]
    if isinstance(collection, dict):
        return [(str(label), value) for label, value in collection.items()]
    choices = []
    for item in collection:
        if isinstance(item, (list, tuple)) and len(item) == 2:
            choices.append((str(item[0]), item[1]))
        elif isinstance(item, Enum):
            choices.append((item.name.replace("_", " ").title(), item.value))
        else:
            choices.append((str(item), item))
    return choices


def reference_value(value: Any) -> Any:
    """Submitted value for an associated object: its id when it has one."""
    if isinstance(value, Enum):
        return value.value
    return getattr(value, "id", value)


def selected_values(value: Any) -> Iterable[str]:
    """String forms of the current value(s), for comparing with choices."""
    if value is None:
        return set()
    if isinstance(value, (list, tuple, set, frozenset)):
        return {str(reference_value(item)) for item in value}
    return {str(reference_value(value))}
