"""
Field descriptor: one field, fully resolved, ready for rendering.

Built once per ``input`` call by the part composer and handed to every
sub-part renderer. Frozen so renderers cannot leak changes between parts.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from semantic_formgen.protocols.schema_introspector import AssociationKind, ColumnType


def _frozen(mapping: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class FieldDescriptor:
    """Resolved field information shared by all sub-part renderers."""
    name: str
    input_type: str
    required: bool
    options: Mapping[str, Any] = field(default_factory=lambda: _frozen(None))
    input_html: Mapping[str, Any] = field(default_factory=lambda: _frozen(None))
    wrapper_html: Mapping[str, Any] = field(default_factory=lambda: _frozen(None))
    label_html: Mapping[str, Any] = field(default_factory=lambda: _frozen(None))
    html_id: str = ""
    html_class: Tuple[str, ...] = ()
    errors: Tuple[str, ...] = ()
    column_type: Optional[ColumnType] = None
    association: Optional[AssociationKind] = None

    def __post_init__(self):
        for name in ("options", "input_html", "wrapper_html", "label_html"):
            value = getattr(self, name)
            if not isinstance(value, MappingProxyType):
                object.__setattr__(self, name, _frozen(value))

    def option(self, key: str, default: Any = None) -> Any:
        """Read a caller option."""
        return self.options.get(key, default)
