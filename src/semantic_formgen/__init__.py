"""
semantic-formgen: schema-driven semantic HTML form generation.

Inspects a bound object's schema (column types, associations, required-ness)
and renders a semantically typed input for each field, composed into
fieldsets and ordered lists.

Architecture:
- Protocols: configuration, schema introspection and renderer interfaces
- Introspection: dataclass and SQLAlchemy schema providers
- Forms: type resolution, renderer registry, part and group composition
- Renderers: core control, label, hint and error renderers

Key Features:
- Input type inference from column types, associations and field names
- Per-builder-subclass renderer overrides via hierarchy lookup
- Configurable sub-part order per input type
- Schema-inferred and nested-association fieldsets
"""

import importlib

__version__ = "0.1.0"

_EXPORTS = {
    "FormBuilder": ("semantic_formgen.forms.form_builder", "FormBuilder"),
    "InputType": ("semantic_formgen.forms.input_types", "InputType"),
    "register_input_type": ("semantic_formgen.forms.input_types", "register_input_type"),
    "register_renderer": ("semantic_formgen.forms.renderer_registry", "register_renderer"),
    "RENDERERS": ("semantic_formgen.forms.renderer_registry", "RENDERERS"),
    "ControlRenderer": ("semantic_formgen.renderers.base", "ControlRenderer"),
    "FormGenConfig": ("semantic_formgen.protocols.form_config", "FormGenConfig"),
    "set_form_config": ("semantic_formgen.protocols.form_config", "set_form_config"),
    "get_form_config": ("semantic_formgen.protocols.form_config", "get_form_config"),
    "register_schema_introspector": (
        "semantic_formgen.protocols.schema_introspector", "register_schema_introspector"
    ),
    "FormGenError": ("semantic_formgen.exceptions", "FormGenError"),
    "UnknownInputTypeError": ("semantic_formgen.exceptions", "UnknownInputTypeError"),
    "SchemaIntrospectionUnavailable": ("semantic_formgen.exceptions", "SchemaIntrospectionUnavailable"),
    "MalformedFieldList": ("semantic_formgen.exceptions", "MalformedFieldList"),
    "CyclicAssociationError": ("semantic_formgen.exceptions", "CyclicAssociationError"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["__version__", *_EXPORTS.keys()]
