"""
Form composition.

Type resolution, renderer dispatch, part and group composition, and the
FormBuilder that exposes them as ``input`` / ``inputs``.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .form_builder import FormBuilder
    from .field_descriptor import FieldDescriptor
    from .input_types import InputType, register_input_type, normalize_tag
    from .type_resolver import TypeResolver, Resolution
    from .renderer_registry import RendererRegistry, RENDERERS, register_renderer
    from .part_composer import PartComposer, Part
    from .group_composer import GroupComposer, GroupBranch

_EXPORTS = {
    "FormBuilder": ("semantic_formgen.forms.form_builder", "FormBuilder"),
    "FieldDescriptor": ("semantic_formgen.forms.field_descriptor", "FieldDescriptor"),
    "InputType": ("semantic_formgen.forms.input_types", "InputType"),
    "register_input_type": ("semantic_formgen.forms.input_types", "register_input_type"),
    "unregister_input_type": ("semantic_formgen.forms.input_types", "unregister_input_type"),
    "normalize_tag": ("semantic_formgen.forms.input_types", "normalize_tag"),
    "TypeResolver": ("semantic_formgen.forms.type_resolver", "TypeResolver"),
    "Resolution": ("semantic_formgen.forms.type_resolver", "Resolution"),
    "RendererRegistry": ("semantic_formgen.forms.renderer_registry", "RendererRegistry"),
    "RENDERERS": ("semantic_formgen.forms.renderer_registry", "RENDERERS"),
    "register_renderer": ("semantic_formgen.forms.renderer_registry", "register_renderer"),
    "PartComposer": ("semantic_formgen.forms.part_composer", "PartComposer"),
    "Part": ("semantic_formgen.forms.part_composer", "Part"),
    "GroupComposer": ("semantic_formgen.forms.group_composer", "GroupComposer"),
    "GroupBranch": ("semantic_formgen.forms.group_composer", "GroupBranch"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_EXPORTS.keys())
