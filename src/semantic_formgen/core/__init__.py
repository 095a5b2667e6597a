"""
Core markup and naming utilities.

Pure helpers with no dependency on builders or registries.
"""

from .html import (
    wrap_element,
    void_element,
    render_attributes,
    join_markup,
    merge_classes,
    merge_attributes,
    normalize_attributes,
)
from .naming import humanize, underscore, singularize, sanitize_id, is_field_identifier

__all__ = [
    "wrap_element",
    "void_element",
    "render_attributes",
    "join_markup",
    "merge_classes",
    "merge_attributes",
    "normalize_attributes",
    "humanize",
    "underscore",
    "singularize",
    "sanitize_id",
    "is_field_identifier",
]
