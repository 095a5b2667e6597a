"""
Protocols and global providers.

Interfaces the composition engine depends on (schema introspection,
renderers) plus the process-wide configuration object.
"""

from .form_config import (
    FormGenConfig,
    set_form_config,
    get_form_config,
    DEFAULT_INLINE_ORDER,
    DEFAULT_RESERVED_COLUMNS,
    KNOWN_PARTS,
)
from .schema_introspector import (
    ColumnType,
    AssociationKind,
    SchemaIntrospector,
    register_schema_introspector,
    unregister_schema_introspector,
    get_schema_introspectors,
)
from .renderer import Renderer

__all__ = [
    "FormGenConfig",
    "set_form_config",
    "get_form_config",
    "DEFAULT_INLINE_ORDER",
    "DEFAULT_RESERVED_COLUMNS",
    "KNOWN_PARTS",
    "ColumnType",
    "AssociationKind",
    "SchemaIntrospector",
    "register_schema_introspector",
    "unregister_schema_introspector",
    "get_schema_introspectors",
    "Renderer",
]
