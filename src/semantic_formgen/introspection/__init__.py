"""
Schema introspector selection.

Applications register their own providers with
``register_schema_introspector``; the built-in dataclass and SQLAlchemy
introspectors are consulted after them. Objects nobody understands get the
UnavailableIntrospector, which makes every query raise
``SchemaIntrospectionUnavailable`` so callers take their fallback path.
"""

import logging
from typing import Any, Iterable, List, Optional

from semantic_formgen.exceptions import SchemaIntrospectionUnavailable
from semantic_formgen.protocols.schema_introspector import (
    AssociationKind,
    ColumnType,
    SchemaIntrospector,
    get_schema_introspectors,
    errors_attribute_messages,
)
from .dataclass_introspector import DataclassIntrospector
from .sqlalchemy_introspector import SqlAlchemyIntrospector

logger = logging.getLogger(__name__)


class UnavailableIntrospector:
    """Introspector for objects without discoverable schema."""

    def handles(self, obj: Any) -> bool:
        return True

    def _unavailable(self, obj: Any):
        raise SchemaIntrospectionUnavailable(
            f"No schema introspector for {type(obj).__name__}"
        )

    def column_type(self, obj: Any, field: str) -> Optional[ColumnType]:
        self._unavailable(obj)

    def is_required(self, obj: Any, field: str) -> Optional[bool]:
        self._unavailable(obj)

    def association_kind(self, obj: Any, field: str) -> Optional[AssociationKind]:
        self._unavailable(obj)

    def associations(self, obj: Any, kinds: Optional[Iterable[AssociationKind]] = None) -> List[str]:
        self._unavailable(obj)

    def content_columns(self, obj: Any) -> List[str]:
        self._unavailable(obj)

    def errors_on(self, obj: Any, field: str) -> List[str]:
        return errors_attribute_messages(obj, field)


BUILTIN_INTROSPECTORS = (SqlAlchemyIntrospector(), DataclassIntrospector())
UNAVAILABLE = UnavailableIntrospector()


def introspector_for(obj: Any) -> SchemaIntrospector:
    """
    Pick the introspector for a bound object.

    Args:
        obj: The bound object (may be None)

    Returns:
        First registered introspector that handles obj, then the built-ins,
        then UnavailableIntrospector
    """
    for introspector in (*get_schema_introspectors(), *BUILTIN_INTROSPECTORS):
        if introspector.handles(obj):
            return introspector
    logger.debug(f"No schema introspector handles {type(obj).__name__}")
    return UNAVAILABLE


__all__ = [
    "DataclassIntrospector",
    "SqlAlchemyIntrospector",
    "UnavailableIntrospector",
    "introspector_for",
]
