"""Schema introspection provider protocol.

The composition engine never talks to an ORM directly. It asks a
SchemaIntrospector for column types, required-ness, associations and
content columns, and treats ``SchemaIntrospectionUnavailable`` as "no
information" rather than as a failure.
"""

from enum import Enum
from typing import Any, Iterable, List, Optional, Protocol


class ColumnType(Enum):
    """Semantic column types reported by introspectors."""
    STRING = "string"
    TEXT = "text"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    TIMESTAMP = "timestamp"
    TIME = "time"
    INTEGER = "integer"
    FLOAT = "float"
    DECIMAL = "decimal"
    BINARY = "binary"


class AssociationKind(Enum):
    """Association macros, named after the relationship they model."""
    BELONGS_TO = "belongs_to"
    HAS_ONE = "has_one"
    HAS_MANY = "has_many"
    HAS_AND_BELONGS_TO_MANY = "has_and_belongs_to_many"

    @property
    def is_collection(self) -> bool:
        return self in (AssociationKind.HAS_MANY, AssociationKind.HAS_AND_BELONGS_TO_MANY)

    @property
    def is_single_reference(self) -> bool:
        return self is AssociationKind.BELONGS_TO


class SchemaIntrospector(Protocol):
    """Protocol for querying a bound object's structural metadata.

    Every method may raise ``SchemaIntrospectionUnavailable`` when the object
    (or the field) cannot be classified.
    """

    def handles(self, obj: Any) -> bool:
        """Return True if this introspector understands ``obj``."""
        ...

    def column_type(self, obj: Any, field: str) -> Optional[ColumnType]:
        """Return the column type of ``field`` or None when it is not a column."""
        ...

    def is_required(self, obj: Any, field: str) -> Optional[bool]:
        """Return required-ness, or None when the schema does not say."""
        ...

    def association_kind(self, obj: Any, field: str) -> Optional[AssociationKind]:
        """Return the association kind of ``field`` or None."""
        ...

    def associations(self, obj: Any, kinds: Optional[Iterable[AssociationKind]] = None) -> List[str]:
        """Return association names in declaration order, optionally filtered."""
        ...

    def content_columns(self, obj: Any) -> List[str]:
        """Return non-key, non-association column names in declaration order."""
        ...

    def errors_on(self, obj: Any, field: str) -> List[str]:
        """Return validation error messages attached to ``field``."""
        ...


_introspectors: List[SchemaIntrospector] = []


def register_schema_introspector(introspector: SchemaIntrospector) -> None:
    """Register an introspector ahead of the ones already known.

    Later registrations win so applications can shadow the built-in
    providers for their own model base classes.
    """
    _introspectors.insert(0, introspector)


def get_schema_introspectors() -> List[SchemaIntrospector]:
    """Get registered introspectors, most recently registered first."""
    return list(_introspectors)


def unregister_schema_introspector(introspector: SchemaIntrospector) -> None:
    """Remove a previously registered introspector; unknown ones are ignored."""
    if introspector in _introspectors:
        _introspectors.remove(introspector)


def errors_attribute_messages(obj: Any, field: str) -> List[str]:
    """Read messages for ``field`` from an ``errors`` mapping on ``obj``.

    Shared by the built-in introspectors; a single string is treated as one
    message.
    """
    errors = getattr(obj, "errors", None)
    if not errors or not hasattr(errors, "get"):
        return []
    messages = errors.get(field) or []
    if isinstance(messages, str):
        return [messages]
    return list(messages)
