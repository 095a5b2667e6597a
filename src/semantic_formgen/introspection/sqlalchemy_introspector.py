"""
Schema introspection for SQLAlchemy mapped objects.

Columns come from the mapper's column attributes, associations from its
relationships:

- MANYTOONE -> BELONGS_TO
- ONETOMANY -> HAS_MANY (HAS_ONE when ``uselist=False``)
- MANYTOMANY -> HAS_AND_BELONGS_TO_MANY

Content columns exclude primary keys and foreign keys, mirroring what a
scaffolded form would show.
"""

import logging
from typing import Any, Iterable, List, Optional

import sqlalchemy as sa
from sqlalchemy.exc import NoInspectionAvailable
from sqlalchemy.orm import Mapper, RelationshipDirection

from semantic_formgen.exceptions import SchemaIntrospectionUnavailable
from semantic_formgen.protocols.schema_introspector import (
    AssociationKind,
    ColumnType,
    errors_attribute_messages,
)

logger = logging.getLogger(__name__)

# Subclasses before their bases (Text < String, Float < Numeric)
_SQL_TYPE_COLUMNS = (
    (sa.Boolean, ColumnType.BOOLEAN),
    (sa.Text, ColumnType.TEXT),
    (sa.String, ColumnType.STRING),
    (sa.Integer, ColumnType.INTEGER),
    (sa.Float, ColumnType.FLOAT),
    (sa.Numeric, ColumnType.DECIMAL),
    (sa.DateTime, ColumnType.DATETIME),
    (sa.Date, ColumnType.DATE),
    (sa.Time, ColumnType.TIME),
    (sa.LargeBinary, ColumnType.BINARY),
)


def _mapper(obj: Any) -> Mapper:
    target = obj if isinstance(obj, type) else type(obj)
    try:
        return sa.inspect(target)
    except NoInspectionAvailable as e:
        raise SchemaIntrospectionUnavailable(f"{target.__name__} is not mapped") from e


def _association_kind(relationship) -> AssociationKind:
    direction = relationship.direction
    if direction is RelationshipDirection.MANYTOONE:
        return AssociationKind.BELONGS_TO
    if direction is RelationshipDirection.MANYTOMANY:
        return AssociationKind.HAS_AND_BELONGS_TO_MANY
    return AssociationKind.HAS_MANY if relationship.uselist else AssociationKind.HAS_ONE


class SqlAlchemyIntrospector:
    """SchemaIntrospector for SQLAlchemy declarative instances."""

    def handles(self, obj: Any) -> bool:
        if obj is None:
            return False
        target = obj if isinstance(obj, type) else type(obj)
        return sa.inspect(target, raiseerr=False) is not None

    def _column(self, obj: Any, field: str):
        mapper = _mapper(obj)
        attr = mapper.column_attrs.get(field)
        if attr is None:
            return None
        return attr.columns[0]

    def column_type(self, obj: Any, field: str) -> Optional[ColumnType]:
        column = self._column(obj, field)
        if column is None:
            if field in _mapper(obj).relationships:
                return None
            raise SchemaIntrospectionUnavailable(
                f"{type(obj).__name__} has no column or relationship {field!r}"
            )
        for sql_type, column_type in _SQL_TYPE_COLUMNS:
            if isinstance(column.type, sql_type):
                return column_type
        logger.debug(f"Unmapped SQL type {column.type!r} for {field}, treating as string")
        return ColumnType.STRING

    def is_required(self, obj: Any, field: str) -> Optional[bool]:
        column = self._column(obj, field)
        if column is None:
            relationship = _mapper(obj).relationships.get(field)
            if relationship is None or relationship.direction is not RelationshipDirection.MANYTOONE:
                return None
            return not any(local.nullable for local in relationship.local_columns)
        if column.primary_key:
            return False
        has_default = column.default is not None or column.server_default is not None
        return not column.nullable and not has_default

    def association_kind(self, obj: Any, field: str) -> Optional[AssociationKind]:
        relationship = _mapper(obj).relationships.get(field)
        if relationship is None:
            return None
        return _association_kind(relationship)

    def associations(self, obj: Any, kinds: Optional[Iterable[AssociationKind]] = None) -> List[str]:
        wanted = set(kinds) if kinds is not None else None
        return [
            relationship.key
            for relationship in _mapper(obj).relationships
            if wanted is None or _association_kind(relationship) in wanted
        ]

    def content_columns(self, obj: Any) -> List[str]:
        names = []
        for attr in _mapper(obj).column_attrs:
            column = attr.columns[0]
            if column.primary_key or column.foreign_keys:
                continue
            names.append(attr.key)
        return names

    def errors_on(self, obj: Any, field: str) -> List[str]:
        return errors_attribute_messages(obj, field)
