"""
Schema introspection for plain dataclasses.

Type hints drive the classification:
- bool/int/float/Decimal/str/date/datetime/time map to column types
- a nested dataclass is a single-reference association (BELONGS_TO)
- a list of dataclasses is a collection association (HAS_MANY)
- Optional[...] makes a field optional, a field without default is required

Field metadata can override both: ``field(metadata={"column_type": "text",
"required": True})``. Validation errors are read from an ``errors`` mapping
on the instance when present.
"""

import dataclasses
import datetime
import decimal
import logging
from typing import Any, Dict, Iterable, List, Optional, Type, Union, get_args, get_origin, get_type_hints

from semantic_formgen.exceptions import SchemaIntrospectionUnavailable
from semantic_formgen.protocols.schema_introspector import (
    AssociationKind,
    ColumnType,
    errors_attribute_messages,
)

logger = logging.getLogger(__name__)

# Order matters: bool before int, datetime before date
_PYTHON_TYPE_COLUMNS = (
    (bool, ColumnType.BOOLEAN),
    (int, ColumnType.INTEGER),
    (float, ColumnType.FLOAT),
    (decimal.Decimal, ColumnType.DECIMAL),
    (datetime.datetime, ColumnType.DATETIME),
    (datetime.date, ColumnType.DATE),
    (datetime.time, ColumnType.TIME),
    (bytes, ColumnType.BINARY),
    (str, ColumnType.STRING),
)


def _unwrap_optional(annotation: Any):
    """Return (inner_type, is_optional) for Optional[T]; otherwise (annotation, False)."""
    if get_origin(annotation) is Union:
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1 and len(get_args(annotation)) == 2:
            return args[0], True
    return annotation, False


def _dataclass_type(obj: Any) -> Type:
    cls = obj if isinstance(obj, type) else type(obj)
    if not dataclasses.is_dataclass(cls):
        raise SchemaIntrospectionUnavailable(f"{cls.__name__} is not a dataclass")
    return cls


class DataclassIntrospector:
    """SchemaIntrospector for dataclass instances (and dataclass types)."""

    def handles(self, obj: Any) -> bool:
        return obj is not None and dataclasses.is_dataclass(obj)

    def _fields(self, obj: Any) -> Dict[str, dataclasses.Field]:
        return {f.name: f for f in dataclasses.fields(_dataclass_type(obj))}

    def _hints(self, obj: Any) -> Dict[str, Any]:
        cls = _dataclass_type(obj)
        try:
            return get_type_hints(cls)
        except (NameError, TypeError) as e:
            raise SchemaIntrospectionUnavailable(
                f"Cannot resolve type hints for {cls.__name__}: {e}"
            ) from e

    def _field(self, obj: Any, field: str) -> dataclasses.Field:
        fields = self._fields(obj)
        if field not in fields:
            raise SchemaIntrospectionUnavailable(
                f"{_dataclass_type(obj).__name__} has no field {field!r}"
            )
        return fields[field]

    def column_type(self, obj: Any, field: str) -> Optional[ColumnType]:
        declared = self._field(obj, field).metadata.get("column_type")
        if declared is not None:
            return ColumnType(declared)
        if self.association_kind(obj, field) is not None:
            return None
        annotation, _ = _unwrap_optional(self._hints(obj).get(field))
        if isinstance(annotation, type):
            for python_type, column_type in _PYTHON_TYPE_COLUMNS:
                if issubclass(annotation, python_type):
                    return column_type
        return None

    def is_required(self, obj: Any, field: str) -> Optional[bool]:
        dc_field = self._field(obj, field)
        if "required" in dc_field.metadata:
            return bool(dc_field.metadata["required"])
        _, is_optional = _unwrap_optional(self._hints(obj).get(field))
        if is_optional:
            return False
        has_default = (
            dc_field.default is not dataclasses.MISSING
            or dc_field.default_factory is not dataclasses.MISSING
        )
        return not has_default

    def association_kind(self, obj: Any, field: str) -> Optional[AssociationKind]:
        self._field(obj, field)
        annotation, _ = _unwrap_optional(self._hints(obj).get(field))
        if get_origin(annotation) in (list, tuple, set, frozenset):
            args = get_args(annotation)
            if args and dataclasses.is_dataclass(args[0]):
                return AssociationKind.HAS_MANY
            return None
        if isinstance(annotation, type) and dataclasses.is_dataclass(annotation):
            return AssociationKind.BELONGS_TO
        return None

    def associations(self, obj: Any, kinds: Optional[Iterable[AssociationKind]] = None) -> List[str]:
        wanted = set(kinds) if kinds is not None else None
        names = []
        for name in self._fields(obj):
            kind = self.association_kind(obj, name)
            if kind is None:
                continue
            if wanted is None or kind in wanted:
                names.append(name)
        return names

    def content_columns(self, obj: Any) -> List[str]:
        return [
            name for name in self._fields(obj)
            if self.association_kind(obj, name) is None and not name.startswith("_")
        ]

    def errors_on(self, obj: Any, field: str) -> List[str]:
        return errors_attribute_messages(obj, field)
