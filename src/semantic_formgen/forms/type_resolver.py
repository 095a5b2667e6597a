"""
Input type resolution.

Maps (field, caller overrides, schema info) to exactly one input type tag.
Precedence, first match wins:

1. Explicit ``as_`` override
2. Name heuristics (password, email, url, phone, ...), only for short-text
   columns or fields the schema knows nothing about
3. Associations -> select
4. Column type table (boolean, text, date, datetime, time, numeric, string)
5. string

Schema failures never escape: ``SchemaIntrospectionUnavailable`` simply
means the resolver works with less information.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional

from semantic_formgen.exceptions import SchemaIntrospectionUnavailable
from semantic_formgen.introspection import introspector_for
from semantic_formgen.protocols.form_config import FormGenConfig, get_form_config
from semantic_formgen.protocols.schema_introspector import (
    AssociationKind,
    ColumnType,
    SchemaIntrospector,
)
from .form_constants import CONSTANTS
from .input_types import InputType, normalize_tag

logger = logging.getLogger(__name__)

SCHEMA_TYPE_INPUTS: Dict[ColumnType, InputType] = {
    ColumnType.BOOLEAN: InputType.BOOLEAN,
    ColumnType.TEXT: InputType.TEXT,
    ColumnType.DATE: InputType.DATE,
    ColumnType.DATETIME: InputType.DATETIME,
    ColumnType.TIMESTAMP: InputType.DATETIME,
    ColumnType.TIME: InputType.TIME,
    ColumnType.INTEGER: InputType.NUMERIC,
    ColumnType.FLOAT: InputType.NUMERIC,
    ColumnType.DECIMAL: InputType.NUMERIC,
    ColumnType.STRING: InputType.STRING,
}


@dataclass(frozen=True)
class Resolution:
    """Everything the resolver learned about one field."""
    input_type: str
    required: bool
    column_type: Optional[ColumnType] = None
    association: Optional[AssociationKind] = None


class TypeResolver:
    """
    Resolve input type and required-ness for fields of a bound object.

    Args:
        introspector_lookup: Callable returning the SchemaIntrospector for an object
        config: FormGenConfig; the global config is read at call time when omitted
    """

    def __init__(self,
                 introspector_lookup: Callable[[Any], SchemaIntrospector] = introspector_for,
                 config: Optional[FormGenConfig] = None):
        self._introspector_lookup = introspector_lookup
        self._config = config

    @property
    def config(self) -> FormGenConfig:
        return self._config or get_form_config()

    def _query(self, obj: Any, method: str, field: str):
        """Call one introspector method, absorbing unavailability into None."""
        introspector = self._introspector_lookup(obj)
        try:
            return getattr(introspector, method)(obj, field)
        except SchemaIntrospectionUnavailable as e:
            logger.debug(f"Schema unavailable for {field}.{method}: {e}")
            return None

    def resolve(self, obj: Any, field: str, options: Optional[Mapping[str, Any]] = None) -> str:
        """Return the input type tag for ``field``."""
        return self.describe(obj, field, options).input_type

    def resolve_required(self, obj: Any, field: str, options: Optional[Mapping[str, Any]] = None) -> bool:
        """Return the caller's required flag, else the schema's, else the configured default."""
        options = options or {}
        if CONSTANTS.REQUIRED_OPTION in options:
            return bool(options[CONSTANTS.REQUIRED_OPTION])
        required = self._query(obj, "is_required", field)
        if required is None:
            return self.config.all_fields_required_by_default
        return bool(required)

    def describe(self, obj: Any, field: str, options: Optional[Mapping[str, Any]] = None) -> Resolution:
        """
        Resolve a field completely.

        Args:
            obj: Bound object, may be None
            field: Field identifier
            options: Caller options for ``input``

        Returns:
            Resolution with tag, required flag and the schema facts used

        Raises:
            UnknownInputTypeError: If ``as_`` names an undeclared tag
        """
        options = options or {}
        column_type = self._query(obj, "column_type", field)
        association = self._query(obj, "association_kind", field)

        override = options.get(CONSTANTS.AS_OPTION)
        if override is not None:
            input_type = normalize_tag(override)
        else:
            input_type = self._default_input_type(field, column_type, association, options)

        logger.debug(
            f"Resolved {field!r} as {input_type} "
            f"(column={column_type}, association={association}, override={override!r})"
        )
        return Resolution(
            input_type=input_type,
            required=self.resolve_required(obj, field, options),
            column_type=column_type,
            association=association,
        )

    def _default_input_type(self, field: str, column_type: Optional[ColumnType],
                            association: Optional[AssociationKind],
                            options: Mapping[str, Any]) -> str:
        if self._name_heuristics_apply(column_type, association):
            tag = self.match_name(field)
            if tag is not None:
                return tag
        if association is not None:
            return InputType.SELECT.value
        if CONSTANTS.COLLECTION_OPTION in options and column_type in (None, ColumnType.STRING):
            return InputType.SELECT.value
        if column_type is None:
            return InputType.STRING.value
        return SCHEMA_TYPE_INPUTS.get(column_type, InputType.STRING).value

    @staticmethod
    def _name_heuristics_apply(column_type: Optional[ColumnType],
                               association: Optional[AssociationKind]) -> bool:
        if column_type is ColumnType.STRING:
            return True
        # Nothing known about the field: the name is all we have
        return column_type is None and association is None

    def match_name(self, field: str) -> Optional[str]:
        """Return the tag of the first name heuristic matching ``field``."""
        for pattern, tag in self.config.name_heuristics:
            if re.search(pattern, field):
                return normalize_tag(tag)
        return None
