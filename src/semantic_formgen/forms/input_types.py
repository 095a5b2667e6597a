"""
Input type tags.

The core tags form a closed enumeration. Applications extend it by
declaring extra tags with ``register_input_type`` at startup; only declared
tags can have renderers bound to them, so a typo in a custom tag fails at
registration time instead of silently rendering as a string.
"""

from enum import Enum
from typing import FrozenSet, Set, Union
import logging

from semantic_formgen.exceptions import UnknownInputTypeError

logger = logging.getLogger(__name__)


class InputType(str, Enum):
    """Core input type tags."""
    STRING = "string"
    PASSWORD = "password"
    TEXT = "text"
    NUMERIC = "numeric"
    EMAIL = "email"
    URL = "url"
    PHONE = "phone"
    SEARCH = "search"
    SELECT = "select"
    RADIO = "radio"
    CHECK_BOXES = "check_boxes"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    TIME = "time"
    TIME_ZONE = "time_zone"
    COUNTRY = "country"
    HIDDEN = "hidden"


CORE_INPUT_TYPES: FrozenSet[str] = frozenset(member.value for member in InputType)

# Caller-declared extension tags
_EXTENSION_TYPES: Set[str] = set()

TagLike = Union[str, InputType]


def register_input_type(tag: str) -> str:
    """
    Declare an extension input type tag.

    Args:
        tag: The new tag, e.g. "color"

    Returns:
        The tag as a plain string
    """
    tag = str(tag.value if isinstance(tag, InputType) else tag)
    if tag in CORE_INPUT_TYPES:
        return tag
    if tag not in _EXTENSION_TYPES:
        _EXTENSION_TYPES.add(tag)
        logger.debug(f"Declared extension input type '{tag}'")
    return tag


def unregister_input_type(tag: str) -> None:
    """Forget an extension tag (core tags cannot be removed)."""
    _EXTENSION_TYPES.discard(tag)


def known_input_types() -> FrozenSet[str]:
    """All tags that may carry a renderer."""
    return CORE_INPUT_TYPES | frozenset(_EXTENSION_TYPES)


def normalize_tag(tag: TagLike) -> str:
    """
    Validate and normalize a tag to its plain string value.

    Raises:
        UnknownInputTypeError: If the tag is neither core nor declared
    """
    value = tag.value if isinstance(tag, InputType) else str(tag)
    if value not in CORE_INPUT_TYPES and value not in _EXTENSION_TYPES:
        raise UnknownInputTypeError(
            value,
            f"Unknown input type '{value}'. Declare it with register_input_type() "
            f"before use. Known types: {sorted(known_input_types())}",
        )
    return value
