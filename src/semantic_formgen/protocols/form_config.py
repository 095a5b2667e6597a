"""Base configuration class for form generation.

Provides hooks for applications to customize form generation behavior.
"""

from typing import Dict, List, Optional, Tuple
from dataclasses import dataclass, field


DEFAULT_INLINE_ORDER: Tuple[str, ...] = ("label", "control", "hint", "errors")

DEFAULT_RESERVED_COLUMNS: Tuple[str, ...] = (
    "created_at", "updated_at", "created_on", "updated_on", "lock_version", "version",
)

# Ordered (pattern, tag) pairs; first match wins
DEFAULT_NAME_HEURISTICS: Tuple[Tuple[str, str], ...] = (
    (r"password(_confirmation)?$", "password"),
    (r"time_zone$", "time_zone"),
    (r"country$", "country"),
    (r"email$", "email"),
    (r"(^url|^website|_url)$", "url"),
    (r"(phone|fax)$", "phone"),
    (r"^search$", "search"),
)

INLINE_ERROR_MODES = ("sentence", "list", "first", "none")

KNOWN_PARTS = frozenset(DEFAULT_INLINE_ORDER)


@dataclass
class FormGenConfig:
    """Base configuration for form generation behavior.

    Applications can subclass this or build one with overrides and install it
    with ``set_form_config`` at startup.

    Attributes:
        inline_order: Default order of sub-parts inside a composed field
        custom_inline_order: Per input type overrides of ``inline_order``
        reserved_columns: Columns never inferred into a schema-driven group
        all_fields_required_by_default: Required flag when the schema is silent
        required_string: Marker appended to labels of required fields
        optional_string: Marker appended to labels of optional fields
        inline_errors: One of "sentence", "list", "first", "none"
        name_heuristics: Ordered (regex, tag) pairs matched against field names
        max_nesting_depth: Upper bound for nested association groups
    """

    inline_order: Tuple[str, ...] = DEFAULT_INLINE_ORDER
    custom_inline_order: Dict[str, Tuple[str, ...]] = field(default_factory=dict)
    reserved_columns: Tuple[str, ...] = DEFAULT_RESERVED_COLUMNS
    all_fields_required_by_default: bool = False
    required_string: str = '<abbr title="required">*</abbr>'
    optional_string: str = ""
    inline_errors: str = "sentence"
    default_hint_class: str = "inline-hints"
    default_inline_error_class: str = "inline-errors"
    default_error_list_class: str = "errors"
    fieldset_class: str = "inputs"
    part_separator: str = "\n"
    name_heuristics: Tuple[Tuple[str, str], ...] = DEFAULT_NAME_HEURISTICS
    max_nesting_depth: int = 10
    include_blank_for_select_by_default: bool = True
    priority_time_zones: List[str] = field(default_factory=list)
    country_choices: List[str] = field(default_factory=list)

    def __post_init__(self):
        if self.inline_errors not in INLINE_ERROR_MODES:
            raise ValueError(
                f"inline_errors must be one of {INLINE_ERROR_MODES}, got {self.inline_errors!r}"
            )
        self.inline_order = _validate_parts(self.inline_order)
        self.custom_inline_order = {
            str(tag): _validate_parts(parts) for tag, parts in self.custom_inline_order.items()
        }

    def inline_order_for(self, tag: str) -> Tuple[str, ...]:
        """Return the configured sub-part order for an input type tag."""
        return self.custom_inline_order.get(tag, self.inline_order)


def _validate_parts(parts) -> Tuple[str, ...]:
    unknown = [part for part in parts if part not in KNOWN_PARTS]
    if unknown:
        raise ValueError(f"Unknown inline parts {unknown}. Known parts: {sorted(KNOWN_PARTS)}")
    return tuple(parts)


# Global config instance (set by application)
_form_config: Optional[FormGenConfig] = None


def set_form_config(config: Optional[FormGenConfig]) -> None:
    """Set the global form generation configuration.

    Args:
        config: FormGenConfig instance, or None to restore defaults
    """
    global _form_config
    _form_config = config


def get_form_config() -> FormGenConfig:
    """Get the current form generation configuration.

    Returns:
        Current FormGenConfig or default if not set
    """
    if _form_config is None:
        return FormGenConfig()
    return _form_config
