"""Naming helpers for labels, element ids and parameter names."""

import re

_NON_ID_CHARS = re.compile(r"[^A-Za-z0-9_\-]+")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_FIELD_IDENTIFIER = re.compile(r"^[a-z_][a-z0-9_]*$")


def humanize(name: str) -> str:
    """'first_name' -> 'First name', 'author_id' -> 'Author'."""
    text = re.sub(r"_id$", "", name).replace("_", " ").strip()
    return text[:1].upper() + text[1:]


def underscore(name: str) -> str:
    """'BlogPost' -> 'blog_post'."""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def singularize(name: str) -> str:
    """Naive English singular used for collection parameter names."""
    if name.endswith("ies"):
        return name[:-3] + "y"
    if name.endswith("ses"):
        return name[:-2]
    if name.endswith("s") and not name.endswith("ss"):
        return name[:-1]
    return name


def sanitize_id(value: str) -> str:
    """Turn a parameter name like 'post[author_attributes][0]' into an id fragment."""
    cleaned = value.replace("]", "").replace("[", "_")
    cleaned = _NON_ID_CHARS.sub("_", cleaned)
    return re.sub(r"_+", "_", cleaned).strip("_")


def is_field_identifier(value: str) -> bool:
    """Return True if value looks like an attribute name rather than a title."""
    return bool(_FIELD_IDENTIFIER.match(value))
