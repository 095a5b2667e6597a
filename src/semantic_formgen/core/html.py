"""
HTML element primitives on top of markupsafe.

Every renderer builds markup through these helpers so that attribute values
and text content are escaped exactly once. Anything already wrapped in
``Markup`` passes through untouched.

Attribute conventions:
- Trailing underscores are dropped (``class_`` -> ``class``, ``for_`` -> ``for``)
- Remaining underscores become hyphens (``data_role`` -> ``data-role``)
- None and False values are omitted, True renders a bare boolean attribute
- List/tuple values are space-joined (class lists)
"""

from typing import Any, Dict, Iterable, Mapping, Optional

from markupsafe import Markup, escape

VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "source", "track", "wbr",
})


def attribute_name(key: str) -> str:
    """Normalize a Python keyword into an HTML attribute name."""
    return key.rstrip("_").replace("_", "-")


def render_attributes(attributes: Optional[Mapping[str, Any]]) -> Markup:
    """Render a mapping of attributes to a leading-space attribute string."""
    if not attributes:
        return Markup("")
    parts = []
    for key, value in attributes.items():
        if value is None or value is False:
            continue
        name = attribute_name(key)
        if value is True:
            parts.append(Markup(" {}").format(Markup(name)))
            continue
        if isinstance(value, (list, tuple)):
            value = " ".join(str(item) for item in value if item not in (None, ""))
        parts.append(Markup(' {}="{}"').format(Markup(name), value))
    return Markup("").join(parts)


def wrap_element(tag_name: str, content: Any = "", attributes: Optional[Mapping[str, Any]] = None) -> Markup:
    """
    Wrap content in an element.

    Args:
        tag_name: Element name, e.g. "li"
        content: Inner content; plain strings are escaped, Markup is trusted
        attributes: Attribute mapping (see module docstring)

    Returns:
        The element as Markup
    """
    attrs = render_attributes(attributes)
    if tag_name in VOID_ELEMENTS:
        return Markup("<{}{}>").format(Markup(tag_name), attrs)
    return Markup("<{tag}{attrs}>{content}</{tag}>").format(
        tag=Markup(tag_name), attrs=attrs, content=escape(content),
    )


def void_element(tag_name: str, attributes: Optional[Mapping[str, Any]] = None) -> Markup:
    """Render a void element such as ``<input>``."""
    return Markup("<{}{}>").format(Markup(tag_name), render_attributes(attributes))


def join_markup(parts: Iterable[Any], separator: str = "\n") -> Markup:
    """Join non-empty parts with a separator, escaping plain strings."""
    return Markup(separator).join(escape(part) for part in parts if part)


def merge_classes(*class_groups: Any) -> list:
    """
    Merge class names, de-duplicated and order-preserving.

    Each group may be None, a space separated string, or an iterable of
    strings (possibly nested one level).
    """
    merged = []
    for group in class_groups:
        if not group:
            continue
        if isinstance(group, str):
            names = group.split()
        else:
            names = []
            for item in group:
                if not item:
                    continue
                names.extend(str(item).split())
        for name in names:
            if name not in merged:
                merged.append(name)
    return merged


def normalize_attributes(attributes: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Key a mapping by HTML attribute name.

    Spellings of one attribute (``for``/``for_``, ``id``/``id_``) collapse to
    a single key, the later one winning; class spellings are merged.
    """
    normalized: Dict[str, Any] = {}
    for key, value in (attributes or {}).items():
        name = attribute_name(key)
        if name == "class" and name in normalized:
            value = merge_classes(normalized[name], value)
        normalized[name] = value
    return normalized


def merge_attributes(base: Optional[Mapping[str, Any]], override: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Shallow-merge two attribute mappings, override wins except for class."""
    merged = normalize_attributes(base)
    for name, value in normalize_attributes(override).items():
        if name == "class":
            merged[name] = merge_classes(merged.get(name), value)
        else:
            merged[name] = value
    return merged
