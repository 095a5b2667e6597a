"""
Group composition: fields -> one titled fieldset.

``inputs`` arguments are parsed into a GroupRequest and dispatched to one of
four branches, in priority order:

1. NESTED: ``for_`` designates an association/sub-object; recurse with a
   child builder per sub-object
2. BLOCK: a callable supplies the content verbatim
3. EXPLICIT_FIELDS: compose each named field in caller order
4. SCHEMA_INFERRED: no fields and no block; infer associations followed by
   content columns, minus reserved columns
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple
import logging

from markupsafe import Markup

from semantic_formgen.core.html import join_markup, merge_classes, normalize_attributes, wrap_element
from semantic_formgen.core.naming import is_field_identifier
from semantic_formgen.exceptions import MalformedFieldList, SchemaIntrospectionUnavailable
from semantic_formgen.protocols.schema_introspector import AssociationKind
from semantic_formgen.services.enum_dispatch_service import EnumDispatchService
from .form_constants import CONSTANTS

if TYPE_CHECKING:
    from .form_builder import FormBuilder

logger = logging.getLogger(__name__)

Block = Callable[["FormBuilder"], Any]

INFERRED_ASSOCIATION_KINDS = (
    AssociationKind.BELONGS_TO,
    AssociationKind.HAS_MANY,
    AssociationKind.HAS_AND_BELONGS_TO_MANY,
)


class GroupBranch(Enum):
    NESTED = "nested"
    BLOCK = "block"
    EXPLICIT_FIELDS = "explicit_fields"
    SCHEMA_INFERRED = "schema_inferred"


@dataclass(frozen=True)
class NestedTarget:
    """Association name plus the sub-object (or list of sub-objects) to render."""
    association: str
    target: Any

    @property
    def is_collection(self) -> bool:
        return is_collection_target(self.target)


def is_collection_target(value: Any) -> bool:
    """True for lists, sets and other iterables of sub-objects; strings and mappings are single values."""
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes, Mapping))


@dataclass
class GroupRequest:
    """Parsed arguments of one ``inputs`` call."""
    builder: "FormBuilder"
    title: Optional[str] = None
    fields: Tuple[str, ...] = ()
    html_options: Dict[str, Any] = field(default_factory=dict)
    block: Optional[Block] = None
    nested: Optional[NestedTarget] = None


def parse_group_args(builder: "FormBuilder", args: Sequence[Any],
                     options: Mapping[str, Any], block: Optional[Block]) -> GroupRequest:
    """
    Split ``inputs`` arguments into title, fields, nesting target and attributes.

    A leading string that is not a snake_case identifier is the title, e.g.
    ``inputs("Advanced", "created_at")``.

    Raises:
        MalformedFieldList: On conflicting or ill-typed arguments
    """
    args = list(args)
    html_options = dict(options)

    title = html_options.pop(CONSTANTS.NAME_OPTION, None)
    if CONSTANTS.TITLE_OPTION in html_options:
        if title is not None:
            raise MalformedFieldList(CONSTANTS.TITLE_OPTION, "both name and title given")
        title = html_options.pop(CONSTANTS.TITLE_OPTION)

    if args and isinstance(args[0], str) and not is_field_identifier(args[0]):
        if title is not None:
            raise MalformedFieldList(
                CONSTANTS.NAME_OPTION,
                f"title given both positionally ({args[0]!r}) and as an option ({title!r})",
            )
        title = args.pop(0)

    for arg in args:
        if not isinstance(arg, str):
            raise MalformedFieldList(
                "fields", f"field identifiers must be strings, got {type(arg).__name__} {arg!r}"
            )
    if block is not None and args:
        raise MalformedFieldList("block", f"a block cannot be combined with the field list {args}")
    if block is not None and not callable(block):
        raise MalformedFieldList("block", f"block must be callable, got {type(block).__name__}")

    nested = None
    if CONSTANTS.FOR_OPTION in html_options:
        nested = _parse_nested_target(builder, html_options.pop(CONSTANTS.FOR_OPTION))

    html_options = normalize_attributes(html_options)
    html_options["class"] = (
        merge_classes(html_options.pop("class", None)) or merge_classes(builder.config.fieldset_class)
    )
    return GroupRequest(
        builder=builder,
        title=title,
        fields=tuple(args),
        html_options=html_options,
        block=block,
        nested=nested,
    )


def _parse_nested_target(builder: "FormBuilder", value: Any) -> NestedTarget:
    if value is None:
        raise MalformedFieldList(CONSTANTS.FOR_OPTION, "nested target cannot be None")
    if isinstance(value, (list, tuple)):
        if len(value) != 2 or not isinstance(value[0], str):
            raise MalformedFieldList(
                CONSTANTS.FOR_OPTION,
                f"expected (association_name, object), got {value!r}",
            )
        return NestedTarget(association=value[0], target=value[1])
    if isinstance(value, str):
        if builder.object is None:
            raise MalformedFieldList(
                CONSTANTS.FOR_OPTION,
                f"association {value!r} given but the builder has no bound object",
            )
        if not hasattr(builder.object, value):
            raise MalformedFieldList(
                CONSTANTS.FOR_OPTION,
                f"{type(builder.object).__name__} has no association {value!r}",
            )
        return NestedTarget(association=value, target=getattr(builder.object, value))
    return NestedTarget(association=builder.default_association_name(value), target=value)


class GroupComposer(EnumDispatchService[GroupBranch]):
    """Composes fieldsets for ``FormBuilder.inputs``."""

    def __init__(self):
        super().__init__()
        self._register_handlers({
            GroupBranch.NESTED: self._compose_nested,
            GroupBranch.BLOCK: self._compose_block,
            GroupBranch.EXPLICIT_FIELDS: self._compose_fields,
            GroupBranch.SCHEMA_INFERRED: self._compose_inferred,
        })

    def compose_group(self, builder: "FormBuilder", *args: Any,
                      block: Optional[Block] = None, **options: Any) -> Markup:
        """Parse ``inputs`` arguments and render the group."""
        return self.dispatch(parse_group_args(builder, args, options, block))

    def _determine_strategy(self, request: GroupRequest) -> GroupBranch:
        if request.nested is not None:
            return GroupBranch.NESTED
        if request.block is not None:
            return GroupBranch.BLOCK
        if request.fields or request.builder.object is None:
            return GroupBranch.EXPLICIT_FIELDS
        return GroupBranch.SCHEMA_INFERRED

    def _compose_nested(self, request: GroupRequest) -> Markup:
        nested = request.nested
        children = list(nested.target) if nested.is_collection else [nested.target]
        groups = []
        for index, child in enumerate(children):
            child_builder = request.builder.fields_for(
                nested.association, child, child_index=index if nested.is_collection else None,
            )
            groups.append(child_builder.inputs(
                *request.fields, block=request.block, name=request.title, **request.html_options,
            ))
        return join_markup(groups, request.builder.config.part_separator)

    def _compose_block(self, request: GroupRequest) -> Markup:
        content = request.block(request.builder)
        if isinstance(content, (list, tuple)):
            content = join_markup(
                [Markup(part) for part in content], request.builder.config.part_separator,
            )
        # Block output is caller-authored markup and is used verbatim
        return self.wrap(request, Markup(content or ""))

    def _compose_fields(self, request: GroupRequest) -> Markup:
        return self._compose_field_list(request, list(request.fields))

    def _compose_inferred(self, request: GroupRequest) -> Markup:
        return self._compose_field_list(request, self.inferred_fields(request.builder))

    def _compose_field_list(self, request: GroupRequest, fields: List[str]) -> Markup:
        builder = request.builder
        units = [builder.input(name) for name in fields]
        return self.wrap(request, join_markup(units, builder.config.part_separator))

    def inferred_fields(self, builder: "FormBuilder") -> List[str]:
        """
        Default field list: associations (single reference and collections)
        followed by content columns, reserved columns removed.

        Introspection failures yield an empty contribution rather than an error.
        """
        introspector = builder.introspector
        obj = builder.object
        try:
            associations = introspector.associations(obj, INFERRED_ASSOCIATION_KINDS)
        except SchemaIntrospectionUnavailable as e:
            logger.debug(f"No associations for {type(obj).__name__}: {e}")
            associations = []
        try:
            columns = introspector.content_columns(obj)
        except SchemaIntrospectionUnavailable as e:
            logger.debug(f"No content columns for {type(obj).__name__}: {e}")
            columns = []

        reserved = set(builder.config.reserved_columns)
        fields = []
        for name in [*associations, *columns]:
            if name and name not in reserved and name not in fields:
                fields.append(name)
        logger.debug(f"Inferred fields for {type(obj).__name__}: {fields}")
        return fields

    def wrap(self, request: GroupRequest, content: Markup) -> Markup:
        """Wrap content as ``fieldset > [legend > span] + ol``."""
        legend = Markup("")
        if request.title:
            legend = wrap_element(
                CONSTANTS.LEGEND_ELEMENT, wrap_element("span", request.title),
            )
        separator = request.builder.config.part_separator
        body = join_markup([legend, wrap_element(CONSTANTS.LIST_ELEMENT, content)], separator)
        return wrap_element(CONSTANTS.FIELDSET_ELEMENT, body, request.html_options)
