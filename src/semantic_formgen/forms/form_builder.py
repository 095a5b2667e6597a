"""
Form builder: the public composition API.

    builder = FormBuilder(post)
    builder.input("title", hint="Keep it short")
    builder.inputs("Details", "title", "body")
    builder.inputs(for_=("author", post.author))

Subclass FormBuilder and register renderers on the subclass to change how
one input type renders without affecting other builders:

    class AdminBuilder(FormBuilder):
        pass

    AdminBuilder.register_input("text", rich_text_editor)
"""

from typing import Any, List, Optional, Tuple
import logging

from markupsafe import Markup

from semantic_formgen.core.naming import sanitize_id, underscore
from semantic_formgen.exceptions import CyclicAssociationError, SchemaIntrospectionUnavailable
from semantic_formgen.introspection import introspector_for
from semantic_formgen.protocols.form_config import FormGenConfig, get_form_config
from semantic_formgen.protocols.renderer import Renderer
from semantic_formgen.protocols.schema_introspector import SchemaIntrospector
# Importing the renderers package binds the core renderers to the default registry
from semantic_formgen.renderers.parts import errors_for, hint_for, label_for
from .field_descriptor import FieldDescriptor
from .form_constants import CONSTANTS
from .group_composer import Block, GroupComposer, is_collection_target
from .input_types import TagLike
from .part_composer import PartComposer
from .renderer_registry import RENDERERS, RendererRegistry
from .type_resolver import TypeResolver

logger = logging.getLogger(__name__)


class FormBuilder:
    """
    Renders semantic form markup for one bound object.

    Args:
        obj: Bound object (dataclass, SQLAlchemy instance, or anything a
            registered introspector handles); may be None
        object_name: Parameter name prefix; derived from the object's class
            when omitted
        config: FormGenConfig; the global config is used when omitted
        parent: Builder this one is nested under
        child_index: Position within a nested collection
    """

    registry: RendererRegistry = RENDERERS

    def __init__(self, obj: Any = None, object_name: Optional[str] = None, *,
                 config: Optional[FormGenConfig] = None,
                 parent: Optional["FormBuilder"] = None,
                 child_index: Optional[int] = None):
        if obj is None and not object_name:
            raise ValueError("FormBuilder needs a bound object or an object_name")
        self.object = obj
        self.object_name = object_name or underscore(type(obj).__name__)
        self.parent = parent
        self.child_index = child_index
        self._config = config
        self._ancestry: Tuple[int, ...] = (
            (parent._ancestry if parent is not None else ())
            + ((id(obj),) if obj is not None else ())
        )
        self.resolver = TypeResolver(config=config)
        self.part_composer = PartComposer(self.resolver)
        self.group_composer = GroupComposer()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.object_name!r}, {type(self.object).__name__})"

    # ==================== CONFIGURATION ====================

    @property
    def config(self) -> FormGenConfig:
        if self._config is not None:
            return self._config
        return get_form_config()

    @property
    def introspector(self) -> SchemaIntrospector:
        return introspector_for(self.object)

    @property
    def depth(self) -> int:
        return 0 if self.parent is None else self.parent.depth + 1

    @classmethod
    def register_input(cls, tag: TagLike, renderer: Renderer) -> Renderer:
        """Bind a renderer to ``tag`` for this builder class and its subclasses."""
        return cls.registry.register(tag, renderer, cls)

    def lookup_renderer(self, tag: TagLike) -> Renderer:
        """Most specific renderer for ``tag`` in this builder's hierarchy."""
        return self.registry.lookup(tag, self)

    # ==================== PUBLIC COMPOSITION API ====================

    def input(self, field: str, **options: Any) -> Markup:
        """
        Render one field as an ``li`` composition unit.

        Options:
            as_: Input type override, e.g. "password"
            label: Label text, or False for no label
            required: Force required-ness
            hint: Hint text
            input_html / wrapper_html / label_html: Attribute mappings
            collection: Choices for select, radio and check_boxes inputs
        """
        return self.part_composer.compose_field(self, field, options)

    def inputs(self, *args: Any, block: Optional[Block] = None, **options: Any) -> Markup:
        """
        Render a fieldset of inputs.

        Examples:
            inputs()                              # all schema fields
            inputs("title", "body")               # explicit list
            inputs("Advanced", "created_at")      # with legend
            inputs(name="Extra", block=callback)  # caller supplied content
            inputs("first_name", for_=("author", author))
        """
        return self.group_composer.compose_group(self, *args, block=block, **options)

    def fields_for(self, association: str, obj: Any,
                   child_index: Optional[int] = None) -> "FormBuilder":
        """
        Child builder for an associated object.

        Raises:
            CyclicAssociationError: If obj is already being rendered higher up
                the chain, or nesting exceeds ``max_nesting_depth``
        """
        if obj is not None and id(obj) in self._ancestry:
            raise CyclicAssociationError(
                f"{type(obj).__name__} reached again through {self.object_name}[{association}]"
            )
        if self.depth + 1 > self.config.max_nesting_depth:
            raise CyclicAssociationError(
                f"Nesting {self.object_name}[{association}] exceeds max_nesting_depth="
                f"{self.config.max_nesting_depth}"
            )
        name = f"{self.object_name}[{association}{CONSTANTS.NESTED_ATTRIBUTES_SUFFIX}]"
        if child_index is not None:
            name = f"{name}[{child_index}]"
        logger.debug(f"Nested builder {name} for {type(obj).__name__}")
        return type(self)(obj, name, config=self.config, parent=self, child_index=child_index)

    def default_association_name(self, obj: Any) -> str:
        """Association name for a bare nested object (or list): its class name."""
        sample = next(iter(obj), obj) if is_collection_target(obj) else obj
        return underscore(type(sample).__name__)

    # ==================== NAMING ====================

    def param_name(self, field: str) -> str:
        return f"{self.object_name}[{field}]"

    def control_id(self, field: str) -> str:
        return sanitize_id(f"{self.object_name}{CONSTANTS.ID_SEPARATOR}{field}")

    def wrapper_id(self, field: str) -> str:
        return f"{self.control_id(field)}{CONSTANTS.WRAPPER_ID_SUFFIX}"

    # ==================== BOUND OBJECT ====================

    def value_of(self, field: str) -> Any:
        if self.object is None:
            return None
        return getattr(self.object, field, None)

    def errors_on(self, field: str) -> List[str]:
        if self.object is None:
            return []
        try:
            return self.introspector.errors_on(self.object, field)
        except SchemaIntrospectionUnavailable as e:
            logger.debug(f"No errors available for {field}: {e}")
            return []

    # ==================== SUB-PART RENDERERS ====================

    def render_label(self, field: FieldDescriptor) -> Markup:
        return label_for(self, field)

    def render_control(self, field: FieldDescriptor) -> Markup:
        return self.lookup_renderer(field.input_type)(self, field)

    def render_hint(self, field: FieldDescriptor) -> Markup:
        return hint_for(self, field)

    def render_errors(self, field: FieldDescriptor) -> Markup:
        return errors_for(self, field)

