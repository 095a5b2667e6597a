"""
Renderer registry with builder-hierarchy lookup.

Renderers are bound per (builder class, input type tag). Lookup walks the
builder's MRO from the most specific class down, then the default bindings,
and returns the first binding found. A builder subclass can therefore
replace exactly one input type without re-registering the rest.

Design:
- RENDERERS: the process-wide registry, written at import/boot time only
- RendererMeta: ControlRenderer subclasses auto-register when defined
- Fail-loud: undeclared tags are rejected at registration, tags with no
  renderer anywhere in the chain raise UnknownInputTypeError at lookup
- Resolved bindings are cached per (builder class, tag); any registration
  clears the cache, ``clear_cache()`` does it explicitly
"""

from abc import ABCMeta
from typing import Callable, Dict, List, Optional, Tuple, Type
import logging

from semantic_formgen.exceptions import UnknownInputTypeError
from semantic_formgen.protocols.renderer import Renderer
from .input_types import TagLike, normalize_tag

logger = logging.getLogger(__name__)


class RendererRegistry:
    """
    Ordered chain of tag -> renderer mappings keyed by builder class.

    Example:
        class AdminBuilder(FormBuilder):
            pass

        RENDERERS.register("string", fancy_string, AdminBuilder)
        RENDERERS.lookup("string", AdminBuilder(obj))  # fancy_string
        RENDERERS.lookup("string", FormBuilder(obj))   # default string renderer
    """

    def __init__(self):
        # None holds the default bindings, consulted after every builder class
        self._bindings: Dict[Optional[Type], Dict[str, Renderer]] = {}
        self._cache: Dict[Tuple[Type, str], Renderer] = {}

    def register(self, tag: TagLike, renderer: Renderer, builder_cls: Optional[Type] = None) -> Renderer:
        """
        Bind a renderer to a tag for one builder class.

        Args:
            tag: Core or declared extension input type tag
            renderer: Callable ``(builder, field) -> Markup``
            builder_cls: Builder class the binding belongs to; None binds a
                default used by every builder

        Returns:
            The renderer, so this can be used as a decorator body

        Raises:
            UnknownInputTypeError: If ``tag`` was never declared
        """
        tag = normalize_tag(tag)
        bindings = self._bindings.setdefault(builder_cls, {})
        if tag in bindings and bindings[tag] is not renderer:
            logger.warning(
                f"Input type '{tag}' already bound to {_renderer_name(bindings[tag])} "
                f"for {_context_name(builder_cls)}. Overwriting with {_renderer_name(renderer)}."
            )
        bindings[tag] = renderer
        self._cache.clear()
        logger.debug(f"Registered {_renderer_name(renderer)} for '{tag}' on {_context_name(builder_cls)}")
        return renderer

    def unregister(self, tag: TagLike, builder_cls: Optional[Type] = None) -> None:
        """Remove one binding; a missing binding is ignored."""
        tag = normalize_tag(tag)
        self._bindings.get(builder_cls, {}).pop(tag, None)
        self._cache.clear()

    def resolution_chain(self, builder) -> List[Optional[Type]]:
        """Binding keys consulted for ``builder``, most specific first, defaults (None) last."""
        cls = builder if isinstance(builder, type) else type(builder)
        chain: List[Optional[Type]] = [klass for klass in cls.__mro__ if klass in self._bindings]
        if None in self._bindings:
            chain.append(None)
        return chain

    def lookup(self, tag: TagLike, builder) -> Renderer:
        """
        Find the renderer for ``tag`` in the context of a builder.

        Args:
            tag: Input type tag
            builder: Builder instance or class

        Returns:
            The most specific renderer bound to ``tag``

        Raises:
            UnknownInputTypeError: If no class in the chain binds ``tag``
        """
        tag = normalize_tag(tag)
        cls = builder if isinstance(builder, type) else type(builder)
        key = (cls, tag)
        if key in self._cache:
            return self._cache[key]

        for klass in self.resolution_chain(cls):
            renderer = self._bindings[klass].get(tag)
            if renderer is not None:
                self._cache[key] = renderer
                return renderer

        raise UnknownInputTypeError(
            tag,
            f"No renderer registered for input type '{tag}' on {cls.__name__} "
            f"or its bases. Searched: {[_context_name(key) for key in self.resolution_chain(cls)]}",
        )

    def clear_cache(self) -> None:
        """Drop resolved bindings; the next lookup walks the chain again."""
        self._cache.clear()


def _renderer_name(renderer: Renderer) -> str:
    return getattr(renderer, "__qualname__", None) or type(renderer).__name__


def _context_name(builder_cls: Optional[Type]) -> str:
    return "defaults" if builder_cls is None else builder_cls.__name__


# Process-wide registry, populated at import time
RENDERERS = RendererRegistry()


def register_renderer(tag: TagLike, builder_cls: Optional[Type] = None) -> Callable[[Renderer], Renderer]:
    """
    Decorator form of ``RENDERERS.register``.

    Example:
        @register_renderer("color")
        def color_input(builder, field):
            ...
    """
    def decorator(renderer: Renderer) -> Renderer:
        return RENDERERS.register(tag, renderer, builder_cls)
    return decorator


class RendererMeta(ABCMeta):
    """
    Metaclass for automatic renderer registration.

    Mirrors the widget auto-registration pattern:
    1. Only registers concrete classes (no abstract methods left)
    2. Requires an ``input_type`` class attribute
    3. Binds an instance to ``builder`` (the default bindings when None)

    A subclass re-registers only when it sets ``input_type`` or ``builder``
    itself, so inheriting markup from a core renderer does not shadow it.

    Example:
        class ColorInput(ControlRenderer):
            input_type = "color"

            def render(self, builder, field):
                ...
    """

    def __new__(mcs, name, bases, attrs):
        new_class = super().__new__(mcs, name, bases, attrs)

        if getattr(new_class, "__abstractmethods__", None):
            logger.debug(
                f"Skipping registration for {name} - abstract methods remaining: "
                f"{new_class.__abstractmethods__}"
            )
            return new_class

        if "input_type" not in attrs and "builder" not in attrs:
            logger.debug(f"Skipping registration for {name} - no input_type or builder attribute")
            return new_class

        input_type = getattr(new_class, "input_type", None)
        if input_type is None:
            logger.debug(f"Skipping registration for {name} - input_type is None")
            return new_class

        RENDERERS.register(input_type, new_class(), getattr(new_class, "builder", None))
        return new_class
