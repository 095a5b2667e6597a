"""Form generation exceptions."""


class FormGenError(Exception):
    """Base class for all semantic-formgen errors."""


class UnknownInputTypeError(FormGenError, KeyError):
    """Raised when an input type tag has no renderer anywhere in the builder chain.

    Also raised when registering a renderer for a tag that was never declared
    with ``register_input_type``.
    """

    def __init__(self, tag, message=None):
        self.tag = tag
        super().__init__(message or f"Unknown input type: {tag!r}")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message instead
        return self.args[0]


class SchemaIntrospectionUnavailable(FormGenError):
    """Raised by an introspector that cannot classify an object or field.

    Never reaches callers of the public API: the resolver and the group
    composer recover by falling back to heuristics or an empty column list.
    """


class MalformedFieldList(FormGenError):
    """Raised when ``inputs`` receives incompatible argument shapes."""

    def __init__(self, option: str, message: str):
        self.option = option
        super().__init__(f"{option}: {message}")


class CyclicAssociationError(FormGenError):
    """Raised when nested composition revisits an object or nests too deep."""
