"""
Form constants for eliminating magic strings throughout the builder.

Element names, option keys and id/name patterns live here so renderers and
composers agree on them.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FormConstants:
    """
    Centralized constants for form composition.

    Categories:
    - Element names used by composers
    - Option keys recognised by ``input`` and ``inputs``
    - Id and parameter name patterns
    """

    # Element names
    WRAPPER_ELEMENT: str = "li"
    FIELDSET_ELEMENT: str = "fieldset"
    LEGEND_ELEMENT: str = "legend"
    LIST_ELEMENT: str = "ol"

    # Wrapper classes
    REQUIRED_CLASS: str = "required"
    OPTIONAL_CLASS: str = "optional"
    ERROR_CLASS: str = "error"

    # input() option keys
    AS_OPTION: str = "as_"
    REQUIRED_OPTION: str = "required"
    LABEL_OPTION: str = "label"
    HINT_OPTION: str = "hint"
    INPUT_HTML_OPTION: str = "input_html"
    WRAPPER_HTML_OPTION: str = "wrapper_html"
    LABEL_HTML_OPTION: str = "label_html"
    COLLECTION_OPTION: str = "collection"

    # inputs() option keys that never become fieldset attributes
    NAME_OPTION: str = "name"
    TITLE_OPTION: str = "title"
    FOR_OPTION: str = "for_"

    # Id and name patterns
    ID_SEPARATOR: str = "_"
    WRAPPER_ID_SUFFIX: str = "_input"
    NESTED_ATTRIBUTES_SUFFIX: str = "_attributes"
    SINGLE_REFERENCE_SUFFIX: str = "_id"
    COLLECTION_REFERENCE_SUFFIX: str = "_ids"


# Create a singleton instance for easy access throughout the codebase
CONSTANTS = FormConstants()
