"""
Semantic kinds of javadoc index entries.

The label of each kind is stored verbatim as the `type` column of the
search index, so labels must stay exactly as Dash expects them.
"""

from enum import Enum


class ElementType(Enum):
    """Kinds of documented symbols. NOT_FOUND marks an unclassified anchor."""
    NOT_FOUND = 0
    CLASS = 1
    METHOD = 2
    FIELD = 3
    CONSTRUCTOR = 4
    INTERFACE = 5
    EXCEPTION = 6
    ERROR = 7
    ENUM = 8
    TRAIT = 9
    NOTATION = 10
    PACKAGE = 11

    @property
    def label(self) -> str:
        """Persisted type label. Raises KeyError for NOT_FOUND."""
        return ELEMENT_TYPE_LABELS[self]


ELEMENT_TYPE_LABELS = {
    ElementType.CLASS: "Class",
    ElementType.METHOD: "Method",
    ElementType.FIELD: "Field",
    ElementType.CONSTRUCTOR: "Constructor",
    ElementType.INTERFACE: "Interface",
    ElementType.EXCEPTION: "Exception",
    ElementType.ERROR: "Error",
    ElementType.ENUM: "Enum",
    ElementType.TRAIT: "Trait",
    ElementType.NOTATION: "Notation",
    ElementType.PACKAGE: "Package",
}
