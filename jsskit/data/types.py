"""Content type model for Sitecore JSS and GraphQL data.

Defines the closed set of field-type tags for both raw dialects, the
typed-dict shapes of raw and canonical items, and the canonical image and
link records.

Dialects:
    JSS (layout service)  - fields keyed by name, each tagged with ``fieldType``,
                            children nested under ``fields["items"]``
    GraphQL               - fields as a list tagged with ``__typename``,
                            children nested under ``children``
"""

from enum import Enum
from typing import Any, Optional, TypedDict, Union

from pydantic import BaseModel


# =============================================================================
# Field Type Tags
# =============================================================================


class FieldType(str, Enum):
    """Field types emitted by the JSS layout service."""

    SINGLE_LINE_TEXT = "Single-Line Text"
    MULTI_LINE_TEXT = "Multi-Line Text"
    RICH_TEXT = "Rich Text"
    CHECKBOX = "Checkbox"
    IMAGE = "Image"
    GENERAL_LINK = "General Link"
    DROPLIST = "Droplist"
    DROPLINK = "Droplink"
    DROPTREE = "Droptree"
    MULTILIST_WITH_SEARCH = "Multilist with Search"
    TREELIST = "Treelist"
    INTEGER = "Integer"
    NUMBER = "Number"

    @classmethod
    def parse(cls, tag: Any) -> Optional["FieldType"]:
        """Return the member for ``tag``, or None if it is not recognized."""
        try:
            return cls(tag)
        except ValueError:
            return None


class GqlFieldType(str, Enum):
    """``__typename`` values of GraphQL item fields."""

    TEXT_FIELD = "TextField"
    IMAGE_FIELD = "ImageField"
    LINK_FIELD = "LinkField"

    @classmethod
    def parse(cls, tag: Any) -> Optional["GqlFieldType"]:
        """Return the member for ``tag``, or None if it is not recognized."""
        try:
            return cls(tag)
        except ValueError:
            return None


TEXT_FIELD_TYPES = frozenset({
    FieldType.SINGLE_LINE_TEXT,
    FieldType.MULTI_LINE_TEXT,
    FieldType.RICH_TEXT,
})

# Types whose raw ``value`` is already the canonical value
SCALAR_FIELD_TYPES = TEXT_FIELD_TYPES | {
    FieldType.CHECKBOX,
    FieldType.DROPLIST,
    FieldType.INTEGER,
    FieldType.NUMBER,
}

# Types that point at another item and carry its field group under ``fields``
REFERENCE_FIELD_TYPES = frozenset({
    FieldType.DROPLINK,
    FieldType.DROPTREE,
    FieldType.MULTILIST_WITH_SEARCH,
    FieldType.TREELIST,
})

# Reserved keys holding nested items in each dialect
JSS_ITEMS_KEY = "items"
CHILDREN_KEY = "children"

# GraphQL fields whose name starts with this prefix are Sitecore system fields
SYSTEM_FIELD_PREFIX = "__"


# =============================================================================
# Raw Shapes - JSS
# =============================================================================


class JssField(TypedDict, total=False):
    """A single JSS field. ``value`` or ``fields`` depending on the type."""
    fieldType: str
    value: Any
    editable: str
    id: str
    url: str
    fields: dict[str, Any]


JssFieldGroup = dict[str, Union[JssField, list[JssField], list["JssItem"]]]


class JssItem(TypedDict, total=False):
    """A JSS item, or a component rendering (which adds componentName etc)."""
    name: str
    displayName: str
    fields: JssFieldGroup
    componentName: str
    uid: str
    dataSource: str
    params: dict[str, str]
    placeholders: dict[str, list["JssItem"]]


# =============================================================================
# Raw Shapes - GraphQL
# =============================================================================


# Functional form: "__typename" would be name-mangled in a class body
GqlField = TypedDict(
    "GqlField",
    {"__typename": str, "name": str, "value": str, "rendered": str},
)


class GqlItem(TypedDict, total=False):
    """A GraphQL item."""
    id: str
    name: str
    fields: list[GqlField]
    children: list["GqlItem"]


# =============================================================================
# Canonical Shapes
# =============================================================================


class DataImage(BaseModel):
    """Canonical image record."""

    src: str = ""
    width: str = ""
    height: str = ""
    alt: str = ""


class DataLink(BaseModel):
    """Canonical link record."""

    href: str = ""
    text: str = ""
    url: str = ""
    anchor: str = ""
    linktype: str = ""
    target: str = ""
    title: str = ""
    querystring: str = ""


IMAGE_KEYS = tuple(DataImage.model_fields)
LINK_KEYS = tuple(DataLink.model_fields)

DataField = Union[
    str,
    bool,
    dict[str, Any],
    list[Any],
    None,
]

DataFieldGroup = dict[str, DataField]


class DataItem(TypedDict, total=False):
    """Canonical item produced from either dialect."""
    id: str
    name: str
    displayName: str
    fields: DataFieldGroup
    children: list["DataItem"]
