"""Data processor for Sitecore JSS and GraphQL content.

Turns both raw dialects into one canonical tree shape:

    JSS item      {name, fields: {Title: {fieldType, value}, items: [...]}}
    GraphQL item  {id, name, fields: [{__typename, name, value, rendered}], children: [...]}
        -> canonical item {..., fields: {Title: "..."}, children: [...]}

"items" and "children" are the keys used for nested items by JSS and GraphQL
respectively; everything is converted to "children".

Malformed or unknown data never raises: unknown field types are logged and
normalize to None (JSS) or are dropped (GraphQL), non-mapping items and fields
are logged and skipped, and absent input propagates as None.
"""

import copy
from collections.abc import Mapping
from typing import Any, Callable, Optional

import structlog

from jsskit.data.markup import parse_image_tag, parse_link_tag
from jsskit.data.types import (
    CHILDREN_KEY,
    IMAGE_KEYS,
    JSS_ITEMS_KEY,
    LINK_KEYS,
    REFERENCE_FIELD_TYPES,
    SCALAR_FIELD_TYPES,
    SYSTEM_FIELD_PREFIX,
    DataField,
    DataFieldGroup,
    DataItem,
    FieldType,
    GqlField,
    GqlFieldType,
    GqlItem,
    JssField,
    JssFieldGroup,
    JssItem,
)

logger = structlog.get_logger(__name__)

JssFieldHandler = Callable[[Mapping], DataField]
GqlFieldHandler = Callable[[Mapping], DataField]


def _is_mapping(value: Any, event: str, **context: Any) -> bool:
    """Return True for mapping values; log ``event`` and return False otherwise."""
    if isinstance(value, Mapping):
        return True

    logger.warning(event, value_type=type(value).__name__, **context)
    return False


class DataProcessor:
    """Normalizes JSS and GraphQL data into canonical items and fields.

    The asset host prefix is fixed at construction and only used to resolve
    image paths extracted from GraphQL markup.

    Example:
        processor = DataProcessor(host="https://cdn.example.com/")
        item = processor.process_jss_item(rendering)
        title = item["fields"]["Title"]
    """

    def __init__(self, host: str = "/"):
        """Initialize the processor.

        Args:
            host: Asset host prefix prepended to GraphQL image paths.
        """
        self._host = host

        self._jss_handlers: dict[FieldType, JssFieldHandler] = {
            field_type: self._process_scalar for field_type in SCALAR_FIELD_TYPES
        }
        self._jss_handlers[FieldType.IMAGE] = self._process_image
        self._jss_handlers[FieldType.GENERAL_LINK] = self._process_link
        for field_type in REFERENCE_FIELD_TYPES:
            self._jss_handlers[field_type] = self._process_reference

        self._gql_handlers: dict[GqlFieldType, GqlFieldHandler] = {
            GqlFieldType.TEXT_FIELD: self._process_gql_text,
            GqlFieldType.IMAGE_FIELD: self._process_gql_image,
            GqlFieldType.LINK_FIELD: self._process_gql_link,
        }

    @property
    def host(self) -> str:
        """Asset host prefix."""
        return self._host

    # =========================================================================
    # JSS
    # =========================================================================

    def process_jss_field(
        self, field_value: Optional[JssField | list[JssField]]
    ) -> DataField:
        """Normalize a single JSS field.

        Lists are normalized element by element, keeping their order.

        Args:
            field_value: Raw JSS field, or a list of them.

        Returns:
            The canonical value, or None for absent or unrecognized fields.
        """
        if isinstance(field_value, list):
            return [self.process_jss_field(value) for value in field_value]

        if not field_value or not isinstance(field_value, Mapping):
            return None

        tag = field_value.get("fieldType")
        field_type = FieldType.parse(tag)

        if field_type is None:
            if tag:
                logger.warning(
                    "jss_field_type_unrecognized",
                    field_type=tag,
                    message=f'Unable to process the JSS field. The type "{tag}" is not recognized.',
                )
            return None

        return self._jss_handlers[field_type](field_value)

    def process_jss_fields(self, fields: Optional[JssFieldGroup]) -> DataFieldGroup:
        """Normalize a JSS field group.

        The "items" entry is skipped; it is turned into children by
        process_jss_item.
        """
        if not isinstance(fields, Mapping):
            return {}

        return {
            name: self.process_jss_field(value)
            for name, value in fields.items()
            if name != JSS_ITEMS_KEY
        }

    def process_jss_item(self, item: Optional[JssItem]) -> Optional[DataItem]:
        """Normalize a JSS item or component rendering, recursively.

        The result is a deep copy of the item with canonical fields and a
        "children" list built from the item's nested "items".

        Returns:
            The canonical item, or None if no item was given.
        """
        if item is None or not _is_mapping(item, "jss_item_malformed"):
            return None

        processed = copy.deepcopy(item)
        fields = item.get("fields")

        if isinstance(fields, Mapping):
            sub_items = fields.get(JSS_ITEMS_KEY)
            if isinstance(sub_items, list):
                processed[CHILDREN_KEY] = [
                    self.process_jss_item(sub_item)
                    for sub_item in sub_items
                    if _is_mapping(sub_item, "jss_item_malformed", parent_name=item.get("name"))
                ]

            processed["fields"] = self.process_jss_fields(fields)

        return processed

    def _process_scalar(self, field_value: Mapping) -> DataField:
        return field_value.get("value")

    def _process_image(self, field_value: Mapping) -> DataField:
        value = field_value.get("value")
        if not isinstance(value, Mapping):
            value = {}

        return {key: value.get(key) for key in IMAGE_KEYS}

    def _process_link(self, field_value: Mapping) -> DataField:
        # Keys missing from the source are left out, not defaulted
        value = field_value.get("value")
        if not isinstance(value, Mapping):
            value = {}

        return {key: value[key] for key in LINK_KEYS if key in value}

    def _process_reference(self, field_value: Mapping) -> DataField:
        """Flatten a reference field into the field group of its target item."""
        fields: Any = field_value.get("fields")

        # Droptree targets occasionally arrive as a bare list of fields
        if isinstance(fields, list):
            fields = {str(index): value for index, value in enumerate(fields)}

        return self.process_jss_fields(fields)

    # =========================================================================
    # GraphQL
    # =========================================================================

    def process_gql_item(self, item: Optional[GqlItem]) -> Optional[DataItem]:
        """Normalize a GraphQL item, recursively.

        System fields (names starting with "__") are skipped and fields of
        unknown type are dropped.

        Returns:
            The canonical item, or None if no item was given.
        """
        if item is None or not _is_mapping(item, "gql_item_malformed"):
            return None

        processed: DataItem = {
            "id": item.get("id"),
            "name": item.get("name"),
        }

        fields: DataFieldGroup = {}
        for field in item.get("fields") or []:
            if not _is_mapping(field, "gql_field_malformed", item_id=item.get("id")):
                continue

            name = field.get("name")

            if not name or not isinstance(name, str):
                logger.warning("gql_field_name_missing", item_id=item.get("id"))
                continue

            # Skip the system-generated Sitecore fields
            if name.startswith(SYSTEM_FIELD_PREFIX):
                continue

            typename = field.get("__typename")
            field_type = GqlFieldType.parse(typename)

            if field_type is None:
                logger.warning(
                    "gql_field_type_unrecognized",
                    field_type=typename,
                    field_name=name,
                    message=f'Unable to process the GraphQL field. The type "{typename}" is not recognized.',
                )
                continue

            fields[name] = self._gql_handlers[field_type](field)

        processed["fields"] = fields

        children = item.get(CHILDREN_KEY)
        if children is not None:
            processed[CHILDREN_KEY] = [
                self.process_gql_item(child)
                for child in children
                if _is_mapping(child, "gql_item_malformed", parent_id=item.get("id"))
            ]

        return processed

    def process_gql_data(self, data: Optional[GqlItem]) -> Optional[DataItem]:
        """Normalize the item returned by a GraphQL query."""
        return self.process_gql_item(data)

    def _process_gql_text(self, field: GqlField) -> DataField:
        return field.get("value")

    def _process_gql_image(self, field: GqlField) -> DataField:
        return parse_image_tag(field.get("rendered"), self._host).model_dump()

    def _process_gql_link(self, field: GqlField) -> DataField:
        return parse_link_tag(field.get("rendered"), field.get("value")).model_dump()
