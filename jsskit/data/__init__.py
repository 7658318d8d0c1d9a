"""Normalization layer for Sitecore content data.

Provides the content type model, the DataProcessor that converts JSS and
GraphQL data to canonical items, markup attribute extraction and
breadth-first tree lookups.
"""

from jsskit.data.lookup import find_component, find_in_jss
from jsskit.data.markup import extract_attribute, parse_image_tag, parse_link_tag
from jsskit.data.processor import DataProcessor
from jsskit.data.types import (
    DataImage,
    DataItem,
    DataLink,
    FieldType,
    GqlFieldType,
)

__all__ = [
    "DataProcessor",
    "DataImage",
    "DataItem",
    "DataLink",
    "FieldType",
    "GqlFieldType",
    "extract_attribute",
    "parse_image_tag",
    "parse_link_tag",
    "find_component",
    "find_in_jss",
]
