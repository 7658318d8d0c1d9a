"""Attribute extraction from pre-rendered Sitecore markup.

GraphQL image and link fields do not expose their attributes as separate
properties, only as HTML (``rendered``) or link XML (``value``) fragments.
The fragments are matched with a plain ``name="value"`` pattern; they are
never parsed as documents, so malformed markup is fine.
"""

import re
from functools import lru_cache
from typing import Optional

from jsskit.data.types import DataImage, DataLink


@lru_cache(maxsize=64)
def _attr_pattern(attr_name: str) -> re.Pattern:
    # Value stops at the first whitespace or double quote
    return re.compile(rf'(?<![\w-]){re.escape(attr_name)}="([^"\s]*)')


def extract_attribute(fragment: Optional[str], attr_name: str) -> Optional[str]:
    """Return the value of ``attr_name`` in ``fragment``, or None if absent.

    Example:
        extract_attribute('<img src="/a.png" alt="A">', "src")  # "/a.png"
    """
    if not fragment:
        return None

    match = _attr_pattern(attr_name).search(fragment)
    return match.group(1) if match else None


def parse_image_tag(rendered: Optional[str], host: str) -> DataImage:
    """Build an image record from a rendered ``<img>`` tag.

    The host prefix is prepended to ``src`` only when a src was found.
    """
    src = extract_attribute(rendered, "src")

    return DataImage(
        src=f"{host}{src}" if src is not None else "",
        width=extract_attribute(rendered, "width") or "",
        height=extract_attribute(rendered, "height") or "",
        alt=extract_attribute(rendered, "alt") or "",
    )


def parse_link_tag(rendered: Optional[str], value: Optional[str]) -> DataLink:
    """Build a link record from a GraphQL link field.

    The href only exists on the rendered anchor; every other attribute only
    exists on the raw link XML held in ``value``.
    """
    attrs = {
        name: extract_attribute(value, name) or ""
        for name in DataLink.model_fields
        if name != "href"
    }

    return DataLink(href=extract_attribute(rendered, "href") or "", **attrs)
