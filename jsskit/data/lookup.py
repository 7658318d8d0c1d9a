"""Breadth-first lookups over raw JSS trees.

Both searches visit every item at one nesting level before descending, so
the shallowest match always wins.
"""

from collections import deque
from collections.abc import Iterable, Mapping
from typing import Any, Callable, Optional

from jsskit.data.types import JSS_ITEMS_KEY, JssItem


def find_in_jss(
    jss_items: Optional[Iterable[Optional[JssItem]]],
    is_match: Callable[[JssItem], bool],
    get_value: Optional[Callable[[JssItem], Any]] = None,
) -> Any:
    """Search JSS items breadth-first until a match is found.

    Args:
        jss_items: The items to start from.
        is_match: Called with the CURRENT item; returns True on a match.
        get_value: Called with the FOUND item. Use this to return something
            from the item instead of the item itself.

    Returns:
        The first matching item (or get_value's result), otherwise None.

    Example:
        find_in_jss(rendering["fields"]["items"], lambda i: i["name"] == "foo")
    """
    if not jss_items:
        return None

    queue = deque(jss_items)

    while queue:
        current = queue.popleft()
        if not isinstance(current, Mapping):
            continue

        if is_match(current):
            return get_value(current) if get_value else current

        fields = current.get("fields")
        if isinstance(fields, Mapping):
            queue.extend(fields.get(JSS_ITEMS_KEY) or [])

    return None


def has_field(field_name: str) -> Callable[[JssItem], bool]:
    """Predicate matching items with a non-empty field called ``field_name``."""

    def predicate(item: JssItem) -> bool:
        fields = item.get("fields")
        return isinstance(fields, Mapping) and bool(fields.get(field_name))

    return predicate


def has_name(name: str) -> Callable[[JssItem], bool]:
    """Predicate matching items called ``name``."""
    return lambda item: item.get("name") == name


def get_field(field_name: str) -> Callable[[JssItem], Any]:
    """Extractor returning the raw field ``field_name`` of an item."""
    return lambda item: item["fields"][field_name]


def find_component(
    placeholders: Optional[Mapping[str, list[JssItem]]],
    identifier: str,
) -> Optional[JssItem]:
    """Find a component rendering anywhere in a placeholder tree.

    The identifier can be the rendering's uid, its component name, or (part
    of) its datasource ID.

    Args:
        placeholders: Placeholder name -> renderings mapping, e.g. a route's
            "placeholders".
        identifier: UID, component name or datasource ID to look for.

    Returns:
        The first matching rendering, otherwise None.
    """
    queue: deque[JssItem] = deque()

    def add_to_queue(nested: Optional[Mapping[str, list[JssItem]]]) -> None:
        if not isinstance(nested, Mapping):
            return
        for renderings in nested.values():
            queue.extend(renderings or [])

    add_to_queue(placeholders)

    while queue:
        component = queue.popleft()
        if not isinstance(component, Mapping):
            continue

        is_matching_component = (
            component.get("uid") == identifier
            or component.get("componentName") == identifier
            or identifier in (component.get("dataSource") or "")
        )

        if is_matching_component:
            return component

        add_to_queue(component.get("placeholders"))

    return None
