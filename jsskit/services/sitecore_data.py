"""Sitecore data-access facade.

Holds the current layout-service payload, answers point queries against
component renderings, and fetches items through a GraphQL transport.

Lookup truth table (get / get_raw):

    rendering  item_name  field_name   result
    ---------  ---------  ----------   ------------------------------------------
    missing    any        any          warning, None
    given      -          -            the rendering
    given      given      -            first nested item named item_name (BFS)
    given      -          given        field_name on the rendering or the nearest
                                       descendant having it (BFS)
    given      given      given        field_name on the named item or its nearest
                                       descendant having it
"""

from typing import Any, Callable, Optional

import structlog

from jsskit.config.settings import get_settings
from jsskit.core.exceptions import ConfigurationError
from jsskit.data.lookup import find_component, find_in_jss, get_field, has_field, has_name
from jsskit.data.processor import DataProcessor
from jsskit.data.types import JSS_ITEMS_KEY, DataItem, JssItem
from jsskit.transport.base import GraphQLTransport
from jsskit.transport.graphql_client import ITEM_QUERY

logger = structlog.get_logger(__name__)

LayoutCallback = Callable[[Optional[dict[str, Any]]], None]


class SitecoreDataService:
    """Facade over JSS layout data and GraphQL item data.

    Example:
        service = SitecoreDataService(host="https://cdn.example.com/")
        hero = service.get(rendering, "Hero")
        title = service.get(rendering, "Hero", "Title")
    """

    def __init__(
        self,
        host: Optional[str] = None,
        graphql_client: Optional[GraphQLTransport] = None,
    ):
        """Initialize the service.

        Args:
            host: Asset host prefix for GraphQL images. If not provided, loads
                from settings.
            graphql_client: Transport used by fetch().
        """
        self.processor = DataProcessor(host=host if host is not None else get_settings().jss_host)
        self.graphql_client = graphql_client
        self.callbacks: list[LayoutCallback] = []
        self._data: Optional[dict[str, Any]] = None

    # -------------------------------------------------------------------------
    # Layout data
    # -------------------------------------------------------------------------

    @property
    def data(self) -> Optional[dict[str, Any]]:
        """The current layout-service payload."""
        return self._data

    def set_data(self, layout_service_data: Optional[dict[str, Any]]) -> None:
        """Store a new layout-service payload and notify callbacks."""
        self._data = layout_service_data

        for callback in list(self.callbacks):
            self._notify(callback)

    def add_callback(self, callback: LayoutCallback) -> None:
        """
        Register a callback to be called with every new layout payload.

        A callback added after data was set is called with it right away.
        """
        self.callbacks.append(callback)
        callback_name = getattr(callback, "__name__", repr(callback))
        logger.debug("layout_callback_added", callback=callback_name)

        if self._data is not None:
            self._notify(callback)

    def remove_callback(self, callback: LayoutCallback) -> None:
        """Remove a previously registered callback."""
        if callback in self.callbacks:
            self.callbacks.remove(callback)

    def _notify(self, callback: LayoutCallback) -> None:
        try:
            callback(self._data)
        except Exception as e:
            callback_name = getattr(callback, "__name__", repr(callback))
            logger.error(
                "layout_callback_error",
                callback=callback_name,
                error=str(e),
            )

    def get_component(self, identifier: str) -> Optional[JssItem]:
        """Find a rendering in the current layout by uid, component name or datasource ID."""
        if not self._data:
            logger.warning(
                "layout_data_missing",
                message="Unable to find the component. No layout service data is present.",
            )
            return None

        if not identifier:
            logger.warning("component_identifier_not_specified")
            return None

        route = (self._data.get("sitecore") or {}).get("route") or {}
        return find_component(route.get("placeholders"), identifier)

    # -------------------------------------------------------------------------
    # Rendering lookups
    # -------------------------------------------------------------------------

    def get(
        self,
        rendering: Optional[JssItem],
        item_name: Optional[str] = None,
        field_name: Optional[str] = None,
    ) -> Any:
        """Look up a rendering, a nested item or a field and normalize it."""
        raw = self.get_raw(rendering, item_name, field_name)

        if field_name:
            return self.processor.process_jss_field(raw)
        return self.processor.process_jss_item(raw)

    def get_raw(
        self,
        rendering: Optional[JssItem],
        item_name: Optional[str] = None,
        field_name: Optional[str] = None,
    ) -> Any:
        """Look up a rendering, a nested item or a field without normalizing it."""
        if rendering is None:
            logger.warning("rendering_not_specified", message="Please specify a rendering.")
            return None

        if not item_name and not field_name:
            return rendering

        item: Optional[JssItem] = rendering
        if item_name:
            nested = (rendering.get("fields") or {}).get(JSS_ITEMS_KEY)
            item = find_in_jss(nested, has_name(item_name))

        if not field_name:
            return item

        return find_in_jss([item], has_field(field_name), get_field(field_name))

    # -------------------------------------------------------------------------
    # GraphQL
    # -------------------------------------------------------------------------

    async def fetch(self, guid: str) -> Optional[DataItem]:
        """Fetch an item through GraphQL and normalize it.

        Args:
            guid: Item ID or path.

        Returns:
            The canonical item, or None if no ID was given or nothing was found.

        Raises:
            ConfigurationError: If no GraphQL client was configured.
        """
        if not guid:
            logger.warning(
                "item_id_not_specified",
                message="One or more required fields are missing. Did you remember to specify an ID?",
            )
            return None

        if self.graphql_client is None:
            raise ConfigurationError("No GraphQL client configured", config_key="graphql_client")

        response = await self.graphql_client.query(ITEM_QUERY, {"path": guid})
        item = (response.get("data") or {}).get("item")

        if not item:
            logger.warning("item_not_found", path=guid)
            return None

        return self.processor.process_gql_data(item)
