"""Transport interface used by SitecoreDataService.fetch."""

from typing import Any, Optional, Protocol


class GraphQLTransport(Protocol):
    """Anything that can run a GraphQL query and return the response body."""

    async def query(
        self,
        query: str,
        variables: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """Run ``query`` with ``variables`` and return {"data": ...}."""
        ...
