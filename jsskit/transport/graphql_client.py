"""Async GraphQL client for the Sitecore GraphQL endpoint.

Posts queries over HTTP and returns the response body. Transient failures
(rate limits, timeouts, 5xx) are retried with exponential backoff; the
response body is returned untouched for the DataProcessor to normalize.
"""

from typing import Any, Optional

import httpx
import structlog
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from jsskit.config.settings import get_settings
from jsskit.core.exceptions import (
    ConfigurationError,
    GraphQLAuthError,
    GraphQLError,
    GraphQLQueryError,
    GraphQLRateLimitError,
    GraphQLTimeoutError,
    GraphQLUnavailableError,
    RetryableError,
)

logger = structlog.get_logger(__name__)


# =============================================================================
# Queries
# =============================================================================

ITEM_QUERY = """
query ItemQuery($path: String!) {
  item(path: $path) {
    id
    name
    fields {
      __typename
      name
      value
      rendered
    }
    children {
      id
      name
      fields {
        __typename
        name
        value
        rendered
      }
    }
  }
}
"""

API_KEY_HEADER = "sc_apikey"


# =============================================================================
# GraphQL Client
# =============================================================================


class GraphQLClient:
    """Async client for a Sitecore GraphQL endpoint.

    Example:
        async with GraphQLClient() as client:
            response = await client.query(ITEM_QUERY, {"path": "{GUID}"})
            item = response["data"]["item"]
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: int = 3,
        retry_wait: float = 1.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            endpoint: GraphQL endpoint URL. If not provided, loads from settings.
            api_key: Sitecore API key. If not provided, loads from settings.
            timeout: Request timeout in seconds. If not provided, loads from settings.
            max_retries: Maximum number of attempts for retryable failures.
            retry_wait: Multiplier for the exponential backoff between attempts.
            transport: Optional httpx transport (used to stub the network in tests).
        """
        settings = get_settings()
        self._endpoint = endpoint or settings.graphql_endpoint
        if not self._endpoint:
            raise ConfigurationError(
                "GraphQL endpoint not configured",
                config_key="graphql_endpoint",
            )

        self._api_key = api_key or (
            settings.sitecore_api_key.get_secret_value()
            if settings.sitecore_api_key
            else None
        )
        self._timeout = timeout or settings.graphql_timeout_seconds
        self._max_retries = max_retries
        self._retry_wait = retry_wait
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def endpoint(self) -> str:
        """GraphQL endpoint URL."""
        return self._endpoint

    async def __aenter__(self) -> "GraphQLClient":
        """Enter async context manager."""
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure HTTP client is initialized."""
        if self._client is None:
            headers = {"Content-Type": "application/json"}
            if self._api_key:
                headers[API_KEY_HEADER] = self._api_key

            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                headers=headers,
                transport=self._transport,
            )
        return self._client

    async def query(
        self,
        query: str,
        variables: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """Run a GraphQL query, retrying transient failures.

        Args:
            query: GraphQL query document.
            variables: Query variables.

        Returns:
            The parsed response body ({"data": ...}).

        Raises:
            GraphQLAuthError: On authentication failure.
            GraphQLError: On other client errors or an unreadable response body.
            GraphQLQueryError: When the response carries GraphQL errors.
            GraphQLRateLimitError: When still rate limited after retries.
            GraphQLTimeoutError: When still timing out after retries.
            GraphQLUnavailableError: When the endpoint keeps failing.
        """
        payload = {"query": query, "variables": variables or {}}

        async for attempt in AsyncRetrying(
            retry=retry_if_exception_type(RetryableError),
            stop=stop_after_attempt(self._max_retries),
            wait=wait_exponential(multiplier=self._retry_wait, max=10),
            reraise=True,
        ):
            with attempt:
                return await self._post(payload)

    async def _post(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Send one request and map failures to transport exceptions."""
        client = await self._ensure_client()

        try:
            response = await client.post(self._endpoint, json=payload)
        except httpx.TimeoutException as e:
            logger.error("graphql_timeout", endpoint=self._endpoint, error=str(e))
            raise GraphQLTimeoutError(self._endpoint, f"Request timeout: {e}")
        except httpx.RequestError as e:
            logger.error("graphql_request_error", endpoint=self._endpoint, error=str(e))
            raise GraphQLUnavailableError(
                self._endpoint,
                f"Request failed: {e}",
                {"original_error": str(e)},
            )

        if response.status_code in (401, 403):
            raise GraphQLAuthError(
                self._endpoint,
                "API key rejected",
                {"status_code": response.status_code},
            )
        elif response.status_code == 429:
            logger.warning("graphql_rate_limited", endpoint=self._endpoint)
            raise GraphQLRateLimitError(self._endpoint, "Rate limited")
        elif response.status_code >= 500:
            logger.warning(
                "graphql_server_error",
                endpoint=self._endpoint,
                status_code=response.status_code,
            )
            raise GraphQLUnavailableError(
                self._endpoint,
                f"Server error {response.status_code}",
                {"status_code": response.status_code},
            )
        elif response.status_code >= 400:
            raise GraphQLError(
                self._endpoint,
                f"API error {response.status_code}",
                {"status_code": response.status_code},
            )

        try:
            body = response.json() if response.content else {}
        except ValueError as e:
            logger.error("graphql_invalid_response", endpoint=self._endpoint, error=str(e))
            raise GraphQLError(
                self._endpoint,
                "Response body is not valid JSON",
                {"status_code": response.status_code},
            )

        if not isinstance(body, dict):
            raise GraphQLError(
                self._endpoint,
                f"Unexpected response body of type {type(body).__name__}",
                {"status_code": response.status_code},
            )

        if body.get("errors"):
            messages = [error.get("message", "Unknown error") for error in body["errors"]]
            logger.error("graphql_query_errors", endpoint=self._endpoint, errors=messages)
            raise GraphQLQueryError(
                self._endpoint,
                "; ".join(messages),
                {"errors": body["errors"]},
            )

        return body
