"""
Core exception hierarchy for jss-kit.

Normalization never raises on malformed content data; these exceptions cover
configuration and transport failures only, categorized for retry logic.
"""

from typing import Any, Optional


# =============================================================================
# Base Exceptions
# =============================================================================


class JssKitError(Exception):
    """Base exception for all jss-kit errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class RetryableError(JssKitError):
    """
    Transient errors that should be retried.

    Examples: Rate limits, timeouts, temporary network issues.
    """

    pass


class PermanentError(JssKitError):
    """
    Errors that won't be fixed by retrying.

    Examples: Invalid queries, missing configuration, authentication failures.
    """

    pass


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(PermanentError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        self.config_key = config_key
        details = {"config_key": config_key} if config_key else None
        super().__init__(message, details)


# =============================================================================
# GraphQL Transport Errors
# =============================================================================


class GraphQLError(JssKitError):
    """Base exception for GraphQL transport errors."""

    def __init__(
        self,
        endpoint: str,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ):
        self.endpoint = endpoint
        super().__init__(f"[{endpoint}] {message}", details)


class GraphQLAuthError(GraphQLError, PermanentError):
    """Raised when the endpoint rejects the API key."""

    pass


class GraphQLQueryError(GraphQLError, PermanentError):
    """Raised when the response carries GraphQL errors."""

    pass


class GraphQLRateLimitError(GraphQLError, RetryableError):
    """Raised when the endpoint rate limits the client."""

    pass


class GraphQLTimeoutError(GraphQLError, RetryableError):
    """Raised when a request times out."""

    pass


class GraphQLUnavailableError(GraphQLError, RetryableError):
    """Raised when the endpoint is temporarily unavailable."""

    pass
