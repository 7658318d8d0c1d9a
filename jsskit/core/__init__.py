"""
Core infrastructure modules for jss-kit.

Provides common utilities used across the package:
- exceptions: Standardized exception hierarchy
- logging: structlog configuration
"""

from jsskit.core.exceptions import (
    JssKitError,
    RetryableError,
    PermanentError,
    ConfigurationError,
    GraphQLError,
    GraphQLAuthError,
    GraphQLQueryError,
    GraphQLRateLimitError,
    GraphQLTimeoutError,
    GraphQLUnavailableError,
)
from jsskit.core.logging import configure_logging

__all__ = [
    # Exceptions
    "JssKitError",
    "RetryableError",
    "PermanentError",
    "ConfigurationError",
    "GraphQLError",
    "GraphQLAuthError",
    "GraphQLQueryError",
    "GraphQLRateLimitError",
    "GraphQLTimeoutError",
    "GraphQLUnavailableError",
    # Logging
    "configure_logging",
]
