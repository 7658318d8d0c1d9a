"""GraphQL transport for fetching Sitecore items."""

from jsskit.transport.base import GraphQLTransport
from jsskit.transport.graphql_client import ITEM_QUERY, GraphQLClient

__all__ = [
    "GraphQLTransport",
    "GraphQLClient",
    "ITEM_QUERY",
]
