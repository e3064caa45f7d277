"""GraphQL transport abstraction and its default httpx implementation."""

from .base import GraphQLError, GraphQLResponse, GraphQLTransport, TransportError
from .http_transport import HttpGraphQLTransport

__all__ = [
    "GraphQLError",
    "GraphQLResponse",
    "GraphQLTransport",
    "HttpGraphQLTransport",
    "TransportError",
]
