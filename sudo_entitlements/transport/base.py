"""
Abstract base class and response types for the GraphQL transport layer.

The entitlements client talks to the service exclusively through a
``GraphQLTransport``. The response dataclasses give a uniform structure
regardless of which transport produced them, so tests and alternative
transports can be injected without touching the client.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional


class TransportError(Exception):
    """Raised when no GraphQL response could be obtained from the service.

    Attributes:
        status_code: HTTP status of the failed exchange, when one was received.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


@dataclass
class GraphQLError:
    """One entry of a GraphQL response's ``errors`` list.

    Attributes:
        message:     Human readable error message.
        error_type:  Service error type (``errorType``), e.g.
                     ``"sudoplatform.entitlements.NoExternalIdError"``.
        http_status: HTTP status of the exchange, when the transport exposes it.
        path:        GraphQL path of the failing field.
        raw:         The error payload exactly as received.
    """

    message: str = ""
    error_type: Optional[str] = None
    http_status: Optional[int] = None
    path: list[Any] = field(default_factory=list)
    raw: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: dict[str, Any], *, http_status: Optional[int] = None) -> "GraphQLError":
        error_type = payload.get("errorType")
        if error_type is None:
            error_type = (payload.get("extensions") or {}).get("errorType")
        return cls(
            message=str(payload.get("message", "")),
            error_type=str(error_type) if error_type is not None else None,
            http_status=http_status,
            path=list(payload.get("path") or []),
            raw=dict(payload),
        )

    def __str__(self) -> str:
        if self.raw:
            return str(self.raw)
        return f"GraphQLError(message={self.message!r}, error_type={self.error_type!r})"


@dataclass
class GraphQLResponse:
    """Result of a single GraphQL query or mutation."""

    data: Optional[dict[str, Any]] = None
    errors: list[GraphQLError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)


class GraphQLTransport(ABC):
    """Authenticated async GraphQL transport.

    Implementations perform exactly one network round trip per call and
    never retry. Failures to obtain any response raise ``TransportError``
    (or an exception chained to one); service-reported errors are returned
    in ``GraphQLResponse.errors``.
    """

    @abstractmethod
    async def query(
        self,
        document: str,
        variables: Optional[dict[str, Any]] = None,
    ) -> GraphQLResponse:
        """Execute a GraphQL query document and return the response."""

    @abstractmethod
    async def mutate(
        self,
        document: str,
        variables: Optional[dict[str, Any]] = None,
    ) -> GraphQLResponse:
        """Execute a GraphQL mutation document and return the response."""

    async def aclose(self) -> None:
        """Release any network resources held by the transport."""
