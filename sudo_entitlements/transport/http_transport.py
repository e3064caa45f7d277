"""
httpx implementation of the GraphQL transport interface.

Posts GraphQL documents to the entitlements API endpoint, presenting the
signed-in user's ID token, and translates the HTTP exchange into a
``GraphQLResponse`` or a ``TransportError``.
"""

import logging
import time
from typing import Any, Optional

import httpx

from ..identity import SessionProvider
from .base import GraphQLError, GraphQLResponse, GraphQLTransport, TransportError

logger = logging.getLogger(__name__)


class HttpGraphQLTransport(GraphQLTransport):
    """GraphQLTransport backed by a shared ``httpx.AsyncClient``."""

    def __init__(
        self,
        api_url: str,
        session_provider: SessionProvider,
        *,
        timeout_seconds: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_url = api_url
        self._session_provider = session_provider
        self._timeout_seconds = timeout_seconds
        self._http_client = http_client
        self._owns_client = http_client is None

    def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self._timeout_seconds)
        return self._http_client

    async def aclose(self) -> None:
        if self._http_client is not None and self._owns_client:
            await self._http_client.aclose()
            self._http_client = None

    # ------------------------------------------------------------------
    # GraphQLTransport
    # ------------------------------------------------------------------

    async def query(
        self,
        document: str,
        variables: Optional[dict[str, Any]] = None,
    ) -> GraphQLResponse:
        return await self._execute(document, variables)

    async def mutate(
        self,
        document: str,
        variables: Optional[dict[str, Any]] = None,
    ) -> GraphQLResponse:
        return await self._execute(document, variables)

    # ------------------------------------------------------------------
    # Exchange
    # ------------------------------------------------------------------

    async def _execute(
        self,
        document: str,
        variables: Optional[dict[str, Any]],
    ) -> GraphQLResponse:
        token = await self._session_provider.get_id_token()
        payload = {"query": document, "variables": variables or {}}
        headers = {"Authorization": token, "Content-Type": "application/json"}

        client = self._get_http_client()
        start = time.perf_counter()
        try:
            response = await client.post(self.api_url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            raise TransportError(f"GraphQL request failed: {e}") from e

        duration = (time.perf_counter() - start) * 1000
        logger.debug("GraphQL POST %s -> %d in %.2f ms", self.api_url, response.status_code, duration)
        return self._parse_response(response)

    @staticmethod
    def _parse_response(response: httpx.Response) -> GraphQLResponse:
        status = response.status_code
        try:
            body = response.json()
        except ValueError as e:
            if response.is_success:
                raise TransportError(f"GraphQL endpoint returned invalid JSON: {e}", status) from e
            raise TransportError(f"GraphQL endpoint returned HTTP {status}", status) from e

        if not isinstance(body, dict):
            raise TransportError(f"GraphQL endpoint returned unexpected payload (HTTP {status})", status)

        raw_errors = body.get("errors") or []
        if not response.is_success and not raw_errors:
            raise TransportError(f"GraphQL endpoint returned HTTP {status}", status)

        error_status = None if response.is_success else status
        errors = [
            GraphQLError.from_payload(e, http_status=error_status)
            for e in raw_errors
            if isinstance(e, dict)
        ]
        data = body.get("data")
        return GraphQLResponse(data=data if isinstance(data, dict) else None, errors=errors)
