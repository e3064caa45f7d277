"""
Shared fixtures for sudo-entitlements tests.
"""

import logging

import pytest
from unittest.mock import AsyncMock, MagicMock

from sudo_entitlements.client import DefaultEntitlementsClient
from sudo_entitlements.transport.base import GraphQLError, GraphQLResponse


@pytest.fixture
def mock_session_provider():
    """Create a signed-in SessionProvider mock.

    Usage:
        mock_session_provider.is_signed_in.return_value = False
    """
    provider = MagicMock()
    provider.is_signed_in = MagicMock(return_value=True)
    provider.get_id_token = AsyncMock(return_value="id-token")
    return provider


@pytest.fixture
def mock_transport():
    """Create a mock GraphQLTransport.

    Provides ``query``, ``mutate`` and ``aclose`` as AsyncMock instances;
    set ``return_value`` or ``side_effect`` per test.
    """
    transport = AsyncMock()
    transport.query = AsyncMock()
    transport.mutate = AsyncMock()
    transport.aclose = AsyncMock()
    return transport


@pytest.fixture
def client(mock_session_provider, mock_transport):
    """A DefaultEntitlementsClient wired to the mock provider and transport."""
    return DefaultEntitlementsClient(
        session_provider=mock_session_provider,
        transport=mock_transport,
        logger=logging.getLogger("tests.sudo_entitlements"),
    )


@pytest.fixture
def graphql_response():
    """Create a GraphQLResponse from a data payload.

    Usage:
        mock_transport.query.return_value = graphql_response({"getExternalId": "x"})
    """
    def _make_response(data=None):
        return GraphQLResponse(data=data)
    return _make_response


@pytest.fixture
def error_response():
    """Create a GraphQLResponse carrying one error with the given errorType.

    Usage:
        mock_transport.query.return_value = error_response("sudoplatform.ServiceError")
        mock_transport.query.return_value = error_response(None, http_status=401)
    """
    def _make_response(error_type, http_status=None):
        payload = {"message": "mock", "path": []}
        if error_type is not None:
            payload["errorType"] = error_type
        error = GraphQLError.from_payload(payload, http_status=http_status)
        return GraphQLResponse(data=None, errors=[error])
    return _make_response


@pytest.fixture
def sample_entitlements_set_record():
    """A getEntitlements/redeemEntitlements record as returned by the service."""
    return {
        "__typename": "EntitlementsSet",
        "createdAtEpochMs": 1.0,
        "updatedAtEpochMs": 2.0,
        "version": 1.0,
        "name": "entitlements-set-name",
        "description": "entitlements-set-description",
        "entitlements": [
            {
                "__typename": "Entitlement",
                "name": "e.name",
                "description": "e.description",
                "value": 42,
            },
        ],
    }


@pytest.fixture
def sample_consumption_record():
    """A getEntitlementsConsumption record as returned by the service."""
    return {
        "entitlements": {
            "version": 1.0,
            "entitlementsSetName": "entitlements-set-name",
            "entitlements": [
                {"name": "e.name", "description": "e.description", "value": 42},
            ],
        },
        "consumption": [
            {
                "consumer": {"id": "consumer-id", "issuer": "consumer-issuer"},
                "name": "e.name",
                "value": 42,
                "consumed": 32,
                "available": 10,
                "firstConsumedAtEpochMs": 50.0,
                "lastConsumedAtEpochMs": 100.0,
            },
        ],
    }
