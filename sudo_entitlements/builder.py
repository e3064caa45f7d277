"""
Factory for creating entitlements client instances.
"""

import logging
from typing import Optional

from .client import DefaultEntitlementsClient, EntitlementsClient
from .config import ClientConfig
from .identity import SessionProvider
from .transport.base import GraphQLTransport
from .transport.http_transport import HttpGraphQLTransport


def create_entitlements_client(
    *,
    config: Optional[ClientConfig],
    session_provider: Optional[SessionProvider],
    transport: Optional[GraphQLTransport] = None,
    logger: Optional[logging.Logger] = None,
) -> EntitlementsClient:
    """Create an ``EntitlementsClient``.

    Args:
        config:           Client configuration (required), e.g. from ``load_config()``.
        session_provider: Provider of the user's sign-in state and ID token (required).
        transport:        Pre-built GraphQL transport. When omitted an
                          ``HttpGraphQLTransport`` is built from ``config``.
        logger:           Logger for errors and warnings. Defaults to the
                          ``SudoEntitlements`` logger.

    Returns:
        A ``DefaultEntitlementsClient`` ready for use.

    Raises:
        ValueError: If ``config`` or ``session_provider`` is missing.
    """
    if config is None:
        raise ValueError("ClientConfig must be provided.")
    if session_provider is None:
        raise ValueError("SessionProvider must be provided.")

    if transport is None:
        transport = HttpGraphQLTransport(
            config.api_url,
            session_provider,
            timeout_seconds=config.timeout_seconds,
        )

    return DefaultEntitlementsClient(
        session_provider=session_provider,
        transport=transport,
        logger=logger,
    )
