"""Identity-layer seam shared with the other Sudo Platform client SDKs.

The entitlements client never manages sign-in state itself. It asks a
``SessionProvider`` whether the user is signed in and, for the default
transport, for the ID token to present to the service.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


class SudoPlatformError(Exception):
    """Base class of every Sudo Platform SDK error taxonomy.

    Errors deriving from this class have already been diagnosed by an SDK
    and are passed through unchanged when found in a cause chain.
    """


class NotAuthorizedError(Exception):
    """Raised by the identity provider when it rejects the user's credentials."""


@runtime_checkable
class SessionProvider(Protocol):
    """Authenticated-session provider (e.g. the platform user client)."""

    def is_signed_in(self) -> bool:
        ...

    async def get_id_token(self) -> str:
        ...
