"""Exception taxonomy surfaced by the entitlements client.

``EntitlementsError`` is the only error channel that crosses the client
boundary (apart from ``asyncio.CancelledError``). Each subclass carries a
``kind`` discriminator so callers can match on either the class or the tag.
"""

from __future__ import annotations

from .identity import SudoPlatformError


class EntitlementsError(SudoPlatformError):
    """Base exception for entitlements client failures."""

    kind = "entitlements"

    def __init__(self, message: str | None = None, cause: BaseException | None = None):
        args = (message,) if message is not None else ()
        super().__init__(*args)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if self.message:
            return self.message
        if self.cause is not None:
            return f"{type(self.cause).__name__}: {self.cause}"
        return self.kind

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, cause={self.cause!r})"


class AmbiguousEntitlementsError(EntitlementsError):
    """Multiple conflicting entitlements sets were recognised for the user."""

    kind = "ambiguous_entitlements"


class AuthenticationError(EntitlementsError):
    """The service or identity provider rejected the caller's credentials."""

    kind = "authentication"


class FailedError(EntitlementsError):
    """The request failed: server error, missing data or transport failure."""

    kind = "failed"


class InsufficientEntitlementsError(EntitlementsError):
    """The user is not entitled to consume the requested entitlement."""

    kind = "insufficient_entitlements"


class InvalidArgumentError(EntitlementsError, ValueError):
    """An argument was rejected locally or by the service."""

    kind = "invalid_argument"


class InvalidTokenError(EntitlementsError):
    """The identity token presented for redemption was invalid."""

    kind = "invalid_token"


class NoEntitlementsError(EntitlementsError):
    """No entitlements are assigned to the user."""

    kind = "no_entitlements"


class NoExternalIdError(EntitlementsError):
    """No external id could be determined for the user."""

    kind = "no_external_id"


class NoBillingGroupError(EntitlementsError):
    """The user's entitlements require a billing group that is not set."""

    kind = "no_billing_group"


class EntitlementsSequenceNotFoundError(EntitlementsError):
    """The entitlements sequence referenced by the user was not found."""

    kind = "entitlements_sequence_not_found"


class EntitlementsSetNotFoundError(EntitlementsError):
    """The entitlements set referenced by the user was not found."""

    kind = "entitlements_set_not_found"


class ServiceError(EntitlementsError):
    """The service reported an internal error."""

    kind = "service"


class NotSignedInError(EntitlementsError):
    """The caller is not signed in; no request was made."""

    kind = "not_signed_in"


class UnknownError(EntitlementsError):
    """An unexpected exception with no recognisable cause."""

    kind = "unknown"
