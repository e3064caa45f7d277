"""Normalise GraphQL errors and thrown exceptions into ``EntitlementsError``.

Two entry points:

- ``classify_service_error`` maps one entry of a response's ``errors`` list
  using the HTTP status (when the transport exposes it) and then the first
  matching ``errorType`` marker.
- ``classify_thrown_error`` walks the cause chain of an exception raised
  while invoking the transport.
"""

from __future__ import annotations

import asyncio
from typing import Iterator

import httpx

from .errors import (
    AmbiguousEntitlementsError,
    AuthenticationError,
    EntitlementsError,
    EntitlementsSequenceNotFoundError,
    EntitlementsSetNotFoundError,
    FailedError,
    InsufficientEntitlementsError,
    InvalidArgumentError,
    InvalidTokenError,
    NoBillingGroupError,
    NoEntitlementsError,
    NoExternalIdError,
    ServiceError,
    UnknownError,
)
from .identity import NotAuthorizedError, SudoPlatformError
from .transport.base import GraphQLError, TransportError

AMBIGUOUS_ENTITLEMENTS_MSG = "Multiple conflicting entitlement sets have been recognized"
INVALID_ARGUMENT_MSG = "Invalid argument"
INVALID_TOKEN_MSG = "Invalid identity token recognized"
INSUFFICIENT_ENTITLEMENTS_MSG = "Insufficient entitlements"
NO_ENTITLEMENTS_MSG = "No entitlements assigned to user"
NO_EXTERNAL_ID_MSG = "No external id found for user"
NO_BILLING_GROUP_MSG = "No billing group assigned to user"
ENTITLEMENTS_SEQUENCE_NOT_FOUND_MSG = "Entitlements sequence not found"
ENTITLEMENTS_SET_NOT_FOUND_MSG = "Entitlements set not found"
SERVICE_ERROR_MSG = "Service error"
NOT_AUTHORIZED_MSG = "Not authorized"

HTTP_UNAUTHORIZED = 401
HTTP_SERVER_ERROR = 500

# First match wins.
SERVICE_ERROR_TABLE: tuple[tuple[str, type[EntitlementsError], str], ...] = (
    ("AmbiguousEntitlementsError", AmbiguousEntitlementsError, AMBIGUOUS_ENTITLEMENTS_MSG),
    ("InvalidArgumentError", InvalidArgumentError, INVALID_ARGUMENT_MSG),
    ("InvalidTokenError", InvalidTokenError, INVALID_TOKEN_MSG),
    ("InsufficientEntitlementsError", InsufficientEntitlementsError, INSUFFICIENT_ENTITLEMENTS_MSG),
    ("NoEntitlementsError", NoEntitlementsError, NO_ENTITLEMENTS_MSG),
    ("NoExternalIdError", NoExternalIdError, NO_EXTERNAL_ID_MSG),
    ("NoBillingGroupError", NoBillingGroupError, NO_BILLING_GROUP_MSG),
    ("EntitlementsSequenceNotFoundError", EntitlementsSequenceNotFoundError, ENTITLEMENTS_SEQUENCE_NOT_FOUND_MSG),
    ("EntitlementsSetNotFoundError", EntitlementsSetNotFoundError, ENTITLEMENTS_SET_NOT_FOUND_MSG),
    ("ServiceError", ServiceError, SERVICE_ERROR_MSG),
)

MAX_CAUSE_DEPTH = 32

TRANSPORT_EXCEPTIONS = (TransportError, httpx.HTTPError)


def classify_service_error(error: GraphQLError) -> EntitlementsError:
    """Map a GraphQL error from a response to the matching ``EntitlementsError``."""
    if error.http_status is not None:
        if error.http_status == HTTP_UNAUTHORIZED:
            return AuthenticationError(str(error))
        if error.http_status >= HTTP_SERVER_ERROR:
            return FailedError(str(error))

    error_type = error.error_type or ""
    for marker, error_class, message in SERVICE_ERROR_TABLE:
        if marker in error_type:
            return error_class(message)
    return FailedError(str(error))


def iter_cause_chain(exc: BaseException, *, max_depth: int = MAX_CAUSE_DEPTH) -> Iterator[BaseException]:
    """Yield ``exc`` followed by its causes, outermost first.

    Follows ``__cause__`` and, unless suppressed, ``__context__``. Stops on a
    repeated exception or after ``max_depth`` links.
    """
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen and len(seen) < max_depth:
        seen.add(id(current))
        yield current
        if current.__cause__ is not None:
            current = current.__cause__
        elif not current.__suppress_context__:
            current = current.__context__
        else:
            current = None


def _as_platform_error(exc: BaseException) -> BaseException | None:
    return exc if isinstance(exc, SudoPlatformError) else None


def _as_cancellation(exc: BaseException) -> BaseException | None:
    return exc if isinstance(exc, asyncio.CancelledError) else None


def _as_authentication_error(exc: BaseException) -> BaseException | None:
    if isinstance(exc, NotAuthorizedError):
        return AuthenticationError(NOT_AUTHORIZED_MSG, cause=exc)
    return None


# Highest priority first; each rule is tried against the whole chain.
_CHAIN_RULES = (_as_platform_error, _as_cancellation, _as_authentication_error)


def _status_code_of(exc: BaseException) -> int | None:
    if isinstance(exc, TransportError):
        return exc.status_code
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code
    return None


def classify_thrown_error(exc: BaseException) -> BaseException:
    """Classify an exception raised while invoking the transport.

    Rules are applied in priority order, each against the whole cause chain
    (outermost link first), and the first match wins:

    1. a Sudo Platform SDK error (this SDK's or a sibling's), unchanged;
    2. ``asyncio.CancelledError``, unchanged, so cancellation propagates;
    3. ``NotAuthorizedError`` wrapped in ``AuthenticationError``.

    With nothing recognised, a top-level transport exception becomes
    ``AuthenticationError`` for HTTP 401 and ``FailedError`` otherwise;
    anything else becomes ``UnknownError`` wrapping ``exc``.
    """
    chain = list(iter_cause_chain(exc))
    for rule in _CHAIN_RULES:
        for link in chain:
            recognized = rule(link)
            if recognized is not None:
                return recognized

    if isinstance(exc, TRANSPORT_EXCEPTIONS):
        if _status_code_of(exc) == HTTP_UNAUTHORIZED:
            return AuthenticationError(str(exc), cause=exc)
        return FailedError(str(exc), cause=exc)
    return UnknownError(cause=exc)
