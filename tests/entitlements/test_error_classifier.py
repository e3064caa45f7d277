"""Tests for GraphQL error and thrown exception classification."""

import asyncio

import httpx
import pytest

from sudo_entitlements.error_classifier import (
    classify_service_error,
    classify_thrown_error,
    iter_cause_chain,
)
from sudo_entitlements.errors import (
    AmbiguousEntitlementsError,
    AuthenticationError,
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
from sudo_entitlements.identity import NotAuthorizedError, SudoPlatformError
from sudo_entitlements.transport.base import GraphQLError, TransportError


class UserClientNotAuthorizedError(SudoPlatformError):
    """Stands in for an error from the sibling user SDK."""


def _error(error_type=None, http_status=None):
    payload = {"message": "mock"}
    if error_type is not None:
        payload["errorType"] = error_type
    return GraphQLError.from_payload(payload, http_status=http_status)


class TestClassifyServiceError:
    @pytest.mark.parametrize(
        "error_type, expected",
        [
            ("sudoplatform.entitlements.AmbiguousEntitlementsError", AmbiguousEntitlementsError),
            ("sudoplatform.InvalidArgumentError", InvalidArgumentError),
            ("sudoplatform.InvalidTokenError", InvalidTokenError),
            ("sudoplatform.entitlements.InsufficientEntitlementsError", InsufficientEntitlementsError),
            ("sudoplatform.NoEntitlementsError", NoEntitlementsError),
            ("sudoplatform.entitlements.NoExternalIdError", NoExternalIdError),
            ("sudoplatform.entitlements.NoBillingGroupError", NoBillingGroupError),
            ("sudoplatform.entitlements.EntitlementsSequenceNotFoundError", EntitlementsSequenceNotFoundError),
            ("sudoplatform.entitlements.EntitlementsSetNotFoundError", EntitlementsSetNotFoundError),
            ("sudoplatform.ServiceError", ServiceError),
        ],
    )
    def test_maps_error_type(self, error_type, expected):
        assert type(classify_service_error(_error(error_type))) is expected

    def test_unrecognised_error_type_is_failed_with_raw_payload(self):
        error = _error("DilithiumCrystalsOutOfAlignment")

        result = classify_service_error(error)

        assert type(result) is FailedError
        assert "DilithiumCrystalsOutOfAlignment" in str(result)

    def test_missing_error_type_is_failed(self):
        assert type(classify_service_error(_error())) is FailedError

    def test_http_401_is_authentication(self):
        assert type(classify_service_error(_error(http_status=401))) is AuthenticationError

    @pytest.mark.parametrize("status", [500, 502, 503])
    def test_http_5xx_is_failed(self, status):
        assert type(classify_service_error(_error(http_status=status))) is FailedError

    def test_http_status_takes_priority_over_error_type(self):
        error = _error("sudoplatform.ServiceError", http_status=401)
        assert type(classify_service_error(error)) is AuthenticationError

    def test_other_http_status_falls_through_to_error_type(self):
        error = _error("sudoplatform.entitlements.NoExternalIdError", http_status=400)
        assert type(classify_service_error(error)) is NoExternalIdError

    def test_error_type_read_from_extensions(self):
        error = GraphQLError.from_payload(
            {"message": "mock", "extensions": {"errorType": "sudoplatform.ServiceError"}}
        )
        assert type(classify_service_error(error)) is ServiceError


class TestClassifyThrownError:
    def test_passes_through_entitlements_error(self):
        error = NoEntitlementsError()
        assert classify_thrown_error(error) is error

    def test_passes_through_sibling_sdk_error(self):
        error = UserClientNotAuthorizedError()
        assert classify_thrown_error(error) is error

    def test_passes_through_cancellation(self):
        error = asyncio.CancelledError()
        assert classify_thrown_error(error) is error

    def test_maps_not_authorized_to_authentication(self):
        error = NotAuthorizedError("rejected")

        result = classify_thrown_error(error)

        assert isinstance(result, AuthenticationError)
        assert result.cause is error

    def test_finds_not_authorized_buried_in_os_error(self):
        inner = NotAuthorizedError("rejected")
        try:
            try:
                raise inner
            except NotAuthorizedError as e:
                raise OSError("io failure") from e
        except OSError as outer:
            result = classify_thrown_error(outer)

        assert isinstance(result, AuthenticationError)
        assert result.cause is inner

    def test_finds_not_authorized_through_transport_and_runtime_wrappers(self):
        inner = NotAuthorizedError("")
        transport_error = TransportError("transport")
        transport_error.__cause__ = OSError("io")
        transport_error.__cause__.__cause__ = inner
        outer = RuntimeError("wrapper")
        outer.__cause__ = transport_error

        result = classify_thrown_error(outer)

        assert isinstance(result, AuthenticationError)
        assert result.cause is inner

    def test_finds_nested_entitlements_error(self):
        inner = InsufficientEntitlementsError("nope")
        outer = RuntimeError("wrapper")
        outer.__cause__ = inner

        assert classify_thrown_error(outer) is inner

    def test_sdk_error_deeper_in_chain_beats_not_authorized(self):
        inner = NoEntitlementsError("already diagnosed")
        outer = NotAuthorizedError("rejected")
        outer.__cause__ = inner

        assert classify_thrown_error(outer) is inner

    def test_cancellation_deeper_in_chain_beats_not_authorized(self):
        inner = asyncio.CancelledError()
        outer = NotAuthorizedError("rejected")
        outer.__cause__ = inner

        assert classify_thrown_error(outer) is inner

    def test_sdk_error_beats_cancellation(self):
        inner = UserClientNotAuthorizedError()
        outer = asyncio.CancelledError()
        outer.__cause__ = inner

        assert classify_thrown_error(outer) is inner

    def test_unrecognised_exception_is_unknown(self):
        error = ValueError("bad")

        result = classify_thrown_error(error)

        assert isinstance(result, UnknownError)
        assert result.cause is error
        assert result.__cause__ is error

    def test_transport_error_is_failed(self):
        error = TransportError("GraphQL endpoint returned HTTP 403", status_code=403)

        result = classify_thrown_error(error)

        assert isinstance(result, FailedError)
        assert result.cause is error

    def test_transport_error_401_is_authentication(self):
        error = TransportError("GraphQL endpoint returned HTTP 401", status_code=401)
        assert isinstance(classify_thrown_error(error), AuthenticationError)

    def test_httpx_error_is_failed(self):
        error = httpx.ConnectError("refused")
        assert isinstance(classify_thrown_error(error), FailedError)

    def test_wrapped_transport_error_without_cause_is_unknown(self):
        outer = RuntimeError("wrapper")
        outer.__cause__ = TransportError("transport")

        assert isinstance(classify_thrown_error(outer), UnknownError)

    def test_self_referential_cause_terminates(self):
        error = RuntimeError("loop")
        error.__cause__ = error

        assert isinstance(classify_thrown_error(error), UnknownError)

    def test_cyclic_cause_chain_terminates(self):
        first = RuntimeError("first")
        second = RuntimeError("second")
        first.__cause__ = second
        second.__cause__ = first

        assert isinstance(classify_thrown_error(first), UnknownError)


class TestIterCauseChain:
    def test_follows_context_when_no_cause(self):
        try:
            try:
                raise KeyError("inner")
            except KeyError:
                raise RuntimeError("outer")
        except RuntimeError as outer:
            chain = list(iter_cause_chain(outer))

        assert [type(e) for e in chain] == [RuntimeError, KeyError]

    def test_respects_suppressed_context(self):
        try:
            try:
                raise KeyError("inner")
            except KeyError:
                raise RuntimeError("outer") from None
        except RuntimeError as outer:
            chain = list(iter_cause_chain(outer))

        assert [type(e) for e in chain] == [RuntimeError]

    def test_depth_is_bounded(self):
        head = RuntimeError(0)
        current = head
        for i in range(1, 100):
            nxt = RuntimeError(i)
            current.__cause__ = nxt
            current = nxt

        assert len(list(iter_cause_chain(head, max_depth=10))) == 10
