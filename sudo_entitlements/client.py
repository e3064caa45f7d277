"""Entitlements service client: interface and default implementation."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from .error_classifier import classify_service_error, classify_thrown_error
from .errors import FailedError, InvalidArgumentError, NotSignedInError
from .identity import SessionProvider
from .logging_config import get_sdk_logger
from .models import EntitlementsConsumption, EntitlementsSet
from .operations import (
    CONSUME_BOOLEAN_ENTITLEMENTS,
    GET_ENTITLEMENTS,
    GET_ENTITLEMENTS_CONSUMPTION,
    GET_EXTERNAL_ID,
    REDEEM_ENTITLEMENTS,
    Operation,
)
from .transformer import entitlements_consumption_from_record, entitlements_set_from_record
from .transport.base import GraphQLTransport

ENTITLEMENTS_NOT_FOUND_MSG = "No entitlements returned in response"
NOT_SIGNED_IN_MSG = "User is not signed in"
INVALID_RESPONSE_MSG = "Malformed data returned in response"
NO_ENTITLEMENT_NAMES_MSG = "At least one entitlement name must be provided"

T = TypeVar("T")


class EntitlementsClient(ABC):
    """Client for the Sudo Platform entitlements service.

    Every operation requires a signed-in user and performs at most one
    network round trip. Failures are raised as ``EntitlementsError``
    subclasses; ``asyncio.CancelledError`` propagates unchanged.
    """

    @abstractmethod
    async def get_entitlements(self) -> Optional[EntitlementsSet]:
        """Return the user's current entitlements set, or ``None`` if unentitled.

        Deprecated in favour of ``get_entitlements_consumption``.
        """

    @abstractmethod
    async def get_entitlements_consumption(self) -> EntitlementsConsumption:
        """Return the user's entitlements and their current consumption."""

    @abstractmethod
    async def get_external_id(self) -> str:
        """Return the external id correlating the user with the entitlements backend."""

    @abstractmethod
    async def redeem_entitlements(self) -> EntitlementsSet:
        """Redeem entitlements based on the user's identity claims.

        Returns the entitlements set the user has once redemption completes.
        """

    @abstractmethod
    async def consume_boolean_entitlements(self, entitlement_names: Iterable[str]) -> None:
        """Record consumption of one or more boolean entitlements.

        Raises:
            InvalidArgumentError: If no names are given or the service does
                not recognise one of them.
            InsufficientEntitlementsError: If the user is not entitled to one
                of them.
        """

    async def aclose(self) -> None:
        """Release resources held by the client."""

    async def __aenter__(self) -> "EntitlementsClient":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.aclose()


class DefaultEntitlementsClient(EntitlementsClient):
    """``EntitlementsClient`` over an injected ``GraphQLTransport``."""

    def __init__(
        self,
        *,
        session_provider: SessionProvider,
        transport: GraphQLTransport,
        logger: Optional[logging.Logger] = None,
    ):
        self.session_provider = session_provider
        self.transport = transport
        self.logger = logger or get_sdk_logger()

    async def aclose(self) -> None:
        await self.transport.aclose()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def get_entitlements(self) -> Optional[EntitlementsSet]:
        self._require_signed_in()
        data = await self._execute(GET_ENTITLEMENTS)
        if data is None or data.get_entitlements is None:
            return None
        return self._transform(GET_ENTITLEMENTS, entitlements_set_from_record, data.get_entitlements)

    async def get_entitlements_consumption(self) -> EntitlementsConsumption:
        self._require_signed_in()
        data = await self._execute(GET_ENTITLEMENTS_CONSUMPTION)
        if data is None or data.get_entitlements_consumption is None:
            raise FailedError(ENTITLEMENTS_NOT_FOUND_MSG)
        return self._transform(
            GET_ENTITLEMENTS_CONSUMPTION,
            entitlements_consumption_from_record,
            data.get_entitlements_consumption,
        )

    async def get_external_id(self) -> str:
        self._require_signed_in()
        data = await self._execute(GET_EXTERNAL_ID)
        if data is None or data.get_external_id is None:
            raise FailedError(ENTITLEMENTS_NOT_FOUND_MSG)
        return data.get_external_id

    async def redeem_entitlements(self) -> EntitlementsSet:
        self._require_signed_in()
        data = await self._execute(REDEEM_ENTITLEMENTS)
        if data is None or data.redeem_entitlements is None:
            raise FailedError(ENTITLEMENTS_NOT_FOUND_MSG)
        return self._transform(REDEEM_ENTITLEMENTS, entitlements_set_from_record, data.redeem_entitlements)

    async def consume_boolean_entitlements(self, entitlement_names: Iterable[str]) -> None:
        self._require_signed_in()
        if isinstance(entitlement_names, str):
            entitlement_names = [entitlement_names]
        names = list(entitlement_names)
        if not names:
            raise InvalidArgumentError(NO_ENTITLEMENT_NAMES_MSG)

        data = await self._execute(CONSUME_BOOLEAN_ENTITLEMENTS, {"entitlementNames": names})
        if data is None or data.consume_boolean_entitlements is None:
            raise FailedError(ENTITLEMENTS_NOT_FOUND_MSG)

    # ------------------------------------------------------------------
    # Request skeleton
    # ------------------------------------------------------------------

    def _require_signed_in(self) -> None:
        try:
            signed_in = self.session_provider.is_signed_in()
        except Exception as e:
            self.logger.debug("is_signed_in: unexpected error %r", e)
            classified = classify_thrown_error(e)
            if classified is e:
                raise
            raise classified
        if not signed_in:
            raise NotSignedInError(NOT_SIGNED_IN_MSG)

    def _transform(self, operation: Operation, transform: Callable[[Any], T], record: Any) -> T:
        """Apply ``transform`` to a validated record; values it cannot represent fail the call."""
        try:
            return transform(record)
        except (ValueError, OverflowError, OSError) as e:
            self.logger.warning("%s: unrepresentable data: %s", operation.name, e)
            raise FailedError(INVALID_RESPONSE_MSG, cause=e)

    async def _execute(
        self,
        operation: Operation,
        variables: Optional[dict[str, Any]] = None,
    ) -> Optional[BaseModel]:
        """Run one operation and return its parsed ``data``, or ``None`` if absent."""
        try:
            if operation.is_mutation:
                response = await self.transport.mutate(operation.document, variables)
            else:
                response = await self.transport.query(operation.document, variables)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            self.logger.debug("%s: unexpected error %r", operation.name, e)
            classified = classify_thrown_error(e)
            if classified is e:
                raise
            raise classified

        if response.has_errors:
            self.logger.warning("%s: errors = %s", operation.name, response.errors)
            raise classify_service_error(response.errors[0])

        if response.data is None:
            return None
        try:
            return operation.data_model.model_validate(response.data)
        except ValidationError as e:
            self.logger.warning("%s: malformed data: %s", operation.name, e)
            raise FailedError(INVALID_RESPONSE_MSG, cause=e)
