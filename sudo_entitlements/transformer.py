"""Mapping helpers between v1 wire records and the public domain models.

These run only after the client has confirmed a response carries no errors
and non-null data, so no error handling happens here.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable

from contracts.v1.schemas import (
    EntitlementConsumptionRecord,
    EntitlementRecord,
    EntitlementsConsumptionRecord,
    EntitlementsSetRecord,
)

from .models import (
    Entitlement,
    EntitlementConsumer,
    EntitlementConsumption,
    EntitlementsConsumption,
    EntitlementsSet,
    UserEntitlements,
)


def epoch_ms_to_datetime(epoch_ms: float) -> datetime:
    """Convert epoch milliseconds to an aware UTC ``datetime``."""
    return datetime.fromtimestamp(epoch_ms / 1000, tz=timezone.utc)


def entitlement_from_record(record: EntitlementRecord) -> Entitlement:
    return Entitlement(name=record.name, description=record.description, value=record.value)


def entitlements_from_records(records: Iterable[EntitlementRecord]) -> tuple[Entitlement, ...]:
    """Map entitlement records to an ordered tuple, preserving record order."""
    return tuple(entitlement_from_record(r) for r in records)


def entitlement_set_from_records(records: Iterable[EntitlementRecord]) -> frozenset[Entitlement]:
    """Map entitlement records to a set; duplicate records collapse."""
    return frozenset(entitlement_from_record(r) for r in records)


def entitlements_set_from_record(record: EntitlementsSetRecord) -> EntitlementsSet:
    """Convert a ``getEntitlements``/``redeemEntitlements`` record to an ``EntitlementsSet``."""
    return EntitlementsSet(
        name=record.name,
        description=record.description,
        entitlements=entitlement_set_from_records(record.entitlements),
        version=record.version,
        created_at=epoch_ms_to_datetime(record.created_at_epoch_ms),
        updated_at=epoch_ms_to_datetime(record.updated_at_epoch_ms),
    )


def consumption_from_record(record: EntitlementConsumptionRecord) -> EntitlementConsumption:
    consumer = None
    if record.consumer is not None:
        consumer = EntitlementConsumer(id=record.consumer.id, issuer=record.consumer.issuer)
    return EntitlementConsumption(
        name=record.name,
        consumer=consumer,
        value=record.value,
        consumed=record.consumed,
        available=record.available,
        first_consumed_at_epoch_ms=record.first_consumed_at_epoch_ms,
        last_consumed_at_epoch_ms=record.last_consumed_at_epoch_ms,
    )


def entitlements_consumption_from_record(record: EntitlementsConsumptionRecord) -> EntitlementsConsumption:
    """Convert a ``getEntitlementsConsumption`` record to an ``EntitlementsConsumption``."""
    user_entitlements = UserEntitlements(
        version=record.entitlements.version,
        entitlements_set_name=record.entitlements.entitlements_set_name,
        entitlements=entitlements_from_records(record.entitlements.entitlements),
    )
    return EntitlementsConsumption(
        entitlements=user_entitlements,
        consumption=tuple(consumption_from_record(c) for c in record.consumption),
    )
