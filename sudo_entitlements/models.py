"""Immutable domain models returned by the entitlements client."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .versioning import split_version


@dataclass(frozen=True, slots=True)
class Entitlement:
    """A named, quantified permission granted to a user."""

    name: str
    value: int
    description: str | None = None


@dataclass(frozen=True, slots=True)
class EntitlementsSet:
    """A named, versioned bundle of entitlements."""

    name: str
    entitlements: frozenset[Entitlement]
    version: float
    created_at: datetime
    updated_at: datetime
    description: str | None = None


@dataclass(frozen=True, slots=True)
class UserEntitlements:
    """The entitlements currently assigned to a user.

    ``version`` is composite: see ``split_version``.
    """

    version: float
    entitlements: tuple[Entitlement, ...]
    entitlements_set_name: str | None = None

    def split_version(self) -> tuple[int, int]:
        """Return ``(user_entitlements_version, entitlements_set_version)``."""
        return split_version(self.version)


@dataclass(frozen=True, slots=True)
class EntitlementConsumer:
    """Sub-user resource consuming a share of an entitlement."""

    id: str
    issuer: str


@dataclass(frozen=True, slots=True)
class EntitlementConsumption:
    name: str
    value: int
    consumed: int
    available: int
    consumer: EntitlementConsumer | None = None
    first_consumed_at_epoch_ms: float | None = None
    last_consumed_at_epoch_ms: float | None = None


@dataclass(frozen=True, slots=True)
class EntitlementsConsumption:
    """User entitlements together with their current consumption."""

    entitlements: UserEntitlements
    consumption: tuple[EntitlementConsumption, ...]
