"""v1 wire contracts for the entitlements GraphQL API."""

__version__ = "1.0.0"

from .schemas import (
    ConsumeBooleanEntitlementsData,
    EntitlementConsumerRecord,
    EntitlementConsumptionRecord,
    EntitlementRecord,
    EntitlementsConsumptionRecord,
    EntitlementsSetRecord,
    GetEntitlementsConsumptionData,
    GetEntitlementsData,
    GetExternalIdData,
    RedeemEntitlementsData,
    UserEntitlementsRecord,
)

__all__ = [
    "__version__",
    "ConsumeBooleanEntitlementsData",
    "EntitlementConsumerRecord",
    "EntitlementConsumptionRecord",
    "EntitlementRecord",
    "EntitlementsConsumptionRecord",
    "EntitlementsSetRecord",
    "GetEntitlementsConsumptionData",
    "GetEntitlementsData",
    "GetExternalIdData",
    "RedeemEntitlementsData",
    "UserEntitlementsRecord",
]
