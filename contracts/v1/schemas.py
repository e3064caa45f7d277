"""Pydantic contracts for the v1 entitlements GraphQL payloads."""

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    """Base model that accepts camelCase keys and ignores ``__typename``."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True, allow_inf_nan=False)


class EntitlementRecord(_WireModel):
    name: str
    description: str | None = None
    value: int = Field(ge=0)


class EntitlementsSetRecord(_WireModel):
    created_at_epoch_ms: float = Field(alias="createdAtEpochMs")
    updated_at_epoch_ms: float = Field(alias="updatedAtEpochMs")
    version: float
    name: str
    description: str | None = None
    entitlements: list[EntitlementRecord] = Field(default_factory=list)


class UserEntitlementsRecord(_WireModel):
    version: float
    entitlements_set_name: str | None = Field(default=None, alias="entitlementsSetName")
    entitlements: list[EntitlementRecord] = Field(default_factory=list)


class EntitlementConsumerRecord(_WireModel):
    id: str
    issuer: str


class EntitlementConsumptionRecord(_WireModel):
    consumer: EntitlementConsumerRecord | None = None
    name: str
    value: int
    consumed: int
    available: int
    first_consumed_at_epoch_ms: float | None = Field(default=None, alias="firstConsumedAtEpochMs")
    last_consumed_at_epoch_ms: float | None = Field(default=None, alias="lastConsumedAtEpochMs")


class EntitlementsConsumptionRecord(_WireModel):
    entitlements: UserEntitlementsRecord
    consumption: list[EntitlementConsumptionRecord] = Field(default_factory=list)


class GetEntitlementsData(_WireModel):
    get_entitlements: EntitlementsSetRecord | None = Field(default=None, alias="getEntitlements")


class GetEntitlementsConsumptionData(_WireModel):
    get_entitlements_consumption: EntitlementsConsumptionRecord | None = Field(
        default=None, alias="getEntitlementsConsumption"
    )


class GetExternalIdData(_WireModel):
    get_external_id: str | None = Field(default=None, alias="getExternalId")


class RedeemEntitlementsData(_WireModel):
    redeem_entitlements: EntitlementsSetRecord | None = Field(default=None, alias="redeemEntitlements")


class ConsumeBooleanEntitlementsData(_WireModel):
    consume_boolean_entitlements: bool | None = Field(
        default=None, alias="consumeBooleanEntitlements"
    )
