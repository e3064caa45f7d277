"""GraphQL operation documents for the entitlements API."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel

from contracts.v1.schemas import (
    ConsumeBooleanEntitlementsData,
    GetEntitlementsConsumptionData,
    GetEntitlementsData,
    GetExternalIdData,
    RedeemEntitlementsData,
)

_ENTITLEMENT_FIELDS = "name description value"

_ENTITLEMENTS_SET_FIELDS = f"""
    createdAtEpochMs
    updatedAtEpochMs
    version
    name
    description
    entitlements {{ {_ENTITLEMENT_FIELDS} }}
"""


@dataclass(frozen=True)
class Operation:
    """A GraphQL document paired with the model that parses its ``data``."""

    name: str
    document: str
    data_model: type[BaseModel]
    is_mutation: bool = False


GET_ENTITLEMENTS = Operation(
    name="GetEntitlements",
    document=f"""
query GetEntitlements {{
  getEntitlements {{{_ENTITLEMENTS_SET_FIELDS}  }}
}}
""",
    data_model=GetEntitlementsData,
)

GET_ENTITLEMENTS_CONSUMPTION = Operation(
    name="GetEntitlementsConsumption",
    document=f"""
query GetEntitlementsConsumption {{
  getEntitlementsConsumption {{
    entitlements {{
      version
      entitlementsSetName
      entitlements {{ {_ENTITLEMENT_FIELDS} }}
    }}
    consumption {{
      consumer {{ id issuer }}
      name
      value
      consumed
      available
      firstConsumedAtEpochMs
      lastConsumedAtEpochMs
    }}
  }}
}}
""",
    data_model=GetEntitlementsConsumptionData,
)

GET_EXTERNAL_ID = Operation(
    name="GetExternalId",
    document="""
query GetExternalId {
  getExternalId
}
""",
    data_model=GetExternalIdData,
)

REDEEM_ENTITLEMENTS = Operation(
    name="RedeemEntitlements",
    document=f"""
mutation RedeemEntitlements {{
  redeemEntitlements {{{_ENTITLEMENTS_SET_FIELDS}  }}
}}
""",
    data_model=RedeemEntitlementsData,
    is_mutation=True,
)

CONSUME_BOOLEAN_ENTITLEMENTS = Operation(
    name="ConsumeBooleanEntitlements",
    document="""
mutation ConsumeBooleanEntitlements($entitlementNames: [String!]!) {
  consumeBooleanEntitlements(entitlementNames: $entitlementNames)
}
""",
    data_model=ConsumeBooleanEntitlementsData,
    is_mutation=True,
)
