"""Tests for the v1 wire contracts."""

import pytest
from pydantic import ValidationError

from contracts.v1.schemas import (
    ConsumeBooleanEntitlementsData,
    EntitlementRecord,
    EntitlementsConsumptionRecord,
    EntitlementsSetRecord,
    GetEntitlementsData,
    GetExternalIdData,
)


def test_entitlements_set_record_reads_camel_case_and_ignores_typename(sample_entitlements_set_record):
    record = EntitlementsSetRecord.model_validate(sample_entitlements_set_record)

    assert record.created_at_epoch_ms == 1.0
    assert record.updated_at_epoch_ms == 2.0
    assert record.name == "entitlements-set-name"
    assert record.entitlements[0].value == 42


def test_entitlement_record_description_is_optional():
    record = EntitlementRecord.model_validate({"name": "e.name", "value": 1})
    assert record.description is None


def test_entitlement_record_rejects_negative_value():
    with pytest.raises(ValidationError):
        EntitlementRecord.model_validate({"name": "e.name", "value": -1})


def test_entitlements_set_record_requires_timestamps(sample_entitlements_set_record):
    del sample_entitlements_set_record["createdAtEpochMs"]

    with pytest.raises(ValidationError):
        EntitlementsSetRecord.model_validate(sample_entitlements_set_record)


@pytest.mark.parametrize("field", ["createdAtEpochMs", "updatedAtEpochMs", "version"])
@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_entitlements_set_record_rejects_non_finite_numbers(sample_entitlements_set_record, field, value):
    sample_entitlements_set_record[field] = value

    with pytest.raises(ValidationError):
        EntitlementsSetRecord.model_validate(sample_entitlements_set_record)


def test_consumption_record_allows_missing_consumer_and_timestamps():
    record = EntitlementsConsumptionRecord.model_validate(
        {
            "entitlements": {"version": 2.0, "entitlements": []},
            "consumption": [
                {"name": "e.name", "value": 3, "consumed": 1, "available": 2},
            ],
        }
    )

    consumption = record.consumption[0]
    assert consumption.consumer is None
    assert consumption.first_consumed_at_epoch_ms is None
    assert record.entitlements.entitlements_set_name is None


def test_get_entitlements_data_accepts_null_result():
    data = GetEntitlementsData.model_validate({"getEntitlements": None})
    assert data.get_entitlements is None


def test_scalar_data_models():
    assert GetExternalIdData.model_validate({"getExternalId": "ext-id"}).get_external_id == "ext-id"
    consumed = ConsumeBooleanEntitlementsData.model_validate({"consumeBooleanEntitlements": True})
    assert consumed.consume_boolean_entitlements is True


def test_records_are_frozen(sample_entitlements_set_record):
    record = EntitlementsSetRecord.model_validate(sample_entitlements_set_record)

    with pytest.raises(ValidationError):
        record.name = "other"
