from __future__ import annotations

import pytest
from pydantic import ValidationError

from zonesync.adapters.routeros import StaticRecordPayload
from zonesync.domain.types import ManagedRecord, RecordKind


def test_missing_type_means_address_record() -> None:
    payload = StaticRecordPayload.model_validate(
        {".id": "*3", "name": "db.service.lan", "address": "10.0.2.1", "disabled": "true"}
    )

    assert payload.type is RecordKind.A
    assert payload.disabled is True
    assert payload.to_record().is_address_binding


def test_lowercase_type_is_accepted() -> None:
    payload = StaticRecordPayload.model_validate({".id": "*4", "name": "x", "type": "aaaa"})

    assert payload.type is RecordKind.AAAA


def test_unknown_type_is_rejected() -> None:
    with pytest.raises(ValidationError):
        StaticRecordPayload.model_validate({".id": "*5", "name": "x", "type": "LOC"})


def test_create_body_omits_id_and_unset_fields() -> None:
    record = ManagedRecord(id="*9", name="web.service.lan", address="10.0.0.1")

    body = StaticRecordPayload.from_record(record).create_body()

    assert body == {"name": "web.service.lan", "address": "10.0.0.1", "type": "A"}
