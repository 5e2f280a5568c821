from __future__ import annotations

from types import SimpleNamespace

import pytest

from remote_monitoring.domain.entities.device import DeviceRecord
from remote_monitoring.domain.entities.errors import InvalidArgumentError
from remote_monitoring.domain.services.document_schema import (
    get_document_value,
    get_storage_id,
    get_storage_resource_id,
)


def test_reads_raw_documents() -> None:
    document = {"id": "abc", "_rid": "rid=="}
    assert get_storage_id(document) == "abc"
    assert get_storage_resource_id(document) == "rid=="


def test_missing_or_null_values_return_empty_string() -> None:
    assert get_storage_id({}) == ""
    assert get_storage_resource_id({"_rid": None}) == ""
    assert get_storage_id(DeviceRecord()) == ""


def test_reads_entity_attributes() -> None:
    device = DeviceRecord(id="abc", resource_id="rid==")
    assert get_storage_id(device) == "abc"
    assert get_storage_resource_id(device) == "rid=="


def test_falls_back_to_extra_mapping() -> None:
    record = SimpleNamespace(extra={"_rid": "rid==", "id": 42})
    assert get_storage_resource_id(record) == "rid=="
    assert get_storage_id(record) == "42"


def test_objects_without_ids_return_empty_string() -> None:
    assert get_storage_id(object()) == ""


def test_none_record_is_rejected() -> None:
    with pytest.raises(InvalidArgumentError) as exc_info:
        get_document_value(None, "id")
    assert exc_info.value.argument == "record"
