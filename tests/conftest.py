from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict

import pytest

from remote_monitoring.domain.entities.device import (
    DeviceProperties,
    DeviceRecord,
    HubProperties,
    SystemProperties,
)


@pytest.fixture()
def created_at() -> datetime:
    return datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc)


@pytest.fixture()
def sample_device(created_at: datetime) -> DeviceRecord:
    return DeviceRecord(
        device_properties=DeviceProperties(
            device_id="SampleDevice001",
            hub_enabled_state=True,
            created_time=created_at,
            manufacturer="Contoso Inc.",
            firmware_version="1.10",
            latitude=47.659159,
            longitude=-122.141515,
        ),
        hub_properties=HubProperties(connection_device_id="SampleDevice001"),
        system_properties=SystemProperties(iccid="8901410427640001234"),
        commands=[{"Name": "PingDevice", "Parameters": []}],
        is_simulated_device=True,
        id="f3b3c0a2-0d4e-4c1b-9c1e-6b0f1b7d9a11",
        resource_id="Xc8uAK0gAQACAAAAAAAAAA==",
    )


@pytest.fixture()
def sample_document(created_at: datetime) -> Dict[str, Any]:
    return {
        "DeviceProperties": {
            "DeviceID": "SampleDevice001",
            "HubEnabledState": True,
            "CreatedTime": created_at.isoformat(),
            "UpdatedTime": None,
            "DeviceState": "normal",
            "Manufacturer": "Contoso Inc.",
            "Latitude": 47.659159,
            "Longitude": -122.141515,
            "AssetTag": "RM-0042",
        },
        "IoTHub": {
            "ConnectionDeviceId": "SampleDevice001",
            "ConnectionDeviceGenerationId": "635794291497640117",
        },
        "SystemProperties": {"ICCID": "8901410427640001234"},
        "Commands": [{"Name": "PingDevice", "Parameters": []}],
        "CommandHistory": [],
        "IsSimulatedDevice": True,
        "Version": "1.0",
        "ObjectType": "DeviceInfo",
        "id": "f3b3c0a2-0d4e-4c1b-9c1e-6b0f1b7d9a11",
        "_rid": "Xc8uAK0gAQACAAAAAAAAAA==",
    }
