"""
Device Document Mapping - Infrastructure Layer

Converts ``DeviceRecord`` entities to and from the documents kept by the
document store. Keys that the entities do not model are carried in their
``extra`` mapping and written back unchanged.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional, Tuple, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from remote_monitoring.domain.entities.device import (
    DeviceProperties,
    DeviceRecord,
    DeviceState,
    HubProperties,
    SystemProperties,
)
from remote_monitoring.domain.entities.errors import InvalidArgumentError
from remote_monitoring.domain.services.document_schema import (
    STORAGE_ID_KEY,
    STORAGE_RESOURCE_ID_KEY,
)
logger = logging.getLogger(__name__)

T = TypeVar("T", DeviceProperties, HubProperties, SystemProperties)

_DATETIME_ADAPTER = TypeAdapter(datetime)

DEVICE_PROPERTIES_KEY = "DeviceProperties"
HUB_PROPERTIES_KEY = "IoTHub"
SYSTEM_PROPERTIES_KEY = "SystemProperties"
COMMANDS_KEY = "Commands"
COMMAND_HISTORY_KEY = "CommandHistory"
IS_SIMULATED_KEY = "IsSimulatedDevice"

# (attribute, document key) pairs; timestamp attributes are listed separately.
_DEVICE_PROPERTY_KEYS: Tuple[Tuple[str, str], ...] = (
    ("device_id", "DeviceID"),
    ("hub_enabled_state", "HubEnabledState"),
    ("created_time", "CreatedTime"),
    ("updated_time", "UpdatedTime"),
    ("device_state", "DeviceState"),
    ("manufacturer", "Manufacturer"),
    ("model_number", "ModelNumber"),
    ("serial_number", "SerialNumber"),
    ("firmware_version", "FirmwareVersion"),
    ("platform", "Platform"),
    ("processor", "Processor"),
    ("installed_ram", "InstalledRAM"),
    ("latitude", "Latitude"),
    ("longitude", "Longitude"),
)

_HUB_PROPERTY_KEYS: Tuple[Tuple[str, str], ...] = (
    ("connection_device_id", "ConnectionDeviceId"),
    ("connection_state", "ConnectionState"),
    ("connection_state_updated_time", "ConnectionStateUpdatedTime"),
    ("status", "Status"),
    ("status_updated_time", "StatusUpdatedTime"),
    ("etag", "ETag"),
)

_SYSTEM_PROPERTY_KEYS: Tuple[Tuple[str, str], ...] = (("iccid", "ICCID"),)

_TIMESTAMP_ATTRIBUTES = frozenset(
    {
        "created_time",
        "updated_time",
        "connection_state_updated_time",
        "status_updated_time",
    }
)

_RECORD_KEYS = frozenset(
    {
        DEVICE_PROPERTIES_KEY,
        HUB_PROPERTIES_KEY,
        SYSTEM_PROPERTIES_KEY,
        COMMANDS_KEY,
        COMMAND_HISTORY_KEY,
        IS_SIMULATED_KEY,
        STORAGE_ID_KEY,
        STORAGE_RESOURCE_ID_KEY,
    }
)


def _format_timestamp(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if not isinstance(value, (str, datetime)):
        logger.warning(
            "device_document.invalid_timestamp", extra={"value": repr(value)}
        )
        return None
    try:
        # Json.NET writes seven fractional digits, e.g. 2016-01-20T19:09:09.1234567Z
        parsed = _DATETIME_ADAPTER.validate_python(value)
    except ValidationError:
        logger.warning("device_document.invalid_timestamp", extra={"value": value})
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _parse_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is not None:
        logger.warning("device_document.invalid_flag", extra={"value": repr(value)})
    return False


def _group_to_document(
    group: Any, keys: Tuple[Tuple[str, str], ...]
) -> Optional[Dict[str, Any]]:
    if group is None:
        return None
    document: Dict[str, Any] = dict(group.extra)
    for attribute, key in keys:
        value = getattr(group, attribute)
        if attribute in _TIMESTAMP_ATTRIBUTES:
            value = _format_timestamp(value)
        document[key] = value
    return document


def _group_to_entity(
    payload: Any, keys: Tuple[Tuple[str, str], ...], group_type: Type[T]
) -> Optional[T]:
    if payload is None:
        return None
    if not isinstance(payload, Mapping):
        logger.warning(
            "device_document.invalid_group",
            extra={
                "group": group_type.__name__,
                "payload_type": type(payload).__name__,
            },
        )
        return None

    known = {key for _, key in keys}
    values: Dict[str, Any] = {}
    for attribute, key in keys:
        if key not in payload:
            continue
        value = payload[key]
        if attribute in _TIMESTAMP_ATTRIBUTES:
            value = _parse_timestamp(value)
        values[attribute] = value

    group = group_type(**values)
    group.extra = {key: value for key, value in payload.items() if key not in known}
    return group


def device_to_document(device: DeviceRecord) -> Dict[str, Any]:
    """
    Convert a device record to a document-store document.

    Args:
        device: The device record to convert.

    Returns:
        The document, including any keys preserved in ``extra``.
    """
    if device is None:
        raise InvalidArgumentError("device")

    document: Dict[str, Any] = dict(device.extra)
    document.update(
        {
            DEVICE_PROPERTIES_KEY: _group_to_document(
                device.device_properties, _DEVICE_PROPERTY_KEYS
            ),
            HUB_PROPERTIES_KEY: _group_to_document(
                device.hub_properties, _HUB_PROPERTY_KEYS
            ),
            SYSTEM_PROPERTIES_KEY: _group_to_document(
                device.system_properties, _SYSTEM_PROPERTY_KEYS
            ),
            COMMANDS_KEY: [dict(command) for command in device.commands],
            COMMAND_HISTORY_KEY: [dict(entry) for entry in device.command_history],
            IS_SIMULATED_KEY: device.is_simulated_device,
        }
    )
    if device.id is not None:
        document[STORAGE_ID_KEY] = device.id
    if device.resource_id is not None:
        document[STORAGE_RESOURCE_ID_KEY] = device.resource_id
    return document


def device_from_document(document: Mapping[str, Any]) -> DeviceRecord:
    """
    Convert a document-store document to a device record.

    Missing groups become ``None``; a missing ``DeviceState`` falls back to
    ``"normal"``.

    Raises:
        InvalidArgumentError: If ``document`` is not a mapping.
    """
    if not isinstance(document, Mapping):
        raise InvalidArgumentError("document", {"type": type(document).__name__})

    device_properties = _group_to_entity(
        document.get(DEVICE_PROPERTIES_KEY), _DEVICE_PROPERTY_KEYS, DeviceProperties
    )
    if device_properties is not None and device_properties.device_state is None:
        device_properties.device_state = DeviceState.NORMAL.value

    storage_id = document.get(STORAGE_ID_KEY)
    resource_id = document.get(STORAGE_RESOURCE_ID_KEY)

    return DeviceRecord(
        device_properties=device_properties,
        hub_properties=_group_to_entity(
            document.get(HUB_PROPERTIES_KEY), _HUB_PROPERTY_KEYS, HubProperties
        ),
        system_properties=_group_to_entity(
            document.get(SYSTEM_PROPERTIES_KEY),
            _SYSTEM_PROPERTY_KEYS,
            SystemProperties,
        ),
        commands=list(document.get(COMMANDS_KEY) or []),
        command_history=list(document.get(COMMAND_HISTORY_KEY) or []),
        is_simulated_device=_parse_flag(document.get(IS_SIMULATED_KEY)),
        id=str(storage_id) if storage_id is not None else None,
        resource_id=str(resource_id) if resource_id is not None else None,
        extra={
            key: value for key, value in document.items() if key not in _RECORD_KEYS
        },
    )
