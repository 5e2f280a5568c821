"""
Device Schema - Domain Service

Accessors and initializers for the nested property groups of a
``DeviceRecord``. Mandatory properties raise
``RequiredPropertyMissingError`` when absent; optional ones return ``None``.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from remote_monitoring.domain.entities.device import (
    DeviceProperties,
    DeviceRecord,
    DeviceState,
    HubProperties,
    SystemProperties,
)
from remote_monitoring.domain.entities.errors import (
    InvalidArgumentError,
    RequiredPropertyMissingError,
)
from remote_monitoring.domain.services import document_schema
logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _require_device(device: Optional[DeviceRecord]) -> DeviceRecord:
    if device is None:
        raise InvalidArgumentError("device")
    return device


def _is_zero_timestamp(value: datetime) -> bool:
    # Legacy records store an unset time as the minimum datetime.
    return value.replace(tzinfo=None) == datetime.min


def get_device_properties(device: DeviceRecord) -> DeviceProperties:
    """
    Get the device properties of a device.

    Raises:
        InvalidArgumentError: If ``device`` is None.
        RequiredPropertyMissingError: If the device has no properties.
    """
    props = _require_device(device).device_properties
    if props is None:
        raise RequiredPropertyMissingError("DeviceProperties")
    return props


def get_hub_properties(device: DeviceRecord) -> HubProperties:
    """
    Get the hub connection properties of a device.

    Raises:
        InvalidArgumentError: If ``device`` is None.
        RequiredPropertyMissingError: If the device has no hub properties.
    """
    props = _require_device(device).hub_properties
    if props is None:
        raise RequiredPropertyMissingError("IoTHubProperties")
    return props


def get_device_id(device: DeviceRecord) -> str:
    device_id = get_device_properties(device).device_id
    if device_id is None:
        raise RequiredPropertyMissingError("DeviceID")
    return device_id


def get_connection_device_id(device: DeviceRecord) -> str:
    connection_device_id = get_hub_properties(device).connection_device_id
    if connection_device_id is None:
        raise RequiredPropertyMissingError("ConnectionDeviceId")
    return connection_device_id


def get_created_time(device: DeviceRecord) -> datetime:
    """
    Get the creation time of a device.

    Raises:
        RequiredPropertyMissingError: If the time is unset or holds the
            zero timestamp.
    """
    created_time = get_device_properties(device).created_time
    if created_time is None or _is_zero_timestamp(created_time):
        raise RequiredPropertyMissingError("CreatedTime")
    return created_time


def get_updated_time(device: DeviceRecord) -> Optional[datetime]:
    # None means the device was never updated.
    return get_device_properties(device).updated_time


def touch_updated_time(device: DeviceRecord) -> None:
    """Set the updated time of the device to the current UTC time."""
    props = get_device_properties(device)
    props.updated_time = _utcnow()
    logger.debug(
        "device_schema.updated_time_touched",
        extra={
            "device_id": props.device_id,
            "updated_time": props.updated_time.isoformat(),
        },
    )


def get_hub_enabled_state(device: DeviceRecord) -> Optional[bool]:
    return get_device_properties(device).hub_enabled_state


def get_storage_resource_id(device: DeviceRecord) -> str:
    return document_schema.get_storage_resource_id(_require_device(device))


def get_storage_id(device: DeviceRecord) -> str:
    return document_schema.get_storage_id(_require_device(device))


def build_new_device(device_id: str, is_simulated: bool, iccid: str) -> DeviceRecord:
    """
    Build the record of a device that is being registered.

    Args:
        device_id: Identifier of the new device.
        is_simulated: Whether the device is driven by the simulator.
        iccid: SIM card identifier of the device.

    Returns:
        A record with fresh device and system properties and empty command
        lists.
    """
    device = DeviceRecord()

    initialize_device_properties(device, device_id, is_simulated)
    initialize_system_properties(device, iccid)

    device.commands = []
    device.command_history = []
    device.is_simulated_device = is_simulated

    logger.debug(
        "device_schema.device_built",
        extra={"device_id": device_id, "is_simulated": is_simulated},
    )
    return device


def initialize_device_properties(
    device: DeviceRecord, device_id: str, is_simulated: bool
) -> None:
    """Replace the device properties with a freshly created set."""
    _require_device(device).device_properties = DeviceProperties(
        device_id=device_id,
        hub_enabled_state=None,
        created_time=_utcnow(),
        updated_time=None,
        device_state=DeviceState.NORMAL.value,
    )
    logger.debug(
        "device_schema.device_properties_initialized",
        extra={"device_id": device_id, "is_simulated": is_simulated},
    )


def initialize_system_properties(device: DeviceRecord, iccid: str) -> None:
    _require_device(device).system_properties = SystemProperties(iccid=iccid)


def strip_system_properties_for_simulated_info_message(device: DeviceRecord) -> None:
    """
    Drop the system properties before a simulated device sends its info.

    Simulated devices are built with the same helpers as registered devices,
    but real devices never report system properties in their device info
    message.
    """
    _require_device(device).system_properties = None
