"""
Domain Entities - Device

This module defines the device record stored by the remote monitoring
solution and its nested property groups. Every group keeps the keys it does
not model in ``extra`` so records written by other producers survive a
read/write cycle unchanged.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional


class DeviceState(str, Enum):
    """Operational state reported for a device."""

    NORMAL = "normal"
    CRITICAL = "critical"
    FAULTED = "faulted"


@dataclass
class DeviceProperties:
    """Descriptive and lifecycle properties of a device."""

    device_id: Optional[str] = None
    hub_enabled_state: Optional[bool] = None
    created_time: Optional[datetime] = None
    updated_time: Optional[datetime] = None
    device_state: str = DeviceState.NORMAL.value

    manufacturer: Optional[str] = None
    model_number: Optional[str] = None
    serial_number: Optional[str] = None
    firmware_version: Optional[str] = None
    platform: Optional[str] = None
    processor: Optional[str] = None
    installed_ram: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass
class HubProperties:
    """Connection metadata of the device on the messaging hub."""

    connection_device_id: Optional[str] = None
    connection_state: Optional[str] = None
    connection_state_updated_time: Optional[datetime] = None
    status: Optional[str] = None
    status_updated_time: Optional[datetime] = None
    etag: Optional[str] = None

    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass
class SystemProperties:
    """System level metadata such as the SIM card identifier."""

    iccid: Optional[str] = None

    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass
class DeviceRecord:
    """A managed device with its nested property groups.

    ``id`` and ``resource_id`` are assigned by the document store and are
    left untouched by the schema helpers.
    """

    device_properties: Optional[DeviceProperties] = None
    hub_properties: Optional[HubProperties] = None
    system_properties: Optional[SystemProperties] = None
    commands: List[Dict[str, Any]] = field(default_factory=list)
    command_history: List[Dict[str, Any]] = field(default_factory=list)
    is_simulated_device: bool = False

    id: Optional[str] = None
    resource_id: Optional[str] = None

    extra: Dict[str, Any] = field(default_factory=dict)
