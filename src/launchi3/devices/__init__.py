"""Launchpad device support."""

from .config import DeviceConfig
from .device import LaunchpadDevice
from .input import GenericInput
from .protocols import (
    DeviceEvent,
    DeviceOutput,
    GridDevice,
    LocationMapper,
    MidiSender,
    PressEvent,
    ReleaseEvent,
)
from .registry import DeviceRegistry, get_registry

__all__ = [
    "DeviceConfig",
    "DeviceEvent",
    "DeviceOutput",
    "DeviceRegistry",
    "GenericInput",
    "GridDevice",
    "LaunchpadDevice",
    "LocationMapper",
    "MidiSender",
    "PressEvent",
    "ReleaseEvent",
    "get_registry",
]
