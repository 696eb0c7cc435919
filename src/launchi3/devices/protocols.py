"""Generic device protocols and abstractions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    import mido

    from launchi3.models import Color, Location


class DeviceEvent:
    """Generic device event (input from hardware)."""

    def __init__(self, location: Location):
        self.location = location

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.location == other.location

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.location!r})"


class PressEvent(DeviceEvent):
    """Pad or side button was pressed."""
    pass


class ReleaseEvent(DeviceEvent):
    """Pad or side button was released."""
    pass


class LocationMapper(Protocol):
    """Protocol for device-specific note/CC mapping."""

    def note_to_location(self, note: int) -> Location | None:
        """Convert a hardware MIDI note to a location."""
        ...

    def control_to_location(self, control: int) -> Location | None:
        """Convert a hardware CC number to a location."""
        ...

    def location_to_led(self, location: Location) -> int:
        """Convert a location to the LED index used in SysEx lighting messages."""
        ...


class DeviceOutput(Protocol):
    """Protocol for device output/display control."""

    def initialize(self) -> None:
        """Put the device in the mode the mapper expects."""
        ...

    def shutdown(self) -> None:
        """Return the device to its standalone mode."""
        ...

    def light_multi_rgb(self, writes: list[tuple[Location, Color]]) -> None:
        """
        Set many LEDs in one SysEx message.

        Args:
            writes: (location, color) pairs; colors are 8-bit and converted
                    to the device's color depth
        """
        ...


class MidiSender(Protocol):
    """Anything that can push a MIDI message to the device."""

    def send(self, message: mido.Message) -> None:
        ...


class GridDevice(Protocol):
    """Capability interface the control loop drives.

    Implemented by LaunchpadDevice; tests substitute a fake.
    """

    def poll(self) -> list[DeviceEvent]:
        """Return all pending input events without blocking."""
        ...

    def light_multi_rgb(self, writes: list[tuple[Location, Color]]) -> None:
        """Push colors to the device."""
        ...

    def close(self) -> None:
        """Release the device."""
        ...
