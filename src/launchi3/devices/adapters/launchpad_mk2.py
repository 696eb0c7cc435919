"""
Launchpad MK2 implementation.

The MK2 is driven in session layout, where the grid uses the same note
numbering as MK3 programmer mode. Top buttons are CC 104-111 and colors
are 6 bits per channel.
"""

import logging

from launchi3.devices.config import DeviceConfig
from launchi3.devices.protocols import MidiSender
from launchi3.models import Color, GridBuffer, Location

from .launchpad_mapper import LaunchpadMapper
from .launchpad_sysex import MK2_SESSION_LAYOUT, LaunchpadSysEx

logger = logging.getLogger(__name__)


class LaunchpadMK2Mapper(LaunchpadMapper):
    """Note mapper for the Launchpad MK2."""

    TOP_ROW_OFFSET = 104


class LaunchpadMK2Output:
    """Output controller for the Launchpad MK2."""

    def __init__(self, sender: MidiSender, config: DeviceConfig):
        """
        Args:
            sender: Port pair used to send messages
            config: Device configuration with SysEx header
        """
        self.midi = sender
        self.config = config
        self.mapper = LaunchpadMK2Mapper(config)
        self.sysex = LaunchpadSysEx(config.sysex_header)

    def initialize(self) -> None:
        """Select session layout."""
        self.midi.send(self.sysex.layout_select(MK2_SESSION_LAYOUT))
        logger.info(f"Selected session layout ({self.config.model})")

    def shutdown(self) -> None:
        """Clear all LEDs."""
        self.light_multi_rgb(GridBuffer().to_write_list())
        logger.info(f"Cleared LEDs ({self.config.model})")

    def light_multi_rgb(self, writes: list[tuple[Location, Color]]) -> None:
        """Set many LEDs in one SysEx message."""
        specs = [
            (self.mapper.location_to_led(location), *color.to_6bit())
            for location, color in writes
        ]
        self.midi.send(self.sysex.light_rgb(specs))
