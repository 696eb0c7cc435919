"""
Launchpad MK3 family implementation (Pro, Mini, X).

Mapper
------

All MK3 models share the programmer mode layout: grid notes 11-88 with
row spacing 10, right strip CC 19-89 and top strip CC 91-98.

Output
------

Lighting uses the RGB lighting type with 7-bit channels::

    light_multi_rgb([(Pad(x=0, y=0), Color(255, 0, 0))])
                                ↓
    LED 81, (127, 0, 0)
                                ↓
    [0xF0, 0, 32, 41, 2, 13, 0x03, 3, 81, 127, 0, 0, 0xF7]
"""

import logging

from launchi3.devices.config import DeviceConfig
from launchi3.devices.protocols import MidiSender
from launchi3.models import Color, GridBuffer, Location

from .launchpad_mapper import LaunchpadMapper
from .launchpad_sysex import LaunchpadSysEx

logger = logging.getLogger(__name__)


class LaunchpadMK3Mapper(LaunchpadMapper):
    """Note mapper for Launchpad MK3 family devices."""

    TOP_ROW_OFFSET = 91


class LaunchpadMK3Output:
    """
    Output controller for Launchpad MK3 family.

    Handles LED control and programmer mode for
    Launchpad Pro MK3, Mini MK3, and X models.
    """

    def __init__(self, sender: MidiSender, config: DeviceConfig):
        """
        Args:
            sender: Port pair used to send messages
            config: Device configuration with SysEx header
        """
        self.midi = sender
        self.config = config
        self.mapper = LaunchpadMK3Mapper(config)
        self.sysex = LaunchpadSysEx(config.sysex_header)
        self._initialized = False

    def initialize(self) -> None:
        """Enter programmer mode."""
        if self._initialized:
            logger.warning(f"{self.config.model} already initialized")
            return

        self.midi.send(self.sysex.programmer_mode(enable=True))
        logger.info(f"Entered programmer mode ({self.config.model})")
        self._initialized = True

    def shutdown(self) -> None:
        """Clear LEDs and exit programmer mode."""
        if not self._initialized:
            return

        self.light_multi_rgb(GridBuffer().to_write_list())
        self.midi.send(self.sysex.programmer_mode(enable=False))
        logger.info("Exited programmer mode")
        self._initialized = False

    def light_multi_rgb(self, writes: list[tuple[Location, Color]]) -> None:
        """Set many LEDs in one SysEx message."""
        specs = [
            (self.mapper.location_to_led(location), *color.to_7bit())
            for location, color in writes
        ]
        self.midi.send(self.sysex.led_lighting(specs))
