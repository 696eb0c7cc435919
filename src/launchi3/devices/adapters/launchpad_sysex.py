"""Low-level SysEx message builder for Launchpad devices."""

import mido

# MK2 commands
MK2_LIGHT_RGB = 0x0B
MK2_LAYOUT_SELECT = 0x22
MK2_SESSION_LAYOUT = 0x00

# MK3 commands
MK3_LED_LIGHTING = 0x03
MK3_PROGRAMMER_MODE = 0x0E
MK3_RGB_LIGHTING_TYPE = 3


class LaunchpadSysEx:
    """Low-level SysEx message builder for Launchpad devices."""

    def __init__(self, header: list[int]):
        """
        Initialize with SysEx header.

        Args:
            header: Raw SysEx header bytes (excluding F0)
        """
        self.header = list(header)

    def _message(self, body: list[int]) -> mido.Message:
        return mido.Message("sysex", data=self.header + body)

    def layout_select(self, layout: int) -> mido.Message:
        """Build MK2 layout select message (0x00 = session)."""
        return self._message([MK2_LAYOUT_SELECT, layout])

    def light_rgb(self, specs: list[tuple[int, int, int, int]]) -> mido.Message:
        """
        Build MK2 RGB lighting message.

        Args:
            specs: List of (led, r, g, b) with 6-bit channels
        """
        data = [MK2_LIGHT_RGB]
        for spec in specs:
            data.extend(spec)
        return self._message(data)

    def programmer_mode(self, enable: bool) -> mido.Message:
        """Build MK3 programmer mode toggle message."""
        return self._message([MK3_PROGRAMMER_MODE, 0x01 if enable else 0x00])

    def led_lighting(self, specs: list[tuple[int, int, int, int]]) -> mido.Message:
        """
        Build MK3 LED lighting message using the RGB lighting type.

        Args:
            specs: List of (led, r, g, b) with 7-bit channels
        """
        data = [MK3_LED_LIGHTING]
        for led, r, g, b in specs:
            data.extend((MK3_RGB_LIGHTING_TYPE, led, r, g, b))
        return self._message(data)
