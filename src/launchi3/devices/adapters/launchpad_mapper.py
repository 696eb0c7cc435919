"""
Note/CC mapping shared by the Launchpad MK2 and MK3 families.

Hardware Layout
---------------

Both families number the grid the same way in the layouts we use
(session on the MK2, programmer mode on the MK3)::

    Top:   T0 T1 T2 T3 T4 T5 T6 T7          (CC, offset per model)
    y=0:   81 82 83 84 85 86 87 88   89     (R0)
    y=1:   71 72 73 74 75 76 77 78   79     (R1)
    ...
    y=7:   11 12 13 14 15 16 17 18   19     (R7)

``y`` counts from the top row, so the note for a pad is
``11 + x + 10 * (7 - y)``. The right strip is R0 = 89 down to R7 = 19.
The MK2 reports right strip presses as notes, the MK3 as CCs; the mapper
accepts both.
"""

from launchi3.devices.config import DeviceConfig
from launchi3.models import GRID_SIZE, Button, ButtonSide, Location, Pad

GRID_OFFSET = 11
ROW_SPACING = 10
RIGHT_COLUMN = 8
RIGHT_TOP_NOTE = 89


class LaunchpadMapper:
    """
    Base mapper between MIDI numbers and surface locations.

    Subclasses set TOP_ROW_OFFSET to the CC of the leftmost top button.
    """

    TOP_ROW_OFFSET: int = 0

    def __init__(self, config: DeviceConfig):
        """
        Args:
            config: Device configuration
        """
        self.config = config

    def note_to_location(self, note: int) -> Location | None:
        """
        Convert a MIDI note to a pad or right strip button.

        Returns:
            Location or None if the note is not on the surface
        """
        if note < GRID_OFFSET:
            return None

        row, col = divmod(note - GRID_OFFSET, ROW_SPACING)
        if row >= GRID_SIZE:
            return None

        if col < GRID_SIZE:
            return Pad(x=col, y=GRID_SIZE - 1 - row)
        if col == RIGHT_COLUMN:
            return Button(index=GRID_SIZE - 1 - row, side=ButtonSide.RIGHT)
        return None

    def control_to_location(self, control: int) -> Location | None:
        """
        Convert a CC number to a side button.

        Returns:
            Button or None if the CC is not a side button
        """
        if self.TOP_ROW_OFFSET <= control < self.TOP_ROW_OFFSET + GRID_SIZE:
            return Button(index=control - self.TOP_ROW_OFFSET, side=ButtonSide.TOP)

        location = self.note_to_location(control)
        if isinstance(location, Button):
            return location
        return None

    def location_to_led(self, location: Location) -> int:
        """Convert a location to the LED number used in SysEx messages."""
        if isinstance(location, Pad):
            return GRID_OFFSET + location.x + ROW_SPACING * (GRID_SIZE - 1 - location.y)
        if location.side == ButtonSide.TOP:
            return self.TOP_ROW_OFFSET + location.index
        return RIGHT_TOP_NOTE - ROW_SPACING * location.index
