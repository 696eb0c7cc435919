"""
Generic MIDI input parsing for all devices.

Input Flow: Button Press → Event
================================

::

    Hardware Button Press
          ↓
    [MIDI Message: note_on 81, velocity 100]
          ↓
    ┌──────────────────────────────────────┐
    │      GenericInput                    │
    │                                      │
    │  parse_message(msg):                 │
    │    if msg.type == 'note_on':         │
    │      loc = mapper.note_to_location() │
    │      return PressEvent(loc)          │
    └────────────┬─────────────────────────┘
                 │ Uses mapper
                 ↓
    ┌──────────────────────────────────────┐
    │   LaunchpadMapper                    │
    │                                      │
    │  note 81 → row 7 from the bottom     │
    │          → Pad(x=0, y=0) (top-left)  │
    └──────────────────────────────────────┘
          ↓
    [PressEvent(Pad(x=0, y=0))]

Side buttons arrive either as notes (MK2 right strip) or as control
changes (top strips, MK3 right strip); the mapper resolves both. A value
or velocity of 0 is a release.
"""

import mido

from .protocols import DeviceEvent, LocationMapper, PressEvent, ReleaseEvent


class GenericInput:
    """
    Generic MIDI input parser.

    Handles note_on, note_off and control_change and delegates
    hardware-specific numbering to a device mapper.
    """

    def __init__(self, mapper: LocationMapper):
        """
        Args:
            mapper: Device-specific mapper from MIDI numbers to locations
        """
        self.mapper = mapper

    def parse_message(self, msg: mido.Message) -> DeviceEvent | None:
        """
        Parse incoming MIDI message into a device event.

        Args:
            msg: MIDI message

        Returns:
            PressEvent/ReleaseEvent, or None if the message is not a
            pad or button of the device
        """
        if msg.type in ("note_on", "note_off"):
            location = self.mapper.note_to_location(msg.note)
            if location is None:
                return None

            # Note on with velocity 0 is actually note off
            if msg.type == "note_on" and msg.velocity > 0:
                return PressEvent(location)
            return ReleaseEvent(location)

        if msg.type == "control_change":
            location = self.mapper.control_to_location(msg.control)
            if location is None:
                return None

            if msg.value > 0:
                return PressEvent(location)
            return ReleaseEvent(location)

        return None
