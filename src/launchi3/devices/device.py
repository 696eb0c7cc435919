"""Launchpad device composed from ports, input parser and output controller."""

import logging

from launchi3.exceptions import HardwareConnectError
from launchi3.midi import MidiPorts
from launchi3.models import Color, Location

from .config import DeviceConfig
from .input import GenericInput
from .protocols import DeviceEvent, DeviceOutput
from .registry import DeviceRegistry, get_registry

logger = logging.getLogger(__name__)


class LaunchpadDevice:
    """
    A connected Launchpad.

    Composes generic input parsing with device-specific output control,
    configured via DeviceConfig. Use :meth:`autodetect` to find and open
    the first supported device.
    """

    def __init__(
        self,
        config: DeviceConfig,
        ports: MidiPorts,
        input_handler: GenericInput,
        output_handler: DeviceOutput,
    ):
        """
        Args:
            config: Device configuration
            ports: Opened port pair
            input_handler: Parser for incoming messages
            output_handler: Device-specific output controller
        """
        self.config = config
        self._ports = ports
        self._input = input_handler
        self._output = output_handler

    @classmethod
    def autodetect(cls, registry: DeviceRegistry | None = None) -> "LaunchpadDevice":
        """
        Open the first supported Launchpad and put it in programmable mode.

        Raises:
            HardwareConnectError: If no supported device is present or its
                ports cannot be opened
        """
        registry = registry or get_registry()
        available = MidiPorts.list_ports()
        logger.debug(f"Available MIDI ports: {available}")

        found = registry.detect_ports(available["input"], available["output"])
        if found is None:
            raise HardwareConnectError("no supported Launchpad found")

        config, input_name, output_name = found
        ports = MidiPorts.open(input_name, output_name)
        try:
            input_handler, output_handler = registry.create_adapter(config, ports)
            output_handler.initialize()
        except Exception:
            ports.close()
            raise

        logger.info(f"Connected to {config.display_name}")
        return cls(config, ports, input_handler, output_handler)

    @property
    def display_name(self) -> str:
        """Get human-readable device name."""
        return self.config.display_name

    def poll(self) -> list[DeviceEvent]:
        """Return all pending pad and button events without blocking."""
        events = []
        for msg in self._ports.receive_pending():
            event = self._input.parse_message(msg)
            if event is not None:
                events.append(event)
            else:
                logger.debug(f"Ignoring MIDI message: {msg}")
        return events

    def light_multi_rgb(self, writes: list[tuple[Location, Color]]) -> None:
        """Push colors to the device in one message."""
        self._output.light_multi_rgb(writes)

    def close(self) -> None:
        """Blank the device, leave programmable mode and close the ports.

        A failing shutdown is logged so an earlier error on the same port
        stays the one that propagates.
        """
        try:
            self._output.shutdown()
        except Exception as e:
            logger.warning(f"Could not reset {self.display_name} on close: {e}")
        finally:
            self._ports.close()
            logger.info(f"Closed {self.display_name}")

    def __enter__(self) -> "LaunchpadDevice":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
