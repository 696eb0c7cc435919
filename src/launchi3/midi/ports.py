"""Synchronous MIDI port pair used by the control loop."""

import logging

import mido

from launchi3.exceptions import HardwareConnectError, HardwareIOError

logger = logging.getLogger(__name__)


class MidiPorts:
    """
    An opened input/output port pair for one device.

    Unlike a callback-driven input, messages are pulled with
    :meth:`receive_pending`, which never blocks. All mido failures are
    re-raised as launchi3 hardware errors.
    """

    def __init__(self, input_port: mido.ports.BaseInput, output_port: mido.ports.BaseOutput):
        """
        Args:
            input_port: Opened MIDI input port
            output_port: Opened MIDI output port
        """
        self._input = input_port
        self._output = output_port

    @classmethod
    def open(cls, input_name: str, output_name: str) -> "MidiPorts":
        """
        Open both ports.

        Raises:
            HardwareConnectError: If either port cannot be opened
        """
        try:
            input_port = mido.open_input(input_name)
        except Exception as e:
            raise HardwareConnectError("cannot open input port", input_name, str(e)) from e

        try:
            output_port = mido.open_output(output_name)
        except Exception as e:
            input_port.close()
            raise HardwareConnectError("cannot open output port", output_name, str(e)) from e

        logger.info(f"Opened MIDI input {input_name!r} and output {output_name!r}")
        return cls(input_port, output_port)

    @property
    def input_name(self) -> str:
        """Name of the input port."""
        return self._input.name

    @property
    def output_name(self) -> str:
        """Name of the output port."""
        return self._output.name

    def send(self, message: mido.Message) -> None:
        """
        Send a message to the device.

        Raises:
            HardwareIOError: If the backend fails to send
        """
        try:
            self._output.send(message)
        except Exception as e:
            raise HardwareIOError("send", self.output_name, str(e)) from e

    def receive_pending(self) -> list[mido.Message]:
        """
        Drain every message queued on the input port.

        Returns:
            Zero or more messages, oldest first

        Raises:
            HardwareIOError: If the backend fails to read
        """
        try:
            return list(self._input.iter_pending())
        except Exception as e:
            raise HardwareIOError("poll", self.input_name, str(e)) from e

    def close(self) -> None:
        """Close both ports."""
        for port in (self._input, self._output):
            try:
                port.close()
            except Exception as e:
                logger.error(f"Error closing MIDI port {port.name}: {e}")

    @staticmethod
    def list_ports() -> dict[str, list[str]]:
        """
        List all available MIDI ports.

        Returns:
            Dictionary with 'input' and 'output' lists of port names
        """
        return {
            "input": mido.get_input_names(),
            "output": mido.get_output_names(),
        }
