"""Tests for MidiPorts with mocked mido."""

from unittest.mock import Mock, patch

import mido
import pytest

from launchi3.exceptions import HardwareConnectError, HardwareIOError
from launchi3.midi import MidiPorts


@pytest.fixture
def ports():
    input_port = Mock()
    input_port.name = "LPX MIDI In"
    output_port = Mock()
    output_port.name = "LPX MIDI Out"
    return MidiPorts(input_port, output_port)


class TestOpen:
    """Test opening port pairs."""

    def test_open(self):
        with patch("launchi3.midi.ports.mido") as mock_mido:
            ports = MidiPorts.open("in", "out")

        mock_mido.open_input.assert_called_once_with("in")
        mock_mido.open_output.assert_called_once_with("out")
        assert ports.input_name == mock_mido.open_input.return_value.name

    def test_input_failure(self):
        with patch("launchi3.midi.ports.mido") as mock_mido:
            mock_mido.open_input.side_effect = OSError("busy")

            with pytest.raises(HardwareConnectError) as exc_info:
                MidiPorts.open("in", "out")

        assert exc_info.value.port_name == "in"
        assert "busy" in exc_info.value.technical_message

    def test_output_failure_closes_input(self):
        with patch("launchi3.midi.ports.mido") as mock_mido:
            mock_mido.open_output.side_effect = OSError("busy")

            with pytest.raises(HardwareConnectError):
                MidiPorts.open("in", "out")

        mock_mido.open_input.return_value.close.assert_called_once()


class TestIO:
    """Test sending and polling."""

    def test_send(self, ports):
        msg = mido.Message("note_on", note=60)
        ports.send(msg)
        ports._output.send.assert_called_once_with(msg)

    def test_send_failure(self, ports):
        ports._output.send.side_effect = OSError("unplugged")

        with pytest.raises(HardwareIOError) as exc_info:
            ports.send(mido.Message("note_on", note=60))

        assert exc_info.value.operation == "send"
        assert exc_info.value.port_name == "LPX MIDI Out"

    def test_receive_pending(self, ports):
        messages = [mido.Message("note_on", note=60), mido.Message("note_off", note=60)]
        ports._input.iter_pending.return_value = iter(messages)

        assert ports.receive_pending() == messages

    def test_receive_failure(self, ports):
        ports._input.iter_pending.side_effect = OSError("unplugged")

        with pytest.raises(HardwareIOError):
            ports.receive_pending()

    def test_close_closes_both_even_on_error(self, ports):
        ports._input.close.side_effect = OSError("already closed")

        ports.close()

        ports._output.close.assert_called_once()

    def test_list_ports(self):
        with patch("launchi3.midi.ports.mido") as mock_mido:
            mock_mido.get_input_names.return_value = ["a"]
            mock_mido.get_output_names.return_value = ["b"]

            assert MidiPorts.list_ports() == {"input": ["a"], "output": ["b"]}
