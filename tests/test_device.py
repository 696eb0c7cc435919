"""Tests for LaunchpadDevice with mocked MIDI ports."""

import logging
from unittest.mock import Mock, patch

import mido
import pytest

from launchi3.devices import LaunchpadDevice, PressEvent
from launchi3.exceptions import HardwareConnectError, HardwareIOError
from launchi3.models import Color, Pad

MINI_MK3_PORT = "Launchpad Mini MK3:Launchpad Mini MK3 LPMiniMK3 MI 20:1"


@pytest.fixture
def mock_ports_class():
    with patch("launchi3.devices.device.MidiPorts") as ports_class:
        ports_class.list_ports.return_value = {
            "input": [MINI_MK3_PORT],
            "output": [MINI_MK3_PORT],
        }
        ports_class.open.return_value = Mock()
        yield ports_class


@pytest.fixture
def device(mock_ports_class):
    return LaunchpadDevice.autodetect()


class TestAutodetect:
    """Test device discovery."""

    def test_opens_detected_ports(self, device, mock_ports_class):
        mock_ports_class.open.assert_called_once_with(MINI_MK3_PORT, MINI_MK3_PORT)
        assert device.display_name == "Novation Launchpad Mini MK3"

    def test_enters_programmer_mode(self, device, mock_ports_class):
        ports = mock_ports_class.open.return_value
        msg = ports.send.call_args[0][0]
        assert list(msg.data) == [0x00, 0x20, 0x29, 0x02, 0x0D, 0x0E, 0x01]

    def test_no_device(self, mock_ports_class):
        mock_ports_class.list_ports.return_value = {"input": ["Midi Through"], "output": ["Midi Through"]}

        with pytest.raises(HardwareConnectError):
            LaunchpadDevice.autodetect()

        mock_ports_class.open.assert_not_called()

    def test_ports_closed_when_initialization_fails(self, mock_ports_class):
        ports = mock_ports_class.open.return_value
        ports.send.side_effect = RuntimeError("unplugged")

        with pytest.raises(RuntimeError):
            LaunchpadDevice.autodetect()

        ports.close.assert_called_once()


class TestLaunchpadDevice:
    """Test polling, lighting and closing."""

    def test_poll_parses_pending_messages(self, device, mock_ports_class):
        ports = mock_ports_class.open.return_value
        ports.receive_pending.return_value = [
            mido.Message("note_on", note=81, velocity=127),
            mido.Message("clock"),
        ]

        assert device.poll() == [PressEvent(Pad(x=0, y=0))]

    def test_poll_empty(self, device, mock_ports_class):
        mock_ports_class.open.return_value.receive_pending.return_value = []
        assert device.poll() == []

    def test_light_multi_rgb_sends_one_message(self, device, mock_ports_class):
        ports = mock_ports_class.open.return_value
        ports.send.reset_mock()

        device.light_multi_rgb([(Pad(x=0, y=0), Color(r=255, g=0, b=0))])

        assert ports.send.call_count == 1

    def test_close_leaves_programmer_mode_and_closes_ports(self, device, mock_ports_class):
        ports = mock_ports_class.open.return_value
        ports.send.reset_mock()

        device.close()

        last = ports.send.call_args_list[-1][0][0]
        assert list(last.data)[-2:] == [0x0E, 0x00]
        ports.close.assert_called_once()

    def test_context_manager_closes(self, device, mock_ports_class):
        with device:
            pass

        mock_ports_class.open.return_value.close.assert_called_once()

    def test_close_survives_failed_shutdown(self, device, mock_ports_class, caplog):
        ports = mock_ports_class.open.return_value
        ports.send.side_effect = HardwareIOError("send", MINI_MK3_PORT, "unplugged")

        with caplog.at_level(logging.WARNING):
            device.close()

        ports.close.assert_called_once()
        assert "Could not reset" in caplog.text

    def test_context_manager_keeps_original_error(self, device, mock_ports_class):
        ports = mock_ports_class.open.return_value
        ports.send.side_effect = [
            HardwareIOError("send", MINI_MK3_PORT, "unplugged"),
            RuntimeError("port closed"),
            RuntimeError("port closed"),
        ]

        with pytest.raises(HardwareIOError) as exc_info:
            with device:
                device.light_multi_rgb([(Pad(x=0, y=0), Color(r=255, g=0, b=0))])

        assert exc_info.value.original_error == "unplugged"
        ports.close.assert_called_once()
