"""Pytest fixtures for tests."""

import pytest

from launchi3.devices import DeviceConfig
from launchi3.models import AppConfig

from helpers import FakeGridDevice


@pytest.fixture
def config():
    """Default application configuration."""
    return AppConfig()


@pytest.fixture
def mk3_config():
    """Device configuration for a Launchpad Mini MK3."""
    return DeviceConfig(
        family="launchpad_mk3",
        model="Launchpad Mini MK3",
        manufacturer="Novation",
        implements="LaunchpadMK3",
        detection_patterns=["LPMiniMK3"],
        sysex_header=[0x00, 0x20, 0x29, 0x02, 0x0D],
    )


@pytest.fixture
def mk2_config():
    """Device configuration for a Launchpad MK2."""
    return DeviceConfig(
        family="launchpad_mk2",
        model="Launchpad MK2",
        manufacturer="Novation",
        implements="LaunchpadMK2",
        detection_patterns=["Launchpad MK2"],
        sysex_header=[0x00, 0x20, 0x29, 0x02, 0x18],
    )


@pytest.fixture
def fake_device():
    """Grid device that records writes."""
    return FakeGridDevice()
