"""launchi3: i3 workspaces and windows on a Novation Launchpad."""

__version__ = "0.1.0"

# Control loop
from .core import ControlLoop

# Device
from .devices import LaunchpadDevice

__all__ = [
    "ControlLoop",
    "LaunchpadDevice",
]
