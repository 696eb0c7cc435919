"""Data models for launchi3."""

from .color import Color, parse_color, parse_hex
from .config import AppConfig
from .enums import ButtonSide, MountSide, WorkspaceOrder
from .grid import GridBuffer
from .layout import Layout, WindowNode, Workspace
from .location import GRID_SIZE, Button, Location, Pad

__all__ = [
    "AppConfig",
    # Models
    "Button",
    "Color",
    "GridBuffer",
    "Layout",
    "Location",
    "Pad",
    "WindowNode",
    "Workspace",
    # Enums
    "ButtonSide",
    "MountSide",
    "WorkspaceOrder",
    # Helpers
    "GRID_SIZE",
    "parse_color",
    "parse_hex",
]
