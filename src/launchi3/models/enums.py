"""Enumerations for launchi3."""

from enum import Enum


class MountSide(str, Enum):
    """Physical edge the Launchpad is mounted against."""

    BOTTOM = "bottom"  # Identity mount
    TOP = "top"  # Rotated 180 degrees
    LEFT = "left"  # Rotated 90 degrees
    RIGHT = "right"  # Rotated 90 degrees the other way


class ButtonSide(str, Enum):
    """Strip of auxiliary buttons around the grid."""

    TOP = "top"
    RIGHT = "right"


class WorkspaceOrder(str, Enum):
    """How workspaces are assigned to grid columns."""

    MANAGER = "manager"  # Order reported by i3 (get_workspaces)
    NAME = "name"  # Lexicographic by workspace name
