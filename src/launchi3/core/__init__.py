"""Core logic: layout extraction, rendering and the control loop."""

from .colors import resolve
from .control_loop import ControlLoop, render, route_press, should_push
from .layout import arrange, extract, is_window, is_workspace
from .rotation import rotate, unrotate

__all__ = [
    "ControlLoop",
    "arrange",
    "extract",
    "is_window",
    "is_workspace",
    "render",
    "resolve",
    "rotate",
    "route_press",
    "should_push",
    "unrotate",
]
