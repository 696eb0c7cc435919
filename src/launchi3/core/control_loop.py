"""
Polling loop that mirrors i3 onto the Launchpad and routes pad presses.

Each iteration::

    device.poll() ──► route_press() ──► manager.run_command()
                                             │
    manager.get_tree() ◄─────────────────────┘
          │
          ▼
    extract() + arrange() ──► render() ──► should_push()? ──► device.light_multi_rgb()

Nothing here is retried: a failing query, command or MIDI write propagates
out of :meth:`ControlLoop.run`.
"""

import logging
import time
from typing import Optional

from launchi3.devices import GridDevice, PressEvent
from launchi3.models import GRID_SIZE, AppConfig, GridBuffer, Layout, Location, MountSide, Pad
from launchi3.wm import WindowManager, focus_command, workspace_command

from .colors import resolve
from .layout import arrange, extract
from .rotation import rotate, unrotate

logger = logging.getLogger(__name__)


def render(layout: Layout, config: AppConfig) -> GridBuffer:
    """
    Draw the first 8 workspaces and their first 8 windows.

    Workspace slot is the logical x, window slot the logical y; both are
    rotated for the mounting side. Everything else stays black.
    """
    buffer = GridBuffer()
    for x, workspace in enumerate(layout[:GRID_SIZE]):
        for y, window in enumerate(workspace.windows[:GRID_SIZE]):
            px, py = rotate((x, y), config.mount_side)
            buffer.set(Pad(x=px, y=py), resolve(window.window_class, config))
    return buffer


def should_push(new: GridBuffer, last: Optional[GridBuffer]) -> bool:
    """Check whether the hardware needs a refresh."""
    return last is None or new != last


def route_press(layout: Layout, location: Location, side: MountSide) -> Optional[str]:
    """
    Translate a press into an i3 command.

    Returns:
        Focus command for a window cell, workspace command for an empty
        cell of a shown workspace, None for side buttons and unused columns
    """
    if not isinstance(location, Pad):
        return None

    workspace_slot, window_slot = unrotate(location.coords, side)
    if workspace_slot >= min(len(layout), GRID_SIZE):
        return None

    workspace = layout[workspace_slot]
    window = workspace.window_at(window_slot)
    if window is not None:
        return focus_command(window.id)
    return workspace_command(workspace.name)


class ControlLoop:
    """
    Single-threaded loop between one window manager and one grid device.

    The last pushed buffer is passed explicitly through :meth:`step` so
    each iteration is testable on its own.
    """

    def __init__(self, manager: WindowManager, device: GridDevice, config: AppConfig):
        """
        Args:
            manager: Window-manager connection
            device: Connected grid device
            config: Application configuration
        """
        self.manager = manager
        self.device = device
        self.config = config

    def derive_layout(self) -> Layout:
        """Query i3 and build the ordered layout."""
        tree = self.manager.get_tree()
        workspaces = self.manager.get_workspaces()
        return arrange(extract(tree), workspaces, self.config.workspace_order)

    def handle_events(self) -> None:
        """Drain pending device events and run the commands they map to."""
        presses = [
            event.location
            for event in self.device.poll()
            if isinstance(event, PressEvent) and isinstance(event.location, Pad)
        ]
        if not presses:
            return

        layout = self.derive_layout()
        for location in presses:
            command = route_press(layout, location, self.config.mount_side)
            if command is None:
                logger.debug(f"No action for press at {location.coords}")
                continue
            logger.info(f"Press at {location.coords}: {command}")
            self.manager.run_command(command)

    def step(self, last: Optional[GridBuffer]) -> Optional[GridBuffer]:
        """
        Run one input phase and one render phase.

        Args:
            last: Buffer most recently pushed to the device, or None

        Returns:
            The buffer now shown on the device
        """
        self.handle_events()

        buffer = render(self.derive_layout(), self.config)
        if not should_push(buffer, last):
            return last

        logger.debug("Layout changed, refreshing LEDs")
        self.device.light_multi_rgb(buffer.to_write_list())
        return buffer

    def run(self) -> None:
        """
        Loop until interrupted or until an error propagates.

        The device is blanked on the way out when it is still reachable.
        """
        interval = self.config.poll_interval_ms / 1000
        last: Optional[GridBuffer] = None
        logger.info(f"Control loop started (poll interval {self.config.poll_interval_ms} ms)")

        try:
            while True:
                last = self.step(last)
                time.sleep(interval)
        finally:
            self.blank()

    def blank(self) -> None:
        """Turn every LED off."""
        try:
            self.device.light_multi_rgb(GridBuffer().to_write_list())
        except Exception as e:
            logger.warning(f"Could not blank device on exit: {e}")
