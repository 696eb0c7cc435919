"""Window-manager IPC: protocol, i3 adapter and command builders."""

from .commands import focus_command, workspace_command
from .i3 import I3Connection
from .protocols import WindowManager

__all__ = ["I3Connection", "WindowManager", "focus_command", "workspace_command"]
