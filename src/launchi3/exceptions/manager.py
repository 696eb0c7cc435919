"""Window-manager IPC exceptions."""

from typing import Optional

from .base import Launchi3Error


class WindowManagerError(Launchi3Error):
    """Base class for i3 IPC errors."""
    pass


class ManagerConnectError(WindowManagerError):
    """The IPC socket could not be established."""

    def __init__(self, original_error: str):
        super().__init__(
            user_message="Could not connect to the i3 IPC socket",
            technical_message=f"i3 IPC connect failed: {original_error}",
            recovery_hint=(
                "Make sure i3 is running in this session and I3SOCK or DISPLAY is set."
            ),
        )
        self.original_error = original_error


class ManagerMessageError(WindowManagerError):
    """An IPC request failed or the window manager rejected a command."""

    def __init__(self, request: str, original_error: str, command: Optional[str] = None):
        """
        Args:
            request: The IPC request type ("get_tree", "get_workspaces", "command")
            original_error: Error reported by i3ipc or by i3 itself
            command: Command text, for rejected commands
        """
        technical = f"i3 IPC {request} failed: {original_error}"
        if command is not None:
            technical = f"i3 rejected command {command!r}: {original_error}"

        super().__init__(
            user_message=f"i3 IPC request '{request}' failed",
            technical_message=technical,
        )
        self.request = request
        self.command = command
        self.original_error = original_error
