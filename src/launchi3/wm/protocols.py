"""Window-manager capability interface."""

from typing import Any, Protocol


class WindowManager(Protocol):
    """Protocol for the window-manager IPC connection.

    Implemented by I3Connection; tests substitute an in-memory fake.
    """

    def get_tree(self) -> dict[str, Any]:
        """
        Query the full layout tree.

        Returns:
            Root node as raw IPC JSON (nested dicts with ``nodes``)
        """
        ...

    def get_workspaces(self) -> list[str]:
        """Query workspace names in the window manager's order."""
        ...

    def run_command(self, command: str) -> None:
        """Run a command, raising if the window manager rejects it."""
        ...
