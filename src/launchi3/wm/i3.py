"""i3 IPC adapter built on i3ipc's synchronous Connection."""

import logging
from typing import Any, Optional

import i3ipc

from launchi3.exceptions import ManagerConnectError, ManagerMessageError

logger = logging.getLogger(__name__)


class I3Connection:
    """
    Window-manager connection backed by ``i3ipc.Connection``.

    Every call is a blocking round trip on the IPC socket. i3ipc failures are
    re-raised as ManagerMessageError; nothing is retried.
    """

    def __init__(self, conn: i3ipc.Connection):
        """
        Args:
            conn: Connected i3ipc connection
        """
        self._conn = conn

    @classmethod
    def connect(cls, socket_path: Optional[str] = None) -> "I3Connection":
        """
        Open the IPC socket.

        Args:
            socket_path: Explicit socket path; None lets i3ipc find it

        Raises:
            ManagerConnectError: If the socket cannot be found or opened
        """
        try:
            conn = i3ipc.Connection(socket_path=socket_path)
        except Exception as e:
            raise ManagerConnectError(str(e)) from e

        connection = cls(conn)
        logger.info(f"Connected to {connection.version()}")
        return connection

    def version(self) -> str:
        """Human-readable version of the running window manager."""
        try:
            return self._conn.get_version().human_readable
        except Exception as e:
            raise ManagerMessageError("get_version", str(e)) from e

    def get_tree(self) -> dict[str, Any]:
        """Query the layout tree as raw IPC JSON."""
        try:
            return self._conn.get_tree().ipc_data
        except Exception as e:
            raise ManagerMessageError("get_tree", str(e)) from e

    def get_workspaces(self) -> list[str]:
        """Query workspace names in i3's order."""
        try:
            return [workspace.name for workspace in self._conn.get_workspaces()]
        except Exception as e:
            raise ManagerMessageError("get_workspaces", str(e)) from e

    def run_command(self, command: str) -> None:
        """
        Run an i3 command.

        Replies that i3 rejects (a window closed since the last tree query,
        an unknown workspace name) are logged and otherwise ignored.

        Raises:
            ManagerMessageError: If the request cannot be sent or answered
        """
        logger.debug(f"Running i3 command: {command}")
        try:
            replies = self._conn.command(command)
        except Exception as e:
            raise ManagerMessageError("command", str(e), command=command) from e

        for reply in replies:
            if not reply.success:
                logger.warning(f"i3 rejected command {command!r}: {reply.error or 'unknown error'}")
