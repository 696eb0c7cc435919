"""Tree builders and in-memory fakes shared by the tests."""

from itertools import count
from typing import Any, Optional

from launchi3.devices import DeviceEvent
from launchi3.models import Color, Location

_ids = count(1000)


def make_window(window_class: str, con_id: Optional[int] = None, title: str = "") -> dict[str, Any]:
    """Build a leaf window node as found in i3's GET_TREE reply."""
    return {
        "id": con_id if con_id is not None else next(_ids),
        "type": "con",
        "name": title,
        "window_properties": {"class": window_class, "instance": window_class.lower(), "title": title},
        "nodes": [],
        "floating_nodes": [],
    }


def make_container(*children: dict[str, Any], layout: str = "splith") -> dict[str, Any]:
    """Build a split container holding other nodes."""
    return {"id": next(_ids), "type": "con", "layout": layout, "nodes": list(children)}


def make_workspace(name: str, *children: dict[str, Any]) -> dict[str, Any]:
    """Build a workspace node."""
    return {"id": next(_ids), "type": "workspace", "name": name, "nodes": list(children)}


def make_tree(*workspaces: dict[str, Any], status_bar: bool = True) -> dict[str, Any]:
    """Build a root node with one output holding the given workspaces."""
    output_nodes = [{"id": next(_ids), "type": "con", "name": "content", "nodes": list(workspaces)}]
    if status_bar:
        output_nodes.append(
            {
                "id": next(_ids),
                "type": "dockarea",
                "name": "bottomdock",
                "nodes": [make_window("i3bar", title="i3bar for output eDP-1")],
            }
        )

    return {
        "id": next(_ids),
        "type": "root",
        "name": "root",
        "nodes": [
            {"id": next(_ids), "type": "output", "name": "__i3", "nodes": []},
            {"id": next(_ids), "type": "output", "name": "eDP-1", "nodes": output_nodes},
        ],
    }


class FakeWindowManager:
    """In-memory stand-in for I3Connection."""

    def __init__(self, tree: dict[str, Any], workspaces: Optional[list[str]] = None):
        self.tree = tree
        self.workspaces = workspaces if workspaces is not None else []
        self.commands: list[str] = []
        self.tree_requests = 0

    def get_tree(self) -> dict[str, Any]:
        self.tree_requests += 1
        return self.tree

    def get_workspaces(self) -> list[str]:
        return self.workspaces

    def run_command(self, command: str) -> None:
        self.commands.append(command)


class FakeGridDevice:
    """In-memory stand-in for LaunchpadDevice."""

    def __init__(self):
        self.pending: list[DeviceEvent] = []
        self.writes: list[list[tuple[Location, Color]]] = []
        self.closed = False

    def poll(self) -> list[DeviceEvent]:
        events, self.pending = self.pending, []
        return events

    def light_multi_rgb(self, writes: list[tuple[Location, Color]]) -> None:
        self.writes.append(list(writes))

    def close(self) -> None:
        self.closed = True
