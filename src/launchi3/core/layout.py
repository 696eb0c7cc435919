"""
Workspace layout extraction from the i3 tree.

The tree is the raw JSON reply of i3's ``GET_TREE`` request: nested
mappings with ``type``, ``name``, ``id``, ``window_properties`` and
``nodes``. A typical path down to a window looks like::

    root -> output -> con (content) -> workspace "1" -> con (split) -> con (window)

Only leaf ``con`` nodes that carry window properties count as windows. The
status bar lives in a dockarea and carries the ``i3bar`` class, so it is
excluded explicitly.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Optional

from launchi3.models import Layout, WindowNode, Workspace, WorkspaceOrder

logger = logging.getLogger(__name__)

STATUS_BAR_CLASS = "i3bar"


def is_workspace(node: Mapping[str, Any]) -> bool:
    """Check if a node opens a new workspace context."""
    return node.get("type") == "workspace"


def is_window(node: Mapping[str, Any]) -> bool:
    """Check if a node is a real, leaf application window."""
    properties = node.get("window_properties")
    if not properties:
        return False

    return (
        properties.get("class") != STATUS_BAR_CLASS
        and node.get("type") == "con"
        and not node.get("nodes")
    )


def _window_node(node: Mapping[str, Any]) -> WindowNode:
    properties = node["window_properties"]
    return WindowNode(
        id=node["id"],
        window_class=properties.get("class") or "",
        title=properties.get("title"),
    )


def extract(tree: Mapping[str, Any]) -> Layout:
    """
    Group the windows of a tree snapshot by workspace.

    Workspaces appear in first-seen order and windows in depth-first
    traversal order. Windows outside any workspace are dropped. The tree is
    only read; the result holds fresh copies of ids, classes and titles.

    Args:
        tree: Root node of the i3 tree

    Returns:
        Layout with one entry per workspace that holds at least one window
    """
    grouped: dict[str, list[WindowNode]] = {}

    def walk(node: Mapping[str, Any], workspace: Optional[str]) -> None:
        if is_workspace(node):
            workspace = node.get("name")
        elif is_window(node):
            if workspace is not None:
                grouped.setdefault(workspace, []).append(_window_node(node))
            else:
                logger.debug(f"Dropping window {node.get('id')} outside any workspace")

        for child in node.get("nodes") or ():
            walk(child, workspace)

    walk(tree, None)

    return [Workspace(name=name, windows=tuple(windows)) for name, windows in grouped.items()]


def arrange(
    layout: Layout,
    workspace_names: Iterable[str],
    order: WorkspaceOrder = WorkspaceOrder.MANAGER,
) -> Layout:
    """
    Restrict and order a layout by the workspaces i3 reports.

    Every reported workspace gets a column, including ones with no windows.
    Tree workspaces that i3 does not report (``__i3_scratch``) are dropped.

    Args:
        layout: Result of :func:`extract`
        workspace_names: Names from ``GET_WORKSPACES``, in i3's order
        order: Keep i3's order, or sort by name

    Returns:
        Layout with exactly one entry per reported workspace
    """
    by_name = {workspace.name: workspace for workspace in layout}

    names = list(dict.fromkeys(workspace_names))
    if order == WorkspaceOrder.NAME:
        names.sort()

    return [by_name.get(name, Workspace(name=name)) for name in names]
