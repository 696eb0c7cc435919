"""Tests for rendering, press routing and the control loop."""

from types import SimpleNamespace
from unittest.mock import Mock, patch

import pytest

from launchi3.core import ControlLoop, render, resolve, route_press, should_push
from launchi3.devices import PressEvent, ReleaseEvent
from launchi3.exceptions import HardwareIOError, ManagerMessageError
from launchi3.models import (
    AppConfig,
    Button,
    ButtonSide,
    Color,
    GridBuffer,
    MountSide,
    Pad,
    WindowNode,
    Workspace,
)
from launchi3.wm import I3Connection

from helpers import FakeWindowManager, make_tree, make_window, make_workspace

FIREFOX = Color(r=0xFF, g=0x6A, b=0x11)
EMACS = Color(r=0xC1, g=0x33, b=0xFF)
GREY = Color(r=0x80, g=0x80, b=0x80)


@pytest.fixture
def layout():
    return [
        Workspace(
            name="1",
            windows=(WindowNode(id=42, window_class="Firefox"), WindowNode(id=43, window_class="Emacs")),
        ),
        Workspace(name="2", windows=(WindowNode(id=50, window_class="Unknown"),)),
    ]


@pytest.fixture
def manager():
    tree = make_tree(make_workspace("1", make_window("Firefox", con_id=42)))
    return FakeWindowManager(tree, ["1"])


@pytest.mark.unit
class TestResolve:
    """Test class color lookup."""

    def test_known_class(self, config):
        assert resolve("Firefox", config) == FIREFOX

    def test_unknown_class_uses_default(self, config):
        assert resolve("xterm", config) == GREY

    def test_match_is_case_sensitive(self, config):
        assert resolve("firefox", config) == GREY


@pytest.mark.unit
class TestRender:
    """Test buffer rendering from a layout."""

    def test_workspaces_are_columns(self, layout, config):
        buffer = render(layout, config)

        assert buffer.get(Pad(x=0, y=0)) == FIREFOX
        assert buffer.get(Pad(x=0, y=1)) == EMACS
        assert buffer.get(Pad(x=1, y=0)) == GREY
        assert buffer.get(Pad(x=1, y=1)) == Color.off()

    def test_side_buttons_stay_black(self, layout, config):
        buffer = render(layout, config)
        assert all(color == Color.off() for color in buffer.top_buttons + buffer.right_buttons)

    def test_rotation_applied(self, layout):
        buffer = render(layout, AppConfig(mount_side=MountSide.TOP))

        assert buffer.get(Pad(x=7, y=7)) == FIREFOX
        assert buffer.get(Pad(x=7, y=6)) == EMACS

    def test_truncates_to_eight_by_eight(self, config):
        big = [
            Workspace(
                name=str(i),
                windows=tuple(WindowNode(id=i * 100 + j, window_class="Firefox") for j in range(10)),
            )
            for i in range(10)
        ]

        buffer = render(big, config)

        assert all(color == FIREFOX for row in buffer.grid for color in row)

    def test_empty_layout(self, config):
        assert render([], config) == GridBuffer()


@pytest.mark.unit
class TestShouldPush:
    """Test the refresh decision."""

    def test_first_frame(self):
        assert should_push(GridBuffer(), None)

    def test_unchanged(self):
        assert not should_push(GridBuffer(), GridBuffer())

    def test_changed(self):
        new = GridBuffer()
        new.set(Pad(x=3, y=3), FIREFOX)
        assert should_push(new, GridBuffer())


@pytest.mark.unit
class TestRoutePress:
    """Test press to command translation."""

    def test_window_cell_focuses(self, layout):
        assert route_press(layout, Pad(x=0, y=1), MountSide.BOTTOM) == '[con_id="43"] focus'

    def test_empty_cell_switches_workspace(self, layout):
        assert route_press(layout, Pad(x=1, y=4), MountSide.BOTTOM) == "workspace 2"

    def test_unused_column_is_noop(self, layout):
        assert route_press(layout, Pad(x=5, y=0), MountSide.BOTTOM) is None

    def test_button_is_noop(self, layout):
        assert route_press(layout, Button(index=0, side=ButtonSide.TOP), MountSide.BOTTOM) is None

    def test_press_is_unrotated(self, layout):
        # Top mount: physical (7, 7) is logical (0, 0)
        assert route_press(layout, Pad(x=7, y=7), MountSide.TOP) == '[con_id="42"] focus'

    def test_ninth_workspace_not_reachable(self):
        layout = [Workspace(name=str(i)) for i in range(9)]
        assert route_press(layout, Pad(x=7, y=0), MountSide.BOTTOM) == "workspace 7"


@pytest.mark.integration
class TestControlLoop:
    """Test full iterations against fake i3 and device."""

    def test_first_step_pushes_full_refresh(self, manager, fake_device, config):
        loop = ControlLoop(manager, fake_device, config)

        shown = loop.step(None)

        assert len(fake_device.writes) == 1
        assert len(fake_device.writes[0]) == 80
        assert shown.get(Pad(x=0, y=0)) == FIREFOX

    def test_unchanged_layout_skips_write(self, manager, fake_device, config):
        loop = ControlLoop(manager, fake_device, config)

        first = loop.step(None)
        second = loop.step(first)

        assert second is first
        assert len(fake_device.writes) == 1

    def test_changed_layout_pushes_again(self, manager, fake_device, config):
        loop = ControlLoop(manager, fake_device, config)
        first = loop.step(None)

        manager.tree = make_tree(
            make_workspace("1", make_window("Firefox", con_id=42), make_window("Emacs", con_id=44))
        )
        second = loop.step(first)

        assert len(fake_device.writes) == 2
        assert second.get(Pad(x=0, y=1)) == EMACS

    def test_press_window_focuses(self, manager, fake_device, config):
        loop = ControlLoop(manager, fake_device, config)
        fake_device.pending = [PressEvent(Pad(x=0, y=0))]

        loop.step(None)

        assert manager.commands == ['[con_id="42"] focus']

    def test_press_empty_cell_switches_workspace(self, manager, fake_device, config):
        loop = ControlLoop(manager, fake_device, config)
        fake_device.pending = [PressEvent(Pad(x=0, y=1))]

        loop.step(None)

        assert manager.commands == ["workspace 1"]

    def test_press_scenario_with_two_workspaces(self, fake_device, config):
        tree = make_tree(
            make_workspace("1", make_window("Firefox", con_id=7)),
            make_workspace("2", make_window("Emacs", con_id=8)),
        )
        manager = FakeWindowManager(tree, ["1", "2"])
        loop = ControlLoop(manager, fake_device, config)

        fake_device.pending = [PressEvent(Pad(x=0, y=0))]
        loop.step(None)
        fake_device.pending = [PressEvent(Pad(x=0, y=1))]
        loop.step(None)

        assert manager.commands == ['[con_id="7"] focus', "workspace 1"]

    def test_empty_reported_workspace_is_switchable(self, fake_device, config):
        tree = make_tree(make_workspace("1", make_window("Firefox", con_id=42)))
        manager = FakeWindowManager(tree, ["1", "mail"])
        loop = ControlLoop(manager, fake_device, config)
        fake_device.pending = [PressEvent(Pad(x=1, y=0))]

        loop.step(None)

        assert manager.commands == ["workspace mail"]

    def test_releases_and_buttons_do_nothing(self, manager, fake_device, config):
        loop = ControlLoop(manager, fake_device, config)
        fake_device.pending = [
            ReleaseEvent(Pad(x=0, y=0)),
            PressEvent(Button(index=2, side=ButtonSide.RIGHT)),
        ]

        loop.step(None)

        assert manager.commands == []

    def test_press_outside_layout_does_nothing(self, manager, fake_device, config):
        loop = ControlLoop(manager, fake_device, config)
        fake_device.pending = [PressEvent(Pad(x=6, y=0))]

        loop.step(None)

        assert manager.commands == []

    def test_layout_only_queried_for_routing_when_pressed(self, manager, fake_device, config):
        loop = ControlLoop(manager, fake_device, config)

        loop.step(None)
        assert manager.tree_requests == 1

        fake_device.pending = [PressEvent(Pad(x=0, y=0))]
        loop.step(None)
        assert manager.tree_requests == 3

    def test_run_blanks_device_on_interrupt(self, manager, fake_device, config):
        loop = ControlLoop(manager, fake_device, config)

        with patch("launchi3.core.control_loop.time.sleep", side_effect=KeyboardInterrupt):
            with pytest.raises(KeyboardInterrupt):
                loop.run()

        assert len(fake_device.writes) == 2
        assert all(color == Color.off() for _, color in fake_device.writes[-1])

    def test_run_propagates_manager_errors(self, manager, fake_device, config):
        loop = ControlLoop(manager, fake_device, config)

        def fail():
            raise ManagerMessageError("get_tree", "socket closed")

        manager.get_tree = fail

        with pytest.raises(ManagerMessageError):
            loop.run()

        assert len(fake_device.writes) == 1

    def test_run_propagates_poll_errors(self, manager, fake_device, config):
        loop = ControlLoop(manager, fake_device, config)

        def fail():
            raise HardwareIOError("poll", "LPMiniMK3 MIDI", "unplugged")

        fake_device.poll = fail

        with pytest.raises(HardwareIOError):
            loop.run()

    def test_run_propagates_light_errors(self, manager, fake_device, config):
        loop = ControlLoop(manager, fake_device, config)

        def fail(writes):
            raise HardwareIOError("send", "LPMiniMK3 MIDI", "unplugged")

        fake_device.light_multi_rgb = fail

        with pytest.raises(HardwareIOError) as exc_info:
            loop.run()

        assert exc_info.value.operation == "send"


@pytest.mark.integration
class TestControlLoopWithI3Connection:
    """Test the loop against I3Connection over a mocked i3ipc connection."""

    @pytest.fixture
    def conn(self):
        conn = Mock()
        conn.get_tree.return_value.ipc_data = make_tree(
            make_workspace("1", make_window("Firefox", con_id=42))
        )
        conn.get_workspaces.return_value = [SimpleNamespace(name="1")]
        return conn

    def test_rejected_focus_keeps_running(self, conn, fake_device, config):
        conn.command.return_value = [
            SimpleNamespace(success=False, error="No window matches given criteria")
        ]
        loop = ControlLoop(I3Connection(conn), fake_device, config)
        fake_device.pending = [PressEvent(Pad(x=0, y=0))]

        shown = loop.step(None)

        conn.command.assert_called_once_with('[con_id="42"] focus')
        assert shown.get(Pad(x=0, y=0)) == FIREFOX

        fake_device.pending = [PressEvent(Pad(x=0, y=1))]
        loop.step(shown)

        conn.command.assert_called_with("workspace 1")

    def test_transport_failure_stops_step(self, conn, fake_device, config):
        conn.command.side_effect = BrokenPipeError("socket closed")
        loop = ControlLoop(I3Connection(conn), fake_device, config)
        fake_device.pending = [PressEvent(Pad(x=0, y=0))]

        with pytest.raises(ManagerMessageError):
            loop.step(None)
