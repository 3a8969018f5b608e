"""Test the menu loop, routing and startup/teardown."""

import unittest
from unittest.mock import Mock, patch

import pytest
from curtsies.events import PasteEvent

from ansidemo.app import DemoApp
from ansidemo.commands import DemoCommand
from ansidemo.config import DemoConfig
from ansidemo.constants import DemoConstants
from ansidemo.menu import DemoId
from ansidemo.router import Action


def stub_demo_commands(app):
    """Replace every demo command except exit with a mock."""
    stubs = {}
    for demo in DemoId:
        if demo is DemoId.EXIT:
            continue
        stubs[demo] = Mock(spec=DemoCommand)
        app.command_registry.register(demo, stubs[demo])
    return stubs


def test_app_starts_running_at_first_item(app):
    assert app.running
    assert app.menu.index == 0
    assert app.menu.selected_demo == DemoId.COLORS


def test_navigate_up_at_top(app):
    app.apply(Action.NAVIGATE_UP)
    assert app.menu.index == 0


def test_navigate_down_to_exit_and_clamp(app):
    for _ in range(4):
        app.apply(Action.NAVIGATE_DOWN)
    assert app.menu.index == 4
    assert app.menu.selected_demo == DemoId.MOUSE
    app.apply(Action.NAVIGATE_DOWN)
    app.apply(Action.NAVIGATE_DOWN)
    assert app.menu.index == 5
    assert app.menu.selected_demo == DemoId.EXIT


def test_select_exit_stops_without_running_a_demo(app):
    stubs = stub_demo_commands(app)
    for _ in range(5):
        app.apply(Action.NAVIGATE_DOWN)
    app.apply(Action.SELECT)
    assert not app.running
    for stub in stubs.values():
        stub.execute.assert_not_called()


def test_select_runs_bound_demo(app):
    stubs = stub_demo_commands(app)
    app.apply(Action.NAVIGATE_DOWN)
    app.apply(Action.SELECT)
    stubs[DemoId.CURSOR].execute.assert_called_once_with(app)
    assert app.running


def test_quit_is_terminal(app):
    app.apply(Action.QUIT)
    assert not app.running
    for action in Action:
        if action is Action.SELECT:
            continue
        app.apply(action)
        assert not app.running
    app.stop()
    assert not app.running


def test_ignore_changes_nothing(app):
    app.apply(Action.NAVIGATE_DOWN)
    app.apply(Action.IGNORE)
    assert app.menu.index == 1
    assert app.running


def test_handle_input_routes_one_key(app, fake_input):
    fake_input.tokens = ['j', '<DOWN>', 'k']
    app.handle_input()
    assert app.menu.index == 1
    app.handle_input()
    assert app.menu.index == 2
    app.handle_input()
    assert app.menu.index == 1
    # Raw mode is entered and left once per key
    assert fake_input.entered == fake_input.exited == 3


def test_handle_input_keeps_batched_presses(app, fake_input):
    paste = PasteEvent()
    paste.events.extend(['<DOWN>', '<DOWN>', '<DOWN>'])
    fake_input.tokens = [paste, 'q']
    for _ in range(4):
        app.handle_input()
    assert app.menu.index == 3
    assert not app.running


def test_handle_input_error_is_reported(app, fake_input, capsys):
    fake_input.tokens = [OSError("read failed")]
    app.handle_input()
    assert app.running
    assert "Input error: read failed" in capsys.readouterr().out
    assert not fake_input.active


def test_render_menu_marks_selection(app, capsys):
    app.apply(Action.NAVIGATE_DOWN)
    app.render_menu()
    out = capsys.readouterr().out
    assert DemoConstants.HEADER in out
    assert "► Cursor Demo - Demonstrate cursor movement" in out
    assert "  Color Demo - Show all color capabilities" in out
    assert "Current selection: cursor" in out


def test_run_until_quit(app, fake_input, capsys):
    fake_input.tokens = ['<DOWN>', '<UP>', 'x', 'q']
    app.run()
    assert not app.running
    assert fake_input.tokens == []
    out = capsys.readouterr().out
    assert out.count(DemoConstants.HEADER) == 4
    assert DemoConstants.FAREWELL in out
    assert not fake_input.active


def test_run_selecting_exit(app, fake_input, capsys):
    fake_input.tokens = ['j'] * 5 + ['\r']
    app.run()
    assert not app.running
    assert DemoConstants.FAREWELL in capsys.readouterr().out


def test_run_demo_then_quit(app, fake_input, capsys):
    # Enter runs the color demo, any key returns to the menu, q quits
    fake_input.tokens = ['\r', 'x', 'q']
    app.run()
    out = capsys.readouterr().out
    assert 'Basic Colors:' in out
    assert out.index('Basic Colors:') < out.index(DemoConstants.FAREWELL)


def test_keyboard_interrupt_still_cleans_up(app, fake_input, capsys):
    fake_input.tokens = [KeyboardInterrupt()]
    app.run()
    assert not app.running
    assert DemoConstants.FAREWELL in capsys.readouterr().out
    assert not fake_input.active


def test_unknown_error_propagates_after_cleanup(app):
    app.cleanup = Mock()
    with patch.object(app, 'handle_input', side_effect=RuntimeError("bug")):
        with pytest.raises(RuntimeError):
            app.run()
    app.cleanup.assert_called_once_with()


class TestStartupAndTeardown(unittest.TestCase):
    """Terminal side effects around the loop."""

    def make_app(self):
        terminal = Mock()
        terminal.style = Mock()
        terminal.style.bold.side_effect = lambda s: s
        terminal.style.dim.side_effect = lambda s: s
        keyboard = Mock()
        config = DemoConfig(title="Tour", restore_title="Shell")
        app = DemoApp(terminal=terminal, keyboard=keyboard, config=config)
        app.running = False
        return app, terminal

    def test_startup_sets_title(self):
        app, terminal = self.make_app()
        app.run()
        terminal.clear_screen.assert_called()
        self.assertEqual(terminal.set_window_title.call_args_list[0].args, ("Tour",))

    def test_teardown_restores_terminal(self):
        app, terminal = self.make_app()
        app.run()
        self.assertEqual(terminal.set_window_title.call_args_list[-1].args, ("Shell",))
        terminal.set_cursor_visible.assert_called_with(True)
        terminal.reset.assert_called_once_with()
        terminal.print_line.assert_any_call(DemoConstants.FAREWELL)


if __name__ == '__main__':
    unittest.main()
