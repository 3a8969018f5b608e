"""Main application controller for the ANSI demo."""

import logging
from typing import Optional

from .commands import CommandRegistry
from .config import DemoConfig
from .constants import DemoConstants
from .demos import DemoContext
from .keyboard import InputError, InputReader
from .menu import Direction, MenuState
from .pacing import Pacer
from .router import Action, route
from .terminal import TerminalInterface

logger = logging.getLogger(__name__)


class DemoApp:
    """Menu loop that launches the demo routines.

    The app is Running from construction until ``stop()`` is called, either
    by a quit key or by selecting the exit item. Once stopped it never runs
    again.
    """

    def __init__(self,
                 terminal: Optional[TerminalInterface] = None,
                 keyboard: Optional[InputReader] = None,
                 pacer: Optional[Pacer] = None,
                 config: Optional[DemoConfig] = None):
        """Initialize the app components."""
        self.config = config or DemoConfig()
        self.terminal = terminal or TerminalInterface()
        self.keyboard = keyboard or InputReader()
        self.context = DemoContext(
            terminal=self.terminal,
            keyboard=self.keyboard,
            pacer=pacer or Pacer(self.config.pace),
        )
        self.menu = MenuState()
        self.command_registry = CommandRegistry()
        self.running = True

    def stop(self):
        """Leave the menu loop. Stopping is permanent."""
        if self.running:
            logger.info("Stopping demo")
        self.running = False

    def run(self):
        """Run the main menu loop."""
        self._startup()
        try:
            while self.running:
                self.render_menu()
                self.handle_input()
        except KeyboardInterrupt:
            # Ctrl-C ends the demo like a quit key
            self.stop()
        finally:
            self.cleanup()

    def _startup(self):
        self.terminal.clear_screen()
        self.terminal.set_window_title(self.config.title)

    def render_menu(self):
        """Draw the menu with the current selection highlighted."""
        term = self.terminal
        style = term.style
        term.clear_screen()
        term.home()
        term.print_line(style.bold(DemoConstants.HEADER))
        term.print_line(style.dim(DemoConstants.INSTRUCTIONS))
        for i, item in enumerate(self.menu.items):
            if i == self.menu.index:
                term.print_line(style.cyan(DemoConstants.SELECTED_MARKER) + style.cyan(item.label))
            else:
                term.print_line(DemoConstants.UNSELECTED_MARKER + style.white(item.label))
        term.print_line(
            '\n' + style.dim('Current selection: ') + style.yellow(self.menu.selected_demo.value)
        )

    def handle_input(self):
        """Read one key and apply the action it maps to."""
        try:
            with self.keyboard.raw_mode():
                key = self.keyboard.read_key()
        except InputError as e:
            logger.warning("Menu input failed: %s", e)
            self.terminal.print_line(f"Input error: {e}")
            return
        self.apply(route(key))

    def apply(self, action: Action):
        """Apply a routed action to the menu state."""
        if action == Action.NAVIGATE_UP:
            self.menu.advance(Direction.UP)
        elif action == Action.NAVIGATE_DOWN:
            self.menu.advance(Direction.DOWN)
        elif action == Action.SELECT:
            self.run_selected_demo()
        elif action == Action.QUIT:
            self.stop()

    def run_selected_demo(self):
        """Execute the demo bound to the current selection."""
        self.command_registry.dispatch(self, self.menu.selected_demo)

    def cleanup(self):
        """Restore the terminal and say goodbye."""
        term = self.terminal
        style = term.style
        term.clear_screen()
        term.home()
        term.set_window_title(self.config.restore_title)
        term.set_cursor_visible(True)
        term.reset()
        term.print_line(style.bold(DemoConstants.FAREWELL))
        term.print_line(style.dim(DemoConstants.FAREWELL_HINT))
