"""Command pattern implementation for menu selections."""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, TYPE_CHECKING

from . import demos
from .menu import DemoId

if TYPE_CHECKING:
    from .app import DemoApp

logger = logging.getLogger(__name__)


class DemoCommand(ABC):
    """Base class for menu commands."""

    @abstractmethod
    def execute(self, app: 'DemoApp') -> None:
        """Execute the command.

        Args:
            app: The running DemoApp
        """
        pass


class RunDemoCommand(DemoCommand):
    """Runs one demo routine to completion."""

    def __init__(self, routine: Callable[['demos.DemoContext'], object]):
        self.routine = routine

    def execute(self, app: 'DemoApp') -> None:
        logger.info("Running %s", self.routine.__name__)
        self.routine(app.context)


class ExitCommand(DemoCommand):
    def execute(self, app: 'DemoApp') -> None:
        app.stop()


class CommandRegistry:
    """Binds menu identifiers to commands."""

    def __init__(self):
        self._commands: Dict[DemoId, DemoCommand] = {}
        self._register_defaults()

    def _register_defaults(self):
        self.register(DemoId.COLORS, RunDemoCommand(demos.color_demo))
        self.register(DemoId.CURSOR, RunDemoCommand(demos.cursor_demo))
        self.register(DemoId.TERMINAL, RunDemoCommand(demos.terminal_demo))
        self.register(DemoId.INPUT, RunDemoCommand(demos.input_demo))
        self.register(DemoId.MOUSE, RunDemoCommand(demos.mouse_demo))
        self.register(DemoId.EXIT, ExitCommand())

    def register(self, demo: DemoId, command: DemoCommand):
        """Register a command for a menu identifier."""
        self._commands[demo] = command

    def get_command(self, demo: DemoId) -> DemoCommand:
        """Get the command for a menu identifier.

        Raises:
            KeyError: if nothing is bound to the identifier. Menu items only
                carry registered identifiers, so this is a programming error.
        """
        return self._commands[demo]

    def dispatch(self, app: 'DemoApp', demo: DemoId) -> None:
        """Execute the command bound to a menu identifier."""
        self.get_command(demo).execute(app)
