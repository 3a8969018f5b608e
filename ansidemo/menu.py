"""Menu items and selection state."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class DemoId(Enum):
    """Identifiers for menu entries."""
    COLORS = "colors"
    CURSOR = "cursor"
    TERMINAL = "terminal"
    INPUT = "input"
    MOUSE = "mouse"
    EXIT = "exit"


class Direction(Enum):
    UP = -1
    DOWN = 1


@dataclass(frozen=True)
class MenuItem:
    """A menu label and the demo it starts."""
    label: str
    demo: DemoId


MENU_ITEMS: Tuple[MenuItem, ...] = (
    MenuItem('Color Demo - Show all color capabilities', DemoId.COLORS),
    MenuItem('Cursor Demo - Demonstrate cursor movement', DemoId.CURSOR),
    MenuItem('Terminal Demo - Screen control and sizing', DemoId.TERMINAL),
    MenuItem('Input Demo - Keyboard input handling', DemoId.INPUT),
    MenuItem('Mouse Demo - Mouse tracking and events', DemoId.MOUSE),
    MenuItem('Exit Demo', DemoId.EXIT),
)


class MenuState:
    """Tracks the selected menu entry.

    Navigation clamps at both ends; the selection never wraps around.
    """

    def __init__(self, items: Tuple[MenuItem, ...] = MENU_ITEMS, index: int = 0):
        if not items:
            raise ValueError("Menu needs at least one item")
        if not 0 <= index < len(items):
            raise IndexError(f"Selection {index} out of range")
        self._items = tuple(items)
        self._index = index

    @property
    def items(self) -> Tuple[MenuItem, ...]:
        return self._items

    @property
    def index(self) -> int:
        return self._index

    @property
    def selected(self) -> MenuItem:
        return self._items[self._index]

    @property
    def selected_demo(self) -> DemoId:
        return self.selected.demo

    def advance(self, direction: Direction) -> int:
        """Move the selection one step, staying within the menu.

        Returns:
            The new selection index.
        """
        self._index = min(len(self._items) - 1, max(0, self._index + direction.value))
        return self._index

    def up(self) -> int:
        return self.advance(Direction.UP)

    def down(self) -> int:
        return self.advance(Direction.DOWN)
