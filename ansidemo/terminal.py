"""Terminal display and styling using Blessed."""

from contextlib import contextmanager
from typing import Iterator, Optional, Tuple

import blessed

# Not provided as terminfo capabilities
STRIKETHROUGH = '\x1b[9m'
FULL_RESET = '\x1bc'
TITLE_TEMPLATE = '\x1b]0;{}\x07'

NAMED_COLORS = (
    'black', 'red', 'green', 'yellow', 'blue', 'magenta', 'cyan', 'white',
)


class Styler:
    """Wraps text in terminal formatting sequences.

    Every call returns the text surrounded by the attribute sequence and the
    terminal's ``normal`` sequence, so styles compose by concatenation.
    """

    def __init__(self, term: blessed.Terminal):
        self.term = term

    def _wrap(self, sequence: str, text: str) -> str:
        if not sequence or not self.term.does_styling:
            # Terminal does not support styling (e.g. output is not a tty)
            return text
        return f"{sequence}{text}{self.term.normal}"

    def color(self, name: str, text: str) -> str:
        """Color text with one of the eight basic ANSI colors."""
        if name not in NAMED_COLORS:
            raise ValueError(f"Unknown color name: {name}")
        return self._wrap(getattr(self.term, name), text)

    def rgb(self, text: str, r: int, g: int, b: int) -> str:
        """Color text with a 24-bit RGB foreground."""
        if not self.term.does_styling:
            return text
        return self._wrap(self.term.color_rgb(r, g, b), text)

    def color256(self, text: str, index: int) -> str:
        """Color text with an entry of the 256-color palette."""
        if not 0 <= index <= 255:
            raise ValueError(f"Palette index out of range: {index}")
        if not self.term.does_styling:
            return text
        return self._wrap(self.term.color(index), text)

    def bold(self, text: str) -> str:
        return self._wrap(self.term.bold, text)

    def dim(self, text: str) -> str:
        return self._wrap(self.term.dim, text)

    def italic(self, text: str) -> str:
        return self._wrap(self.term.italic, text)

    def underline(self, text: str) -> str:
        return self._wrap(self.term.underline, text)

    def strikethrough(self, text: str) -> str:
        return self._wrap(STRIKETHROUGH, text)

    def blink(self, text: str) -> str:
        return self._wrap(self.term.blink, text)

    def inverse(self, text: str) -> str:
        return self._wrap(self.term.reverse, text)

    # Named color shortcuts used throughout the demos
    def green(self, text: str) -> str:
        return self.color('green', text)

    def yellow(self, text: str) -> str:
        return self.color('yellow', text)

    def cyan(self, text: str) -> str:
        return self.color('cyan', text)

    def white(self, text: str) -> str:
        return self.color('white', text)


class TerminalInterface:
    """Handles terminal output using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.style = Styler(self.term)
        self.in_alt_buffer = False

    def write(self, text: str):
        """Write text without a trailing newline."""
        print(text, end='', flush=True)

    def print_line(self, text: str = ''):
        """Write text followed by a newline."""
        print(text, flush=True)

    def clear_screen(self):
        """Clear the entire screen."""
        self.write(self.term.clear)

    def home(self):
        """Move the cursor to the top-left corner."""
        self.write(self.term.home)

    def move_to(self, x: int, y: int):
        """Move the cursor to column x, row y (both 1-based)."""
        self.write(self.term.move_xy(max(0, x - 1), max(0, y - 1)))

    def set_cursor_visible(self, visible: bool):
        """Show or hide the cursor."""
        self.write(self.term.normal_cursor if visible else self.term.hide_cursor)

    def size(self) -> Tuple[int, int]:
        """Return the terminal size as (width, height)."""
        return self.term.width, self.term.height

    def set_window_title(self, title: str):
        """Set the terminal window title."""
        if self.term.does_styling:
            self.write(TITLE_TEMPLATE.format(title))

    def enable_alt_buffer(self):
        """Switch to the alternate screen buffer."""
        self.write(self.term.enter_fullscreen)
        self.in_alt_buffer = True

    def disable_alt_buffer(self):
        """Return to the main screen buffer."""
        self.write(self.term.exit_fullscreen)
        self.in_alt_buffer = False

    @contextmanager
    def alt_buffer(self) -> Iterator[None]:
        """Use the alternate screen buffer for the duration of the block."""
        self.enable_alt_buffer()
        try:
            yield
        finally:
            self.disable_alt_buffer()

    def reset(self):
        """Reset attributes and terminal state to defaults."""
        if self.in_alt_buffer:
            self.disable_alt_buffer()
        self.write(self.term.normal)
        if self.term.does_styling:
            self.write(FULL_RESET)
