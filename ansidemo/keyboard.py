"""Keyboard input handling using curtsies-style tokens."""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, List, Optional

from curtsies import Input  # type: ignore
from curtsies.events import PasteEvent  # type: ignore

from . import mouse

logger = logging.getLogger(__name__)


class InputError(Exception):
    """Raised when reading from the terminal fails."""


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    ALT = "alt"
    CTRL = "ctrl"
    SPECIAL = "special"
    SHIFT_SPECIAL = "shift_special"  # Shift + arrow keys, etc.


@dataclass(frozen=True)
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'a', 'left', 'enter')
    raw: str  # The token as delivered by the input layer
    is_alt: bool = False
    is_ctrl: bool = False
    is_shift: bool = False
    is_sequence: bool = False


SPECIAL_KEYS = {
    'left', 'right', 'up', 'down', 'home', 'end', 'enter', 'backspace', 'delete',
    'page_up', 'page_down', 'insert',
}


def parse_key(key) -> KeyEvent:
    """Parse an input token into a KeyEvent.

    Accepts curtsies key names ('<UP>', '<Ctrl-j>', '<Esc+b>') as well as raw
    characters. Every token maps to exactly one event.
    """
    key_str = str(key)

    # Curtsies-style key names like '<LEFT>', '<Ctrl-x>', '<Alt-left>'
    if len(key_str) > 1 and key_str.startswith('<') and key_str.endswith('>'):
        name = key_str[1:-1]
        lower = name.lower().replace('+', '-')
        parts = lower.split('-') if '-' in lower else [lower]
        base = parts[-1]
        mods = set(parts[:-1])
        if 'meta' in mods or 'esc' in mods:
            mods.add('alt')
        if base in ('pageup', 'page_up'):
            base = 'page_up'
        elif base in ('pagedown', 'page_down'):
            base = 'page_down'

        if base in ('space', 'spacebar', 'spc') and not mods:
            return KeyEvent(key_type=KeyType.REGULAR, value=' ', raw=key_str)
        if base == 'tab' and not mods:
            return KeyEvent(key_type=KeyType.REGULAR, value='\t', raw=key_str)
        if 'ctrl' in mods and len(base) == 1:
            # Ctrl-J / Ctrl-M are line feed and carriage return
            if base in ('j', 'm'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str, is_sequence=True)
            return KeyEvent(key_type=KeyType.CTRL, value=base, raw=key_str, is_ctrl=True)
        if 'alt' in mods and (base in SPECIAL_KEYS or len(base) == 1):
            return KeyEvent(key_type=KeyType.ALT, value=base, raw=key_str, is_alt=True)
        if 'shift' in mods and base in SPECIAL_KEYS:
            return KeyEvent(key_type=KeyType.SHIFT_SPECIAL, value=base, raw=key_str,
                            is_shift=True, is_sequence=True)
        if base in ('esc', 'escape'):
            return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=key_str)
        # Plain specials and anything unrecognized
        return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str, is_sequence=True)

    if len(key_str) == 1:
        o = ord(key_str)
        if key_str in ('\r', '\n'):
            return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
        if key_str == '\t':
            return KeyEvent(key_type=KeyType.REGULAR, value='\t', raw=key_str)
        if 1 <= o <= 26:  # Ctrl-A .. Ctrl-Z (exclude ESC=27)
            return KeyEvent(key_type=KeyType.CTRL, value=chr(ord('a') + o - 1), raw=key_str, is_ctrl=True)
        if key_str == '\x1b':
            return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=key_str)

    return KeyEvent(
        key_type=KeyType.REGULAR,
        value=key_str,
        raw=key_str,
        is_sequence=len(key_str) > 1,
    )


def key_display_name(key) -> str:
    """Return a human readable name for a key token."""
    event = key if isinstance(key, KeyEvent) else parse_key(key)
    if event.key_type == KeyType.SPECIAL and event.value == 'enter':
        return 'ENTER'
    if event.key_type == KeyType.REGULAR:
        if event.value == ' ':
            return 'SPACE'
        if event.value == '\t':
            return 'TAB'
        if len(event.value) == 1:
            return f"'{event.value}'"
        return event.raw
    if event.key_type == KeyType.SPECIAL:
        return event.value.upper()
    if event.key_type == KeyType.CTRL:
        return f"CTRL-{event.value.upper()}"
    if event.key_type == KeyType.ALT:
        return f"ALT-{event.value.upper()}"
    return f"SHIFT-{event.value.upper()}"


def is_quit_key(key) -> bool:
    """True for 'q' or 'Q'."""
    return str(key) in ('q', 'Q')


def _token_text(token: str) -> str:
    """Undo curtsies naming for escape-prefixed tokens."""
    if token == '<ESC>':
        return '\x1b'
    if token.startswith('<Esc+') and token.endswith('>') and len(token) > 6:
        return '\x1b' + token[5:-1]
    return token


class InputReader:
    """Reads key tokens from the terminal in raw mode.

    Raw mode is held only inside ``raw_mode()`` blocks; reads outside such a
    block open a scope of their own for the single read.
    """

    def __init__(self, input_factory: Optional[Callable[[], object]] = None):
        self._input_factory = input_factory or (lambda: Input(keynames='curtsies'))
        self._input = None
        self._pending: List[str] = []

    @property
    def is_raw(self) -> bool:
        return self._input is not None

    @contextmanager
    def raw_mode(self) -> Iterator['InputReader']:
        """Enable unbuffered, unechoed input for the duration of the block.

        Nested scopes reuse the outer one. Raw mode is always released when
        the outermost block exits, including on errors. Tokens left over from
        a batched read stay queued for the next scope.
        """
        if self._input is not None:
            yield self
            return
        with self._input_factory() as inp:
            self._input = inp
            try:
                yield self
            finally:
                self._input = None

    def _next_token(self) -> str:
        if self._pending:
            return self._pending.pop(0)
        try:
            event = next(self._input)
        except (OSError, ValueError, StopIteration) as e:
            logger.error("Failed to read key: %s", e)
            raise InputError(str(e) or e.__class__.__name__) from e
        if isinstance(event, PasteEvent):
            # Fast bursts (e.g. mouse reports) arrive batched
            tokens = [str(e) for e in event.events]
            if not tokens:
                return ''
            self._pending.extend(tokens[1:])
            return tokens[0]
        return str(event)

    def read_key(self, mouse_reports: bool = False) -> str:
        """Block until one key token is available and return it.

        Args:
            mouse_reports: Reassemble mouse reports that the input layer
                delivered in pieces into a single token.

        Raises:
            InputError: if the terminal read fails
        """
        if self._input is None:
            with self.raw_mode():
                return self.read_key(mouse_reports)
        token = self._next_token()
        if not mouse_reports:
            return token
        text = _token_text(token)
        if not mouse.is_report_prefix(text):
            return token
        while mouse.needs_more(text):
            text += _token_text(self._next_token())
        logger.debug("Assembled mouse report %r", text)
        return text

    def wait_for_any_key(self) -> None:
        """Block until any key is pressed and discard it."""
        with self.raw_mode():
            self.read_key()
