"""Mouse tracking and mouse report parsing.

Tracking is switched on with the xterm private modes for button events
(1000), drag events (1002) and SGR extended coordinates (1006). Reports
then arrive as ``ESC [ < b ; x ; y M`` (press, drag) or ``... m``
(release). Terminals that ignore mode 1006 send the legacy X10 form
``ESC [ M b x y`` with each value offset by 32; both are understood.
"""

from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

logger = logging.getLogger(__name__)

TRACKING_MODES = (1000, 1002, 1006)
SGR_PREFIX = '\x1b[<'
X10_PREFIX = '\x1b[M'
X10_LENGTH = len(X10_PREFIX) + 3
MAX_REPORT_LENGTH = 32

BUTTON_NAMES = ('Left', 'Middle', 'Right')

# Button byte flags
SHIFT_FLAG = 4
ALT_FLAG = 8
CTRL_FLAG = 16
MOTION_FLAG = 32
WHEEL_FLAG = 64

_SGR_RE = re.compile(r'\x1b\[<(\d+);(\d+);(\d+)([Mm])\Z')


@dataclass(frozen=True)
class MouseEvent:
    """A decoded mouse report."""
    button: int  # 0 left, 1 middle, 2 right; 3 when no button is known
    type: str  # 'press', 'release', 'drag', 'move', 'wheel'
    x: int  # 1-based column
    y: int  # 1-based row
    shift: bool = False
    alt: bool = False
    ctrl: bool = False

    @property
    def button_name(self) -> str:
        if self.type == 'wheel':
            return 'Wheel up' if self.button == 0 else 'Wheel down'
        if 0 <= self.button < len(BUTTON_NAMES):
            return BUTTON_NAMES[self.button]
        return 'Unknown'


def _decode(code: int, x: int, y: int, released: bool) -> MouseEvent:
    button = code & 3
    if code & WHEEL_FLAG:
        event_type = 'wheel'
    elif code & MOTION_FLAG:
        event_type = 'move' if button == 3 else 'drag'
    elif released or button == 3:
        # X10 reports a release as button 3
        event_type = 'release'
    else:
        event_type = 'press'
    return MouseEvent(
        button=button,
        type=event_type,
        x=x,
        y=y,
        shift=bool(code & SHIFT_FLAG),
        alt=bool(code & ALT_FLAG),
        ctrl=bool(code & CTRL_FLAG),
    )


def parse_mouse_event(token) -> Optional[MouseEvent]:
    """Parse a token as a mouse report.

    Returns:
        The decoded MouseEvent, or None if the token is not a mouse report.
    """
    if not isinstance(token, str):
        return None
    match = _SGR_RE.match(token)
    if match:
        code, x, y = (int(g) for g in match.group(1, 2, 3))
        return _decode(code, x, y, released=match.group(4) == 'm')
    if token.startswith(X10_PREFIX) and len(token) == X10_LENGTH:
        code, x, y = (ord(c) - 32 for c in token[len(X10_PREFIX):])
        if min(code, x, y) < 0:
            return None
        return _decode(code, x, y, released=False)
    return None


def is_report_prefix(text: str) -> bool:
    """True if text could be the start of a mouse report."""
    return text == '\x1b[' or text.startswith(SGR_PREFIX) or text.startswith(X10_PREFIX)


def needs_more(text: str) -> bool:
    """True while a partial mouse report is still incomplete."""
    if len(text) >= MAX_REPORT_LENGTH:
        logger.warning("Giving up on overlong mouse report %r", text)
        return False
    if text == '\x1b[':
        return True
    if text.startswith(SGR_PREFIX):
        return len(text) == len(SGR_PREFIX) or text[-1] not in 'Mm'
    if text.startswith(X10_PREFIX):
        return len(text) < X10_LENGTH
    return False


class MouseTracker:
    """Turns terminal mouse reporting on and off."""

    def __init__(self, terminal):
        """Initialize with a TerminalInterface used for output."""
        self.terminal = terminal
        self.enabled = False

    def enable(self):
        self.terminal.write(''.join(f'\x1b[?{mode}h' for mode in TRACKING_MODES))
        self.enabled = True

    def disable(self):
        self.terminal.write(''.join(f'\x1b[?{mode}l' for mode in reversed(TRACKING_MODES)))
        self.enabled = False

    @contextmanager
    def tracking(self) -> Iterator['MouseTracker']:
        """Report mouse events for the duration of the block."""
        self.enable()
        try:
            yield self
        finally:
            self.disable()
