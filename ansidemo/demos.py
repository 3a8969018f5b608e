"""The demo routines.

Each routine draws on a cleared screen, runs through its steps and then
waits for one key press before handing control back to the menu.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .constants import DemoConstants
from .keyboard import InputError, InputReader, is_quit_key, key_display_name
from .mouse import MouseEvent, MouseTracker, parse_mouse_event
from .pacing import Pacer
from .terminal import NAMED_COLORS, TerminalInterface

logger = logging.getLogger(__name__)

CURSOR_POSITIONS = (
    (10, 5, 'Position 1'),
    (30, 8, 'Position 2'),
    (50, 12, 'Position 3'),
    (20, 15, 'Position 4'),
    (40, 18, 'Position 5'),
)

TEXT_STYLES = (
    ('bold', 'Bold Text'),
    ('dim', 'Dim Text'),
    ('italic', 'Italic Text'),
    ('underline', 'Underlined Text'),
    ('strikethrough', 'Strikethrough Text'),
    ('blink', 'Blinking Text'),
    ('inverse', 'Inverse Text'),
)

RGB_SAMPLES = (
    ('Red', (255, 0, 0)),
    ('Green', (0, 255, 0)),
    ('Blue', (0, 0, 255)),
    ('Purple', (128, 0, 128)),
    ('Orange', (255, 165, 0)),
)


@dataclass
class DemoContext:
    """The collaborators a demo routine works with."""
    terminal: TerminalInterface
    keyboard: InputReader
    pacer: Pacer = field(default_factory=Pacer)
    mouse: Optional[MouseTracker] = None

    def __post_init__(self):
        if self.mouse is None:
            self.mouse = MouseTracker(self.terminal)


def _begin(ctx: DemoContext, title: str):
    ctx.terminal.clear_screen()
    ctx.terminal.home()
    ctx.terminal.print_line(ctx.terminal.style.bold(title))


def _finish(ctx: DemoContext):
    """Prompt for and wait on the dismissal key."""
    ctx.terminal.print_line('\n' + ctx.terminal.style.dim(DemoConstants.RETURN_PROMPT))
    try:
        ctx.keyboard.wait_for_any_key()
    except InputError as e:
        logger.warning("Dismissal key read failed: %s", e)
        ctx.terminal.print_line(f"Input error: {e}")


def color_demo(ctx: DemoContext) -> None:
    """Basic colors, text attributes, the 256-color palette and RGB."""
    term = ctx.terminal
    style = term.style
    _begin(ctx, '🌈 Color Capabilities Demo\n')

    term.print_line(style.bold('Basic Colors:'))
    for name in NAMED_COLORS:
        term.print_line(f"  {name.capitalize():<9}: {style.color(name, DemoConstants.COLOR_BLOCK)}")

    term.print_line('\n' + style.bold('Text Styles:'))
    for attribute, text in TEXT_STYLES:
        term.print_line(f"  {getattr(style, attribute)(text)}")

    term.print_line('\n' + style.bold('256-Color Palette:'))
    for index in range(DemoConstants.PALETTE_SAMPLES):
        term.write(style.color256(DemoConstants.PALETTE_BLOCK, index) + ' ')
    term.print_line('\n')

    term.print_line('\n' + style.bold('RGB Colors:'))
    for name, (r, g, b) in RGB_SAMPLES:
        term.print_line(f"  {name:<9}: {style.rgb(DemoConstants.COLOR_BLOCK, r, g, b)}")

    _finish(ctx)


def cursor_demo(ctx: DemoContext) -> None:
    """Absolute cursor positioning and cursor visibility."""
    term = ctx.terminal
    style = term.style
    _begin(ctx, '📍 Cursor Movement Demo\n')
    term.print_line(style.dim('Watch the cursor move around the screen...\n'))

    for x, y, text in CURSOR_POSITIONS:
        term.move_to(x, y)
        term.print_line(style.green(text))
        ctx.pacer.pause(DemoConstants.SHORT_PAUSE)

    term.move_to(10, 20)
    term.print_line(style.yellow('Hiding cursor...'))
    term.set_cursor_visible(False)
    try:
        ctx.pacer.pause(DemoConstants.LONG_PAUSE)
        term.move_to(10, 21)
        term.print_line(style.yellow('Showing cursor...'))
    finally:
        term.set_cursor_visible(True)
    ctx.pacer.pause(DemoConstants.SHORT_PAUSE)

    _finish(ctx)


def terminal_demo(ctx: DemoContext) -> None:
    """Terminal size, clearing, window title and the alternate buffer."""
    term = ctx.terminal
    style = term.style
    _begin(ctx, '🖥️  Terminal Control Demo\n')

    width, height = term.size()
    term.print_line(f"Terminal size: {style.green(f'{width}x{height}')}")

    term.print_line('\n' + style.yellow('Filling screen with text...'))
    for i in range(DemoConstants.FILL_LINES):
        term.print_line(f"Line {i + 1}: This is some sample text to fill the screen")
    ctx.pacer.pause(DemoConstants.LONG_PAUSE)

    term.print_line('\n' + style.yellow('Clearing screen...'))
    term.clear_screen()
    term.home()
    term.print_line(style.green('Screen cleared!'))

    term.print_line('\n' + style.yellow('Setting window title...'))
    term.set_window_title(DemoConstants.TERMINAL_DEMO_TITLE)
    term.print_line(style.green('Window title updated!'))

    term.print_line('\n' + style.yellow('Enabling alternate buffer...'))
    with term.alt_buffer():
        term.print_line(style.green('Now in alternate buffer!'))
        ctx.pacer.pause(DemoConstants.LONG_PAUSE)
        term.print_line('\n' + style.yellow('Disabling alternate buffer...'))
    term.print_line(style.green('Back to main buffer!'))

    _finish(ctx)


def input_demo(ctx: DemoContext, max_keys: int = DemoConstants.MAX_INPUT_KEYS) -> List[str]:
    """Show the names of key presses.

    Returns:
        The tokens that were read, in order.
    """
    term = ctx.terminal
    style = term.style
    _begin(ctx, '⌨️  Input Handling Demo\n')
    term.print_line(style.dim('Press various keys to see their names...\n'))

    keys: List[str] = []
    with ctx.keyboard.raw_mode():
        while len(keys) < max_keys:
            try:
                key = ctx.keyboard.read_key()
            except InputError as e:
                logger.warning("Input demo stopped on read failure: %s", e)
                term.print_line(f"Input error: {e}")
                break
            keys.append(key)
            term.print_line(f"Key {len(keys)}: {style.green(key_display_name(key))}")
            if is_quit_key(key):
                break

    _finish(ctx)
    return keys


def mouse_demo(ctx: DemoContext, max_events: int = DemoConstants.MAX_MOUSE_EVENTS) -> List[MouseEvent]:
    """Report mouse clicks, drags and wheel turns.

    Returns:
        The mouse events that were reported, in order.
    """
    term = ctx.terminal
    style = term.style
    _begin(ctx, '🖱️  Mouse Tracking Demo\n')
    term.print_line(style.dim('Move and click your mouse to see events...\n'))
    term.print_line(style.yellow('Press q to stop mouse tracking\n'))

    events: List[MouseEvent] = []
    with ctx.mouse.tracking(), ctx.keyboard.raw_mode():
        while len(events) < max_events:
            try:
                token = ctx.keyboard.read_key(mouse_reports=True)
            except InputError as e:
                logger.warning("Mouse demo stopped on read failure: %s", e)
                term.print_line(f"Error: {e}")
                break
            event = parse_mouse_event(token)
            if event is not None:
                events.append(event)
                term.print_line(
                    f"Mouse {event.type}: {style.green(event.button_name)} button at ({event.x}, {event.y})"
                )
            elif is_quit_key(token):
                break

    _finish(ctx)
    return events
