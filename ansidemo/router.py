"""Mapping of key tokens to menu actions."""

from enum import Enum
from typing import Dict, Tuple, Union

from .keyboard import KeyEvent, KeyType, parse_key


class Action(Enum):
    """What a key press asks the menu to do."""
    NAVIGATE_UP = "navigate_up"
    NAVIGATE_DOWN = "navigate_down"
    SELECT = "select"
    QUIT = "quit"
    IGNORE = "ignore"


ROUTES: Dict[Tuple[KeyType, str], Action] = {
    (KeyType.SPECIAL, 'up'): Action.NAVIGATE_UP,
    (KeyType.REGULAR, 'k'): Action.NAVIGATE_UP,
    (KeyType.SPECIAL, 'down'): Action.NAVIGATE_DOWN,
    (KeyType.REGULAR, 'j'): Action.NAVIGATE_DOWN,
    (KeyType.SPECIAL, 'enter'): Action.SELECT,
    (KeyType.REGULAR, 'q'): Action.QUIT,
    (KeyType.REGULAR, 'Q'): Action.QUIT,
}


def route(token: Union[str, KeyEvent, None]) -> Action:
    """Return the action for a key token.

    Every token maps to exactly one action; unknown keys are ignored.
    """
    if token is None or token == '':
        return Action.IGNORE
    event = token if isinstance(token, KeyEvent) else parse_key(token)
    return ROUTES.get((event.key_type, event.value), Action.IGNORE)
