"""ANSI Demo - An interactive tour of terminal colors, cursor, input and mouse."""

from .app import DemoApp
from .menu import DemoId, MenuItem, MenuState, MENU_ITEMS
from .router import Action, route

__all__ = [
    'DemoApp',
    'DemoId',
    'MenuItem',
    'MenuState',
    'MENU_ITEMS',
    'Action',
    'route',
]
