"""Test menu selection and clamping."""

import random

import pytest
from ansidemo.menu import MenuState, MenuItem, MENU_ITEMS, DemoId, Direction


def test_menu_items_in_order():
    assert [item.demo for item in MENU_ITEMS] == [
        DemoId.COLORS, DemoId.CURSOR, DemoId.TERMINAL,
        DemoId.INPUT, DemoId.MOUSE, DemoId.EXIT,
    ]
    assert MENU_ITEMS[-1].label == 'Exit Demo'


def test_menu_items_are_immutable():
    with pytest.raises(AttributeError):
        MENU_ITEMS[0].label = 'changed'
    assert isinstance(MenuState().items, tuple)


def test_up_at_top_stays_at_top():
    menu = MenuState()
    assert menu.advance(Direction.UP) == 0
    assert menu.selected_demo == DemoId.COLORS


def test_down_walks_to_last_item_and_clamps():
    menu = MenuState()
    for _ in range(4):
        menu.down()
    assert menu.index == 4
    assert menu.selected_demo == DemoId.MOUSE

    menu.down()
    assert menu.index == 5
    assert menu.selected_demo == DemoId.EXIT

    # No wraparound back to the first item
    menu.down()
    assert menu.index == 5


def test_navigation_never_leaves_bounds():
    rng = random.Random(1234)
    menu = MenuState()
    last = len(menu.items) - 1
    previous = menu.index
    for _ in range(500):
        direction = rng.choice([Direction.UP, Direction.DOWN])
        index = menu.advance(direction)
        assert 0 <= index <= last
        # Each step moves at most one place; a wrap would jump across the menu
        assert abs(index - previous) <= 1
        previous = index


def test_custom_items_and_start_index():
    items = (MenuItem('One', DemoId.COLORS), MenuItem('Bye', DemoId.EXIT))
    menu = MenuState(items, index=1)
    assert menu.selected.label == 'Bye'
    menu.up()
    menu.up()
    assert menu.index == 0


def test_invalid_start_index_rejected():
    with pytest.raises(IndexError):
        MenuState(index=6)
    with pytest.raises(ValueError):
        MenuState(items=())
