"""Shared fixtures: a plain terminal and a scripted key source."""

import io

import blessed
import pytest

from ansidemo.app import DemoApp
from ansidemo.config import DemoConfig
from ansidemo.keyboard import InputReader
from ansidemo.pacing import Pacer
from ansidemo.terminal import TerminalInterface


class FakeInput:
    """Stands in for curtsies.Input, yielding scripted tokens.

    Exceptions placed in the script are raised when reached. Running out of
    tokens ends iteration, which the reader reports as an input error.
    """

    def __init__(self, tokens=()):
        self.tokens = list(tokens)
        self.entered = 0
        self.exited = 0
        self.reads = 0

    @property
    def active(self):
        return self.entered > self.exited

    def __enter__(self):
        self.entered += 1
        return self

    def __exit__(self, exc_type, exc, tb):
        self.exited += 1
        return False

    def __iter__(self):
        return self

    def __next__(self):
        if not self.tokens:
            raise StopIteration
        self.reads += 1
        token = self.tokens.pop(0)
        if isinstance(token, BaseException):
            raise token
        return token


@pytest.fixture
def plain_terminal():
    """A TerminalInterface whose blessed terminal emits no escape sequences."""
    term = blessed.Terminal(kind='xterm-256color', stream=io.StringIO(), force_styling=None)
    return TerminalInterface(term)


@pytest.fixture
def fake_input():
    return FakeInput()


@pytest.fixture
def reader(fake_input):
    return InputReader(input_factory=lambda: fake_input)


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def app(plain_terminal, reader, sleeps):
    return DemoApp(
        terminal=plain_terminal,
        keyboard=reader,
        pacer=Pacer(1.0, sleep=sleeps.append),
        config=DemoConfig(),
    )
