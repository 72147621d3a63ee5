"""Headless stand-ins for the terminal."""
from __future__ import annotations

import random

import curses
import pytest

from fishtank.config import VARIANTS
from fishtank.world import World


class RecordingSurface:
    """Records every drawing call and replays scripted key codes."""

    def __init__(self, width: int = 80, height: int = 24, keys=()) -> None:
        self.width = width
        self.height = height
        self.keys = list(keys)
        self.calls: list[tuple] = []

    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def poll_key(self) -> int:
        if self.keys:
            return self.keys.pop(0)
        return ord('q')

    def clear(self, full: bool = False) -> None:
        self.calls.append(('clear', full))

    def draw(self, x: int, y: int, text: str, color: str) -> None:
        self.calls.append(('draw', x, y, text, color))

    def reset_color(self) -> None:
        self.calls.append(('reset_color',))

    def flush(self) -> None:
        self.calls.append(('flush',))

    def draws(self) -> list[tuple]:
        return [c for c in self.calls if c[0] == 'draw']

    def frames(self) -> int:
        return sum(1 for c in self.calls if c[0] == 'flush')


class FakeWindow:
    """Just enough of a curses window for CursesSurface and run_tank."""

    def __init__(self, width: int = 80, height: int = 24, keys=()) -> None:
        self.width = width
        self.height = height
        self.keys = list(keys)
        self.written: list[tuple] = []
        self.erased = 0
        self.cleared = 0
        self.refreshed = 0
        self.poll_timeout = None
        self.fail_on_write = False

    def getmaxyx(self) -> tuple[int, int]:
        return self.height, self.width

    def keypad(self, flag: bool) -> None:
        pass

    def timeout(self, ms: int) -> None:
        self.poll_timeout = ms

    def getch(self) -> int:
        if self.keys:
            key = self.keys.pop(0)
            if isinstance(key, Exception):
                raise key
            return key
        return ord('q')

    def addstr(self, y: int, x: int, text: str, attr: int = 0) -> None:
        self.written.append((x, y, text))
        if self.fail_on_write or (y == self.height - 1 and x + len(text) == self.width):
            raise curses.error("addwstr() returned ERR")

    def attrset(self, attr: int) -> None:
        pass

    def erase(self) -> None:
        self.erased += 1

    def clear(self) -> None:
        self.cleared += 1

    def refresh(self) -> None:
        self.refreshed += 1


@pytest.fixture
def no_colors(monkeypatch):
    monkeypatch.setattr(curses, "has_colors", lambda: False)


def make_world(width: int = 80, height: int = 24, variant: str = 'basic',
               seed: int = 1, **overrides) -> World:
    config = VARIANTS[variant]._replace(**overrides)
    return World(width, height, config, random.Random(seed))
