import io
import random
from collections import deque

import pytest
from blessed import Terminal
from blessed.keyboard import Keystroke

from wordfall.config import GameConfig
from wordfall.game import Game, PHASE_PLAYING
from wordfall.terminal import TerminalSurface


def press(ucs):
    """A key press as inkey() would deliver it."""
    if ucs == 'ESC':
        return Keystroke('\x1b', code=361, name='KEY_ESCAPE')
    if ucs == 'ENTER':
        return Keystroke('\r', code=343, name='KEY_ENTER')
    if ucs == 'BACKSPACE':
        return Keystroke('\x7f', code=263, name='KEY_BACKSPACE')
    return Keystroke(ucs)


class FakeSurface(TerminalSurface):
    """Non-styling terminal with a fixed size and scripted key presses."""

    def __init__(self, columns=80, rows=24):
        self.stream = io.StringIO()
        super().__init__(Terminal(stream=self.stream, force_styling=None))
        self.columns = columns
        self.rows = rows
        self.keys = deque()
        self.flushes = 0
        self.events = []

    def size(self):
        return self.columns, self.rows

    def type(self, *keys):
        self.keys.extend(press(k) for k in keys)

    def poll(self, timeout=0):
        if self.keys:
            return self.keys.popleft()
        return Keystroke('')

    def show_cursor(self):
        self.events.append('show_cursor')
        super().show_cursor()

    def flush(self):
        self.flushes += 1
        self.events.append('flush')
        super().flush()


@pytest.fixture
def surface():
    return FakeSurface()


@pytest.fixture
def make_game():
    """Build a game already past the intro, with no real sleeping."""
    def _make(words=('cat',), columns=80, rows=24, **config_kwargs):
        config_kwargs.setdefault('intro_delay', 0)
        config_kwargs.setdefault('game_over_delay', 0)
        surface = FakeSurface(columns, rows)
        game = Game(surface, list(words), GameConfig(**config_kwargs),
                    rng=random.Random(1234), sleep=lambda seconds: None)
        game.intro()
        assert game.phase == PHASE_PLAYING
        return game
    return _make
