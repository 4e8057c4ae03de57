"""Shared fixtures: headless pygame, a fake scheduler and a recording renderer."""

import os
import random
from collections import deque

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from tilesnake.controls import DirectionQueue
from tilesnake.game import GameState, Status
from tilesnake.grid import Grid, TileState


class FakeHandle:
    def __init__(self, interval_ms, callback):
        self.interval_ms = interval_ms
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    """Records scheduled handles instead of arming a real timer."""

    def __init__(self):
        self.handles = []

    def schedule(self, interval_ms, callback):
        handle = FakeHandle(interval_ms, callback)
        self.handles.append(handle)
        return handle

    @property
    def live(self):
        return [h for h in self.handles if not h.cancelled]


class RecordingRenderer:
    def __init__(self):
        self.calls = []
        self.dialogs = []
        self.bar_lengths = []

    def draw_board(self, grid):
        self.calls.append(("board",))

    def draw_cells(self, grid, cells):
        self.calls.append(("cells", list(cells)))

    def draw_status_bar(self, length):
        self.bar_lengths.append(length)
        self.calls.append(("bar", length))

    def draw_dialog(self, grid, text=None):
        self.dialogs.append(text)
        self.calls.append(("dialog", text))

    def drawn_cells(self):
        return [cell for call in self.calls if call[0] == "cells" for cell in call[1]]


class ScriptedRandom(random.Random):
    """randrange() hands out the coordinates of the given cells in order."""

    def __init__(self, cells):
        super().__init__(0)
        self._values = [v for cell in cells for v in cell]

    def randrange(self, *args, **kwargs):
        return self._values.pop(0)


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_state():
    """Build a GameState with the given body (tail first) and optional pellet."""

    def _make(segments, direction, length=None, pellet=None,
              status=Status.UNPAUSED, grid=None):
        grid = grid if grid is not None else Grid()
        for x, y in segments:
            grid.set(x, y, TileState.SNAKE)
        if pellet is not None:
            grid.set(*pellet, TileState.PELLET)
        return GameState(
            grid=grid,
            segments=deque(segments),
            length=length if length is not None else len(segments),
            direction=direction,
            queue=DirectionQueue(),
            status=status,
            pellet=pellet,
        )

    return _make
