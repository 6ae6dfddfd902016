import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import numpy as np
import pytest


class ScriptedRandom:
    """Random source returning scripted fractions of each requested range."""

    def __init__(self, fractions):
        self.fractions = list(fractions)
        self.calls = []

    def uniform(self, low, high):
        fraction = self.fractions.pop(0)
        self.calls.append((low, high))
        return low + fraction * (high - low)


class RecordingSurface:
    """Render surface that records every call instead of drawing."""

    def __init__(self):
        self.calls = []

    def clear_area(self, width, height):
        self.calls.append(("clear", width, height))

    def draw_disk(self, x, y, radius, fill_color, stroke_color, lighten=False):
        self.calls.append(("disk", x, y, radius, fill_color, stroke_color, lighten))

    def disks(self, lighten=None):
        return [c for c in self.calls if c[0] == "disk" and (lighten is None or c[6] == lighten)]


class ManualScheduler:
    """Frame-scheduling port driven by hand."""

    def __init__(self):
        self.pending = {}
        self.cancelled = []
        self._next = 0

    def schedule_next_tick(self, callback):
        self._next += 1
        self.pending[self._next] = callback
        return self._next

    def cancel_scheduled_tick(self, handle):
        self.cancelled.append(handle)
        self.pending.pop(handle, None)

    def fire(self):
        handle = min(self.pending)
        callback = self.pending.pop(handle)
        callback()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def scripted_random():
    return ScriptedRandom
