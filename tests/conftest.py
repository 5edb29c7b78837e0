"""Shared fixtures: headless SDL, a small viewport, recording collaborators."""

from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import itertools

import pytest

from catstack_config import CONFIG
from catstack_game import Countdown, Game
from catstack_layout import Dims, compute_dims


class FakeCountdown(Countdown):
    def __init__(self) -> None:
        self.armed = False
        self.arms = 0
        self.disarms = 0

    def arm(self) -> None:
        self.armed = True
        self.arms += 1

    def disarm(self) -> None:
        self.armed = False
        self.disarms += 1


class RecordingCanvas:
    """Stands in for Canvas; records every drawing call in order."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def clear(self):
        self.calls.append(("clear",))

    def save(self):
        self.calls.append(("save",))

    def restore(self):
        self.calls.append(("restore",))

    def translate(self, dx, dy):
        self.calls.append(("translate", dx, dy))

    def fill_rect(self, color, rect):
        self.calls.append(("fill_rect", color, tuple(rect)))

    def draw_image(self, image, x, y, size):
        self.calls.append(("draw_image", image, x, y, size))

    def text_centered(self, text, font, color, x, y):
        self.calls.append(("text_centered", text, x, y))

    def names(self) -> list[str]:
        return [c[0] for c in self.calls]


@pytest.fixture()
def dims() -> Dims:
    # 800x600 viewport: ground line at 550, target band line at 300
    return compute_dims(800, 600)


@pytest.fixture()
def pick():
    counter = itertools.cycle(range(CONFIG["SPRITE_COUNT"]))
    return lambda: next(counter)


@pytest.fixture()
def countdown() -> FakeCountdown:
    return FakeCountdown()


@pytest.fixture()
def game_events():
    return {"time": [], "score": [], "over": []}


@pytest.fixture()
def game(dims, pick, countdown, game_events) -> Game:
    return Game(
        dims,
        pick,
        countdown,
        images=("img0", "img1", "img2"),
        on_time=game_events["time"].append,
        on_score=game_events["score"].append,
        on_round_over=game_events["over"].append,
    )


@pytest.fixture()
def canvas() -> RecordingCanvas:
    return RecordingCanvas()
