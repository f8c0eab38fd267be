from dataclasses import dataclass, field
from typing import List

import pygame
import pytest

from dwell.graphics.frame import SpriteDraw


@dataclass
class ManualClock:
    """Stand-in for time.perf_counter that only moves when told to."""

    now: float = 0.0

    def __call__(self) -> float:
        return self.now

    def tick(self, seconds: float) -> None:
        self.now += seconds


@dataclass
class RecordingRenderer:
    """Renderer that remembers calls instead of touching the GPU."""

    calls: List[str] = field(default_factory=list)
    draws: List[SpriteDraw] = field(default_factory=list)
    fail_on_texture: int | None = None

    def clear(self) -> None:
        self.calls.append("clear")

    def draw(self, item: SpriteDraw) -> None:
        if item.texture_id == self.fail_on_texture:
            raise IndexError(f"Texture id {item.texture_id} out of range")
        self.calls.append("draw")
        self.draws.append(item)

    def present(self) -> None:
        self.calls.append("present")


def key_down(key: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def key_up(key: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYUP, key=key)


def quit_event() -> pygame.event.Event:
    return pygame.event.Event(pygame.QUIT)


@pytest.fixture
def clock():
    """Returns a fresh ManualClock starting at t=0."""
    return ManualClock()


@pytest.fixture
def renderer():
    return RecordingRenderer()
