# dwell/animation.py
from __future__ import annotations

import time
from typing import Callable, List, Optional, Sequence

from dwell.types import Rect, TextureId

Clock = Callable[[], float]


class Animation:
    """
    Cycles through frames of a sprite sheet on a wall-clock timer.

    Frames are source rectangles on the texture referenced by `texture_id`.
    The animation only moves forward when `advance()` is called, and never
    by more than one frame per call.
    """

    def __init__(
        self,
        frames: Sequence[Rect],
        frame_duration: float,
        texture_id: TextureId,
        clock: Clock = time.perf_counter,
    ):
        if not frames:
            raise ValueError("Animation needs at least one frame")
        if frame_duration <= 0:
            raise ValueError(f"frame_duration must be positive, got {frame_duration}")

        self.frames: List[Rect] = list(frames)
        self.frame_duration = frame_duration
        self.texture_id = texture_id
        self.current_frame = 0

        self._clock = clock
        self.last_transition_time = clock()

    def __len__(self) -> int:
        return len(self.frames)

    def advance(self, now: Optional[float] = None) -> None:
        """Step to the next frame if a full frame duration has elapsed."""
        if now is None:
            now = self._clock()

        if now - self.last_transition_time >= self.frame_duration:
            self.current_frame = (self.current_frame + 1) % len(self.frames)
            self.last_transition_time = now

    def current_frame_rect(self) -> Rect:
        return self.frames[self.current_frame]


def vertical_animation(
    texture_id: TextureId,
    width: int,
    height: int,
    frame_count: int,
    frame_duration: float,
    clock: Clock = time.perf_counter,
) -> Animation:
    """
    Build an animation from a single-column sprite sheet.

    Frame i occupies (0, height * i, width, height).
    """
    frames = [Rect(0, height * i, width, height) for i in range(frame_count)]
    return Animation(frames, frame_duration, texture_id, clock=clock)
