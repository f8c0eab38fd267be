# dwell/core/loop.py
from __future__ import annotations

from enum import Enum, auto
from typing import Callable, Iterable, Optional

import moderngl
import pygame

from dwell.core.state import RenderState
from dwell.graphics.frame import SpriteDraw, SpriteSink
from dwell.input.handler import InputHandler
from dwell.input.selection import PoseBindings
from dwell.types import InputAction, Rect

QUIT_ACTION: InputAction = "quit"

EventSource = Callable[[], Iterable[pygame.event.Event]]

# Failures a single draw can raise without the renderer itself being broken
DRAW_ERRORS = (IndexError, moderngl.Error)


class LoopState(Enum):
    RUNNING = auto()
    TERMINATED = auto()


class MainLoop:
    """
    Poll input, apply pose selections, draw, present. Repeat until quit.

    Runs on the calling thread. The only blocking points are inside the
    renderer's present (vsync) and the optional frame cap.
    """

    def __init__(
        self,
        state: RenderState,
        renderer: SpriteSink,
        input_handler: InputHandler,
        selections: PoseBindings,
        screen_size: tuple[int, int],
        events: EventSource = pygame.event.get,
        skip_failed_draws: bool = False,
        clock: Optional[pygame.time.Clock] = None,
        target_fps: Optional[int] = None,
    ):
        self.state = state
        self.renderer = renderer
        self.input = input_handler
        self.selections = selections
        self.screen_rect = Rect(0, 0, screen_size[0], screen_size[1])

        self._events = events
        self._skip_failed_draws = skip_failed_draws
        self._clock = clock
        self._target_fps = target_fps

        self.status = LoopState.RUNNING
        self.frame_index = 0

    @property
    def running(self) -> bool:
        return self.status is LoopState.RUNNING

    def terminate(self) -> None:
        if self.status is LoopState.TERMINATED:
            return
        self.status = LoopState.TERMINATED
        print(f"[loop] terminated after {self.frame_index} frames")

    def handle_events(self) -> None:
        """Drain every pending event. Events after a quit are dropped."""
        for event in self._events():
            if not self.running:
                continue

            if event.type == pygame.QUIT:
                self.terminate()
                continue

            action = self.input.process_event(event)
            if action is None:
                continue

            if action == QUIT_ACTION:
                self.terminate()
                continue

            target = self.selections.get(action)
            if target is not None:
                self.state.character(target.character).select(target.pose)

    def render(self) -> None:
        self.renderer.clear()
        self._draw(SpriteDraw(self.state.background, None, self.screen_rect))

        for character in self.state.characters:
            animation = character.animation
            self._draw(
                SpriteDraw(
                    animation.texture_id,
                    animation.current_frame_rect(),
                    character.dest,
                )
            )
            animation.advance()

        self.renderer.present()
        self.frame_index += 1

    def step(self) -> bool:
        """Run one iteration. Returns False once the loop has terminated."""
        self.handle_events()
        if not self.running:
            return False

        self.render()

        if self._clock is not None:
            if self._target_fps:
                self._clock.tick(self._target_fps)
            else:
                self._clock.tick()
        return True

    def run(self) -> None:
        print("[loop] running")
        while self.step():
            pass

    def _draw(self, item: SpriteDraw) -> None:
        if not self._skip_failed_draws:
            self.renderer.draw(item)
            return

        try:
            self.renderer.draw(item)
        except DRAW_ERRORS as e:
            print(
                f"[render] skipped draw of texture {item.texture_id} "
                f"on frame {self.frame_index}: {e}"
            )
