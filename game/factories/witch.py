# game/factories/witch.py
from typing import Protocol

from dwell.animation import vertical_animation
from dwell.character import Character, create_character
from dwell.types import Rect, TextureId
from game.constants import (
    BLUE_WITCH_CHARGE_PATH,
    BLUE_WITCH_CHARGE_SHEET,
    BLUE_WITCH_IDLE_PATH,
    BLUE_WITCH_IDLE_SHEET,
    BLUE_WITCH_RUN_PATH,
    BLUE_WITCH_RUN_SHEET,
    BLUE_WITCH_SCALE,
    FRAME_DURATION,
)


class TextureLoader(Protocol):
    def load(self, path: str) -> TextureId: ...


def witch_anchor(screen_w: int, screen_h: int) -> tuple[float, float]:
    """Where the witch stands: left fifteenth, two thirds down."""
    return float(screen_w // 15), screen_h / 1.5


def create_blue_witch(
    assets: TextureLoader, screen_w: int, screen_h: int
) -> Character:
    """Poses in order: idle, charge, run. Starts charging."""
    cx, cy = witch_anchor(screen_w, screen_h)

    animations = []
    dests = []
    for path, (w, h, count) in (
        (BLUE_WITCH_IDLE_PATH, BLUE_WITCH_IDLE_SHEET),
        (BLUE_WITCH_CHARGE_PATH, BLUE_WITCH_CHARGE_SHEET),
        (BLUE_WITCH_RUN_PATH, BLUE_WITCH_RUN_SHEET),
    ):
        texture_id = assets.load(path)
        animations.append(
            vertical_animation(texture_id, w, h, count, FRAME_DURATION)
        )
        dests.append(Rect.scaled_around(cx, cy, w, h, BLUE_WITCH_SCALE))

    return create_character(
        "blue_witch", animations, dests, pose_names=["idle", "charge", "run"]
    )
