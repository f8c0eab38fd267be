from typing import Dict, Tuple

import pygame

from dwell.core.loop import QUIT_ACTION

# Display
SCREEN_WIDTH: int = 1920
SCREEN_HEIGHT: int = 1080
WINDOW_TITLE: str = "Dwell. The game."

# Animation
FRAME_DURATION: float = 1.0 / 12.0

# Assets (relative to the asset root)
BACKGROUND_PATH: str = "assets/background.png"
BLUE_WITCH_IDLE_PATH: str = "assets/Blue_witch/B_witch_idle.png"
BLUE_WITCH_CHARGE_PATH: str = "assets/Blue_witch/B_witch_charge.png"
BLUE_WITCH_RUN_PATH: str = "assets/Blue_witch/B_witch_run.png"

# Blue witch sheets: (frame width, frame height, frame count)
BLUE_WITCH_SCALE: float = 10.5
BLUE_WITCH_IDLE_SHEET: Tuple[int, int, int] = (32, 48, 6)
BLUE_WITCH_CHARGE_SHEET: Tuple[int, int, int] = (48, 48, 5)
BLUE_WITCH_RUN_SHEET: Tuple[int, int, int] = (32, 48, 8)

# Input
QUIT: str = QUIT_ACTION
POSE_IDLE: str = "pose.idle"
POSE_CHARGE: str = "pose.charge"
POSE_RUN: str = "pose.run"

KEY_BINDINGS: Dict[int, str] = {
    pygame.K_ESCAPE: QUIT,
    pygame.K_a: POSE_IDLE,
    pygame.K_b: POSE_CHARGE,
    pygame.K_c: POSE_RUN,
}
