"""
Dwell: sprite animation demo.

Expected keys:
    - A: idle
    - B: charge
    - C: run
    - ESC: quit
"""

from __future__ import annotations

from pathlib import Path

from dwell.core.application import Application
from dwell.core.settings import AppSettings
from game.bindings import POSE_SELECTIONS, gameplay_context
from game.constants import SCREEN_HEIGHT, SCREEN_WIDTH, WINDOW_TITLE
from game.scene import build_scene


def main() -> None:
    settings = AppSettings(
        width=SCREEN_WIDTH,
        height=SCREEN_HEIGHT,
        title=WINDOW_TITLE,
        asset_root=Path("."),
    )
    app = Application(settings)
    app.run(build_scene, gameplay_context(), POSE_SELECTIONS)


if __name__ == "__main__":
    main()
