# dwell/core/settings.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dwell.types import Color


@dataclass(frozen=True, slots=True)
class AppSettings:
    """Window and main loop configuration."""

    width: int = 1920
    height: int = 1080
    title: str = "Dwell"
    clear_color: Color = (0.0, 0.0, 0.0, 1.0)

    # None renders as fast as presentation allows
    target_fps: Optional[int] = None
    vsync: bool = True

    # Log and drop a failing draw instead of ending the program
    skip_failed_draws: bool = False

    asset_root: Path = field(default_factory=lambda: Path("."))

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Invalid window size {self.width}x{self.height}")
        if self.target_fps is not None and self.target_fps <= 0:
            raise ValueError(f"target_fps must be positive, got {self.target_fps}")

    @property
    def screen_size(self) -> tuple[int, int]:
        return self.width, self.height
