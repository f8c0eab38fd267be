# dwell/types.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, NewType, Tuple

TextureId = NewType("TextureId", int)

InputAction = str

Color = Tuple[float, float, float, float]


@dataclass(frozen=True, slots=True)
class Rect:
    """Pixel rectangle. Top-left origin, y grows downward."""

    x: int
    y: int
    w: int
    h: int

    def __post_init__(self) -> None:
        if self.w < 0 or self.h < 0:
            raise ValueError(f"Rect size must be non-negative, got {self.w}x{self.h}")

    @staticmethod
    def scaled_around(
        cx: float, cy: float, w: int, h: int, scale: float
    ) -> Rect:
        """
        Rect of size (w * scale, h * scale) centred on (cx, cy).
        Components are truncated toward zero.
        """
        return Rect(
            int(cx - w * scale / 2.0),
            int(cy - h * scale / 2.0),
            int(w * scale),
            int(h * scale),
        )

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y
        yield self.w
        yield self.h

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h
