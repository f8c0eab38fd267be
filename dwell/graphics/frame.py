# dwell/graphics/frame.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from dwell.types import Rect, TextureId


@dataclass(frozen=True, slots=True)
class SpriteDraw:
    """
    One textured quad: `src` on texture `texture_id` copied into `dst`
    on screen. `src=None` samples the whole texture.
    """

    texture_id: TextureId
    src: Optional[Rect]
    dst: Rect


class SpriteSink(Protocol):
    """What the main loop needs from a renderer."""

    def clear(self) -> None: ...

    def draw(self, item: SpriteDraw) -> None: ...

    def present(self) -> None: ...
