# dwell/core/state.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, List, TypeVar

from dwell.assets.registry import TextureRegistry
from dwell.character import Character
from dwell.types import TextureId

T = TypeVar("T")


@dataclass
class RenderState(Generic[T]):
    """Everything the loop draws. Sole owner of characters and textures."""

    background: TextureId
    textures: TextureRegistry[T]
    characters: List[Character] = field(default_factory=list)

    def character(self, index: int) -> Character:
        if not 0 <= index < len(self.characters):
            raise IndexError(
                f"No character {index} ({len(self.characters)} in scene)"
            )
        return self.characters[index]
