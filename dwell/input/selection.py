from dataclasses import dataclass
from typing import Mapping

from dwell.types import InputAction


@dataclass(frozen=True, slots=True)
class PoseSelect:
    """Target of a selector action: pose `pose` of character `character`."""

    character: int
    pose: int


PoseBindings = Mapping[InputAction, PoseSelect]
