# dwell/character.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from dwell.animation import Animation
from dwell.types import Rect

DEFAULT_POSE = 1


@dataclass(slots=True)
class Pose:
    """An animation paired with where it is drawn on screen."""

    name: str
    animation: Animation
    dest: Rect


class Character:
    """
    A set of selectable poses with exactly one active at a time.

    The animation and the destination rect are always switched together:
    both are looked up through the single `active_pose` index.
    """

    def __init__(self, name: str, poses: Sequence[Pose]):
        if not poses:
            raise ValueError(f"Character '{name}' needs at least one pose")

        self.name = name
        self.poses: List[Pose] = list(poses)
        self._active = min(DEFAULT_POSE, len(self.poses) - 1)

    @property
    def active_pose(self) -> int:
        return self._active

    @property
    def active_animation_index(self) -> int:
        return self._active

    @property
    def active_dest_rect_index(self) -> int:
        return self._active

    @property
    def pose(self) -> Pose:
        return self.poses[self._active]

    @property
    def animation(self) -> Animation:
        return self.poses[self._active].animation

    @property
    def dest(self) -> Rect:
        return self.poses[self._active].dest

    def select(self, index: int) -> None:
        """
        Make pose `index` active. Animations are left untouched, so a pose
        resumes from the frame it was on when it was last shown.
        """
        if not 0 <= index < len(self.poses):
            raise IndexError(
                f"Character '{self.name}' has {len(self.poses)} poses, got index {index}"
            )
        self._active = index


def create_character(
    name: str,
    animations: Sequence[Animation],
    dest_rects: Sequence[Rect],
    pose_names: Sequence[str] | None = None,
) -> Character:
    """
    Build a character from parallel animation / destination lists.

    Element i of each list becomes pose i.
    """
    if len(animations) != len(dest_rects):
        raise ValueError(
            f"{len(animations)} animations but {len(dest_rects)} destination rects"
        )
    if pose_names is None:
        pose_names = [f"pose_{i}" for i in range(len(animations))]
    elif len(pose_names) != len(animations):
        raise ValueError(
            f"{len(animations)} animations but {len(pose_names)} pose names"
        )

    poses = [
        Pose(pose_name, animation, dest)
        for pose_name, animation, dest in zip(pose_names, animations, dest_rects)
    ]
    return Character(name, poses)
