from typing import Dict

from dwell.input.context import InputContext
from dwell.input.selection import PoseSelect
from game.constants import KEY_BINDINGS, POSE_CHARGE, POSE_IDLE, POSE_RUN

# Pose order matches game.factories.witch.create_blue_witch
BLUE_WITCH = 0
POSE_SELECTIONS: Dict[str, PoseSelect] = {
    POSE_IDLE: PoseSelect(character=BLUE_WITCH, pose=0),
    POSE_CHARGE: PoseSelect(character=BLUE_WITCH, pose=1),
    POSE_RUN: PoseSelect(character=BLUE_WITCH, pose=2),
}


def gameplay_context() -> InputContext:
    return InputContext("gameplay", KEY_BINDINGS)
