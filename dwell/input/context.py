from dataclasses import dataclass, field
from typing import Dict, Optional

from dwell.types import InputAction


@dataclass
class InputContext:
    """
    A named key code -> action table.

        gameplay = InputContext("gameplay", {K_a: "pose.idle", K_ESCAPE: "quit"})

    With `blocks_lower` set, keys this context does not bind are not looked up
    in contexts below it on the handler's stack.
    """

    name: str
    bindings: Dict[int, InputAction] = field(default_factory=dict)
    blocks_lower: bool = False

    def __post_init__(self) -> None:
        self.bindings = dict(self.bindings)

    def bind(self, key: int, action: InputAction) -> None:
        self.bindings[key] = action

    def unbind(self, key: int) -> None:
        self.bindings.pop(key, None)

    def get_action(self, key: int) -> Optional[InputAction]:
        return self.bindings.get(key)
