from typing import List, Optional

import pygame

from dwell.input.context import InputContext
from dwell.types import InputAction


class InputHandler:
    """
    Resolves key presses to actions through a stack of contexts.

    Edge-triggered: only KEYDOWN produces an action. Releases and every other
    event type resolve to nothing.
    """

    def __init__(self):
        self._context_stack: List[InputContext] = []

    def push_context(self, context: InputContext):
        """Add a context to the top of the stack (highest priority)."""
        self._context_stack.append(context)

    def pop_context(self, name: str) -> Optional[InputContext]:
        """Remove a context by name."""
        for i in range(len(self._context_stack) - 1, -1, -1):
            if self._context_stack[i].name == name:
                return self._context_stack.pop(i)
        return None

    def process_event(self, event: pygame.event.Event) -> Optional[InputAction]:
        """Returns the action triggered by a key press, if any."""
        if event.type != pygame.KEYDOWN:
            return None
        return self._resolve_key(event.key)

    def _resolve_key(self, key_code: int) -> Optional[InputAction]:
        """Finds the action for a key by walking down the stack."""
        # Iterate backwards (Top -> Bottom)
        for context in reversed(self._context_stack):
            action = context.get_action(key_code)
            if action:
                return action

            # If this context is blocking (e.g., a modal menu), stop looking
            if context.blocks_lower:
                break
        return None
