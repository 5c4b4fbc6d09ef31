"""
input_manager.py
----------------
Keyboard and mouse input with per-frame edge detection.

Provides:
- Held state for movement actions (arrow keys and WASD are equivalent)
- Rising-edge detection for keyboard actions (restart)
- Counted left-click fire events, so several clicks in one frame all fire
- Pointer position in screen space
"""

import pygame

from survival.core.debug.debug_logger import DebugLogger


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "move_left": [pygame.K_LEFT, pygame.K_a],
    "move_right": [pygame.K_RIGHT, pygame.K_d],
    "move_up": [pygame.K_UP, pygame.K_w],
    "move_down": [pygame.K_DOWN, pygame.K_s],
    "restart": [pygame.K_r],
}

FIRE_MOUSE_BUTTON = 1


class InputManager:
    """
    Per-frame input state consumed by the simulation.

    Usage:
        for event in pygame.event.get():
            input_manager.handle_event(event)
        input_manager.update()

        if input_manager.action_held("move_left"):
            ...
        for _ in range(input_manager.fire_count()):
            ...
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, key_bindings=None):
        """
        Args:
            key_bindings: Custom action -> keys dict (uses DEFAULT_KEY_BINDINGS if None)
        """
        DebugLogger.init_entry("InputManager")

        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self._actions = {
            name: {"pressed": False, "held": False, "prev_held": False}
            for name in self.key_bindings
        }

        self._pending_fire = 0
        self._fire_count = 0
        self._pointer = (0.0, 0.0)

    # ===========================================================
    # Event Intake
    # ===========================================================

    def handle_event(self, event):
        """Record discrete mouse events that arrive between frames."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == FIRE_MOUSE_BUTTON:
            self._pending_fire += 1
            self._pointer = (float(event.pos[0]), float(event.pos[1]))
            DebugLogger.trace(f"Fire click at {event.pos}", category="input")

    # ===========================================================
    # Per-Frame Update
    # ===========================================================

    def update(self):
        """Poll keyboard and mouse once per frame and latch edge states."""
        keys = pygame.key.get_pressed()

        for action_name, state in self._actions.items():
            held = self._is_action_pressed(action_name, keys)
            state["prev_held"] = state["held"]
            state["held"] = held
            state["pressed"] = held and not state["prev_held"]

        self._fire_count = self._pending_fire
        self._pending_fire = 0

        x, y = pygame.mouse.get_pos()
        self._pointer = (float(x), float(y))

    def _is_action_pressed(self, action, keys):
        """Check if any bound key for an action is down."""
        for key in self.key_bindings.get(action, ()):
            if keys[key]:
                return True
        return False

    # ===========================================================
    # Public API: Queries
    # ===========================================================

    def action_pressed(self, action: str) -> bool:
        """Check if action was just pressed this frame (rising edge)."""
        state = self._actions.get(action)
        return state["pressed"] if state else False

    def action_held(self, action: str) -> bool:
        """Check if action is currently held down."""
        state = self._actions.get(action)
        return state["held"] if state else False

    def fire_count(self) -> int:
        """Number of fire clicks that arrived since the previous frame."""
        return self._fire_count

    def pointer_pos(self):
        """Current pointer position in screen coordinates."""
        return self._pointer
