"""
laser_manager.py
----------------
System responsible for all player lasers during gameplay.

Responsibilities
----------------
- Hold active lasers in firing order.
- Advance every laser each frame.
- Drop lasers that leave the screen plus a fixed margin.
"""

from survival.core.debug.debug_logger import DebugLogger
from survival.core.runtime.game_settings import Bounds


class LaserManager:
    """Owns the ordered list of live lasers."""

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self):
        self.active = []

    # ===========================================================
    # Spawning
    # ===========================================================
    def spawn(self, laser):
        """Register a newly fired laser."""
        self.active.append(laser)
        return laser

    # ===========================================================
    # Update Cycle
    # ===========================================================
    def update(self, dt, screen_size):
        """
        Move all lasers, then cull the ones outside the padded screen.

        Args:
            dt (float): Delta time (in seconds).
            screen_size (tuple[float, float]): Current viewport size.
        """
        for laser in self.active:
            laser.update(dt)

        initial_count = len(self.active)
        self.active = [laser for laser in self.active if self.in_bounds(laser, screen_size)]
        removed = initial_count - len(self.active)

        if removed:
            DebugLogger.trace(f"Culled {removed} off-screen laser(s)", category="entity_cleanup")

    @staticmethod
    def in_bounds(laser, screen_size) -> bool:
        """True while the laser is strictly inside the screen expanded by the cull margin."""
        width, height = screen_size
        margin = Bounds.LASER_CULL_MARGIN
        return (-margin < laser.pos.x < width + margin and
                -margin < laser.pos.y < height + margin)

    # ===========================================================
    # Removal
    # ===========================================================
    def remove_indices(self, indices):
        """Drop the lasers at the given indices, keeping the rest in order."""
        if indices:
            self.active = [laser for i, laser in enumerate(self.active) if i not in indices]

    def __len__(self):
        return len(self.active)
