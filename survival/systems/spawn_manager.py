"""
spawn_manager.py
----------------
Manages the creation and movement of enemy entities.

Responsibilities
----------------
- Accumulate frame time and spawn one enemy per interval.
- Pick a random screen edge and a random point along it.
- Step every enemy toward the player.
"""

import random

from survival.core.debug.debug_logger import DebugLogger
from survival.core.runtime.game_settings import Enemy as EnemyConfig, Spawner
from survival.entities.enemy import Enemy


# ===========================================================
# Spawn Edges
# ===========================================================
EDGE_TOP = 0
EDGE_RIGHT = 1
EDGE_BOTTOM = 2
EDGE_LEFT = 3

EDGE_NAMES = {
    EDGE_TOP: "top",
    EDGE_RIGHT: "right",
    EDGE_BOTTOM: "bottom",
    EDGE_LEFT: "left",
}


class SpawnManager:
    """Central manager responsible for enemy spawning and chasing."""

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, rng=None, interval=None):
        """
        Args:
            rng: random.Random compatible source (randrange, uniform).
                 Inject a seeded instance for deterministic spawns.
            interval (float): Seconds between spawns (defaults to Spawner.INTERVAL).
        """
        self.rng = rng if rng is not None else random.Random()
        self.interval = Spawner.INTERVAL if interval is None else interval
        self.enemies = []
        self.timer = 0.0
        self.spawned = 0

    # ===========================================================
    # Update Loop
    # ===========================================================
    def update_enemies(self, target, dt: float):
        """Move every enemy toward the target position."""
        for enemy in self.enemies:
            enemy.move_toward(target, dt)

    def tick(self, dt: float, screen_size):
        """
        Advance the spawn timer and spawn at most one enemy.

        The timer resets to zero on spawn; leftover time is not carried.

        Returns:
            Enemy | None: The enemy spawned this frame, if any.
        """
        self.timer += dt
        if self.timer < self.interval:
            return None

        self.timer = 0.0
        return self.spawn_enemy(screen_size)

    # ===========================================================
    # Enemy Spawning
    # ===========================================================
    def spawn_enemy(self, screen_size):
        """Spawn one enemy just outside a random screen edge."""
        edge = self.rng.randrange(4)
        x, y = self.edge_position(edge, screen_size)

        enemy = Enemy(x, y, health=EnemyConfig.HEALTH)
        self.enemies.append(enemy)
        self.spawned += 1

        DebugLogger.action(
            f"Spawned enemy #{self.spawned} on {EDGE_NAMES[edge]} edge at ({x:.1f}, {y:.1f})",
            category="entity_spawn"
        )
        return enemy

    def edge_position(self, edge, screen_size):
        """
        Pick a point along an edge, pushed outward by the enemy radius.

        Args:
            edge (int): One of EDGE_TOP, EDGE_RIGHT, EDGE_BOTTOM, EDGE_LEFT.
            screen_size (tuple[float, float]): Current viewport size.
        """
        width, height = screen_size
        r = EnemyConfig.RADIUS

        if edge == EDGE_TOP:
            return self.rng.uniform(0.0, width), -r
        if edge == EDGE_RIGHT:
            return width + r, self.rng.uniform(0.0, height)
        if edge == EDGE_BOTTOM:
            return self.rng.uniform(0.0, width), height + r
        return -r, self.rng.uniform(0.0, height)

    # ===========================================================
    # Removal
    # ===========================================================
    def remove_indices(self, indices):
        """Drop the enemies at the given indices, keeping the rest in order."""
        if indices:
            self.enemies = [e for i, e in enumerate(self.enemies) if i not in indices]

    def __len__(self):
        return len(self.enemies)
