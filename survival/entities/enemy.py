"""
enemy.py
--------
Defines the chaser enemy spawned at the screen edges.

Responsibilities
----------------
- Hold position and health for a circular enemy.
- Step toward a target at a fixed speed.
"""

import pygame

from survival.core.runtime.game_settings import Enemy as EnemyConfig


class Enemy:
    """Circular enemy that walks straight at the player."""

    __slots__ = ("pos", "health")

    def __init__(self, x: float, y: float, health: int = EnemyConfig.HEALTH):
        self.pos = pygame.Vector2(x, y)
        self.health = health

    def move_toward(self, target, dt: float):
        """
        Move toward target by ENEMY speed * dt.

        Args:
            target (pygame.Vector2): Point to chase.
            dt (float): Delta time (in seconds).
        """
        offset = target - self.pos
        distance = offset.length()

        # Sitting exactly on the target: no direction to move in
        if distance > 0:
            self.pos += offset / distance * EnemyConfig.SPEED * dt

    def __repr__(self):
        return f"Enemy(pos=({self.pos.x:.1f}, {self.pos.y:.1f}), health={self.health})"
