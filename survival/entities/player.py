"""
player.py
---------
Defines the player avatar: a square with a position and a health pool.
"""

import pygame

from survival.core.runtime.game_settings import Player as PlayerConfig


class Player:
    """Player-controlled square. Position is its center."""

    __slots__ = ("pos", "health")

    def __init__(self, x: float, y: float, health: int = PlayerConfig.MAX_HEALTH):
        self.pos = pygame.Vector2(x, y)
        self.health = health

    @property
    def half_size(self) -> float:
        return PlayerConfig.SIZE / 2.0

    @property
    def alive(self) -> bool:
        return self.health > 0

    def take_damage(self, amount: int = 1):
        """Reduce health. Health never goes up outside a restart."""
        self.health -= amount

    def __repr__(self):
        return f"Player(pos=({self.pos.x:.1f}, {self.pos.y:.1f}), health={self.health})"
