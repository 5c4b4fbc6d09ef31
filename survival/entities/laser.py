"""
laser.py
--------
Defines the straight-line laser projectile fired by the player.
"""

import math

import pygame

from survival.core.runtime.game_settings import Laser as LaserConfig


class Laser:
    """Projectile with an origin point and a unit direction."""

    __slots__ = ("pos", "direction")

    def __init__(self, x: float, y: float, dx: float, dy: float):
        self.pos = pygame.Vector2(x, y)
        self.direction = pygame.Vector2(dx, dy)

    @classmethod
    def aimed(cls, origin, target):
        """
        Create a laser at origin pointing at target.

        The direction comes from atan2 so it is unit length even when
        target == origin (angle 0, pointing right).
        """
        angle = math.atan2(target[1] - origin[1], target[0] - origin[0])
        return cls(origin[0], origin[1], math.cos(angle), math.sin(angle))

    def update(self, dt: float):
        """Advance along the direction at LASER speed."""
        self.pos += self.direction * LaserConfig.SPEED * dt

    def __repr__(self):
        return (f"Laser(pos=({self.pos.x:.1f}, {self.pos.y:.1f}), "
                f"dir=({self.direction.x:.3f}, {self.direction.y:.3f}))")
