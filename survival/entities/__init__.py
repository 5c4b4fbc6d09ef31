"""
survival/entities/__init__.py
-----------------------------
Entity module exports.

Plain data holders owned and mutated by the Simulation. No rendering or
update logic lives here; the systems package drives them.

Exports:
    Player - The controllable square avatar
    Enemy  - Circular chaser spawned at the screen edge
    Laser  - Straight-line projectile fired toward the pointer
"""

from survival.entities.player import Player
from survival.entities.enemy import Enemy
from survival.entities.laser import Laser

__all__ = [
    'Player',
    'Enemy',
    'Laser',
]
