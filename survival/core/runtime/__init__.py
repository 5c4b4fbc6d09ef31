"""
Runtime configuration exports.

Provides game-wide constants and settings. All exports are lightweight
class constants with no initialization overhead.
"""

from survival.core.runtime.game_settings import (
    Display,
    Fonts,
    Physics,
    Player,
    Enemy,
    Laser,
    Spawner,
    Bounds,
    Scoring,
    Colors,
)
from survival.core.runtime.session_stats import get_session_stats

__all__ = [
    # Display & Rendering
    'Display',
    'Fonts',
    'Colors',
    # Gameplay
    'Physics',
    'Player',
    'Enemy',
    'Laser',
    'Spawner',
    'Bounds',
    'Scoring',
    # Session
    'get_session_stats',
]
