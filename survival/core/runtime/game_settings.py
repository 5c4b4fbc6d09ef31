"""
game_settings.py
----------------
Centralized constants for all game systems.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 800
    HEIGHT: int = 600
    FPS: int = 60
    CAPTION: str = "Survival Game"


# ===========================================================
# Font Configuration
# ===========================================================

class Fonts:
    DEFAULT: str = None  # pygame default font
    HUD_SIZE: int = 20
    HINT_SIZE: int = 16
    GAME_OVER_SIZE: int = 40


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Frame timing."""
    MAX_FRAME_TIME: float = 0.1


# ===========================================================
# Entities
# ===========================================================

class Player:
    """Player configuration defaults."""
    SIZE: float = 20.0
    SPEED: float = 200.0
    MAX_HEALTH: int = 100
    DIAGONAL_FACTOR: float = 0.5 ** 0.5


class Enemy:
    """Chaser enemy configuration."""
    RADIUS: float = 15.0
    SPEED: float = 50.0
    HEALTH: int = 1
    CONTACT_DAMAGE: int = 1


class Laser:
    """Player projectile configuration."""
    WIDTH: float = 3.0
    LENGTH: float = 15.0
    SPEED: float = 400.0


# ===========================================================
# Spawning & Bounds
# ===========================================================

class Spawner:
    """Enemy spawn timing."""
    INTERVAL: float = 2.0


class Bounds:
    """Margin values for entity lifecycle management."""
    LASER_CULL_MARGIN: float = 50.0


# ===========================================================
# Scoring
# ===========================================================

class Scoring:
    KILL_SCORE: int = 10


# ===========================================================
# Colors
# ===========================================================

class Colors:
    """RGB colors used by the renderer."""
    BACKGROUND = (0, 0, 0)
    PLAYER = (0, 121, 241)
    ENEMY = (230, 41, 55)
    LASER = (0, 228, 48)
    TEXT = (255, 255, 255)
    HINT = (130, 130, 130)
    GAME_OVER = (230, 41, 55)
