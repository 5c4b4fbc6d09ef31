"""
player_movement.py
------------------
Handles player movement, screen-boundary clamping, and firing.

Responsibilities
----------------
- Translate held directional actions into a direction vector.
- Keep diagonal speed equal to axial speed.
- Clamp the player inside the current screen size.
- Spawn one laser per fire event toward the pointer.
"""

import pygame

from survival.core.debug.debug_logger import DebugLogger
from survival.core.runtime.game_settings import Player as PlayerConfig
from survival.entities.laser import Laser


def read_move_direction(input_source) -> pygame.Vector2:
    """
    Combine the four directional actions into a direction.

    Opposite keys cancel out. Diagonals are scaled by 1/sqrt(2) per axis.
    """
    direction = pygame.Vector2(0, 0)

    if input_source.action_held("move_up"):
        direction.y -= 1
    if input_source.action_held("move_down"):
        direction.y += 1
    if input_source.action_held("move_left"):
        direction.x -= 1
    if input_source.action_held("move_right"):
        direction.x += 1

    if direction.x != 0 and direction.y != 0:
        direction *= PlayerConfig.DIAGONAL_FACTOR

    return direction


def update_movement(player, input_source, dt, screen_size):
    """
    Update the player's position from directional input.

    Args:
        player (Player): The player instance being updated.
        input_source: Object exposing action_held(name).
        dt (float): Delta time since the last frame (in seconds).
        screen_size (tuple[float, float]): Current viewport width and height.
    """
    direction = read_move_direction(input_source)
    player.pos += direction * PlayerConfig.SPEED * dt
    clamp_to_screen(player, screen_size)


def clamp_to_screen(player, screen_size):
    """Keep the whole player square on screen."""
    screen_w, screen_h = screen_size
    half = player.half_size

    player.pos.x = max(half, min(player.pos.x, screen_w - half))
    player.pos.y = max(half, min(player.pos.y, screen_h - half))


def fire_lasers(player, input_source, laser_manager):
    """
    Spawn one laser per fire event this frame, aimed at the pointer.

    Returns:
        int: Number of lasers fired.
    """
    shots = input_source.fire_count()
    if shots <= 0:
        return 0

    target = input_source.pointer_pos()
    for _ in range(shots):
        laser_manager.spawn(Laser.aimed(player.pos, target))

    DebugLogger.trace(f"Fired {shots} laser(s) toward {target}", category="input")
    return shots
