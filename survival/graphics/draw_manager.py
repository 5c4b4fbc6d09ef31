"""
draw_manager.py
---------------
Renders a FrameSnapshot with pygame primitives.

Responsibilities:
- Draw the player square, enemy circles and laser segments
- Draw the health/score HUD and control hints
- Draw the game-over overlay with the final score and session recap
"""

import pygame

from survival.core.debug.debug_logger import DebugLogger
from survival.core.runtime.game_settings import (
    Colors,
    Enemy as EnemyConfig,
    Fonts,
    Laser as LaserConfig,
    Player as PlayerConfig,
)


class DrawManager:
    """Read-only consumer of simulation snapshots."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self):
        """Load fonts. pygame.font must already be initialized."""
        self.fonts = {
            "hud": pygame.font.Font(Fonts.DEFAULT, Fonts.HUD_SIZE),
            "hint": pygame.font.Font(Fonts.DEFAULT, Fonts.HINT_SIZE),
            "game_over": pygame.font.Font(Fonts.DEFAULT, Fonts.GAME_OVER_SIZE),
        }
        DebugLogger.init_entry("DrawManager")
        DebugLogger.system(
            f"Fonts loaded (HUD {Fonts.HUD_SIZE}px, title {Fonts.GAME_OVER_SIZE}px)",
            category="render"
        )

    # ===========================================================
    # Frame Rendering
    # ===========================================================

    def draw(self, surface, snapshot, stats=None):
        """
        Render one frame.

        Args:
            surface (pygame.Surface): Target surface (the window).
            snapshot (FrameSnapshot): Settled simulation state.
            stats (SessionStats | None): Session totals shown on game over.
        """
        surface.fill(Colors.BACKGROUND)

        if snapshot.game_over:
            self._draw_game_over(surface, snapshot.final_score, stats)
            return

        self._draw_player(surface, snapshot.player_pos)
        self._draw_enemies(surface, snapshot.enemies)
        self._draw_lasers(surface, snapshot.lasers)
        self._draw_hud(surface, snapshot)

    # ===========================================================
    # Entities
    # ===========================================================

    def _draw_player(self, surface, pos):
        size = PlayerConfig.SIZE
        rect = pygame.Rect(0, 0, size, size)
        rect.center = (round(pos[0]), round(pos[1]))
        pygame.draw.rect(surface, Colors.PLAYER, rect)

    def _draw_enemies(self, surface, enemies):
        radius = EnemyConfig.RADIUS
        for x, y in enemies:
            pygame.draw.circle(surface, Colors.ENEMY, (round(x), round(y)), radius)

    def _draw_lasers(self, surface, lasers):
        width = max(1, round(LaserConfig.WIDTH))
        for (x, y), (dx, dy) in lasers:
            end = (x + dx * LaserConfig.LENGTH, y + dy * LaserConfig.LENGTH)
            pygame.draw.line(surface, Colors.LASER, (x, y), end, width)

    # ===========================================================
    # HUD & Overlays
    # ===========================================================

    def _blit_text(self, surface, font_key, text, color, pos, centered=False):
        image = self.fonts[font_key].render(text, True, color)
        rect = image.get_rect()
        if centered:
            rect.center = pos
        else:
            rect.topleft = pos
        surface.blit(image, rect)

    def _draw_hud(self, surface, snapshot):
        height = surface.get_height()
        self._blit_text(surface, "hud", f"Health: {snapshot.health}", Colors.TEXT, (10, 15))
        self._blit_text(surface, "hud", f"Score: {snapshot.score}", Colors.TEXT, (10, 40))
        self._blit_text(surface, "hint", "Use WASD/Arrow keys to move", Colors.HINT, (10, height - 50))
        self._blit_text(surface, "hint", "Click to shoot laser at mouse cursor", Colors.HINT, (10, height - 30))

    def _draw_game_over(self, surface, final_score, stats):
        cx = surface.get_width() / 2
        cy = surface.get_height() / 2
        self._blit_text(surface, "game_over", f"Game Over! Final Score: {final_score}",
                        Colors.GAME_OVER, (cx, cy), centered=True)
        offset = 35
        if stats is not None:
            self._blit_text(surface, "hud", f"Best this session: {stats.high_score}",
                            Colors.HINT, (cx, cy + offset), centered=True)
            self._blit_text(surface, "hint", stats.summary(),
                            Colors.HINT, (cx, cy + offset + 22), centered=True)
            offset += 50
        self._blit_text(surface, "hud", "Press R to restart", Colors.TEXT, (cx, cy + offset), centered=True)
