"""
collision_manager.py
--------------------
Resolves collisions between lasers, enemies, and the player.

Responsibilities
----------------
- Laser vs enemy: circle-distance test over every pair; score each hit.
- Apply removals only after the full scan (mark, then filter).
- Player vs enemy: one point of damage per overlapping enemy.
"""

from dataclasses import dataclass

from survival.core.debug.debug_logger import DebugLogger
from survival.core.runtime.game_settings import (
    Enemy as EnemyConfig,
    Laser as LaserConfig,
    Player as PlayerConfig,
    Scoring,
)


@dataclass
class CollisionReport:
    """Outcome of one collision pass."""
    score: int = 0
    hits: int = 0
    enemies_destroyed: int = 0
    lasers_consumed: int = 0
    damage: int = 0


class CollisionManager:
    """Detects overlaps and applies their consequences."""

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, player, laser_manager, spawn_manager):
        """
        Args:
            player: Player entity.
            laser_manager: LaserManager holding active lasers.
            spawn_manager: SpawnManager holding active enemies.
        """
        self.player = player
        self.laser_manager = laser_manager
        self.spawn_manager = spawn_manager

    # ===========================================================
    # Per-frame Update
    # ===========================================================
    def update(self) -> CollisionReport:
        """Run laser-enemy then player-enemy resolution for this frame."""
        report = CollisionReport()
        self._resolve_laser_hits(report)
        self._resolve_player_contacts(report)
        return report

    def _resolve_laser_hits(self, report):
        """
        Every overlapping (laser, enemy) pair scores once.

        Both entities are marked; a laser touching two enemies removes both
        enemies and is itself removed once.
        """
        lasers = self.laser_manager.active
        enemies = self.spawn_manager.enemies
        if not lasers or not enemies:
            return

        hit_distance = EnemyConfig.RADIUS + LaserConfig.WIDTH
        dead_lasers = set()
        dead_enemies = set()

        for laser_idx, laser in enumerate(lasers):
            for enemy_idx, enemy in enumerate(enemies):
                if laser.pos.distance_to(enemy.pos) < hit_distance:
                    dead_lasers.add(laser_idx)
                    dead_enemies.add(enemy_idx)
                    report.hits += 1
                    report.score += Scoring.KILL_SCORE

        self.laser_manager.remove_indices(dead_lasers)
        self.spawn_manager.remove_indices(dead_enemies)

        report.lasers_consumed = len(dead_lasers)
        report.enemies_destroyed = len(dead_enemies)

        if report.hits:
            DebugLogger.state(
                f"Laser hits: {report.hits} (+{report.score}), "
                f"{report.enemies_destroyed} enemy(ies) destroyed",
                category="collision"
            )

    def _resolve_player_contacts(self, report):
        """Each enemy overlapping the player costs contact damage, uncapped."""
        contact_distance = PlayerConfig.SIZE / 2.0 + EnemyConfig.RADIUS
        player_pos = self.player.pos

        touching = sum(
            1 for enemy in self.spawn_manager.enemies
            if player_pos.distance_to(enemy.pos) < contact_distance
        )
        if not touching:
            return

        report.damage = touching * EnemyConfig.CONTACT_DAMAGE
        self.player.take_damage(report.damage)
        DebugLogger.trace(
            f"Player touched by {touching} enemy(ies), health → {self.player.health}",
            category="collision"
        )
