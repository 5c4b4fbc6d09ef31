"""
simulation.py
-------------
The survival game's state machine.

Responsibilities
----------------
- Own the player, enemies, lasers, score and spawn timer for one run.
- Advance them once per frame through a fixed pipeline:
  input → lasers → enemies → spawner → collisions → terminal check.
- Expose a read-only snapshot for rendering.

A restart never resets fields in place: `advance_frame` builds a brand
new Simulation instead.
"""

from dataclasses import dataclass
from typing import Tuple

from survival.core.debug.debug_logger import DebugLogger
from survival.entities.player import Player
from survival.systems.collision_manager import CollisionManager
from survival.systems.laser_manager import LaserManager
from survival.systems.player_movement import update_movement, fire_lasers
from survival.systems.simulation_state import SimulationState
from survival.systems.spawn_manager import SpawnManager


Vec = Tuple[float, float]


@dataclass(frozen=True)
class FrameSnapshot:
    """Settled post-update state handed to the renderer."""
    player_pos: Vec
    health: int
    enemies: Tuple[Vec, ...]
    lasers: Tuple[Tuple[Vec, Vec], ...]
    score: int
    game_over: bool

    @property
    def final_score(self):
        """Score to show on the game-over screen, None while running."""
        return self.score if self.game_over else None


class Simulation:
    """Exclusively owned aggregate of all per-run game state."""

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, screen_size, rng=None):
        """
        Args:
            screen_size (tuple[float, float]): Viewport size; the player starts at its center.
            rng: Optional random.Random compatible source for enemy spawns.
        """
        width, height = screen_size
        self.player = Player(width / 2.0, height / 2.0)
        self.laser_manager = LaserManager()
        self.spawn_manager = SpawnManager(rng=rng)
        self.collision_manager = CollisionManager(self.player, self.laser_manager, self.spawn_manager)

        self.score = 0
        self.kills = 0
        self.elapsed = 0.0
        self.state = SimulationState.RUNNING

        DebugLogger.state(f"New run started ({width:.0f}x{height:.0f})", category="game_state")

    # ===========================================================
    # Read Access
    # ===========================================================
    @property
    def enemies(self):
        return self.spawn_manager.enemies

    @property
    def lasers(self):
        return self.laser_manager.active

    @property
    def spawn_timer(self) -> float:
        return self.spawn_manager.timer

    @property
    def game_over(self) -> bool:
        return self.state is SimulationState.TERMINAL

    def snapshot(self) -> FrameSnapshot:
        """Copy out everything the renderer needs."""
        return FrameSnapshot(
            player_pos=(self.player.pos.x, self.player.pos.y),
            health=self.player.health,
            enemies=tuple((e.pos.x, e.pos.y) for e in self.enemies),
            lasers=tuple(
                ((laser.pos.x, laser.pos.y), (laser.direction.x, laser.direction.y))
                for laser in self.lasers
            ),
            score=self.score,
            game_over=self.game_over,
        )

    # ===========================================================
    # Frame Update
    # ===========================================================
    def update(self, dt, input_source, screen_size):
        """
        Advance one frame.

        Args:
            dt (float): Elapsed seconds since the previous frame (>= 0).
            input_source: Exposes action_held, fire_count and pointer_pos.
            screen_size (tuple[float, float]): Current viewport size.
        """
        if self.game_over:
            return

        self.elapsed += dt

        update_movement(self.player, input_source, dt, screen_size)
        fire_lasers(self.player, input_source, self.laser_manager)

        self.laser_manager.update(dt, screen_size)
        self.spawn_manager.update_enemies(self.player.pos, dt)
        self.spawn_manager.tick(dt, screen_size)

        report = self.collision_manager.update()
        self.score += report.score
        self.kills += report.enemies_destroyed

        if self.player.health <= 0:
            self.state = SimulationState.TERMINAL
            DebugLogger.state(
                f"Game over after {self.elapsed:.1f}s, final score {self.score}",
                category="game_state"
            )


# ===========================================================
# Frame Driver
# ===========================================================

def advance_frame(simulation, dt, input_source, screen_size, rng=None):
    """
    Handle a pending restart, then update.

    Restart is only honoured in the terminal state and replaces the
    whole Simulation.

    Returns:
        Simulation: The instance to keep for the next frame.
    """
    if simulation.game_over and input_source.action_pressed("restart"):
        DebugLogger.action("Restart requested", category="game_state")
        simulation = Simulation(screen_size, rng=rng)

    simulation.update(dt, input_source, screen_size)
    return simulation
