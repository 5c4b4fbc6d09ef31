"""
game_loop.py
------------
Defines the GameLoop class responsible for orchestrating the runtime cycle.

Responsibilities
----------------
- Initialize pygame and the window, input and draw services
- Own the current Simulation and replace it on restart
- Maintain the main timing loop (event → update → render)
"""

import random

import pygame

from survival.core.debug.debug_logger import DebugLogger
from survival.core.runtime.game_settings import Display, Physics
from survival.core.runtime.session_stats import get_session_stats
from survival.core.services.display_manager import DisplayManager
from survival.core.services.input_manager import InputManager
from survival.graphics.draw_manager import DrawManager
from survival.systems.simulation import Simulation, advance_frame


class GameLoop:
    """Core runtime controller that manages the game's main loop."""

    def __init__(self, seed=None):
        """
        Initialize pygame and all foundational systems.

        Args:
            seed (int | None): Seed for enemy spawn randomness.
        """
        DebugLogger.section("Initializing GameLoop")

        pygame.init()
        pygame.font.init()
        DebugLogger.init_entry("Pygame")

        self.display = DisplayManager(Display.WIDTH, Display.HEIGHT)
        self.input_manager = InputManager()
        self.draw_manager = DrawManager()

        self.rng = random.Random(seed)
        if seed is not None:
            DebugLogger.init_sub(f"Spawn RNG seeded with {seed}")

        self.stats = get_session_stats()
        self.simulation = Simulation(self.display.size, rng=self.rng)

        DebugLogger.init_entry("GameLoop Runtime")
        self.clock = pygame.time.Clock()
        self.running = True

    # ===========================================================
    # Core Runtime Loop
    # ===========================================================
    def run(self):
        """Main loop that runs until the window is closed."""
        DebugLogger.section("Game Loop")

        while self.running:
            dt = self.clock.tick(Display.FPS) / 1000.0
            dt = min(max(dt, 0.0), Physics.MAX_FRAME_TIME)

            self._handle_events()
            if not self.running:
                break

            self.input_manager.update()
            self._step(dt)
            self._draw()

        pygame.quit()
        DebugLogger.system("Pygame terminated")

    def _step(self, dt):
        """Advance the simulation, swapping in a new one on restart."""
        previous = self.simulation
        self.simulation = advance_frame(
            previous, dt, self.input_manager, self.display.size, rng=self.rng
        )
        if self.simulation is not previous:
            self.stats.reset()

        self.stats.record(self.simulation.snapshot(), self.simulation.kills, self.simulation.elapsed)

    # ===========================================================
    # Event Handling
    # ===========================================================
    def _handle_events(self):
        """Route quit, resize and mouse events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                return

            if event.type == pygame.VIDEORESIZE:
                self.display.handle_resize(event)
                continue

            self.input_manager.handle_event(event)

    # ===========================================================
    # Rendering
    # ===========================================================
    def _draw(self):
        """Render the settled snapshot and present it."""
        self.draw_manager.draw(
            self.display.get_surface(),
            self.simulation.snapshot(),
            stats=self.stats,
        )
        self.display.present()
