"""
test_game_loop.py
-----------------
Headless integration tests for the runtime loop (SDL dummy driver).
"""

from unittest.mock import MagicMock

import pygame
import pytest

from survival.core.runtime.game_loop import GameLoop
from survival.core.runtime.session_stats import SessionStats
from survival.entities import Enemy
from survival.systems.simulation_state import SimulationState

pytestmark = pytest.mark.integration


@pytest.fixture
def loop(monkeypatch):
    monkeypatch.setattr("survival.core.runtime.game_loop.get_session_stats", SessionStats)
    game = GameLoop(seed=3)
    yield game
    pygame.quit()


def test_starts_with_centered_running_simulation(loop):
    width, height = loop.display.size
    sim = loop.simulation
    assert sim.state is SimulationState.RUNNING
    assert (sim.player.pos.x, sim.player.pos.y) == (width / 2, height / 2)


def test_step_and_draw_a_frame(loop):
    loop.simulation.spawn_manager.enemies.append(Enemy(50.0, 50.0))
    loop.input_manager.update()
    loop._step(1 / 60)
    loop._draw()
    assert loop.stats.score == 0


def test_restart_swaps_simulation_and_resets_run_stats(loop):
    loop.simulation.score = 30
    loop.simulation.player.health = 0
    loop._step(0.0)
    assert loop.simulation.game_over
    assert loop.stats.high_score == 30
    old = loop.simulation

    restart = MagicMock()
    restart.action_pressed.side_effect = lambda name: name == "restart"
    restart.action_held.return_value = False
    restart.fire_count.return_value = 0
    restart.pointer_pos.return_value = (0.0, 0.0)
    loop.input_manager = restart

    loop._step(0.0)

    assert loop.simulation is not old
    assert loop.simulation.state is SimulationState.RUNNING
    assert loop.stats.score == 0
    assert loop.stats.high_score == 30
    assert loop.stats.runs == 2
    loop._draw()


def test_quit_event_stops_loop(loop):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    loop._handle_events()
    assert loop.running is False


def test_game_over_overlay_shows_session_recap(loop, monkeypatch):
    blit = MagicMock()
    monkeypatch.setattr(loop.draw_manager, "_blit_text", blit)
    loop.simulation.kills = 3
    loop.simulation.score = 30
    loop.simulation.player.health = 0
    loop._step(0.0)

    loop._draw()

    lines = [c.args[2] for c in blit.call_args_list]
    assert "Game Over! Final Score: 30" in lines
    assert "Best this session: 30" in lines
    assert "Run 1: 3 kills in 0.0s" in lines
