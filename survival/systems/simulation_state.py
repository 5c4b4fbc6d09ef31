"""
simulation_state.py
-------------------
Defines the two states of the survival simulation.
"""

from enum import Enum


class SimulationState(Enum):
    """Top-level game state."""
    RUNNING = "running"     # Entities update every frame
    TERMINAL = "terminal"   # Game over; frozen until restart
