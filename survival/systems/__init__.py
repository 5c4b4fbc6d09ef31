"""
Simulation systems exports.

Provides the survival state machine and the managers it drives each frame.
"""

from survival.systems.simulation import Simulation, FrameSnapshot, advance_frame
from survival.systems.simulation_state import SimulationState
from survival.systems.spawn_manager import SpawnManager
from survival.systems.laser_manager import LaserManager
from survival.systems.collision_manager import CollisionManager, CollisionReport

__all__ = [
    'Simulation',
    'FrameSnapshot',
    'advance_frame',
    'SimulationState',
    'SpawnManager',
    'LaserManager',
    'CollisionManager',
    'CollisionReport',
]
