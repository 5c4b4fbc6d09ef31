"""
Core services exports.

Provides window, input and configuration services.
"""

from survival.core.services.config_manager import load_config, apply_settings_overrides
from survival.core.services.input_manager import InputManager
from survival.core.services.display_manager import DisplayManager

__all__ = [
    # Config
    'load_config',
    'apply_settings_overrides',
    # Services
    'InputManager',
    'DisplayManager',
]
