"""
display_manager.py
------------------
Owns the resizable game window.

Responsibilities
----------------
- Create the window and apply the caption.
- Track the current window size across resize events.
- Present the finished frame.
"""

import pygame

from survival.core.debug.debug_logger import DebugLogger
from survival.core.runtime.game_settings import Display


class DisplayManager:
    """Handles window creation and resizing. The simulation reads `size` every frame."""

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, width=None, height=None):
        """
        Args:
            width (int): Initial window width (defaults to Display.WIDTH).
            height (int): Initial window height (defaults to Display.HEIGHT).
        """
        width = width or Display.WIDTH
        height = height or Display.HEIGHT

        pygame.display.set_caption(Display.CAPTION)
        self.window = pygame.display.set_mode((width, height), pygame.RESIZABLE)

        DebugLogger.init_entry("DisplayManager")
        DebugLogger.init_sub(f"Window {width}x{height} (resizable)")

    # ===========================================================
    # Window State
    # ===========================================================
    @property
    def size(self):
        """Current window size as floats (width, height)."""
        width, height = self.window.get_size()
        return float(width), float(height)

    def handle_resize(self, event):
        """
        Handle window resize events.

        Args:
            event (pygame.event.Event): VIDEORESIZE event with new width and height.
        """
        if event.type != pygame.VIDEORESIZE:
            return
        self.window = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
        DebugLogger.state(f"Window resized → {event.w}x{event.h}", category="display")

    # ===========================================================
    # Rendering
    # ===========================================================
    def get_surface(self):
        """Surface that the renderer draws onto."""
        return self.window

    def present(self):
        """Flip the finished frame to the screen."""
        pygame.display.flip()
