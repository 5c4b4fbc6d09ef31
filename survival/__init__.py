"""Survival - a top-down arcade survival shooter built on pygame."""

__version__ = "0.1.0"
