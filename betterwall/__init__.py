"""Wallpaper transitions, easing curves and core utilities."""

__version__ = "0.2.0"