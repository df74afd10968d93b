"""PacPy: a single-ghost Pac-Man on a fixed tile maze, built on Pygame."""

from pacpy.config import GameConfig, load_settings
from pacpy.grid import Grid, MapFormatError, Tile
from pacpy.session import Event, Notification, World

__version__ = "0.1.0"

__all__ = [
    "GameConfig",
    "load_settings",
    "Grid",
    "MapFormatError",
    "Tile",
    "Event",
    "Notification",
    "World",
]
