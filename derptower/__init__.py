"""A small tower defence game built on pygame: board, towers, monsters, UI and game loop."""

__version__ = "0.1.0"