"""Conway's Game of Life played in the terminal: board, status text and game loop."""

__version__ = "0.1.0"
__all__ = ["__version__"]