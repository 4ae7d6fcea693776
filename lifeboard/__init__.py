"""Conway's Game of Life: a board model and a pygame window to play it in."""

__version__ = "0.1.0"
__all__ = ["__version__"]