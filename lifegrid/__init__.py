"""Interactive Conway's Game of Life on a pygame window, with a windowless simulation core."""

__version__ = "0.1.0"
__all__ = ["__version__"]