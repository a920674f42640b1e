"""A lane-defense game: place plants on a lawn and hold back waves of zombies."""

__version__ = "0.1.0"
__all__ = ["__version__"]