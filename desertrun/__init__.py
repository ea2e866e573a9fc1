"""A side-scrolling desert platformer: scene graph, player, hazards, levels and a pygame window."""

__version__ = "0.1.0"
__all__ = ["__version__"]