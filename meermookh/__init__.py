"""A small side-scrolling platformer: TMX tile maps, collisions, a player and enemies."""

__version__ = "0.1.0"