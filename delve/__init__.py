"""Delve: rooms-and-corridors dungeon core with field of view and movement."""

__version__ = "0.1.0"
