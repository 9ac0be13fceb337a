"""Mutable map and actor state."""
