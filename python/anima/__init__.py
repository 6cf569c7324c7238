"""Anima — shortest-solution search for sliding-actor puzzles."""

__version__ = "0.1.0"
