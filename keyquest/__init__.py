"""Tile-based key-collecting puzzle game: map checks, game rules, drawing and commands."""

__version__ = "1.0.0"