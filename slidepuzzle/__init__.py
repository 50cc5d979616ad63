"""Sliding tile puzzle: board, player, breadth-first solver, game and command line."""

__version__ = "0.1.0"
__all__ = ["board", "cli", "game", "player", "solver"]