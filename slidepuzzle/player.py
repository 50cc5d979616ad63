"""The person playing a puzzle."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Player:
    """A player's name and the number of moves made so far."""

    name: str
    move_count: int = 0

    def increment_moves(self):
        """Count one more move."""
        self.move_count += 1