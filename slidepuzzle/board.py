"""The sliding-puzzle board: a square grid of numbered tiles and one gap."""

from __future__ import annotations

import random

EMPTY = 0

_OFFSETS = {
    "w": (-1, 0),
    "s": (1, 0),
    "a": (0, -1),
    "d": (0, 1),
}


class Board:
    """A square grid of tiles numbered from 1, with the gap stored as 0.

    Moves name the direction the gap travels: ``w`` up, ``s`` down,
    ``a`` left and ``d`` right.
    """

    def __init__(self, size):
        if size < 1:
            raise ValueError(f"board size must be at least 1, got {size}")
        self.size = size
        self._load([*range(1, size * size), EMPTY])

    def _load(self, flat):
        size = self.size
        self._tiles = [flat[start:start + size] for start in range(0, size * size, size)]
        self._empty = divmod(flat.index(EMPTY), size)

    def _flat(self):
        return [tile for row in self._tiles for tile in row]

    def shuffle(self, rng=None):
        """Put the tiles in a random order drawn from ``rng``."""
        rng = rng if rng is not None else random.Random()
        flat = self._flat()
        rng.shuffle(flat)
        self._load(flat)

    def is_solvable(self):
        """Return True when the numbered tiles hold an even number of inversions."""
        numbers = [tile for tile in self._flat() if tile != EMPTY]
        inversions = sum(
            1
            for position, first in enumerate(numbers)
            for second in numbers[position + 1:]
            if first > second
        )
        return inversions % 2 == 0

    def move_tile(self, direction):
        """Move the gap one cell in ``direction``; return False if it cannot go there."""
        offset = _OFFSETS.get(direction)
        if offset is None:
            return False
        row, col = self._empty
        new_row, new_col = row + offset[0], col + offset[1]
        if not (0 <= new_row < self.size and 0 <= new_col < self.size):
            return False
        tiles = self._tiles
        tiles[row][col], tiles[new_row][new_col] = tiles[new_row][new_col], tiles[row][col]
        self._empty = (new_row, new_col)
        return True

    def is_solved(self):
        """Return True when the tiles run in order with the gap last."""
        return self._flat() == [*range(1, self.size * self.size), EMPTY]

    def render(self):
        """Return the board as text, one line per row, the gap shown as ``_``."""
        return "".join(
            "".join(f"{tile if tile else '_'} " for tile in row) + "\n"
            for row in self._tiles
        )

    def copy(self):
        """Return an independent board in the same state."""
        duplicate = Board.__new__(Board)
        duplicate.size = self.size
        duplicate._tiles = [row[:] for row in self._tiles]
        duplicate._empty = self._empty
        return duplicate

    def key(self):
        """Return the tiles as a tuple of row tuples."""
        return tuple(tuple(row) for row in self._tiles)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.key() == other.key()

    __hash__ = None

    def __str__(self):
        return self.render()

    def __repr__(self):
        return f"Board(size={self.size}, tiles={self.key()!r})"