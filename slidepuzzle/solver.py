"""Breadth-first search for the shortest solution of a board."""

from __future__ import annotations

from collections import deque

# Neighbours are explored in this order, which decides among equally short answers.
_SEARCH_ORDER = "adsw"


def serialize(board):
    """Return the board's tiles as comma-terminated numbers, row by row."""
    return "".join(f"{tile}," for row in board.key() for tile in row)


class Solver:
    """Finds the shortest sequence of moves that solves a board."""

    def __init__(self, board):
        self.initial_board = board.copy()

    def solve(self):
        """Return the moves that solve the board, or an empty list if none do."""
        start = self.initial_board
        queue = deque([(start, [])])
        visited = {serialize(start)}
        while queue:
            current, path = queue.popleft()
            if current.is_solved():
                return path
            for move in _SEARCH_ORDER:
                candidate = current.copy()
                if not candidate.move_tile(move):
                    continue
                state = serialize(candidate)
                if state not in visited:
                    visited.add(state)
                    queue.append((candidate, [*path, move]))
        return []


class BFSSolver(Solver):
    """Solver using breadth-first search."""