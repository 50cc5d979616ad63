"""The interactive game: a shuffled board, a player and an automatic solver."""

from __future__ import annotations

import sys
import time
from collections import deque

from slidepuzzle.board import Board
from slidepuzzle.player import Player
from slidepuzzle.solver import Solver

PROMPT = "Enter move (w/s/a/d) or 'r' to solve automatically: "
SOLVE_COMMAND = "r"


class Game:
    """One game of the sliding puzzle."""

    def __init__(self, size, player_name, rng=None, input_func=None, output=None, delay=0.3):
        self.board = Board(size)
        self.player = Player(player_name)
        self._input = input_func if input_func is not None else input
        self._output = output if output is not None else sys.stdout
        self._delay = delay
        self._pending = deque()

        self.board.shuffle(rng)
        while not self.board.is_solvable():
            self.board.shuffle(rng)

        self._write(f"Puzzle is solvable. Let's start, {self.player.name}!\n")

    def _write(self, text):
        self._output.write(text)

    def _read_move(self):
        while not self._pending:
            line = self._input()
            self._pending.extend(char for char in line if not char.isspace())
        return self._pending.popleft()

    def run(self):
        """Play until the board is solved or the player asks for the solver."""
        while not self.board.is_solved():
            self._write(self.board.render())
            self._write(PROMPT)
            self._output.flush()
            move = self._read_move()
            if move == SOLVE_COMMAND:
                self.handle_solver()
                return
            self.handle_move(move)

        self._write(
            f"Congratulations, {self.player.name}! You solved the puzzle in "
            f"{self.player.move_count} moves.\n"
        )

    def handle_move(self, move):
        """Apply one player move; return whether it was made."""
        if not self.board.move_tile(move):
            return False
        self.player.increment_moves()
        self._write(f"Move number: {self.player.move_count}\n")
        return True

    def handle_solver(self):
        """Solve the board, showing each step."""
        solution = Solver(self.board).solve()
        self._write("Solving...\n")
        for move in solution:
            self.board.move_tile(move)
            self.player.increment_moves()
            self._write(self.board.render())
            self._write(f"Current move count: {self.player.move_count}\n")
            self._write("-------------------\n")
            self._output.flush()
            time.sleep(self._delay)
        self._write(f"Puzzle solved in {self.player.move_count} moves.\n")