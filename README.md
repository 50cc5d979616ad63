# slidepuzzle

A sliding tile puzzle played in the terminal. The board is shuffled and you
slide the empty square around until the tiles are back in order. If you get
stuck, a breadth-first solver can finish the puzzle for you.

## Installation

```
pip install .
```

## Playing

```
slidepuzzle
```

Without options the game asks for the board size (for example `3` for a 3x3
board) and your name. The first word you type is used as the name. Both can be
given on the command line instead:

```
slidepuzzle --size 3 --name Alice
```

| option          | meaning                                                   |
|-----------------|-----------------------------------------------------------|
| `--size N`      | board size, e.g. `3` for 3x3                              |
| `--name NAME`   | player name                                               |
| `--delay SECS`  | pause between the solver's steps (default `0.3` seconds)  |

The board is printed with the empty square shown as `_`. At the prompt you
enter keys; several keys on one line are taken one after another, and spaces
are ignored.

| key | effect                       |
|-----|------------------------------|
| `w` | move the empty square up     |
| `s` | move the empty square down   |
| `a` | move the empty square left   |
| `d` | move the empty square right  |
| `r` | let the solver finish        |

A move that would push the empty square off the board, or any other key, does
nothing and is not counted. Each counted move prints the move number. When the
tiles read `1 2 3 … _` in row order, the game congratulates you and prints
your move count. After `r` the solver plays its moves one by one, printing the
board and the running move count after each, then the total.

An invalid or missing size or name prints an error and the command exits with
status 1; so does end of input or Ctrl-C.

## What to expect

- The board is reshuffled until the numbered tiles have an even number of
  inversions. That test decides solvability for boards of odd width (3x3,
  5x5, …); on boards of even width a shuffled board may not be solvable.
- The solver uses breadth-first search, so it finds a shortest solution, but
  it keeps every position it has seen. On boards larger than 3x3 it can take
  a very long time and a lot of memory. If no solution exists it plays no
  moves.
- There are no saved games, high scores or difficulty levels.

## Using the library

```python
import random

from slidepuzzle.board import Board
from slidepuzzle.solver import Solver

board = Board(3)
board.shuffle(random.Random(42))
while not board.is_solvable():
    board.shuffle(random.Random())

moves = Solver(board).solve()   # e.g. ['a', 'w', ...]
for move in moves:
    board.move_tile(move)
assert board.is_solved()
print(board.render())
```

- `slidepuzzle.board.Board(size)` starts solved and raises `ValueError` for a
  size below 1. It has `shuffle(rng)`, `is_solvable()`, `move_tile(direction)`
  (returns whether the gap moved), `is_solved()`, `render()`, `copy()` and
  `key()` (the tiles as a tuple of row tuples). Boards compare equal when
  their tiles are equal.
- `slidepuzzle.solver.Solver(board)` works on a copy of the board; `solve()`
  returns the list of moves, or an empty list if there is none.
  `BFSSolver` is the same search under another name, and `serialize(board)`
  gives the tiles as text such as `"1,2,3,4,5,6,7,8,0,"`.
- `slidepuzzle.player.Player(name)` holds the name and `move_count`.
- `slidepuzzle.game.Game(size, player_name, rng, input_func, output, delay)`
  runs a whole session through `run()`. The input function, output stream,
  random generator and delay between solver steps can all be replaced, which
  makes it possible to script or test a game.

## Running the tests

```
pip install .[test]
pytest
```