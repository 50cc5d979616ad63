import io

import pytest

from slidepuzzle.game import Game

ONE_MOVE_AWAY = [1, 2, 3, 4, 5, 6, 7, 0, 8]


class _ScriptedRng:
    def __init__(self, *orders):
        self.orders = list(orders)
        self.calls = 0

    def shuffle(self, seq):
        seq[:] = self.orders[min(self.calls, len(self.orders) - 1)]
        self.calls += 1


def _inputs(*lines):
    remaining = iter(lines)

    def read():
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return read


def _game(order, *lines):
    output = io.StringIO()
    game = Game(
        3,
        "Ann",
        rng=_ScriptedRng(order),
        input_func=_inputs(*lines),
        output=output,
        delay=0,
    )
    return game, output


def test_start_message_names_player():
    game, output = _game(ONE_MOVE_AWAY)
    assert output.getvalue() == "Puzzle is solvable. Let's start, Ann!\n"
    assert game.board.is_solvable()
    assert game.player.move_count == 0


def test_unsolvable_shuffle_is_redone():
    rng = _ScriptedRng([2, 1, 3, 4, 5, 6, 7, 8, 0], ONE_MOVE_AWAY)
    game = Game(3, "Ann", rng=rng, input_func=_inputs(), output=io.StringIO(), delay=0)
    assert rng.calls == 2
    assert game.board.is_solvable()


def test_player_solves_puzzle():
    game, output = _game(ONE_MOVE_AWAY, "d")
    game.run()
    text = output.getvalue()
    assert game.board.is_solved()
    assert game.player.move_count == 1
    assert "Move number: 1\n" in text
    assert text.endswith("Congratulations, Ann! You solved the puzzle in 1 moves.\n")


def test_refused_moves_are_not_counted():
    game, _ = _game(ONE_MOVE_AWAY, "x", "s", "d")
    game.run()
    assert game.player.move_count == 1
    assert game.board.is_solved()


def test_several_moves_on_one_line():
    game, _ = _game(ONE_MOVE_AWAY, "a d d")
    game.run()
    assert game.player.move_count == 3
    assert game.board.is_solved()


def test_handle_move_reports_result():
    game, output = _game(ONE_MOVE_AWAY)
    assert game.handle_move("s") is False
    assert game.handle_move("w") is True
    assert game.player.move_count == 1
    assert output.getvalue().endswith("Move number: 1\n")


def test_solver_finishes_the_game():
    game, output = _game(ONE_MOVE_AWAY, "r")
    game.run()
    text = output.getvalue()
    assert game.board.is_solved()
    assert game.player.move_count == 1
    assert "Solving...\n" in text
    assert "Current move count: 1\n" in text
    assert text.endswith("Puzzle solved in 1 moves.\n")
    assert "Congratulations" not in text


def test_solver_counts_moves_after_player_moves():
    game, _ = _game(ONE_MOVE_AWAY, "w", "r")
    game.run()
    assert game.board.is_solved()
    assert game.player.move_count > 1


def test_board_is_shown_before_prompt():
    game, output = _game(ONE_MOVE_AWAY, "d")
    game.run()
    text = output.getvalue()
    assert game.board.render() != text
    assert "7 _ 8 \n" in text
    assert "or 'r' to solve automatically: " in text


def test_end_of_input_raises():
    game, _ = _game(ONE_MOVE_AWAY)
    with pytest.raises(EOFError):
        game.run()