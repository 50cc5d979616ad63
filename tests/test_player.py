from slidepuzzle.player import Player


def test_new_player_has_no_moves():
    player = Player("Ann")
    assert player.name == "Ann"
    assert player.move_count == 0


def test_increment_counts_each_move():
    player = Player("Ann")
    for _ in range(5):
        player.increment_moves()
    assert player.move_count == 5


def test_players_count_separately():
    first = Player("Ann")
    second = Player("Bob")
    first.increment_moves()
    assert first.move_count == 1
    assert second.move_count == 0