import pytest

from coupgame.game import Game
from coupgame.player import Player


class Commoner(Player):
    def role(self):
        return "Commoner"


def _table(*names):
    game = Game()
    return game, [Commoner(game, name) for name in names]


def test_turn_starts_with_first_player_and_rotates():
    game, (a, b) = _table("a", "b")
    for player, expected_next in [(a, "b"), (b, "a")]:
        assert game.turn() == player.name
        player.gather()
        assert game.turn() == expected_next


def test_current_player_matches_turn():
    game, (a, _) = _table("a", "b")
    assert game.current_player() is a
    a.gather()
    assert game.current_player().name == game.turn() == "b"


def test_get_players_keeps_seating_order():
    game, players = _table("a", "b", "c")
    assert list(game.get_players()) == players


def test_players_lists_only_active_names():
    game, (a, b, _) = _table("a", "b", "c")
    a.deactivate(b)
    assert game.players() == ["a", "c"]
    assert game.active_players() == 2


def test_winner_requires_single_survivor():
    game, (a, *others) = _table("a", "b", "c")
    with pytest.raises(RuntimeError):
        game.winner()
    for other in others:
        a.deactivate(other)
    assert game.winner() == "a"


def test_set_last_dead_records_target():
    game, (a, b) = _table("a", "b")
    a.deactivate(b)
    assert game.last_dead is b
    game.set_last_dead(a)
    assert game.last_dead is a


def test_add_player_rejects_beyond_capacity():
    game, _ = _table(*(f"p{i}" for i in range(7)))
    with pytest.raises(ValueError):
        Commoner(game, "extra")
    assert len(game.get_players()) == 7


def test_next_turn_skips_dead_player_and_clears_move():
    game, (a, b, _) = _table("a", "b", "c")
    b.last_move = "gather"
    a.deactivate(b)
    a.gather()
    assert game.turn() == "c"
    assert b.last_move == ""


def test_next_turn_with_one_survivor_announces_winner(capsys):
    game, (a, b) = _table("a", "b")
    a.deactivate(b)
    game.next_turn()
    assert game.turn() == "a"
    assert "Game Over! The winner is: a" in capsys.readouterr().out


def test_end_of_turn_lifts_sanction_of_leaving_player():
    game, (a, _) = _table("a", "b")
    a.sanctioned = True
    a.cant_arrest = True
    game.next_turn()
    assert (a.sanctioned, a.cant_arrest) == (False, False)
    assert game.turn() == "b"


def test_extra_turn_is_consumed_by_next_turn():
    game, (a, _) = _table("a", "b")
    a.another_turn = True
    game.next_turn()
    assert (game.turn(), a.another_turn) == ("a", False)
    game.next_turn()
    assert game.turn() == "b"


def test_turn_start_restores_special_ability():
    _, (a, b) = _table("a", "b")
    b.special_ability = False
    a.gather()
    assert b.special_ability is True