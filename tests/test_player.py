import pytest

from coupgame.game import Game
from coupgame.player import Player


def _role_class(role_name):
    return type(role_name, (Player,), {"role": lambda self: role_name})


Commoner = _role_class("Commoner")
FakeGeneral = _role_class("General")
FakeMerchant = _role_class("Merchant")
FakeJudge = _role_class("Judge")


@pytest.fixture
def game():
    return Game()


@pytest.fixture
def seat(game):
    def _seat(*names, cls=Commoner):
        return [cls(game, name) for name in names]

    return _seat


@pytest.fixture
def pair(seat):
    return seat("a", "b")


@pytest.fixture
def versus(seat):
    """An ordinary player seated first, then a target of the given role."""

    def _versus(cls):
        (a,) = seat("a")
        (t,) = seat("t", cls=cls)
        return a, t

    return _versus


def test_player_is_abstract(game):
    with pytest.raises(TypeError):
        Player(game, "x")
    assert game.get_players() == ()


def test_new_player_defaults(pair):
    a, _ = pair
    assert (a.coins, a.active, a.last_move, a.role()) == (0, True, "", "Commoner")


def test_add_and_reduce_coins_round_trip(pair):
    a, _ = pair
    a.add_coins(5)
    assert a.coins == 5
    a.reduce_coins(5)
    assert a.coins == 0


@pytest.mark.parametrize(
    "method, amount, error",
    [("add_coins", -1, ValueError), ("reduce_coins", -1, ValueError), ("reduce_coins", 1, RuntimeError)],
)
def test_coin_argument_errors(pair, method, amount, error):
    a, _ = pair
    with pytest.raises(error):
        getattr(a, method)(amount)
    assert a.coins == 0


def test_gather_out_of_turn_raises(pair):
    a, b = pair
    a.gather()
    assert a.last_move == "gather"
    b.gather()
    with pytest.raises(RuntimeError):
        b.gather()
    assert b.coins == 1


def test_tax_records_move_and_passes_turn(game, pair):
    a, _ = pair
    a.tax()
    assert (a.coins, a.last_move, game.turn()) == (2, "tax", "b")


@pytest.mark.parametrize(
    "action",
    [
        lambda a, b: a.gather(),
        lambda a, b: a.tax(),
        lambda a, b: a.bribe(),
        lambda a, b: a.arrest(b),
        lambda a, b: a.sanction(b),
    ],
)
def test_ten_coins_force_coup(pair, action):
    a, b = pair
    a.add_coins(10)
    with pytest.raises(ValueError):
        action(a, b)
    assert a.coins == 10


def test_bribe_grants_extra_turn(game, pair):
    a, _ = pair
    a.add_coins(4)
    a.bribe()
    assert (a.coins, a.another_turn, a.last_move) == (0, True, "bribe")
    for expected in ("a", "a", "b"):
        assert game.turn() == expected
        if expected == "a":
            a.gather()


def test_bribe_needs_four_coins(pair):
    a, _ = pair
    a.add_coins(3)
    with pytest.raises(RuntimeError):
        a.bribe()
    assert a.another_turn is False


def test_clear_another_turn_cancels_bribe(game, pair):
    a, _ = pair
    a.add_coins(4)
    a.bribe()
    a.clear_another_turn()
    a.gather()
    assert game.turn() == "b"


def test_arrest_moves_one_coin(game, pair):
    a, b = pair
    b.add_coins(3)
    a.arrest(b)
    assert (a.coins, b.coins, a.last_move) == (1, 2, "arrest")
    assert game.last_arrested is b


def test_arrest_same_target_twice_in_a_row(seat):
    a, b, c = seat("a", "b", "c")
    c.add_coins(2)
    a.arrest(c)
    with pytest.raises(RuntimeError):
        b.arrest(c)


def test_arrest_target_without_coins(game, pair):
    a, b = pair
    with pytest.raises(RuntimeError):
        a.arrest(b)
    assert game.turn() == "a"


def test_blocked_player_cannot_arrest(game, pair):
    a, b = pair
    b.add_coins(2)
    a.block_arrest()
    with pytest.raises(RuntimeError):
        a.arrest(b)
    a.open_access()
    a.arrest(b)
    assert game.last_arrested is b


@pytest.mark.parametrize("cls, coins_after", [(FakeGeneral, 2), (FakeMerchant, 0)])
def test_arrest_special_targets_pay_nothing_to_arrester(game, versus, cls, coins_after):
    a, t = versus(cls)
    t.add_coins(2)
    a.arrest(t)
    assert (a.coins, t.coins) == (0, coins_after)
    assert game.last_arrested is t


def test_arrest_merchant_with_one_coin(versus):
    a, m = versus(FakeMerchant)
    m.add_coins(1)
    with pytest.raises(ValueError):
        a.arrest(m)


def test_sanction_blocks_economy(pair):
    a, b = pair
    a.add_coins(3)
    a.sanction(b)
    assert (a.coins, b.sanctioned) == (0, True)
    for action in (b.gather, b.tax):
        with pytest.raises(RuntimeError):
            action()


def test_sanction_already_sanctioned(seat):
    a, b, c = seat("a", "b", "c")
    a.add_coins(3)
    b.add_coins(3)
    a.sanction(c)
    with pytest.raises(RuntimeError):
        b.sanction(c)


def test_sanction_judge_needs_four(versus):
    a, j = versus(FakeJudge)
    a.add_coins(3)
    with pytest.raises(RuntimeError):
        a.sanction(j)
    a.add_coins(1)
    a.sanction(j)
    assert (a.coins, j.sanctioned) == (0, True)


def test_coup_eliminates_target(game, seat):
    a, b, _ = seat("a", "b", "c")
    a.add_coins(7)
    a.coup(b)
    assert (b.active, a.coins, a.last_move) == (False, 0, "coup")
    assert a.last_couped is b
    assert game.last_dead is b
    assert game.turn() == "c"
    with pytest.raises(RuntimeError):
        b.gather()


def test_coup_errors(seat):
    a, b, c = seat("a", "b", "c")
    a.add_coins(6)
    with pytest.raises(RuntimeError):
        a.coup(b)
    b.add_coins(7)
    with pytest.raises(RuntimeError):
        b.coup(a)
    a.add_coins(1)
    a.deactivate(c)
    with pytest.raises(RuntimeError):
        a.coup(c)


def test_coup_on_rich_general_self_revives(game, versus):
    a, g = versus(FakeGeneral)
    a.add_coins(7)
    g.add_coins(5)
    a.coup(g)
    assert (g.active, g.coins, a.coins, a.special_ability) == (True, 0, 0, False)
    assert game.turn() == "t"


def test_coup_on_poor_general_is_final(seat, versus, capsys):
    a, g = versus(FakeGeneral)
    seat("c")
    a.add_coins(7)
    a.coup(g)
    assert g.active is False
    assert "your are total dead" in capsys.readouterr().out


def test_base_undo_raises(pair):
    a, b = pair
    with pytest.raises(RuntimeError, match="Player could not undo"):
        a.undo(b)


def test_reactivate_after_deactivate(pair):
    a, b = pair
    a.deactivate(b)
    assert b.active is False
    b.reactivate()
    assert b.active is True


def test_on_turn_start_resets_special_ability(pair):
    a, _ = pair
    a.special_ability = False
    a.on_turn_start()
    assert a.special_ability is True