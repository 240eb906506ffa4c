# coupgame

A small implementation of the card game *Coup* for two to six players at one
screen. Players take turns gathering coins, taxing, bribing, arresting,
sanctioning and staging coups until only one player remains. Each player has
one fixed role with its own special ability.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing at the table

```
coupgame
```

This opens a pygame window. Click **Add Player** to seat a player. Each new
player gets a random role, and at most six can be seated. Once at least two
are seated, click **Start Game**. Each player's card shows buttons for the
common actions (gather, tax, bribe, arrest, sanction, coup) and for the
actions of that player's role. Actions that need a target (arrest, sanction,
coup, undo, peekCoins, blockArrest) are finished by clicking the target
player's card. Errors, such as acting out of turn, appear at the bottom of
the window. When one player is left, the window names the winner and shows an
**Exit** button.

## Using the library

```python
from coupgame.game import Game
from coupgame.roles import Governor, Spy

game = Game()
gov = Governor(game, "gov")
spy = Spy(game, "spy")

gov.tax()                  # a Governor collects 3 coins
print(spy.peek_coins(gov)) # 3
spy.block_arrest_on(gov)   # gov cannot arrest during his next turn
spy.gather()
print(game.turn())         # "gov"
```

A player registers itself with the game when it is created. Turns follow the
order of creation.

- `Game`: `turn()` gives the name of the player whose turn it is, and
  `current_player()` gives that player. `players()` lists the names of the
  players still in the game. `get_players()` gives every player, in or out.
  `active_players()` counts the players still in. `winner()` names the last
  player standing, or raises `RuntimeError` while more than one remains.
- `Player` (in `coupgame.player`) provides the common actions: `gather()`,
  `tax()`, `bribe()`, `arrest(target)`, `sanction(target)`, `coup(target)` and
  `undo(target)`. It also has the `coins` property and `add_coins(amount)` /
  `reduce_coins(amount)`.

Most actions end the turn. `bribe()` costs 4 coins and gives the player an
extra turn without ending the current one. `sanction` costs 3 coins, or 4
against a Judge. It stops the target from gathering or taxing until the end of
the target's turn. `coup` costs 7 coins and removes the target from the game.

A move that breaks the rules raises `RuntimeError` or `ValueError`. Such moves
include:

- acting out of turn
- acting while out of the game
- lacking coins
- being sanctioned
- holding ten or more coins and doing anything other than a coup
- arresting the same player twice in a row

A role without an undo raises `coupgame.player.UndoNotAllowed`, which is a
`RuntimeError`.

### Roles (`coupgame.roles`)

| Role      | Ability |
|-----------|---------|
| Governor  | Tax yields 3 coins. `undo(target)` cancels another player's tax, once per turn. |
| Spy       | `peek_coins(target)` during its own turn. `block_arrest_on(target)` stops a player from arresting, once per turn. |
| Baron     | `invest()` turns 3 coins into 6, once per turn. A sanctioned tax still yields 1 coin. |
| General   | `undo(target)` pays 5 coins to revive the player that `target` last couped. A General with 5 coins revives himself automatically when couped. Being arrested costs him nothing. |
| Judge     | `undo(target)` cancels the extra turn bought with a bribe. Sanctioning a Judge costs 4 coins. |
| Merchant  | Gains a coin when starting a turn with 3 or more. When arrested, pays 2 coins to the bank. |

`coupgame.factory.create_random_player(game, name, rng=None)` seats a player
with a role drawn at random. `rng` may be any object with a
`randint(a, b)` method, such as a seeded `random.Random`.

## What it does not do

Roles are fixed and visible to everyone. There are no hidden cards, no
bluffing and no challenges. Games cannot be saved, and there is no network
play: everyone plays at the same window.