"""The base player and the actions every role shares."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from coupgame.game import Game


class UndoNotAllowed(RuntimeError):
    """Raised when a player whose role has no undo tries to use one."""

    def __init__(self, actor: Player, target: Player) -> None:
        super().__init__("Player could not undo")
        self.actor = actor
        self.target = target
        self.move = target.last_move


class Player(ABC):
    """A seat at the table; concrete roles supply :meth:`role`."""

    def __init__(self, game: Game, name: str) -> None:
        self.game = game
        self.name = name
        self._coins = 0
        self.sanctioned = False
        self.last_move = ""
        self.cant_arrest = False
        self.another_turn = False
        self.last_couped: Optional[Player] = None
        self.active = True
        self.special_ability = True
        game.add_player(self)

    @abstractmethod
    def role(self) -> str:
        """Name of this player's role."""

    @property
    def coins(self) -> int:
        """Number of coins the player holds."""
        return self._coins

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, coins={self._coins})"

    def add_coins(self, amount: int) -> None:
        if amount < 0:
            raise ValueError("Cannot add negative coins")
        self._coins += amount

    def reduce_coins(self, amount: int) -> None:
        if amount < 0:
            raise ValueError("Cannot reduce negative coins")
        if self._coins < amount:
            raise RuntimeError("Not enough coins to reduce")
        self._coins -= amount

    # ------------------------------------------------------------ actions

    def gather(self) -> None:
        """Take one coin from the treasury."""
        self._sanction_check()
        self._coins += 1
        self._end_turn("gather")

    def tax(self) -> None:
        """Take two coins from the treasury."""
        self._sanction_check()
        self.add_coins(2)
        self._end_turn("tax")

    def bribe(self) -> None:
        """Pay four coins for an extra turn; does not end the turn."""
        self._turn_check()
        if self._coins < 4:
            raise RuntimeError("Player has no money for this action")
        self._coins -= 4
        self.another_turn = True
        self.last_move = "bribe"

    def arrest(self, target: Player) -> None:
        """Take a coin from ``target``, with role-specific exceptions."""
        self._arrest_check(target)
        role = target.role()
        if role == "Merchant":
            if target.coins < 2:
                raise ValueError("Merchant Target doesn't have 2 coins.")
            target.reduce_coins(2)
        elif role != "General":
            # A general takes the coin straight back, so nothing moves for him.
            target._coins -= 1
            self.add_coins(1)
        self.game.last_arrested = target
        self._end_turn("arrest")

    def sanction(self, target: Player) -> None:
        """Block ``target`` from gather and tax until their turn ends."""
        self._sanction_target_check(target)
        self._coins -= 4 if target.role() == "Judge" else 3
        target.sanctioned = True
        self._end_turn("sanction")

    def coup(self, target: Player) -> None:
        """Pay seven coins to eliminate ``target``."""
        if not self.active:
            raise RuntimeError("Your dead!")
        self._require_turn("Not your turn!")
        if not target.active:
            raise RuntimeError("Target player is dead and canot be couped")
        if self.coins < 7:
            raise RuntimeError("You dont have enough coins to preform coup action")

        self.reduce_coins(7)
        self.deactivate(target)
        self.last_couped = target
        self.last_move = "coup"
        print(f"Player: {self.game.turn()} preformed coup")

        if target.role() == "General":
            if target._coins >= 5 and target.special_ability:
                self.special_ability = False
                target._coins -= 5
                target.reactivate()
            else:
                print("your are total dead")
        self.game.next_turn()

    def undo(self, target: Player) -> None:
        """Undo another player's action; roles without an undo refuse."""
        error = UndoNotAllowed(self, target)
        raise error

    # ------------------------------------------------------------ state

    def open_access(self) -> None:
        """Lift a sanction and an arrest block."""
        self.sanctioned = False
        self.cant_arrest = False

    def block_arrest(self) -> None:
        """Forbid this player from arresting until their turn ends."""
        self.cant_arrest = True

    def deactivate(self, target: Player) -> None:
        """Mark ``target`` as out of the game."""
        target.active = False
        self.game.set_last_dead(target)

    def reactivate(self) -> None:
        """Bring this player back into the game."""
        self.active = True

    def clear_another_turn(self) -> None:
        """Drop a pending extra turn."""
        self.another_turn = False

    def on_turn_start(self) -> None:
        """Hook run as this player's turn begins."""
        self.special_ability = True

    # ------------------------------------------------------------ helpers

    def _end_turn(self, move: str) -> None:
        self.last_move = move
        self.game.next_turn()

    def _require_turn(self, message: str) -> None:
        if self.name != self.game.turn():
            raise RuntimeError(message)

    def _require_ability(self, message: str) -> None:
        if not self.special_ability:
            raise RuntimeError(message)

    def _turn_check(self) -> None:
        if not self.active:
            raise RuntimeError("your not active!")
        self._require_turn("Not your turn!")
        if self._coins >= 10:
            raise ValueError("Player must preform Coup")

    def _targeted_check(self, target: Player, verb: str) -> None:
        self._turn_check()
        if not target.active:
            raise RuntimeError(f"Target player is dead and canot be {verb}")

    def _sanction_check(self) -> None:
        self._turn_check()
        if self.sanctioned:
            raise RuntimeError("Player is sanctioned and can not preform this action")

    def _sanction_target_check(self, target: Player) -> None:
        self._targeted_check(target, "sanctioned")
        if target.sanctioned:
            raise RuntimeError("Target player is already sanctioned")
        if self._coins < 3:
            raise RuntimeError("Player has no money for this action")
        if target.role() == "Judge" and self._coins < 4:
            raise RuntimeError("Player has no money for this action on Judge")

    def _arrest_check(self, target: Player) -> None:
        self._targeted_check(target, "arrested")
        if self.game.last_arrested is target:
            raise RuntimeError("Player canot be arrested twice in a row")
        if self.cant_arrest:
            raise RuntimeError("Spy avoid you to preform arrest move")
        if target.coins < 1:
            raise RuntimeError("Target player has no coins, try again")