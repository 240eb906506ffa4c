"""The six concrete roles and their special abilities."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from coupgame.player import Player


@contextmanager
def _once_per_turn(player: Player, message: str) -> Iterator[None]:
    """Allow the block to use ``player``'s ability; spend it only on success."""
    player._require_ability(message)
    yield
    player.special_ability = False


class Governor(Player):
    """Collects three coins on tax and can cancel another player's tax."""

    def role(self) -> str:
        return "Governor"

    def tax(self) -> None:
        """Take three coins from the treasury."""
        self._turn_check()
        if self.sanctioned:
            raise RuntimeError("You are sanctioned.")
        self.add_coins(3)
        self.open_access()
        self._end_turn("tax")

    def undo(self, target: Player) -> None:
        """Cancel ``target``'s last tax, once per turn."""
        if not self.active:
            raise RuntimeError("your are not in the game!")
        if target is self:
            raise RuntimeError("You cant undoTax on yourself!")
        with _once_per_turn(self, "Governor can only undo tax once per turn"):
            if target.last_move != "tax":
                raise RuntimeError(f"Governor cannot undo {target.last_move}")
            is_governor = target.role() == "Governor"
            target.reduce_coins(3 if is_governor else 2)
            if not is_governor:
                print(f" Governor undo tax on: {target.name}")


class Spy(Player):
    """Can look at coins and stop another player from arresting."""

    def role(self) -> str:
        return "Spy"

    def peek_coins(self, target: Player) -> int:
        """Return ``target``'s coins; only allowed during the spy's turn."""
        self._require_turn("Not your turn!")
        return target.coins

    def block_arrest_on(self, target: Player) -> None:
        """Forbid ``target`` from arresting, once per turn."""
        self._require_turn("BlockArrest can be preformed only at your turn!")
        if not self.active:
            raise RuntimeError(" your are dead")
        if not target.active:
            raise RuntimeError("Target is not in the game")
        with _once_per_turn(self, "BlockArrest can be preformed only once each turn!"):
            target.block_arrest()
        print("Spy preformed BlockArrest")


class Baron(Player):
    """Can invest three coins for six, and is compensated when sanctioned."""

    def role(self) -> str:
        return "Baron"

    def tax(self) -> None:
        """Take two coins, or one coin as compensation while sanctioned."""
        self._turn_check()
        if self.sanctioned:
            print("Player is under sanction but get 1 coin as Compensation")
        self.add_coins(1 if self.sanctioned else 2)
        self._end_turn("tax")

    def invest(self) -> None:
        """Turn three coins into six, once per turn."""
        self._turn_check()
        if self.coins < 3:
            raise RuntimeError("Player do not have enough 3 coins to invest")
        with _once_per_turn(self, "Baron can only invest once per turn"):
            self.reduce_coins(3)
            self.add_coins(6)
            self._end_turn("invest")


class General(Player):
    """Can pay five coins to reverse a coup."""

    def role(self) -> str:
        return "General"

    def undo(self, target: Player) -> None:
        """Revive the player that ``target`` last couped."""
        if target.last_move != "coup":
            raise RuntimeError(f"General cannot undo {target.last_move}")
        if not self.active:
            raise RuntimeError("Player is not alive")
        if self._coins < 5:
            raise RuntimeError("not enough coins to undo coup")
        with _once_per_turn(self, "General can only undo coup once per turn"):
            if target.last_couped is None:
                raise RuntimeError("General cannot undo coup")
            self._coins -= 5
            target.last_couped.reactivate()


class Judge(Player):
    """Can cancel another player's bribe."""

    def role(self) -> str:
        return "Judge"

    def undo(self, target: Player) -> None:
        """Take away the extra turn ``target`` bought with a bribe."""
        if not target.active:
            raise RuntimeError("Player is not alive")
        if target.last_move != "bribe":
            raise RuntimeError(f"Judge cannot undo {target.last_move}")
        with _once_per_turn(self, "Judge can only undo bribe once per round"):
            target.clear_another_turn()


class Merchant(Player):
    """Earns a bonus coin when starting a turn with three or more."""

    def role(self) -> str:
        return "Merchant"

    def on_turn_start(self) -> None:
        if self._coins >= 3:
            self._coins += 1