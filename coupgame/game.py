"""Turn management and bookkeeping for a game of Coup."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from coupgame.player import Player


class Game:
    """Holds the players of one game and decides whose turn it is."""

    MAX_PLAYERS = 6

    def __init__(self) -> None:
        self._players: list[Player] = []
        self._index_turn = 0
        self._previous_player: Optional[Player] = None
        self.last_dead: Optional[Player] = None
        # A player cannot be arrested twice in a row.
        self.last_arrested: Optional[Player] = None

    def next_turn(self) -> None:
        """Pass the turn on, honouring extra turns and skipping dead players."""
        if self.active_players() == 1:
            print(f"Game Over! The winner is: {self.winner()}")
            return

        self._on_end_turn()

        current = self.current_player()
        if current.another_turn:
            current.clear_another_turn()
            return

        self._index_turn = (self._index_turn + 1) % len(self._players)

        upcoming = self._players[self._index_turn]
        if not upcoming.active:
            upcoming.last_move = ""
            self.next_turn()

        self._players[self._index_turn].on_turn_start()

    def _on_end_turn(self) -> None:
        current = self.current_player()
        if current.active:
            self._previous_player = current
            current.open_access()

    def add_player(self, player: Player) -> None:
        """Register a player; raises ValueError once the table is full."""
        if len(self._players) > self.MAX_PLAYERS:
            raise ValueError("max capacity of Players")
        self._players.append(player)

    def get_players(self) -> tuple[Player, ...]:
        """All players, dead or alive, in seating order."""
        return tuple(self._players)

    def turn(self) -> str:
        """Name of the player whose turn it is."""
        return self._players[self._index_turn].name

    def current_player(self) -> Player:
        """The player whose turn it is."""
        return self._players[self._index_turn]

    def players(self) -> list[str]:
        """Names of all players still in the game."""
        return [player.name for player in self._players if player.active]

    def winner(self) -> str:
        """Name of the last player standing; raises RuntimeError otherwise."""
        alive = [player.name for player in self._players if player.active]
        if len(alive) == 1:
            return alive[0]
        raise RuntimeError("No winner yet!")

    def set_last_dead(self, target: Player) -> None:
        """Remember the most recently eliminated player."""
        self.last_dead = target

    def active_players(self) -> int:
        """Number of players still in the game."""
        return sum(1 for player in self._players if player.active)