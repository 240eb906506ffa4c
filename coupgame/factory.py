"""Creating players with a randomly chosen role."""

from __future__ import annotations

import random
from typing import Optional, Protocol

from coupgame.game import Game
from coupgame.player import Player
from coupgame.roles import Baron, General, Governor, Judge, Merchant, Spy

ROLES: tuple[type[Player], ...] = (Governor, Spy, Baron, General, Judge, Merchant)

_DEFAULT_RNG = random.Random()


class _RandInt(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def create_random_player(
    game: Game, name: str, rng: Optional[_RandInt] = None
) -> Player:
    """Seat a new player called ``name`` in ``game`` with a random role."""
    generator = rng if rng is not None else _DEFAULT_RNG
    choice = generator.randint(0, len(ROLES) - 1)
    if not 0 <= choice < len(ROLES):
        raise RuntimeError("Invalid role selected")
    return ROLES[choice](game, name)