"""A point-and-click table for playing Coup with pygame."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

import pygame

from coupgame.factory import create_random_player
from coupgame.game import Game
from coupgame.player import Player
from coupgame.roles import Baron, Spy

WINDOW_SIZE = (1400, 800)
BASE_ACTIONS = ("gather", "tax", "bribe", "arrest", "sanction", "coup")
# Actions that need a second click on the target's card.
TARGETED_ACTIONS = frozenset(
    {"arrest", "sanction", "coup", "undo", "peekCoins", "blockArrest"}
)

_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)
_RED = (255, 0, 0)
_BUTTON = (200, 200, 250)
_DEAD = (200, 200, 200)
_CURRENT = (150, 200, 255)
_IDLE = (240, 240, 240)


def actions_for_role(role: str) -> list[str]:
    """Role-specific actions offered next to the common ones."""
    if role == "Spy":
        return ["peekCoins", "blockArrest"]
    if role == "Baron":
        return ["invest"]
    if role == "Merchant":
        return []
    return ["undo"]


def count_alive_players(players: Iterable[Player]) -> int:
    """Number of players still in the game."""
    return sum(1 for player in players if player.active)


def get_winner(players: Iterable[Player]) -> Optional[Player]:
    """The first player still in the game, or None if there is none."""
    return next((player for player in players if player.active), None)


@dataclass
class _Button:
    action: str
    rect: pygame.Rect


@dataclass
class _Card:
    player: Player
    y: int
    background: pygame.Rect = field(init=False)
    buttons: list[_Button] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.background = pygame.Rect(50, self.y, 1300, 100)

    def create_buttons(self, x_start: int) -> None:
        actions = [*BASE_ACTIONS, *actions_for_role(self.player.role())]
        self.buttons = [
            _Button(action, pygame.Rect(x_start + 100 * offset, self.y + 50, 90, 30))
            for offset, action in enumerate(actions)
        ]


class _Table:
    """State of one session: seated players, pending action and messages."""

    def __init__(self) -> None:
        self.game = Game()
        self.cards: list[_Card] = []
        self.player_counter = 1
        self.started = False
        self.over = False
        self.pending_actor: Optional[Player] = None
        self.pending_action = ""
        self.message = ""
        self.game_over_text = ""
        self.add_button = pygame.Rect(20, 10, 150, 40)
        self.start_button = pygame.Rect(190, 10, 150, 40)
        self.exit_button = pygame.Rect(600, 380, 150, 40)

    def _clear_pending(self) -> None:
        self.pending_actor = None
        self.pending_action = ""

    def add_player(self) -> None:
        if len(self.game.players()) >= Game.MAX_PLAYERS:
            self.message = "Max 6 players reached."
            return
        name = f"Player{self.player_counter}"
        self.player_counter += 1
        player = create_random_player(self.game, name)
        y = 70 + (len(self.game.players()) - 1) * 110
        self.cards.append(_Card(player, y))
        self.message = f"Added {player.name} as {player.role()}"

    def start(self) -> None:
        if len(self.game.players()) < 2:
            self.message = "Need at least 2 players."
            return
        self.started = True
        for card in self.cards:
            card.create_buttons(500)
        self.message = "Game started!"

    def press_button(self, card: _Card, action: str) -> None:
        player = card.player
        try:
            if action == "gather":
                player.gather()
            elif action == "tax":
                player.tax()
            elif action == "bribe":
                player.bribe()
            elif action == "invest" and isinstance(player, Baron):
                player.invest()
            else:
                self.pending_actor = player
                self.pending_action = action
                self.message = f"Click on target for {action}"
            if action not in TARGETED_ACTIONS:
                self._clear_pending()
        except Exception as exc:  # noqa: BLE001 - shown to the user
            self.message = f"Error: {exc}"
            self._clear_pending()

    def choose_target(self, target: Player) -> None:
        actor = self.pending_actor
        if actor is None or actor is target:
            return
        action = self.pending_action
        try:
            if action == "arrest":
                actor.arrest(target)
            elif action == "sanction":
                actor.sanction(target)
            elif action == "coup":
                actor.coup(target)
            elif action == "undo":
                actor.undo(target)
            elif action == "peekCoins" and isinstance(actor, Spy):
                actor.peek_coins(target)
            elif action == "blockArrest" and isinstance(actor, Spy):
                actor.block_arrest_on(target)
            self.message = f"{actor.name} performed {action} on {target.name}"
        except Exception as exc:  # noqa: BLE001 - shown to the user
            self.message = f"Error: {exc}"
        self._clear_pending()

    def click(self, pos: tuple[int, int]) -> bool:
        """Handle a left click; return False when the window should close."""
        if not self.started and self.add_button.collidepoint(pos):
            self.add_player()
        if not self.started and self.start_button.collidepoint(pos):
            self.start()
        if self.over and self.exit_button.collidepoint(pos):
            return False
        if self.started and not self.over:
            for card in self.cards:
                for button in card.buttons:
                    if button.rect.collidepoint(pos):
                        self.press_button(card, button.action)
            for card in self.cards:
                if card.background.collidepoint(pos):
                    self.choose_target(card.player)
        return True

    def update(self) -> None:
        if (
            self.started
            and not self.over
            and count_alive_players(self.game.get_players()) == 1
        ):
            self.over = True
            winner = get_winner(self.game.get_players())
            self.game_over_text = (
                f"Game Over! Winner: {winner.name}" if winner else "Game Over!"
            )


def _draw_text(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    pos: Sequence[int],
    color: tuple[int, int, int],
) -> None:
    surface.blit(font.render(text, True, color), pos)


def _draw(surface: pygame.Surface, table: _Table, fonts: dict[str, pygame.font.Font]) -> None:
    surface.fill(_WHITE)
    _draw_text(surface, fonts["title"], "Coup GUI", (460, 10), _BLACK)

    if not table.started:
        pygame.draw.rect(surface, (180, 220, 180), table.add_button)
        _draw_text(surface, fonts["label"], "Add Player", (30, 15), _BLACK)
        if len(table.game.players()) >= 2:
            pygame.draw.rect(surface, (180, 180, 255), table.start_button)
            _draw_text(surface, fonts["label"], "Start Game", (200, 15), _BLACK)

    current = table.game.current_player() if table.cards else None
    for card in table.cards:
        player = card.player
        if not player.active:
            colour = _DEAD
        elif player is current:
            colour = _CURRENT
        else:
            colour = _IDLE
        pygame.draw.rect(surface, colour, card.background)
        pygame.draw.rect(surface, _BLACK, card.background, 1)

        info = f"{player.name} ({player.role()}) - {player.coins} coins"
        if not player.active:
            info += " [OUT]"
        _draw_text(surface, fonts["label"], info, (60, card.y + 10), _BLACK)

        if table.started and not table.over:
            for button in card.buttons:
                pygame.draw.rect(surface, _BUTTON, button.rect)
                _draw_text(
                    surface,
                    fonts["button"],
                    button.action,
                    (button.rect.x + 5, button.rect.y + 5),
                    _BLACK,
                )

    if table.over:
        _draw_text(surface, fonts["title"], table.game_over_text, (400, 300), _RED)
        pygame.draw.rect(surface, (255, 100, 100), table.exit_button)
        _draw_text(surface, fonts["exit"], "Exit", (650, 385), _WHITE)

    _draw_text(surface, fonts["message"], table.message, (50, 760), _RED)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(description="Play Coup at a shared screen.")
    parser.parse_args(argv)

    pygame.init()
    try:
        surface = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Coup - GUI")
        fonts = {
            "title": pygame.font.Font(None, 40),
            "label": pygame.font.Font(None, 24),
            "button": pygame.font.Font(None, 18),
            "exit": pygame.font.Font(None, 28),
            "message": pygame.font.Font(None, 26),
        }
        table = _Table()
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    if not table.click(event.pos):
                        running = False
            table.update()
            _draw(surface, table, fonts)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())