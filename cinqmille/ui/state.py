"""
Cinq Mille - UI Session State

Folds orchestrator outcomes into immutable snapshots the view renders.
The session is the single writer in front of the orchestrator: every
button press goes through it, one command at a time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Iterable

from cinqmille.engine.base import MAX_DICE, Player
from cinqmille.engine.dice import select_dice_from_roll
from cinqmille.engine.events import GameEvent, GameOutcome
from cinqmille.engine.game import GameOrchestrator
from cinqmille.engine.scoring import ScoreEngine

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to Cinq Mille!"

_TURN_END_MESSAGES = {
    GameEvent.PLAYER_OPENED_AND_SCORED: "Player {player} opened with {points}! Total: {total}.",
    GameEvent.PLAYER_SCORED: "Player {player} scored {points}. Total: {total}.",
    GameEvent.PLAYER_FAILED_TO_OPEN: "Player {player} could not open with {points}.",
    GameEvent.PLAYER_BUSTED: "Player {player} busted!",
}


@dataclass(frozen=True)
class PlayerUiState:
    """Display subset of a player."""
    id: int
    total_score: int
    has_opened: bool
    is_current_player: bool


@dataclass(frozen=True)
class GameUiState:
    """
    Everything the game screen needs at one moment.

    Attributes:
        current_dice: Faces of the most recent roll
        current_turn_score: Unbanked points of the current player
        players: Scoreboard rows in seating order
        current_player_id: Whose turn it is, None outside a game
        message: Status line for the player
        roll_enabled: Whether the Roll button is live
        select_enabled: Whether dice can be set aside
        bank_enabled: Whether the Bank button is live
        selected_indices: Dice toggled for the next selection
        winner_id: Set once somebody has won
    """
    current_dice: tuple[int, ...] = field(default_factory=tuple)
    current_turn_score: int = 0
    players: tuple[PlayerUiState, ...] = field(default_factory=tuple)
    current_player_id: int | None = None
    message: str = WELCOME_MESSAGE
    roll_enabled: bool = False
    select_enabled: bool = False
    bank_enabled: bool = False
    selected_indices: tuple[int, ...] = field(default_factory=tuple)
    winner_id: int | None = None

    @property
    def is_game_over(self) -> bool:
        return self.winner_id is not None

    @property
    def selected_dice(self) -> tuple[int, ...]:
        return select_dice_from_roll(self.current_dice, self.selected_indices)

    @property
    def selection_score(self) -> int:
        """Points the toggled dice would be worth if set aside now."""
        return ScoreEngine.calculate_score(self.selected_dice)


def _player_rows(players: Iterable[Player], current_id: int | None) -> tuple[PlayerUiState, ...]:
    return tuple(
        PlayerUiState(
            id=p.id,
            total_score=p.total_score,
            has_opened=p.has_opened,
            is_current_player=p.id == current_id,
        )
        for p in players
    )


class GameSession:
    """Drives one GameOrchestrator and keeps the matching GameUiState."""

    def __init__(self, orchestrator: GameOrchestrator | None = None) -> None:
        self._game = orchestrator if orchestrator is not None else GameOrchestrator()
        self._state = GameUiState()

    @property
    def game(self) -> GameOrchestrator:
        return self._game

    @property
    def state(self) -> GameUiState:
        return self._state

    def start_game(self, player_count: int) -> GameOutcome:
        return self._apply(self._game.start_game(player_count))

    def roll(self) -> GameOutcome | None:
        """Roll if the Roll button is live; None when the press is ignored."""
        if not self._state.roll_enabled:
            return None
        return self._apply(self._game.roll_current_turn())

    def toggle_die(self, index: int) -> GameUiState:
        """Add or remove a die from the pending selection."""
        if not self._state.select_enabled or not 0 <= index < len(self._state.current_dice):
            return self._state
        selected = list(self._state.selected_indices)
        if index in selected:
            selected.remove(index)
        else:
            selected.append(index)
        self._state = replace(self._state, selected_indices=tuple(selected))
        return self._state

    def select(self, indices: Iterable[int] | None = None) -> GameOutcome:
        """Set aside the given dice, or the toggled ones when omitted."""
        chosen = list(indices) if indices is not None else list(self._state.selected_indices)
        return self._apply(self._game.select_current_turn_dice(chosen))

    def bank(self) -> GameOutcome | None:
        """Bank if the Bank button is live; None when the press is ignored."""
        if not self._state.bank_enabled:
            return None
        return self._apply(self._game.bank_current_turn())

    def _apply(self, outcome: GameOutcome) -> GameOutcome:
        self._state = self._reduce(self._state, outcome)
        return outcome

    def _reduce(self, state: GameUiState, outcome: GameOutcome) -> GameUiState:
        event = outcome.event
        game = self._game

        if event == GameEvent.GAME_STARTED:
            first = outcome.player
            return GameUiState(
                players=_player_rows(outcome.players, first.id),
                current_player_id=first.id,
                message=f"Player {first.id}, you start!",
                roll_enabled=True,
            )

        if event == GameEvent.PLAYER_TURN_STARTED:
            return self._next_turn(state, f"Player {outcome.player.id}'s turn. Roll the dice!")

        if event == GameEvent.DICE_ROLLED:
            return replace(
                state,
                current_dice=outcome.dice,
                message="Select the dice to set aside.",
                roll_enabled=False,
                select_enabled=True,
                bank_enabled=False,
                selected_indices=tuple(),
            )

        if event == GameEvent.DICE_SCORED:
            hot = " Hot dice!" if outcome.next_roll_dice_count == MAX_DICE else ""
            return replace(
                state,
                current_turn_score=outcome.turn_total,
                message=(
                    f"Turn score: {outcome.turn_total}.{hot} "
                    f"Roll {outcome.next_roll_dice_count} dice or bank."
                ),
                roll_enabled=outcome.can_roll_again,
                select_enabled=False,
                bank_enabled=True,
                selected_indices=tuple(),
            )

        if outcome.is_invalid:
            prefix = "Invalid action: " if event == GameEvent.INVALID_TURN_ACTION else ""
            return replace(state, message=f"{prefix}{outcome.message}")

        if event == GameEvent.PLAYER_WON:
            winner = outcome.player
            return replace(
                state,
                players=_player_rows(game.players, None),
                current_player_id=None,
                current_dice=tuple(),
                message=f"Player {winner.id} wins with {outcome.final_score} points! Game over.",
                roll_enabled=False,
                select_enabled=False,
                bank_enabled=False,
                selected_indices=tuple(),
                winner_id=winner.id,
            )

        if not outcome.ends_turn:
            logger.warning("Unhandled outcome %s", event.name)
            return state

        text = _TURN_END_MESSAGES[event].format(
            player=outcome.player.id,
            points=outcome.turn_total,
            total=outcome.new_total,
        )
        return self._next_turn(state, f"{text} Player {game.current_player_id}'s turn.")

    def _next_turn(self, state: GameUiState, message: str) -> GameUiState:
        current_id = self._game.current_player_id
        return replace(
            state,
            players=_player_rows(self._game.players, current_id),
            current_player_id=current_id,
            current_dice=tuple(),
            current_turn_score=0,
            message=message,
            roll_enabled=True,
            select_enabled=False,
            bank_enabled=False,
            selected_indices=tuple(),
        )
