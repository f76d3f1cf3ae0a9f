"""
Cinq Mille - Game Orchestrator

Owns the roster, the seat whose turn it is and the open/win thresholds.
One TurnStateMachine is live at a time; when a turn busts or banks the
orchestrator moves play to the next seat with a fresh machine.

Players are immutable values: every score change replaces the player in
the roster tuple instead of mutating a shared record.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Callable, Iterable

from cinqmille.engine.base import GameConfig, Player, TurnState
from cinqmille.engine.dice import DiceSource, RandomDiceSource
from cinqmille.engine.events import GameEvent, GameOutcome, TurnEvent, TurnOutcome
from cinqmille.engine.turn import TurnStateMachine
from cinqmille.engine.validators import validate_player_count

if TYPE_CHECKING:
    from cinqmille.config.settings import Settings

logger = logging.getLogger(__name__)


class GameOrchestrator:
    """
    Full-game state machine for Cinq Mille.

    Every public command returns exactly one GameOutcome. Calls are not
    serialized internally: a host that can issue commands concurrently
    must queue them itself.
    """

    def __init__(
        self,
        dice_source: DiceSource | None = None,
        config: GameConfig | None = None,
    ) -> None:
        self._dice_source = dice_source if dice_source is not None else RandomDiceSource()
        self._config = config if config is not None else GameConfig()
        self._players: tuple[Player, ...] = tuple()
        self._current_index: int | None = None
        self._in_progress = False
        self._turn = TurnStateMachine(self._dice_source)

    @classmethod
    def from_settings(cls, settings: "Settings") -> "GameOrchestrator":
        """Build an orchestrator from application settings."""
        return cls(
            dice_source=RandomDiceSource(seed=settings.dice_seed),
            config=GameConfig(
                opening_score=settings.opening_score,
                winning_score=settings.winning_score,
            ),
        )

    # -- read-only views -------------------------------------------------

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def players(self) -> tuple[Player, ...]:
        return self._players

    @property
    def in_progress(self) -> bool:
        return self._in_progress

    @property
    def current_player(self) -> Player | None:
        if self._current_index is None:
            return None
        return self._players[self._current_index]

    @property
    def current_player_id(self) -> int | None:
        player = self.current_player
        return player.id if player is not None else None

    @property
    def turn_state(self) -> TurnState:
        return self._turn.state

    def get_player(self, player_id: int) -> Player | None:
        for player in self._players:
            if player.id == player_id:
                return player
        return None

    # -- commands ----------------------------------------------------------

    def start_game(self, player_count: int) -> GameOutcome:
        """
        Seat ``player_count`` players and hand the dice to player 1.

        Returns:
            GAME_STARTED, or INVALID_GAME_ACTION for a bad player count
        """
        try:
            count = validate_player_count(player_count)
        except ValueError as exc:
            logger.warning("Rejected game start: %s", exc)
            return GameOutcome.invalid_game_action(str(exc))

        self._players = tuple(Player(id=i) for i in range(1, count + 1))
        self._current_index = 0
        self._in_progress = True
        self._new_turn()
        logger.info("Game started with %d players", count)

        return GameOutcome(
            GameEvent.GAME_STARTED,
            player=self._players[0],
            players=self._players,
        )

    def announce_turn(self) -> GameOutcome:
        """Report whose turn it is without changing any state."""
        player = self.current_player
        if not self._in_progress or player is None:
            return GameOutcome.invalid_game_action("Game not started or already over.")
        return GameOutcome(GameEvent.PLAYER_TURN_STARTED, player=player)

    def roll_current_turn(self) -> GameOutcome:
        """Roll for the current player."""
        return self._play(lambda turn: turn.roll_or_continue())

    def select_current_turn_dice(self, indices: Iterable[int]) -> GameOutcome:
        """Set aside dice from the current player's latest roll."""
        indices = list(indices)
        return self._play(lambda turn: turn.select_dice(indices))

    def bank_current_turn(self) -> GameOutcome:
        """
        End the current player's turn and keep the turn score.

        The first bank must reach the opening score or it is thrown away.
        A bank that lifts the total to the winning score ends the game.
        """
        player = self._require_player()
        if player is None:
            return self._not_in_progress()

        outcome = self._turn.bank()
        if outcome.event == TurnEvent.BUSTED:
            return self._end_with_bust(player)
        if outcome.event != TurnEvent.BANKED:
            return GameOutcome.from_turn(player, outcome)

        banked = outcome.turn_total
        player = replace(player, last_turn_score=banked)

        if not player.has_opened and banked < self._config.opening_score:
            self._store(player)
            logger.info("Player %d failed to open with %d", player.id, banked)
            self._advance()
            return GameOutcome(
                GameEvent.PLAYER_FAILED_TO_OPEN,
                player=player,
                turn_total=banked,
                new_total=player.total_score,
            )

        event = GameEvent.PLAYER_SCORED if player.has_opened else GameEvent.PLAYER_OPENED_AND_SCORED
        player = replace(
            player,
            has_opened=True,
            total_score=player.total_score + banked,
        )
        self._store(player)
        logger.info("Player %d banked %d, total %d", player.id, banked, player.total_score)

        if player.total_score >= self._config.winning_score:
            self._in_progress = False
            self._current_index = None
            logger.info("Player %d won with %d", player.id, player.total_score)
            return GameOutcome(
                GameEvent.PLAYER_WON,
                player=player,
                turn_total=banked,
                new_total=player.total_score,
                final_score=player.total_score,
            )

        self._advance()
        return GameOutcome(
            event,
            player=player,
            turn_total=banked,
            new_total=player.total_score,
        )

    # -- internals -------------------------------------------------------

    def _play(self, action: Callable[[TurnStateMachine], TurnOutcome]) -> GameOutcome:
        player = self._require_player()
        if player is None:
            return self._not_in_progress()

        outcome = action(self._turn)
        if outcome.event == TurnEvent.BUSTED:
            return self._end_with_bust(player)
        if outcome.event == TurnEvent.INVALID_ACTION:
            logger.warning("Player %d: %s", player.id, outcome.message)
        return GameOutcome.from_turn(player, outcome)

    def _require_player(self) -> Player | None:
        if not self._in_progress:
            return None
        return self.current_player

    def _not_in_progress(self) -> GameOutcome:
        logger.warning("Rejected action: game not in progress")
        return GameOutcome.invalid_game_action("Game not started or no current player.")

    def _end_with_bust(self, player: Player) -> GameOutcome:
        logger.info("Player %d busted", player.id)
        self._advance()
        return GameOutcome(GameEvent.PLAYER_BUSTED, player=player)

    def _store(self, player: Player) -> None:
        self._players = tuple(
            player if p.id == player.id else p for p in self._players
        )

    def _advance(self) -> None:
        if not self._players or not self._in_progress or self._current_index is None:
            return
        self._current_index = (self._current_index + 1) % len(self._players)
        self._new_turn()

    def _new_turn(self) -> None:
        self._turn = TurnStateMachine(self._dice_source)
