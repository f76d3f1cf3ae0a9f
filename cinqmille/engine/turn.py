"""
Cinq Mille - Turn State Machine

Tracks one player's turn from the first roll until it busts or banks.
An instance lives for exactly one turn; the orchestrator discards it and
creates a fresh one for the next player.

States:
    IDLE   -> no roll yet this turn
    ACTIVE -> rolled at least once, may select, roll again or bank
    ENDED  -> busted or banked, every further call is rejected
"""

from __future__ import annotations

import logging
from typing import Iterable

from cinqmille.engine.base import MAX_DICE, TurnState, TurnStatus
from cinqmille.engine.dice import (
    DiceSource,
    remaining_dice,
    select_dice_from_roll,
    valid_indices,
)
from cinqmille.engine.events import TurnOutcome
from cinqmille.engine.scoring import ScoreEngine
from cinqmille.engine.validators import validate_roll

logger = logging.getLogger(__name__)


class TurnStateMachine:
    """State machine for a single turn."""

    def __init__(
        self,
        dice_source: DiceSource,
        scorer: type[ScoreEngine] = ScoreEngine,
    ) -> None:
        self._dice_source = dice_source
        self._scorer = scorer
        self._status = TurnStatus.IDLE
        self._accumulated_score = 0
        self._dice_remaining = MAX_DICE
        self._last_roll: tuple[int, ...] = tuple()
        # A roll stays selectable until dice are set aside from it
        self._awaiting_selection = False

    @property
    def state(self) -> TurnState:
        """Immutable snapshot of the turn."""
        return TurnState(
            accumulated_score=self._accumulated_score,
            dice_remaining=self._dice_remaining,
            last_roll=self._last_roll,
            status=self._status,
        )

    @property
    def status(self) -> TurnStatus:
        return self._status

    @property
    def accumulated_score(self) -> int:
        return self._accumulated_score

    @property
    def dice_remaining(self) -> int:
        return self._dice_remaining

    @property
    def last_roll(self) -> tuple[int, ...]:
        return self._last_roll

    def roll_or_continue(self) -> TurnOutcome:
        """
        Throw the dice still in play.

        The first call of a turn throws all six dice. A roll with nothing
        worth points busts the turn and wipes the accumulated score.

        Returns:
            ROLLED, BUSTED or INVALID_ACTION outcome
        """
        if self._status == TurnStatus.ENDED:
            return TurnOutcome.invalid("Turn is over, no more rolls.")

        if self._status == TurnStatus.IDLE:
            self._accumulated_score = 0
            self._dice_remaining = MAX_DICE
            self._status = TurnStatus.ACTIVE

        count = self._dice_remaining or MAX_DICE
        roll = validate_roll(self._dice_source.roll(count))
        self._last_roll = roll
        logger.debug("Rolled %d dice: %s", count, roll)

        if not roll or not self._scorer.can_score(roll):
            self._bust()
            return TurnOutcome.busted(roll)

        self._awaiting_selection = True
        return TurnOutcome.rolled(roll, can_score=True)

    def select_dice(self, indices: Iterable[int]) -> TurnOutcome:
        """
        Set aside dice from the latest roll and add their score.

        Args:
            indices: 0-based positions into the latest roll

        Returns:
            SCORED, BUSTED or INVALID_ACTION outcome
        """
        indices = list(indices)

        if self._status != TurnStatus.ACTIVE or not self._awaiting_selection:
            return TurnOutcome.invalid("No roll is waiting for a selection.")
        if not self._last_roll:
            return TurnOutcome.invalid("No dice were rolled for this selection.")

        kept = valid_indices(self._last_roll, indices)
        if not kept and indices:
            return TurnOutcome.invalid("Invalid dice indices, no dice kept.")
        if not kept:
            return TurnOutcome.invalid("Select at least one scoring die.")

        selected = select_dice_from_roll(self._last_roll, kept)
        score = self._scorer.calculate_score(selected)
        logger.debug("Selected %s from %s for %d points", selected, self._last_roll, score)

        if score == 0:
            self._bust()
            return TurnOutcome.busted(selected)

        self._accumulated_score += score
        self._awaiting_selection = False

        left = len(remaining_dice(self._last_roll, kept))
        self._dice_remaining = left if left > 0 else MAX_DICE

        return TurnOutcome.scored(
            increment=score,
            turn_total=self._accumulated_score,
            next_roll_dice_count=self._dice_remaining,
        )

    def bank(self) -> TurnOutcome:
        """
        Stop rolling and keep the accumulated score.

        Returns:
            BANKED with the turn total, or INVALID_ACTION if the turn
            never started or is already over
        """
        if self._status != TurnStatus.ACTIVE:
            return TurnOutcome.invalid("Cannot bank: no turn in progress or turn already over.")

        banked = self._accumulated_score
        self._status = TurnStatus.ENDED
        self._awaiting_selection = False
        return TurnOutcome.banked(banked)

    def _bust(self) -> None:
        self._accumulated_score = 0
        self._awaiting_selection = False
        self._status = TurnStatus.ENDED
        logger.debug("Turn busted")
