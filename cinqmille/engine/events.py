"""
Cinq Mille - Outcome Event Definitions

Every engine call returns exactly one outcome value. Turn-level outcomes are
produced by the turn state machine; the game orchestrator flattens them into
a single tagged ``GameOutcome`` so consumers dispatch on one enum.
"""

from dataclasses import dataclass, field
from enum import Enum, auto

from cinqmille.engine.base import Player


class TurnEvent(Enum):
    """Results of a single turn operation."""

    ROLLED = auto()
    SCORED = auto()
    BUSTED = auto()
    BANKED = auto()
    INVALID_ACTION = auto()


@dataclass(frozen=True)
class TurnOutcome:
    """Result of a turn operation; unused fields keep their defaults."""

    event: TurnEvent
    dice: tuple[int, ...] = field(default_factory=tuple)
    can_score: bool = False
    increment: int = 0
    turn_total: int = 0
    next_roll_dice_count: int = 0
    can_roll_again: bool = False
    message: str = ""

    @classmethod
    def rolled(cls, dice: tuple[int, ...], can_score: bool) -> "TurnOutcome":
        return cls(TurnEvent.ROLLED, dice=dice, can_score=can_score)

    @classmethod
    def scored(
        cls,
        increment: int,
        turn_total: int,
        next_roll_dice_count: int,
    ) -> "TurnOutcome":
        return cls(
            TurnEvent.SCORED,
            increment=increment,
            turn_total=turn_total,
            next_roll_dice_count=next_roll_dice_count,
            can_roll_again=True,
        )

    @classmethod
    def busted(cls, dice: tuple[int, ...] = ()) -> "TurnOutcome":
        return cls(TurnEvent.BUSTED, dice=dice, turn_total=0)

    @classmethod
    def banked(cls, turn_total: int) -> "TurnOutcome":
        return cls(TurnEvent.BANKED, turn_total=turn_total)

    @classmethod
    def invalid(cls, message: str) -> "TurnOutcome":
        return cls(TurnEvent.INVALID_ACTION, message=message)


class GameEvent(Enum):
    """Events that can occur during a game."""

    GAME_STARTED = auto()
    PLAYER_TURN_STARTED = auto()
    DICE_ROLLED = auto()
    DICE_SCORED = auto()
    INVALID_TURN_ACTION = auto()
    PLAYER_OPENED_AND_SCORED = auto()
    PLAYER_SCORED = auto()
    PLAYER_FAILED_TO_OPEN = auto()
    PLAYER_BUSTED = auto()
    PLAYER_WON = auto()
    INVALID_GAME_ACTION = auto()


# Events after which play has moved on to another seat
TURN_ENDING_EVENTS = frozenset({
    GameEvent.PLAYER_OPENED_AND_SCORED,
    GameEvent.PLAYER_SCORED,
    GameEvent.PLAYER_FAILED_TO_OPEN,
    GameEvent.PLAYER_BUSTED,
})


@dataclass(frozen=True)
class GameOutcome:
    """
    Flat, tagged result of an orchestrator call.

    Attributes:
        event: Which outcome this is
        player: The acting player (first player for GAME_STARTED)
        players: Full roster, set for GAME_STARTED
        dice: Faces of the roll, set for DICE_ROLLED
        can_score: Whether the roll has scoring potential (DICE_ROLLED)
        increment: Points from the selection (DICE_SCORED)
        turn_total: Turn total so far (DICE_SCORED) or the banked/attempted score
        next_roll_dice_count: Dice for the next roll (DICE_SCORED)
        can_roll_again: Whether the player may roll again (DICE_SCORED)
        new_total: Player total after the bank
        final_score: Winner's total (PLAYER_WON)
        message: Explanation for invalid actions
    """

    event: GameEvent
    player: Player | None = None
    players: tuple[Player, ...] = field(default_factory=tuple)
    dice: tuple[int, ...] = field(default_factory=tuple)
    can_score: bool = False
    increment: int = 0
    turn_total: int = 0
    next_roll_dice_count: int = 0
    can_roll_again: bool = False
    new_total: int = 0
    final_score: int = 0
    message: str = ""

    @property
    def is_invalid(self) -> bool:
        return self.event in (GameEvent.INVALID_TURN_ACTION, GameEvent.INVALID_GAME_ACTION)

    @property
    def ends_turn(self) -> bool:
        return self.event in TURN_ENDING_EVENTS

    @classmethod
    def from_turn(cls, player: Player, outcome: TurnOutcome) -> "GameOutcome":
        """Flatten a non-terminal turn outcome into a game outcome."""
        if outcome.event == TurnEvent.ROLLED:
            return cls(
                GameEvent.DICE_ROLLED,
                player=player,
                dice=outcome.dice,
                can_score=outcome.can_score,
            )
        if outcome.event == TurnEvent.SCORED:
            return cls(
                GameEvent.DICE_SCORED,
                player=player,
                increment=outcome.increment,
                turn_total=outcome.turn_total,
                next_roll_dice_count=outcome.next_roll_dice_count,
                can_roll_again=outcome.can_roll_again,
            )
        if outcome.event == TurnEvent.INVALID_ACTION:
            return cls(GameEvent.INVALID_TURN_ACTION, player=player, message=outcome.message)
        return cls(
            GameEvent.INVALID_GAME_ACTION,
            player=player,
            message=f"Unexpected turn outcome {outcome.event.name}.",
        )

    @classmethod
    def invalid_game_action(cls, message: str) -> "GameOutcome":
        return cls(GameEvent.INVALID_GAME_ACTION, message=message)
