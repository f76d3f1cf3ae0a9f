"""
Cinq Mille - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. All classes are immutable (frozen dataclasses) so that turn
and roster snapshots can be handed to consumers without aliasing hazards.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Sequence


MIN_FACE = 1
MAX_FACE = 6
MAX_DICE = 6

DEFAULT_OPENING_SCORE = 750
DEFAULT_WINNING_SCORE = 5000


class TurnStatus(Enum):
    """Lifecycle of a single turn."""
    IDLE = auto()    # No roll yet this turn
    ACTIVE = auto()  # Rolled at least once, may select/roll/bank
    ENDED = auto()   # Busted or banked, terminal


class ScoringCategory(Enum):
    """Categories of scoring combinations."""
    FIVE_ONES = auto()
    FIVE_FIVES = auto()
    THREE_ONES = auto()
    FULL = auto()              # Triple + pair of a different value
    LOW_STRAIGHT = auto()      # 1-2-3-4-5
    HIGH_STRAIGHT = auto()     # 2-3-4-5-6
    THREE_OF_A_KIND = auto()   # Triples of 2-6
    SINGLE_ONE = auto()
    SINGLE_FIVE = auto()


@dataclass(frozen=True)
class ScoringBreakdown:
    """
    A single scoring component within a hand.

    Attributes:
        category: The type of scoring combination
        dice_values: The dice consumed by this combination
        points: Points awarded for this combination
        description: Human-readable description
    """
    category: ScoringCategory
    dice_values: tuple[int, ...]
    points: int
    description: str


@dataclass(frozen=True)
class ScoringResult:
    """
    Complete scoring result for a hand.

    Attributes:
        points: Total points scored
        breakdown: Individual scoring components, in evaluation order
    """
    points: int
    breakdown: tuple[ScoringBreakdown, ...] = field(default_factory=tuple)

    @property
    def is_bust(self) -> bool:
        """Returns True if nothing in the hand scored."""
        return self.points == 0

    def __str__(self) -> str:
        if self.is_bust:
            return "BUST! No scoring dice."
        lines = [f"Total: {self.points} points"]
        for item in self.breakdown:
            lines.append(f"  - {item.description}: {item.points}")
        return "\n".join(lines)


@dataclass(frozen=True)
class DiceRoll:
    """
    Immutable representation of a dice roll.

    Attributes:
        values: Tuple of dice face values (0 to 6 dice)
    """
    values: tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate dice values are within valid range."""
        if len(self.values) > MAX_DICE:
            raise ValueError(
                f"A roll holds at most {MAX_DICE} dice, got {len(self.values)}."
            )
        for value in self.values:
            if not (MIN_FACE <= value <= MAX_FACE):
                raise ValueError(
                    f"Invalid die value {value}. "
                    f"Must be between {MIN_FACE} and {MAX_FACE}."
                )

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    def __iter__(self):
        return iter(self.values)

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> "DiceRoll":
        """Create a DiceRoll from any sequence type."""
        return cls(values=tuple(values))


@dataclass(frozen=True)
class TurnState:
    """
    Snapshot of a player's turn.

    Attributes:
        accumulated_score: Points collected this turn (not yet banked)
        dice_remaining: Dice to throw on the next roll
        last_roll: Most recent roll of this turn
        status: Where the turn is in its lifecycle
    """
    accumulated_score: int = 0
    dice_remaining: int = MAX_DICE
    last_roll: tuple[int, ...] = field(default_factory=tuple)
    status: TurnStatus = TurnStatus.IDLE

    @property
    def is_hot_dice(self) -> bool:
        """True when the next roll uses the full set after scoring every die."""
        return (
            self.status == TurnStatus.ACTIVE
            and self.accumulated_score > 0
            and self.dice_remaining == MAX_DICE
        )


@dataclass(frozen=True)
class Player:
    """
    A seat at the table.

    Attributes:
        id: Positive player identifier (seating order starts at 1)
        total_score: Banked points across all turns
        has_opened: Whether the player has banked the opening score
        last_turn_score: Score of the player's most recent bank attempt
    """
    id: int
    total_score: int = 0
    has_opened: bool = False
    last_turn_score: int = 0

    def __post_init__(self) -> None:
        if self.id <= 0:
            raise ValueError(f"Player id must be positive, got {self.id}.")
        if self.total_score < 0 or self.last_turn_score < 0:
            raise ValueError("Player scores cannot be negative.")


@dataclass(frozen=True)
class GameConfig:
    """
    Thresholds for a game session.

    Attributes:
        opening_score: Minimum first bank for points to count
        winning_score: Total needed to win
    """
    opening_score: int = DEFAULT_OPENING_SCORE
    winning_score: int = DEFAULT_WINNING_SCORE

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.opening_score <= 0:
            raise ValueError("Opening score must be positive.")
        if self.winning_score <= 0:
            raise ValueError("Winning score must be positive.")
        if self.opening_score > self.winning_score:
            raise ValueError(
                f"Opening score {self.opening_score} cannot exceed "
                f"winning score {self.winning_score}."
            )
