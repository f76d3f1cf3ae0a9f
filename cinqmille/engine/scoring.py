"""
Cinq Mille - Score Engine

Stateless scoring for Cinq Mille hands. All methods are class methods that
operate on immutable inputs, so the engine is reentrant and safe to call
from anywhere.

Scoring Rules (evaluated in this order, each match consumes its dice):
    - Five or more 1s: 5,000 points, nothing else counts
    - Five or more 5s: 5,000 points, nothing else counts
    - Three 1s: 1,000 points
    - Full (three of A + two of B): A × B × 100 points, once per hand
    - 1-2-3-4-5 (Low Straight): 500 points
    - 2-3-4-5-6 (High Straight): 500 points
    - Three of X (2-6): X × 100 points, once per value
    - Single 1: 100 points
    - Single 5: 50 points
"""

from collections import Counter
from typing import Sequence

from cinqmille.engine.base import (
    DiceRoll,
    ScoringBreakdown,
    ScoringCategory,
    ScoringResult,
)
from cinqmille.engine.validators import validate_dice_values


class ScoreEngine:
    """
    Stateless scoring engine for Cinq Mille.

    All methods are class methods operating on immutable data.
    Nothing is cached or stored between calls.
    """

    # Scoring values
    FIVE_OF_A_KIND_POINTS = 5000
    SINGLE_ONE_POINTS = 100
    SINGLE_FIVE_POINTS = 50
    THREE_ONES_POINTS = 1000
    STRAIGHT_POINTS = 500
    FULL_MULTIPLIER = 100
    TRIPLE_POINTS = {2: 200, 3: 300, 4: 400, 5: 500, 6: 600}

    LOW_STRAIGHT = (1, 2, 3, 4, 5)
    HIGH_STRAIGHT = (2, 3, 4, 5, 6)

    # Fulls and straights need this many dice left in the working set
    COMBINATION_SIZE = 5

    @classmethod
    def calculate_score(cls, dice: Sequence[int] | DiceRoll) -> int:
        """
        Calculate the point value of a hand.

        Args:
            dice: Dice values to score (sequence or DiceRoll)

        Returns:
            Total points, 0 for an empty or non-scoring hand

        Raises:
            ValueError: If any face is outside 1-6
        """
        return cls.explain_score(dice).points

    @classmethod
    def can_score(cls, dice: Sequence[int] | DiceRoll) -> bool:
        """Return True if the hand is worth any points at all."""
        return cls.calculate_score(dice) > 0

    @classmethod
    def explain_score(cls, dice: Sequence[int] | DiceRoll) -> ScoringResult:
        """
        Score a hand and itemise every combination that contributed.

        Order of detection matters: each combination removes its dice
        from the working set before the next rule looks at it.

        Args:
            dice: Dice values to score (sequence or DiceRoll)

        Returns:
            ScoringResult with total points and breakdown
        """
        if isinstance(dice, DiceRoll):
            values = dice.values
        else:
            values = validate_dice_values(dice, min_count=0)

        if not values:
            return ScoringResult(points=0, breakdown=tuple())

        remaining = Counter(values)

        five_of_a_kind = cls._check_five_of_a_kind(remaining)
        if five_of_a_kind is not None:
            return ScoringResult(
                points=five_of_a_kind.points,
                breakdown=(five_of_a_kind,),
            )

        breakdown: list[ScoringBreakdown] = []

        three_ones = cls._check_three_ones(remaining)
        if three_ones is not None:
            breakdown.append(three_ones)

        full = cls._check_full(remaining)
        if full is not None:
            breakdown.append(full)

        straight = cls._check_straights(remaining)
        if straight is not None:
            breakdown.append(straight)

        breakdown.extend(cls._check_triples(remaining))
        breakdown.extend(cls._check_singles(remaining))

        return ScoringResult(
            points=sum(item.points for item in breakdown),
            breakdown=tuple(breakdown),
        )

    @classmethod
    def _check_five_of_a_kind(
        cls,
        remaining: Counter[int]
    ) -> ScoringBreakdown | None:
        """Five or more 1s (then 5s) short-circuit the whole hand."""
        for face, category in ((1, ScoringCategory.FIVE_ONES), (5, ScoringCategory.FIVE_FIVES)):
            count = remaining[face]
            if count >= 5:
                return ScoringBreakdown(
                    category=category,
                    dice_values=tuple([face] * count),
                    points=cls.FIVE_OF_A_KIND_POINTS,
                    description=f"{count}x {face}s",
                )
        return None

    @classmethod
    def _check_three_ones(cls, remaining: Counter[int]) -> ScoringBreakdown | None:
        if remaining[1] < 3:
            return None
        remaining[1] -= 3
        return ScoringBreakdown(
            category=ScoringCategory.THREE_ONES,
            dice_values=(1, 1, 1),
            points=cls.THREE_ONES_POINTS,
            description="Three 1s",
        )

    @classmethod
    def _check_full(cls, remaining: Counter[int]) -> ScoringBreakdown | None:
        """
        Find the first full: lowest triple value, then lowest pair value.

        Only one full can be scored per hand.
        """
        if sum(remaining.values()) < cls.COMBINATION_SIZE:
            return None

        for triple_value in range(1, 7):
            if remaining[triple_value] < 3:
                continue
            for pair_value in range(1, 7):
                if pair_value == triple_value or remaining[pair_value] < 2:
                    continue
                remaining[triple_value] -= 3
                remaining[pair_value] -= 2
                return ScoringBreakdown(
                    category=ScoringCategory.FULL,
                    dice_values=(triple_value,) * 3 + (pair_value,) * 2,
                    points=triple_value * pair_value * cls.FULL_MULTIPLIER,
                    description=f"Full ({triple_value}s over {pair_value}s)",
                )
        return None

    @classmethod
    def _check_straights(cls, remaining: Counter[int]) -> ScoringBreakdown | None:
        """
        Check for a straight, low before high.

        Straights are mutually exclusive: only one can be scored.
        """
        if sum(remaining.values()) < cls.COMBINATION_SIZE:
            return None

        candidates = (
            (cls.LOW_STRAIGHT, ScoringCategory.LOW_STRAIGHT, "Low Straight (1-2-3-4-5)"),
            (cls.HIGH_STRAIGHT, ScoringCategory.HIGH_STRAIGHT, "High Straight (2-3-4-5-6)"),
        )
        for straight, category, description in candidates:
            if all(remaining[v] >= 1 for v in straight):
                for v in straight:
                    remaining[v] -= 1
                return ScoringBreakdown(
                    category=category,
                    dice_values=straight,
                    points=cls.STRAIGHT_POINTS,
                    description=description,
                )
        return None

    @classmethod
    def _check_triples(cls, remaining: Counter[int]) -> list[ScoringBreakdown]:
        """Three of a kind for 2-6, each value scored at most once."""
        breakdown: list[ScoringBreakdown] = []

        for face_value, points in cls.TRIPLE_POINTS.items():
            if remaining[face_value] >= 3:
                remaining[face_value] -= 3
                breakdown.append(ScoringBreakdown(
                    category=ScoringCategory.THREE_OF_A_KIND,
                    dice_values=(face_value,) * 3,
                    points=points,
                    description=f"Three {face_value}s",
                ))

        return breakdown

    @classmethod
    def _check_singles(cls, remaining: Counter[int]) -> list[ScoringBreakdown]:
        """
        Score leftover 1s and 5s.

        Only 1s and 5s score as singles.
        """
        breakdown: list[ScoringBreakdown] = []

        for face, category, unit in (
            (1, ScoringCategory.SINGLE_ONE, cls.SINGLE_ONE_POINTS),
            (5, ScoringCategory.SINGLE_FIVE, cls.SINGLE_FIVE_POINTS),
        ):
            count = remaining[face]
            if count > 0:
                remaining[face] = 0
                breakdown.append(ScoringBreakdown(
                    category=category,
                    dice_values=tuple([face] * count),
                    points=count * unit,
                    description=f"{count}x Single {face}{'s' if count > 1 else ''}",
                ))

        return breakdown


def calculate_score(dice: Sequence[int] | DiceRoll) -> int:
    """Module-level shortcut for :meth:`ScoreEngine.calculate_score`."""
    return ScoreEngine.calculate_score(dice)


def can_score(dice: Sequence[int] | DiceRoll) -> bool:
    """Module-level shortcut for :meth:`ScoreEngine.can_score`."""
    return ScoreEngine.can_score(dice)
