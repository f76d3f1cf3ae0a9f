"""
Cinq Mille - Dice Sources and Selection Helpers

A dice source is the only outside capability the engine consumes. Anything
with a ``roll(count)`` method returning ``count`` faces in 1-6 will do: the
random source is the default, the scripted one replays fixed rolls for tests.
"""

from __future__ import annotations

import random
from collections import deque
from typing import Iterable, Protocol, Sequence

from cinqmille.engine.base import MAX_FACE, MIN_FACE


class DiceSource(Protocol):
    """Anything that can throw ``count`` six-sided dice."""

    def roll(self, count: int) -> tuple[int, ...]:
        ...


class RandomDiceSource:
    """Pseudo-random D6 source, optionally seeded for reproducible games."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def roll(self, count: int) -> tuple[int, ...]:
        """
        Roll the specified number of D6 dice.

        Args:
            count: Number of dice to roll

        Returns:
            Tuple of random faces, empty if count is not positive
        """
        if count <= 0:
            return tuple()
        return tuple(self._rng.randint(MIN_FACE, MAX_FACE) for _ in range(count))


class ScriptedDiceSource:
    """
    Replays queued rolls in order.

    Each queued roll is returned as-is, whatever count was requested, so a
    test can force an exact hand. Once the queue is empty the source falls
    back to ``fallback`` (or raises if there is none).
    """

    def __init__(
        self,
        rolls: Iterable[Sequence[int]] = (),
        fallback: DiceSource | None = None,
    ) -> None:
        self._rolls: deque[tuple[int, ...]] = deque(tuple(r) for r in rolls)
        self._fallback = fallback
        self.requested: list[int] = []

    def queue(self, *rolls: Sequence[int]) -> None:
        """Append more rolls to the script."""
        self._rolls.extend(tuple(r) for r in rolls)

    @property
    def pending(self) -> int:
        return len(self._rolls)

    def roll(self, count: int) -> tuple[int, ...]:
        self.requested.append(count)
        if count <= 0:
            return tuple()
        if self._rolls:
            return self._rolls.popleft()
        if self._fallback is not None:
            return self._fallback.roll(count)
        raise LookupError(f"No scripted roll left for {count} dice.")


def valid_indices(roll: Sequence[int], indices: Iterable[int]) -> list[int]:
    """
    Filter selection indices against a roll.

    Out-of-range indices are dropped and duplicates collapse to their first
    occurrence; the caller's order is otherwise preserved.
    """
    seen: set[int] = set()
    kept: list[int] = []
    for idx in indices:
        if 0 <= idx < len(roll) and idx not in seen:
            seen.add(idx)
            kept.append(idx)
    return kept


def select_dice_from_roll(roll: Sequence[int], indices: Iterable[int]) -> tuple[int, ...]:
    """
    Pick dice out of a roll by index.

    Args:
        roll: Faces of the current roll
        indices: 0-based positions to keep (invalid ones are ignored)

    Returns:
        Faces at the valid positions, in the order the indices were given
    """
    if not roll:
        return tuple()
    return tuple(roll[i] for i in valid_indices(roll, indices))


def remaining_dice(roll: Sequence[int], indices: Iterable[int]) -> tuple[int, ...]:
    """
    Dice left over after a selection, in original roll order.

    Args:
        roll: Faces of the current roll
        indices: 0-based positions that were kept

    Returns:
        Faces at every position not selected
    """
    kept = set(valid_indices(roll, indices))
    return tuple(v for i, v in enumerate(roll) if i not in kept)
