"""
Cinq Mille - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""

from typing import Sequence

from cinqmille.engine.base import MAX_DICE, MAX_FACE, MIN_FACE


def validate_dice_values(
    values: Sequence[int],
    min_count: int = 0,
    max_count: int | None = None
) -> tuple[int, ...]:
    """
    Validate and normalize dice values.

    Args:
        values: Sequence of dice values to validate
        min_count: Minimum number of dice required
        max_count: Maximum number of dice allowed (None = no limit)

    Returns:
        Validated values as a tuple

    Raises:
        ValueError: If validation fails
    """
    if not values:
        if min_count > 0:
            raise ValueError(f"At least {min_count} dice required.")
        return tuple()

    values_tuple = tuple(values)
    count = len(values_tuple)

    if count < min_count:
        raise ValueError(f"At least {min_count} dice required, got {count}.")

    if max_count is not None and count > max_count:
        raise ValueError(f"At most {max_count} dice allowed, got {count}.")

    for i, value in enumerate(values_tuple):
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"Die value at index {i} must be an integer, got {type(value).__name__}.")
        if not (MIN_FACE <= value <= MAX_FACE):
            raise ValueError(
                f"Die value at index {i} is {value}, must be between {MIN_FACE} and {MAX_FACE}."
            )

    return values_tuple


def validate_roll(values: Sequence[int]) -> tuple[int, ...]:
    """
    Validate a roll produced by a dice source.

    Args:
        values: Faces returned by the source

    Returns:
        Validated values as a tuple

    Raises:
        ValueError: If the source returned more than six dice or bad faces
    """
    return validate_dice_values(values, min_count=0, max_count=MAX_DICE)


def validate_player_count(count: int) -> int:
    """
    Validate number of players.

    Args:
        count: Number of players

    Returns:
        Validated count

    Raises:
        ValueError: If count is not a positive integer
    """
    if not isinstance(count, int) or isinstance(count, bool):
        raise ValueError(f"Number of players must be an integer, got {type(count).__name__}.")

    if count <= 0:
        raise ValueError("Number of players must be positive.")

    return count


def validate_threshold(name: str, score: int) -> int:
    """
    Validate an opening or winning threshold.

    Raises:
        ValueError: If score is not a positive integer
    """
    if not isinstance(score, int) or isinstance(score, bool):
        raise ValueError(f"{name} must be an integer, got {type(score).__name__}.")

    if score <= 0:
        raise ValueError(f"{name} must be positive, got {score}.")

    return score
