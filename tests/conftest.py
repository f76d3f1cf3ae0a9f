"""
Cinq Mille - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import pytest

from cinqmille.config.settings import get_settings
from cinqmille.engine.dice import ScriptedDiceSource
from cinqmille.engine.game import GameOrchestrator
from cinqmille.engine.turn import TurnStateMachine


# =============================================================================
# SCORING TEST DATA
# =============================================================================

@pytest.fixture
def scoring_hands() -> dict[str, tuple[tuple[int, ...], int, str]]:
    """
    Common hands with expected scores.

    Returns:
        Dict mapping name to (dice_values, expected_points, description)
    """
    return {
        # Singles
        "single_one": ((1,), 100, "Single 1"),
        "single_five": ((5,), 50, "Single 5"),
        "two_ones": ((1, 1), 200, "Two 1s"),
        "one_and_five": ((1, 5), 150, "One 1 and one 5"),
        "single_two": ((2,), 0, "Single 2 (bust)"),

        # Three of a kind
        "three_ones": ((1, 1, 1), 1000, "Three 1s"),
        "three_twos": ((2, 2, 2), 200, "Three 2s"),
        "three_sixes": ((6, 6, 6), 600, "Three 6s"),

        # Five of a kind
        "five_ones": ((1, 1, 1, 1, 1), 5000, "Five 1s"),
        "five_fives": ((5, 5, 5, 5, 5), 5000, "Five 5s"),

        # Fulls
        "full_threes_over_twos": ((2, 2, 3, 3, 3), 600, "Full 3s over 2s"),
        "full_sixes_over_fours": ((6, 4, 6, 4, 6), 2400, "Full 6s over 4s"),

        # Straights
        "low_straight": ((1, 2, 3, 4, 5), 500, "Low straight 1-5"),
        "high_straight": ((2, 3, 4, 5, 6), 500, "High straight 2-6"),

        # Mixed
        "three_ones_pair_twos": ((1, 1, 1, 2, 2), 1000, "Three 1s, pair of 2s"),
        "three_fours_plus_one": ((4, 4, 4, 1), 500, "Three 4s + single 1"),
        "bust_hand": ((2, 3, 4, 6), 0, "Bust hand"),
    }


@pytest.fixture
def bust_hands() -> list[tuple[int, ...]]:
    """Hands that score nothing."""
    return [
        (2,),
        (3, 4),
        (2, 3, 6),
        (2, 2, 3, 3),
        (2, 3, 4, 6),
        (2, 2, 4, 4, 6, 6),
        (3, 3, 4, 4, 6, 6),
    ]


# =============================================================================
# ENGINE FIXTURES
# =============================================================================

@pytest.fixture
def scripted_dice() -> ScriptedDiceSource:
    """Empty dice script; tests queue the rolls they need."""
    return ScriptedDiceSource()


@pytest.fixture
def turn(scripted_dice: ScriptedDiceSource) -> TurnStateMachine:
    return TurnStateMachine(scripted_dice)


@pytest.fixture
def game(scripted_dice: ScriptedDiceSource) -> GameOrchestrator:
    return GameOrchestrator(dice_source=scripted_dice)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Keep environment settings from leaking between tests."""
    for key in (
        "CINQMILLE_OPENING_SCORE",
        "CINQMILLE_WINNING_SCORE",
        "CINQMILLE_DICE_SEED",
        "CINQMILLE_DEBUG",
        "CINQMILLE_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
