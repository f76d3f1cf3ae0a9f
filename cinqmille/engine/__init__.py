"""
Cinq Mille Game Engine.

Pure Python game logic with zero UI dependencies.
Handles dice rolling, scoring, bust detection, hot dice, opening and winning.
"""

from cinqmille.engine.base import (
    DiceRoll,
    GameConfig,
    Player,
    ScoringBreakdown,
    ScoringCategory,
    ScoringResult,
    TurnState,
    TurnStatus,
)
from cinqmille.engine.dice import (
    DiceSource,
    RandomDiceSource,
    ScriptedDiceSource,
    remaining_dice,
    select_dice_from_roll,
)
from cinqmille.engine.events import GameEvent, GameOutcome, TurnEvent, TurnOutcome
from cinqmille.engine.game import GameOrchestrator
from cinqmille.engine.scoring import ScoreEngine, calculate_score, can_score
from cinqmille.engine.turn import TurnStateMachine

__all__ = [
    # Data Classes
    "DiceRoll",
    "GameConfig",
    "Player",
    "ScoringBreakdown",
    "ScoringResult",
    "TurnState",
    # Enums
    "GameEvent",
    "ScoringCategory",
    "TurnEvent",
    "TurnStatus",
    # Outcomes
    "GameOutcome",
    "TurnOutcome",
    # Dice
    "DiceSource",
    "RandomDiceSource",
    "ScriptedDiceSource",
    "remaining_dice",
    "select_dice_from_roll",
    # Engines
    "GameOrchestrator",
    "ScoreEngine",
    "TurnStateMachine",
    "calculate_score",
    "can_score",
]
