"""
Cinq Mille - Game Orchestrator Tests

End-to-end games with forced rolls: opening, failing to open, busting,
rotation and winning.
"""

import pytest

from cinqmille.config.settings import Settings
from cinqmille.engine.base import GameConfig, TurnStatus
from cinqmille.engine.dice import RandomDiceSource, ScriptedDiceSource
from cinqmille.engine.events import GameEvent
from cinqmille.engine.game import GameOrchestrator

# Scores 1500 when every die is kept (three 1s + three 5s), hot dice
BIG_ROLL = (1, 1, 1, 5, 5, 5)


def play_scoring_turn(game, scripted_dice, rolls_and_picks):
    """Roll and select for each (roll, indices) pair, then bank."""
    for roll, indices in rolls_and_picks:
        scripted_dice.queue(roll)
        assert game.roll_current_turn().event == GameEvent.DICE_ROLLED
        assert game.select_current_turn_dice(indices).event == GameEvent.DICE_SCORED
    return game.bank_current_turn()


class TestStartGame:
    """Seating players and handing out the first turn."""

    def test_creates_roster(self, game):
        outcome = game.start_game(3)
        assert outcome.event == GameEvent.GAME_STARTED
        assert [p.id for p in outcome.players] == [1, 2, 3]
        assert outcome.player.id == 1
        assert all(p.total_score == 0 and not p.has_opened for p in outcome.players)
        assert game.in_progress is True
        assert game.current_player_id == 1
        assert game.turn_state.status == TurnStatus.IDLE

    @pytest.mark.parametrize("count", [0, -2])
    def test_non_positive_player_count(self, game, count):
        outcome = game.start_game(count)
        assert outcome.event == GameEvent.INVALID_GAME_ACTION
        assert "positive" in outcome.message
        assert game.in_progress is False
        assert game.players == ()

    def test_restart_resets_roster(self, game, scripted_dice):
        game.start_game(1)
        play_scoring_turn(game, scripted_dice, [((1, 1, 1, 2, 3, 4), [0, 1, 2])])
        game.start_game(2)
        assert [p.total_score for p in game.players] == [0, 0]
        assert game.current_player_id == 1


class TestNotInProgress:
    """Commands before a game starts."""

    def test_roll_before_start(self, game):
        assert game.roll_current_turn().event == GameEvent.INVALID_GAME_ACTION

    def test_select_before_start(self, game):
        assert game.select_current_turn_dice([0]).event == GameEvent.INVALID_GAME_ACTION

    def test_bank_before_start(self, game):
        assert game.bank_current_turn().event == GameEvent.INVALID_GAME_ACTION

    def test_current_player_absent(self, game):
        assert game.current_player is None
        assert game.current_player_id is None


class TestRollAndSelect:
    """Rolling and setting dice aside through the orchestrator."""

    def test_roll_wraps_turn_outcome(self, game, scripted_dice):
        game.start_game(2)
        scripted_dice.queue((1, 2, 3, 4, 6, 6))
        outcome = game.roll_current_turn()
        assert outcome.event == GameEvent.DICE_ROLLED
        assert outcome.dice == (1, 2, 3, 4, 6, 6)
        assert outcome.can_score is True
        assert outcome.player.id == 1

    def test_select_wraps_turn_outcome(self, game, scripted_dice):
        game.start_game(2)
        scripted_dice.queue((1, 5, 2, 3, 4, 6))
        game.roll_current_turn()
        outcome = game.select_current_turn_dice([0, 1])
        assert outcome.event == GameEvent.DICE_SCORED
        assert outcome.increment == 150
        assert outcome.turn_total == 150
        assert outcome.next_roll_dice_count == 4
        assert outcome.can_roll_again is True

    def test_invalid_selection_keeps_turn(self, game, scripted_dice):
        game.start_game(2)
        scripted_dice.queue((1, 2, 3, 4, 6, 6))
        game.roll_current_turn()
        outcome = game.select_current_turn_dice([7, 8])
        assert outcome.event == GameEvent.INVALID_TURN_ACTION
        assert game.current_player_id == 1
        assert game.turn_state.accumulated_score == 0

    def test_bust_on_roll_advances(self, game, scripted_dice):
        game.start_game(2)
        scripted_dice.queue((2, 3, 4, 6, 6, 2))
        outcome = game.roll_current_turn()
        assert outcome.event == GameEvent.PLAYER_BUSTED
        assert outcome.player.id == 1
        assert game.current_player_id == 2
        assert game.turn_state.status == TurnStatus.IDLE
        assert game.turn_state.accumulated_score == 0

    def test_bust_on_selection_advances(self, game, scripted_dice):
        game.start_game(2)
        scripted_dice.queue((1, 2, 3, 4, 6, 6))
        game.roll_current_turn()
        outcome = game.select_current_turn_dice([1, 2])
        assert outcome.event == GameEvent.PLAYER_BUSTED
        assert game.current_player_id == 2


class TestOpening:
    """The first bank must reach the opening score."""

    def test_open_with_three_ones(self, game, scripted_dice):
        game.start_game(1)
        scripted_dice.queue((1, 1, 1, 2, 3))
        game.roll_current_turn()
        scored = game.select_current_turn_dice([0, 1, 2])
        assert scored.increment == 1000

        outcome = game.bank_current_turn()
        assert outcome.event == GameEvent.PLAYER_OPENED_AND_SCORED
        assert outcome.turn_total == 1000
        assert outcome.new_total == 1000
        assert outcome.player.has_opened is True
        assert game.players[0].has_opened is True
        assert game.players[0].total_score == 1000

    def test_failed_open_discards_score(self, game, scripted_dice):
        game.start_game(1)
        scripted_dice.queue((2, 2, 2, 6, 4))
        game.roll_current_turn()
        assert game.select_current_turn_dice([0, 1, 2]).increment == 200

        outcome = game.bank_current_turn()
        assert outcome.event == GameEvent.PLAYER_FAILED_TO_OPEN
        assert outcome.turn_total == 200
        assert game.players[0].total_score == 0
        assert game.players[0].has_opened is False
        assert game.players[0].last_turn_score == 200
        # Single player wraps to themselves with a fresh turn
        assert game.current_player_id == 1
        assert game.turn_state.status == TurnStatus.IDLE

    def test_exactly_opening_score_opens(self, game, scripted_dice):
        game.start_game(1)
        outcome = play_scoring_turn(game, scripted_dice, [
            ((5, 5, 5, 2, 3, 4), [0, 1, 2]),   # 500, not the 2-6 straight
            ((1, 1, 5), [0, 1, 2]),            # 250, hot dice
        ])
        assert outcome.event == GameEvent.PLAYER_OPENED_AND_SCORED
        assert outcome.turn_total == 750
        assert outcome.new_total == 750

    def test_scores_after_opening(self, game, scripted_dice):
        game.start_game(1)
        play_scoring_turn(game, scripted_dice, [((1, 1, 1, 2, 3, 4), [0, 1, 2])])
        outcome = play_scoring_turn(game, scripted_dice, [((5, 2, 3, 4, 6, 6), [0])])
        assert outcome.event == GameEvent.PLAYER_SCORED
        assert outcome.turn_total == 50
        assert outcome.new_total == 1050

    def test_opening_only_happens_once(self, game, scripted_dice):
        game.start_game(1)
        play_scoring_turn(game, scripted_dice, [((1, 1, 1, 2, 3, 4), [0, 1, 2])])
        # Small bank after opening still counts
        outcome = play_scoring_turn(game, scripted_dice, [((1, 2, 3, 4, 6, 6), [0])])
        assert outcome.event == GameEvent.PLAYER_SCORED
        assert game.players[0].total_score == 1100

    def test_bank_zero_without_selection_fails_to_open(self, game, scripted_dice):
        game.start_game(2)
        scripted_dice.queue((1, 2, 3, 4, 6, 6))
        game.roll_current_turn()
        outcome = game.bank_current_turn()
        assert outcome.event == GameEvent.PLAYER_FAILED_TO_OPEN
        assert outcome.turn_total == 0
        assert game.current_player_id == 2

    def test_bank_before_rolling_is_invalid_turn_action(self, game):
        game.start_game(2)
        outcome = game.bank_current_turn()
        assert outcome.event == GameEvent.INVALID_TURN_ACTION
        assert game.current_player_id == 1


class TestRotation:
    """Turns pass to the next seat after a bust or a bank."""

    @pytest.mark.parametrize("ending", ["bank", "failed_open", "bust"])
    def test_turn_passes_to_player_two(self, game, scripted_dice, ending):
        game.start_game(2)
        if ending == "bank":
            play_scoring_turn(game, scripted_dice, [((1, 1, 1, 2, 3, 4), [0, 1, 2])])
        elif ending == "failed_open":
            play_scoring_turn(game, scripted_dice, [((5, 2, 3, 4, 6, 6), [0])])
        else:
            scripted_dice.queue((2, 3, 4, 6, 6, 2))
            game.roll_current_turn()

        assert game.current_player_id == 2
        assert game.turn_state.status == TurnStatus.IDLE
        assert game.turn_state.accumulated_score == 0

    def test_wraps_back_to_first_player(self, game, scripted_dice):
        game.start_game(2)
        for _ in range(2):
            scripted_dice.queue((2, 3, 4, 6, 6, 2))
            game.roll_current_turn()
        assert game.current_player_id == 1

    def test_roster_is_replaced_not_mutated(self, game, scripted_dice):
        started = game.start_game(2)
        play_scoring_turn(game, scripted_dice, [((1, 1, 1, 2, 3, 4), [0, 1, 2])])
        assert started.players[0].total_score == 0
        assert game.players[0].total_score == 1000
        assert game.get_player(1).total_score == 1000
        assert game.get_player(99) is None

    def test_announce_turn(self, game, scripted_dice):
        game.start_game(2)
        scripted_dice.queue((2, 3, 4, 6, 6, 2))
        game.roll_current_turn()
        outcome = game.announce_turn()
        assert outcome.event == GameEvent.PLAYER_TURN_STARTED
        assert outcome.player.id == 2
        assert game.current_player_id == 2


class TestWinning:
    """Reaching the winning score ends the game."""

    def reach_4500(self, game, scripted_dice):
        outcome = play_scoring_turn(game, scripted_dice, [
            (BIG_ROLL, range(6)),
            (BIG_ROLL, range(6)),
            (BIG_ROLL, range(6)),
        ])
        assert outcome.new_total == 4500

    def test_win_on_exact_score(self, game, scripted_dice):
        game.start_game(1)
        self.reach_4500(game, scripted_dice)
        player = game.players[0]
        assert player.total_score == 4500 and player.has_opened

        outcome = play_scoring_turn(game, scripted_dice, [((5, 5, 5, 2, 3, 4), [0, 1, 2])])
        assert outcome.event == GameEvent.PLAYER_WON
        assert outcome.final_score == 5000
        assert outcome.player.id == 1
        assert game.in_progress is False
        assert game.current_player is None

    def test_actions_after_win_are_rejected(self, game, scripted_dice):
        game.start_game(1)
        self.reach_4500(game, scripted_dice)
        play_scoring_turn(game, scripted_dice, [((5, 5, 5, 2, 3, 4), [0, 1, 2])])

        assert game.roll_current_turn().event == GameEvent.INVALID_GAME_ACTION
        assert game.select_current_turn_dice([0]).event == GameEvent.INVALID_GAME_ACTION
        assert game.bank_current_turn().event == GameEvent.INVALID_GAME_ACTION
        assert game.announce_turn().event == GameEvent.INVALID_GAME_ACTION

    def test_win_leaves_other_seats_untouched(self, game, scripted_dice):
        game.start_game(3)
        self.reach_4500(game, scripted_dice)
        # Players 2 and 3 bust
        for _ in range(2):
            scripted_dice.queue((2, 3, 4, 6, 6, 2))
            game.roll_current_turn()
        assert game.current_player_id == 1
        outcome = play_scoring_turn(game, scripted_dice, [((1, 2, 3, 4, 5, 6), [0, 1, 2, 3, 4])])
        assert outcome.event == GameEvent.PLAYER_WON
        assert outcome.player.id == 1
        assert outcome.final_score == 5000
        assert game.get_player(1).total_score == 5000
        for player_id in (2, 3):
            other = game.get_player(player_id)
            assert other.total_score == 0
            assert other.has_opened is False
        # No further turn is handed out after the win
        assert game.current_player_id is None
        assert game.turn_state.status == TurnStatus.ENDED

    def test_five_ones_is_ordinary_score_before_opening(self, game, scripted_dice):
        game.start_game(2)
        outcome = play_scoring_turn(game, scripted_dice, [((1, 1, 1, 1, 1, 3), [0, 1, 2, 3, 4])])
        # Opens and reaches the winning total through the normal bank flow
        assert outcome.event == GameEvent.PLAYER_WON
        assert outcome.final_score == 5000

    def test_failed_open_never_wins(self, scripted_dice):
        game = GameOrchestrator(
            dice_source=scripted_dice,
            config=GameConfig(opening_score=1000, winning_score=1000),
        )
        game.start_game(1)
        outcome = play_scoring_turn(game, scripted_dice, [((5, 5, 5, 2, 3, 4), [0, 1, 2])])
        assert outcome.event == GameEvent.PLAYER_FAILED_TO_OPEN
        assert game.in_progress is True


class TestConfiguration:
    """Custom thresholds and settings-built games."""

    def test_custom_thresholds(self, scripted_dice):
        game = GameOrchestrator(
            dice_source=scripted_dice,
            config=GameConfig(opening_score=100, winning_score=1000),
        )
        game.start_game(1)
        outcome = play_scoring_turn(game, scripted_dice, [((1, 2, 3, 4, 6, 6), [0])])
        assert outcome.event == GameEvent.PLAYER_OPENED_AND_SCORED

    def test_from_settings(self):
        settings = Settings(opening_score=500, winning_score=3000, dice_seed=7)
        game = GameOrchestrator.from_settings(settings)
        assert game.config == GameConfig(opening_score=500, winning_score=3000)

    def test_default_source_is_random(self):
        game = GameOrchestrator()
        game.start_game(1)
        outcome = game.roll_current_turn()
        assert outcome.event in (GameEvent.DICE_ROLLED, GameEvent.PLAYER_BUSTED)

    def test_seeded_games_are_reproducible(self):
        rolls = []
        for _ in range(2):
            game = GameOrchestrator(dice_source=RandomDiceSource(seed=3))
            game.start_game(2)
            rolls.append(game.roll_current_turn().dice)
        assert rolls[0] == rolls[1]


def test_scripted_source_requested_counts(game, scripted_dice: ScriptedDiceSource):
    game.start_game(1)
    play_scoring_turn(game, scripted_dice, [
        ((1, 5, 2, 3, 4, 6), [0, 1]),
        ((1, 1, 1, 2), [0, 1, 2]),
    ])
    assert scripted_dice.requested == [6, 4]
