"""Cinq Mille: rules engine and turn/game state machine for the dice game."""

__version__ = "0.1.0"
