"""UI components for Cinq Mille."""

from cinqmille.ui.components.dice_tray import render_dice_tray
from cinqmille.ui.components.scoreboard import render_scoreboard
from cinqmille.ui.components.turn_controls import render_turn_controls

__all__ = [
    "render_dice_tray",
    "render_scoreboard",
    "render_turn_controls",
]
