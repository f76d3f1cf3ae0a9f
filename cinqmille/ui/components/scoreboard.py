"""Scoreboard component: player totals and turn indicator."""

from __future__ import annotations

import streamlit as st

from cinqmille.ui.state import GameUiState


def render_scoreboard(state: GameUiState, winning_score: int, opening_score: int) -> None:
    """Render one row per player, marking the active seat."""
    st.markdown(f"**Scoreboard: {winning_score} to win, open at {opening_score}**")
    for row in state.players:
        indicator = "▶ " if row.is_current_player else ""
        opened = "" if row.has_opened else " (not opened)"
        delta = ""
        if row.is_current_player and state.current_turn_score > 0:
            delta = f"  +{state.current_turn_score}"
        st.markdown(f"{indicator}Player {row.id}: **{row.total_score}**{delta}{opened}")
