"""Turn control buttons: Roll, Keep selection, Bank."""

from __future__ import annotations

import streamlit as st

from cinqmille.ui.state import GameUiState


def render_turn_controls(state: GameUiState, roll_key: int) -> str | None:
    """Render contextual turn-action buttons.

    Returns:
        ``"roll"``, ``"select"``, ``"bank"``, or ``None`` if no action taken.
    """
    cols = st.columns(3)

    with cols[0]:
        if st.button(
            "Roll Dice",
            key=f"btn_roll_{roll_key}",
            use_container_width=True,
            disabled=not state.roll_enabled,
            type="primary",
        ):
            return "roll"

    with cols[1]:
        if st.button(
            "Keep Selection",
            key=f"btn_select_{roll_key}",
            use_container_width=True,
            disabled=not (state.select_enabled and state.selected_indices),
        ):
            return "select"

    with cols[2]:
        score = state.current_turn_score
        if st.button(
            f"Bank {score} pts" if score > 0 else "Bank",
            key=f"btn_bank_{roll_key}",
            use_container_width=True,
            disabled=not state.bank_enabled,
        ):
            return "bank"

    return None
