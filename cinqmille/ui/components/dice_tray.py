"""Dice tray component: renders the latest roll with selection toggles."""

from __future__ import annotations

import streamlit as st

from cinqmille.ui.state import GameUiState


def render_dice_tray(state: GameUiState, roll_key: int) -> int | None:
    """Render dice as toggle buttons.

    Args:
        state: Current UI snapshot.
        roll_key: Changes with every roll so button keys stay unique.

    Returns:
        Index of the die the player toggled, or ``None``.
    """
    if not state.current_dice:
        st.caption("Roll the dice to begin your turn.")
        return None

    toggled: int | None = None
    cols = st.columns(len(state.current_dice))
    for i, (col, value) in enumerate(zip(cols, state.current_dice)):
        with col:
            held = i in state.selected_indices
            if st.button(
                f"[{value}]" if held else str(value),
                key=f"die_{i}_r{roll_key}",
                use_container_width=True,
                type="primary" if held else "secondary",
                disabled=not state.select_enabled,
            ):
                toggled = i

    if state.selected_indices:
        st.caption(f"Selection worth {state.selection_score} points")
    return toggled
