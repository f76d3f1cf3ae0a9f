"""Cinq Mille: Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st

from cinqmille.config import configure_logging, get_settings
from cinqmille.engine.game import GameOrchestrator
from cinqmille.ui.state import GameSession


_RULES = """\
**Goal:** First to the winning score wins!

**Rolling:**
- Roll 6 dice, then set aside at least one scoring die
- Keep rolling the rest to build your turn score
- **Bust** = nothing scores, lose all unbanked points
- **Hot Dice** = every die scored, roll all 6 again
- Your first bank must reach the opening score

**Scoring:**
| Combo | Points |
|---|---|
| Five 1s or five 5s | 5,000 |
| Three 1s | 1,000 |
| Full (three A + two B) | A x B x 100 |
| 1-2-3-4-5 or 2-3-4-5-6 | 500 |
| Three 2s-6s | Face x 100 |
| Single 1 | 100 |
| Single 5 | 50 |
"""


def _session() -> GameSession:
    ss = st.session_state
    if "session" not in ss:
        ss["session"] = GameSession(GameOrchestrator.from_settings(get_settings()))
        ss["roll_key"] = 0
    return ss["session"]


def _render_setup(session: GameSession) -> None:
    count = st.number_input("Number of players", min_value=1, max_value=8, value=2, step=1)
    if st.button("Start Game", type="primary"):
        session.start_game(int(count))
        st.rerun()


def _render_game(session: GameSession) -> None:
    from cinqmille.ui.components import (
        render_dice_tray,
        render_scoreboard,
        render_turn_controls,
    )

    ss = st.session_state
    state = session.state
    config = session.game.config

    render_scoreboard(state, config.winning_score, config.opening_score)
    st.info(state.message)

    toggled = render_dice_tray(state, ss["roll_key"])
    if toggled is not None:
        session.toggle_die(toggled)
        st.rerun()

    action = render_turn_controls(state, ss["roll_key"])
    if action == "roll":
        session.roll()
        ss["roll_key"] += 1
        st.rerun()
    elif action == "select":
        session.select()
        st.rerun()
    elif action == "bank":
        session.bank()
        st.rerun()

    if state.is_game_over and st.button("New Game"):
        del ss["session"]
        st.rerun()


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(page_title="Cinq Mille", page_icon="🎲", layout="centered")
    configure_logging()

    session = _session()
    st.title("Cinq Mille")

    if not session.state.players:
        _render_setup(session)
    else:
        _render_game(session)

    with st.sidebar:
        st.markdown("### Rules")
        st.markdown(_RULES)


if __name__ == "__main__":
    main()
