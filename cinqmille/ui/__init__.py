"""
Cinq Mille UI.

Session state reducer and the Streamlit hot-seat front end.
"""

from cinqmille.ui.state import GameSession, GameUiState, PlayerUiState

__all__ = ["GameSession", "GameUiState", "PlayerUiState"]
