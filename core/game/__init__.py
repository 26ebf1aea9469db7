"""Game engine and state management."""

from core.game.state import GamePhase, GameState, default_state
from core.game.engine import Action, apply_action, resolve_outcome, available_actions
from core.game.view import TableView, build_table_view

__all__ = [
    "GamePhase",
    "GameState",
    "default_state",
    "Action",
    "apply_action",
    "resolve_outcome",
    "available_actions",
    "TableView",
    "build_table_view",
]
