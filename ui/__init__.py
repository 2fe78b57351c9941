"""UI components and state management."""

from .state import (
    AppState,
    init_session_state,
    get_state,
    set_state,
)

__all__ = [
    "AppState",
    "init_session_state",
    "get_state",
    "set_state",
]
