"""Centralized state management for the application."""

import streamlit as st
from typing import Any, Dict, Optional
import logging
from dataclasses import dataclass
from core.models import WellboreDataset
from utils.monitoring import monitor_streamlit_state

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """Container for application state."""

    # Data state
    dataset: Optional[WellboreDataset] = None

    # Plot state
    schematic_svg: Optional[bytes] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert state to dictionary."""
        return {
            "dataset": self.dataset,
            "schematic_svg": self.schematic_svg,
        }


def init_session_state(defaults: Optional[Dict[str, Any]] = None) -> None:
    """Initialize session state with default values."""
    state_dict = AppState().to_dict()

    if defaults:
        state_dict.update(defaults)

    for key, value in state_dict.items():
        if key not in st.session_state:
            st.session_state[key] = value


def get_state(key: str, default: Any = None) -> Any:
    """Get a value from session state."""
    return st.session_state.get(key, default)


def set_state(key: str, value: Any) -> None:
    """Set a value in session state."""
    monitor_streamlit_state(key, value)
    st.session_state[key] = value


__all__ = [
    "AppState",
    "init_session_state",
    "get_state",
    "set_state",
]
