"""Configuration settings for the application."""

import streamlit as st
from dataclasses import dataclass, field
from typing import Tuple, ClassVar


@dataclass(frozen=True)
class Margins:
    """Canvas margins in logical pixels."""

    top: float = 40
    right: float = 150
    bottom: float = 40
    left: float = 80


@dataclass(frozen=True)
class SchematicConfig:
    """Layout settings owned by the schematic renderer."""

    # Canvas
    width: float = 800
    height: float = 600
    margins: Margins = field(default_factory=Margins)

    # Casing strings, wrapped by position in size order
    casing_palette: Tuple[str, ...] = ("#8B4513", "#A0522D", "#CD853F", "#DEB887")
    casing_stroke: str = "#000000"
    casing_stroke_width: float = 2
    casing_label_offset: float = 25
    casing_size_label_dy: float = 15
    casing_range_label_dy: float = 28
    # (offset, opacity) stops of the horizontal casing gradient
    gradient_stops: Tuple[Tuple[float, float], ...] = ((0.0, 0.8), (0.5, 1.0), (1.0, 0.8))

    # Formation markers
    formation_color: str = "#ef4444"
    formation_stroke_width: float = 2
    formation_dash: Tuple[float, ...] = (5, 5)
    marker_radius: float = 5
    marker_stroke: str = "#ffffff"
    formation_label_offset: float = 15

    # Axis
    depth_ticks: Tuple[float, ...] = (0, 2000, 4000, 6000, 8000)
    tick_length: float = 5
    axis_label: str = "Depth (ft)"

    # Text
    foreground: str = "#0f172a"
    muted_foreground: str = "#64748b"
    font_size_xs: float = 12
    font_size_sm: float = 14

    @property
    def plot_width(self) -> float:
        return self.width - self.margins.left - self.margins.right

    @property
    def plot_height(self) -> float:
        return self.height - self.margins.top - self.margins.bottom


@dataclass
class AppConfig:
    """Application configuration settings."""

    # Plot Settings
    PLOT_DPI: ClassVar[int] = 100
    USE_FAST_STYLE: ClassVar[bool] = True  # Use matplotlib fast style
    EXPORT_FORMAT: ClassVar[str] = "svg"

    # Page Settings
    PAGE_TITLE: ClassVar[str] = "Wellbore Schematic Visualization"
    PAGE_SUBTITLE: ClassVar[str] = (
        "Vertical wellbore with casing strings and formation markers"
    )

    # Debug Settings
    DEBUG_MODE: ClassVar[bool] = False  # Enable detailed debug logging
    PROFILE_PERFORMANCE: ClassVar[bool] = False  # Enable performance profiling
    MONITOR_MEMORY: ClassVar[bool] = False  # Track memory usage

    # Instance settings (can be overridden)
    schematic: SchematicConfig = field(default_factory=SchematicConfig)


@st.cache_resource
def get_config() -> AppConfig:
    """Get application configuration singleton."""
    return AppConfig()


__all__ = ["AppConfig", "Margins", "SchematicConfig", "get_config"]
