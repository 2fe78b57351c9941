"""
Plotting module for visualization package.
Contains the wellbore schematic renderer and its matplotlib backend.
"""

from .schematic_renderer import SchematicRenderer, Scene
from .scales import LinearScale, Scales, compute_scales
from .layout import (
    layout_axis,
    layout_casing,
    layout_formations,
    layout_legend,
    sort_casing,
)
from .summary import SchematicSummary, build_summary
from .backend import draw_scene, export_scene, figure_bytes
from .utils import format_number

__all__ = [
    "SchematicRenderer",
    "Scene",
    "LinearScale",
    "Scales",
    "compute_scales",
    "layout_axis",
    "layout_casing",
    "layout_formations",
    "layout_legend",
    "sort_casing",
    "SchematicSummary",
    "build_summary",
    "draw_scene",
    "export_scene",
    "figure_bytes",
    "format_number",
]
