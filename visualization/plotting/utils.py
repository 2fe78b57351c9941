"""
Utility functions for plotting the wellbore schematic.
"""

import numpy as np
import matplotlib.pyplot as plt
from typing import Tuple
import logging


logger = logging.getLogger(__name__)


def format_number(value: float) -> str:
    """
    Format a depth or size for labels.

    Whole numbers print without a decimal part (350.0 -> "350"), anything
    else keeps its shortest round-trip digits written positionally
    (13.375 -> "13.375", 0.00001 -> "0.00001").
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return np.format_float_positional(value, trim="-")


def px_to_points(pixels: float, dpi: float) -> float:
    """Convert logical pixels to typographic points at the given dpi."""
    return pixels * 72.0 / dpi


def create_figure(
    size_px: Tuple[float, float], dpi: int = 100
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Create a figure whose axes span the whole canvas.

    Args:
        size_px: Canvas dimensions (width, height) in logical pixels
        dpi: Pixels per inch used to size the figure

    Returns:
        Tuple of (Figure, Axes)
    """
    try:
        width, height = size_px
        fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        ax = fig.add_axes([0, 0, 1, 1])
        return fig, ax
    except Exception as e:
        logger.error(f"Error creating figure: {str(e)}")
        raise


def setup_canvas(ax: plt.Axes, width: float, height: float) -> None:
    """
    Configure axes as a pixel canvas with the origin at the top left.

    Args:
        ax: Matplotlib axes to configure
        width: Canvas width in logical pixels
        height: Canvas height in logical pixels
    """
    try:
        ax.set_xlim(0, width)
        ax.set_ylim(height, 0)
        ax.set_aspect("auto")
        ax.set_axis_off()
    except Exception as e:
        logger.error(f"Error setting up canvas: {str(e)}")
        raise
