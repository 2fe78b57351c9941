"""
Matplotlib drawing backend for schematic scenes.

The axes are set up as a pixel canvas (one data unit per logical pixel, y
pointing down) so scene coordinates can be drawn without rescaling. Each
primitive gets its own z-order so paint order follows the scene.
"""

from io import BytesIO
from typing import Dict
import logging

import numpy as np
import matplotlib.pyplot as plt
from matplotlib import colors as mcolors
from matplotlib.patches import Circle, Rectangle

from core.config import AppConfig
from .schematic_renderer import Scene
from .shapes import (
    CircleShape,
    GradientDef,
    LineShape,
    RectShape,
    TextShape,
    parse_gradient_ref,
)
from .utils import create_figure, px_to_points, setup_canvas


logger = logging.getLogger(__name__)

# Use fast style if enabled
if AppConfig.USE_FAST_STYLE:
    plt.style.use("fast")

_ANCHORS = {"start": "left", "middle": "center", "end": "right"}
_BASELINES = {"alphabetic": "baseline", "middle": "center"}


def gradient_image(gradient: GradientDef, samples: int = 64) -> np.ndarray:
    """RGBA image (1 x samples) of a horizontal opacity gradient."""
    r, g, b, _ = mcolors.to_rgba(gradient.color)
    offsets = [offset for offset, _ in gradient.stops]
    opacities = [opacity for _, opacity in gradient.stops]
    alpha = np.interp(np.linspace(0.0, 1.0, samples), offsets, opacities)

    image = np.empty((1, samples, 4))
    image[..., 0] = r
    image[..., 1] = g
    image[..., 2] = b
    image[..., 3] = alpha
    return image


class MatplotlibBackend:
    """Draws scene primitives onto matplotlib axes."""

    def __init__(self, ax: plt.Axes, scene: Scene, dpi: int) -> None:
        self.ax = ax
        self.dpi = dpi
        self.dx, self.dy = scene.origin
        self.gradients: Dict[str, GradientDef] = {g.id: g for g in scene.gradients}
        self._zorder = 1

    def _next_zorder(self) -> int:
        self._zorder += 1
        return self._zorder

    def _points(self, pixels: float) -> float:
        return px_to_points(pixels, self.dpi)

    def draw(self, shape) -> None:
        if isinstance(shape, RectShape):
            self.draw_rect(shape)
        elif isinstance(shape, LineShape):
            self.draw_line(shape)
        elif isinstance(shape, CircleShape):
            self.draw_circle(shape)
        elif isinstance(shape, TextShape):
            self.draw_text(shape)
        else:
            raise TypeError(f"Unsupported shape: {shape!r}")

    def draw_rect(self, shape: RectShape) -> None:
        x, y = shape.x + self.dx, shape.y + self.dy
        zorder = self._next_zorder()
        gradient_id = parse_gradient_ref(shape.fill)

        if gradient_id is not None:
            gradient = self.gradients.get(gradient_id)
            if gradient is None:
                raise KeyError(f"Unknown gradient: {gradient_id}")
            self.ax.imshow(
                gradient_image(gradient),
                extent=(x, x + shape.width, y + shape.height, y),
                aspect="auto",
                interpolation="bilinear",
                zorder=zorder,
            )
            facecolor = "none"
        else:
            facecolor = shape.fill

        self.ax.add_patch(
            Rectangle(
                (x, y),
                shape.width,
                shape.height,
                facecolor=facecolor,
                edgecolor=shape.stroke or "none",
                linewidth=self._points(shape.stroke_width) if shape.stroke else 0,
                zorder=zorder,
            )
        )

    def draw_line(self, shape: LineShape) -> None:
        linewidth = self._points(shape.stroke_width)
        kwargs = {}
        if shape.dash:
            # Dash lengths are scaled by the line width in matplotlib
            kwargs["linestyle"] = (
                0,
                tuple(self._points(d) / linewidth for d in shape.dash),
            )
        self.ax.plot(
            [shape.x1 + self.dx, shape.x2 + self.dx],
            [shape.y1 + self.dy, shape.y2 + self.dy],
            color=shape.stroke,
            linewidth=linewidth,
            solid_capstyle="butt",
            zorder=self._next_zorder(),
            **kwargs,
        )

    def draw_circle(self, shape: CircleShape) -> None:
        self.ax.add_patch(
            Circle(
                (shape.cx + self.dx, shape.cy + self.dy),
                shape.r,
                facecolor=shape.fill,
                edgecolor=shape.stroke or "none",
                linewidth=self._points(shape.stroke_width) if shape.stroke else 0,
                zorder=self._next_zorder(),
            )
        )

    def draw_text(self, shape: TextShape) -> None:
        self.ax.text(
            shape.x + self.dx,
            shape.y + self.dy,
            shape.text,
            fontsize=self._points(shape.font_size),
            fontweight=shape.font_weight,
            color=shape.color,
            ha=_ANCHORS.get(shape.anchor, "left"),
            va=_BASELINES.get(shape.baseline, "baseline"),
            zorder=self._next_zorder(),
        )


def draw_scene(scene: Scene, dpi: int = AppConfig.PLOT_DPI) -> plt.Figure:
    """
    Draw a scene onto a new matplotlib figure.

    Args:
        scene: Scene produced by SchematicRenderer
        dpi: Pixels per inch; the figure measures scene.width x scene.height px

    Returns:
        matplotlib Figure; the caller owns it and should close it
    """
    try:
        fig, ax = create_figure((scene.width, scene.height), dpi=dpi)
        backend = MatplotlibBackend(ax, scene, dpi)
        for shape in scene.primitives:
            backend.draw(shape)

        # imshow rescales the axes, so the canvas is configured last
        setup_canvas(ax, scene.width, scene.height)
        return fig

    except Exception as e:
        logger.error(f"Error drawing scene: {str(e)}")
        raise


def figure_bytes(
    fig: plt.Figure, fmt: str = AppConfig.EXPORT_FORMAT, dpi: int = AppConfig.PLOT_DPI
) -> bytes:
    """Save an already drawn figure to image bytes (svg, png, pdf)."""
    buffer = BytesIO()
    fig.savefig(buffer, format=fmt, dpi=dpi)
    return buffer.getvalue()


def export_scene(
    scene: Scene, fmt: str = AppConfig.EXPORT_FORMAT, dpi: int = AppConfig.PLOT_DPI
) -> bytes:
    """Render a scene to image bytes."""
    fig = draw_scene(scene, dpi=dpi)
    try:
        return figure_bytes(fig, fmt=fmt, dpi=dpi)
    finally:
        plt.close(fig)
