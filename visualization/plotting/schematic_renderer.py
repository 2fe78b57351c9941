"""
Core rendering for wellbore schematics.
"""

from dataclasses import dataclass
from typing import Optional, Tuple
import logging

from core.config import SchematicConfig
from core.models import WellboreDataset, validate_dataset
from utils.monitoring import log_performance
from .layout import (
    casing_gradients,
    layout_axis,
    layout_casing,
    layout_formations,
    layout_legend,
)
from .scales import Scales, compute_scales
from .shapes import AxisShape, CasingShape, FormationShape, GradientDef, Shape
from .summary import SchematicSummary, build_summary


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scene:
    """Immutable description of one rendered schematic."""

    width: float
    height: float
    origin: Tuple[float, float]
    gradients: Tuple[GradientDef, ...]
    axis: AxisShape
    casing: Tuple[CasingShape, ...]
    formations: Tuple[FormationShape, ...]
    legend: Tuple[Shape, ...]
    summary: SchematicSummary
    scales: Scales

    @property
    def primitives(self) -> Tuple[Shape, ...]:
        """All shapes in paint order: axis, casing, formations, legend."""
        shapes = list(self.axis.primitives)
        for group in self.casing:
            shapes.extend(group.primitives)
        for group in self.formations:
            shapes.extend(group.primitives)
        shapes.extend(self.legend)
        return tuple(shapes)


class SchematicRenderer:
    """
    Class for rendering wellbore schematics.

    The renderer turns a WellboreDataset into a Scene of drawing primitives.
    It computes a depth scale (feet to pixels) and a width scale (inches to
    pixels), lays out the casing strings widest first so nested strings stay
    visible, places formation markers in input order and adds the fixed depth
    axis and legend.

    Rendering keeps no state between calls; the same dataset always yields
    an equal Scene.

    Attributes:
        config (SchematicConfig): Canvas, palette and tick settings
    """

    def __init__(self, config: Optional[SchematicConfig] = None) -> None:
        """
        Initialize the schematic renderer.

        Args:
            config: Layout settings; defaults to the 800x600 canvas
        """
        self.config = config or SchematicConfig()

    @log_performance
    def render(self, dataset: WellboreDataset) -> Scene:
        """
        Render a dataset into a scene.

        Args:
            dataset: Casing sections and formation markers to draw

        Returns:
            Scene with gradients, axis, casing, formation and legend shapes,
            plus the summary text

        Raises:
            InvalidDatasetError: If the dataset is empty or has an invalid entry
        """
        try:
            validate_dataset(dataset)
            config = self.config
            scales = compute_scales(dataset, config)

            scene = Scene(
                width=config.width,
                height=config.height,
                origin=(config.margins.left, config.margins.top),
                gradients=casing_gradients(config),
                axis=layout_axis(scales, config),
                casing=layout_casing(dataset.casing, scales, config),
                formations=layout_formations(dataset.formations, scales, config),
                legend=layout_legend(config),
                summary=build_summary(dataset),
                scales=scales,
            )
            logger.debug(
                f"Rendered schematic with {len(scene.casing)} casing strings "
                f"and {len(scene.formations)} formations"
            )
            return scene

        except Exception as e:
            logger.error(f"Error rendering schematic: {str(e)}")
            raise
