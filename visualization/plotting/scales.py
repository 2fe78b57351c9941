"""Linear scales mapping depth (ft) and casing size (in) to plot pixels."""

import logging
from dataclasses import dataclass
from typing import Optional

from core.config import SchematicConfig
from core.models import InvalidDatasetError, WellboreDataset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LinearScale:
    """Zero-intercept linear mapping from [0, domain_max] onto [0, range_max]."""

    domain_max: float
    range_max: float

    def __call__(self, value: float) -> float:
        return value / self.domain_max * self.range_max


@dataclass(frozen=True)
class Scales:
    """Scales and extents derived from one dataset."""

    depth_scale: LinearScale
    width_scale: Optional[LinearScale]
    max_depth: float
    max_casing_size: Optional[float]


def compute_scales(dataset: WellboreDataset, config: SchematicConfig) -> Scales:
    """
    Compute the depth and width scales for a dataset.

    The depth domain ends at the deepest casing bottom or formation, and maps
    onto the full plot height. Casing sizes map onto a third of the plot
    width. Without casing sections there is no width scale.

    Args:
        dataset: Dataset to derive extents from
        config: Layout settings providing the plot area

    Returns:
        Scales for the dataset

    Raises:
        InvalidDatasetError: If the dataset has no depth extent
    """
    depths = [c.bottom for c in dataset.casing] + [f.depth for f in dataset.formations]
    if not depths:
        raise InvalidDatasetError("Dataset has no casing sections and no formations")

    max_depth = max(depths)
    if max_depth <= 0:
        raise InvalidDatasetError(
            f"Maximum depth must be positive, got {max_depth}"
        )

    max_casing_size = max((c.size for c in dataset.casing), default=None)
    width_scale = None
    if max_casing_size is not None:
        width_scale = LinearScale(max_casing_size, config.plot_width / 3)

    logger.debug(f"Scales: max_depth={max_depth}, max_casing_size={max_casing_size}")

    return Scales(
        depth_scale=LinearScale(max_depth, config.plot_height),
        width_scale=width_scale,
        max_depth=max_depth,
        max_casing_size=max_casing_size,
    )
