"""Wellbore data containers and input validation."""

import math
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

logger = logging.getLogger(__name__)


class InvalidDatasetError(ValueError):
    """Raised when a wellbore dataset cannot be rendered."""

    def __init__(self, message: str, entry: Any = None, index: Optional[int] = None):
        super().__init__(message)
        self.entry = entry
        self.index = index


@dataclass(frozen=True)
class CasingSection:
    """One continuous casing string: outer diameter (in) and depth interval (ft)."""

    size: float
    top: float
    bottom: float

    @property
    def length(self) -> float:
        return self.bottom - self.top


@dataclass(frozen=True)
class Formation:
    """A formation top marked at a single depth (ft)."""

    name: str
    depth: float


@dataclass(frozen=True)
class WellboreDataset:
    """Container for the casing program and formation markers of one well."""

    casing: Tuple[CasingSection, ...] = ()
    formations: Tuple[Formation, ...] = ()

    def __post_init__(self):
        # Store collections as tuples so the dataset stays immutable
        object.__setattr__(self, "casing", tuple(self.casing))
        object.__setattr__(self, "formations", tuple(self.formations))

    @property
    def is_empty(self) -> bool:
        return not self.casing and not self.formations

    @classmethod
    def from_dict(cls, data: Dict[str, Iterable[Dict[str, Any]]]) -> "WellboreDataset":
        """
        Build a dataset from plain records.

        Args:
            data: Mapping with optional "casing" records (size, top, bottom)
                  and "formations" records (name, depth)

        Returns:
            WellboreDataset with numeric fields converted to float
        """
        casing = tuple(
            CasingSection(
                size=float(rec["size"]),
                top=float(rec["top"]),
                bottom=float(rec["bottom"]),
            )
            for rec in data.get("casing", ())
        )
        formations = tuple(
            Formation(name=rec["name"], depth=float(rec["depth"]))
            for rec in data.get("formations", ())
        )
        return cls(casing=casing, formations=formations)


def _is_finite(*values: float) -> bool:
    return all(isinstance(v, (int, float)) and math.isfinite(v) for v in values)


def validate_casing(section: CasingSection, index: int) -> None:
    """Check a single casing section, raising InvalidDatasetError on failure."""
    if not _is_finite(section.size, section.top, section.bottom):
        raise InvalidDatasetError(
            f"Casing #{index} has non-finite values: {section}", section, index
        )
    if section.size <= 0:
        raise InvalidDatasetError(
            f"Casing #{index} size must be positive, got {section.size}",
            section,
            index,
        )
    if section.top < 0:
        raise InvalidDatasetError(
            f"Casing #{index} top must not be negative, got {section.top}",
            section,
            index,
        )
    if section.bottom <= section.top:
        raise InvalidDatasetError(
            f"Casing #{index} bottom ({section.bottom}) must be below top "
            f"({section.top})",
            section,
            index,
        )


def validate_formation(formation: Formation, index: int) -> None:
    """Check a single formation marker, raising InvalidDatasetError on failure."""
    if not isinstance(formation.name, str) or not formation.name.strip():
        raise InvalidDatasetError(
            f"Formation #{index} must have a name", formation, index
        )
    if not _is_finite(formation.depth):
        raise InvalidDatasetError(
            f"Formation #{index} has a non-finite depth: {formation.depth}",
            formation,
            index,
        )
    if formation.depth < 0:
        raise InvalidDatasetError(
            f"Formation #{index} depth must not be negative, got {formation.depth}",
            formation,
            index,
        )


def validate_dataset(dataset: WellboreDataset) -> None:
    """
    Validate a dataset before rendering.

    Raises:
        InvalidDatasetError: If the dataset is empty or any entry is invalid
    """
    if dataset.is_empty:
        raise InvalidDatasetError("Dataset has no casing sections and no formations")

    for index, section in enumerate(dataset.casing):
        validate_casing(section, index)
    for index, formation in enumerate(dataset.formations):
        validate_formation(formation, index)

    logger.debug(
        f"Validated dataset: {len(dataset.casing)} casing sections, "
        f"{len(dataset.formations)} formations"
    )


__all__ = [
    "CasingSection",
    "Formation",
    "WellboreDataset",
    "InvalidDatasetError",
    "validate_casing",
    "validate_formation",
    "validate_dataset",
]
