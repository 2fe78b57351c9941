"""Core package for wellbore data handling and application configuration."""

from .config import AppConfig, Margins, SchematicConfig, get_config
from .models import (
    CasingSection,
    Formation,
    WellboreDataset,
    InvalidDatasetError,
    validate_dataset,
)

__all__ = [
    "AppConfig",
    "Margins",
    "SchematicConfig",
    "get_config",
    "CasingSection",
    "Formation",
    "WellboreDataset",
    "InvalidDatasetError",
    "validate_dataset",
]
