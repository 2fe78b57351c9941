"""Text summary of the casing program and formation markers."""

from dataclasses import dataclass
from typing import Tuple

import pandas as pd

from core.models import WellboreDataset
from .layout import sort_casing
from .utils import format_number


@dataclass(frozen=True)
class SchematicSummary:
    """Summary lines shown next to the schematic."""

    casing_lines: Tuple[str, ...]
    formation_lines: Tuple[str, ...]


def build_summary(dataset: WellboreDataset) -> SchematicSummary:
    """Casing lines in size order (widest first), formation lines in input order."""
    casing_lines = tuple(
        f"{format_number(c.size)}\" - {format_number(c.top)}' to "
        f"{format_number(c.bottom)}' ({format_number(c.length)}' length)"
        for c in sort_casing(dataset.casing)
    )
    formation_lines = tuple(
        f"{f.name} at {format_number(f.depth)} ft" for f in dataset.formations
    )
    return SchematicSummary(casing_lines, formation_lines)


def casing_frame(dataset: WellboreDataset) -> pd.DataFrame:
    """Casing sections as a table, widest first."""
    rows = [
        {
            "Size (in)": c.size,
            "Top (ft)": c.top,
            "Bottom (ft)": c.bottom,
            "Length (ft)": c.length,
        }
        for c in sort_casing(dataset.casing)
    ]
    return pd.DataFrame(rows, columns=["Size (in)", "Top (ft)", "Bottom (ft)", "Length (ft)"])


def formation_frame(dataset: WellboreDataset) -> pd.DataFrame:
    """Formation markers as a table, in input order."""
    rows = [{"Formation": f.name, "Depth (ft)": f.depth} for f in dataset.formations]
    return pd.DataFrame(rows, columns=["Formation", "Depth (ft)"])
