"""
Drawing primitives produced by the schematic renderer.

All coordinates are logical pixels relative to the plot origin, with y
growing downwards. Backends translate them by ``Scene.origin``.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from core.models import CasingSection, Formation


@dataclass(frozen=True)
class GradientDef:
    """Horizontal linear gradient of a single colour with varying opacity."""

    id: str
    color: str
    stops: Tuple[Tuple[float, float], ...]


@dataclass(frozen=True)
class RectShape:
    x: float
    y: float
    width: float
    height: float
    fill: str
    stroke: Optional[str] = None
    stroke_width: float = 1
    kind: str = "rect"


@dataclass(frozen=True)
class LineShape:
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str
    stroke_width: float = 1
    dash: Optional[Tuple[float, ...]] = None
    kind: str = "line"


@dataclass(frozen=True)
class CircleShape:
    cx: float
    cy: float
    r: float
    fill: str
    stroke: Optional[str] = None
    stroke_width: float = 1
    kind: str = "circle"


@dataclass(frozen=True)
class TextShape:
    """
    A single text line.

    ``anchor`` is one of "start", "middle", "end"; ``baseline`` is
    "alphabetic" (y is the baseline) or "middle".
    """

    x: float
    y: float
    text: str
    font_size: float = 12
    font_weight: str = "normal"
    color: str = "#000000"
    anchor: str = "start"
    baseline: str = "alphabetic"
    kind: str = "text"


Shape = Union[RectShape, LineShape, CircleShape, TextShape]


def gradient_ref(gradient_id: str) -> str:
    """Fill value referring to a gradient definition."""
    return f"url(#{gradient_id})"


def parse_gradient_ref(fill: str) -> Optional[str]:
    """Return the gradient id of a ``url(#id)`` fill, or None for plain colours."""
    if fill.startswith("url(#") and fill.endswith(")"):
        return fill[5:-1]
    return None


@dataclass(frozen=True)
class CasingShape:
    """Rectangle and label pair drawn for one casing section."""

    section: CasingSection
    rect: RectShape
    size_label: TextShape
    range_label: TextShape

    @property
    def primitives(self) -> Tuple[Shape, ...]:
        return (self.rect, self.size_label, self.range_label)


@dataclass(frozen=True)
class FormationShape:
    """Dashed line, end marker and label pair drawn for one formation."""

    formation: Formation
    line: LineShape
    marker: CircleShape
    name_label: TextShape
    depth_label: TextShape

    @property
    def primitives(self) -> Tuple[Shape, ...]:
        return (self.line, self.marker, self.name_label, self.depth_label)


@dataclass(frozen=True)
class AxisShape:
    """Depth axis line, title and fixed ticks."""

    line: LineShape
    title: TextShape
    ticks: Tuple[Tuple[LineShape, TextShape], ...] = field(default_factory=tuple)

    @property
    def primitives(self) -> Tuple[Shape, ...]:
        shapes = [self.line, self.title]
        for tick, label in self.ticks:
            shapes.extend((tick, label))
        return tuple(shapes)
