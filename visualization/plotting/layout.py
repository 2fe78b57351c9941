"""
Placement of casing strings, formation markers, the depth axis and legend.

Every function here is pure: it maps dataset entries through the scales and
returns frozen shapes in drawing order.
"""

import logging
from typing import Iterable, List, Sequence, Tuple

from core.config import SchematicConfig
from core.models import CasingSection, Formation
from .scales import Scales
from .shapes import (
    AxisShape,
    CasingShape,
    CircleShape,
    FormationShape,
    GradientDef,
    LineShape,
    RectShape,
    Shape,
    TextShape,
    gradient_ref,
)
from .utils import format_number

logger = logging.getLogger(__name__)


def casing_gradient_id(index: int) -> str:
    return f"casing-gradient-{index}"


def casing_gradients(config: SchematicConfig) -> Tuple[GradientDef, ...]:
    """One gradient definition per palette colour."""
    return tuple(
        GradientDef(casing_gradient_id(i), color, config.gradient_stops)
        for i, color in enumerate(config.casing_palette)
    )


def sort_casing(casing: Iterable[CasingSection]) -> List[CasingSection]:
    """Sort casing widest first; equal sizes keep their input order."""
    return sorted(casing, key=lambda section: section.size, reverse=True)


def layout_casing(
    casing: Sequence[CasingSection], scales: Scales, config: SchematicConfig
) -> Tuple[CasingShape, ...]:
    """
    Lay out casing sections as centred rectangles with labels on the right.

    Shapes come out widest first so narrower inner strings paint over the
    outer ones they overlap. Fills cycle through the palette by position.

    Args:
        casing: Casing sections in input order
        scales: Scales computed for the dataset
        config: Layout settings

    Returns:
        Tuple of CasingShape in drawing order
    """
    if not casing:
        return ()

    depth_scale, width_scale = scales.depth_scale, scales.width_scale
    center = config.plot_width / 2
    palette_size = len(config.casing_palette)
    shapes = []

    for index, section in enumerate(sort_casing(casing)):
        width = width_scale(section.size)
        y_top = depth_scale(section.top)
        height = depth_scale(section.bottom) - y_top
        x = center - width / 2
        label_x = x + width + config.casing_label_offset

        rect = RectShape(
            x=x,
            y=y_top,
            width=width,
            height=height,
            fill=gradient_ref(casing_gradient_id(index % palette_size)),
            stroke=config.casing_stroke,
            stroke_width=config.casing_stroke_width,
        )
        size_label = TextShape(
            x=label_x,
            y=y_top + config.casing_size_label_dy,
            text=f'{format_number(section.size)}" casing',
            font_size=config.font_size_xs,
            font_weight="medium",
            color=config.foreground,
        )
        range_label = TextShape(
            x=label_x,
            y=y_top + config.casing_range_label_dy,
            text=f"({format_number(section.top)}' - {format_number(section.bottom)}')",
            font_size=config.font_size_xs,
            color=config.muted_foreground,
        )
        shapes.append(CasingShape(section, rect, size_label, range_label))

    return tuple(shapes)


def layout_formations(
    formations: Sequence[Formation], scales: Scales, config: SchematicConfig
) -> Tuple[FormationShape, ...]:
    """Lay out formation markers in input order; labels may overlap."""
    x_start = config.plot_width / 2 - config.plot_width / 4
    x_end = config.plot_width / 2 + config.plot_width / 4
    label_x = x_end + config.formation_label_offset
    shapes = []

    for formation in formations:
        y = scales.depth_scale(formation.depth)
        line = LineShape(
            x1=x_start,
            y1=y,
            x2=x_end,
            y2=y,
            stroke=config.formation_color,
            stroke_width=config.formation_stroke_width,
            dash=config.formation_dash,
        )
        marker = CircleShape(
            cx=x_end,
            cy=y,
            r=config.marker_radius,
            fill=config.formation_color,
            stroke=config.marker_stroke,
            stroke_width=2,
        )
        name_label = TextShape(
            x=label_x,
            y=y - 5,
            text=formation.name,
            font_size=config.font_size_sm,
            font_weight="semibold",
            color=config.foreground,
        )
        depth_label = TextShape(
            x=label_x,
            y=y + 10,
            text=f"@ {format_number(formation.depth)} ft",
            font_size=config.font_size_xs,
            color=config.muted_foreground,
        )
        shapes.append(FormationShape(formation, line, marker, name_label, depth_label))

    return tuple(shapes)


def layout_axis(scales: Scales, config: SchematicConfig) -> AxisShape:
    """
    Depth axis at x=0 with the configured fixed ticks.

    Ticks are placed through the depth scale as-is, so ticks deeper than the
    dataset land below the plot area.
    """
    line = LineShape(
        x1=0,
        y1=0,
        x2=0,
        y2=config.plot_height,
        stroke=config.foreground,
        stroke_width=2,
    )
    title = TextShape(
        x=-30,
        y=-10,
        text=config.axis_label,
        font_size=config.font_size_sm,
        font_weight="semibold",
        color=config.foreground,
        anchor="middle",
    )
    ticks = []
    for depth in config.depth_ticks:
        y = scales.depth_scale(depth)
        tick = LineShape(
            x1=-config.tick_length, y1=y, x2=0, y2=y, stroke=config.foreground
        )
        label = TextShape(
            x=-10,
            y=y,
            text=format_number(depth),
            font_size=config.font_size_xs,
            color=config.muted_foreground,
            anchor="end",
            baseline="middle",
        )
        ticks.append((tick, label))

    return AxisShape(line=line, title=title, ticks=tuple(ticks))


def layout_legend(config: SchematicConfig) -> Tuple[Shape, ...]:
    """Static key with one casing swatch and one formation marker."""
    ox, oy = config.plot_width + 20, 20
    swatch_y = oy + 10
    marker_y = oy + 35 + 7

    return (
        TextShape(
            x=ox,
            y=oy - 5,
            text="Legend",
            font_size=config.font_size_sm,
            font_weight="semibold",
            color=config.foreground,
        ),
        RectShape(
            x=ox,
            y=swatch_y,
            width=20,
            height=15,
            fill=gradient_ref(casing_gradient_id(0)),
            stroke=config.casing_stroke,
        ),
        TextShape(
            x=ox + 25,
            y=swatch_y + 12,
            text="Casing String",
            font_size=config.font_size_xs,
            color=config.foreground,
        ),
        LineShape(
            x1=ox,
            y1=marker_y,
            x2=ox + 20,
            y2=marker_y,
            stroke=config.formation_color,
            stroke_width=config.formation_stroke_width,
            dash=config.formation_dash,
        ),
        CircleShape(
            cx=ox + 20,
            cy=marker_y,
            r=4,
            fill=config.formation_color,
            stroke=config.marker_stroke,
            stroke_width=1.5,
        ),
        TextShape(
            x=ox + 30,
            y=oy + 35 + 12,
            text="Formation Marker",
            font_size=config.font_size_xs,
            color=config.foreground,
        ),
    )
