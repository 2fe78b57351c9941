import pytest

from core.models import CasingSection, Formation, WellboreDataset
from visualization.plotting.layout import (
    casing_gradients,
    layout_axis,
    layout_casing,
    layout_formations,
    layout_legend,
    sort_casing,
)
from visualization.plotting.scales import compute_scales
from visualization.plotting.shapes import (
    CircleShape,
    LineShape,
    RectShape,
    TextShape,
    parse_gradient_ref,
)


def test_sort_casing_descending(sample_dataset):
    sizes = [c.size for c in sort_casing(sample_dataset.casing)]
    assert sizes == [30, 20, 13.375, 9.625]


def test_sort_casing_is_stable(nested_dataset):
    ordered = sort_casing(nested_dataset.casing)

    assert [c.size for c in ordered] == [13.375, 9.625, 7, 7]
    # The two 7" strings keep their input order
    assert ordered[2].top == 4000
    assert ordered[3].top == 0


def test_sort_casing_leaves_input_untouched(nested_dataset):
    before = nested_dataset.casing
    sort_casing(nested_dataset.casing)
    assert nested_dataset.casing == before


def test_casing_shapes_in_size_order(nested_dataset, config):
    scales = compute_scales(nested_dataset, config)
    shapes = layout_casing(nested_dataset.casing, scales, config)

    assert len(shapes) == len(nested_dataset.casing)
    widths = [s.rect.width for s in shapes]
    assert widths == sorted(widths, reverse=True)
    assert [s.section for s in shapes] == sort_casing(nested_dataset.casing)


def test_casing_geometry(sample_dataset, config):
    scales = compute_scales(sample_dataset, config)
    outer = layout_casing(sample_dataset.casing, scales, config)[0]

    assert outer.rect == RectShape(
        x=190.0,
        y=0.0,
        width=190.0,
        height=scales.depth_scale(350),
        fill="url(#casing-gradient-0)",
        stroke="#000000",
        stroke_width=2,
    )
    assert outer.size_label.x == 405.0
    assert outer.size_label.y == 15
    assert outer.size_label.text == '30" casing'
    assert outer.range_label.y == 28
    assert outer.range_label.text == "(0' - 350')"


def test_casing_centred_on_plot(sample_dataset, config):
    scales = compute_scales(sample_dataset, config)
    for shape in layout_casing(sample_dataset.casing, scales, config):
        centre = shape.rect.x + shape.rect.width / 2
        assert centre == pytest.approx(config.plot_width / 2)


def test_casing_labels_follow_section_top(config):
    dataset = WellboreDataset(casing=(CasingSection(7, 5000, 10000),))
    scales = compute_scales(dataset, config)
    shape = layout_casing(dataset.casing, scales, config)[0]

    assert shape.rect.y == 260
    assert shape.rect.height == 260
    assert shape.size_label.y == 275
    assert shape.range_label.y == 288
    assert shape.size_label.x == shape.rect.x + shape.rect.width + 25


def test_palette_wraps_after_four_sections(config):
    casing = tuple(CasingSection(size, 0, 1000 * size) for size in range(6, 0, -1))
    dataset = WellboreDataset(casing=casing)
    scales = compute_scales(dataset, config)
    shapes = layout_casing(dataset.casing, scales, config)

    gradient_ids = [parse_gradient_ref(s.rect.fill) for s in shapes]
    assert gradient_ids == [
        "casing-gradient-0",
        "casing-gradient-1",
        "casing-gradient-2",
        "casing-gradient-3",
        "casing-gradient-0",
        "casing-gradient-1",
    ]


def test_gradients_cover_palette(config):
    gradients = casing_gradients(config)

    assert [g.color for g in gradients] == list(config.casing_palette)
    assert gradients[0].stops == ((0.0, 0.8), (0.5, 1.0), (1.0, 0.8))


def test_no_casing_gives_no_shapes(config):
    dataset = WellboreDataset(formations=(Formation("Shale", 100),))
    scales = compute_scales(dataset, config)
    assert layout_casing(dataset.casing, scales, config) == ()


def test_formations_keep_input_order(nested_dataset, config):
    scales = compute_scales(nested_dataset, config)
    shapes = layout_formations(nested_dataset.formations, scales, config)

    assert [s.formation.name for s in shapes] == ["Chalk", "Marl"]
    assert [s.name_label.text for s in shapes] == ["Chalk", "Marl"]


def test_formation_geometry(sample_dataset, config):
    scales = compute_scales(sample_dataset, config)
    shale = layout_formations(sample_dataset.formations, scales, config)[1]
    y = scales.depth_scale(4100)

    assert shale.line == LineShape(
        x1=142.5, y1=y, x2=427.5, y2=y, stroke="#ef4444", stroke_width=2, dash=(5, 5)
    )
    assert shale.marker.cx == 427.5
    assert shale.marker.cy == y
    assert shale.marker.r == 5
    assert shale.name_label.x == 442.5
    assert shale.name_label.y == y - 5
    assert shale.depth_label.y == y + 10
    assert shale.depth_label.text == "@ 4100 ft"


def test_formation_labels_may_overlap(config):
    dataset = WellboreDataset(
        formations=(Formation("Top A", 1000), Formation("Top B", 1000))
    )
    scales = compute_scales(dataset, config)
    first, second = layout_formations(dataset.formations, scales, config)

    assert first.name_label.y == second.name_label.y


def test_formation_group_primitives(sample_dataset, config):
    scales = compute_scales(sample_dataset, config)
    group = layout_formations(sample_dataset.formations, scales, config)[0]

    kinds = [type(p) for p in group.primitives]
    assert kinds == [LineShape, CircleShape, TextShape, TextShape]


def test_axis_uses_fixed_ticks(config):
    dataset = WellboreDataset(casing=(CasingSection(9.625, 0, 4000),))
    scales = compute_scales(dataset, config)
    axis = layout_axis(scales, config)

    assert axis.line.y2 == config.plot_height
    assert axis.title.text == "Depth (ft)"
    assert [label.text for _, label in axis.ticks] == [
        "0",
        "2000",
        "4000",
        "6000",
        "8000",
    ]
    # Ticks past the deepest entry are not clipped
    tick_ys = [tick.y1 for tick, _ in axis.ticks]
    assert tick_ys == [0, 260, 520, 780, 1040]


def test_axis_tick_shape(sample_dataset, config):
    scales = compute_scales(sample_dataset, config)
    tick, label = layout_axis(scales, config).ticks[4]

    assert tick.x1 == -5
    assert tick.x2 == 0
    assert tick.y1 == scales.depth_scale(8000)
    assert label.anchor == "end"
    assert label.baseline == "middle"


def test_legend_is_static(config):
    legend = layout_legend(config)

    texts = [s.text for s in legend if isinstance(s, TextShape)]
    assert texts == ["Legend", "Casing String", "Formation Marker"]
    swatch = next(s for s in legend if isinstance(s, RectShape))
    assert (swatch.x, swatch.y) == (config.plot_width + 20, 30)
    assert parse_gradient_ref(swatch.fill) == "casing-gradient-0"
