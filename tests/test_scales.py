import pytest

from core.config import Margins, SchematicConfig
from core.models import CasingSection, Formation, InvalidDatasetError, WellboreDataset
from visualization.plotting.scales import LinearScale, compute_scales


def test_sample_extents(sample_dataset, config):
    scales = compute_scales(sample_dataset, config)

    assert scales.max_depth == 8360
    assert scales.max_casing_size == 30
    assert scales.depth_scale(4100) == pytest.approx(255.02, abs=0.01)


def test_plot_area(config):
    assert config.plot_width == 570
    assert config.plot_height == 520


def test_depth_scale_endpoints(sample_dataset, nested_dataset, config):
    for dataset in (sample_dataset, nested_dataset):
        scales = compute_scales(dataset, config)
        assert scales.depth_scale(0) == 0
        assert scales.depth_scale(scales.max_depth) == config.plot_height


def test_width_scale_maximum_is_third_of_plot(sample_dataset, nested_dataset, config):
    for dataset in (sample_dataset, nested_dataset):
        scales = compute_scales(dataset, config)
        assert scales.width_scale(scales.max_casing_size) == config.plot_width / 3


def test_width_scale_is_monotonic(sample_dataset, config):
    scales = compute_scales(sample_dataset, config)
    sizes = [0, 4.5, 7, 9.625, 13.375, 20, 30]
    widths = [scales.width_scale(s) for s in sizes]

    assert widths == sorted(widths)


def test_formations_contribute_to_max_depth(config):
    dataset = WellboreDataset(
        casing=(CasingSection(20, 0, 1000),),
        formations=(Formation("Basement", 12000),),
    )
    scales = compute_scales(dataset, config)

    assert scales.max_depth == 12000
    assert scales.max_casing_size == 20


def test_formations_only_has_no_width_scale(config):
    dataset = WellboreDataset(formations=(Formation("Shale", 500),))
    scales = compute_scales(dataset, config)

    assert scales.max_depth == 500
    assert scales.max_casing_size is None
    assert scales.width_scale is None


def test_empty_dataset_rejected(config):
    with pytest.raises(InvalidDatasetError):
        compute_scales(WellboreDataset(), config)


def test_zero_max_depth_rejected(config):
    dataset = WellboreDataset(formations=(Formation("Surface", 0),))
    with pytest.raises(InvalidDatasetError):
        compute_scales(dataset, config)


def test_scales_follow_config(sample_dataset):
    config = SchematicConfig(width=1000, height=900, margins=Margins(50, 100, 50, 100))
    scales = compute_scales(sample_dataset, config)

    assert scales.depth_scale(8360) == 800
    assert scales.width_scale(30) == pytest.approx(800 / 3)


def test_linear_scale_has_no_clipping():
    scale = LinearScale(domain_max=100, range_max=50)

    assert scale(200) == 100
    assert scale(-10) == -5
