import matplotlib

matplotlib.use("Agg")

import pytest

from core.config import SchematicConfig
from core.models import CasingSection, Formation, WellboreDataset
from data_loader import load_sample_dataset


@pytest.fixture
def config():
    return SchematicConfig()


@pytest.fixture
def sample_dataset():
    return load_sample_dataset()


@pytest.fixture
def nested_dataset():
    """Casing given narrowest first, with a tie in size."""
    return WellboreDataset(
        casing=(
            CasingSection(size=7, top=4000, bottom=9000),
            CasingSection(size=9.625, top=0, bottom=6000),
            CasingSection(size=7, top=0, bottom=4000),
            CasingSection(size=13.375, top=0, bottom=2000),
        ),
        formations=(
            Formation(name="Chalk", depth=3000),
            Formation(name="Marl", depth=500),
        ),
    )
