from core.models import WellboreDataset

# Casing program and formation tops shown on the landing page
SAMPLE_WELLBORE = {
    "casing": [
        {"size": 30, "top": 0, "bottom": 350},
        {"size": 20, "top": 0, "bottom": 2500},
        {"size": 13.375, "top": 0, "bottom": 5500},
        {"size": 9.625, "top": 0, "bottom": 8360},
    ],
    "formations": [
        {"name": "Sandstone", "depth": 1200},
        {"name": "Shale", "depth": 4100},
        {"name": "Limestone", "depth": 7000},
    ],
}


def load_sample_dataset():
    return WellboreDataset.from_dict(SAMPLE_WELLBORE)
