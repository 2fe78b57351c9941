from streamlit.testing.v1 import AppTest

from core.config import AppConfig
from core.models import CasingSection, WellboreDataset


def test_app_renders_sample_schematic():
    at = AppTest.from_file("../app.py", default_timeout=60).run()

    assert not at.exception
    assert at.title[0].value == AppConfig.PAGE_TITLE
    markdown = " ".join(m.value for m in at.markdown)
    assert "Casing Summary" in markdown
    assert "Shale at 4100 ft" in markdown
    assert at.session_state["schematic_svg"].startswith(b"<?xml")


def test_app_uses_dataset_from_session_state():
    at = AppTest.from_file("../app.py", default_timeout=60)
    at.session_state["dataset"] = WellboreDataset(
        casing=(CasingSection(7, 0, 3000),)
    )
    at.run()

    assert not at.exception
    markdown = " ".join(m.value for m in at.markdown)
    assert "7\" - 0' to 3000' (3000' length)" in markdown
    assert "Shale" not in markdown


def test_app_reports_invalid_dataset_once(capsys):
    at = AppTest.from_file("../app.py", default_timeout=60)
    at.session_state["dataset"] = WellboreDataset()
    at.run()

    assert not at.exception
    assert at.error[0].value.startswith("Cannot draw schematic")
    assert at.session_state["schematic_svg"] is None
    logged = capsys.readouterr().out
    assert logged.count("Error rendering schematic") == 1
    assert "Traceback" not in logged
