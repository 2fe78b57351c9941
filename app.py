import logging

import streamlit as st

from core.config import AppConfig, get_config
from core.logging_config import setup_logging
from core.models import InvalidDatasetError
from data_loader import load_sample_dataset
from ui.components import SchematicView
from ui.state import get_state, init_session_state

setup_logging(debug=AppConfig.DEBUG_MODE)
logger = logging.getLogger(__name__)

st.set_page_config(page_title=AppConfig.PAGE_TITLE, layout="wide")

init_session_state({"dataset": load_sample_dataset()})

st.title(AppConfig.PAGE_TITLE)
st.caption(AppConfig.PAGE_SUBTITLE)

try:
    SchematicView(get_config()).render(get_state("dataset"))
except InvalidDatasetError as e:
    # Already logged by the renderer
    st.error(f"Cannot draw schematic: {e}")
