"""
Schematic view: figure, export and data summary.
"""

import streamlit as st
import matplotlib.pyplot as plt
import logging
from core.config import AppConfig
from core.models import WellboreDataset
from visualization.plotting import Scene, SchematicRenderer, draw_scene, figure_bytes
from visualization.plotting.summary import casing_frame, formation_frame
from ..state import set_state


logger = logging.getLogger(__name__)


class SchematicView:
    """
    UI component showing a rendered wellbore schematic.
    """

    def __init__(self, config: AppConfig):
        """
        Initialize the schematic view.

        Args:
            config: Application configuration
        """
        self.config = config
        self.renderer = SchematicRenderer(config.schematic)

    def render(self, dataset: WellboreDataset, key: str = "schematic") -> Scene:
        """
        Render the schematic figure and summary for a dataset.

        Args:
            dataset: Dataset to draw
            key: Unique key for the component

        Returns:
            The rendered Scene
        """
        scene = self.renderer.render(dataset)

        fig = draw_scene(scene, dpi=AppConfig.PLOT_DPI)
        try:
            st.pyplot(fig)
            svg = figure_bytes(fig, fmt=AppConfig.EXPORT_FORMAT)
        finally:
            plt.close(fig)

        set_state("schematic_svg", svg)
        st.download_button(
            "Download SVG",
            data=svg,
            file_name="wellbore_schematic.svg",
            mime="image/svg+xml",
            key=f"{key}_download",
        )

        self._render_summary(scene, dataset)
        return scene

    def _render_summary(self, scene: Scene, dataset: WellboreDataset) -> None:
        """Casing and formation summaries side by side."""
        col1, col2 = st.columns(2)

        with col1:
            st.markdown("#### Casing Summary")
            st.markdown("\n".join(f"- {line}" for line in scene.summary.casing_lines))
            if dataset.casing:
                st.dataframe(casing_frame(dataset), hide_index=True)

        with col2:
            st.markdown("#### Formation Summary")
            st.markdown(
                "\n".join(f"- {line}" for line in scene.summary.formation_lines)
            )
            if dataset.formations:
                st.dataframe(formation_frame(dataset), hide_index=True)
