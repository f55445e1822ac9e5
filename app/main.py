"""
A-Tower Generator - Real-Time Live Interface

Adjust floors, twist, scale and colors in the sidebar; the 3D view and
metrics update on every change.

Run with:
    streamlit run app/main.py
"""

import logging
import matplotlib.pyplot as plt
import streamlit as st
import sys
from pathlib import Path

# Add app directory to path
sys.path.insert(0, str(Path(__file__).parent))
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import CONFIG
from state import get_store, read_widgets
from services import TowerService, ExportService
from components import (
    render_3d_model,
    render_metrics_panel,
    render_dimension_inputs,
    render_sphere_inputs,
    render_gradient_inputs,
    render_color_inputs,
    render_preset_menu,
)
from atower.export import EXPORT_FORMATS
from atower.storage import StorageError
from atower.viz import plot_gradient_profile

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
logger = logging.getLogger("atower.app")

# Page configuration - must be first Streamlit command
st.set_page_config(
    page_title=CONFIG.app_name,
    page_icon="🗼",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown("""
<style>
    .block-container {
        padding-top: 1rem;
        padding-bottom: 1rem;
    }
    [data-testid="stMetricValue"] {
        font-size: 1.1rem;
    }
    .sidebar-header {
        font-size: 0.9rem;
        font-weight: 600;
        color: #666;
        text-transform: uppercase;
        letter-spacing: 0.05em;
        margin-top: 1rem;
        margin-bottom: 0.5rem;
    }
</style>
""", unsafe_allow_html=True)

store = get_store()


# =============================================================================
# SIDEBAR - All Parameter Controls
# =============================================================================

with st.sidebar:
    st.title(f"🗼 {CONFIG.app_name}")
    st.caption(CONFIG.app_subtitle)

    st.divider()

    st.markdown('<p class="sidebar-header">📐 Tower Dimensions</p>', unsafe_allow_html=True)
    render_dimension_inputs()

    st.markdown('<p class="sidebar-header">🔵 Spheres</p>', unsafe_allow_html=True)
    render_sphere_inputs()

    st.divider()

    st.markdown('<p class="sidebar-header">🌀 Gradients</p>', unsafe_allow_html=True)
    render_gradient_inputs()

    st.markdown('<p class="sidebar-header">🎨 Colors</p>', unsafe_allow_html=True)
    render_color_inputs()

    st.divider()

    st.markdown('<p class="sidebar-header">⭐ Presets</p>', unsafe_allow_html=True)
    render_preset_menu()


# =============================================================================
# APPLY WIDGET VALUES
# =============================================================================

patch = read_widgets()
if patch != store.params.to_dict():
    try:
        store.set_params(patch)
    except StorageError as e:
        logger.error("Could not persist parameters: %s", e)
        st.warning(f"Changes could not be saved: {e}")

params = store.params
result = TowerService.generate(params)


# =============================================================================
# MAIN AREA
# =============================================================================

col_title, col_status = st.columns([3, 1])
with col_title:
    st.markdown("#### Procedural study")
    st.caption(
        "Adjust slabs, twists, and gradient colors to explore sculptural tower massing ideas."
    )
with col_status:
    active = store.active_preset
    if active is not None:
        st.success(f"Preset: {active.name}")
    else:
        st.info("Unsaved edits")

col_3d, col_metrics = st.columns([2, 1])

with col_3d:
    show_col1, show_col2, show_col3 = st.columns(3)
    with show_col1:
        show_slabs = st.checkbox("Show floor slabs", value=True, key="show_slabs")
    with show_col2:
        show_spheres = st.checkbox("Show spheres", value=True, key="show_spheres")
    with show_col3:
        show_core = st.checkbox("Show core", value=True, key="show_core")

    fig = render_3d_model(
        params,
        height=CONFIG.viewer_height,
        show_slabs=show_slabs,
        show_spheres=show_spheres,
        show_core=show_core,
        sphere_segments=CONFIG.viewer_sphere_segments,
        sphere_rings=CONFIG.viewer_sphere_rings,
    )
    st.plotly_chart(fig, use_container_width=True, key="main_3d")
    st.caption("Drag to rotate, scroll to zoom.")

with col_metrics:
    render_metrics_panel(result['metrics'])

    st.divider()

    st.subheader("Export")
    include_slabs = st.checkbox("Include floor slabs in mesh", value=True, key="export_slabs")
    include_core = st.checkbox("Include core column in mesh", value=True, key="export_core")

    st.download_button(
        label="⬇️ Mesh (OBJ)",
        data=ExportService.obj(
            params,
            include_slabs=include_slabs,
            include_core=include_core,
            segments=CONFIG.export_sphere_segments,
            rings=CONFIG.export_sphere_rings,
        ),
        file_name="tower.obj",
        mime="text/plain",
        use_container_width=True,
    )
    st.download_button(
        label="⬇️ Model (JSON)",
        data=ExportService.model_json(params),
        file_name="tower_model.json",
        mime="application/json",
        use_container_width=True,
    )
    st.download_button(
        label="⬇️ Floor schedule (CSV)",
        data=ExportService.floor_csv(params),
        file_name="tower_floors.csv",
        mime="text/csv",
        use_container_width=True,
    )

    with st.expander("Save to disk"):
        out_path = st.text_input("Path", value="tower.obj", key="export_path")
        suffix = Path(out_path).suffix.lower().lstrip('.')
        fmt = suffix if suffix in EXPORT_FORMATS else 'obj'
        if st.button("Write file", use_container_width=True):
            mesh_options = {'include_slabs': include_slabs, 'include_core': include_core} if fmt == 'obj' else {}
            ok, message = ExportService.save(params, out_path, fmt=fmt, **mesh_options)
            if ok:
                st.success(f"Written: {message}")
            else:
                st.error(message)

    with st.expander("Summary"):
        st.code(ExportService.summary_text(params))

st.divider()

with st.expander("Gradient profile and floor schedule"):
    col_plot, col_table = st.columns([3, 2])
    with col_plot:
        profile_fig = plot_gradient_profile(params, title="Twist / scale / color by floor")
        st.pyplot(profile_fig)
        plt.close(profile_fig)
    with col_table:
        st.dataframe(ExportService.schedule(params), use_container_width=True, hide_index=True)
