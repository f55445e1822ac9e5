# app/components/parameter_inputs.py
"""
Parameter input components for the sidebar.

Widgets are bound to session-state keys (see state.session.WIDGET_KEYS);
their values are read back as a parameter patch after drawing, so the
functions here only lay the controls out.
"""

import streamlit as st
import sys
from pathlib import Path

# Add app directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from atower.easing import EASING_KINDS
from atower.gradients import color_ramp
from config import CONFIG
from state.session import RANGE_WIDGET_KEYS, WIDGET_KEYS


def render_dimension_inputs() -> None:
    """Floors, floor height and base radius."""
    st.slider(
        "Floors",
        min_value=int(CONFIG.floors_range[0]),
        max_value=int(CONFIG.floors_range[1]),
        step=1,
        key=WIDGET_KEYS['floors'],
        help="Number of stacked floors"
    )
    col1, col2 = st.columns(2)
    with col1:
        st.slider(
            "Floor Height (m)",
            min_value=float(CONFIG.floor_height_range[0]),
            max_value=float(CONFIG.floor_height_range[1]),
            step=CONFIG.floor_height_step,
            key=WIDGET_KEYS['floorHeight'],
        )
    with col2:
        st.slider(
            "Base Radius (m)",
            min_value=float(CONFIG.base_radius_range[0]),
            max_value=float(CONFIG.base_radius_range[1]),
            step=CONFIG.base_radius_step,
            key=WIDGET_KEYS['baseRadius'],
        )


def render_sphere_inputs() -> None:
    """Sphere radius and spheres per floor."""
    col1, col2 = st.columns(2)
    with col1:
        st.slider(
            "Sphere Radius (m)",
            min_value=float(CONFIG.sphere_radius_range[0]),
            max_value=float(CONFIG.sphere_radius_range[1]),
            step=CONFIG.sphere_radius_step,
            key=WIDGET_KEYS['sphereRadius'],
        )
    with col2:
        st.slider(
            "Per Floor",
            min_value=int(CONFIG.spheres_per_floor_range[0]),
            max_value=int(CONFIG.spheres_per_floor_range[1]),
            step=1,
            key=WIDGET_KEYS['spheresPerFloor'],
            help="1 places a single sphere on the tower axis"
        )


def _render_range(label: str, field: str, bounds, step: float, easing_field: str) -> None:
    key_min, key_max = RANGE_WIDGET_KEYS[field]
    st.caption(label)
    col1, col2 = st.columns(2)
    with col1:
        st.number_input(
            "Base",
            min_value=float(bounds[0]),
            max_value=float(bounds[1]),
            step=step,
            key=key_min,
        )
    with col2:
        st.number_input(
            "Top",
            min_value=float(bounds[0]),
            max_value=float(bounds[1]),
            step=step,
            key=key_max,
        )
    st.selectbox(
        "Easing",
        options=list(EASING_KINDS),
        format_func=lambda kind: CONFIG.easing_labels.get(kind, kind),
        key=WIDGET_KEYS[easing_field],
    )


def render_gradient_inputs() -> None:
    """Twist and scale ranges with their easings."""
    _render_range(
        "Twist angle (°), base → top",
        'twistRange', CONFIG.twist_range, CONFIG.twist_step, 'twistEasing',
    )
    _render_range(
        "Scale, base → top",
        'scaleRange', CONFIG.scale_range, CONFIG.scale_step, 'scaleEasing',
    )


def render_color_inputs() -> None:
    """Bottom/top colors with a gradient preview strip."""
    col1, col2 = st.columns(2)
    with col1:
        bottom = st.color_picker("Bottom", key=WIDGET_KEYS['bottomColor'])
    with col2:
        top = st.color_picker("Top", key=WIDGET_KEYS['topColor'])

    stops = ", ".join(color_ramp(bottom, top, 7))
    st.markdown(
        f'<div style="height:14px;border-radius:7px;'
        f'background:linear-gradient(90deg, {stops});"></div>',
        unsafe_allow_html=True,
    )
