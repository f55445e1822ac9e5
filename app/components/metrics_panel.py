# app/components/metrics_panel.py
"""
Metrics display panel component.
"""

import streamlit as st
from typing import Dict, Any


def render_metrics_panel(metrics: Dict[str, Any]) -> None:
    """
    Render the tower's headline numbers.

    Parameters:
    -----------
    metrics : Dict
        Output of TowerService.generate()['metrics']
    """
    st.subheader("Tower")
    cols = st.columns(3)
    with cols[0]:
        st.metric("Floors", metrics.get('n_floors', 0))
    with cols[1]:
        st.metric("Height", f"{metrics.get('total_height', 0):.1f} m")
    with cols[2]:
        st.metric("Spheres", metrics.get('n_spheres', 0))

    st.subheader("Gradients")
    cols = st.columns(3)
    with cols[0]:
        st.metric("Total Twist", f"{metrics.get('total_twist_deg', 0):.0f}°")
    with cols[1]:
        st.metric("Min Scale", f"{metrics.get('min_scale', 0):.2f}")
    with cols[2]:
        st.metric("Max Scale", f"{metrics.get('max_scale', 0):.2f}")

    st.caption(
        f"Colors {metrics.get('bottom_color', '')} → {metrics.get('top_color', '')}, "
        f"largest sphere r = {metrics.get('max_sphere_radius', 0):.2f} m"
    )
