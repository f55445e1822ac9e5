# app/components/model_viewer.py
"""
3D model viewer component using Plotly.
"""

import plotly.graph_objects as go
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from atower.params import TowerParameters
from atower.viz import create_tower_figure


def render_3d_model(
    params: TowerParameters,
    height: int = 500,
    show_slabs: bool = True,
    show_spheres: bool = True,
    show_core: bool = True,
    sphere_segments: int = 10,
    sphere_rings: int = 6,
) -> go.Figure:
    """
    Create the viewport figure for the current tower.

    Large towers (200 floors x 12 spheres) are drawn with a coarse sphere
    tessellation to keep the browser responsive.
    """
    fig = create_tower_figure(
        params,
        title="",
        show_slabs=show_slabs,
        show_spheres=show_spheres,
        show_core=show_core,
        sphere_segments=sphere_segments,
        sphere_rings=sphere_rings,
        height=height,
    )
    fig.update_layout(
        margin=dict(l=0, r=0, t=0, b=0),
        paper_bgcolor='#030712',
        font=dict(color='#cbd5e1'),
        scene=dict(bgcolor='#030712'),
    )
    return fig
