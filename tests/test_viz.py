# File: tests/test_viz.py
"""
Smoke tests for the Plotly viewer and the matplotlib gradient profile.
"""

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import plotly.graph_objects as go

from atower.params import sanitize
from atower.viz import create_tower_figure, plot_gradient_profile, plot_tower_3d


PARAMS = sanitize({'floors': 4, 'spheresPerFloor': 3})


def test_figure_traces():
    """
    Slabs, core, spheres and ground become one Mesh3d trace each.
    """
    fig = create_tower_figure(PARAMS, sphere_segments=6, sphere_rings=4)
    assert isinstance(fig, go.Figure)
    assert [t.name for t in fig.data] == ['Floors', 'Core', 'Spheres', 'Ground']
    assert all(isinstance(t, go.Mesh3d) for t in fig.data)

    floors, core, spheres, ground = fig.data
    assert len(floors.x) == 4 * 8
    assert len(core.x) == 2 * 24 + 2
    assert core.opacity == 1.0
    assert len(spheres.x) == 4 * 3 * (2 + 3 * 6)
    assert list(ground.z) == [-0.01] * 4
    # Ground is 12 base radii across; the scene box covers it
    assert max(ground.x) == 30.0
    assert fig.layout.scene.xaxis.range[1] >= 30.0
    print("✓ Figure has slab, core, sphere and ground traces")


def test_toggles():
    """
    Each part can be switched off independently.
    """
    def names(**kwargs):
        fig = create_tower_figure(PARAMS, sphere_segments=4, sphere_rings=3, **kwargs)
        return [t.name for t in fig.data]

    assert names(show_slabs=False) == ['Core', 'Spheres', 'Ground']
    assert names(show_spheres=False) == ['Floors', 'Core', 'Ground']
    assert names(show_core=False) == ['Floors', 'Spheres', 'Ground']
    assert names(show_ground=False) == ['Floors', 'Core', 'Spheres']
    print("✓ Viewer toggles")


def test_plot_writes_html(tmp_path):
    out = tmp_path / 'tower.html'
    fig = plot_tower_3d(PARAMS, outpath=str(out), sphere_segments=4, sphere_rings=3, height=400)
    assert out.exists()
    assert fig.layout.height == 400


def test_gradient_profile_png(tmp_path):
    """
    The matplotlib profile writes a PNG, or returns the figure when no path is given.
    """
    out = tmp_path / 'profile.png'
    assert plot_gradient_profile(PARAMS, outpath=str(out)) is None
    assert out.exists()

    fig = plot_gradient_profile(PARAMS)
    assert len(fig.axes) == 3
    plt.close(fig)
    print("✓ Gradient profile plotted")
