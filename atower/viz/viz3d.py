# atower/viz/viz3d.py
"""
3D VISUALIZATION: Interactive Tower Viewer
==========================================

PURPOSE:
--------
Render the generated tower with Plotly:
- floor slabs as semi-transparent boxes, colored by floor,
- the central core column (opaque slate),
- spheres as shaded meshes, colored by floor,
- a dark ground plane under the tower.
Rotation, zoom and pan come with Plotly; figures export to standalone HTML.

The tower is generated Y-up; Plotly's 3D scene is Z-up, so the viewer
plots (x, y, z) as (x, z, y).

The viewer only consumes generator output. It does not know how floors
or spheres were produced.
"""

import logging
import os
from typing import List, Optional

import numpy as np
import plotly.graph_objects as go

from ..export import build_tower_mesh
from ..generative import tower_extent, tower_height
from ..params import TowerParameters

logger = logging.getLogger(__name__)

# Ground plane under the tower, sized from the base radius
GROUND_COLOR = '#0f172a'
GROUND_SIZE_RATIO = 12.0


def _triangles(faces):
    """Split quads into triangles for Mesh3d."""
    tris = []
    for face in faces:
        for k in range(1, len(face) - 1):
            tris.append((face[0], face[k], face[k + 1]))
    return np.array(tris, dtype=int).reshape(-1, 3)


def _group_kind(name: str) -> str:
    if name == 'core':
        return 'core'
    if '_sphere_' in name:
        return 'sphere'
    return 'slab'


def _mesh_trace(mesh, group_indices: List[int], name: str, opacity: float) -> Optional[go.Mesh3d]:
    """One Mesh3d trace for the given mesh groups."""
    if not group_indices:
        return None
    faces = []
    for g in group_indices:
        _, first, end = mesh.groups[g]
        faces.extend(mesh.faces[first:end])
    tris = _triangles(faces)
    used = np.unique(tris)
    remap = np.full(mesh.n_vertices, -1, dtype=int)
    remap[used] = np.arange(len(used))
    tris = remap[tris]
    verts = mesh.vertices[used]
    colors = [
        f'rgb({int(round(r * 255))}, {int(round(g * 255))}, {int(round(b * 255))})'
        for r, g, b in mesh.colors[used]
    ]
    return go.Mesh3d(
        x=verts[:, 0], y=verts[:, 2], z=verts[:, 1],
        i=tris[:, 0], j=tris[:, 1], k=tris[:, 2],
        vertexcolor=colors,
        opacity=opacity,
        flatshading=False,
        name=name,
        hoverinfo='name',
        showlegend=True,
    )


def _ground_trace(half: float) -> go.Mesh3d:
    """Square ground plane just below y = 0."""
    y = -0.01
    return go.Mesh3d(
        x=[-half, half, half, -half],
        y=[-half, -half, half, half],
        z=[y, y, y, y],
        i=[0, 0], j=[1, 2], k=[2, 3],
        color=GROUND_COLOR,
        opacity=1.0,
        name='Ground',
        hoverinfo='skip',
        showlegend=False,
    )


def create_tower_figure(
    params: TowerParameters,
    title: str = "Tower",
    show_slabs: bool = True,
    show_spheres: bool = True,
    show_core: bool = True,
    show_ground: bool = True,
    slab_opacity: float = 0.35,
    sphere_segments: int = 12,
    sphere_rings: int = 8,
    height: Optional[int] = None,
) -> go.Figure:
    """
    Create a Plotly figure of a tower.

    Parameters:
    -----------
    params : TowerParameters
        Sanitized parameter set
    title : str
        Plot title
    show_slabs, show_spheres, show_core, show_ground : bool
        Which parts to draw
    slab_opacity : float
        Opacity of the floor slabs
    sphere_segments, sphere_rings : int
        Sphere tessellation; keep it low for large towers
    height : Optional[int]
        Figure height in pixels

    Returns:
    --------
    go.Figure
    """
    mesh = build_tower_mesh(
        params,
        include_slabs=show_slabs,
        segments=sphere_segments,
        rings=sphere_rings,
        include_core=show_core,
    )
    by_kind = {'slab': [], 'core': [], 'sphere': []}
    for g, (name, _, _) in enumerate(mesh.groups):
        by_kind[_group_kind(name)].append(g)

    fig = go.Figure()
    parts = [
        (show_slabs, 'slab', 'Floors', slab_opacity),
        (show_core, 'core', 'Core', 1.0),
        (show_spheres, 'sphere', 'Spheres', 1.0),
    ]
    for shown, kind, name, opacity in parts:
        if not shown:
            continue
        trace = _mesh_trace(mesh, by_kind[kind], name, opacity)
        if trace is not None:
            fig.add_trace(trace)

    # Equal-aspect box around the axis
    extent = max(tower_extent(params), 1.0) + 0.5
    if show_ground:
        half = params.base_radius * GROUND_SIZE_RATIO / 2
        fig.add_trace(_ground_trace(half))
        extent = max(extent, half)
    top = tower_height(params) + params.floor_height * 0.5

    fig.update_layout(
        title=dict(text=title, font=dict(size=16)),
        scene=dict(
            xaxis=dict(title='X (m)', range=[-extent, extent]),
            yaxis=dict(title='Z (m)', range=[-extent, extent]),
            zaxis=dict(title='Y (m)', range=[-0.05, top]),
            aspectmode='data',
            camera=dict(eye=dict(x=1.6, y=1.6, z=0.8)),
        ),
        showlegend=True,
        legend=dict(x=0.02, y=0.98),
        margin=dict(l=0, r=0, t=40, b=0),
    )
    if height is not None:
        fig.update_layout(height=height)
    return fig


def plot_tower_3d(
    params: TowerParameters,
    outpath: Optional[str] = None,
    show: bool = False,
    **kwargs
) -> go.Figure:
    """
    Create and optionally save/display a tower figure.

    Example:
    --------
    >>> fig = plot_tower_3d(params, outpath="artifacts/tower.html")
    """
    fig = create_tower_figure(params, **kwargs)

    if outpath:
        os.makedirs(os.path.dirname(outpath) if os.path.dirname(outpath) else '.', exist_ok=True)
        fig.write_html(outpath)
        logger.info("3D visualization saved to: %s", outpath)

    if show:
        fig.show()

    return fig
