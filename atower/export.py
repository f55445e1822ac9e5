# atower/export.py
"""
EXPORT: Mesh and Model Serialization
====================================

Formats:
--------
- OBJ: Wavefront OBJ with per-vertex colors ("v x y z r g b"), one object
  per floor slab, one for the core column and one per sphere. Opens in
  Blender, MeshLab, etc.
- JSON: parameters, framing info, floor slices and sphere instances, for
  interchange and re-generation.
- CSV: the floor schedule, one row per floor (pandas DataFrame).
- Summary: short plain-text description.

Export works on a parameter snapshot: the generators are re-run from the
given TowerParameters, so later edits to a live session cannot leak in.

ERRORS:
-------
Generation itself cannot fail. Writing can: any file-system failure (or an
unsupported format) is raised as ExportError so callers can report
"export failed" and keep their current state.
"""

import io
import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple, Union

import numpy as np
import pandas as pd

from .generative import (
    generate_floors,
    generate_sphere_instances,
    instance_arrays,
    spheres_per_floor,
    tower_height,
)
from .gradients import parse_hex
from .model import FloorSlice
from .params import TowerParameters

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ('obj', 'json', 'csv')

# Slab thickness as a fraction of floor height (gap between stacked slabs)
SLAB_FILL = 0.9

# Central core column
CORE_RADIUS_RATIO = 0.2
CORE_HEIGHT_FILL = 0.98
CORE_SEGMENTS = 24
CORE_COLOR = '#94a3b8'


class ExportError(RuntimeError):
    """Raised when an export cannot be written."""
    pass


@dataclass
class TowerMesh:
    """
    Triangle/quad mesh of a tower.

    Attributes:
        vertices: (V, 3) positions
        colors: (V, 3) RGB in [0, 1]
        faces: 0-based vertex index tuples (triangles and quads)
        groups: (name, first_face, end_face) per object, faces[first:end]
    """
    vertices: np.ndarray
    colors: np.ndarray
    faces: List[Tuple[int, ...]]
    groups: List[Tuple[str, int, int]]

    @property
    def n_vertices(self) -> int:
        return len(self.vertices)

    @property
    def n_faces(self) -> int:
        return len(self.faces)


def _rgb01(color: str) -> np.ndarray:
    return np.array(parse_hex(color), dtype=float) / 255.0


def _uv_sphere(segments: int, rings: int) -> Tuple[np.ndarray, List[Tuple[int, ...]]]:
    """Unit UV sphere: poles plus (rings - 1) latitude circles of `segments` vertices."""
    verts = [(0.0, 1.0, 0.0)]
    for r in range(1, rings):
        phi = math.pi * r / rings
        y = math.cos(phi)
        ring_r = math.sin(phi)
        for s in range(segments):
            theta = 2 * math.pi * s / segments
            verts.append((ring_r * math.cos(theta), y, ring_r * math.sin(theta)))
    verts.append((0.0, -1.0, 0.0))

    bottom = len(verts) - 1

    def ring_vertex(r: int, s: int) -> int:
        return 1 + (r - 1) * segments + (s % segments)

    faces = []
    for s in range(segments):
        faces.append((0, ring_vertex(1, s + 1), ring_vertex(1, s)))
    for r in range(1, rings - 1):
        for s in range(segments):
            faces.append((
                ring_vertex(r, s),
                ring_vertex(r, s + 1),
                ring_vertex(r + 1, s + 1),
                ring_vertex(r + 1, s),
            ))
    for s in range(segments):
        faces.append((ring_vertex(rings - 1, s), ring_vertex(rings - 1, s + 1), bottom))
    return np.array(verts), faces


_BOX_CORNERS = np.array([
    [-1, -1, -1], [1, -1, -1], [1, -1, 1], [-1, -1, 1],
    [-1, 1, -1], [1, 1, -1], [1, 1, 1], [-1, 1, 1],
], dtype=float)

_BOX_FACES = [
    (0, 1, 2, 3),  # bottom
    (4, 7, 6, 5),  # top
    (0, 4, 5, 1),
    (1, 5, 6, 2),
    (2, 6, 7, 3),
    (3, 7, 4, 0),
]


def _slab_vertices(floor: FloorSlice, params: TowerParameters) -> np.ndarray:
    half = params.base_radius * floor.scale
    half_height = SLAB_FILL * params.floor_height / 2
    local = _BOX_CORNERS * np.array([half, half_height, half])
    c, s = math.cos(floor.rotation), math.sin(floor.rotation)
    x = local[:, 0] * c - local[:, 2] * s
    z = local[:, 0] * s + local[:, 2] * c
    y = local[:, 1] + floor.y + half_height
    return np.column_stack([x, y, z])


def _cylinder(segments: int) -> Tuple[np.ndarray, List[Tuple[int, ...]]]:
    """Unit cylinder (radius 1, y in [-0.5, 0.5]) with capped ends."""
    verts = []
    for y in (-0.5, 0.5):
        for s in range(segments):
            theta = 2 * math.pi * s / segments
            verts.append((math.cos(theta), y, math.sin(theta)))
    bottom_center = len(verts)
    verts.append((0.0, -0.5, 0.0))
    top_center = len(verts)
    verts.append((0.0, 0.5, 0.0))

    faces = []
    for s in range(segments):
        b0, b1 = s, (s + 1) % segments
        t0, t1 = segments + s, segments + (s + 1) % segments
        faces.append((b0, t0, t1, b1))
        faces.append((bottom_center, b0, b1))
        faces.append((top_center, t1, t0))
    return np.array(verts), faces


def _core_vertices(params: TowerParameters, count: int) -> np.ndarray:
    """
    Central column: radius CORE_RADIUS_RATIO * base_radius, spanning
    CORE_HEIGHT_FILL of the stacked height, centered on the slab stack.
    """
    radius = CORE_RADIUS_RATIO * params.base_radius
    height = CORE_HEIGHT_FILL * count * params.floor_height
    center_y = 0.5 * count * params.floor_height + SLAB_FILL * params.floor_height / 2
    unit_verts, _ = _cylinder(CORE_SEGMENTS)
    return unit_verts * np.array([radius, height, radius]) + np.array([0.0, center_y, 0.0])


def build_tower_mesh(
    params: TowerParameters,
    include_slabs: bool = True,
    segments: int = 16,
    rings: int = 10,
    include_core: bool = True,
) -> TowerMesh:
    """
    Build a mesh of the tower: one box per floor slab, a central core
    cylinder, and one UV sphere per instance.

    Objects are emitted slabs first (`floor_XXX`), then `core`, then the
    spheres (`floor_XXX_sphere_YY`).

    Parameters:
    -----------
    params : TowerParameters
        Parameter snapshot
    include_slabs : bool
        Emit the floor slabs (boxes) as well as the spheres
    include_core : bool
        Emit the central core column
    segments, rings : int
        Sphere tessellation (longitude / latitude divisions)
    """
    segments = max(3, int(segments))
    rings = max(2, int(rings))
    floors = generate_floors(params)
    instances = generate_sphere_instances(params, floors)
    unit_verts, unit_faces = _uv_sphere(segments, rings)

    vertex_blocks = []
    color_blocks = []
    faces: List[Tuple[int, ...]] = []
    groups: List[Tuple[str, int, int]] = []
    offset = 0

    def add_object(name: str, verts: np.ndarray, local_faces, color: str) -> None:
        nonlocal offset
        first = len(faces)
        vertex_blocks.append(verts)
        color_blocks.append(np.tile(_rgb01(color), (len(verts), 1)))
        faces.extend(tuple(i + offset for i in face) for face in local_faces)
        groups.append((name, first, len(faces)))
        offset += len(verts)

    if include_slabs:
        for i, floor in enumerate(floors):
            add_object(f"floor_{i:03d}", _slab_vertices(floor, params), _BOX_FACES, floor.color)

    if include_core:
        core_verts = _core_vertices(params, len(floors))
        _, core_faces = _cylinder(CORE_SEGMENTS)
        add_object('core', core_verts, core_faces, CORE_COLOR)

    positions, radii, colors = instance_arrays(instances)
    per_floor = len(instances) // len(floors)
    for k in range(len(instances)):
        i, j = divmod(k, per_floor)
        verts = unit_verts * radii[k] + positions[k]
        add_object(f"floor_{i:03d}_sphere_{j:02d}", verts, unit_faces, colors[k])

    return TowerMesh(
        vertices=np.vstack(vertex_blocks),
        colors=np.vstack(color_blocks),
        faces=faces,
        groups=groups,
    )


def generate_obj(
    params: TowerParameters,
    include_slabs: bool = True,
    segments: int = 16,
    rings: int = 10,
    include_core: bool = True,
) -> str:
    """Wavefront OBJ text with per-vertex colors."""
    mesh = build_tower_mesh(
        params, include_slabs=include_slabs, segments=segments, rings=rings, include_core=include_core,
    )
    out = io.StringIO()
    out.write("# A-Tower generator export\n")
    out.write(f"# floors: {len(generate_floors(params))}\n")
    out.write(f"# vertices: {mesh.n_vertices}  faces: {mesh.n_faces}\n")
    for (x, y, z), (r, g, b) in zip(mesh.vertices, mesh.colors):
        out.write(f"v {x:.6f} {y:.6f} {z:.6f} {r:.4f} {g:.4f} {b:.4f}\n")
    for name, first, end in mesh.groups:
        out.write(f"o {name}\n")
        for face in mesh.faces[first:end]:
            out.write("f " + " ".join(str(i + 1) for i in face) + "\n")
    return out.getvalue()


def generate_model_json(params: TowerParameters) -> str:
    """JSON model: parameters, framing, floor slices and sphere instances."""
    floors = generate_floors(params)
    instances = generate_sphere_instances(params, floors)
    model = {
        'version': '1.0',
        'type': 'tower',
        'parameters': params.to_dict(),
        'framing': {
            'floors': len(floors),
            'floorHeight': params.floor_height,
            'baseRadius': params.base_radius,
            'totalHeight': tower_height(params),
        },
        'floors': [floor.to_dict() for floor in floors],
        'instances': [inst.to_dict() for inst in instances],
    }
    return json.dumps(model, indent=2)


def floor_schedule(params: TowerParameters) -> pd.DataFrame:
    """
    One row per floor, base first.

    Columns:
        floor, y, twist_deg, scale, slab_width, sphere_radius, n_spheres, color
    """
    floors = generate_floors(params)
    per_floor = spheres_per_floor(params)
    rows = []
    for i, floor in enumerate(floors):
        rows.append({
            'floor': i,
            'y': floor.y,
            'twist_deg': math.degrees(floor.rotation),
            'scale': floor.scale,
            'slab_width': 2 * params.base_radius * floor.scale,
            'sphere_radius': params.sphere_radius * floor.scale,
            'n_spheres': per_floor,
            'color': floor.color,
        })
    return pd.DataFrame(rows)


def generate_floor_csv(params: TowerParameters) -> str:
    """Floor schedule as CSV text."""
    return floor_schedule(params).to_csv(index=False)


def generate_summary_text(params: TowerParameters) -> str:
    """Generate a text summary of the tower."""
    floors = generate_floors(params)
    instances = generate_sphere_instances(params, floors)
    lines = [
        "TOWER SUMMARY",
        "=" * 40,
        "",
        "GEOMETRY",
        f"  Floors:        {len(floors)}",
        f"  Floor height:  {params.floor_height:.2f} m",
        f"  Total height:  {tower_height(params):.2f} m",
        f"  Base radius:   {params.base_radius:.2f} m",
        "",
        "GRADIENTS",
        f"  Twist:         {params.twist_range.min:.1f} -> {params.twist_range.max:.1f} deg ({params.twist_easing})",
        f"  Scale:         {params.scale_range.min:.2f} -> {params.scale_range.max:.2f} ({params.scale_easing})",
        f"  Colors:        {params.bottom_color} -> {params.top_color}",
        "",
        "SPHERES",
        f"  Per floor:     {params.spheres_per_floor}",
        f"  Radius:        {params.sphere_radius:.2f} m",
        f"  Total:         {len(instances)}",
    ]
    return "\n".join(lines)


def export_tower(
    params: TowerParameters,
    path: Union[str, Path],
    fmt: str = 'obj',
    **mesh_options,
) -> Path:
    """
    Write the tower to a file.

    Raises:
        ExportError: Unsupported format or the file could not be written
    """
    path = Path(path)
    if fmt == 'obj':
        content = generate_obj(params, **mesh_options)
    elif fmt == 'json':
        content = generate_model_json(params)
    elif fmt == 'csv':
        content = generate_floor_csv(params)
    else:
        raise ExportError(f"Unsupported export format: {fmt!r} (expected one of {', '.join(EXPORT_FORMATS)})")

    try:
        path.write_text(content, encoding='utf-8')
    except OSError as e:
        raise ExportError(f"Export failed: could not write {path}: {e}") from e
    logger.info("Exported tower (%s) to %s", fmt, path)
    return path
