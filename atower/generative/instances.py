# atower/generative/instances.py
"""
INSTANCE LAYOUT: Spheres on Floor Rings
=======================================

Each floor carries a ring of spheres centered half a floor above the
slab bottom. The ring follows the floor:

- its radius is base_radius * slice.scale,
- each sphere's radius is sphere_radius * slice.scale,
- the whole ring is rotated by the floor's twist.

A single sphere per floor sits on the tower axis instead of on the ring.

ORDERING:
---------
Floor-major (ascending y), then ring index (ascending angle). Exporters
rely on this for stable vertex ordering.
"""

import math
import numpy as np
from typing import List, Optional, Sequence, Tuple

from ..model import FloorSlice, SphereInstance
from ..params import TowerParameters, round_half_up
from .floors import generate_floors


def spheres_per_floor(params: TowerParameters) -> int:
    return max(1, round_half_up(params.spheres_per_floor))


def _rotate(x: float, z: float, theta: float) -> Tuple[float, float]:
    """Rotate (x, z) by theta radians in the XZ plane."""
    c, s = math.cos(theta), math.sin(theta)
    return x * c - z * s, x * s + z * c


def ring_offsets(per_floor: int, layout_radius: float, rotation: float) -> List[Tuple[float, float]]:
    """XZ offsets of the spheres on one floor ring."""
    if per_floor == 1:
        return [(0.0, 0.0)]
    offsets = []
    for j in range(per_floor):
        angle = (j / per_floor) * 2 * math.pi
        x = math.cos(angle) * layout_radius
        z = math.sin(angle) * layout_radius
        offsets.append(_rotate(x, z, rotation))
    return offsets


def generate_sphere_instances(
    params: TowerParameters,
    floors: Optional[Sequence[FloorSlice]] = None,
) -> List[SphereInstance]:
    """
    Place spheres on every floor of the tower.

    Parameters:
    -----------
    params : TowerParameters
        A sanitized parameter set
    floors : Optional[Sequence[FloorSlice]]
        Precomputed slices for `params`; generated when omitted

    Returns:
    --------
    List[SphereInstance]
        len(floors) * spheres_per_floor instances, floor-major
    """
    if floors is None:
        floors = generate_floors(params)
    per_floor = spheres_per_floor(params)

    instances = []
    for floor in floors:
        base_y = floor.y + params.floor_height / 2
        radius = params.sphere_radius * floor.scale
        layout_radius = params.base_radius * floor.scale
        for x, z in ring_offsets(per_floor, layout_radius, floor.rotation):
            instances.append(SphereInstance(
                position=(x, base_y, z),
                radius=radius,
                color=floor.color,
            ))
    return instances


def instance_arrays(
    instances: Sequence[SphereInstance],
) -> Tuple[np.ndarray, np.ndarray, List[str]]:
    """
    Columnar view of an instance list.

    Returns:
        positions: (N, 3) array
        radii: (N,) array
        colors: list of N hex colors
    """
    positions = np.array([inst.position for inst in instances], dtype=float).reshape(-1, 3)
    radii = np.array([inst.radius for inst in instances], dtype=float)
    colors = [inst.color for inst in instances]
    return positions, radii, colors
