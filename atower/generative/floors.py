# atower/generative/floors.py
"""
FLOOR GENERATOR: Per-Floor Transforms
=====================================

PURPOSE:
--------
Turn a parameter set into the ordered list of floor slices. Each slice
carries the floor's elevation, twist, scale and color.

SAMPLING:
---------
Floors are sampled endpoint-inclusive: with `count` floors the normalized
position of floor i is

    t = i / (count - 1)        (t = 0 when count == 1)

so the base floor always gets exactly the start of every gradient and the
top floor exactly the end, whatever the floor count.

The generator is pure: the viewport recomputes it on every parameter
change without diffing.
"""

import math
from typing import List

from ..gradients import interpolate_color, interpolate_scalar
from ..model import FloorSlice
from ..params import TowerParameters


def floor_count(params: TowerParameters) -> int:
    return max(1, int(math.floor(params.floors)))


def floor_position(index: int, count: int) -> float:
    """Normalized position t of floor `index` out of `count`."""
    if count == 1:
        return 0.0
    return index / (count - 1)


def generate_floors(params: TowerParameters) -> List[FloorSlice]:
    """
    Generate the floor slices of a tower, base first.

    Parameters:
    -----------
    params : TowerParameters
        A sanitized parameter set

    Returns:
    --------
    List[FloorSlice]
        One slice per floor, y strictly increasing by floor_height

    Example:
    --------
    >>> from atower.params import sanitize
    >>> params = sanitize({'floors': 3, 'floorHeight': 2,
    ...                    'twistRange': {'min': 0, 'max': 180},
    ...                    'twistEasing': 'linear'})
    >>> [round(math.degrees(s.rotation)) for s in generate_floors(params)]
    [0, 90, 180]
    """
    count = floor_count(params)
    slices = []
    for i in range(count):
        t = floor_position(i, count)
        twist_deg = interpolate_scalar(params.twist_range, params.twist_easing, t)
        slices.append(FloorSlice(
            y=i * params.floor_height,
            rotation=math.radians(twist_deg),
            scale=interpolate_scalar(params.scale_range, params.scale_easing, t),
            color=interpolate_color(params.bottom_color, params.top_color, t),
        ))
    return slices


def tower_height(params: TowerParameters) -> float:
    """Height of the top of the last floor."""
    return floor_count(params) * params.floor_height


def tower_extent(params: TowerParameters) -> float:
    """
    Largest horizontal distance from the axis reached by any slab corner
    or sphere. Used to frame the viewport.
    """
    max_scale = max(
        abs(params.scale_range.min),
        abs(params.scale_range.max),
    )
    slab_corner = params.base_radius * math.sqrt(2.0)
    return max_scale * max(slab_corner, params.base_radius + params.sphere_radius)
