# atower/generative - Procedural Tower Generators
"""
GENERATIVE: Floors and Sphere Instances
=======================================

Pure functions from a TowerParameters value to renderable geometry.

Available Generators:
---------------------
- floors: ordered per-floor transforms (elevation, twist, scale, color)
- instances: spheres laid out on each floor's ring

USAGE:
------
    from atower.params import sanitize
    from atower.generative import generate_floors, generate_sphere_instances

    params = sanitize({'floors': 24, 'spheresPerFloor': 4})
    floors = generate_floors(params)
    spheres = generate_sphere_instances(params, floors)
"""

from .floors import floor_count, floor_position, generate_floors, tower_height, tower_extent
from .instances import generate_sphere_instances, instance_arrays, ring_offsets, spheres_per_floor

__all__ = [
    'floor_count',
    'floor_position',
    'generate_floors',
    'generate_sphere_instances',
    'instance_arrays',
    'ring_offsets',
    'spheres_per_floor',
    'tower_height',
    'tower_extent',
]
