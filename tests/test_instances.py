# File: tests/test_instances.py
"""
Test the sphere ring layout on each floor.

GEOMETRY:
---------
Sphere j of n on a floor with scale s and rotation r sits at angle
2*pi*j/n on a ring of radius base_radius*s, rotated by r, half a floor
above the floor elevation. A single sphere sits on the axis.
"""

import math

import numpy as np
import pytest

from atower.generative import (
    generate_floors,
    generate_sphere_instances,
    instance_arrays,
    ring_offsets,
)
from atower.params import DEFAULT_PARAMETERS, sanitize


def test_single_sphere_on_axis():
    """
    spheresPerFloor = 1 puts every sphere at x = z = 0, whatever the twist.
    """
    params = sanitize({'spheresPerFloor': 1, 'floors': 4, 'twistRange': {'min': 30, 'max': 300}})
    instances = generate_sphere_instances(params)
    assert len(instances) == 4
    for inst in instances:
        assert inst.x == 0.0
        assert inst.z == 0.0
    print("✓ Single sphere sits on the axis")


def test_four_spheres_no_rotation():
    """
    Four spheres at 0/90/180/270 degrees on a ring of base_radius * scale.
    """
    params = sanitize({
        'floors': 1,
        'spheresPerFloor': 4,
        'baseRadius': 5,
        'floorHeight': 3,
        'twistRange': {'min': 0, 'max': 0},
        'scaleRange': {'min': 2, 'max': 2},
        'sphereRadius': 0.5,
    })
    instances = generate_sphere_instances(params)
    expected = [(10, 0), (0, 10), (-10, 0), (0, -10)]
    assert len(instances) == 4
    for inst, (x, z) in zip(instances, expected):
        assert inst.x == pytest.approx(x, abs=1e-9)
        assert inst.z == pytest.approx(z, abs=1e-9)
        assert inst.y == pytest.approx(1.5)
        assert inst.radius == pytest.approx(1.0)
    print("✓ Ring layout at scale 2")


def test_ring_rotates_with_floor():
    """
    A 90 degree twist moves the first sphere from +X to +Z.
    """
    offsets = ring_offsets(4, 1.0, math.pi / 2)
    assert offsets[0][0] == pytest.approx(0.0, abs=1e-12)
    assert offsets[0][1] == pytest.approx(1.0)
    assert offsets[1][0] == pytest.approx(-1.0)
    assert offsets[1][1] == pytest.approx(0.0, abs=1e-12)
    assert ring_offsets(1, 7.0, 1.0) == [(0.0, 0.0)]
    print("✓ Ring rotates with the floor twist")


def test_ring_radius_is_preserved():
    params = sanitize({'floors': 12, 'spheresPerFloor': 7, 'twistRange': {'min': -400, 'max': 600}})
    floors = generate_floors(params)
    instances = generate_sphere_instances(params, floors)
    for k, inst in enumerate(instances):
        floor = floors[k // 7]
        assert math.hypot(inst.x, inst.z) == pytest.approx(params.base_radius * floor.scale)


def test_ordering_and_colors():
    """
    Floor-major ordering; spheres take their floor's color.
    """
    params = DEFAULT_PARAMETERS
    floors = generate_floors(params)
    instances = generate_sphere_instances(params, floors)
    per_floor = params.spheres_per_floor

    assert len(instances) == len(floors) * per_floor == 216
    ys = [inst.y for inst in instances]
    assert ys == sorted(ys)
    for k, inst in enumerate(instances):
        floor = floors[k // per_floor]
        assert inst.color == floor.color
        assert inst.y == pytest.approx(floor.y + params.floor_height / 2)
        assert inst.radius == pytest.approx(params.sphere_radius * floor.scale)
    print("✓ Floor-major ordering with floor colors")


def test_instances_default_to_generated_floors():
    params = sanitize({'floors': 6})
    assert generate_sphere_instances(params) == generate_sphere_instances(params, generate_floors(params))


def test_instance_arrays():
    params = sanitize({'floors': 3, 'spheresPerFloor': 2})
    instances = generate_sphere_instances(params)
    positions, radii, colors = instance_arrays(instances)
    assert positions.shape == (6, 3)
    assert radii.shape == (6,)
    assert len(colors) == 6
    assert np.allclose(positions[0], instances[0].position)

    positions, radii, colors = instance_arrays([])
    assert positions.shape == (0, 3)
    assert colors == []
    print("✓ Columnar instance arrays")


def test_instance_to_dict():
    inst = generate_sphere_instances(sanitize({'floors': 1, 'spheresPerFloor': 1}))[0]
    data = inst.to_dict()
    assert data['position'] == [0.0, pytest.approx(DEFAULT_PARAMETERS.floor_height / 2), 0.0]
    assert data['color'] == DEFAULT_PARAMETERS.bottom_color
