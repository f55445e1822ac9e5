# File: tests/test_floors.py
"""
Test the floor generator: count, elevation, and gradient sampling.

TEST CASE:
----------
3 floors, floor height 2, twist 0 -> 180 deg (linear), scale 1 -> 1

    floor   y    rotation    scale
    0       0    0           1
    1       2    pi/2        1
    2       4    pi          1
"""

import math

import pytest

from atower.generative import floor_position, generate_floors, tower_extent, tower_height
from atower.gradients import interpolate_scalar
from atower.params import DEFAULT_PARAMETERS, sanitize


def test_three_floor_linear_twist():
    """
    The worked example: elevations, twist in radians, constant scale.
    """
    params = sanitize({
        'floors': 3,
        'floorHeight': 2,
        'twistRange': {'min': 0, 'max': 180},
        'twistEasing': 'linear',
        'scaleRange': {'min': 1, 'max': 1},
    })
    floors = generate_floors(params)

    assert len(floors) == 3
    assert [f.y for f in floors] == [0.0, 2.0, 4.0]
    assert floors[0].rotation == pytest.approx(0.0)
    assert floors[1].rotation == pytest.approx(math.pi / 2)
    assert floors[2].rotation == pytest.approx(math.pi)
    assert all(f.scale == pytest.approx(1.0) for f in floors)
    print("✓ Three-floor example matches")


def test_default_tower():
    """
    Defaults: 36 floors from y=0 in steps of 3.2, tapering and twisting.
    """
    floors = generate_floors(DEFAULT_PARAMETERS)
    assert len(floors) == 36
    assert floors[0].y == 0.0
    assert floors[-1].y == pytest.approx(35 * 3.2)
    assert floors[0].scale == pytest.approx(1.0)
    assert floors[-1].scale == pytest.approx(0.35)
    assert floors[-1].rotation == pytest.approx(math.radians(220))
    print("✓ Default tower generated")


def test_endpoints_take_gradient_ends():
    """
    Base floor gets every gradient's start, top floor every gradient's end.
    """
    params = sanitize({
        'floors': 17,
        'twistRange': {'min': -90, 'max': 400},
        'scaleRange': {'min': 2.5, 'max': 0.2},
        'twistEasing': 'easeIn',
        'scaleEasing': 'easeInOut',
        'bottomColor': '#ff0000',
        'topColor': '#0000ff',
    })
    floors = generate_floors(params)
    assert floors[0].rotation == pytest.approx(math.radians(-90))
    assert floors[-1].rotation == pytest.approx(math.radians(400))
    assert floors[0].scale == pytest.approx(2.5)
    assert floors[-1].scale == pytest.approx(0.2)
    assert floors[0].color == '#ff0000'
    assert floors[-1].color == '#0000ff'
    print("✓ Gradient endpoints at base and top")


def test_single_floor_uses_start_of_gradients():
    """
    With one floor t = 0: no division by zero, the base values apply.
    """
    params = sanitize({'floors': 1, 'twistRange': {'min': 45, 'max': 90}})
    floors = generate_floors(params)
    assert len(floors) == 1
    assert floors[0].y == 0.0
    assert floors[0].rotation == pytest.approx(math.radians(45))
    assert floors[0].color == params.bottom_color
    assert floor_position(0, 1) == 0.0
    print("✓ Single floor handled")


def test_elevations_strictly_increase():
    params = sanitize({'floors': 50, 'floorHeight': 1.7})
    ys = [f.y for f in generate_floors(params)]
    assert all(b > a for a, b in zip(ys, ys[1:]))
    assert all(b - a == pytest.approx(1.7) for a, b in zip(ys, ys[1:]))
    print("✓ Elevations increase by floor height")


def test_easing_shapes_the_twist():
    """
    Middle floor of an odd-count tower sits at t = 0.5 for every easing.
    """
    for easing, expected in (('linear', 50.0), ('easeIn', 25.0), ('easeOut', 75.0), ('easeInOut', 50.0)):
        params = sanitize({
            'floors': 5,
            'twistRange': {'min': 0, 'max': 100},
            'twistEasing': easing,
        })
        middle = generate_floors(params)[2]
        assert math.degrees(middle.rotation) == pytest.approx(expected), easing
    print("✓ Easing shapes the twist profile")


def test_floor_positions_are_endpoint_inclusive():
    count = 9
    ts = [floor_position(i, count) for i in range(count)]
    assert ts[0] == 0.0
    assert ts[-1] == 1.0
    assert ts[4] == pytest.approx(0.5)
    print("✓ Floor sampling is endpoint-inclusive")


def test_scale_follows_scalar_interpolation():
    params = sanitize({'floors': 11})
    floors = generate_floors(params)
    for i, floor in enumerate(floors):
        expected = interpolate_scalar(params.scale_range, params.scale_easing, i / 10)
        assert floor.scale == pytest.approx(expected)


def test_generation_is_deterministic():
    params = sanitize({'floors': 20, 'twistRange': {'min': 10, 'max': -300}})
    assert generate_floors(params) == generate_floors(params)


def test_tower_height_and_extent():
    params = sanitize({
        'floors': 10,
        'floorHeight': 3,
        'baseRadius': 4,
        'sphereRadius': 1,
        'scaleRange': {'min': 1, 'max': 2},
    })
    assert tower_height(params) == pytest.approx(30.0)
    # Slab corner 4*sqrt(2) ~ 5.66 beats ring 4 + 1, scaled by the max scale 2
    assert tower_extent(params) == pytest.approx(2 * 4 * math.sqrt(2))
    print("✓ Height and extent")
