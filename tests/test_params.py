# File: tests/test_params.py
"""
Test parameter sanitization and the state transitions set_params / update_range.

TEST PHILOSOPHY:
---------------
- Any input must produce a renderable (in-domain) parameter set
- Clamping is per field; ranges keep min > max
- The "zero means absent" behaviour is intentional and pinned here
"""

import math

import pytest

from atower.model import Range
from atower.params import (
    DEFAULT_PARAMETERS,
    PARAMETER_BOUNDS,
    TowerParameters,
    round_half_up,
    sanitize,
    sanitize_range,
)
from atower.state import TowerState, set_params, update_range


def _assert_in_domain(params: TowerParameters):
    data = params.to_dict()
    for key, (lo, hi) in PARAMETER_BOUNDS.items():
        if isinstance(data[key], dict):
            assert lo <= data[key]['min'] <= hi, key
            assert lo <= data[key]['max'] <= hi, key
        else:
            assert lo <= data[key] <= hi, key
    assert isinstance(params.floors, int)
    assert isinstance(params.spheres_per_floor, int)


def test_defaults():
    """
    Empty or missing input gives the baseline parameters.
    """
    assert sanitize() == DEFAULT_PARAMETERS
    assert sanitize({}) == DEFAULT_PARAMETERS
    assert sanitize(None) == DEFAULT_PARAMETERS
    assert DEFAULT_PARAMETERS.floors == 36
    assert DEFAULT_PARAMETERS.twist_range == Range(0.0, 220.0)
    assert DEFAULT_PARAMETERS.scale_range == Range(1.0, 0.35)
    _assert_in_domain(DEFAULT_PARAMETERS)
    print("✓ Defaults are in domain")


def test_numeric_fields_are_clamped():
    """
    Out-of-domain numbers are clamped to the nearest bound, not rejected.
    """
    params = sanitize({
        'floors': 500,
        'floorHeight': 0.5,
        'baseRadius': 99,
        'sphereRadius': 0.01,
        'spheresPerFloor': 40,
    })
    assert params.floors == 200
    assert params.floor_height == 1.0
    assert params.base_radius == 15.0
    assert params.sphere_radius == 0.2
    assert params.spheres_per_floor == 12

    params = sanitize({'floors': -3, 'spheresPerFloor': -1})
    assert params.floors == 1
    assert params.spheres_per_floor == 1
    print("✓ Numeric fields are clamped")


def test_integer_fields_round_half_up():
    """
    floors and spheresPerFloor are rounded before clamping.
    """
    assert sanitize({'floors': 12.5}).floors == 13
    assert sanitize({'floors': 12.4}).floors == 12
    assert sanitize({'spheresPerFloor': 2.5}).spheres_per_floor == 3
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    print("✓ Integer fields round half-up")


def test_zero_falls_back_to_default():
    """
    An explicit 0 is treated as absent and takes the default,
    NOT the domain minimum.
    """
    params = sanitize({
        'floors': 0,
        'floorHeight': 0,
        'baseRadius': 0,
        'sphereRadius': 0,
        'spheresPerFloor': 0,
    })
    assert params.floors == DEFAULT_PARAMETERS.floors
    assert params.floor_height == DEFAULT_PARAMETERS.floor_height
    assert params.base_radius == DEFAULT_PARAMETERS.base_radius
    assert params.sphere_radius == DEFAULT_PARAMETERS.sphere_radius
    assert params.spheres_per_floor == DEFAULT_PARAMETERS.spheres_per_floor
    print("✓ Zero means absent")


def test_malformed_values_fall_back_to_default():
    """
    Junk values never raise; they take the default.
    """
    params = sanitize({
        'floors': 'many',
        'floorHeight': float('nan'),
        'baseRadius': float('inf'),
        'sphereRadius': [1, 2],
        'twistEasing': 'bounce',
        'scaleEasing': 3,
        'bottomColor': 'not-a-color',
        'topColor': '#12345',
        'twistRange': 'wide',
    })
    assert params == DEFAULT_PARAMETERS
    print("✓ Malformed values fall back to defaults")


def test_numeric_strings_and_colors_are_normalized():
    """
    Numeric strings are accepted; colors are normalized to lowercase #rrggbb.
    """
    params = sanitize({'floors': '24', 'bottomColor': '#ABC', 'topColor': 'FF0000'})
    assert params.floors == 24
    assert params.bottom_color == '#aabbcc'
    assert params.top_color == '#ff0000'
    print("✓ Strings are normalized")


def test_snake_case_keys_are_accepted():
    """
    Python attribute names work as well as wire names.
    """
    params = sanitize({'floor_height': 4, 'twist_range': {'min': 10, 'max': 20}, 'top_color': '#000000'})
    assert params.floor_height == 4.0
    assert params.twist_range == Range(10.0, 20.0)
    assert params.top_color == '#000000'
    print("✓ snake_case keys accepted")


def test_ranges_clamp_each_endpoint_independently():
    """
    Each endpoint is clamped on its own and min > max survives.
    """
    params = sanitize({
        'twistRange': {'min': -1000, 'max': 1000},
        'scaleRange': {'min': 2, 'max': 0.05},
    })
    assert params.twist_range == Range(-720.0, 720.0)
    assert params.scale_range == Range(2.0, 0.1)
    assert params.scale_range.min > params.scale_range.max
    print("✓ Range endpoints clamped independently")


def test_range_zero_endpoint_is_kept():
    """
    A twist of exactly 0 degrees is a real value, not a missing one.
    """
    params = sanitize({'twistRange': {'min': 0, 'max': 0}})
    assert params.twist_range == Range(0.0, 0.0)
    print("✓ Zero range endpoints are kept")


def test_range_partial_and_missing_endpoints():
    """
    Missing endpoints take the default endpoint; other forms are accepted.
    """
    params = sanitize({'twistRange': {'max': 90}})
    assert params.twist_range == Range(DEFAULT_PARAMETERS.twist_range.min, 90.0)
    assert sanitize_range(None, Range(1.0, 2.0), (0.0, 5.0)) == Range(1.0, 2.0)
    assert sanitize_range({}, Range(1.0, 2.0), (0.0, 5.0)) == Range(1.0, 2.0)
    assert sanitize_range((3, 9), Range(1.0, 2.0), (0.0, 5.0)) == Range(3.0, 5.0)
    assert sanitize_range(Range(-1, 4), Range(1.0, 2.0), (0.0, 5.0)) == Range(0.0, 4.0)
    print("✓ Partial ranges use fallback endpoints")


@pytest.mark.parametrize("data", [
    {},
    {'floors': 0, 'floorHeight': 0},
    {'floors': 12.5, 'spheresPerFloor': 7.5},
    {'twistRange': {'min': -5000, 'max': 10}, 'scaleRange': {'min': 3, 'max': 0}},
    {'bottomColor': '#ABC', 'topColor': 'junk', 'twistEasing': 'easeIn'},
    {'floors': '17', 'baseRadius': 14.99, 'sphereRadius': 4.4},
])
def test_sanitize_is_idempotent(data):
    """
    sanitize(sanitize(x)) == sanitize(x), and the result is in domain.
    """
    once = sanitize(data)
    twice = sanitize(once)
    assert twice == once
    assert sanitize(once.to_dict()) == once
    _assert_in_domain(once)


def test_to_dict_uses_wire_names():
    """
    The wire form uses camelCase keys and {'min', 'max'} ranges.
    """
    data = DEFAULT_PARAMETERS.to_dict()
    assert set(data) == {
        'floors', 'floorHeight', 'baseRadius', 'sphereRadius', 'spheresPerFloor',
        'twistRange', 'scaleRange', 'twistEasing', 'scaleEasing', 'bottomColor', 'topColor',
    }
    assert data['twistRange'] == {'min': 0.0, 'max': 220.0}
    assert TowerParameters.from_dict(data) == DEFAULT_PARAMETERS
    print("✓ Wire form round-trips")


def test_parameters_are_immutable():
    """
    Parameter values are frozen; edits go through set_params.
    """
    with pytest.raises(Exception):  # dataclasses.FrozenInstanceError
        DEFAULT_PARAMETERS.floors = 3
    with pytest.raises(Exception):
        DEFAULT_PARAMETERS.twist_range.min = 3
    print("✓ Parameters are immutable")


# ============================================================================
# State transitions
# ============================================================================

def test_set_params_merges_and_resanitizes():
    """
    A patch is merged over the current values and the whole result sanitized.
    """
    state = TowerState()
    new_state = set_params(state, {'floors': 10, 'floorHeight': 50})
    assert new_state.params.floors == 10
    assert new_state.params.floor_height == 10.0
    assert new_state.params.base_radius == DEFAULT_PARAMETERS.base_radius
    # The old value is untouched
    assert state.params.floors == DEFAULT_PARAMETERS.floors
    print("✓ set_params merges and sanitizes")


def test_set_params_zero_restores_default():
    """
    Patching a field with 0 resets it to the default, not to the domain minimum.
    """
    state = set_params(TowerState(), {'floors': 80})
    state = set_params(state, {'floors': 0})
    assert state.params.floors == DEFAULT_PARAMETERS.floors
    print("✓ set_params keeps the zero-means-absent behaviour")


def test_set_params_clears_active_preset():
    """
    A manual edit detaches the parameters from the preset they came from.
    """
    state = TowerState(active_preset_id='abc')
    assert set_params(state, {'floors': 12}).active_preset_id is None
    print("✓ set_params clears the active preset")


def test_update_range_patches_one_endpoint():
    """
    Only the patched endpoint changes and it is clamped to the range's own domain.
    """
    state = TowerState(active_preset_id='abc')
    new_state = update_range(state, 'scaleRange', {'max': 10})
    assert new_state.params.scale_range == Range(DEFAULT_PARAMETERS.scale_range.min, 3.0)
    assert new_state.params.twist_range == DEFAULT_PARAMETERS.twist_range
    assert new_state.active_preset_id is None

    new_state = update_range(new_state, 'twist_range', {'min': -900, 'max': 45})
    assert new_state.params.twist_range == Range(-720.0, 45.0)
    print("✓ update_range patches and clamps")


def test_update_range_keeps_zero_and_ignores_junk():
    """
    0 is a valid endpoint; a non-numeric endpoint keeps the current value.
    """
    state = update_range(TowerState(), 'twistRange', {'max': 0})
    assert state.params.twist_range == Range(0.0, 0.0)
    state = update_range(state, 'twistRange', {'min': 'abc'})
    assert state.params.twist_range == Range(0.0, 0.0)
    print("✓ update_range handles zero and junk")


def test_update_range_unknown_key():
    """
    Only the two gradient ranges can be patched.
    """
    with pytest.raises(ValueError):
        update_range(TowerState(), 'floors', {'min': 1})
    print("✓ update_range rejects unknown ranges")


def test_rotation_units_in_params_are_degrees():
    """
    Parameters store degrees; radians appear only in generated floor slices.
    """
    params = sanitize({'twistRange': {'min': 0, 'max': 360}})
    assert params.twist_range.max == 360.0
    assert math.radians(params.twist_range.max) == pytest.approx(2 * math.pi)
