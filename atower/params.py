# atower/params.py
"""
TOWER PARAMETERS: The Validated Parameter Set
=============================================

PURPOSE:
--------
TowerParameters is the single input of the generators. Every value that
leaves this module is within its domain, so the generators never have to
validate anything: any parameter set can be rendered.

SANITIZATION POLICY:
--------------------
Values are normalized, never rejected:

1. A field that is missing or falsy (None, 0, '', {}) takes the baseline
   default. Note that an explicit 0 for e.g. `floors` therefore becomes the
   default (36), NOT the domain minimum (1).
2. A malformed field (non-numeric text, NaN/inf, unknown easing name,
   invalid hex color) also takes the default.
3. Numeric fields are clamped to their domain. `floors` and
   `spheresPerFloor` are rounded (half-up) before clamping.
4. Each endpoint of a Range is clamped on its own; min <= max is NOT
   enforced, because min > max is a legitimate decreasing gradient.

sanitize() is idempotent: sanitize(sanitize(x)) == sanitize(x).

NAMING:
-------
Python attributes are snake_case. The wire / persisted form (to_dict,
sanitize input) uses the camelCase names, e.g. 'floorHeight'. sanitize()
accepts either spelling.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .easing import EASING_KINDS
from .gradients import normalize_hex
from .model import Range


# Domain bounds (inclusive), keyed by wire name
PARAMETER_BOUNDS: Dict[str, Tuple[float, float]] = {
    'floors': (1, 200),
    'floorHeight': (1.0, 10.0),
    'baseRadius': (1.0, 15.0),
    'sphereRadius': (0.2, 5.0),
    'spheresPerFloor': (1, 12),
    'twistRange': (-720.0, 720.0),
    'scaleRange': (0.1, 3.0),
}

# snake_case attribute -> camelCase wire name
FIELD_NAMES: Dict[str, str] = {
    'floors': 'floors',
    'floor_height': 'floorHeight',
    'base_radius': 'baseRadius',
    'sphere_radius': 'sphereRadius',
    'spheres_per_floor': 'spheresPerFloor',
    'twist_range': 'twistRange',
    'scale_range': 'scaleRange',
    'twist_easing': 'twistEasing',
    'scale_easing': 'scaleEasing',
    'bottom_color': 'bottomColor',
    'top_color': 'topColor',
}

RANGE_KEYS = ('twistRange', 'scaleRange')


@dataclass(frozen=True)
class TowerParameters:
    """
    The full parameter set of a tower.

    Geometry:
    ---------
    floors : int
        Number of stacked floors [1, 200]
    floor_height : float
        Vertical spacing between floors [1, 10]
    base_radius : float
        Slab half-extent / ring layout radius at scale 1 [1, 15]

    Sphere layout:
    --------------
    sphere_radius : float
        Sphere radius before the per-floor scale [0.2, 5]
    spheres_per_floor : int
        Spheres placed on each floor's ring [1, 12]

    Gradients (base -> top):
    ------------------------
    twist_range : Range
        Rotation about the tower axis in degrees [-720, 720]
    scale_range : Range
        XZ scale factor [0.1, 3]
    twist_easing, scale_easing : str
        'linear', 'easeIn', 'easeOut' or 'easeInOut'
    bottom_color, top_color : str
        sRGB hex colors, blended in L*a*b*
    """
    floors: int = 36
    floor_height: float = 3.2
    base_radius: float = 5.0
    sphere_radius: float = 1.2
    spheres_per_floor: int = 6
    twist_range: Range = field(default_factory=lambda: Range(0.0, 220.0))
    scale_range: Range = field(default_factory=lambda: Range(1.0, 0.35))
    twist_easing: str = 'easeInOut'
    scale_easing: str = 'easeOut'
    bottom_color: str = '#0f172a'
    top_color: str = '#36c2ff'

    def to_dict(self) -> Dict[str, Any]:
        """Wire form: camelCase keys, ranges as {'min', 'max'} dicts."""
        data = {}
        for attr, key in FIELD_NAMES.items():
            value = getattr(self, attr)
            data[key] = value.to_dict() if isinstance(value, Range) else value
        return data

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'TowerParameters':
        return sanitize(data)


DEFAULT_PARAMETERS = TowerParameters()
_DEFAULTS = DEFAULT_PARAMETERS.to_dict()


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 away from -inf (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def _clamp(value: float, lo: float, hi: float) -> float:
    return min(hi, max(lo, value))


def _finite(value: Any) -> Optional[float]:
    """value as a finite float, or None if it is not a usable number."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _range_endpoints(value: Any) -> Tuple[Any, Any]:
    if isinstance(value, Range):
        return value.min, value.max
    if isinstance(value, Mapping):
        return value.get('min'), value.get('max')
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return value[0], value[1]
    return None, None


def sanitize_range(
    value: Any,
    fallback: Range,
    bounds: Tuple[float, float],
) -> Range:
    """
    Normalize a range value.

    A missing or falsy range uses `fallback` as a whole. Otherwise each
    endpoint that is not a finite number uses the matching fallback
    endpoint. Each endpoint is then clamped to `bounds` independently.
    Zero is a valid endpoint here (a twist starting at 0 degrees).
    """
    lo, hi = bounds
    if not value:
        raw_min, raw_max = fallback.min, fallback.max
    else:
        raw_min, raw_max = _range_endpoints(value)
    start = _finite(raw_min)
    end = _finite(raw_max)
    if start is None:
        start = fallback.min
    if end is None:
        end = fallback.max
    return Range(_clamp(start, lo, hi), _clamp(end, lo, hi))


def _sanitize_number(value: Any, key: str, integer: bool = False) -> Union[int, float]:
    lo, hi = PARAMETER_BOUNDS[key]
    number = _finite(value) if value else None
    if number is None:
        number = _DEFAULTS[key]
    if integer:
        return int(_clamp(round_half_up(number), lo, hi))
    return float(_clamp(number, lo, hi))


def _sanitize_easing(value: Any, key: str) -> str:
    if value and value in EASING_KINDS:
        return value
    return _DEFAULTS[key]


def _sanitize_color(value: Any, key: str) -> str:
    if value:
        try:
            return normalize_hex(value)
        except ValueError:
            pass
    return _DEFAULTS[key]


def _normalize_keys(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Accept snake_case keys as aliases of the camelCase wire names."""
    normalized = {}
    for key, value in data.items():
        normalized[FIELD_NAMES.get(key, key)] = value
    return normalized


def sanitize(
    data: Union[None, TowerParameters, Mapping[str, Any]] = None,
) -> TowerParameters:
    """
    Build a valid TowerParameters from a partial or malformed input.

    Args:
        data: A TowerParameters, a mapping with camelCase or snake_case
            keys (any subset of fields), or None for the defaults

    Returns:
        A new TowerParameters within all domain bounds
    """
    if data is None:
        data = {}
    elif isinstance(data, TowerParameters):
        data = data.to_dict()
    data = _normalize_keys(data)

    return TowerParameters(
        floors=_sanitize_number(data.get('floors'), 'floors', integer=True),
        floor_height=_sanitize_number(data.get('floorHeight'), 'floorHeight'),
        base_radius=_sanitize_number(data.get('baseRadius'), 'baseRadius'),
        sphere_radius=_sanitize_number(data.get('sphereRadius'), 'sphereRadius'),
        spheres_per_floor=_sanitize_number(
            data.get('spheresPerFloor'), 'spheresPerFloor', integer=True
        ),
        twist_range=sanitize_range(
            data.get('twistRange'),
            DEFAULT_PARAMETERS.twist_range,
            PARAMETER_BOUNDS['twistRange'],
        ),
        scale_range=sanitize_range(
            data.get('scaleRange'),
            DEFAULT_PARAMETERS.scale_range,
            PARAMETER_BOUNDS['scaleRange'],
        ),
        twist_easing=_sanitize_easing(data.get('twistEasing'), 'twistEasing'),
        scale_easing=_sanitize_easing(data.get('scaleEasing'), 'scaleEasing'),
        bottom_color=_sanitize_color(data.get('bottomColor'), 'bottomColor'),
        top_color=_sanitize_color(data.get('topColor'), 'topColor'),
    )
