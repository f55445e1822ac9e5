# atower/easing.py
"""
EASING: Scalar Shaping Curves
=============================

An easing curve reshapes a normalized position t in [0, 1] before it is
used for linear interpolation. The tower uses easing to control how twist
and scale are distributed along the height: 'easeIn' keeps the lower
floors close to the start value, 'easeOut' reaches the end value early.

All four curves map 0 -> 0 and 1 -> 1 and stay within [0, 1] for inputs
within [0, 1]. Callers clamp t first; nothing here clamps.

CURVES:
-------
- 'linear':    t
- 'easeIn':    t^2
- 'easeOut':   1 - (1 - t)^2
- 'easeInOut': 2t^2 below the midpoint, mirrored above it
"""

from typing import Callable, Dict, Literal, Tuple

EasingKind = Literal['linear', 'easeIn', 'easeOut', 'easeInOut']


class UnknownEasingError(KeyError):
    """Raised when an easing name is not one of EASING_KINDS."""
    pass


def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t


def ease_out(t: float) -> float:
    return 1 - (1 - t) ** 2


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


EASINGS: Dict[str, Callable[[float], float]] = {
    'linear': linear,
    'easeIn': ease_in,
    'easeOut': ease_out,
    'easeInOut': ease_in_out,
}

EASING_KINDS: Tuple[str, ...] = tuple(EASINGS)


def get_easing(kind: str) -> Callable[[float], float]:
    """Look up an easing function by its name."""
    try:
        return EASINGS[kind]
    except KeyError:
        raise UnknownEasingError(
            f"Unknown easing: {kind!r} (expected one of {', '.join(EASING_KINDS)})"
        ) from None
