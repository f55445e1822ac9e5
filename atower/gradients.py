# atower/gradients.py
"""
GRADIENTS: Eased Ranges and Perceptual Color Blending
=====================================================

PURPOSE:
--------
Turn a normalized floor position t in [0, 1] into a value along the tower:
- a twist angle or scale factor (interpolate_scalar), and
- a floor color (interpolate_color).

SCALAR GRADIENTS:
-----------------
The result is linear in the *eased* parameter, not in t:

    value = range.min + (range.max - range.min) * easing(clamp01(t))

so the easing shape directly controls how twist and scale are spread
over the height.

COLOR GRADIENTS:
----------------
Blending two sRGB colors channel by channel tends to pass through muddy,
greyish midpoints (e.g. blue -> yellow goes through grey). Instead we blend
in CIE L*a*b*, where equal steps are roughly equal perceived differences:

    sRGB -> linear RGB -> XYZ (D65) -> L*a*b*  ... lerp ...  -> back to sRGB

Color blending always uses linear t; it ignores the twist/scale easings.
Only two-point blending is needed, so the conversion is done here rather
than pulling in a color-management library.
"""

import numpy as np
from typing import List, Sequence, Tuple

from .easing import get_easing
from .model import Range

# D65 reference white
_WHITE = np.array([0.95047, 1.0, 1.08883])

_RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])

_XYZ_TO_RGB = np.array([
    [3.2404542, -1.5371385, -0.4985314],
    [-0.9692660, 1.8760108, 0.0415560],
    [0.0556434, -0.2040259, 1.0572252],
])

_DELTA = 6.0 / 29.0

_HEX_DIGITS = set('0123456789abcdef')


def clamp01(value: float) -> float:
    """Clamp a value to [0, 1]."""
    return min(1.0, max(0.0, value))


def interpolate_scalar(value_range: Range, easing: str, t: float) -> float:
    """
    Interpolate along a range using an easing curve.

    Args:
        value_range: Gradient endpoints (min at t=0, max at t=1)
        easing: Easing name ('linear', 'easeIn', 'easeOut', 'easeInOut')
        t: Normalized position, clamped to [0, 1]

    Returns:
        value_range.min at t <= 0, value_range.max at t >= 1
    """
    eased = get_easing(easing)(clamp01(t))
    return value_range.min * (1.0 - eased) + value_range.max * eased


# =============================================================================
# Hex parsing
# =============================================================================

def parse_hex(color: str) -> Tuple[int, int, int]:
    """
    Parse '#rrggbb' or '#rgb' (case-insensitive, '#' optional) into 0-255 ints.

    Raises:
        ValueError: If the string is not a hex color
    """
    if not isinstance(color, str):
        raise ValueError(f"Not a hex color: {color!r}")
    digits = color.strip().lower()
    if digits.startswith('#'):
        digits = digits[1:]
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)
    if len(digits) != 6 or not set(digits) <= _HEX_DIGITS:
        raise ValueError(f"Not a hex color: {color!r}")
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def to_hex(rgb: Sequence[int]) -> str:
    """Format 0-255 channels as '#rrggbb'."""
    r, g, b = (int(c) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def normalize_hex(color: str) -> str:
    """Canonical lowercase '#rrggbb' form of a hex color."""
    return to_hex(parse_hex(color))


# =============================================================================
# sRGB <-> L*a*b*
# =============================================================================

def _srgb_to_linear(c: np.ndarray) -> np.ndarray:
    return np.where(c <= 0.04045, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)


def _linear_to_srgb(c: np.ndarray) -> np.ndarray:
    c = np.clip(c, 0.0, 1.0)
    return np.where(c <= 0.0031308, 12.92 * c, 1.055 * c ** (1 / 2.4) - 0.055)


def _lab_f(t: np.ndarray) -> np.ndarray:
    return np.where(t > _DELTA ** 3, np.cbrt(t), t / (3 * _DELTA ** 2) + 4.0 / 29.0)


def _lab_f_inv(t: np.ndarray) -> np.ndarray:
    return np.where(t > _DELTA, t ** 3, 3 * _DELTA ** 2 * (t - 4.0 / 29.0))


def rgb_to_lab(rgb: Sequence[int]) -> np.ndarray:
    """Convert 0-255 sRGB channels to an (L, a, b) array."""
    linear = _srgb_to_linear(np.asarray(rgb, dtype=float) / 255.0)
    xyz = _RGB_TO_XYZ @ linear / _WHITE
    fx, fy, fz = _lab_f(xyz)
    return np.array([116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)])


def lab_to_rgb(lab: Sequence[float]) -> Tuple[int, int, int]:
    """Convert (L, a, b) back to 0-255 sRGB, clipping out-of-gamut values."""
    L, a, b = lab
    fy = (L + 16.0) / 116.0
    f = np.array([fy + a / 500.0, fy, fy - b / 200.0])
    xyz = _lab_f_inv(f) * _WHITE
    srgb = _linear_to_srgb(_XYZ_TO_RGB @ xyz)
    channels = np.floor(srgb * 255.0 + 0.5).astype(int)
    r, g, b_ = np.clip(channels, 0, 255)
    return int(r), int(g), int(b_)


def interpolate_color(bottom: str, top: str, t: float) -> str:
    """
    Blend two hex colors in L*a*b* space.

    Args:
        bottom: Color at t=0
        top: Color at t=1
        t: Normalized position, clamped to [0, 1]

    Returns:
        '#rrggbb'
    """
    t = clamp01(t)
    if t <= 0.0:
        return normalize_hex(bottom)
    if t >= 1.0:
        return normalize_hex(top)
    lab_bottom = rgb_to_lab(parse_hex(bottom))
    lab_top = rgb_to_lab(parse_hex(top))
    return to_hex(lab_to_rgb(lab_bottom + (lab_top - lab_bottom) * t))


def color_ramp(bottom: str, top: str, n: int) -> List[str]:
    """n evenly spaced colors from bottom to top (inclusive)."""
    if n <= 1:
        return [normalize_hex(bottom)]
    return [interpolate_color(bottom, top, i / (n - 1)) for i in range(n)]
