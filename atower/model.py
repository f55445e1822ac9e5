# atower/model.py
"""
MODEL DEFINITIONS: Range, FloorSlice, SphereInstance
====================================================

Plain immutable value types shared by the gradient engine and the
generators. They carry no behaviour beyond serialization helpers.

COORDINATES:
------------
Y is up. Floors stack along +Y starting at y = 0; ring layouts live in
the XZ plane around the tower axis (x = 0, z = 0).
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class Range:
    """
    A gradient range from the base (min) to the top (max) of the tower.

    No ordering is enforced: min > max is how a value that *decreases*
    with height is expressed (e.g. a tower that tapers: scale 1.0 -> 0.35).
    """
    min: float
    max: float

    def to_dict(self) -> Dict[str, float]:
        return {'min': self.min, 'max': self.max}


@dataclass(frozen=True)
class FloorSlice:
    """
    One horizontal level of the tower.

    Attributes:
        y: Elevation of the bottom of the floor
        rotation: Twist about the Y axis, in radians
        scale: Uniform XZ scale factor applied to slab and ring layout
        color: sRGB hex color ('#rrggbb')
    """
    y: float
    rotation: float
    scale: float
    color: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'y': self.y,
            'rotation': self.rotation,
            'scale': self.scale,
            'color': self.color,
        }


@dataclass(frozen=True)
class SphereInstance:
    """A sphere placed on a floor's ring layout."""
    position: Tuple[float, float, float]
    radius: float
    color: str

    @property
    def x(self) -> float:
        return self.position[0]

    @property
    def y(self) -> float:
        return self.position[1]

    @property
    def z(self) -> float:
        return self.position[2]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'position': list(self.position),
            'radius': self.radius,
            'color': self.color,
        }
