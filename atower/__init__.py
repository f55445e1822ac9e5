# atower - Procedural Tower Geometry
"""
A-TOWER: A Parametric Stacked-Floor Tower Generator
===================================================

This package provides:
- Eased gradients for twist and scale along the tower height
- Perceptual (L*a*b*) color blending between a bottom and a top color
- A sanitized, always-renderable parameter set
- Floor slice and sphere instance generators
- Named presets with pluggable persistence
- OBJ / JSON export and a Plotly viewer

ARCHITECTURE:
-------------
    easing.py       Scalar easing curves
    gradients.py    Range and color interpolation (sRGB <-> L*a*b*)
    model.py        Value types (Range, FloorSlice, SphereInstance)
    params.py       TowerParameters and sanitize()
    state.py        TowerState, set_params(), update_range()
    presets.py      Preset transitions and PresetStore
    storage.py      Persistence backends and the persisted document shape
    generative/     Floor and sphere generators
    export.py       OBJ / JSON / text export
    viz/            Plotly viewer
"""

from .model import Range, FloorSlice, SphereInstance
from .params import TowerParameters, DEFAULT_PARAMETERS, PARAMETER_BOUNDS, sanitize, sanitize_range
from .gradients import interpolate_scalar, interpolate_color
from .state import Preset, TowerState, set_params, update_range
from .presets import PresetStore, save_preset, load_preset, delete_preset, reset_defaults
from .generative import generate_floors, generate_sphere_instances
from .export import ExportError

__version__ = "0.1.0"
