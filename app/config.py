# app/config.py
"""
Application configuration and defaults.
"""

from dataclasses import dataclass
from typing import Dict, Tuple
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from atower.params import PARAMETER_BOUNDS


@dataclass
class AppConfig:
    """Global application configuration."""

    # App metadata
    app_name: str = "A-Tower"
    app_subtitle: str = "Procedural Tower Generator"
    version: str = "0.1.0"

    # Slider ranges (match the parameter domains so any preset can be shown)
    floors_range: Tuple[int, int] = PARAMETER_BOUNDS['floors']
    floor_height_range: Tuple[float, float] = PARAMETER_BOUNDS['floorHeight']
    base_radius_range: Tuple[float, float] = PARAMETER_BOUNDS['baseRadius']
    sphere_radius_range: Tuple[float, float] = PARAMETER_BOUNDS['sphereRadius']
    spheres_per_floor_range: Tuple[int, int] = PARAMETER_BOUNDS['spheresPerFloor']
    twist_range: Tuple[float, float] = PARAMETER_BOUNDS['twistRange']
    scale_range: Tuple[float, float] = PARAMETER_BOUNDS['scaleRange']

    # Slider steps
    floor_height_step: float = 0.1
    base_radius_step: float = 0.1
    sphere_radius_step: float = 0.1
    twist_step: float = 1.0
    scale_step: float = 0.05

    # Easing labels shown in the selects
    easing_labels: Dict[str, str] = None

    # Presets file (relative to the working directory)
    presets_path: str = "presets.json"

    # Viewer / export
    viewer_height: int = 650
    viewer_sphere_segments: int = 10
    viewer_sphere_rings: int = 6
    export_sphere_segments: int = 16
    export_sphere_rings: int = 10

    def __post_init__(self):
        if self.easing_labels is None:
            self.easing_labels = {
                'linear': 'Linear',
                'easeIn': 'Ease In',
                'easeOut': 'Ease Out',
                'easeInOut': 'Ease In/Out',
            }


# Global config instance
CONFIG = AppConfig()
