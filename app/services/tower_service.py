# app/services/tower_service.py
"""
Tower service: generates a tower preview and its summary metrics.
"""

import math
import sys
from pathlib import Path
from typing import Any, Dict

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from atower.generative import generate_floors, generate_sphere_instances, tower_height
from atower.params import TowerParameters


def compute_metrics(params: TowerParameters, floors, instances) -> Dict[str, Any]:
    """Headline numbers shown next to the viewport."""
    scales = [f.scale for f in floors]
    rotations = [f.rotation for f in floors]
    return {
        'n_floors': len(floors),
        'n_spheres': len(instances),
        'total_height': tower_height(params),
        'min_scale': min(scales),
        'max_scale': max(scales),
        'total_twist_deg': math.degrees(rotations[-1] - rotations[0]),
        'max_sphere_radius': max(inst.radius for inst in instances),
        'bottom_color': floors[0].color,
        'top_color': floors[-1].color,
    }


class TowerService:
    """Service for generating a single tower."""

    @staticmethod
    def generate(params: TowerParameters) -> Dict[str, Any]:
        """
        Generate floors and sphere instances for a parameter snapshot.

        Returns:
            dict with floors, instances, metrics
        """
        floors = generate_floors(params)
        instances = generate_sphere_instances(params, floors)
        return {
            'floors': floors,
            'instances': instances,
            'metrics': compute_metrics(params, floors, instances),
        }
