# app/components - Reusable UI components
from .model_viewer import render_3d_model
from .metrics_panel import render_metrics_panel
from .parameter_inputs import (
    render_dimension_inputs,
    render_sphere_inputs,
    render_gradient_inputs,
    render_color_inputs,
)
from .preset_menu import render_preset_menu

__all__ = [
    'render_3d_model',
    'render_metrics_panel',
    'render_dimension_inputs',
    'render_sphere_inputs',
    'render_gradient_inputs',
    'render_color_inputs',
    'render_preset_menu',
]
