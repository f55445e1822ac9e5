# atower/viz - Visualization Tools
"""
VIZ: Interactive 3D Tower Viewer (Plotly) and Gradient Profile (matplotlib)
"""

from .viz3d import plot_tower_3d, create_tower_figure
from .profile import plot_gradient_profile

__all__ = ['plot_tower_3d', 'create_tower_figure', 'plot_gradient_profile']
