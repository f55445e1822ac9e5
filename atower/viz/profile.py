# atower/viz/profile.py
"""
GRADIENT PROFILE: Twist, Scale and Color Against Height
=======================================================

A flat companion to the 3D viewer. Three side-by-side panels share the
height axis:

- twist (degrees) per floor,
- scale factor per floor,
- the floor color band, bottom to top.

Easing choices are easy to misjudge in 3D; here the curve shape is
plain to see.
"""

import logging
import os
from typing import Optional

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from ..export import floor_schedule
from ..params import TowerParameters

logger = logging.getLogger(__name__)

COLORS = {
    'background': '#FAFAFA',
    'grid': '#E0E0E0',
    'twist': '#2C3E50',
    'scale': '#E74C3C',
    'text': '#2C3E50',
}


def plot_gradient_profile(
    params: TowerParameters,
    outpath: Optional[str] = None,
    title: str = "Tower Gradient Profile",
):
    """
    Plot the per-floor twist, scale and color of a tower.

    Parameters:
    -----------
    params : TowerParameters
        Sanitized parameter set
    outpath : Optional[str]
        PNG path; the figure is returned open when omitted
    title : str
        Figure title

    Returns:
    --------
    matplotlib.figure.Figure, or None once written to outpath
    """
    df = floor_schedule(params)

    fig, (ax_twist, ax_scale, ax_color) = plt.subplots(
        1, 3, figsize=(12, 7), sharey=True,
        gridspec_kw={'width_ratios': [3, 3, 1]},
        facecolor=COLORS['background'],
    )

    ax_twist.plot(df['twist_deg'], df['y'], '-o', color=COLORS['twist'], markersize=3)
    ax_twist.set_xlabel(f"Twist (deg, {params.twist_easing})", fontsize=11, fontweight='bold')
    ax_twist.set_ylabel('Floor elevation y (m)', fontsize=11, fontweight='bold')

    ax_scale.plot(df['scale'], df['y'], '-o', color=COLORS['scale'], markersize=3)
    ax_scale.set_xlabel(f"Scale ({params.scale_easing})", fontsize=11, fontweight='bold')

    for ax in (ax_twist, ax_scale):
        ax.set_facecolor(COLORS['background'])
        ax.grid(True, alpha=0.3, linestyle='--', color=COLORS['grid'])
        ax.set_axisbelow(True)

    for y, color in zip(df['y'], df['color']):
        ax_color.add_patch(Rectangle((0, y), 1, params.floor_height, color=color))
    ax_color.set_xlim(0, 1)
    ax_color.set_ylim(0, len(df) * params.floor_height)
    ax_color.set_xticks([])
    ax_color.set_xlabel('Color', fontsize=11, fontweight='bold')

    fig.suptitle(title, fontsize=14, fontweight='bold', color=COLORS['text'])
    plt.tight_layout()

    if outpath is None:
        return fig

    directory = os.path.dirname(outpath)
    if directory:
        os.makedirs(directory, exist_ok=True)
    plt.savefig(outpath, dpi=150, bbox_inches='tight', facecolor=COLORS['background'])
    plt.close(fig)
    logger.info("Gradient profile saved to: %s", outpath)
    return None
