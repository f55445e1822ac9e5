# app/state/session.py
"""
Session state management for Streamlit.

The tower state itself is an immutable value held by a PresetStore; the
store lives in st.session_state for the duration of a browser session and
persists presets to a JSON file. Widget values are kept in session state
under WIDGET_KEYS so that loading a preset can move the sliders.
"""

import streamlit as st
import sys
from pathlib import Path
from typing import Any, Dict

sys.path.insert(0, str(Path(__file__).parent.parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent))

from atower.params import TowerParameters
from atower.presets import PresetStore
from atower.storage import JsonFileStorage
from config import CONFIG


# Wire field -> widget key
WIDGET_KEYS = {
    'floors': 'w_floors',
    'floorHeight': 'w_floor_height',
    'baseRadius': 'w_base_radius',
    'sphereRadius': 'w_sphere_radius',
    'spheresPerFloor': 'w_spheres_per_floor',
    'twistEasing': 'w_twist_easing',
    'scaleEasing': 'w_scale_easing',
    'bottomColor': 'w_bottom_color',
    'topColor': 'w_top_color',
}

RANGE_WIDGET_KEYS = {
    'twistRange': ('w_twist_min', 'w_twist_max'),
    'scaleRange': ('w_scale_min', 'w_scale_max'),
}


# ============================================================================
# Store
# ============================================================================

def get_store() -> PresetStore:
    """Get the session's PresetStore, creating it from the presets file."""
    if 'tower_store' not in st.session_state:
        st.session_state.tower_store = PresetStore(JsonFileStorage(CONFIG.presets_path))
        sync_widgets(st.session_state.tower_store.params)
    return st.session_state.tower_store


# ============================================================================
# Widgets
# ============================================================================

def sync_widgets(params: TowerParameters) -> None:
    """Push parameter values into the widget keys (before widgets are drawn)."""
    data = params.to_dict()
    for field, key in WIDGET_KEYS.items():
        st.session_state[key] = data[field]
    for field, (key_min, key_max) in RANGE_WIDGET_KEYS.items():
        st.session_state[key_min] = float(data[field]['min'])
        st.session_state[key_max] = float(data[field]['max'])


def read_widgets() -> Dict[str, Any]:
    """Collect widget values into a parameter patch (wire names)."""
    patch = {field: st.session_state[key] for field, key in WIDGET_KEYS.items()}
    for field, (key_min, key_max) in RANGE_WIDGET_KEYS.items():
        patch[field] = {'min': st.session_state[key_min], 'max': st.session_state[key_max]}
    return patch

