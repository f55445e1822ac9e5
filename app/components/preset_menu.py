# app/components/preset_menu.py
"""
Preset menu: save / load / delete / reset.

Actions run as on_click callbacks, i.e. before the widgets of the next run
are drawn, which is the only point where widget values may be overwritten.
"""

import logging
import streamlit as st
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from atower.storage import StorageError
from state.session import get_store, sync_widgets

logger = logging.getLogger(__name__)


def _report(action: str, error: Exception) -> None:
    logger.error("Preset %s failed: %s", action, error)
    st.session_state.preset_error = f"Could not {action} preset: {error}"


def _on_save() -> None:
    name = st.session_state.get('preset_name', '')
    try:
        if get_store().save_preset(name) is not None:
            st.session_state.preset_name = ''
    except StorageError as e:
        _report('save', e)


def _on_load() -> None:
    store = get_store()
    try:
        store.load_preset(st.session_state.get('preset_choice'))
    except StorageError as e:
        _report('load', e)
    sync_widgets(store.params)


def _on_delete() -> None:
    try:
        get_store().delete_preset(st.session_state.get('preset_choice'))
    except StorageError as e:
        _report('delete', e)


def _on_reset() -> None:
    store = get_store()
    try:
        store.reset_defaults()
    except StorageError as e:
        _report('reset', e)
    sync_widgets(store.params)


def render_preset_menu() -> None:
    """Draw the preset controls."""
    store = get_store()
    state = store.state

    error = st.session_state.pop('preset_error', None)
    if error:
        st.error(error)

    st.text_input("Preset name", key='preset_name', placeholder="e.g. Slim helix")
    st.button("💾 Save preset", on_click=_on_save, use_container_width=True)

    if state.presets:
        names = {p.id: p.name for p in state.presets}
        ids = list(names)
        if st.session_state.get('preset_choice') not in names:
            st.session_state.preset_choice = state.active_preset_id or ids[0]
        st.selectbox(
            "Presets",
            options=ids,
            format_func=lambda pid: ("● " if pid == state.active_preset_id else "") + names[pid],
            key='preset_choice',
        )
        col1, col2 = st.columns(2)
        with col1:
            st.button("Load", on_click=_on_load, use_container_width=True)
        with col2:
            st.button("Delete", on_click=_on_delete, use_container_width=True)
    else:
        st.caption("No presets saved yet.")

    st.button("↺ Reset to defaults", on_click=_on_reset, use_container_width=True)
