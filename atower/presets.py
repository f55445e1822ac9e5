# atower/presets.py
"""
PRESETS: Named Parameter Snapshots
==================================

Two layers:

1. Pure transitions over TowerState (save_preset, load_preset, ...).
   Each returns a new state; unknown ids and blank names are no-ops that
   return the state unchanged.

2. PresetStore: holds the current TowerState for an interactive session
   and writes it through an injected storage backend after every change.

ISOLATION:
----------
A preset stores a freshly sanitized copy of the parameters, and all
parameter values are frozen dataclasses. Editing the live parameters
after a save can therefore never reach into a stored preset, and loading
a preset never lets later edits leak back into it.
"""

import logging
import uuid
from dataclasses import replace
from typing import Any, Callable, Mapping, Optional

from .params import DEFAULT_PARAMETERS, TowerParameters, sanitize
from .state import Preset, TowerState, set_params, update_range
from .storage import PresetStorage, state_from_persisted, state_to_persisted

logger = logging.getLogger(__name__)


def new_preset_id() -> str:
    return uuid.uuid4().hex


def find_preset(state: TowerState, preset_id: str) -> Optional[Preset]:
    for preset in state.presets:
        if preset.id == preset_id:
            return preset
    return None


def save_preset(
    state: TowerState,
    name: str,
    id_factory: Callable[[], str] = new_preset_id,
) -> TowerState:
    """Snapshot the current parameters under `name` and mark it active."""
    name = (name or '').strip()
    if not name:
        return state
    existing = {p.id for p in state.presets}
    preset_id = id_factory()
    while preset_id in existing:
        preset_id = id_factory()
    preset = Preset(id=preset_id, name=name, params=sanitize(state.params))
    return replace(
        state,
        presets=state.presets + (preset,),
        active_preset_id=preset_id,
    )


def load_preset(state: TowerState, preset_id: str) -> TowerState:
    """Replace the live parameters with a preset's snapshot."""
    preset = find_preset(state, preset_id)
    if preset is None:
        return state
    return replace(state, params=sanitize(preset.params), active_preset_id=preset.id)


def delete_preset(state: TowerState, preset_id: str) -> TowerState:
    """Remove a preset; clears the active marker only if it pointed at it."""
    if find_preset(state, preset_id) is None:
        return state
    active = None if state.active_preset_id == preset_id else state.active_preset_id
    return replace(
        state,
        presets=tuple(p for p in state.presets if p.id != preset_id),
        active_preset_id=active,
    )


def reset_defaults(state: TowerState) -> TowerState:
    """Restore the baseline parameters. Presets are kept."""
    return replace(state, params=DEFAULT_PARAMETERS, active_preset_id=None)


class PresetStore:
    """
    Session holder for a TowerState backed by a storage backend.

    Usage:
        store = PresetStore(JsonFileStorage('presets.json'))
        store.set_params({'floors': 80})
        preset_id = store.save_preset('Tall')
        store.load_preset(preset_id)
    """

    def __init__(
        self,
        storage: PresetStorage,
        id_factory: Callable[[], str] = new_preset_id,
    ):
        self.storage = storage
        self.id_factory = id_factory
        self._state = state_from_persisted(storage.load())
        logger.debug(
            "Loaded tower state with %d preset(s)", len(self._state.presets)
        )

    @property
    def state(self) -> TowerState:
        return self._state

    @property
    def params(self) -> TowerParameters:
        return self._state.params

    @property
    def active_preset(self) -> Optional[Preset]:
        if self._state.active_preset_id is None:
            return None
        return find_preset(self._state, self._state.active_preset_id)

    def _commit(self, new_state: TowerState) -> TowerState:
        if new_state == self._state:
            return self._state
        self._state = new_state
        self.storage.save(state_to_persisted(new_state))
        return new_state

    def set_params(self, patch: Mapping[str, Any]) -> TowerState:
        return self._commit(set_params(self._state, patch))

    def update_range(self, key: str, patch: Mapping[str, Any]) -> TowerState:
        return self._commit(update_range(self._state, key, patch))

    def save_preset(self, name: str) -> Optional[str]:
        """Save the current parameters; returns the new preset id (None for a blank name)."""
        new_state = save_preset(self._state, name, id_factory=self.id_factory)
        if new_state is self._state:
            return None
        self._commit(new_state)
        logger.info("Saved preset %r (%s)", name.strip(), new_state.active_preset_id)
        return new_state.active_preset_id

    def load_preset(self, preset_id: str) -> TowerState:
        return self._commit(load_preset(self._state, preset_id))

    def delete_preset(self, preset_id: str) -> TowerState:
        new_state = delete_preset(self._state, preset_id)
        if new_state is not self._state:
            logger.info("Deleted preset %s", preset_id)
        return self._commit(new_state)

    def reset_defaults(self) -> TowerState:
        return self._commit(reset_defaults(self._state))
