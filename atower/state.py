# atower/state.py
"""
Application state as one immutable value.

TowerState bundles the live parameter set with the preset collection and
the id of the preset the parameters were loaded from (if any). Every
operation returns a new TowerState; nothing is modified in place, so a
snapshot handed to a renderer or exporter never observes later edits.
"""

from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional, Tuple, Union

from .model import Range
from .params import (
    DEFAULT_PARAMETERS,
    FIELD_NAMES,
    PARAMETER_BOUNDS,
    RANGE_KEYS,
    TowerParameters,
    sanitize,
    sanitize_range,
)


@dataclass(frozen=True)
class Preset:
    """A named snapshot of the full parameter set."""
    id: str
    name: str
    params: TowerParameters

    def to_dict(self):
        return {'id': self.id, 'name': self.name, 'params': self.params.to_dict()}


@dataclass(frozen=True)
class TowerState:
    params: TowerParameters = DEFAULT_PARAMETERS
    presets: Tuple[Preset, ...] = ()
    active_preset_id: Optional[str] = None


def set_params(
    state: TowerState,
    patch: Union[TowerParameters, Mapping[str, Any]],
) -> TowerState:
    """
    Merge a partial parameter patch over the current parameters.

    The merged result is sanitized as a whole. A manual edit detaches the
    parameters from whichever preset they were loaded from.
    """
    if isinstance(patch, TowerParameters):
        patch = patch.to_dict()
    merged = state.params.to_dict()
    for key, value in patch.items():
        merged[FIELD_NAMES.get(key, key)] = value
    return replace(state, params=sanitize(merged), active_preset_id=None)


def _range_key(key: str) -> str:
    key = FIELD_NAMES.get(key, key)
    if key not in RANGE_KEYS:
        raise ValueError(f"Unknown range: {key!r} (expected one of {', '.join(RANGE_KEYS)})")
    return key


def update_range(
    state: TowerState,
    key: str,
    patch: Mapping[str, Any],
) -> TowerState:
    """
    Patch one or both endpoints of a gradient range.

    Args:
        state: Current state
        key: 'twistRange' / 'twist_range' or 'scaleRange' / 'scale_range'
        patch: Mapping with 'min' and/or 'max'

    Raises:
        ValueError: If key does not name a range
    """
    key = _range_key(key)
    attr = 'twist_range' if key == 'twistRange' else 'scale_range'
    current: Range = getattr(state.params, attr)
    merged = {'min': current.min, 'max': current.max}
    merged.update({k: v for k, v in patch.items() if k in ('min', 'max')})
    new_range = sanitize_range(merged, current, PARAMETER_BOUNDS[key])
    params = replace(state.params, **{attr: new_range})
    return replace(state, params=params, active_preset_id=None)
