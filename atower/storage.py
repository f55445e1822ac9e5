# atower/storage.py
"""
Preset persistence.

The preset logic in presets.py never touches a file system directly; it
is handed a storage backend with two methods:

    load() -> Optional[dict]     # None when nothing has been stored yet
    save(data: dict) -> None

The stored document is the parameter set flattened alongside the preset
collection:

    {
        "floors": 36, "floorHeight": 3.2, ..., "topColor": "#36c2ff",
        "presets": [{"id": "...", "name": "...", "params": {...}}, ...],
        "activePresetId": "..." | null
    }
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Protocol, Union

from .params import sanitize
from .state import Preset, TowerState

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """Raised when preset state cannot be written."""
    pass


class PresetStorage(Protocol):
    def load(self) -> Optional[Dict[str, Any]]:
        ...

    def save(self, data: Dict[str, Any]) -> None:
        ...


class MemoryStorage:
    """Keeps the persisted document in memory (tests, throwaway stores)."""

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self._data = json.loads(json.dumps(data)) if data is not None else None

    def load(self) -> Optional[Dict[str, Any]]:
        if self._data is None:
            return None
        return json.loads(json.dumps(self._data))

    def save(self, data: Dict[str, Any]) -> None:
        self._data = json.loads(json.dumps(data))


class JsonFileStorage:
    """
    Persists the document as a JSON file.

    A missing file loads as None. A corrupt file is logged and also loads
    as None, so a broken presets file never blocks rendering a tower.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> Optional[Dict[str, Any]]:
        if not self.path.exists():
            return None
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not read presets file %s: %s", self.path, e)
            return None
        if not isinstance(data, dict):
            logger.warning("Ignoring presets file %s: top level is not an object", self.path)
            return None
        return data

    def save(self, data: Dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=str(self.path.parent), prefix=self.path.name, suffix='.tmp'
            )
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as f:
                    json.dump(data, f, indent=2)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            raise StorageError(f"Could not write presets file {self.path}: {e}") from e
        logger.debug("Saved presets to %s", self.path)


# =============================================================================
# State <-> persisted document
# =============================================================================

def state_to_persisted(state: TowerState) -> Dict[str, Any]:
    """Flatten a TowerState into the persisted document."""
    data = state.params.to_dict()
    data['presets'] = [preset.to_dict() for preset in state.presets]
    data['activePresetId'] = state.active_preset_id
    return data


def _presets_from_persisted(entries: Any) -> List[Preset]:
    presets = []
    seen = set()
    if not isinstance(entries, list):
        return presets
    for entry in entries:
        if not isinstance(entry, Mapping) or not entry.get('id'):
            logger.warning("Skipping malformed preset entry: %r", entry)
            continue
        preset_id = str(entry['id'])
        if preset_id in seen:
            logger.warning("Skipping duplicate preset id: %s", preset_id)
            continue
        seen.add(preset_id)
        params = entry.get('params')
        presets.append(Preset(
            id=preset_id,
            name=str(entry.get('name') or preset_id),
            params=sanitize(params if isinstance(params, Mapping) else None),
        ))
    return presets


def state_from_persisted(data: Optional[Mapping[str, Any]]) -> TowerState:
    """
    Rebuild a TowerState from a persisted document.

    Every parameter block is sanitized. An activePresetId that does not
    name a loaded preset is dropped.
    """
    if not data:
        return TowerState()
    presets = _presets_from_persisted(data.get('presets'))
    active = data.get('activePresetId')
    if active is not None and not any(p.id == active for p in presets):
        active = None
    params = {k: v for k, v in data.items() if k not in ('presets', 'activePresetId')}
    return TowerState(
        params=sanitize(params),
        presets=tuple(presets),
        active_preset_id=active,
    )
