# app/state - Session state management
from .session import (
    get_store,
    sync_widgets,
    read_widgets,
    WIDGET_KEYS,
    RANGE_WIDGET_KEYS,
)

__all__ = [
    'get_store',
    'sync_widgets',
    'read_widgets',
    'WIDGET_KEYS',
    'RANGE_WIDGET_KEYS',
]
