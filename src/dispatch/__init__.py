"""Single-car dispatch core for LiftDispatch."""

from .config import DispatchConfig
from .core import DispatchCore, build_core
from .events import (
    DropOff,
    Event,
    EventKind,
    IdleReturnToLobby,
    Move,
    Pickup,
    RequestEnqueued,
    Stop,
    event_to_dict,
    format_event,
)
from .person import Person
from .storage import ApiStore, InMemoryStore, RecordStoreError, RequestStore
from .timeparse import parse_time_to_minutes

__all__ = [
    "ApiStore",
    "DispatchConfig",
    "DispatchCore",
    "DropOff",
    "Event",
    "EventKind",
    "IdleReturnToLobby",
    "InMemoryStore",
    "Move",
    "Person",
    "Pickup",
    "RecordStoreError",
    "RequestEnqueued",
    "RequestStore",
    "Stop",
    "build_core",
    "event_to_dict",
    "format_event",
    "parse_time_to_minutes",
]
