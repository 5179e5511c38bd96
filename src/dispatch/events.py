from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Callable, ClassVar, Union


class EventKind(str, Enum):
    REQUEST_ENQUEUED = "request_enqueued"
    MOVE = "move"
    STOP = "stop"
    PICKUP = "pickup"
    DROP_OFF = "dropoff"
    IDLE_RETURN_TO_LOBBY = "idle_return_to_lobby"


@dataclass(frozen=True)
class RequestEnqueued:
    kind: ClassVar[EventKind] = EventKind.REQUEST_ENQUEUED
    person_name: str
    origin: int
    destination: int
    queue_length: int


@dataclass(frozen=True)
class Move:
    kind: ClassVar[EventKind] = EventKind.MOVE
    from_floor: int
    to_floor: int
    distance: int


@dataclass(frozen=True)
class Stop:
    kind: ClassVar[EventKind] = EventKind.STOP
    floor: int
    total_stops: int


@dataclass(frozen=True)
class Pickup:
    kind: ClassVar[EventKind] = EventKind.PICKUP
    person_name: str
    floor: int


@dataclass(frozen=True)
class DropOff:
    kind: ClassVar[EventKind] = EventKind.DROP_OFF
    person_name: str
    floor: int


@dataclass(frozen=True)
class IdleReturnToLobby:
    kind: ClassVar[EventKind] = EventKind.IDLE_RETURN_TO_LOBBY
    from_floor: int
    floor: int


Event = Union[RequestEnqueued, Move, Stop, Pickup, DropOff, IdleReturnToLobby]
EventHandler = Callable[[Event], None]


def event_to_dict(event: Event) -> dict:
    """Flatten an event into a JSON-friendly payload tagged with its kind."""

    payload = asdict(event)
    payload["type"] = event.kind.value
    return payload


def format_event(event: Event) -> str:
    """Render an event as one line of console text."""

    if event.kind is EventKind.REQUEST_ENQUEUED:
        return f"Request added: {event.person_name}"
    if event.kind is EventKind.MOVE:
        if event.distance == 0:
            return f"Move: already at floor {event.to_floor}"
        return f"Move: {event.from_floor} -> {event.to_floor} (distance {event.distance})"
    if event.kind is EventKind.STOP:
        return f"Stop #{event.total_stops} at floor {event.floor}"
    if event.kind is EventKind.PICKUP:
        return f"Pickup: {event.person_name} at floor {event.floor}"
    if event.kind is EventKind.DROP_OFF:
        return f"Dropoff: {event.person_name} at floor {event.floor}"
    if event.kind is EventKind.IDLE_RETURN_TO_LOBBY:
        return f"Idle policy: returned to lobby (floor {event.floor})"
    return f"Event: {event_to_dict(event)}"
