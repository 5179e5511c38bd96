from __future__ import annotations

import logging
from typing import List, Optional

from scheduler import get_scheduler

from .config import DispatchConfig
from .events import (
    DropOff,
    Event,
    EventHandler,
    IdleReturnToLobby,
    Move,
    Pickup,
    RequestEnqueued,
    Stop,
)
from .person import Person, require_floor, require_trip
from .storage import ApiStore, InMemoryStore, RequestStore
from .timeparse import TimeInput, parse_time_to_minutes

logger = logging.getLogger(__name__)


class DispatchCore:
    """Single elevator car with a pending queue, an aboard set and travel totals.

    The core is synchronous and single-threaded. A registered event handler is
    called in-line and must not call back into the core; hosts that share a
    core between threads must guard the whole object with one lock.
    """

    def __init__(
        self,
        requests: Optional[RequestStore] = None,
        riders: Optional[RequestStore] = None,
        start_floor: int = 0,
        lobby_floor: int = 0,
        noon_minutes: int = 12 * 60,
        scheduler_name: str = "scan",
    ) -> None:
        self.requests: RequestStore = requests if requests is not None else InMemoryStore()
        self.riders: RequestStore = riders if riders is not None else InMemoryStore()
        self.current_floor = require_floor(start_floor, "Start floor")
        self.lobby_floor = require_floor(lobby_floor, "Lobby floor")
        self.noon_minutes = noon_minutes
        self.scheduler_name = get_scheduler(scheduler_name).name
        self.total_distance = 0
        self.total_stops = 0
        self._event_handler: Optional[EventHandler] = None

    # Observer

    def on_event(self, handler: Optional[EventHandler]) -> None:
        """Register ``handler`` in place of any previous one; ``None`` unregisters."""
        if handler is not None and not callable(handler):
            raise TypeError("Event handler must be callable")
        self._event_handler = handler

    def _emit(self, event: Event) -> None:
        if self._event_handler is not None:
            self._event_handler(event)

    # Queue

    def enqueue(self, person: Person) -> int:
        require_trip(person)

        length = self.requests.add(person)
        person.in_transit = True
        logger.debug("Enqueued %s (%s -> %s)", person.name, person.current_floor, person.drop_off_floor)
        self._emit(
            RequestEnqueued(
                person_name=person.name,
                origin=person.current_floor,
                destination=person.drop_off_floor,
                queue_length=length,
            )
        )
        return length

    def check_trip(self, person: Person) -> None:
        """Raise unless ``person`` describes a complete, well-formed trip."""
        require_trip(person)

    def pending(self) -> List[Person]:
        return self.requests.list()

    def aboard(self) -> List[Person]:
        return self.riders.list()

    # Primitives

    def move_to_floor(self, floor: int) -> int:
        require_floor(floor, "Target floor")
        origin = self.current_floor
        distance = abs(floor - origin)
        self.total_distance += distance
        self.current_floor = floor
        logger.debug("Move %s -> %s (%s floors)", origin, floor, distance)
        self._emit(Move(from_floor=origin, to_floor=floor, distance=distance))
        return distance

    def stop(self) -> int:
        self.total_stops += 1
        self._emit(Stop(floor=self.current_floor, total_stops=self.total_stops))
        return self.total_stops

    def board(self, person: Person) -> int:
        """Add ``person`` to the car at the current floor without moving."""
        count = self.riders.add(person)
        logger.debug("Pickup %s at floor %s", person.name, self.current_floor)
        self._emit(Pickup(person_name=person.name, floor=self.current_floor))
        return count

    def alight(self, person: Person) -> int:
        """Remove ``person`` from the car at the current floor without moving."""
        if self.riders.remove(person):
            person.in_transit = False
        else:
            logger.warning("%s is not aboard at floor %s", person.name, self.current_floor)
        logger.debug("Drop-off %s at floor %s", person.name, self.current_floor)
        self._emit(DropOff(person_name=person.name, floor=self.current_floor))
        return len(self.riders.list())

    def pick_up(self, person: Person) -> int:
        if person is None:
            raise TypeError("pick_up requires a person")
        self.move_to_floor(person.current_floor)
        self.stop()
        return self.board(person)

    def drop_off(self, person: Person) -> int:
        if person is None:
            raise TypeError("drop_off requires a person")
        if person.drop_off_floor is None:
            raise ValueError(f"{person.name} has no drop-off floor")
        self.move_to_floor(person.drop_off_floor)
        self.stop()
        return self.alight(person)

    # Scheduling

    def serve_next(self) -> Optional[Person]:
        return get_scheduler("fifo").serve_next(self)

    def serve(self, strategy: Optional[str] = None, time: TimeInput = None) -> List[Person]:
        """Serve the whole pending queue with ``strategy`` then run the idle policy."""
        scheduler = get_scheduler(strategy or self.scheduler_name)
        # Reject a malformed time before the batch touches any state.
        parse_time_to_minutes(time)
        logger.info("Serving %s request(s) with %s from floor %s",
                    len(self.requests.list()), scheduler.name, self.current_floor)
        served = scheduler.serve_batch(self)
        self.apply_idle_policy(time)
        logger.info("Batch done at floor %s: distance=%s stops=%s",
                    self.current_floor, self.total_distance, self.total_stops)
        return served

    def serve_all(self, time: TimeInput = None) -> List[Person]:
        return self.serve("fifo", time)

    def serve_all_optimized(self, time: TimeInput = None) -> List[Person]:
        return self.serve("scan", time)

    def apply_idle_policy(self, time: TimeInput = None) -> bool:
        """Return to the lobby when empty before noon; stay parked otherwise.

        Returns True when the car moved.
        """
        if self.riders.list():
            return False
        minutes = parse_time_to_minutes(time)
        if minutes is None or minutes >= self.noon_minutes:
            return False
        if self.current_floor == self.lobby_floor:
            return False

        origin = self.current_floor
        self.move_to_floor(self.lobby_floor)
        logger.info("Idle before noon: returned %s -> lobby %s", origin, self.lobby_floor)
        self._emit(IdleReturnToLobby(from_floor=origin, floor=self.current_floor))
        return True

    def snapshot(self) -> dict:
        return {
            "current_floor": self.current_floor,
            "total_distance": self.total_distance,
            "total_stops": self.total_stops,
            "pending": [p.name for p in self.requests.list()],
            "aboard": [p.name for p in self.riders.list()],
            "scheduler": self.scheduler_name,
        }


def build_core(config: Optional[DispatchConfig] = None) -> DispatchCore:
    """Create a core whose queue and aboard set live where ``config`` says."""

    config = config or DispatchConfig()
    config.validate()
    if config.storage == "api":
        requests: RequestStore = ApiStore("requests", config.api_base_url, config.api_timeout_s)
        riders: RequestStore = ApiStore("riders", config.api_base_url, config.api_timeout_s)
    else:
        requests = InMemoryStore()
        riders = InMemoryStore()
    return DispatchCore(
        requests=requests,
        riders=riders,
        start_floor=config.start_floor,
        lobby_floor=config.lobby_floor,
        noon_minutes=config.noon_minutes,
        scheduler_name=config.scheduler,
    )
