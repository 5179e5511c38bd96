from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Sequence

from .utils import index_by_floor, partition_stops

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from dispatch.core import DispatchCore
    from dispatch.person import Person


@dataclass(frozen=True)
class RoutePlan:
    """Stops for one batch plus who boards and leaves at each of them."""

    floors: List[int]
    pickups: Dict[int, List["Person"]]
    drop_offs: Dict[int, List["Person"]]


class ScanScheduler:
    """Direction-batched sweep: every stop above the car, then every stop below.

    The batch is frozen when the call starts. Each distinct floor is visited
    once with a single stop, boarding everyone waiting there before letting
    out everyone travelling to it.
    """

    name = "scan"

    def plan_route(self, batch: Sequence["Person"], start_floor: int) -> RoutePlan:
        pickups = index_by_floor(batch, lambda person: person.current_floor)
        drop_offs = index_by_floor(batch, lambda person: person.drop_off_floor)
        ascending, descending = partition_stops(list(pickups) + list(drop_offs), start_floor)
        return RoutePlan(floors=ascending + descending, pickups=pickups, drop_offs=drop_offs)

    def serve_batch(self, core: "DispatchCore") -> List["Person"]:
        batch = core.requests.list()
        if not batch:
            return []
        for person in batch:
            core.check_trip(person)

        plan = self.plan_route(batch, core.current_floor)
        for floor in plan.floors:
            core.move_to_floor(floor)
            core.stop()
            for person in plan.pickups.get(floor, []):
                core.board(person)
            for person in plan.drop_offs.get(floor, []):
                core.alight(person)

        for person in batch:
            core.requests.remove(person)
        return batch
