from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from dispatch.core import DispatchCore
    from dispatch.person import Person


class FirstComeFirstServedScheduler:
    """Serves requests strictly in arrival order, one full trip at a time."""

    name = "fifo"

    def serve_next(self, core: "DispatchCore") -> Optional["Person"]:
        pending = core.requests.list()
        if not pending:
            return None
        person = pending[0]
        # A malformed head stays queued rather than vanishing mid-trip.
        core.check_trip(person)
        core.requests.remove(person)
        core.pick_up(person)
        core.drop_off(person)
        return person

    def serve_batch(self, core: "DispatchCore") -> List["Person"]:
        served: List["Person"] = []
        while True:
            person = self.serve_next(core)
            if person is None:
                return served
            served.append(person)
