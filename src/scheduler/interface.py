from __future__ import annotations

from typing import TYPE_CHECKING, List, Protocol

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from dispatch.core import DispatchCore
    from dispatch.person import Person


class Scheduler(Protocol):
    """Strategy interface for draining the dispatch core's pending queue."""

    name: str

    def serve_batch(self, core: "DispatchCore") -> List["Person"]:
        """
        Serve every request pending when the call starts and return the
        people served, in the order their trips were completed.

        Implementations drive the car only through the core's primitives so
        distance, stop count and events stay consistent between strategies.
        """
        ...
