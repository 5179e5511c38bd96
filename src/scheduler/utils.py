from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict, Iterable, List, Tuple

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from dispatch.person import Person


def index_by_floor(people: Iterable["Person"], floor_of: Callable[["Person"], int]) -> Dict[int, List["Person"]]:
    """Group people by the floor ``floor_of`` picks, keeping batch order per floor."""

    grouped: Dict[int, List["Person"]] = {}
    for person in people:
        grouped.setdefault(floor_of(person), []).append(person)
    return grouped


def partition_stops(floors: Iterable[int], start: int) -> Tuple[List[int], List[int]]:
    """Split stop floors into an upward sweep and a downward sweep from ``start``.

    Floors at or above ``start`` go up in increasing order; floors below go
    down in decreasing order. The split is fixed at ``start`` and is not
    re-evaluated as the car moves.
    """

    unique = set(floors)
    ascending = sorted(floor for floor in unique if floor >= start)
    descending = sorted((floor for floor in unique if floor < start), reverse=True)
    return ascending, descending
