from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


def require_floor(value: object, label: str) -> int:
    """Return ``value`` unchanged if it is a plain integer floor number."""

    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{label} must be an integer, got {value!r}")
    return value


def require_trip(person: "Person") -> None:
    """Check that ``person`` carries a name, an origin and a destination."""

    if person is None:
        raise TypeError("A trip requires a person")
    if not isinstance(person.name, str) or not person.name.strip():
        raise ValueError("Person name must be a non-empty string")
    require_floor(person.current_floor, "Person current_floor")
    if person.drop_off_floor is None:
        raise ValueError(f"{person.name} has no drop-off floor")
    require_floor(person.drop_off_floor, "Person drop_off_floor")


@dataclass(eq=False)
class Person:
    """A rider travelling from ``current_floor`` to ``drop_off_floor``.

    Equality is identity: two people with the same name and floors are two
    independent trips. Both floors are frozen while the trip is in transit.
    """

    name: str
    current_floor: int
    drop_off_floor: Optional[int] = None
    record_id: Optional[str] = None
    in_transit: bool = field(default=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Person name must be a non-empty string")
        require_floor(self.current_floor, "Person current_floor")
        if self.drop_off_floor is not None:
            require_floor(self.drop_off_floor, "Person drop_off_floor")

    def __setattr__(self, name: str, value: object) -> None:
        if getattr(self, "in_transit", False):
            if name == "current_floor":
                raise ValueError(f"{self.name} cannot change origin floor during a trip")
            if name == "drop_off_floor" and self.drop_off_floor is not None:
                raise ValueError(f"{self.name} already has a drop-off floor for this trip")
        super().__setattr__(name, value)

    def request_drop_off(self, floor: int) -> int:
        require_floor(floor, "Drop-off floor")
        self.drop_off_floor = floor
        return floor

    def to_record(self) -> dict:
        return {
            "name": self.name,
            "currentFloor": self.current_floor,
            "dropOffFloor": self.drop_off_floor,
        }

    @classmethod
    def from_record(cls, record: dict) -> "Person":
        return cls(
            name=record["name"],
            current_floor=record["currentFloor"],
            drop_off_floor=record.get("dropOffFloor"),
            record_id=record.get("id"),
        )
