from __future__ import annotations

import logging
from typing import Dict, List, Optional, Protocol

import httpx

from .person import Person

logger = logging.getLogger(__name__)


class RecordStoreError(RuntimeError):
    """Raised when the remote record store answers with a non-2xx status."""

    def __init__(self, status_code: int, detail: str) -> None:
        super().__init__(f"HTTP {status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


class RequestStore(Protocol):
    """Ordered collection of people owned by the dispatch core."""

    def add(self, person: Person) -> int:
        """Append ``person`` and return the new collection size."""
        ...

    def list(self) -> List[Person]:
        """Return the people in insertion order."""
        ...

    def remove(self, person: Person) -> bool:
        """Remove exactly the entry for ``person``; False when absent."""
        ...

    def clear(self) -> int:
        ...


class InMemoryStore:
    """In-process list store; removal is by object identity."""

    def __init__(self) -> None:
        self._people: List[Person] = []

    def add(self, person: Person) -> int:
        self._people.append(person)
        return len(self._people)

    def list(self) -> List[Person]:
        return list(self._people)

    def remove(self, person: Person) -> bool:
        for index, candidate in enumerate(self._people):
            if candidate is person:
                del self._people[index]
                return True
        return False

    def clear(self) -> int:
        count = len(self._people)
        self._people.clear()
        return count

    def __len__(self) -> int:
        return len(self._people)


class ApiStore:
    """Mirrors one collection ("requests" or "riders") into the record store service.

    Records created through this client keep a mapping from record id to the
    local ``Person`` so that ``list`` hands back the same objects the core
    enqueued, which keeps identity-based removal working across the wire.
    """

    def __init__(
        self,
        resource: str,
        base_url: str = "http://localhost:3000",
        timeout: float = 5.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        if resource not in ("requests", "riders"):
            raise ValueError(f"Unknown record resource '{resource}'")
        self.resource = resource
        self.client = client or httpx.Client(base_url=base_url, timeout=timeout)
        self._known: Dict[str, Person] = {}

    @property
    def path(self) -> str:
        return f"/api/{self.resource}"

    def _request(self, method: str, path: str, payload: Optional[dict] = None) -> object:
        response = self.client.request(method, path, json=payload)
        if response.status_code >= 300:
            try:
                detail = response.json().get("detail", response.text)
            except ValueError:
                detail = response.text
            raise RecordStoreError(response.status_code, str(detail))
        return response.json() if response.content else None

    def _records(self) -> List[dict]:
        return list(self._request("GET", self.path) or [])

    def add(self, person: Person) -> int:
        record = self._request("POST", self.path, person.to_record())
        self._known[record["id"]] = person
        logger.debug("Stored %s as %s/%s", person.name, self.resource, record["id"])
        return len(self._records())

    def list(self) -> List[Person]:
        people: List[Person] = []
        for record in self._records():
            person = self._known.get(record["id"])
            if person is None:
                person = Person.from_record(record)
                self._known[record["id"]] = person
            people.append(person)
        return people

    def remove(self, person: Person) -> bool:
        record_id = self._find_record_id(person)
        if record_id is None:
            logger.warning("No %s record matches %s; nothing removed", self.resource, person.name)
            return False
        self._request("DELETE", f"{self.path}/{record_id}")
        self._known.pop(record_id, None)
        return True

    def clear(self) -> int:
        result = self._request("DELETE", self.path) or {}
        self._known.clear()
        return int(result.get("count", 0))

    def health(self) -> dict:
        return self._request("GET", "/health")

    def _find_record_id(self, person: Person) -> Optional[str]:
        records = self._records()
        live_ids = {record["id"] for record in records}
        for record_id, known in self._known.items():
            if known is person and record_id in live_ids:
                return record_id
        # Records created by another client: fall back to matching the trip data.
        for record in records:
            if (
                record.get("name") == person.name
                and record.get("currentFloor") == person.current_floor
                and record.get("dropOffFloor") == person.drop_off_floor
                and record["id"] not in self._known
            ):
                return record["id"]
        return None
