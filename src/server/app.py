from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, StrictInt

logger = logging.getLogger(__name__)


class TripRecordIn(BaseModel):
    name: str
    currentFloor: StrictInt
    dropOffFloor: StrictInt


class TripRecordUpdate(BaseModel):
    name: Optional[str] = None
    currentFloor: Optional[StrictInt] = None
    dropOffFloor: Optional[StrictInt] = None


class RecordRepository:
    """Ordered in-memory collection of trip records with generated ids."""

    def __init__(self, prefix: str, label: str) -> None:
        self.prefix = prefix
        self.label = label
        self.records: List[Dict[str, object]] = []
        self._next_id = 1

    def create(self, data: TripRecordIn) -> Dict[str, object]:
        if not data.name.strip():
            raise HTTPException(status_code=400, detail="Invalid trip record: expected name, currentFloor, dropOffFloor")
        record = {
            "id": f"{self.prefix}_{self._next_id}",
            "name": data.name,
            "currentFloor": data.currentFloor,
            "dropOffFloor": data.dropOffFloor,
            "createdAt": datetime.now(timezone.utc).isoformat(),
        }
        self._next_id += 1
        self.records.append(record)
        logger.debug("Created %s %s", self.label, record["id"])
        return record

    def get(self, record_id: str) -> Dict[str, object]:
        for record in self.records:
            if record["id"] == record_id:
                return record
        raise HTTPException(status_code=404, detail=f"{self.label.capitalize()} not found")

    def update(self, record_id: str, changes: TripRecordUpdate) -> Dict[str, object]:
        record = self.get(record_id)
        for field_name, value in changes.model_dump(exclude_unset=True).items():
            if value is not None:
                record[field_name] = value
        return record

    def delete(self, record_id: str) -> Dict[str, object]:
        record = self.get(record_id)
        self.records.remove(record)
        logger.debug("Deleted %s %s", self.label, record_id)
        return record

    def clear(self) -> int:
        count = len(self.records)
        self.records = []
        return count


requests_repo = RecordRepository("req", "request")
riders_repo = RecordRepository("rider", "rider")

app = FastAPI(title="LiftDispatch Record Store")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def reject_invalid_record(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid trip record: expected name, currentFloor, dropOffFloor"},
    )


@app.post("/api/requests", status_code=201)
async def create_request(data: TripRecordIn) -> dict:
    return requests_repo.create(data)


@app.get("/api/requests")
async def list_requests() -> list:
    return requests_repo.records


@app.get("/api/requests/{record_id}")
async def get_request(record_id: str) -> dict:
    return requests_repo.get(record_id)


@app.put("/api/requests/{record_id}")
async def update_request(record_id: str, changes: TripRecordUpdate) -> dict:
    return requests_repo.update(record_id, changes)


@app.delete("/api/requests/{record_id}")
async def delete_request(record_id: str) -> dict:
    return requests_repo.delete(record_id)


@app.delete("/api/requests")
async def clear_requests() -> dict:
    count = requests_repo.clear()
    return {"message": f"Deleted {count} requests", "count": count}


@app.post("/api/riders", status_code=201)
async def create_rider(data: TripRecordIn) -> dict:
    return riders_repo.create(data)


@app.get("/api/riders")
async def list_riders() -> list:
    return riders_repo.records


@app.get("/api/riders/{record_id}")
async def get_rider(record_id: str) -> dict:
    return riders_repo.get(record_id)


@app.put("/api/riders/{record_id}")
async def update_rider(record_id: str, changes: TripRecordUpdate) -> dict:
    return riders_repo.update(record_id, changes)


@app.delete("/api/riders/{record_id}")
async def delete_rider(record_id: str) -> dict:
    return riders_repo.delete(record_id)


@app.delete("/api/riders")
async def clear_riders() -> dict:
    count = riders_repo.clear()
    return {"message": f"Deleted {count} riders", "count": count}


@app.get("/health")
async def health() -> dict:
    return {
        "status": "ok",
        "requests": len(requests_repo.records),
        "riders": len(riders_repo.records),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.app:app", host="0.0.0.0", port=3000, reload=False)
