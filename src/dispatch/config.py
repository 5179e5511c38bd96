from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass
class DispatchConfig:
    """Settings for building a dispatch core."""

    storage: str = "memory"  # memory, api
    api_base_url: str = "http://localhost:3000"
    api_timeout_s: float = 5.0
    scheduler: str = "scan"
    start_floor: int = 0
    lobby_floor: int = 0
    noon_minutes: int = 12 * 60

    def validate(self) -> None:
        if self.storage not in ("memory", "api"):
            raise ValueError(f"Unknown storage backend '{self.storage}'")
        if isinstance(self.api_timeout_s, bool) or not isinstance(self.api_timeout_s, (int, float)):
            raise ValueError("API timeout must be a number")
        if self.api_timeout_s <= 0:
            raise ValueError("API timeout must be positive")
        for label, value in (
            ("start_floor", self.start_floor),
            ("lobby_floor", self.lobby_floor),
            ("noon_minutes", self.noon_minutes),
        ):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{label} must be an integer")
        if not 0 <= self.noon_minutes < 24 * 60:
            raise ValueError("noon_minutes must fall within one day")

    @classmethod
    def from_dict(cls, data: Dict) -> "DispatchConfig":
        cfg = cls(
            storage=data.get("storage", "memory"),
            api_base_url=data.get("api_base_url", "http://localhost:3000"),
            api_timeout_s=data.get("api_timeout_s", 5.0),
            scheduler=data.get("scheduler", "scan"),
            start_floor=data.get("start_floor", 0),
            lobby_floor=data.get("lobby_floor", 0),
            noon_minutes=data.get("noon_minutes", 12 * 60),
        )
        cfg.validate()
        return cfg
