from __future__ import annotations

from typing import Dict, Type

from .fcfs import FirstComeFirstServedScheduler
from .interface import Scheduler
from .scan import RoutePlan, ScanScheduler

__all__ = [
    "FirstComeFirstServedScheduler",
    "RoutePlan",
    "ScanScheduler",
    "Scheduler",
    "get_scheduler",
]


SCHEDULER_REGISTRY: Dict[str, Type[Scheduler]] = {
    "fifo": FirstComeFirstServedScheduler,
    "scan": ScanScheduler,
}


def get_scheduler(name: str, **kwargs) -> Scheduler:
    cls = SCHEDULER_REGISTRY.get(name.lower())
    if cls is None:
        raise ValueError(f"Unknown scheduler '{name}'. Available: {', '.join(SCHEDULER_REGISTRY)}")
    return cls(**kwargs)
