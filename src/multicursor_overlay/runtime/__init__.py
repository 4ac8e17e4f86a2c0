"""Runtime services: telemetry, scheduling and small helpers."""

from .merge import deep_extend_keep
from .scheduler import AsyncioScheduler, ManualScheduler, Scheduler

__all__ = [
    "AsyncioScheduler",
    "ManualScheduler",
    "Scheduler",
    "deep_extend_keep",
]
