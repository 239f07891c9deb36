"""Data models for dispatch results."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class HandlerRun:
    """Result of running one handler against an event."""

    name: str
    success: bool
    duration_seconds: float
    details: dict[str, Any]
    error: str | None = None


@dataclass
class DispatchResult:
    """Aggregate result of dispatching one event to every handler."""

    event_name: str
    started_at: datetime
    finished_at: datetime | None = None
    runs: list[HandlerRun] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return all(run.success for run in self.runs)
