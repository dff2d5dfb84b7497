"""FilterTrace and TraceEntry — debug execution recording."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal


@dataclass(frozen=True)
class TraceEntry:
    """Single filter execution record."""

    filter_name: str
    duration_ms: float
    outcome: Literal["PASSED", "SHORT_CIRCUITED", "FAILED"]
    reason: str | None = None


@dataclass
class FilterTrace:
    """Structured record of one request's pass through the pipeline."""

    entries: list[TraceEntry] = field(default_factory=list)
    total_duration_ms: float = 0.0
    outcome: Literal["OK", "SHORT_CIRCUITED", "ERROR"] = "OK"
    handler_executed: bool = False
