"""FilterContext — per-request state container with the short-circuit result slot."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from starlette.requests import Request
from starlette.responses import Response

if TYPE_CHECKING:
    from fastapi_filter_pipeline.trace import FilterTrace


@dataclass
class FilterContext:
    """Mutable per-request context handed to every filter.

    Setting ``result`` terminates the pipeline: remaining filters and the
    endpoint handler are skipped and the result is returned to the client.
    """

    request: Request
    handler_name: str
    result: Response | None = None
    state: dict[str, Any] = field(default_factory=dict)
    trace: FilterTrace | None = None

    @property
    def short_circuited(self) -> bool:
        return self.result is not None
