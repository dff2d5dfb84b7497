"""Access policies deciding whether a request may reach its handler."""

from __future__ import annotations

import random
from typing import Protocol, runtime_checkable

from starlette.responses import JSONResponse

from fastapi_filter_pipeline.context import FilterContext
from fastapi_filter_pipeline.exceptions import DENIAL_MESSAGE


@runtime_checkable
class AccessPolicy(Protocol):
    """Pluggable pass/fail decision for authorization filters."""

    def is_allowed(self, ctx: FilterContext) -> bool: ...


class RandomAccessPolicy:
    """Placeholder policy that ignores the request and rolls a three-sided die.

    Rolls of 0 and 2 deny, 1 allows. This carries no authorization meaning.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def is_allowed(self, ctx: FilterContext) -> bool:
        return self._rng.randrange(3) % 2 != 0


class StaticAccessPolicy:
    """Always returns the configured outcome."""

    def __init__(self, allowed: bool) -> None:
        self.allowed = allowed

    def is_allowed(self, ctx: FilterContext) -> bool:
        return self.allowed


def error_result(status_code: int, message: str) -> JSONResponse:
    """Build the ``{"statusCode", "message"}`` body used for every short-circuit."""
    return JSONResponse(
        {"statusCode": status_code, "message": message}, status_code=status_code
    )


def forbidden_result() -> JSONResponse:
    return error_result(403, DENIAL_MESSAGE)


def apply_policy(ctx: FilterContext, policy: AccessPolicy) -> None:
    """Short-circuit ``ctx`` with the 403 denial unless ``policy`` allows it."""
    if not policy.is_allowed(ctx):
        ctx.result = forbidden_result()
