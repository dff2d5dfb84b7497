"""
Basic usage example of fastapi-filter-pipeline.

Demonstrates:
- Writing sync and async authorization filters
- Registering filters globally, per router and per endpoint
- Short-circuiting a request by setting ctx.result
- Logging the start and end of every filtered handler
"""

import logging

from fastapi import Depends, FastAPI
from starlette.responses import PlainTextResponse

from fastapi_filter_pipeline import (
    AccessDenied,
    ActionLogging,
    AsyncAuthorizationFilter,
    AuthorizationFilter,
    FilterContext,
    FilterPipeline,
    ServiceRegistry,
    TypeFilter,
    forbidden_result,
    get_filter_context,
    use_filters,
)

logging.basicConfig(level=logging.INFO)


class RequireRole(AsyncAuthorizationFilter):
    """Denies requests whose X-Role header does not match the configured role."""

    def __init__(self, role: str, logger: logging.Logger) -> None:
        self.role = role
        self.logger = logger

    async def on_authorization(self, ctx: FilterContext) -> None:
        if ctx.request.headers.get("X-Role") != self.role:
            self.logger.info("Missing role %s for %s", self.role, ctx.handler_name)
            ctx.result = forbidden_result()


class BlockBots(AuthorizationFilter):
    """Raising AccessDenied is equivalent to setting the 403 result."""

    def on_authorization(self, ctx: FilterContext) -> None:
        if "bot" in ctx.request.headers.get("User-Agent", "").lower():
            raise AccessDenied()


services = ServiceRegistry().add_singleton(
    logging.Logger, logging.getLogger("example.filters")
)
pipeline = FilterPipeline(BlockBots(), services=services).add_hook(ActionLogging())
router = pipeline.router(prefix="/api")


@router.get("/public")
async def public_endpoint() -> PlainTextResponse:
    """Only the global BlockBots filter runs here."""
    return PlainTextResponse("Hello, World!")


@router.get("/admin")
@use_filters(TypeFilter(RequireRole, "admin", dependencies={"logger": logging.Logger}))
async def admin_endpoint(
    ctx: FilterContext = Depends(get_filter_context),
) -> PlainTextResponse:
    """Runs BlockBots, then RequireRole("admin")."""
    return PlainTextResponse(f"Access Granted to {ctx.handler_name}")


app = FastAPI(title="Basic Filter Pipeline Example")
app.include_router(router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

    # Test with:
    # curl -i http://localhost:8000/api/public
    # curl -i -A "evilbot" http://localhost:8000/api/public
    # curl -i http://localhost:8000/api/admin
    # curl -i -H "X-Role: admin" http://localhost:8000/api/admin
