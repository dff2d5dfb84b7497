"""Serve the demo application with uvicorn."""

from __future__ import annotations

import uvicorn

from fastapi_filter_pipeline.app import create_app
from fastapi_filter_pipeline.settings import PipelineSettings


def main() -> None:
    settings = PipelineSettings.from_env()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
