"""ActionLogging — logs the start and end of every filtered handler."""

from __future__ import annotations

import logging

from fastapi_filter_pipeline.context import FilterContext
from fastapi_filter_pipeline.hooks import PipelineHook


class ActionLogging(PipelineHook):
    """Emits one INFO entry when a request enters the pipeline and one when it leaves.

    Both entries are written whether the request was allowed or short-circuited.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    async def on_pipeline_start(self, ctx: FilterContext) -> None:
        self._logger.info("Action '%s' is starting.", ctx.handler_name)

    async def on_pipeline_end(self, ctx: FilterContext) -> None:
        self._logger.info("Action '%s' has completed.", ctx.handler_name)
