"""OpenAPI enrichment — collects response documentation from chain filters."""

from __future__ import annotations

import copy
from typing import Any

from fastapi_filter_pipeline.chain import ResolvedChain


def collect_openapi_metadata(resolved: ResolvedChain) -> dict[str, Any]:
    """Collect and merge OpenAPI metadata from all filters of a resolved chain."""
    responses: dict[str, Any] = {}
    names: list[str] = []

    for factory in resolved.filters:
        names.append(factory.name)
        spec = factory.openapi_spec()
        if spec is None:
            continue
        if "responses" in spec:
            responses.update(spec["responses"])

    result: dict[str, Any] = {}
    if responses:
        result["responses"] = responses
    if names:
        result["x-filters"] = names
    return result


def apply_openapi_metadata(route: Any, metadata: dict[str, Any]) -> None:
    """Inject collected metadata into a FastAPI ``APIRoute``."""
    if "responses" in metadata:
        existing = route.responses or {}
        for code, resp in metadata["responses"].items():
            existing.setdefault(int(code), copy.deepcopy(resp))
        route.responses = existing

    for key, value in metadata.items():
        if key.startswith("x-"):
            route.openapi_extra = route.openapi_extra or {}
            route.openapi_extra[key] = value
