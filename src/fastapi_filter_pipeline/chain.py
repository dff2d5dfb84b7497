"""FilterChain — ordered container of filters resolved into an execution plan."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from fastapi_filter_pipeline.composition import ExcludeFilters
from fastapi_filter_pipeline.factories import FilterFactory, FilterInstance
from fastapi_filter_pipeline.filter import Filter

if TYPE_CHECKING:
    from fastapi_filter_pipeline.filter import AnyFilter
    from fastapi_filter_pipeline.hooks import PipelineHook

ChainItem = Union["AnyFilter", FilterFactory, "FilterChain", ExcludeFilters]


@dataclass(frozen=True)
class ResolvedChain:
    """Immutable, pre-computed execution plan."""

    filters: tuple[FilterFactory, ...]
    hooks: tuple[PipelineHook, ...] = ()
    debug: bool = False


class FilterChain:
    """Ordered container of filters, filter factories and nested chains.

    Filters run in registration order. Nested chains are flattened in place
    and contribute their hooks.
    """

    def __init__(self, *items: ChainItem, debug: bool = False) -> None:
        self._items: list[ChainItem] = list(items)
        self._hooks: list[PipelineHook] = []
        self._debug = debug
        self._resolved: ResolvedChain | None = None

    @property
    def debug(self) -> bool:
        return self._debug

    def add(self, *items: ChainItem) -> FilterChain:
        self._items.extend(items)
        self._resolved = None
        return self

    def add_hook(self, hook: PipelineHook) -> FilterChain:
        self._hooks.append(hook)
        self._resolved = None
        return self

    def resolve(self) -> ResolvedChain:
        if self._resolved is not None:
            return self._resolved

        factories: list[FilterFactory] = []
        hooks: list[PipelineHook] = []
        debug = self._flatten(self, factories, hooks)

        self._resolved = ResolvedChain(
            filters=tuple(factories),
            hooks=tuple(hooks),
            debug=debug,
        )
        return self._resolved

    @staticmethod
    def _flatten(
        chain: FilterChain,
        out: list[FilterFactory],
        hooks: list[PipelineHook],
    ) -> bool:
        debug = chain._debug
        hooks.extend(chain._hooks)
        for item in chain._items:
            if isinstance(item, FilterChain):
                debug = FilterChain._flatten(item, out, hooks) or debug
            elif isinstance(item, FilterFactory):
                out.append(item)
            elif isinstance(item, Filter):
                out.append(FilterInstance(item))
            elif isinstance(item, ExcludeFilters):
                out[:] = [f for f in out if not item.matches(f.filter_type)]
            else:
                raise TypeError(f"Cannot add {type(item).__name__} to a FilterChain")
        return debug
