"""Chain composition — merge_chains() across scopes and ExcludeFilters."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastapi_filter_pipeline.chain import FilterChain


class ExcludeFilters:
    """Composition directive that drops filters registered by an outer scope.

    Matches on the filter class, subclasses included. Only filters added
    before the directive are removed.
    """

    def __init__(self, *filter_types: type) -> None:
        self.filter_types = filter_types

    def matches(self, filter_type: type) -> bool:
        return issubclass(filter_type, self.filter_types)


def merge_chains(*chains: FilterChain) -> FilterChain:
    """Combine scope chains, outermost first.

    Typically called with the global, controller and action chains. Filters
    keep their order (outer scopes first), hooks are concatenated and the
    merged chain is in debug mode if any input is.
    """
    from fastapi_filter_pipeline.chain import FilterChain

    return FilterChain(*chains, debug=any(chain.debug for chain in chains))
