from typing import Protocol, runtime_checkable

from flight_trace.domain.graph import Graph
from flight_trace.search.hooks import SearchHooks
from flight_trace.search.trace import SearchResult


@runtime_checkable
class Searcher(Protocol):
    """
    Responsibilities:
      • Resolve start/destination by airport name (VertexNotFound if unknown).
      • Run one search to completion and return the whole trace.
    The graph is only read, never mutated.
    """

    def __call__(
        self, graph: Graph, start: str, destination: str, hooks: SearchHooks | None = None
    ) -> SearchResult: ...
