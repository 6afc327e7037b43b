# search/engine.py
import time
from dataclasses import dataclass
from enum import Enum

from flight_trace.domain.entities.network import WeightField
from flight_trace.domain.graph import Graph, VertexNotFound
from flight_trace.search.bfs import bfs_with_steps
from flight_trace.search.hooks import NoopHooks, SearchHooks
from flight_trace.search.trace import SearchResult
from flight_trace.search.ucs import ucs_with_steps


class SearchMode(Enum):
    BFS = "bfs"
    UCS = "ucs"

    @classmethod
    def parse(cls, value: "SearchMode | str") -> "SearchMode":
        if isinstance(value, SearchMode):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"Unknown search mode {value!r}") from None


def search(
    graph: Graph,
    start_name: str,
    dest_name: str,
    mode: SearchMode | str,
    weight_field: WeightField | str | None = None,
    *,
    hooks: SearchHooks | None = None,
) -> SearchResult:
    hooks = hooks or NoopHooks()
    mode = SearchMode.parse(mode)

    # reject bad selections before anything is traced
    try:
        start = graph.get_vertex_by_name(start_name)
        dest = graph.get_vertex_by_name(dest_name)
    except VertexNotFound as exc:
        hooks.error(reason="vertex_not_found", name=exc.name, mode=mode.value)
        raise

    weight = WeightField.parse(weight_field)
    algorithm = "bfs" if mode is SearchMode.BFS else f"ucs:{weight.value}"

    t0 = time.perf_counter()
    hooks.run_start(algorithm=algorithm, start=start.name, destination=dest.name)
    if mode is SearchMode.BFS:
        res = bfs_with_steps(start, dest, hooks=hooks)
    else:
        res = ucs_with_steps(start, dest, weight, hooks=hooks)
    hooks.run_end(
        algorithm=res.algorithm,
        found=res.found,
        steps=len(res),
        path=res.path,
        cost=res.cost,
        wall_ms=(time.perf_counter() - t0) * 1000,
    )
    return res


@dataclass(frozen=True)
class ModeSearcher:
    """A `search` call with the algorithm settings bound."""

    mode: SearchMode
    weight: WeightField = WeightField.PRICE

    def __call__(
        self, graph: Graph, start: str, destination: str, hooks: SearchHooks | None = None
    ) -> SearchResult:
        return search(graph, start, destination, self.mode, self.weight, hooks=hooks)
