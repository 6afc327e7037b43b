# runtime/registries.py
from collections.abc import Callable

from flight_trace.app.protocols import Searcher
from flight_trace.config.models import (
    NetworkByPath,
    NetworkInline,
    NetworkRef,
    SearchBfsModel,
    SearchUcsModel,
    SearchUnion,
)
from flight_trace.domain.entities.network import WeightField
from flight_trace.domain.graph import Graph, Route, build_graph
from flight_trace.io.inputs import load_network
from flight_trace.search.engine import ModeSearcher, SearchMode

SearchFactory = Callable[[SearchUnion], Searcher]

_search_registry: dict[str, SearchFactory] = {}


# ------------------- Search algorithms ---------------------------


def register_search(kind: str):
    def deco(fn: SearchFactory):
        _search_registry[kind] = fn
        return fn

    return deco


def make_search(cfg: SearchUnion) -> Searcher:
    try:
        factory = _search_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown search kind {cfg.kind!r}") from None
    return factory(cfg)


def search_kinds() -> list[str]:
    return sorted(_search_registry)


@register_search("bfs")
def _make_bfs(cfg: SearchBfsModel):
    return ModeSearcher(SearchMode.BFS)


@register_search("ucs")
def _make_ucs(cfg: SearchUcsModel):
    return ModeSearcher(SearchMode.UCS, WeightField.parse(cfg.weight))


# --------------------- Networks ---------------------


def resolve_network(ref: NetworkRef) -> Graph:
    if isinstance(ref, NetworkByPath):
        return load_network(ref.airports, ref.routes)
    if isinstance(ref, NetworkInline):
        routes = [Route(r.from_index, r.to_index, r.time, r.price) for r in ref.routes]
        return build_graph(ref.airports, routes)
    raise TypeError(ref)
