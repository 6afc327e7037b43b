# domain/graph.py
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from math import isfinite
from typing import NamedTuple

from flight_trace.domain.entities.network import Edge, Vertex


class VertexNotFound(KeyError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"no airport named {self.name!r}"


class DuplicateVertexError(ValueError):
    pass


class Route(NamedTuple):
    from_index: int
    to_index: int
    time: float
    price: float


RouteLike = Route | Sequence[float] | Mapping[str, float]


@dataclass
class Graph:
    vertices: list[Vertex] = field(default_factory=list)
    # first vertex registered under a name wins, same as a linear scan
    _by_name: dict[str, Vertex] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self):
        for v in self.vertices:
            self._by_name.setdefault(v.name, v)

    def add_vertex(self, v: Vertex) -> None:
        self.vertices.append(v)
        self._by_name.setdefault(v.name, v)

    def add_undirected_edge(self, a: Vertex, b: Vertex, time: float, price: float) -> None:
        a.add_edge(Edge(a, b, time, price))
        b.add_edge(Edge(b, a, time, price))

    def find_vertex(self, name: str) -> Vertex | None:
        return self._by_name.get(name)

    def get_vertex_by_name(self, name: str) -> Vertex:
        v = self.find_vertex(name)
        if v is None:
            raise VertexNotFound(name)
        return v

    def edge_between(self, a: Vertex, b: Vertex) -> Edge | None:
        return next((e for e in a.edges if e.dst is b), None)

    def links(self) -> Iterator[Edge]:
        """Each undirected connection once, in build order."""
        seen: set[tuple[int, int]] = set()
        for v in self.vertices:
            for e in v.edges:
                key = (min(e.src.id, e.dst.id), max(e.src.id, e.dst.id))
                if key not in seen:
                    seen.add(key)
                    yield e

    def names(self) -> list[str]:
        return [v.name for v in self.vertices]

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name


def _to_route(r: RouteLike) -> Route:
    if isinstance(r, Route):
        return r
    if isinstance(r, Mapping):
        return Route(
            int(r["from_index"] if "from_index" in r else r["from"]),
            int(r["to_index"] if "to_index" in r else r["to"]),
            r["time"],
            r["price"],
        )
    a, b, t, p = r
    return Route(int(a), int(b), t, p)


def _weight(v) -> float:
    # ints stay ints
    if isinstance(v, (int, float)):
        return v
    try:
        return float(v)
    except (TypeError, ValueError):
        raise ValueError(f"weight must be a number, got {v!r}") from None


def build_graph(names: Iterable[str], routes: Iterable[RouteLike]) -> Graph:
    g = Graph()
    for i, name in enumerate(names):
        if name in g:
            raise DuplicateVertexError(f"duplicate airport name {name!r} at index {i}")
        g.add_vertex(Vertex(name, i))

    n = len(g)
    for k, raw in enumerate(routes):
        r = _to_route(raw)
        try:
            r = r._replace(time=_weight(r.time), price=_weight(r.price))
        except ValueError as exc:
            raise ValueError(f"route {k}: {exc}") from None
        for idx in (r.from_index, r.to_index):
            if not 0 <= idx < n:
                raise ValueError(f"route {k}: airport index {idx} out of range [0, {n})")
        if not all(isfinite(w) and w >= 0 for w in (r.time, r.price)):
            raise ValueError(
                f"route {k}: weights must be finite and >= 0, got time={r.time} price={r.price}"
            )
        g.add_undirected_edge(g.vertices[r.from_index], g.vertices[r.to_index], r.time, r.price)
    return g
