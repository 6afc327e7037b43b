import random

import pytest

from flight_trace.domain.graph import Graph, Route, build_graph


@pytest.fixture
def diamond() -> Graph:
    # A-B t1/p5, B-C t1/p5, A-C t5/p1, C-D t1/p1
    return build_graph(
        ["A", "B", "C", "D"],
        [Route(0, 1, 1, 5), Route(1, 2, 1, 5), Route(0, 2, 5, 1), Route(2, 3, 1, 1)],
    )


@pytest.fixture
def shortcut() -> Graph:
    # direct A-D is one hop but pricey; A-B-D is cheaper by price
    return build_graph(
        ["A", "B", "D"],
        [Route(0, 2, 1, 10), Route(0, 1, 2, 1), Route(1, 2, 2, 1)],
    )


@pytest.fixture
def with_island() -> Graph:
    # E has no flights at all
    return build_graph(
        ["A", "B", "C", "E"],
        [Route(0, 1, 1, 1), Route(1, 2, 1, 1), Route(0, 2, 3, 3)],
    )


def random_graph(seed: int, n: int = 6, p: float = 0.45) -> Graph:
    rnd = random.Random(seed)
    names = [f"V{i}" for i in range(n)]
    routes = [
        Route(i, j, rnd.randint(0, 9), rnd.randint(0, 9))
        for i in range(n)
        for j in range(i + 1, n)
        if rnd.random() < p
    ]
    return build_graph(names, routes)


def all_simple_paths(graph: Graph, start: str, dest: str) -> list[list]:
    """Every cycle-free vertex path start..dest, by exhaustive DFS."""
    s, d = graph.get_vertex_by_name(start), graph.get_vertex_by_name(dest)
    out: list[list] = []

    def walk(v, path):
        if v is d:
            out.append(list(path))
            return
        for e in v.edges:
            if e.dst not in path:
                path.append(e.dst)
                walk(e.dst, path)
                path.pop()

    walk(s, [s])
    return out


@pytest.fixture
def make_random_graph():
    return random_graph


@pytest.fixture
def simple_paths():
    return all_simple_paths
