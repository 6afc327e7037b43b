# tests/search/test_ucs.py
from flight_trace.domain.entities.network import WeightField
from flight_trace.domain.graph import Route, build_graph
from flight_trace.search.bfs import bfs_with_steps
from flight_trace.search.trace import StepKind
from flight_trace.search.ucs import ucs_with_steps


def test_ucs_price_trace_on_diamond(diamond):
    a, _, _, d = diamond.vertices
    res = ucs_with_steps(a, d, WeightField.PRICE)

    assert [s.description for s in res] == [
        "Starting UCS (price) from A",
        "Visiting A (cost: 0)",
        "Added to queue: B(5), C(1)",
        "Visiting C (cost: 1)",
        "Added to queue: B(6), D(2)",
        "Visiting D (cost: 2)",
        "Found optimal path to D! Total cost: 2",
    ]
    assert res.path == ["A", "C", "D"]
    assert res.cost == 2
    assert res.algorithm == "ucs:price"

    start = res[0]
    assert start.visited == set()
    assert [wp.vertex.name for wp in start.frontier] == ["A"]

    visit_c = res[3]
    assert visit_c.current_cost == 1
    assert visit_c.visited == {"A", "C"}
    assert visit_c.exploring == {"C"}
    assert [(wp.vertex.name, wp.cost) for wp in visit_c.frontier] == [("B", 5)]

    found = res.final
    assert found.kind is StepKind.FOUND
    assert found.current_cost == 2
    assert [(wp.vertex.name, wp.cost) for wp in found.frontier] == [("B", 5), ("B", 6)]


def test_ucs_time_takes_more_hops_than_bfs(diamond):
    a, _, _, d = diamond.vertices
    res = ucs_with_steps(a, d, "time")
    assert res.path == ["A", "B", "C", "D"]
    assert res.cost == 3
    assert bfs_with_steps(a, d).path == ["A", "C", "D"]


def test_ucs_price_diverges_from_bfs(shortcut):
    a, _, d = shortcut.vertices
    bfs = bfs_with_steps(a, d)
    ucs = ucs_with_steps(a, d, "price")
    assert bfs.path == ["A", "D"]
    assert ucs.path == ["A", "B", "D"]
    assert ucs.metrics().price < bfs.metrics().price
    assert len(ucs.path) > len(bfs.path)


def test_unknown_weight_name_falls_back_to_price(shortcut):
    a, _, d = shortcut.vertices
    assert ucs_with_steps(a, d, "legroom").algorithm == "ucs:price"


def test_stale_frontier_entries_are_skipped_silently():
    # S-A 1, S-B 4, A-B 1, B-T 10: B is queued twice, at 4 and at 2
    g = build_graph(
        ["S", "A", "B", "T"],
        [Route(0, 1, 0, 1), Route(0, 2, 0, 4), Route(1, 2, 0, 1), Route(2, 3, 0, 10)],
    )
    s, _, _, t = g.vertices
    res = ucs_with_steps(s, t)

    visits = [(x.current.name, x.current_cost) for x in res if x.kind is StepKind.VISIT]
    assert visits == [("S", 0), ("A", 1), ("B", 2), ("T", 12)]
    assert res.path == ["S", "A", "B", "T"]
    assert res.cost == 12


def test_ucs_real_valued_weights():
    g = build_graph(
        ["A", "B", "C"],
        [Route(0, 1, 0.5, 0.25), Route(1, 2, 0.5, 0.25), Route(0, 2, 1.5, 0.75)],
    )
    a, _, c = g.vertices
    res = ucs_with_steps(a, c, "price")
    assert res.path == ["A", "B", "C"]
    assert res.cost == 0.5
    assert res.final.description == "Found optimal path to C! Total cost: 0.5"


def test_ucs_unreachable_destination(with_island):
    a, e = with_island.vertices[0], with_island.vertices[3]
    res = ucs_with_steps(a, e)
    assert res.result is None
    assert res.final.kind is StepKind.EXHAUSTED
    assert res.final.description == "No path found"
    assert res.final.frontier == ()
    assert res.final.visited == {"A", "B", "C"}


def test_ucs_start_equals_destination(diamond):
    a = diamond.vertices[0]
    res = ucs_with_steps(a, a)
    assert [s.kind for s in res] == [StepKind.START, StepKind.VISIT, StepKind.FOUND]
    assert res.cost == 0
