# tests/search/test_engine.py
import pytest

from flight_trace.domain.entities.network import WeightField
from flight_trace.domain.graph import VertexNotFound
from flight_trace.search.engine import ModeSearcher, SearchMode, search
from flight_trace.search.hooks import NoopHooks


class LifecycleHooks(NoopHooks):
    def __init__(self):
        self.calls = []

    def run_start(self, **kw):
        self.calls.append(("run_start", kw))

    def run_end(self, **kw):
        self.calls.append(("run_end", kw))

    def error(self, **kw):
        self.calls.append(("error", kw))


def test_search_dispatches_by_mode(shortcut):
    assert search(shortcut, "A", "D", SearchMode.BFS).path == ["A", "D"]
    assert search(shortcut, "A", "D", "ucs", "price").path == ["A", "B", "D"]
    assert search(shortcut, "A", "D", "UCS", WeightField.TIME).path == ["A", "D"]


def test_weight_field_is_ignored_for_bfs(diamond):
    assert search(diamond, "A", "D", "bfs", "time").algorithm == "bfs"


def test_default_ucs_weight_is_price(diamond):
    assert search(diamond, "A", "D", "ucs").algorithm == "ucs:price"


def test_unknown_mode_is_rejected(diamond):
    with pytest.raises(ValueError, match="Unknown search mode"):
        search(diamond, "A", "D", "dfs")


@pytest.mark.parametrize("start,dest", [("Nowhere", "D"), ("A", "Nowhere")])
def test_unknown_airport_raises_before_tracing(diamond, start, dest):
    hooks = LifecycleHooks()
    with pytest.raises(VertexNotFound):
        search(diamond, start, dest, "bfs", hooks=hooks)
    assert hooks.calls == [("error", {"reason": "vertex_not_found", "name": "Nowhere", "mode": "bfs"})]


def test_run_lifecycle_hooks(diamond):
    hooks = LifecycleHooks()
    res = search(diamond, "A", "D", "ucs", "time", hooks=hooks)
    (name0, start), (name1, end) = hooks.calls
    assert name0 == "run_start" and name1 == "run_end"
    assert start == {"algorithm": "ucs:time", "start": "A", "destination": "D"}
    assert end["found"] is True
    assert end["steps"] == len(res)
    assert end["path"] == ["A", "B", "C", "D"]
    assert end["cost"] == 3
    assert end["wall_ms"] >= 0


def test_mode_searcher_binds_settings(shortcut):
    run = ModeSearcher(SearchMode.UCS, WeightField.PRICE)
    assert run(shortcut, "A", "D").path == ["A", "B", "D"]
    assert ModeSearcher(SearchMode.BFS)(shortcut, "A", "D").path == ["A", "D"]
