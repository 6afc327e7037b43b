# flight_trace/app/build.py
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from flight_trace.app.protocols import Searcher
from flight_trace.config.models import ScenarioModel
from flight_trace.domain.graph import Graph
from flight_trace.io.recorder import Recorder, Sink
from flight_trace.io.search_logging import SearchLogging  # JSON logs
from flight_trace.runtime.registries import make_search, resolve_network
from flight_trace.search.hooks import NoopHooks, SearchHooks
from flight_trace.search.trace import SearchResult


@dataclass
class App:
    model: ScenarioModel
    graph: Graph
    searcher: Searcher
    hooks: SearchHooks

    def run(self) -> SearchResult:
        return self.searcher(self.graph, self.model.start, self.model.destination, self.hooks)


def build(
    cfg: ScenarioModel | Mapping,
    *,
    use_logging: bool = True,
    sinks: Sequence[Sink] | None = None,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Network
    graph = resolve_network(model.network)

    # 2) Algorithm
    searcher = make_search(model.search)

    # 3) Hooks; snapshots are only recorded when sinks are given
    if use_logging:
        recorder = Recorder(*sinks) if sinks else None
        hooks = SearchLogging(
            run_id=model.run_id,
            recorder=recorder,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
    else:
        hooks = NoopHooks()

    return App(model, graph, searcher, hooks)
