"""
Step-by-step search traces.

A search emits one `Snapshot` per decision point. Snapshots own copies of
the frontier and the visited/exploring sets, so a trace can be replayed,
indexed at random, or serialized after the search has moved on.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from flight_trace.domain.entities.network import Vertex
from flight_trace.domain.entities.waypoint import Waypoint
from flight_trace.domain.metrics import PathMetrics, path_metrics
from flight_trace.search.hooks import NoopHooks, SearchHooks


class StepKind(Enum):
    START = "start"
    VISIT = "visit"
    EXPAND = "expand"
    FOUND = "found"
    EXHAUSTED = "exhausted"


TERMINAL = frozenset({StepKind.FOUND, StepKind.EXHAUSTED})


def fmt_cost(c: float) -> str:
    if isinstance(c, float):
        return str(int(c)) if c.is_integer() else str(round(c, 6))
    return str(c)


@dataclass(frozen=True, eq=False)
class Snapshot:
    kind: StepKind
    current: Vertex | None
    frontier: tuple[Waypoint, ...]
    visited: frozenset[str]
    exploring: frozenset[str]
    description: str
    found: Waypoint | None = None
    current_cost: float | None = None  # UCS only

    @property
    def is_terminal(self) -> bool:
        return self.kind in TERMINAL

    def in_frontier(self, name: str) -> bool:
        return any(wp.vertex.name == name for wp in self.frontier)

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "current": self.current.name if self.current else None,
            "frontier": [{"airport": wp.vertex.name, "cost": wp.cost} for wp in self.frontier],
            "visited": sorted(self.visited),
            "exploring": sorted(self.exploring),
            "found": self.found.names() if self.found else None,
            "current_cost": self.current_cost,
            "description": self.description,
        }


@dataclass(frozen=True)
class SearchResult:
    algorithm: str
    steps: tuple[Snapshot, ...]
    result: Waypoint | None

    @property
    def found(self) -> bool:
        return self.result is not None

    @property
    def final(self) -> Snapshot:
        return self.steps[-1]

    @property
    def path(self) -> list[str]:
        return self.result.names() if self.result else []

    @property
    def cost(self) -> float | None:
        return self.result.cost if self.result else None

    def metrics(self) -> PathMetrics | None:
        return path_metrics(self.result) if self.result else None

    def __len__(self) -> int:
        return len(self.steps)

    def __getitem__(self, i: int) -> Snapshot:
        return self.steps[i]

    def __iter__(self) -> Iterator[Snapshot]:
        return iter(self.steps)


class Trace:
    """Collects snapshots for one run and reports each to the hooks."""

    def __init__(self, hooks: SearchHooks | None = None):
        self._hooks = hooks or NoopHooks()
        self._steps: list[Snapshot] = []

    def __len__(self) -> int:
        return len(self._steps)

    def emit(
        self,
        kind: StepKind,
        description: str,
        *,
        current: Vertex | None = None,
        frontier: Iterable[Waypoint] = (),
        visited: Iterable[str] = (),
        exploring: Iterable[str] = (),
        found: Waypoint | None = None,
        current_cost: float | None = None,
    ) -> Snapshot:
        snap = Snapshot(
            kind=kind,
            current=current,
            frontier=tuple(frontier),
            visited=frozenset(visited),
            exploring=frozenset(exploring),
            description=description,
            found=found,
            current_cost=current_cost,
        )
        self._hooks.step(snap, seq=len(self._steps))
        self._steps.append(snap)
        return snap

    def finish(self, algorithm: str, result: Waypoint | None) -> SearchResult:
        return SearchResult(algorithm, tuple(self._steps), result)
