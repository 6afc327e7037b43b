# flight_trace/app/playback.py
import time
from collections.abc import Callable, Iterator, Sequence
from enum import Enum

from flight_trace.search.trace import Snapshot


class NodeStatus(Enum):
    EXPLORING = "exploring"
    VISITED = "visited"
    QUEUED = "queued"
    UNVISITED = "unvisited"


def node_status(snap: Snapshot | None, name: str) -> NodeStatus:
    # precedence: exploring > visited > queued
    if snap is None:
        return NodeStatus.UNVISITED
    if name in snap.exploring:
        return NodeStatus.EXPLORING
    if name in snap.visited:
        return NodeStatus.VISITED
    if snap.in_frontier(name):
        return NodeStatus.QUEUED
    return NodeStatus.UNVISITED


def path_links(snap: Snapshot | None) -> list[tuple[str, str]]:
    if snap is None or snap.found is None:
        return []
    names = snap.found.names()
    return list(zip(names, names[1:]))


class TracePlayer:
    """
    Cursor over a finished trace. The trace is fully materialized, so the
    cursor can move in either direction or jump anywhere.
    """

    def __init__(self, steps: Sequence[Snapshot]):
        if not steps:
            raise ValueError("cannot play an empty trace")
        self._steps = tuple(steps)
        self._i = 0

    def __len__(self) -> int:
        return len(self._steps)

    @property
    def index(self) -> int:
        return self._i

    @property
    def current(self) -> Snapshot:
        return self._steps[self._i]

    @property
    def at_start(self) -> bool:
        return self._i == 0

    @property
    def at_end(self) -> bool:
        return self._i == len(self._steps) - 1

    def step_forward(self) -> Snapshot:
        self._i = min(self._i + 1, len(self._steps) - 1)
        return self.current

    def step_back(self) -> Snapshot:
        self._i = max(self._i - 1, 0)
        return self.current

    def jump(self, i: int) -> Snapshot:
        n = len(self._steps)
        if not -n <= i < n:
            raise IndexError(f"step {i} out of range for a trace of {n}")
        self._i = i % n
        return self.current

    def reset(self) -> Snapshot:
        return self.jump(0)

    def play(
        self, interval_s: float = 0.0, *, sleep: Callable[[float], None] = time.sleep
    ) -> Iterator[Snapshot]:
        """Yield from the cursor to the last step, pausing between steps."""
        yield self.current
        while not self.at_end:
            if interval_s > 0:
                sleep(interval_s)
            yield self.step_forward()
