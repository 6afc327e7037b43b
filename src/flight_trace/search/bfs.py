# search/bfs.py
from collections import deque

from flight_trace.domain.entities.network import Vertex
from flight_trace.domain.entities.waypoint import Waypoint
from flight_trace.search.hooks import SearchHooks
from flight_trace.search.trace import SearchResult, StepKind, Trace

ALGORITHM = "bfs"


def bfs_with_steps(
    start: Vertex, destination: Vertex, *, hooks: SearchHooks | None = None
) -> SearchResult:
    """Fewest-hops search. Edge weights are ignored; every hop costs 1.

    Vertices are marked visited when first discovered, so nothing is queued
    twice. The destination counts as reached when it is dequeued. Among
    equal-hop paths the one discovered first (edge insertion order) wins.
    """
    trace = Trace(hooks)
    queue: deque[Waypoint] = deque([Waypoint(start, None, 0)])
    visited: set[str] = {start.name}

    trace.emit(StepKind.START, f"Starting BFS from {start.name}", frontier=queue, visited=visited)

    while queue:
        current = queue.popleft()
        v = current.vertex
        trace.emit(
            StepKind.VISIT,
            f"Visiting {v.name}",
            current=v,
            frontier=queue,
            visited=visited,
            exploring={v.name},
        )

        if v is destination:
            trace.emit(
                StepKind.FOUND,
                f"Found destination: {destination.name}",
                current=v,
                frontier=queue,
                visited=visited,
                found=current,
            )
            return trace.finish(ALGORITHM, current)

        added: list[str] = []
        for edge in v.edges:
            nb = edge.dst
            if nb.name in visited:
                continue
            visited.add(nb.name)
            queue.append(Waypoint(nb, current, current.cost + 1))
            added.append(nb.name)

        # no snapshot for a dead end, it would show no progress
        if added:
            trace.emit(
                StepKind.EXPAND,
                f"Added {len(added)} neighbors to queue: {', '.join(added)}",
                current=v,
                frontier=queue,
                visited=visited,
            )

    trace.emit(
        StepKind.EXHAUSTED,
        f"No path found from {start.name} to {destination.name}",
        visited=visited,
    )
    return trace.finish(ALGORITHM, None)
