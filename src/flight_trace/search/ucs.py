# search/ucs.py
from operator import attrgetter

from flight_trace.domain.entities.network import Vertex, WeightField
from flight_trace.domain.entities.waypoint import Waypoint
from flight_trace.search.hooks import SearchHooks
from flight_trace.search.trace import SearchResult, StepKind, Trace, fmt_cost

_by_cost = attrgetter("cost")


def ucs_with_steps(
    start: Vertex,
    destination: Vertex,
    weight: WeightField | str = WeightField.PRICE,
    *,
    hooks: SearchHooks | None = None,
) -> SearchResult:
    """Cheapest-path search over the selected edge weight (time or price).

    A vertex may sit in the frontier several times through different
    parents. Only its first pop is acted on; later, costlier copies are
    dropped when they come up (lazy deletion). Weights must be >= 0.
    """
    weight = WeightField.parse(weight)
    algorithm = f"ucs:{weight.value}"
    trace = Trace(hooks)
    frontier: list[Waypoint] = [Waypoint(start, None, 0)]
    visited: set[str] = set()

    trace.emit(
        StepKind.START,
        f"Starting UCS ({weight.value}) from {start.name}",
        frontier=frontier,
        visited=visited,
    )

    while frontier:
        # stable sort: equal costs keep push order
        frontier.sort(key=_by_cost)
        current = frontier.pop(0)
        v = current.vertex
        if v.name in visited:
            continue
        visited.add(v.name)

        trace.emit(
            StepKind.VISIT,
            f"Visiting {v.name} (cost: {fmt_cost(current.cost)})",
            current=v,
            frontier=frontier,
            visited=visited,
            exploring={v.name},
            current_cost=current.cost,
        )

        if v is destination:
            trace.emit(
                StepKind.FOUND,
                f"Found optimal path to {destination.name}! Total cost: {fmt_cost(current.cost)}",
                current=v,
                frontier=frontier,
                visited=visited,
                found=current,
                current_cost=current.cost,
            )
            return trace.finish(algorithm, current)

        added: list[str] = []
        for edge in v.edges:
            nb = edge.dst
            if nb.name in visited:
                continue
            child = Waypoint(nb, current, current.cost + weight.weight(edge))
            frontier.append(child)
            added.append(f"{nb.name}({fmt_cost(child.cost)})")

        if added:
            trace.emit(
                StepKind.EXPAND,
                f"Added to queue: {', '.join(added)}",
                current=v,
                frontier=frontier,
                visited=visited,
            )

    trace.emit(StepKind.EXHAUSTED, "No path found", visited=visited)
    return trace.finish(algorithm, None)
