# domain/metrics.py
from dataclasses import dataclass

from flight_trace.domain.entities.network import Vertex
from flight_trace.domain.entities.waypoint import Waypoint

PATH_SEP = " → "


@dataclass(frozen=True)
class PathMetrics:
    path: tuple[Vertex, ...]
    path_string: str
    time: float
    price: float
    stops: int  # intermediate airports only; a direct flight has 0

    def to_dict(self) -> dict:
        return {
            "path": [v.name for v in self.path],
            "path_string": self.path_string,
            "time": self.time,
            "price": self.price,
            "stops": self.stops,
        }


def path_metrics(waypoint: Waypoint) -> PathMetrics:
    if waypoint is None:
        raise ValueError("path_metrics needs a found waypoint, got None")
    path = waypoint.get_path()
    time = price = 0
    for a, b in zip(path, path[1:]):
        edge = next((e for e in a.edges if e.dst is b), None)
        if edge:
            time += edge.time
            price += edge.price
    return PathMetrics(
        path=tuple(path),
        path_string=PATH_SEP.join(v.name for v in path),
        time=time,
        price=price,
        # start == destination would give -1
        stops=max(len(path) - 2, 0),
    )
