# domain/entities/waypoint.py
from __future__ import annotations

from dataclasses import dataclass

from flight_trace.domain.entities.network import Vertex


@dataclass(frozen=True, eq=False)
class Waypoint:
    vertex: Vertex
    parent: Waypoint | None = None
    cost: float = 0  # hops for BFS, summed edge weight for UCS

    def get_path(self) -> list[Vertex]:
        path: list[Vertex] = []
        node: Waypoint | None = self
        while node is not None:
            path.append(node.vertex)
            node = node.parent
        path.reverse()
        return path

    def names(self) -> list[str]:
        return [v.name for v in self.get_path()]

    def __repr__(self) -> str:
        return f"Waypoint({self.vertex.name!r}, cost={self.cost})"
