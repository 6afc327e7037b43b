# domain/entities/network.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


# Vertices and edges compare by identity: edges point back at vertices,
# so value equality would recurse through the whole network.
@dataclass(eq=False)
class Vertex:
    name: str
    id: int  # build-order index, only used for render position lookup
    edges: list[Edge] = field(default_factory=list)

    def add_edge(self, edge: Edge) -> None:
        self.edges.append(edge)

    def __repr__(self) -> str:
        return f"Vertex({self.name!r}, id={self.id}, degree={len(self.edges)})"


@dataclass(eq=False)
class Edge:
    src: Vertex
    dst: Vertex
    time: float  # non-negative
    price: float  # non-negative

    def __repr__(self) -> str:
        return f"Edge({self.src.name!r} -> {self.dst.name!r}, time={self.time}, price={self.price})"


class WeightField(Enum):
    TIME = "time"
    PRICE = "price"

    @classmethod
    def parse(cls, value: WeightField | str | None) -> WeightField:
        """Only "time" selects TIME; anything else falls back to PRICE."""
        if isinstance(value, WeightField):
            return value
        return cls.TIME if value == cls.TIME.value else cls.PRICE

    def weight(self, edge: Edge) -> float:
        return edge.time if self is WeightField.TIME else edge.price
