# search/hooks.py
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from flight_trace.search.trace import Snapshot


class SearchHooks(Protocol):
    def run_start(self, *, algorithm, start, destination): ...
    def step(self, snap: Snapshot, *, seq: int): ...
    def run_end(self, *, algorithm, found, steps, path, cost, wall_ms): ...
    def error(self, *, reason: str, **kw): ...


class NoopHooks:
    def run_start(self, **_):
        pass

    def step(self, *_, **__):
        pass

    def run_end(self, **_):
        pass

    def error(self, *_, **__):
        pass
